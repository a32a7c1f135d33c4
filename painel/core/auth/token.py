"""
Codificação do token de identidade.

Formato:
    base64("{cpf}:{email}:{usuario_id}")

O token não é uma credencial criptográfica: não há chave secreta
nem expiração. A verificação reconstrói os três campos e compara
com os valores informados, sem normalização.
"""

import base64
import binascii
from typing import Optional, Tuple

SEPARADOR = ":"


def gerar_token(email: str, usuario_id: str, cpf: str) -> str:
    """
    Gera o token de autenticação do usuário.

    Args:
        email: Email do usuário
        usuario_id: ID único do usuário
        cpf: CPF do usuário

    Returns:
        Token em base64
    """
    dados = f"{cpf}{SEPARADOR}{email}{SEPARADOR}{usuario_id}"
    return base64.b64encode(dados.encode("utf-8")).decode("ascii")


def decodificar_token(token: str) -> Optional[Tuple[str, str, str]]:
    """
    Decodifica o token em (cpf, email, usuario_id).

    Returns:
        Tupla com os três campos, ou None se o token for malformado
        (alfabeto inválido, payload não UTF-8, número de campos != 3).
    """
    if not isinstance(token, str):
        return None
    try:
        dados = base64.b64decode(token.encode("ascii"), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeError, ValueError):
        return None

    partes = dados.split(SEPARADOR)
    if len(partes) != 3:
        return None
    return partes[0], partes[1], partes[2]


def validar_token(token: str, email: str, usuario_id: str, cpf: str) -> bool:
    """
    Valida o token contra os dados informados.

    Args:
        token: Token recebido
        email: Email esperado
        usuario_id: ID esperado
        cpf: CPF esperado

    Returns:
        True se os três campos coincidirem exatamente
    """
    campos = decodificar_token(token)
    if campos is None:
        return False
    return campos == (cpf, email, usuario_id)
