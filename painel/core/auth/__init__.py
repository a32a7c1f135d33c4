"""
Token de identidade do usuário.

Codificação reversível de (cpf, email, id) emitida na criação
do usuário e verificada por reconstrução.
"""

from .token import gerar_token, validar_token, decodificar_token

__all__ = [
    "gerar_token",
    "validar_token",
    "decodificar_token",
]
