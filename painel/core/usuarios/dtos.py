"""
Data Transfer Objects (DTOs) do Domínio de Usuários.

- Input DTOs: dados já validados pelo colaborador de validação
- Output DTOs: formatam a resposta de cada operação

Os nomes das chaves em `to_dict` seguem o formato do contrato
externo (name, email, createdAt...).
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .entities import UsuarioEntity


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CriarUsuarioInputDTO:
    """
    DTO de entrada para criar usuário.

    Attributes:
        nome: Nome do usuário
        email: Email do usuário
        senha: Senha (armazenada como recebida)
        cpf: CPF com 11 dígitos
    """

    nome: str
    email: str
    senha: str
    cpf: str


@dataclass(frozen=True)
class AtualizarUsuarioInputDTO:
    """
    DTO de entrada para atualizar usuário.

    Attributes:
        usuario_id: ID do usuário
        nome: Novo nome
        email: Novo email
        senha: Nova senha
        atualizado_em: Momento da alteração (default: agora)
    """

    usuario_id: str
    nome: str
    email: str
    senha: str
    atualizado_em: Optional[datetime] = None


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class UsuarioOutputDTO:
    """
    DTO de saída completo, incluindo o token emitido.

    A senha nunca sai do Core.
    """

    id: str
    nome: str
    email: str
    cpf: str
    token: str
    criado_em: datetime
    atualizado_em: datetime

    @classmethod
    def from_entity(cls, entity: UsuarioEntity) -> "UsuarioOutputDTO":
        return cls(
            id=entity.id,
            nome=entity.nome,
            email=entity.email,
            cpf=entity.cpf,
            token=entity.token,
            criado_em=entity.criado_em,
            atualizado_em=entity.atualizado_em,
        )

    def to_dict(self) -> dict:
        """Formato da resposta de criação."""
        return {
            "id": self.id,
            "name": self.nome,
            "email": self.email,
            "token": self.token,
        }

    def to_public_dict(self) -> dict:
        """Formato de listagem e atualização (sem token)."""
        return {
            "id": self.id,
            "name": self.nome,
            "email": self.email,
        }
