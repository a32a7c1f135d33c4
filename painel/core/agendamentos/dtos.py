"""
Data Transfer Objects (DTOs) do Domínio de Agendamentos.

Tipos de DTOs:
- Input DTOs: criação e atualização parcial
- AgendamentoOutputDTO: registro completo (resposta de criação)
- AgendamentoListItemDTO: campos de listagem
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from painel.core.usuarios.entities import UsuarioSnapshot
from painel.core.fornecedores.entities import FornecedorSnapshot

from .entities import AgendamentoEntity


def _iso(valor: Optional[datetime]) -> Optional[str]:
    return valor.isoformat() if valor else None


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CriarAgendamentoInputDTO:
    """
    DTO de entrada para criar agendamento.

    Snapshots de usuário e fornecedor são obrigatórios e
    confiados como recebidos.
    """

    nome: str
    preco: float
    descricao: str
    quantidade: int
    data_entrega: Optional[datetime]
    xml: str
    commits: str
    status: str
    usuario_criador: UsuarioSnapshot
    fornecedor: FornecedorSnapshot


@dataclass(frozen=True)
class AtualizarAgendamentoInputDTO:
    """DTO de entrada para atualização parcial."""

    agendamento_id: str
    nome: str
    preco: float
    descricao: str
    quantidade: int


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class AgendamentoOutputDTO:
    """DTO de saída completo com snapshots."""

    id: str
    nome: str
    descricao: str
    preco: float
    quantidade: int
    data_entrega: Optional[datetime]
    xml: str
    commits: str
    status: str
    criado_em: datetime
    atualizado_em: datetime
    usuario_criador: UsuarioSnapshot
    usuario_atualizador: UsuarioSnapshot
    fornecedor: FornecedorSnapshot
    usuario_id: str
    usuario_nome: str
    usuario_email: str

    @classmethod
    def from_entity(cls, entity: AgendamentoEntity) -> "AgendamentoOutputDTO":
        return cls(
            id=entity.id,
            nome=entity.nome,
            descricao=entity.descricao,
            preco=entity.preco,
            quantidade=entity.quantidade,
            data_entrega=entity.data_entrega,
            xml=entity.xml,
            commits=entity.commits,
            status=entity.status,
            criado_em=entity.criado_em,
            atualizado_em=entity.atualizado_em,
            usuario_criador=entity.usuario_criador,
            usuario_atualizador=entity.usuario_atualizador,
            fornecedor=entity.fornecedor,
            usuario_id=entity.usuario_id,
            usuario_nome=entity.usuario_nome,
            usuario_email=entity.usuario_email,
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "id": self.id,
            "name": self.nome,
            "description": self.descricao,
            "price": self.preco,
            "quantity": self.quantidade,
            "dataEntrega": _iso(self.data_entrega),
            "xml": self.xml,
            "commits": self.commits,
            "status": self.status,
            "createdAt": _iso(self.criado_em),
            "updatedAt": _iso(self.atualizado_em),
            "userCreated": self.usuario_criador.to_dict(),
            "userUpdated": self.usuario_atualizador.to_dict(),
            "fornecedor": self.fornecedor.to_dict(),
            "userId": self.usuario_id,
            "userName": self.usuario_nome,
            "userEmail": self.usuario_email,
        }

    def to_partial_dict(self) -> dict:
        """Formato da resposta de atualização."""
        return {
            "id": self.id,
            "name": self.nome,
            "price": self.preco,
            "description": self.descricao,
            "quantity": self.quantidade,
            "updatedAt": _iso(self.atualizado_em),
        }


@dataclass
class AgendamentoListItemDTO:
    """
    DTO otimizado para listagens.

    Contém apenas os campos exibidos em lista, sem XML nem snapshots.
    """

    id: str
    nome: str
    preco: float
    descricao: str
    quantidade: int
    status: str
    criado_em: datetime
    atualizado_em: datetime

    @classmethod
    def from_entity(cls, entity: AgendamentoEntity) -> "AgendamentoListItemDTO":
        return cls(
            id=entity.id,
            nome=entity.nome,
            preco=entity.preco,
            descricao=entity.descricao,
            quantidade=entity.quantidade,
            status=entity.status,
            criado_em=entity.criado_em,
            atualizado_em=entity.atualizado_em,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.nome,
            "price": self.preco,
            "description": self.descricao,
            "quantity": self.quantidade,
            "status": self.status,
            "createdAt": _iso(self.criado_em),
            "updatedAt": _iso(self.atualizado_em),
        }
