"""
Entidades do Domínio de Agendamentos.

Um Agendamento é um registro de compra/entrega que liga um usuário
criador a um fornecedor. Ambos são guardados como snapshots
(cópias congeladas), nunca como referências vivas.

Regras Encapsuladas:
- usuario_criador e usuario_atualizador nascem iguais
- id/nome/email do criador são achatados em usuario_id,
  usuario_nome e usuario_email
- Atualização altera apenas nome, preço, descrição e quantidade
- status é uma string opaca, sem transições controladas
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
import uuid

from painel.core.usuarios.entities import UsuarioSnapshot
from painel.core.fornecedores.entities import FornecedorSnapshot


def _agora() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class AgendamentoEntity:
    """
    Entidade de Domínio: Agendamento.

    Attributes:
        id: Identificador único (UUID)
        nome: Nome do agendamento
        descricao: Descrição
        preco: Preço (>= 0)
        quantidade: Quantidade (>= 0)
        data_entrega: Data prevista de entrega
        xml: Conteúdo XML (nota fiscal) como recebido
        commits: Observações livres
        status: Status informado pelo chamador
        criado_em: Data/hora de criação
        atualizado_em: Data/hora da última atualização
        usuario_criador: Snapshot do usuário que criou
        usuario_atualizador: Snapshot do último usuário que atualizou
        fornecedor: Snapshot do fornecedor
        usuario_id, usuario_nome, usuario_email: Campos achatados do criador

    Example:
        agendamento = AgendamentoEntity.criar(
            nome="Compra de insumos",
            preco=150.0,
            descricao="Farinha e açúcar",
            quantidade=10,
            data_entrega=datetime(2026, 11, 1),
            xml="<nfe/>",
            commits="",
            status="pendente",
            usuario_criador=UsuarioSnapshot("u1", "Ana", "ana@x.com"),
            fornecedor=FornecedorSnapshot("s1", "ACME", "912345678"),
        )
        agendamento.usuario_id  # "u1"
    """

    usuario_criador: UsuarioSnapshot
    usuario_atualizador: UsuarioSnapshot
    fornecedor: FornecedorSnapshot
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    nome: str = ""
    descricao: str = ""
    preco: float = 0.0
    quantidade: int = 0
    data_entrega: Optional[datetime] = None
    xml: str = ""
    commits: str = ""
    status: str = ""
    criado_em: datetime = field(default_factory=_agora)
    atualizado_em: datetime = field(default_factory=_agora)
    usuario_id: str = ""
    usuario_nome: str = ""
    usuario_email: str = ""

    @classmethod
    def criar(
        cls,
        nome: str,
        preco: float,
        descricao: str,
        quantidade: int,
        data_entrega: Optional[datetime],
        xml: str,
        commits: str,
        status: str,
        usuario_criador: UsuarioSnapshot,
        fornecedor: FornecedorSnapshot,
    ) -> "AgendamentoEntity":
        """
        Factory method para criar agendamento.

        Os snapshots são confiados como recebidos: não há verificação
        de existência do usuário ou do fornecedor.
        """
        agora = _agora()
        return cls(
            nome=nome,
            preco=preco,
            descricao=descricao,
            quantidade=quantidade,
            data_entrega=data_entrega,
            xml=xml,
            commits=commits,
            status=status,
            criado_em=agora,
            atualizado_em=agora,
            usuario_criador=usuario_criador,
            usuario_atualizador=usuario_criador,
            fornecedor=fornecedor,
            usuario_id=usuario_criador.id,
            usuario_nome=usuario_criador.nome,
            usuario_email=usuario_criador.email,
        )

    def atualizar(self, nome: str, preco: float, descricao: str, quantidade: int) -> None:
        """Atualização parcial: demais campos permanecem intactos."""
        self.nome = nome
        self.preco = preco
        self.descricao = descricao
        self.quantidade = quantidade
        self.atualizado_em = _agora()

    def __repr__(self) -> str:
        return (
            f"AgendamentoEntity("
            f"id={self.id[:8]}..., "
            f"nome='{self.nome[:20]}', "
            f"status={self.status}"
            f")"
        )
