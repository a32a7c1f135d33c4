"""
Domínio de Agendamentos - Registros de compra/entrega.

- Entidades (AgendamentoEntity)
- DTOs (Input/Output/ListItem)
- Ports (AgendamentoRepository)
- Use Cases (Criar, Listar, Atualizar, Remover)

Características do Domínio:
- Usuário criador e fornecedor guardados como snapshots congelados
- Atualização parcial restrita a nome, preço, descrição e quantidade
"""

from .entities import AgendamentoEntity
from .dtos import (
    CriarAgendamentoInputDTO,
    AtualizarAgendamentoInputDTO,
    AgendamentoOutputDTO,
    AgendamentoListItemDTO,
)
from .ports import AgendamentoRepository, InMemoryAgendamentoRepository
from .use_cases import (
    CriarAgendamentoService,
    ListarAgendamentosService,
    AtualizarAgendamentoService,
    RemoverAgendamentoService,
)

__all__ = [
    # Entities
    "AgendamentoEntity",
    # DTOs
    "CriarAgendamentoInputDTO",
    "AtualizarAgendamentoInputDTO",
    "AgendamentoOutputDTO",
    "AgendamentoListItemDTO",
    # Ports
    "AgendamentoRepository",
    "InMemoryAgendamentoRepository",
    # Use Cases
    "CriarAgendamentoService",
    "ListarAgendamentosService",
    "AtualizarAgendamentoService",
    "RemoverAgendamentoService",
]
