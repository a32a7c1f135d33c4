"""
Configurações globais do Pytest para o Painel de Agendamentos.

Este arquivo é carregado automaticamente pelo pytest e
fornece fixtures compartilhadas pelos testes do Core.
"""

from datetime import datetime, timezone

import pytest

from painel.core.shared.unit_of_work import LockingUnitOfWork
from painel.core.usuarios.entities import UsuarioSnapshot
from painel.core.usuarios.ports import InMemoryUsuarioRepository
from painel.core.fornecedores.entities import FornecedorSnapshot
from painel.core.fornecedores.ports import InMemoryFornecedorRepository
from painel.core.agendamentos.dtos import CriarAgendamentoInputDTO
from painel.core.agendamentos.ports import InMemoryAgendamentoRepository


@pytest.fixture
def usuario_repo():
    """Repositório de usuários em memória."""
    return InMemoryUsuarioRepository()


@pytest.fixture
def usuario_uow(usuario_repo):
    """Unit of Work ligada ao lock do repositório de usuários."""
    return LockingUnitOfWork(usuario_repo.lock)


@pytest.fixture
def fornecedor_repo():
    """Repositório de fornecedores em memória."""
    return InMemoryFornecedorRepository()


@pytest.fixture
def fornecedor_uow(fornecedor_repo):
    return LockingUnitOfWork(fornecedor_repo.lock)


@pytest.fixture
def agendamento_repo():
    """Repositório de agendamentos em memória."""
    return InMemoryAgendamentoRepository()


@pytest.fixture
def agendamento_uow(agendamento_repo):
    return LockingUnitOfWork(agendamento_repo.lock)


@pytest.fixture
def usuario_snapshot():
    return UsuarioSnapshot(id="u1", nome="Ana", email="ana@x.com")


@pytest.fixture
def fornecedor_snapshot():
    return FornecedorSnapshot(id="s1", nome="ACME Insumos", contato="912345678")


@pytest.fixture
def criar_agendamento_dto(usuario_snapshot, fornecedor_snapshot):
    """DTO de criação de agendamento com snapshots de exemplo."""
    return CriarAgendamentoInputDTO(
        nome="Compra de farinha",
        preco=150.0,
        descricao="Farinha de trigo tipo 1",
        quantidade=10,
        data_entrega=datetime(2026, 11, 1, 9, 0, tzinfo=timezone.utc),
        xml="<nfe><numero>123</numero></nfe>",
        commits="primeira entrega",
        status="pendente",
        usuario_criador=usuario_snapshot,
        fornecedor=fornecedor_snapshot,
    )
