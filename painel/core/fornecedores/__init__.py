"""
Domínio de Fornecedores.

Cadastro de fornecedores independente dos agendamentos: o
agendamento guarda apenas um snapshot do fornecedor.
"""

from .entities import FornecedorEntity, FornecedorSnapshot
from .dtos import (
    CriarFornecedorInputDTO,
    AtualizarFornecedorInputDTO,
    FornecedorOutputDTO,
)
from .ports import FornecedorRepository, InMemoryFornecedorRepository
from .use_cases import (
    CriarFornecedorService,
    ListarFornecedoresService,
    ObterFornecedorService,
    AtualizarFornecedorService,
    RemoverFornecedorService,
)

__all__ = [
    "FornecedorEntity",
    "FornecedorSnapshot",
    "CriarFornecedorInputDTO",
    "AtualizarFornecedorInputDTO",
    "FornecedorOutputDTO",
    "FornecedorRepository",
    "InMemoryFornecedorRepository",
    "CriarFornecedorService",
    "ListarFornecedoresService",
    "ObterFornecedorService",
    "AtualizarFornecedorService",
    "RemoverFornecedorService",
]
