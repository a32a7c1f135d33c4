"""
Ports (Interfaces) do Domínio de Fornecedores.
"""

import copy
from typing import Dict, List, Optional, Protocol, runtime_checkable

from painel.core.shared.concurrency import ReadWriteLock
from painel.core.shared.interfaces import Repository

from .entities import FornecedorEntity


@runtime_checkable
class FornecedorRepository(Repository[FornecedorEntity], Protocol):
    """
    Interface para persistência de Fornecedores.

    Methods:
        list_by_cnpj: Filtra por CNPJ (política de CNPJ único)
    """

    lock: ReadWriteLock

    def list_by_cnpj(self, cnpj: str) -> List[FornecedorEntity]:
        ...


class InMemoryFornecedorRepository:
    """
    Implementação em memória do FornecedorRepository.

    Example:
        repo = InMemoryFornecedorRepository()
        repo.save(fornecedor)
        found = repo.get_by_id(fornecedor.id)
    """

    def __init__(self):
        self.lock = ReadWriteLock()
        self._fornecedores: Dict[str, FornecedorEntity] = {}

    def save(self, fornecedor: FornecedorEntity) -> None:
        with self.lock.escrita():
            self._fornecedores[fornecedor.id] = copy.copy(fornecedor)

    def get_by_id(self, fornecedor_id: str) -> Optional[FornecedorEntity]:
        with self.lock.leitura():
            fornecedor = self._fornecedores.get(fornecedor_id)
            return copy.copy(fornecedor) if fornecedor else None

    def list_by_cnpj(self, cnpj: str) -> List[FornecedorEntity]:
        with self.lock.leitura():
            return [copy.copy(f) for f in self._fornecedores.values() if f.cnpj == cnpj]

    def delete(self, fornecedor_id: str) -> None:
        with self.lock.escrita():
            self._fornecedores.pop(fornecedor_id, None)

    def list_all(self) -> List[FornecedorEntity]:
        with self.lock.leitura():
            return [copy.copy(f) for f in self._fornecedores.values()]

    def exists(self, fornecedor_id: str) -> bool:
        with self.lock.leitura():
            return fornecedor_id in self._fornecedores

    def count(self) -> int:
        with self.lock.leitura():
            return len(self._fornecedores)

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        with self.lock.escrita():
            self._fornecedores.clear()
