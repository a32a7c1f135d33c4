"""
Unit of Work - Implementação em memória com lock de escrita.

Cada repositório em memória expõe um ReadWriteLock. A Unit of Work
mantém o lado de escrita durante todo o bloco `with`, de modo que
as verificações de unicidade e a gravação acontecem sem que outra
escrita ou leitura se intercale.
"""

from typing import Optional

from .concurrency import ReadWriteLock
from .interfaces import UnitOfWork


class LockingUnitOfWork(UnitOfWork):
    """
    Unit of Work baseada no lock de escrita de um repositório.

    Example:
        uow = LockingUnitOfWork(repo.lock)
        with uow:
            repo.save(entity)

        assert uow.committed
    """

    def __init__(self, lock: Optional[ReadWriteLock] = None):
        self._lock = lock or ReadWriteLock()
        self._ativo = False
        self._committed = False
        self._rolled_back = False

    def _begin_transaction(self) -> None:
        self._lock.acquire_write()
        self._ativo = True
        self._committed = False
        self._rolled_back = False

    def commit(self) -> None:
        if not self._ativo:
            return
        self._committed = True
        self._liberar()

    def rollback(self) -> None:
        if not self._ativo:
            return
        self._rolled_back = True
        self._liberar()

    def _liberar(self) -> None:
        self._ativo = False
        self._lock.release_write()

    @property
    def committed(self) -> bool:
        """Verifica se foi comitada."""
        return self._committed

    @property
    def rolled_back(self) -> bool:
        """Verifica se foi revertida."""
        return self._rolled_back
