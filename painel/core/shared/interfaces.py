"""
Interfaces (Ports) - Contratos entre Core e Adapters.

Este módulo define as interfaces genéricas que os repositórios e
a Unit of Work devem implementar. São os "Ports" da Arquitetura
Hexagonal.

Princípio: Core define interfaces; Adapters implementam.
O fluxo de dependência sempre aponta para o Core.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, TypeVar, Generic, Protocol


# Type variable para entidades genéricas
T = TypeVar("T")


class UnitOfWork(ABC):
    """
    Unit of Work - Coordena mutações atômicas.

    Garante que a sequência verificar-então-gravar de um Use Case
    seja executada como uma única unidade: ou todas as verificações
    passam e o registro completo é gravado, ou nada é gravado.

    Pattern: Context Manager
        with uow:
            if repo.get_by_email(email):
                raise ConflictError(...)
            repo.save(entity)
        # Commit automático ao sair sem erro
        # Rollback automático se exceção
    """

    def __enter__(self) -> "UnitOfWork":
        """
        Inicia contexto da unidade de trabalho.

        Returns:
            Self para permitir uso como context manager
        """
        self._begin_transaction()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        """
        Finaliza contexto.

        Returns:
            False para propagar exceções
        """
        if exc_type is not None:
            self.rollback()
        else:
            self.commit()
        return False  # Não suprime exceções

    @abstractmethod
    def _begin_transaction(self) -> None:
        """Inicia uma nova unidade de trabalho."""
        raise NotImplementedError

    @abstractmethod
    def commit(self) -> None:
        """Confirma a unidade de trabalho."""
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """
        Descarta a unidade de trabalho.

        Chamado automaticamente se exceção ocorrer dentro
        do bloco `with`.
        """
        raise NotImplementedError


class Repository(Protocol, Generic[T]):
    """
    Interface genérica para repositórios.

    Define operações básicas de persistência que todos
    os repositórios devem implementar.

    Type Parameters:
        T: Tipo da entidade gerenciada pelo repositório

    Note:
        Usando Protocol para permitir duck typing.
        Adapters não precisam herdar explicitamente.
    """

    def save(self, entity: T) -> None:
        """Persiste entidade (create ou update)."""
        ...

    def get_by_id(self, entity_id: str) -> Optional[T]:
        """Busca entidade por ID. Retorna None se ausente."""
        ...

    def delete(self, entity_id: str) -> None:
        """Remove entidade."""
        ...

    def list_all(self) -> List[T]:
        """Lista todas as entidades em ordem de inserção."""
        ...

    def exists(self, entity_id: str) -> bool:
        """Verifica se a entidade existe."""
        ...

    def count(self) -> int:
        """Conta entidades."""
        ...
