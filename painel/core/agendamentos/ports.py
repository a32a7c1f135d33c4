"""
Ports (Interfaces) do Domínio de Agendamentos.
"""

import copy
from typing import Dict, List, Optional, Protocol, runtime_checkable

from painel.core.shared.concurrency import ReadWriteLock
from painel.core.shared.interfaces import Repository

from .entities import AgendamentoEntity


@runtime_checkable
class AgendamentoRepository(Repository[AgendamentoEntity], Protocol):
    """
    Interface para persistência de Agendamentos.

    Methods:
        list_by_usuario: Filtra pelo usuário criador
    """

    lock: ReadWriteLock

    def list_by_usuario(self, usuario_id: str) -> List[AgendamentoEntity]:
        ...


class InMemoryAgendamentoRepository:
    """
    Implementação em memória do AgendamentoRepository.

    Snapshots são frozen dataclasses, então a cópia rasa da
    entidade já isola o registro armazenado.
    """

    def __init__(self):
        self.lock = ReadWriteLock()
        self._agendamentos: Dict[str, AgendamentoEntity] = {}

    def save(self, agendamento: AgendamentoEntity) -> None:
        with self.lock.escrita():
            self._agendamentos[agendamento.id] = copy.copy(agendamento)

    def get_by_id(self, agendamento_id: str) -> Optional[AgendamentoEntity]:
        with self.lock.leitura():
            agendamento = self._agendamentos.get(agendamento_id)
            return copy.copy(agendamento) if agendamento else None

    def delete(self, agendamento_id: str) -> None:
        with self.lock.escrita():
            self._agendamentos.pop(agendamento_id, None)

    def list_all(self) -> List[AgendamentoEntity]:
        with self.lock.leitura():
            return [copy.copy(a) for a in self._agendamentos.values()]

    def list_by_usuario(self, usuario_id: str) -> List[AgendamentoEntity]:
        with self.lock.leitura():
            return [
                copy.copy(a) for a in self._agendamentos.values()
                if a.usuario_id == usuario_id
            ]

    def exists(self, agendamento_id: str) -> bool:
        with self.lock.leitura():
            return agendamento_id in self._agendamentos

    def count(self) -> int:
        with self.lock.leitura():
            return len(self._agendamentos)

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        with self.lock.escrita():
            self._agendamentos.clear()
