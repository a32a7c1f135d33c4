"""
Ports (Interfaces) do Domínio de Usuários.

Define o contrato de persistência de usuários e uma implementação
em memória indexada por ID, email e CPF.

Example:
    repo = InMemoryUsuarioRepository()
    repo.save(usuario)
    repo.get_by_email("ana@x.com")
"""

import copy
from typing import Dict, List, Optional, Protocol, runtime_checkable

from painel.core.shared.concurrency import ReadWriteLock
from painel.core.shared.interfaces import Repository

from .entities import UsuarioEntity


@runtime_checkable
class UsuarioRepository(Repository[UsuarioEntity], Protocol):
    """
    Interface para persistência de Usuários.

    Além das operações genéricas (save, get_by_id, delete, list_all,
    exists, count), oferece as buscas usadas nas regras de unicidade.

    Implementações:
    - InMemoryUsuarioRepository (processo único, sem durabilidade)

    Methods:
        get_by_email: Busca por email
        get_by_cpf: Busca por CPF
        list_by_nome: Filtra por nome exato
    """

    lock: ReadWriteLock

    def get_by_email(self, email: str) -> Optional[UsuarioEntity]:
        ...

    def get_by_cpf(self, cpf: str) -> Optional[UsuarioEntity]:
        ...

    def list_by_nome(self, nome: str) -> List[UsuarioEntity]:
        ...


class InMemoryUsuarioRepository:
    """
    Implementação em memória do UsuarioRepository.

    Armazena cópias das entidades: quem lê recebe uma cópia e
    precisa chamar save() para que a alteração seja gravada.
    Índices secundários por email e CPF mantêm as buscas de
    unicidade em O(1).
    """

    def __init__(self):
        self.lock = ReadWriteLock()
        self._usuarios: Dict[str, UsuarioEntity] = {}
        self._por_email: Dict[str, str] = {}
        self._por_cpf: Dict[str, str] = {}

    def save(self, usuario: UsuarioEntity) -> None:
        with self.lock.escrita():
            anterior = self._usuarios.get(usuario.id)
            if anterior is not None:
                self._desindexar(anterior)
            self._usuarios[usuario.id] = copy.copy(usuario)
            self._por_email[usuario.email] = usuario.id
            self._por_cpf[usuario.cpf] = usuario.id

    def get_by_id(self, usuario_id: str) -> Optional[UsuarioEntity]:
        with self.lock.leitura():
            usuario = self._usuarios.get(usuario_id)
            return copy.copy(usuario) if usuario else None

    def get_by_email(self, email: str) -> Optional[UsuarioEntity]:
        with self.lock.leitura():
            usuario_id = self._por_email.get(email)
            return copy.copy(self._usuarios[usuario_id]) if usuario_id else None

    def get_by_cpf(self, cpf: str) -> Optional[UsuarioEntity]:
        with self.lock.leitura():
            usuario_id = self._por_cpf.get(cpf)
            return copy.copy(self._usuarios[usuario_id]) if usuario_id else None

    def list_by_nome(self, nome: str) -> List[UsuarioEntity]:
        with self.lock.leitura():
            return [copy.copy(u) for u in self._usuarios.values() if u.nome == nome]

    def delete(self, usuario_id: str) -> None:
        with self.lock.escrita():
            usuario = self._usuarios.pop(usuario_id, None)
            if usuario is not None:
                self._desindexar(usuario)

    def list_all(self) -> List[UsuarioEntity]:
        with self.lock.leitura():
            return [copy.copy(u) for u in self._usuarios.values()]

    def exists(self, usuario_id: str) -> bool:
        with self.lock.leitura():
            return usuario_id in self._usuarios

    def count(self) -> int:
        with self.lock.leitura():
            return len(self._usuarios)

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        with self.lock.escrita():
            self._usuarios.clear()
            self._por_email.clear()
            self._por_cpf.clear()

    def _desindexar(self, usuario: UsuarioEntity) -> None:
        if self._por_email.get(usuario.email) == usuario.id:
            del self._por_email[usuario.email]
        if self._por_cpf.get(usuario.cpf) == usuario.id:
            del self._por_cpf[usuario.cpf]
