"""
Controle de concorrência para coleções em memória.

Cada repositório possui um ReadWriteLock próprio:
- Leituras (get/list) podem ocorrer em paralelo entre si
- Escritas são exclusivas e serializadas contra leituras

A thread que detém a escrita pode ler e escrever de novo sem
bloquear (reentrância), o que permite aos Use Cases consultarem
o repositório dentro da Unit of Work.
"""

import threading
from contextlib import contextmanager
from typing import Iterator, Optional


class ReadWriteLock:
    """
    Lock leitores/escritor com reentrância para o escritor.

    Example:
        lock = ReadWriteLock()

        with lock.leitura():
            dados = list(colecao.values())

        with lock.escrita():
            colecao[item.id] = item
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._leitores = 0
        self._escritor: Optional[int] = None
        self._profundidade = 0

    def acquire_read(self) -> None:
        with self._cond:
            if self._escritor == threading.get_ident():
                self._profundidade += 1
                return
            while self._escritor is not None:
                self._cond.wait()
            self._leitores += 1

    def release_read(self) -> None:
        with self._cond:
            if self._escritor == threading.get_ident():
                self._profundidade -= 1
                return
            self._leitores -= 1
            if self._leitores == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        me = threading.get_ident()
        with self._cond:
            if self._escritor == me:
                self._profundidade += 1
                return
            while self._escritor is not None or self._leitores > 0:
                self._cond.wait()
            self._escritor = me
            self._profundidade = 1

    def release_write(self) -> None:
        with self._cond:
            if self._escritor != threading.get_ident():
                raise RuntimeError("Lock de escrita não pertence a esta thread")
            self._profundidade -= 1
            if self._profundidade == 0:
                self._escritor = None
                self._cond.notify_all()

    @contextmanager
    def leitura(self) -> Iterator[None]:
        """Context manager para o lado de leitura."""
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def escrita(self) -> Iterator[None]:
        """Context manager para o lado de escrita."""
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()

    @property
    def escrita_ativa(self) -> bool:
        """Indica se alguma thread detém a escrita."""
        with self._cond:
            return self._escritor is not None
