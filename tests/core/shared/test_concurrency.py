"""
Testes do ReadWriteLock e da LockingUnitOfWork.

Coverage:
- Leitores simultâneos
- Exclusão entre escritor e leitores
- Reentrância do escritor
- Commit/rollback da Unit of Work
"""

import threading

import pytest

from painel.core.shared.concurrency import ReadWriteLock
from painel.core.shared.unit_of_work import LockingUnitOfWork


class TestReadWriteLock:
    """Testes para ReadWriteLock."""

    def test_leitores_simultaneos(self):
        """Duas leituras devem coexistir."""
        lock = ReadWriteLock()
        dentro = threading.Barrier(2, timeout=2)
        erros = []

        def ler():
            with lock.leitura():
                try:
                    dentro.wait()
                except threading.BrokenBarrierError as e:
                    erros.append(e)

        threads = [threading.Thread(target=ler) for _ in range(2)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=5)

        assert erros == []

    def test_escrita_bloqueia_leitura(self):
        """Leitor deve esperar o escritor liberar."""
        lock = ReadWriteLock()
        leu = threading.Event()

        def ler():
            with lock.leitura():
                leu.set()

        with lock.escrita():
            leitor = threading.Thread(target=ler)
            leitor.start()
            assert not leu.wait(timeout=0.1)

        assert leu.wait(timeout=2)
        leitor.join(timeout=2)

    def test_leitura_bloqueia_escrita(self):
        """Escritor deve esperar os leitores saírem."""
        lock = ReadWriteLock()
        escreveu = threading.Event()

        def escrever():
            with lock.escrita():
                escreveu.set()

        with lock.leitura():
            escritor = threading.Thread(target=escrever)
            escritor.start()
            assert not escreveu.wait(timeout=0.1)

        assert escreveu.wait(timeout=2)
        escritor.join(timeout=2)

    def test_escritor_reentrante(self):
        """Dono da escrita pode ler e escrever de novo."""
        lock = ReadWriteLock()

        with lock.escrita():
            with lock.leitura():
                with lock.escrita():
                    assert lock.escrita_ativa

            assert lock.escrita_ativa

        assert not lock.escrita_ativa

    def test_release_write_de_outra_thread_erro(self):
        lock = ReadWriteLock()

        with pytest.raises(RuntimeError):
            lock.release_write()

    @pytest.mark.slow
    def test_incrementos_concorrentes_nao_se_perdem(self):
        """Escritas serializadas não perdem atualizações."""
        lock = ReadWriteLock()
        contador = {"valor": 0}

        def incrementar():
            for _ in range(500):
                with lock.escrita():
                    atual = contador["valor"]
                    contador["valor"] = atual + 1

        threads = [threading.Thread(target=incrementar) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=10)

        assert contador["valor"] == 4000


class TestLockingUnitOfWork:
    """Testes para LockingUnitOfWork."""

    def test_commit_ao_sair_sem_erro(self):
        lock = ReadWriteLock()
        uow = LockingUnitOfWork(lock)

        with uow:
            assert lock.escrita_ativa

        assert uow.committed is True
        assert uow.rolled_back is False
        assert not lock.escrita_ativa

    def test_rollback_ao_sair_com_erro(self):
        """Exceção deve propagar, reverter e liberar o lock."""
        lock = ReadWriteLock()
        uow = LockingUnitOfWork(lock)

        with pytest.raises(ValueError):
            with uow:
                raise ValueError("falha")

        assert uow.rolled_back is True
        assert uow.committed is False
        assert not lock.escrita_ativa

    def test_reutilizavel(self):
        uow = LockingUnitOfWork()

        with uow:
            pass
        with pytest.raises(KeyError):
            with uow:
                raise KeyError("x")

        assert uow.rolled_back is True
        assert uow.committed is False

    def test_commit_fora_do_bloco_e_inofensivo(self):
        uow = LockingUnitOfWork()

        uow.commit()
        uow.rollback()

        assert uow.committed is False
        assert uow.rolled_back is False
