"""
Use Cases do Domínio de Fornecedores.

- CriarFornecedorService
- ListarFornecedoresService
- ObterFornecedorService
- AtualizarFornecedorService
- RemoverFornecedorService

A unicidade de CNPJ não é exigida por padrão; `cnpj_unico=True`
ativa a verificação na criação e na atualização.
"""

from typing import List

from painel.core.shared.interfaces import UnitOfWork
from painel.core.shared.exceptions import ConflictError, EntityNotFoundError

from .ports import FornecedorRepository
from .entities import FornecedorEntity
from .dtos import (
    CriarFornecedorInputDTO,
    AtualizarFornecedorInputDTO,
    FornecedorOutputDTO,
)


def _nao_encontrado(fornecedor_id: str) -> EntityNotFoundError:
    return EntityNotFoundError(
        f"Fornecedor {fornecedor_id} não encontrado",
        entity_type="Fornecedor",
        entity_id=fornecedor_id,
    )


class CriarFornecedorService:
    """
    Use Case: Criar fornecedor.

    Sempre tem sucesso com entrada bem formada, exceto quando a
    política de CNPJ único está ativa e o CNPJ já existe.
    """

    def __init__(
        self,
        fornecedor_repo: FornecedorRepository,
        uow: UnitOfWork,
        cnpj_unico: bool = False,
    ):
        self.fornecedor_repo = fornecedor_repo
        self.uow = uow
        self.cnpj_unico = cnpj_unico

    def execute(self, input_dto: CriarFornecedorInputDTO) -> FornecedorOutputDTO:
        with self.uow:
            if self.cnpj_unico and self.fornecedor_repo.list_by_cnpj(input_dto.cnpj):
                raise ConflictError("CNPJ já cadastrado", field="cnpj")

            fornecedor = FornecedorEntity.criar(
                nome=input_dto.nome,
                cnpj=input_dto.cnpj,
                contato=input_dto.contato,
            )
            self.fornecedor_repo.save(fornecedor)

        return FornecedorOutputDTO.from_entity(fornecedor)


class ListarFornecedoresService:
    """Use Case: Listar fornecedores."""

    def __init__(self, fornecedor_repo: FornecedorRepository):
        self.fornecedor_repo = fornecedor_repo

    def execute(self) -> List[FornecedorOutputDTO]:
        return [
            FornecedorOutputDTO.from_entity(f)
            for f in self.fornecedor_repo.list_all()
        ]


class ObterFornecedorService:
    """Use Case: Obter fornecedor por ID."""

    def __init__(self, fornecedor_repo: FornecedorRepository):
        self.fornecedor_repo = fornecedor_repo

    def execute(self, fornecedor_id: str) -> FornecedorOutputDTO:
        """
        Raises:
            EntityNotFoundError: Se fornecedor não existe
        """
        fornecedor = self.fornecedor_repo.get_by_id(fornecedor_id)

        if not fornecedor:
            raise _nao_encontrado(fornecedor_id)

        return FornecedorOutputDTO.from_entity(fornecedor)


class AtualizarFornecedorService:
    """Use Case: Substituir nome, CNPJ e contato."""

    def __init__(
        self,
        fornecedor_repo: FornecedorRepository,
        uow: UnitOfWork,
        cnpj_unico: bool = False,
    ):
        self.fornecedor_repo = fornecedor_repo
        self.uow = uow
        self.cnpj_unico = cnpj_unico

    def execute(self, input_dto: AtualizarFornecedorInputDTO) -> FornecedorOutputDTO:
        """
        Raises:
            EntityNotFoundError: Se fornecedor não existe
            ConflictError: Se CNPJ único ativo e CNPJ de outro fornecedor
        """
        with self.uow:
            fornecedor = self.fornecedor_repo.get_by_id(input_dto.fornecedor_id)

            if not fornecedor:
                raise _nao_encontrado(input_dto.fornecedor_id)

            if self.cnpj_unico and any(
                f.id != fornecedor.id
                for f in self.fornecedor_repo.list_by_cnpj(input_dto.cnpj)
            ):
                raise ConflictError("CNPJ já cadastrado", field="cnpj")

            fornecedor.atualizar(
                nome=input_dto.nome,
                cnpj=input_dto.cnpj,
                contato=input_dto.contato,
            )
            self.fornecedor_repo.save(fornecedor)

        return FornecedorOutputDTO.from_entity(fornecedor)


class RemoverFornecedorService:
    """Use Case: Remover fornecedor."""

    def __init__(self, fornecedor_repo: FornecedorRepository, uow: UnitOfWork):
        self.fornecedor_repo = fornecedor_repo
        self.uow = uow

    def execute(self, fornecedor_id: str) -> None:
        """
        Raises:
            EntityNotFoundError: Se fornecedor não existe
        """
        with self.uow:
            if not self.fornecedor_repo.exists(fornecedor_id):
                raise _nao_encontrado(fornecedor_id)

            self.fornecedor_repo.delete(fornecedor_id)
