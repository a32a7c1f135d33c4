"""
Data Transfer Objects (DTOs) do Domínio de Fornecedores.
"""

from dataclasses import dataclass

from .entities import FornecedorEntity


@dataclass(frozen=True)
class CriarFornecedorInputDTO:
    """DTO de entrada para criar fornecedor."""

    nome: str
    cnpj: str
    contato: str


@dataclass(frozen=True)
class AtualizarFornecedorInputDTO:
    """DTO de entrada para atualizar fornecedor."""

    fornecedor_id: str
    nome: str
    cnpj: str
    contato: str


@dataclass
class FornecedorOutputDTO:
    """DTO de saída com o registro completo."""

    id: str
    nome: str
    cnpj: str
    contato: str

    @classmethod
    def from_entity(cls, entity: FornecedorEntity) -> "FornecedorOutputDTO":
        return cls(
            id=entity.id,
            nome=entity.nome,
            cnpj=entity.cnpj,
            contato=entity.contato,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.nome,
            "cnpj": self.cnpj,
            "contact": self.contato,
        }
