"""
Entidades do Domínio de Fornecedores.

Entidades:
- FornecedorEntity: Registro de fornecedor (razão social, CNPJ, contato)
- FornecedorSnapshot: Cópia imutável embutida no Agendamento
"""

from dataclasses import dataclass, field
import uuid


@dataclass(frozen=True)
class FornecedorSnapshot:
    """Cópia congelada de um fornecedor no momento do agendamento."""

    id: str
    nome: str
    contato: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.nome,
            "contact": self.contato,
        }


@dataclass
class FornecedorEntity:
    """
    Entidade de Domínio: Fornecedor.

    Formato de CNPJ e contato é responsabilidade do colaborador de
    validação; a entidade apenas guarda os valores.

    Attributes:
        id: Identificador único (UUID)
        nome: Razão social
        cnpj: CNPJ (14 dígitos)
        contato: Telefone de contato (9 dígitos)
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    nome: str = ""
    cnpj: str = ""
    contato: str = ""

    @classmethod
    def criar(cls, nome: str, cnpj: str, contato: str) -> "FornecedorEntity":
        return cls(nome=nome, cnpj=cnpj, contato=contato)

    def atualizar(self, nome: str, cnpj: str, contato: str) -> None:
        self.nome = nome
        self.cnpj = cnpj
        self.contato = contato

    def snapshot(self) -> FornecedorSnapshot:
        return FornecedorSnapshot(id=self.id, nome=self.nome, contato=self.contato)
