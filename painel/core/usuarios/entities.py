"""
Entidades do Domínio de Usuários.

Entidades:
- UsuarioEntity: Registro de identidade com token emitido na criação
- UsuarioSnapshot: Cópia imutável (id, nome, email) embutida em outros
  agregados, como o Agendamento

Regras Encapsuladas:
- ID e token gerados na criação, nunca regenerados
- CPF, criado_em e token imutáveis após a criação
- Atualização substitui apenas nome, email e senha
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
import uuid

from painel.core.auth.token import gerar_token


def _agora() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class UsuarioSnapshot:
    """
    Cópia congelada dos dados públicos de um usuário.

    Value object: alterações posteriores no usuário de origem
    não se propagam para quem guardou o snapshot.
    """

    id: str
    nome: str
    email: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.nome,
            "email": self.email,
        }


@dataclass
class UsuarioEntity:
    """
    Entidade de Domínio: Usuário.

    Invariantes (garantidas pelos Use Cases):
    - email é único entre usuários vivos
    - cpf é único entre usuários vivos

    Attributes:
        id: Identificador único (UUID)
        nome: Nome do usuário
        email: Email do usuário
        cpf: CPF (11 dígitos), imutável
        senha: Segredo armazenado como recebido
        token: Token de identidade emitido na criação
        criado_em: Data/hora de criação
        atualizado_em: Data/hora da última atualização

    Example:
        usuario = UsuarioEntity.criar(
            nome="Ana",
            email="ana@x.com",
            senha="secret1",
            cpf="12345678901",
        )
        usuario.token  # base64("12345678901:ana@x.com:<id>")
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    nome: str = ""
    email: str = ""
    cpf: str = ""
    senha: str = ""
    token: str = ""
    criado_em: datetime = field(default_factory=_agora)
    atualizado_em: datetime = field(default_factory=_agora)

    @classmethod
    def criar(cls, nome: str, email: str, senha: str, cpf: str) -> "UsuarioEntity":
        """
        Factory method para criar usuário.

        O token é gerado com o mesmo ID atribuído ao usuário.
        """
        usuario_id = str(uuid.uuid4())
        agora = _agora()
        return cls(
            id=usuario_id,
            nome=nome,
            email=email,
            cpf=cpf,
            senha=senha,
            token=gerar_token(email, usuario_id, cpf),
            criado_em=agora,
            atualizado_em=agora,
        )

    def atualizar(
        self,
        nome: str,
        email: str,
        senha: str,
        atualizado_em: Optional[datetime] = None,
    ) -> None:
        """
        Substitui nome, email e senha.

        id, cpf, criado_em e token são preservados.
        """
        self.nome = nome
        self.email = email
        self.senha = senha
        self.atualizado_em = atualizado_em or _agora()

    def snapshot(self) -> UsuarioSnapshot:
        """Retorna cópia congelada dos dados públicos."""
        return UsuarioSnapshot(id=self.id, nome=self.nome, email=self.email)

    def __repr__(self) -> str:
        return f"UsuarioEntity(id={self.id[:8]}..., email='{self.email}')"
