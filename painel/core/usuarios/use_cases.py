"""
Use Cases (Application Services) do Domínio de Usuários.

Use Cases implementados:
- CriarUsuarioService: Cria usuário e emite token
- ListarUsuariosService: Lista usuários
- AtualizarUsuarioService: Atualiza nome, email e senha
- RemoverUsuarioService: Remove usuário
- VerificarTokenService: Verifica token de um usuário

Mutações rodam dentro da Unit of Work, que segura o lock de
escrita do repositório durante verificação e gravação.
"""

from typing import List

from painel.core.auth.token import validar_token
from painel.core.shared.interfaces import UnitOfWork
from painel.core.shared.exceptions import ConflictError, EntityNotFoundError

from .ports import UsuarioRepository
from .entities import UsuarioEntity
from .dtos import (
    CriarUsuarioInputDTO,
    AtualizarUsuarioInputDTO,
    UsuarioOutputDTO,
)


def _nao_encontrado(usuario_id: str) -> EntityNotFoundError:
    return EntityNotFoundError(
        f"Usuário {usuario_id} não encontrado",
        entity_type="Usuario",
        entity_id=usuario_id,
    )


class CriarUsuarioService:
    """
    Use Case: Criar um novo usuário.

    Fluxo:
    1. Rejeitar CPF já cadastrado
    2. Rejeitar email já cadastrado
    3. Criar entidade (ID + token + timestamps)
    4. Persistir via repositório

    Example:
        service = CriarUsuarioService(usuario_repo, uow)
        output = service.execute(CriarUsuarioInputDTO(
            nome="Ana", email="ana@x.com", senha="secret1", cpf="12345678901"
        ))
        output.token
    """

    def __init__(self, usuario_repo: UsuarioRepository, uow: UnitOfWork):
        self.usuario_repo = usuario_repo
        self.uow = uow

    def execute(self, input_dto: CriarUsuarioInputDTO) -> UsuarioOutputDTO:
        """
        Executa criação de usuário.

        Raises:
            ConflictError: Se CPF ou email já cadastrados
        """
        with self.uow:
            # CPF é verificado antes do email
            if self.usuario_repo.get_by_cpf(input_dto.cpf):
                raise ConflictError("CPF já cadastrado", field="cpf")

            if self.usuario_repo.get_by_email(input_dto.email):
                raise ConflictError("Email já cadastrado", field="email")

            usuario = UsuarioEntity.criar(
                nome=input_dto.nome,
                email=input_dto.email,
                senha=input_dto.senha,
                cpf=input_dto.cpf,
            )

            self.usuario_repo.save(usuario)

        return UsuarioOutputDTO.from_entity(usuario)


class ListarUsuariosService:
    """
    Use Case: Listar usuários em ordem de inserção.

    Não usa UoW pois é operação de leitura.
    """

    def __init__(self, usuario_repo: UsuarioRepository):
        self.usuario_repo = usuario_repo

    def execute(self) -> List[UsuarioOutputDTO]:
        return [UsuarioOutputDTO.from_entity(u) for u in self.usuario_repo.list_all()]


class AtualizarUsuarioService:
    """
    Use Case: Atualizar nome, email e senha de um usuário.

    Regras:
    - Usuário deve existir
    - Nenhum outro usuário pode ter o mesmo nome ou o mesmo email
    - id, cpf, criado_em e token são preservados
    """

    def __init__(self, usuario_repo: UsuarioRepository, uow: UnitOfWork):
        self.usuario_repo = usuario_repo
        self.uow = uow

    def execute(self, input_dto: AtualizarUsuarioInputDTO) -> UsuarioOutputDTO:
        """
        Raises:
            EntityNotFoundError: Se usuário não existe
            ConflictError: Se nome ou email pertencem a outro usuário
        """
        with self.uow:
            usuario = self.usuario_repo.get_by_id(input_dto.usuario_id)

            if not usuario:
                raise _nao_encontrado(input_dto.usuario_id)

            if self._nome_ou_email_em_uso(input_dto):
                raise ConflictError("Nome ou email já cadastrado")

            usuario.atualizar(
                nome=input_dto.nome,
                email=input_dto.email,
                senha=input_dto.senha,
                atualizado_em=input_dto.atualizado_em,
            )

            self.usuario_repo.save(usuario)

        return UsuarioOutputDTO.from_entity(usuario)

    def _nome_ou_email_em_uso(self, input_dto: AtualizarUsuarioInputDTO) -> bool:
        dono_email = self.usuario_repo.get_by_email(input_dto.email)
        if dono_email and dono_email.id != input_dto.usuario_id:
            return True

        return any(
            u.id != input_dto.usuario_id
            for u in self.usuario_repo.list_by_nome(input_dto.nome)
        )


class RemoverUsuarioService:
    """
    Use Case: Remover usuário permanentemente.
    """

    def __init__(self, usuario_repo: UsuarioRepository, uow: UnitOfWork):
        self.usuario_repo = usuario_repo
        self.uow = uow

    def execute(self, usuario_id: str) -> None:
        """
        Raises:
            EntityNotFoundError: Se usuário não existe
        """
        with self.uow:
            if not self.usuario_repo.exists(usuario_id):
                raise _nao_encontrado(usuario_id)

            self.usuario_repo.delete(usuario_id)


class VerificarTokenService:
    """
    Use Case: Verificar se um token pertence ao usuário.

    Reconstrói (cpf, email, id) a partir do usuário armazenado.
    Como o token é emitido na criação e nunca regenerado, um usuário
    que trocou de email deixa de validar o token original.
    """

    def __init__(self, usuario_repo: UsuarioRepository):
        self.usuario_repo = usuario_repo

    def execute(self, usuario_id: str, token: str) -> bool:
        """
        Raises:
            EntityNotFoundError: Se usuário não existe
        """
        usuario = self.usuario_repo.get_by_id(usuario_id)

        if not usuario:
            raise _nao_encontrado(usuario_id)

        return validar_token(token, usuario.email, usuario.id, usuario.cpf)
