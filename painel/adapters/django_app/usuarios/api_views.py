"""
API Views JSON para Usuários.

Endpoints:
- GET /users/ - Listar usuários
- POST /users/ - Criar usuário (retorna token)
- PUT /users/<id>/ - Atualizar usuário
- DELETE /users/<id>/ - Remover usuário
- POST /users/<id>/token/ - Verificar token
"""

import logging

from django.http import HttpRequest, HttpResponse

from painel.core.usuarios.dtos import (
    CriarUsuarioInputDTO,
    AtualizarUsuarioInputDTO,
)

from ..shared.api import (
    BaseAPIView,
    json_response,
    empty_response,
    require_uuid,
    validate_form,
)
from .forms import UsuarioCreateForm, UsuarioUpdateForm, TokenVerifyForm

logger = logging.getLogger(__name__)


class UsuarioAPIListView(BaseAPIView):
    """
    API para listar e criar usuários.

    GET /users/ - Lista usuários
    POST /users/ - Cria usuário
    """

    def get(self, request: HttpRequest) -> HttpResponse:
        """Lista usuários em ordem de criação: [{id, name, email}]."""
        try:
            listar_service = self.get_service('listar_usuarios_service')
            usuarios = listar_service.execute()

            return json_response([u.to_public_dict() for u in usuarios])

        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest) -> HttpResponse:
        """
        Cria novo usuário.

        Body JSON:
        {
            "name": "string (min 3)",
            "email": "email",
            "password": "string (min 6)",
            "cpf": "11 dígitos"
        }
        """
        try:
            data = validate_form(UsuarioCreateForm, self.parse_body(request))

            criar_service = self.get_service('criar_usuario_service')

            output = criar_service.execute(CriarUsuarioInputDTO(
                nome=data['name'],
                email=data['email'],
                senha=data['password'],
                cpf=data['cpf'],
            ))

            logger.info(f"API: Usuário criado: {output.id}")

            return json_response(output.to_dict(), status=201)

        except Exception as e:
            return self.handle_exception(e)


class UsuarioAPIDetailView(BaseAPIView):
    """
    API para operações em usuário específico.

    PUT /users/<id>/ - Atualizar usuário
    DELETE /users/<id>/ - Remover usuário
    """

    def put(self, request: HttpRequest, pk: str) -> HttpResponse:
        """
        Atualiza nome, email e senha.

        Body JSON:
        {
            "name": "string (min 3)",
            "email": "email",
            "password": "string (min 6)",
            "updatedAt": "ISO-8601 (opcional)"
        }
        """
        try:
            require_uuid(pk)
            data = validate_form(UsuarioUpdateForm, self.parse_body(request))

            atualizar_service = self.get_service('atualizar_usuario_service')

            output = atualizar_service.execute(AtualizarUsuarioInputDTO(
                usuario_id=pk,
                nome=data['name'],
                email=data['email'],
                senha=data['password'],
                atualizado_em=data.get('updatedAt'),
            ))

            logger.info(f"API: Usuário {pk} atualizado")

            return json_response(output.to_public_dict())

        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: str) -> HttpResponse:
        """Remove usuário."""
        try:
            require_uuid(pk)
            remover_service = self.get_service('remover_usuario_service')
            remover_service.execute(pk)

            logger.info(f"API: Usuário {pk} removido")

            return empty_response()

        except Exception as e:
            return self.handle_exception(e)


class UsuarioAPITokenView(BaseAPIView):
    """
    API para verificar token de um usuário.

    POST /users/<id>/token/
    """

    def post(self, request: HttpRequest, pk: str) -> HttpResponse:
        """
        Body JSON:
        {
            "token": "string"
        }

        Resposta: {"valid": bool}
        """
        try:
            require_uuid(pk)
            data = validate_form(TokenVerifyForm, self.parse_body(request))

            verificar_service = self.get_service('verificar_token_service')
            valido = verificar_service.execute(pk, data['token'])

            return json_response({'valid': valido})

        except Exception as e:
            return self.handle_exception(e)
