"""
API Views JSON para Agendamentos.

Endpoints:
- GET /agendamentos/ - Listar agendamentos (?userId= opcional)
- POST /agendamentos/ - Criar agendamento
- PUT /agendamentos/<id>/ - Atualização parcial
- DELETE /agendamentos/<id>/ - Remover agendamento
"""

import logging

from django.http import HttpRequest, HttpResponse

from painel.core.agendamentos.dtos import (
    CriarAgendamentoInputDTO,
    AtualizarAgendamentoInputDTO,
)
from painel.core.usuarios.entities import UsuarioSnapshot
from painel.core.fornecedores.entities import FornecedorSnapshot

from ..shared.api import (
    BaseAPIView,
    json_response,
    empty_response,
    require_uuid,
    validate_form,
)
from .forms import AgendamentoCreateForm, AgendamentoUpdateForm

logger = logging.getLogger(__name__)


class AgendamentoAPIListView(BaseAPIView):
    """
    GET /agendamentos/ - Lista agendamentos
    POST /agendamentos/ - Cria agendamento
    """

    def get(self, request: HttpRequest) -> HttpResponse:
        try:
            listar_service = self.get_service('listar_agendamentos_service')
            agendamentos = listar_service.execute(
                usuario_id=request.GET.get('userId') or None,
            )

            return json_response([a.to_dict() for a in agendamentos])

        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest) -> HttpResponse:
        """
        Cria agendamento.

        Body JSON:
        {
            "name": "string (min 3)",
            "price": number >= 0,
            "description": "string (min 3)",
            "quantity": integer >= 0,
            "dataEntrega": "ISO-8601",
            "xml": "string",
            "commits": "string",
            "status": "string",
            "userCreated": {"id", "name", "email"},
            "fornecedor": {"id", "name", "contact"}
        }
        """
        try:
            data = validate_form(AgendamentoCreateForm, self.parse_body(request))

            usuario = data['userCreated']
            fornecedor = data['fornecedor']

            criar_service = self.get_service('criar_agendamento_service')

            output = criar_service.execute(CriarAgendamentoInputDTO(
                nome=data['name'],
                preco=data['price'],
                descricao=data['description'],
                quantidade=data['quantity'],
                data_entrega=data['dataEntrega'],
                xml=data['xml'],
                commits=data['commits'],
                status=data['status'],
                usuario_criador=UsuarioSnapshot(
                    id=usuario['id'],
                    nome=usuario['name'],
                    email=usuario['email'],
                ),
                fornecedor=FornecedorSnapshot(
                    id=fornecedor['id'],
                    nome=fornecedor['name'],
                    contato=fornecedor['contact'],
                ),
            ))

            logger.info(f"API: Agendamento criado: {output.id} por {output.usuario_id}")

            return json_response(output.to_dict(), status=201)

        except Exception as e:
            return self.handle_exception(e)


class AgendamentoAPIDetailView(BaseAPIView):
    """
    PUT /agendamentos/<id>/ - Atualização parcial
    DELETE /agendamentos/<id>/ - Remover agendamento
    """

    def put(self, request: HttpRequest, pk: str) -> HttpResponse:
        """
        Body JSON:
        {
            "name": "string (min 3)",
            "price": number >= 0,
            "description": "string (min 3)",
            "quantity": integer >= 0
        }
        """
        try:
            require_uuid(pk)
            data = validate_form(AgendamentoUpdateForm, self.parse_body(request))

            atualizar_service = self.get_service('atualizar_agendamento_service')

            output = atualizar_service.execute(AtualizarAgendamentoInputDTO(
                agendamento_id=pk,
                nome=data['name'],
                preco=data['price'],
                descricao=data['description'],
                quantidade=data['quantity'],
            ))

            logger.info(f"API: Agendamento {pk} atualizado")

            return json_response(output.to_partial_dict())

        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: str) -> HttpResponse:
        try:
            require_uuid(pk)
            remover_service = self.get_service('remover_agendamento_service')
            remover_service.execute(pk)

            logger.info(f"API: Agendamento {pk} removido")

            return empty_response()

        except Exception as e:
            return self.handle_exception(e)
