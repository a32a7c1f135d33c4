"""
API Views JSON para Fornecedores.

Endpoints:
- GET /fornecedores/ - Listar fornecedores
- POST /fornecedores/ - Criar fornecedor
- GET /fornecedores/<id>/ - Obter fornecedor
- PUT /fornecedores/<id>/ - Atualizar fornecedor
- DELETE /fornecedores/<id>/ - Remover fornecedor
"""

import logging

from django.http import HttpRequest, HttpResponse

from painel.core.fornecedores.dtos import (
    CriarFornecedorInputDTO,
    AtualizarFornecedorInputDTO,
)

from ..shared.api import BaseAPIView, json_response, validate_form
from .forms import FornecedorCreateForm, FornecedorUpdateForm

logger = logging.getLogger(__name__)


class FornecedorAPIListView(BaseAPIView):
    """
    GET /fornecedores/ - Lista fornecedores
    POST /fornecedores/ - Cria fornecedor
    """

    def get(self, request: HttpRequest) -> HttpResponse:
        try:
            listar_service = self.get_service('listar_fornecedores_service')
            fornecedores = listar_service.execute()

            return json_response([f.to_dict() for f in fornecedores])

        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest) -> HttpResponse:
        """
        Cria fornecedor.

        Body JSON:
        {
            "name": "Razão social",
            "cnpj": "14 dígitos",
            "contact": "9 dígitos"
        }
        """
        try:
            data = validate_form(FornecedorCreateForm, self.parse_body(request))

            criar_service = self.get_service('criar_fornecedor_service')

            output = criar_service.execute(CriarFornecedorInputDTO(
                nome=data['name'],
                cnpj=data['cnpj'],
                contato=data['contact'],
            ))

            logger.info(f"API: Fornecedor criado: {output.id}")

            return json_response(output.to_dict(), status=201)

        except Exception as e:
            return self.handle_exception(e)


class FornecedorAPIDetailView(BaseAPIView):
    """
    GET /fornecedores/<id>/ - Obter fornecedor
    PUT /fornecedores/<id>/ - Atualizar fornecedor
    DELETE /fornecedores/<id>/ - Remover fornecedor
    """

    def get(self, request: HttpRequest, pk: str) -> HttpResponse:
        try:
            obter_service = self.get_service('obter_fornecedor_service')
            fornecedor = obter_service.execute(pk)

            return json_response(fornecedor.to_dict())

        except Exception as e:
            return self.handle_exception(e)

    def put(self, request: HttpRequest, pk: str) -> HttpResponse:
        try:
            data = validate_form(FornecedorUpdateForm, self.parse_body(request))

            atualizar_service = self.get_service('atualizar_fornecedor_service')

            output = atualizar_service.execute(AtualizarFornecedorInputDTO(
                fornecedor_id=pk,
                nome=data['name'],
                cnpj=data['cnpj'],
                contato=data['contact'],
            ))

            logger.info(f"API: Fornecedor {pk} atualizado")

            return json_response(output.to_dict())

        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: str) -> HttpResponse:
        """Remove fornecedor e confirma com mensagem (200)."""
        try:
            remover_service = self.get_service('remover_fornecedor_service')
            remover_service.execute(pk)

            logger.info(f"API: Fornecedor {pk} removido")

            return json_response({'message': 'Fornecedor removido'})

        except Exception as e:
            return self.handle_exception(e)
