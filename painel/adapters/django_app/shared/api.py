"""
Base das API Views JSON.

Fornece o que todas as views de recurso compartilham:
- Parsing do body JSON
- Validação via Django Forms
- Acesso ao container DI
- Mapeamento de exceções de domínio para respostas HTTP

Formato de erro:
    {"message": "...", "error": "<reason phrase>", "statusCode": <int>}
"""

import json
import logging
import uuid
from http import HTTPStatus
from typing import Any, Dict, Type

from django import forms
from django.core.exceptions import NON_FIELD_ERRORS
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from painel.core.shared.exceptions import (
    ValidationError,
    EntityNotFoundError,
    ConflictError,
    DomainException,
)
from painel.config.container import get_container

logger = logging.getLogger(__name__)


# =============================================================================
# Helpers
# =============================================================================

def json_response(data: Any, status: int = 200) -> JsonResponse:
    """Resposta JSON de sucesso (objeto ou lista)."""
    return JsonResponse(data, status=status, safe=False)


def empty_response(status: int = 204) -> HttpResponse:
    """Resposta sem corpo."""
    return HttpResponse(status=status)


def error_response(message: str, status: int, **extra: Any) -> JsonResponse:
    """
    Cria resposta de erro padronizada.

    Args:
        message: Mensagem legível
        status: HTTP status code
        extra: Campos adicionais (ex: field)
    """
    body = {
        'message': message,
        'error': HTTPStatus(status).phrase,
        'statusCode': status,
    }
    body.update({k: v for k, v in extra.items() if v is not None})
    return JsonResponse(body, status=status)


def parse_json_body(request: HttpRequest) -> Dict:
    """
    Parseia body JSON do request.

    Raises:
        ValidationError: Se JSON inválido ou não for um objeto
    """
    if not request.body:
        return {}

    try:
        data = json.loads(request.body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValidationError(f"JSON inválido: {e}")

    if not isinstance(data, dict):
        raise ValidationError("Body deve ser um objeto JSON")
    return data


def validate_form(form_class: Type[forms.Form], data: Dict) -> Dict:
    """
    Valida dados com um Django Form.

    Returns:
        cleaned_data do form

    Raises:
        ValidationError: Com a primeira mensagem de erro encontrada
    """
    form = form_class(data=data)
    if form.is_valid():
        return form.cleaned_data

    field, messages = next(iter(form.errors.items()))
    message = messages[0]
    if field == NON_FIELD_ERRORS:
        raise ValidationError(message)
    raise ValidationError(f"{field}: {message}", field=field)


def require_uuid(value: str, field: str = 'id') -> str:
    """
    Garante que o parâmetro de rota é um UUID.

    Raises:
        ValidationError: Se formato inválido
    """
    try:
        uuid.UUID(str(value))
    except ValueError:
        raise ValidationError("Invalid UUID format", field=field)
    return value


# =============================================================================
# Base API View
# =============================================================================

@method_decorator(csrf_exempt, name='dispatch')
class BaseAPIView(View):
    """
    View base para APIs JSON.

    Fornece:
    - Parsing de JSON
    - Acesso ao container DI
    - Tratamento de erros padronizado
    """

    def get_container(self):
        """Retorna container de DI."""
        return get_container()

    def get_service(self, service_name: str):
        """Obtém service do container."""
        return getattr(self.get_container(), service_name)()

    def parse_body(self, request: HttpRequest) -> Dict:
        """Parseia body JSON."""
        return parse_json_body(request)

    def handle_exception(self, e: Exception) -> JsonResponse:
        """
        Trata exceções e retorna resposta apropriada.

        - ValidationError, ConflictError, DomainException: 400
        - EntityNotFoundError: 404
        - Qualquer outra: 500 (logada)
        """
        if isinstance(e, ValidationError):
            return error_response(e.message, 400, field=e.field)

        if isinstance(e, EntityNotFoundError):
            return error_response(e.message, 404)

        if isinstance(e, ConflictError):
            logger.info(f"Conflito: {e.message}")
            return error_response(e.message, 400, field=e.field)

        if isinstance(e, DomainException):
            return error_response(e.message, 400)

        # Erro inesperado
        logger.exception(f"Erro inesperado na API: {e}")
        return error_response("Erro interno do servidor", 500)
