"""
Configuração pytest para testes com Django.

Este arquivo configura:
- Django settings mínimos para testes (sem banco de dados)
- Reset do container DI entre testes
- Helpers para requisições JSON
"""

import json

import pytest


def pytest_configure(config):
    """Configura Django antes dos testes."""
    import django
    from django.conf import settings

    if not settings.configured:
        settings.configure(
            DEBUG=False,
            SECRET_KEY='test-secret-key',
            ALLOWED_HOSTS=['testserver'],
            ROOT_URLCONF='painel.config.urls',
            INSTALLED_APPS=[],
            MIDDLEWARE=[],
            DATABASES={},
            APPEND_SLASH=False,
            USE_TZ=True,
            TIME_ZONE='America/Sao_Paulo',
            FORNECEDOR_CNPJ_UNICO=False,
        )
        django.setup()


@pytest.fixture(autouse=True)
def fresh_container():
    """Cada teste começa com coleções vazias."""
    from painel.config.container import reset_container

    reset_container()
    yield
    reset_container()


@pytest.fixture
def client():
    """Django test client."""
    from django.test import Client

    return Client()


@pytest.fixture
def send_json(client):
    """
    Envia body JSON e devolve (status, payload).

    Example:
        status, data = send_json('post', '/users/', {...})
    """

    def _send(method, path, body=None):
        kwargs = {}
        if body is not None:
            kwargs = {
                'data': body if isinstance(body, str) else json.dumps(body),
                'content_type': 'application/json',
            }
        response = getattr(client, method)(path, **kwargs)
        payload = json.loads(response.content) if response.content else None
        return response.status_code, payload

    return _send


@pytest.fixture
def usuario_payload():
    return {
        'name': 'Ana',
        'email': 'ana@x.com',
        'password': 'secret1',
        'cpf': '12345678901',
    }


@pytest.fixture
def fornecedor_payload():
    return {
        'name': 'ACME Insumos',
        'cnpj': '12345678000199',
        'contact': '912345678',
    }


@pytest.fixture
def agendamento_payload():
    return {
        'name': 'Compra de farinha',
        'price': 150.0,
        'description': 'Farinha de trigo tipo 1',
        'quantity': 10,
        'dataEntrega': '2026-11-01T09:00:00Z',
        'xml': '<nfe><numero>123</numero></nfe>',
        'commits': 'primeira entrega',
        'status': 'pendente',
        'userCreated': {'id': 'u1', 'name': 'Ana', 'email': 'ana@x.com'},
        'fornecedor': {'id': 's1', 'name': 'ACME Insumos', 'contact': '912345678'},
    }
