"""
Testes da API JSON de Usuários.

Testa:
- CRUD via django.test.Client
- Validações dos forms
- Mapeamento de erros (400, 404, 500)
- Verificação de token
"""

import uuid
from unittest.mock import Mock, patch

import pytest

from painel.core.auth.token import validar_token
from painel.core.shared.exceptions import DomainException


@pytest.fixture
def usuario_criado(send_json, usuario_payload):
    status, data = send_json('post', '/users/', usuario_payload)
    assert status == 201
    return data


class TestUsuarioCreateAPI:
    """POST /users/"""

    def test_criar_retorna_201_com_token(self, send_json, usuario_payload):
        status, data = send_json('post', '/users/', usuario_payload)

        assert status == 201
        assert set(data) == {'id', 'name', 'email', 'token'}
        assert validar_token(data['token'], 'ana@x.com', data['id'], '12345678901')

    def test_cpf_duplicado_400(self, send_json, usuario_payload, usuario_criado):
        usuario_payload['email'] = 'outra@x.com'

        status, data = send_json('post', '/users/', usuario_payload)

        assert status == 400
        assert data == {
            'message': 'CPF já cadastrado',
            'error': 'Bad Request',
            'statusCode': 400,
            'field': 'cpf',
        }

    def test_email_duplicado_400(self, send_json, usuario_payload, usuario_criado):
        usuario_payload['cpf'] = '10987654321'

        status, data = send_json('post', '/users/', usuario_payload)

        assert status == 400
        assert data['message'] == 'Email já cadastrado'

    @pytest.mark.parametrize('campo, valor', [
        ('name', 'An'),
        ('email', 'nao-e-email'),
        ('password', '12345'),
        ('cpf', '1234567890'),
        ('cpf', '1234567890a'),
        ('cpf', '\u0661' * 11),
        ('cpf', '\uff11' * 11),
        ('email', '"a:b"@x.com'),
    ])
    def test_campo_invalido_400(self, send_json, usuario_payload, campo, valor):
        usuario_payload[campo] = valor

        status, data = send_json('post', '/users/', usuario_payload)

        assert status == 400
        assert data['field'] == campo
        assert data['statusCode'] == 400

    def test_campo_ausente_400(self, send_json, usuario_payload):
        del usuario_payload['password']

        status, data = send_json('post', '/users/', usuario_payload)

        assert status == 400
        assert data['message'] == 'password: Senha é obrigatória'

    def test_json_invalido_400(self, send_json):
        status, data = send_json('post', '/users/', '{nao json')

        assert status == 400
        assert data['error'] == 'Bad Request'

    def test_body_lista_400(self, send_json):
        status, _ = send_json('post', '/users/', '[1, 2]')

        assert status == 400


class TestUsuarioListAPI:
    """GET /users/"""

    def test_lista_vazia(self, send_json):
        status, data = send_json('get', '/users/')

        assert status == 200
        assert data == []

    def test_lista_sem_dados_sensiveis(self, send_json, usuario_criado):
        status, data = send_json('get', '/users/')

        assert status == 200
        assert data == [{
            'id': usuario_criado['id'],
            'name': 'Ana',
            'email': 'ana@x.com',
        }]


class TestUsuarioEmailSeparadorAPI:
    """Email com ':' quebraria o token de identidade."""

    def test_criar_com_dois_pontos_400(self, send_json, usuario_payload):
        usuario_payload['email'] = '"a:b"@x.com'

        status, data = send_json('post', '/users/', usuario_payload)

        assert status == 400
        assert data['field'] == 'email'
        assert send_json('get', '/users/')[1] == []

    def test_atualizar_com_dois_pontos_400(self, send_json, usuario_criado):
        status, data = send_json('put', f"/users/{usuario_criado['id']}/", {
            'name': 'Ana',
            'email': '"a:b"@x.com',
            'password': 'secret1',
        })

        assert status == 400
        assert data['field'] == 'email'

    def test_token_emitido_sempre_valido(self, send_json, usuario_criado):
        status, data = send_json('post', f"/users/{usuario_criado['id']}/token/", {
            'token': usuario_criado['token'],
        })

        assert (status, data) == (200, {'valid': True})


class TestUsuarioDetailAPI:
    """PUT e DELETE /users/<id>/"""

    def test_atualizar_200(self, send_json, usuario_criado):
        status, data = send_json('put', f"/users/{usuario_criado['id']}/", {
            'name': 'Ana Maria',
            'email': 'ana.maria@x.com',
            'password': 'novasenha',
        })

        assert status == 200
        assert data == {
            'id': usuario_criado['id'],
            'name': 'Ana Maria',
            'email': 'ana.maria@x.com',
        }

    def test_atualizar_email_de_outro_400(self, send_json, usuario_payload, usuario_criado):
        send_json('post', '/users/', {
            'name': 'Bia',
            'email': 'bia@x.com',
            'password': 'secret1',
            'cpf': '22222222222',
        })

        status, data = send_json('put', f"/users/{usuario_criado['id']}/", {
            'name': 'Ana',
            'email': 'bia@x.com',
            'password': 'secret1',
        })

        assert status == 400
        assert data['message'] == 'Nome ou email já cadastrado'

    def test_atualizar_inexistente_404(self, send_json):
        status, data = send_json('put', f'/users/{uuid.uuid4()}/', {
            'name': 'Ana',
            'email': 'ana@x.com',
            'password': 'secret1',
        })

        assert status == 404
        assert data['error'] == 'Not Found'

    def test_id_invalido_400(self, send_json):
        status, data = send_json('delete', '/users/nao-e-uuid/')

        assert status == 400
        assert data['message'] == 'Invalid UUID format'

    def test_remover_204(self, client, send_json, usuario_criado):
        response = client.delete(f"/users/{usuario_criado['id']}/")

        assert response.status_code == 204
        assert response.content == b''
        assert send_json('get', '/users/')[1] == []

    def test_remover_inexistente_404(self, send_json):
        status, _ = send_json('delete', f'/users/{uuid.uuid4()}/')

        assert status == 404


class TestUsuarioTokenAPI:
    """POST /users/<id>/token/"""

    def test_token_valido(self, send_json, usuario_criado):
        status, data = send_json('post', f"/users/{usuario_criado['id']}/token/", {
            'token': usuario_criado['token'],
        })

        assert status == 200
        assert data == {'valid': True}

    def test_token_malformado(self, send_json, usuario_criado):
        status, data = send_json('post', f"/users/{usuario_criado['id']}/token/", {
            'token': '%%%',
        })

        assert status == 200
        assert data == {'valid': False}

    def test_token_usuario_inexistente_404(self, send_json, usuario_criado):
        status, _ = send_json('post', f'/users/{uuid.uuid4()}/token/', {
            'token': usuario_criado['token'],
        })

        assert status == 404


class TestUsuarioAPIErroInesperado:
    """Mapeamento de erros com container mockado."""

    def test_erro_inesperado_500(self, send_json):
        service = Mock()
        service.execute.side_effect = RuntimeError('boom')
        container = Mock()
        container.listar_usuarios_service.return_value = service

        with patch(
            'painel.adapters.django_app.shared.api.get_container',
            return_value=container,
        ):
            status, data = send_json('get', '/users/')

        assert status == 500
        assert data == {
            'message': 'Erro interno do servidor',
            'error': 'Internal Server Error',
            'statusCode': 500,
        }

    def test_erro_de_dominio_generico_400(self, send_json):
        service = Mock()
        service.execute.side_effect = DomainException('Operação inválida', 'X')
        container = Mock()
        container.listar_usuarios_service.return_value = service

        with patch(
            'painel.adapters.django_app.shared.api.get_container',
            return_value=container,
        ):
            status, data = send_json('get', '/users/')

        assert status == 400
        assert data == {
            'message': 'Operação inválida',
            'error': 'Bad Request',
            'statusCode': 400,
        }
