"""
Testes para a API JSON do domínio de Contas.

Testa:
- Cadastro de usuário ponta a ponta (view → container → ORM)
- Criação de conta e de conta de professor
- JSON malformado
- Falhas inesperadas (container mockado)
"""

import json

import pytest
from unittest.mock import Mock, patch

from django.core import mail
from django.test import RequestFactory, Client

from src.adapters.django_app.accounts import api_views
from src.adapters.django_app.accounts.models import AccountModel
from src.core.shared.http import server_error


USERS_URL = '/accounts/api/users/'
ACCOUNTS_URL = '/accounts/api/accounts/'
TEACHERS_URL = '/accounts/api/teachers/'


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def rf():
    """Request Factory para criar requests."""
    return RequestFactory()


@pytest.fixture
def client():
    """Django test client."""
    return Client()


def post_json(client, url, data):
    return client.post(url, data=json.dumps(data), content_type='application/json')


# =============================================================================
# Cadastro de usuário
# =============================================================================

@pytest.mark.django_db
class TestCreateUserAPIView:
    """Testes para POST /accounts/api/users/."""

    def test_cria_usuario(self, client, user_payload):
        response = post_json(client, USERS_URL, user_payload)

        assert response.status_code == 201
        data = json.loads(response.content)
        assert data['success'] is True
        assert data['data']['cpf'] == '52998224725'
        assert 'password' not in data['data']

        model = AccountModel.objects.get(id=data['data']['id'])
        assert model.password != user_payload['password']
        assert model.kind == 'user'

    def test_campo_invalido(self, client, user_payload):
        response = post_json(client, USERS_URL, {**user_payload, 'cpf': '111.111.111-11'})

        assert response.status_code == 400
        data = json.loads(response.content)
        assert data['success'] is False
        assert data['meta'] == {'code': 'USER_CPF_INVALID', 'field': 'cpf'}
        assert AccountModel.objects.count() == 0

    def test_cpf_duplicado(self, client, user_payload):
        post_json(client, USERS_URL, user_payload)

        response = post_json(client, USERS_URL, {**user_payload, 'email': 'outra@example.com'})

        assert response.status_code == 400
        assert json.loads(response.content)['meta'] == {'code': 'DUPLICATED_FIELD', 'field': 'cpf'}

    def test_email_duplicado(self, client, user_payload):
        post_json(client, USERS_URL, user_payload)

        response = post_json(client, USERS_URL, {**user_payload, 'cpf': '111.444.777-35'})

        assert response.status_code == 400
        assert json.loads(response.content)['meta']['field'] == 'email'

    @pytest.mark.parametrize("email", [" maria@example.com", "maria@example.com ", "Maria@Example.COM"])
    def test_email_duplicado_com_espacos_ou_maiusculas(self, client, user_payload, email):
        post_json(client, USERS_URL, user_payload)

        response = post_json(client, USERS_URL, {**user_payload, 'cpf': '111.444.777-35', 'email': email})

        assert response.status_code == 400
        assert json.loads(response.content)['meta'] == {'code': 'DUPLICATED_FIELD', 'field': 'email'}
        assert list(AccountModel.objects.values_list('email', flat=True)) == ['maria@example.com']

    def test_campos_gravados_sem_espacos(self, client, user_payload):
        payload = {
            **user_payload,
            'name': '  Maria da Silva ',
            'birthdate': ' 1990-05-17 ',
            'cellphone': ' (11) 98765-4321 ',
            'email': ' Maria@Example.com ',
        }

        response = post_json(client, USERS_URL, payload)

        assert response.status_code == 201
        model = AccountModel.objects.get(id=json.loads(response.content)['data']['id'])
        assert model.name == 'Maria da Silva'
        assert model.birthdate == '1990-05-17'
        assert model.cellphone == '(11) 98765-4321'
        assert model.email == 'maria@example.com'

    def test_sem_email_de_confirmacao_por_padrao(self, client, user_payload):
        post_json(client, USERS_URL, user_payload)

        assert len(mail.outbox) == 0

    def test_email_de_confirmacao_habilitado(self, client, user_payload, settings):
        settings.CONFIRMATION_EMAIL_ENABLED = True
        settings.CONFIRMATION_EMAIL_SUBJECT = 'Bem-vindo'

        response = post_json(client, USERS_URL, user_payload)

        assert response.status_code == 201
        assert len(mail.outbox) == 1
        assert mail.outbox[0].to == ['maria@example.com']
        assert mail.outbox[0].subject == 'Bem-vindo'
        assert json.loads(response.content)['data']['id'] in mail.outbox[0].body

    def test_json_malformado(self, client):
        response = client.post(USERS_URL, data='{nome: ', content_type='application/json')

        assert response.status_code == 400
        assert json.loads(response.content)['success'] is False

    def test_json_nao_objeto(self, client):
        response = post_json(client, USERS_URL, ['lista'])

        assert response.status_code == 400

    def test_get_nao_permitido(self, client):
        assert client.get(USERS_URL).status_code == 405


# =============================================================================
# Contas
# =============================================================================

@pytest.mark.django_db
class TestAddAccountAPIView:
    """Testes para POST /accounts/api/accounts/."""

    def test_cria_conta(self, client, account_payload):
        response = post_json(client, ACCOUNTS_URL, account_payload)

        assert response.status_code == 200
        data = json.loads(response.content)
        assert data['data']['email'] == 'joao@example.com'
        assert data['data']['kind'] == 'user'

    def test_campo_ausente(self, client):
        response = post_json(client, ACCOUNTS_URL, {'email': 'joao@example.com'})

        assert response.status_code == 400
        data = json.loads(response.content)
        assert data['error'] == 'Missing param: password'
        assert data['meta'] == {'code': 'MISSING_PARAM', 'field': 'password'}

    def test_email_invalido(self, client, account_payload):
        response = post_json(client, ACCOUNTS_URL, {**account_payload, 'email': 'joao@'})

        assert response.status_code == 400
        assert json.loads(response.content)['meta']['code'] == 'INVALID_PARAM'

    def test_email_duplicado(self, client, account_payload):
        post_json(client, ACCOUNTS_URL, account_payload)

        response = post_json(client, ACCOUNTS_URL, account_payload)

        assert response.status_code == 400
        assert json.loads(response.content)['meta']['code'] == 'DUPLICATED_FIELD'

    def test_email_duplicado_com_espacos(self, client, account_payload):
        post_json(client, ACCOUNTS_URL, account_payload)

        response = post_json(client, ACCOUNTS_URL, {**account_payload, 'email': ' JOAO@example.com'})

        assert response.status_code == 400
        assert json.loads(response.content)['meta'] == {'code': 'DUPLICATED_FIELD', 'field': 'email'}
        assert AccountModel.objects.count() == 1


@pytest.mark.django_db
class TestAddAccountTeacherAPIView:
    """Testes para POST /accounts/api/teachers/."""

    def test_cria_professor(self, client, teacher_payload):
        response = post_json(client, TEACHERS_URL, teacher_payload)

        assert response.status_code == 200
        data = json.loads(response.content)['data']
        assert 'password' not in data
        assert data['whatsapp'] == '(11) 91234-5678'
        assert AccountModel.objects.get(email='joao@example.com').kind == 'teacher'

    def test_nome_obrigatorio(self, client, teacher_payload):
        body = {k: v for k, v in teacher_payload.items() if k != 'name'}

        response = post_json(client, TEACHERS_URL, body)

        assert response.status_code == 400
        assert json.loads(response.content)['meta']['field'] == 'name'


# =============================================================================
# Falhas inesperadas
# =============================================================================

class TestUnexpectedErrors:
    """Erros fora do domínio viram 500 sem vazar detalhes."""

    def test_controller_500(self, rf, account_payload):
        controller = Mock()
        controller.handle.return_value = server_error(RuntimeError("senha do banco"))
        container = Mock()
        container.add_account_controller.return_value = controller

        with patch.object(api_views, 'get_container', return_value=container):
            request = rf.post(ACCOUNTS_URL, data=json.dumps(account_payload), content_type='application/json')
            response = api_views.AddAccountAPIView.as_view()(request)

        assert response.status_code == 500
        data = json.loads(response.content)
        assert data == {'success': False, 'error': 'Erro interno do servidor'}

    def test_falha_de_wiring_500(self, rf, user_payload):
        with patch.object(api_views, 'get_container', side_effect=RuntimeError("settings")):
            request = rf.post(USERS_URL, data=json.dumps(user_payload), content_type='application/json')
            response = api_views.CreateUserAPIView.as_view()(request)

        assert response.status_code == 500


class TestHealth:

    def test_health(self, client):
        response = client.get('/health/')

        assert response.status_code == 200
        assert json.loads(response.content) == {'status': 'ok'}
