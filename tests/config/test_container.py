"""
Testes do Container de Dependency Injection.
"""

import pytest

from src.adapters.django_app.accounts.repositories import DjangoDuplicatedField, DjangoUserRepository
from src.adapters.django_app.shared.notifications import CeleryEmailSender, DjangoEmailSender
from src.adapters.django_app.shared.presenters import JsonPresenter
from src.config.container import TestingContainer, get_container, reset_container, settings_config
from src.core.accounts.controllers import AddAccountController, AddAccountTeacherController
from src.core.shared.http import HttpRequest
from src.core.users.use_cases import CreateUserInteractor


class TestGetContainer:

    def test_singleton_global(self):
        assert get_container() is get_container()

    def test_reset(self):
        first = get_container()
        reset_container()

        assert get_container() is not first

    def test_configuracao_vem_do_settings(self, settings):
        settings.CONFIRMATION_EMAIL_ENABLED = True
        settings.CONFIRMATION_EMAIL_SUBJECT = 'Olá'

        config = get_container().confirmation_email_config()

        assert config.enabled is True
        assert config.subject == 'Olá'
        assert config.email_from == 'no-reply@cadastro.test'

    def test_settings_config(self):
        config = settings_config()

        assert config['email_delivery_mode'] == 'sync'
        assert config['confirmation_email']['enabled'] is False


class TestWiring:

    def test_create_user_interactor(self):
        interactor = get_container().create_user_interactor(presenter=JsonPresenter(success_status=201))

        assert isinstance(interactor, CreateUserInteractor)
        assert isinstance(interactor.presenter, JsonPresenter)
        assert isinstance(interactor.user_repository, DjangoUserRepository)
        assert isinstance(interactor.duplicated_field, DjangoDuplicatedField)

    def test_controllers(self):
        container = get_container()

        assert isinstance(container.add_account_controller(), AddAccountController)
        assert isinstance(container.add_account_teacher_controller(), AddAccountTeacherController)

    @pytest.mark.parametrize("mode, sender_class", [
        ('sync', DjangoEmailSender),
        ('celery', CeleryEmailSender),
    ])
    def test_modo_de_entrega(self, settings, mode, sender_class):
        settings.EMAIL_DELIVERY_MODE = mode

        assert isinstance(get_container().email_sender(), sender_class)


class TestTestingContainer:

    @pytest.fixture
    def container(self):
        container = TestingContainer()
        container.config.from_dict(settings_config())
        return container

    def test_cadastro_em_memoria(self, container, user_request):
        repo = container.user_repository()
        interactor = container.create_user_interactor()

        response = interactor.execute(user_request)

        assert response.status_code == 200
        assert repo.count() == 1

        duplicated = interactor.execute(user_request)
        assert duplicated.status_code == 400

    def test_conta_em_memoria(self, container, account_payload):
        controller = container.add_account_controller()

        assert controller.handle(HttpRequest(body=account_payload)).status_code == 200
        assert controller.handle(HttpRequest(body=account_payload)).status_code == 400
        assert container.account_repository().count() == 1
