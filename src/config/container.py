"""
Dependency Injection Container.

Configura e gerencia todas as dependências da aplicação.
Usa dependency-injector para lazy-loading e injeção automática.

Benefícios:
- Dependências explícitas
- Testabilidade (fácil mockar)
- Lazy-loading (criado sob demanda)

Padrões:
- Singleton: Uma instância para toda app (repositories, adapters)
- Factory: Nova instância por chamada (interactors, services, controllers)
- Selector: Implementação escolhida por configuração (envio de e-mail)

Adapters Django são importados sob demanda (lambda + __import__) para
que o container possa ser carregado antes de django.setup().
"""

from dependency_injector import containers, providers
from typing import Optional

from src.core.accounts.controllers import AddAccountController, AddAccountTeacherController
from src.core.accounts.ports import InMemoryAccountRepository
from src.core.accounts.use_cases import AddAccountService, AddAccountTeacherService
from src.core.shared.http import HttpPresenter
from src.core.shared.validators import EmailValidation, RegexValidator
from src.core.users.ports import InMemoryDuplicatedField, InMemoryUserRepository
from src.core.users.use_cases import ConfirmationEmailConfig, CreateUserInteractor


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organização:
    - Configuration: Valores vindos de django.conf.settings
    - Infrastructure: Security, e-mail, templates
    - Repositories: Persistência
    - Use Cases / Controllers

    Example:
        from src.config.container import get_container

        container = get_container()
        interactor = container.create_user_interactor(presenter=JsonPresenter())
        response = interactor.execute(input_dto)
    """

    # =========================================================================
    # Configuration
    # =========================================================================

    config = providers.Configuration()

    # =========================================================================
    # Infrastructure (Lazy - criado sob demanda)
    # =========================================================================

    validator = providers.Singleton(RegexValidator)

    email_validation = providers.Singleton(EmailValidation)

    security = providers.Singleton(
        lambda: __import__(
            'src.adapters.django_app.shared.security',
            fromlist=['DjangoSecurity']
        ).DjangoSecurity()
    )

    template_renderer = providers.Singleton(
        lambda: __import__(
            'src.adapters.django_app.shared.notifications',
            fromlist=['DjangoTemplateRenderer']
        ).DjangoTemplateRenderer()
    )

    email_sender = providers.Selector(
        config.email_delivery_mode,
        sync=providers.Singleton(
            lambda: __import__(
                'src.adapters.django_app.shared.notifications',
                fromlist=['DjangoEmailSender']
            ).DjangoEmailSender()
        ),
        celery=providers.Singleton(
            lambda: __import__(
                'src.adapters.django_app.shared.notifications',
                fromlist=['CeleryEmailSender']
            ).CeleryEmailSender()
        ),
    )

    confirmation_email_config = providers.Singleton(
        ConfirmationEmailConfig,
        enabled=config.confirmation_email.enabled,
        email_from=config.confirmation_email.email_from,
        subject=config.confirmation_email.subject,
        template=config.confirmation_email.template,
    )

    # =========================================================================
    # Repositories (Singleton - uma instância por app)
    # =========================================================================

    user_repository = providers.Singleton(
        lambda: __import__(
            'src.adapters.django_app.accounts.repositories',
            fromlist=['DjangoUserRepository']
        ).DjangoUserRepository()
    )

    account_repository = providers.Singleton(
        lambda: __import__(
            'src.adapters.django_app.accounts.repositories',
            fromlist=['DjangoAccountRepository']
        ).DjangoAccountRepository()
    )

    duplicated_field = providers.Singleton(
        lambda: __import__(
            'src.adapters.django_app.accounts.repositories',
            fromlist=['DjangoDuplicatedField']
        ).DjangoDuplicatedField()
    )

    # =========================================================================
    # Use Cases (Factory - nova instância por chamada)
    # =========================================================================

    # Cadastro de usuário (presenter normalmente sobrescrito pela view)
    create_user_interactor = providers.Factory(
        CreateUserInteractor,
        user_repository=user_repository,
        presenter=providers.Factory(HttpPresenter),
        validation=validator,
        security=security,
        duplicated_field=duplicated_field,
        email=email_sender,
        template=template_renderer,
        email_config=confirmation_email_config,
    )

    add_account_service = providers.Factory(
        AddAccountService,
        account_repo=account_repository,
        security=security,
    )

    add_account_teacher_service = providers.Factory(
        AddAccountTeacherService,
        account_repo=account_repository,
        security=security,
    )

    # =========================================================================
    # Controllers
    # =========================================================================

    add_account_controller = providers.Factory(
        AddAccountController,
        validation_email=email_validation,
        duplicated_field=duplicated_field,
        add_account=add_account_service,
    )

    add_account_teacher_controller = providers.Factory(
        AddAccountTeacherController,
        validation_email=email_validation,
        duplicated_field=duplicated_field,
        add_account_teacher=add_account_teacher_service,
    )


def settings_config() -> dict:
    """
    Extrai do Django settings os valores usados pelo container.

    Returns:
        Dict para Configuration.from_dict
    """
    from django.conf import settings

    return {
        'email_delivery_mode': getattr(settings, 'EMAIL_DELIVERY_MODE', 'sync'),
        'confirmation_email': {
            'enabled': getattr(settings, 'CONFIRMATION_EMAIL_ENABLED', False),
            'email_from': getattr(settings, 'DEFAULT_FROM_EMAIL', 'no-reply@localhost'),
            'subject': getattr(settings, 'CONFIRMATION_EMAIL_SUBJECT', 'Confirme seu cadastro'),
            'template': getattr(
                settings,
                'CONFIRMATION_EMAIL_TEMPLATE',
                'accounts/email/confirmation.html',
            ),
        },
    }


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Retorna instância global do container.

    Cria se não existir (lazy initialization), carregando a
    configuração do Django settings.

    Returns:
        Container configurado
    """
    global _container

    if _container is None:
        _container = Container()
        _container.config.from_dict(settings_config())

    return _container


def reset_container() -> None:
    """
    Reset do container (para testes).

    Permite criar novo container limpo.
    """
    global _container
    _container = None


# =============================================================================
# Testing Container
# =============================================================================

@containers.copy(Container)
class TestingContainer(Container):
    """
    Container para testes com implementações em memória.

    containers.copy religa os providers herdados (services, controllers)
    aos repositórios sobrescritos abaixo.

    Repositórios e verificação de duplicidade são substituídos por
    versões InMemory; e-mail usa o backend configurado em settings
    (locmem nos testes).

    Example:
        container = TestingContainer()
        container.config.from_dict(settings_config())
        controller = container.add_account_controller()
    """

    __test__ = False

    user_repository = providers.Singleton(InMemoryUserRepository)

    account_repository = providers.Singleton(InMemoryAccountRepository)

    duplicated_field = providers.Singleton(InMemoryDuplicatedField, account_repository)

    user_duplicated_field = providers.Singleton(InMemoryDuplicatedField, user_repository)

    create_user_interactor = providers.Factory(
        CreateUserInteractor,
        user_repository=user_repository,
        presenter=providers.Factory(HttpPresenter),
        validation=Container.validator,
        security=Container.security,
        duplicated_field=user_duplicated_field,
        email=Container.email_sender,
        template=Container.template_renderer,
        email_config=Container.confirmation_email_config,
    )
