"""
Use Cases (Application Services) do Domínio de Usuários.

CreateUserInteractor orquestra o pipeline de cadastro:

    Validator (por campo, fail-fast)
      → DuplicatedField (opcional)
      → normalização do CPF
      → Security (hash da senha)
      → UserRepository.save
      → EmailSender + TemplateRenderer (opcional)
      → Presenter

Política de falhas:
    Toda exceção lançada no pipeline é capturada em um único ponto e
    entregue ao Presenter. O Interactor nunca deixa exceção escapar;
    execute() retorna o que o Presenter produzir.

Princípios:
- Um Use Case = Uma operação de negócio
- Dependências injetadas (DI)
- Sem lógica de infraestrutura
"""

from dataclasses import dataclass
from typing import Any, Optional
import logging

from src.core.shared.exceptions import DuplicatedFieldError
from src.core.shared.interfaces import (
    DuplicatedField,
    EmailSender,
    Presenter,
    Security,
    TemplateRenderer,
    Validator,
)
from src.core.shared.validators import normalize_cpf

from .dtos import CreateUserInputDTO, CreateUserOutputDTO
from .entities import UserEntity
from .exceptions import (
    UserBirthdateInvalidError,
    UserCellphoneInvalidError,
    UserCPFInvalidError,
    UserEmailInvalidError,
    UserNameInvalidError,
    UserSendEmailError,
)
from .ports import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfirmationEmailConfig:
    """
    Configuração do e-mail de confirmação de cadastro.

    Attributes:
        enabled: Se o envio faz parte do pipeline
        email_from: Remetente
        subject: Assunto
        template: Caminho do template HTML
    """

    enabled: bool = False
    email_from: str = "no-reply@localhost"
    subject: str = "Confirme seu cadastro"
    template: str = "accounts/email/confirmation.html"


class CreateUserInteractor:
    """
    Use Case: Cadastrar um novo usuário.

    Fluxo (estritamente sequencial, fail-fast):
    1. Nome presente
    2. CPF válido (dígitos verificadores)
    3. Data de nascimento válida
    4. Celular válido
    5. E-mail válido
    6. CPF e e-mail não duplicados (se duplicated_field injetado)
    7. Normalizar CPF
    8. Hash da senha
    9. Persistir via repositório
    10. Enviar e-mail de confirmação (se habilitado)
    11. Presenter.reply com o registro criado

    Example:
        interactor = CreateUserInteractor(
            user_repository=repo,
            presenter=HttpPresenter(),
            validation=RegexValidator(),
            security=security,
        )
        response = interactor.execute(CreateUserInputDTO(...))
    """

    def __init__(
        self,
        user_repository: UserRepository,
        presenter: Presenter,
        validation: Validator,
        security: Security,
        duplicated_field: Optional[DuplicatedField] = None,
        email: Optional[EmailSender] = None,
        template: Optional[TemplateRenderer] = None,
        email_config: Optional[ConfirmationEmailConfig] = None,
    ):
        """
        Inicializa interactor com dependências injetadas.

        Args:
            user_repository: Repositório para persistência
            presenter: Formata resposta de sucesso/erro
            validation: Validação de formato dos campos
            security: Hash de senha
            duplicated_field: Verificação de duplicidade (opcional)
            email: Transporte de e-mail (opcional)
            template: Renderizador do e-mail (opcional)
            email_config: Configuração do e-mail de confirmação
        """
        self.user_repository = user_repository
        self.presenter = presenter
        self.validation = validation
        self.security = security
        self.duplicated_field = duplicated_field
        self.email = email
        self.template = template
        self.email_config = email_config or ConfirmationEmailConfig()

    def execute(self, data: CreateUserInputDTO) -> Any:
        """
        Executa o cadastro.

        Args:
            data: Payload de cadastro

        Returns:
            Resposta produzida pelo Presenter (sucesso ou erro)
        """
        try:
            self._validate(data)
            self._check_duplicates(data)

            data = data.with_changes(
                cpf=normalize_cpf(data.cpf),
                password=self.security.encrypt_password(data.password),
            )

            user = self.user_repository.save(data)
            logger.info(f"User created: {user.id}")

            self._send_confirmation(user)

            return self.presenter.reply(CreateUserOutputDTO.from_entity(user).to_dict())
        except Exception as error:
            logger.info(f"User creation failed: {error!r}")
            return self.presenter.throw(error)

    def _validate(self, data: CreateUserInputDTO) -> None:
        if not data.name:
            raise UserNameInvalidError()

        if not self.validation.is_cpf(data.cpf):
            raise UserCPFInvalidError()

        if not self.validation.is_date(data.birthdate):
            raise UserBirthdateInvalidError()

        if not self.validation.is_cellphone(data.cellphone):
            raise UserCellphoneInvalidError()

        if not self.validation.is_email(data.email):
            raise UserEmailInvalidError()

    def _check_duplicates(self, data: CreateUserInputDTO) -> None:
        if self.duplicated_field is None:
            return

        if self.duplicated_field.is_duplicated("cpf", normalize_cpf(data.cpf)):
            raise DuplicatedFieldError("cpf")

        if self.duplicated_field.is_duplicated("email", data.email):
            raise DuplicatedFieldError("email")

    def _send_confirmation(self, user: UserEntity) -> None:
        config = self.email_config
        if not config.enabled or self.email is None or self.template is None:
            return

        html = self.template.render_html(
            config.template,
            {"email": user.email, "name": user.name, "id": user.id},
        )
        sent = self.email.send_email(config.email_from, user.email, config.subject, html)

        if not sent:
            raise UserSendEmailError()

        logger.info(f"Confirmation e-mail sent to user {user.id}")
