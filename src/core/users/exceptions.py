"""
Erros de validação do cadastro de usuário.

Um tipo por campo, todos subclasses de ValidationError para que o
Presenter os trate como erro de entrada (400).
"""

from src.core.shared.exceptions import NotificationError, ValidationError


class UserNameInvalidError(ValidationError):
    def __init__(self, message: str = "invalid name"):
        super().__init__(message, field="name", code="USER_NAME_INVALID")


class UserCPFInvalidError(ValidationError):
    def __init__(self, message: str = "invalid cpf"):
        super().__init__(message, field="cpf", code="USER_CPF_INVALID")


class UserBirthdateInvalidError(ValidationError):
    def __init__(self, message: str = "invalid birthdate"):
        super().__init__(message, field="birthdate", code="USER_BIRTHDATE_INVALID")


class UserCellphoneInvalidError(ValidationError):
    def __init__(self, message: str = "invalid cellphone"):
        super().__init__(message, field="cellphone", code="USER_CELLPHONE_INVALID")


class UserEmailInvalidError(ValidationError):
    def __init__(self, message: str = "invalid e-mail"):
        super().__init__(message, field="email", code="USER_EMAIL_INVALID")


class UserSendEmailError(NotificationError):
    """Falha ao enviar o e-mail de confirmação de cadastro."""

    def __init__(self, message: str = "could not send confirmation e-mail"):
        super().__init__(message, code="USER_SEND_EMAIL_FAILED")
