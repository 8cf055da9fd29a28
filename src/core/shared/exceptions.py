"""
Exceções de Domínio do serviço de Cadastro.

Este módulo define exceções específicas do domínio que permitem
comunicar erros de forma clara e tipada entre as camadas. O Presenter
traduz cada tipo para o formato de resposta esperado (status HTTP + corpo).

Hierarquia:
    DomainException (base)
    ├── ValidationError (validação de entrada)
    │   ├── MissingParamError (campo obrigatório ausente)
    │   └── InvalidParamError (campo em formato inválido)
    ├── DuplicatedFieldError (valor único já cadastrado)
    └── NotificationError (falha no envio de notificação)
"""


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Todas as exceções específicas do domínio devem herdar desta classe.
    Isso permite capturar qualquer erro de domínio de forma genérica.

    Example:
        try:
            interactor.execute(request)
        except DomainException as e:
            logger.error(f"Erro de domínio: {e}")
    """

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __eq__(self, other) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash((type(self), self.code, self.message))

    def to_dict(self) -> dict:
        """Serializa exceção para dicionário (útil para APIs)."""
        return {
            "error": self.code,
            "message": self.message,
        }


class ValidationError(DomainException):
    """
    Erro de validação de dados de entrada.

    Lançada quando dados fornecidos não atendem aos requisitos
    mínimos para processamento.

    Example:
        if not validator.is_email(email):
            raise ValidationError("E-mail inválido", field="email")
    """

    def __init__(self, message: str, field: str = None, code: str = None):
        self.field = field
        if code is None:
            code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result


class MissingParamError(ValidationError):
    """Campo obrigatório ausente na requisição."""

    def __init__(self, param_name: str):
        super().__init__(
            f"Missing param: {param_name}",
            field=param_name,
            code="MISSING_PARAM",
        )


class InvalidParamError(ValidationError):
    """Campo presente, mas em formato inválido."""

    def __init__(self, param_name: str):
        super().__init__(
            f"Invalid param: {param_name}",
            field=param_name,
            code="INVALID_PARAM",
        )


class DuplicatedFieldError(DomainException):
    """
    Valor de campo único já cadastrado.

    Lançada pela verificação de duplicidade antes da persistência
    (ex: e-mail ou CPF já em uso).
    """

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Duplicated field: {field}", "DUPLICATED_FIELD")

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["field"] = self.field
        return result


class NotificationError(DomainException):
    """Falha ao enviar notificação (e-mail de confirmação, etc)."""

    def __init__(self, message: str, code: str = None):
        super().__init__(message, code or "NOTIFICATION_ERROR")
