"""
Shared Domain Components.

Contém componentes compartilhados entre todos os domínios:
- Exceções de domínio
- Interfaces (Ports)
- Validadores de formato
- Protocolo HTTP e Presenter padrão
"""

from .exceptions import (
    DomainException,
    ValidationError,
    MissingParamError,
    InvalidParamError,
    DuplicatedFieldError,
    NotificationError,
)
from .interfaces import (
    Presenter,
    Validator,
    Validation,
    DuplicatedField,
    Security,
    EmailSender,
    TemplateRenderer,
)
from .http import HttpRequest, HttpResponse, HttpPresenter

__all__ = [
    "DomainException",
    "ValidationError",
    "MissingParamError",
    "InvalidParamError",
    "DuplicatedFieldError",
    "NotificationError",
    "Presenter",
    "Validator",
    "Validation",
    "DuplicatedField",
    "Security",
    "EmailSender",
    "TemplateRenderer",
    "HttpRequest",
    "HttpResponse",
    "HttpPresenter",
]
