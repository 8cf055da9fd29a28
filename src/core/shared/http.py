"""
Protocolo HTTP agnóstico de framework.

Estruturas usadas pelos controllers e pelo HttpPresenter do Core.
Os adapters (Django) convertem HttpRequest/HttpResponse de/para os
objetos do framework.

Helpers:
- ok: 200 com payload
- created: 201 com payload
- bad_request: 400 com o erro como corpo
- server_error: 500 com o erro como corpo
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .exceptions import DomainException
from .interfaces import Presenter

logger = logging.getLogger(__name__)


@dataclass
class HttpRequest:
    """Requisição com corpo já decodificado."""

    body: Dict[str, Any] = field(default_factory=dict)


@dataclass
class HttpResponse:
    """
    Resposta com status e corpo.

    O corpo é o payload em sucesso ou a própria exceção em erro,
    deixando a serialização para o adapter.
    """

    status_code: int
    body: Any = None


def ok(data: Any) -> HttpResponse:
    return HttpResponse(status_code=200, body=data)


def created(data: Any) -> HttpResponse:
    return HttpResponse(status_code=201, body=data)


def bad_request(error: Exception) -> HttpResponse:
    return HttpResponse(status_code=400, body=error)


def server_error(error: Exception) -> HttpResponse:
    return HttpResponse(status_code=500, body=error)


def status_for(error: Exception) -> int:
    """
    Mapeia exceção para status HTTP.

    - ValidationError (inclui MissingParam/InvalidParam): 400
    - DuplicatedFieldError: 400
    - Demais DomainException: 400
    - Qualquer outra exceção: 500
    """
    if isinstance(error, DomainException):
        return 400
    return 500


class HttpPresenter(Presenter[HttpResponse]):
    """
    Presenter padrão do Core, produz HttpResponse.

    Example:
        presenter = HttpPresenter()
        response = CreateUserInteractor(..., presenter=presenter).execute(dto)
        response.status_code  # 200 ou 4xx/5xx
    """

    def __init__(self, success_status: int = 200):
        self.success_status = success_status
        self.response: Optional[HttpResponse] = None

    def reply(self, payload: Dict[str, Any]) -> HttpResponse:
        self.response = HttpResponse(status_code=self.success_status, body=payload)
        return self.response

    def throw(self, error: Exception) -> HttpResponse:
        status = status_for(error)
        if status >= 500:
            logger.error(f"Unexpected error: {error!r}")
        self.response = HttpResponse(status_code=status, body=error)
        return self.response
