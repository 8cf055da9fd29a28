"""
Presenters Django - JsonResponse com envelope padronizado.

Formato:
    {"success": true,  "data": {...}}
    {"success": false, "error": "...", "meta": {"code": "...", "field": "..."}}
"""

import logging
from typing import Any, Dict

from django.http import JsonResponse

from src.core.shared.exceptions import DomainException
from src.core.shared.http import HttpResponse, status_for
from src.core.shared.interfaces import Presenter

logger = logging.getLogger(__name__)


def json_response(success: bool, data: Any = None, error: str = None,
                  status: int = 200, meta: Dict = None) -> JsonResponse:
    """
    Cria resposta JSON padronizada.

    Args:
        success: Se operação foi bem sucedida
        data: Dados da resposta
        error: Mensagem de erro (se aplicável)
        status: HTTP status code
        meta: Metadados adicionais

    Returns:
        JsonResponse formatada
    """
    response = {'success': success}

    if data is not None:
        response['data'] = data

    if error is not None:
        response['error'] = error

    if meta is not None:
        response['meta'] = meta

    return JsonResponse(response, status=status)


def error_response(error: Exception, status: int = None) -> JsonResponse:
    """Converte exceção em JsonResponse (status inferido se não informado)."""
    status = status or status_for(error)

    if status < 500 and isinstance(error, DomainException):
        meta = {'code': error.code}
        field = getattr(error, 'field', None)
        if field:
            meta['field'] = field
        return json_response(success=False, error=error.message, status=status, meta=meta)

    logger.exception(f"Erro inesperado na API: {error!r}", exc_info=error)
    return json_response(success=False, error="Erro interno do servidor", status=500)


def to_json_response(response: HttpResponse) -> JsonResponse:
    """Converte HttpResponse do Core (controllers) em JsonResponse."""
    if isinstance(response.body, Exception):
        return error_response(response.body, status=response.status_code)
    return json_response(success=True, data=response.body, status=response.status_code)


class JsonPresenter(Presenter[JsonResponse]):
    """
    Presenter que produz JsonResponse.

    Example:
        presenter = JsonPresenter(success_status=201)
        return interactor_with(presenter).execute(dto)
    """

    def __init__(self, success_status: int = 200):
        self.success_status = success_status

    def reply(self, payload: Dict[str, Any]) -> JsonResponse:
        return json_response(success=True, data=payload, status=self.success_status)

    def throw(self, error: Exception) -> JsonResponse:
        return error_response(error)
