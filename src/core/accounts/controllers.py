"""
Controllers HTTP (agnósticos de framework) do Domínio de Contas.

Recebem HttpRequest, aplicam as guardas de entrada e delegam ao
Use Case. Toda exceção vira server_error (500); erros de entrada
viram bad_request (400).

Guardas, em ordem:
1. Campos obrigatórios presentes → MissingParamError(campo)
2. E-mail válido → InvalidParamError("email")
3. E-mail não cadastrado → DuplicatedFieldError("email")
"""

import logging
from typing import Tuple

from src.core.shared.exceptions import (
    DuplicatedFieldError,
    InvalidParamError,
    MissingParamError,
)
from src.core.shared.http import HttpRequest, HttpResponse, bad_request, ok, server_error
from src.core.shared.interfaces import DuplicatedField, Validation

from .dtos import AddAccountInputDTO, AddAccountTeacherInputDTO
from .use_cases import AddAccountService, AddAccountTeacherService

logger = logging.getLogger(__name__)


class _AccountController:

    required_fields: Tuple[str, ...] = ()

    def __init__(self, validation_email: Validation, duplicated_field: DuplicatedField):
        self.validation_email = validation_email
        self.duplicated_field = duplicated_field

    def _guard(self, body: dict, email: str):
        """
        Retorna HttpResponse de erro, ou None se a entrada é aceitável.

        email é o valor já normalizado pelo DTO, o mesmo que será persistido.
        """
        for field in self.required_fields:
            if not body.get(field):
                return bad_request(MissingParamError(field))

        if not self.validation_email.validate(email):
            return bad_request(InvalidParamError("email"))

        if self.duplicated_field.is_duplicated("email", email):
            return bad_request(DuplicatedFieldError("email"))

        return None


class AddAccountController(_AccountController):
    """
    Controller: Criar conta.

    Example:
        controller = AddAccountController(EmailValidation(), duplicated, service)
        response = controller.handle(HttpRequest(body={...}))
        response.status_code  # 200, 400 ou 500
    """

    required_fields = ("email", "password")

    def __init__(
        self,
        validation_email: Validation,
        duplicated_field: DuplicatedField,
        add_account: AddAccountService,
    ):
        super().__init__(validation_email, duplicated_field)
        self.add_account = add_account

    def handle(self, request: HttpRequest) -> HttpResponse:
        try:
            body = request.body or {}
            params = AddAccountInputDTO.from_dict(body)
            error_response = self._guard(body, params.email)
            if error_response is not None:
                return error_response

            account = self.add_account.add(params)
            return ok(account.to_dict())
        except Exception as error:
            logger.exception(f"AddAccount failed: {error!r}")
            return server_error(error)


class AddAccountTeacherController(_AccountController):
    """Controller: Criar conta de professor."""

    required_fields = ("name", "email", "password")

    def __init__(
        self,
        validation_email: Validation,
        duplicated_field: DuplicatedField,
        add_account_teacher: AddAccountTeacherService,
    ):
        super().__init__(validation_email, duplicated_field)
        self.add_account_teacher = add_account_teacher

    def handle(self, request: HttpRequest) -> HttpResponse:
        try:
            body = request.body or {}
            params = AddAccountTeacherInputDTO.from_dict(body)
            error_response = self._guard(body, params.email)
            if error_response is not None:
                return error_response

            if not self.add_account_teacher.add(params):
                return server_error(RuntimeError("Conta de professor não criada"))

            return ok(params.to_dict())
        except Exception as error:
            logger.exception(f"AddAccountTeacher failed: {error!r}")
            return server_error(error)
