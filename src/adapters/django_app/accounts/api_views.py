"""
API Views JSON para o domínio de Contas.

Endpoints:
- POST /accounts/api/users/ - Cadastro de usuário (CreateUserInteractor)
- POST /accounts/api/accounts/ - Criar conta (AddAccountController)
- POST /accounts/api/teachers/ - Criar conta de professor (AddAccountTeacherController)

Formato:
- Entrada: JSON
- Saída: JSON com estrutura {success, data/error, meta}
"""

import json
import logging
from typing import Dict

from django.http import HttpRequest, JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from src.adapters.django_app.shared.presenters import (
    JsonPresenter,
    error_response,
    json_response,
    to_json_response,
)
from src.config.container import get_container
from src.core.shared.http import HttpRequest as CoreHttpRequest
from src.core.users.dtos import CreateUserInputDTO

logger = logging.getLogger(__name__)


# =============================================================================
# Helpers
# =============================================================================

def parse_json_body(request: HttpRequest) -> Dict:
    """
    Parseia body JSON do request.

    Args:
        request: HTTP request

    Returns:
        Dicionário com dados

    Raises:
        ValueError: Se JSON inválido ou não for um objeto
    """
    if not request.body:
        return {}

    try:
        data = json.loads(request.body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValueError(f"JSON inválido: {e}")

    if not isinstance(data, dict):
        raise ValueError("JSON inválido: esperado um objeto")

    return data


# =============================================================================
# Base API View
# =============================================================================

@method_decorator(csrf_exempt, name='dispatch')
class BaseAPIView(View):
    """
    View base para APIs JSON.

    Fornece:
    - Parsing de JSON (corpo malformado vira 400)
    - Acesso ao container DI
    """

    http_method_names = ['post', 'options']

    def get_container(self):
        """Retorna container de DI."""
        return get_container()

    def post(self, request: HttpRequest) -> JsonResponse:
        try:
            body = parse_json_body(request)
        except ValueError as e:
            return json_response(success=False, error=str(e), status=400)

        try:
            return self.handle(body)
        except Exception as e:
            # Falha de wiring (container/settings); casos de uso já tratam os próprios erros
            return error_response(e, status=500)

    def handle(self, body: Dict) -> JsonResponse:
        raise NotImplementedError


# =============================================================================
# Account API Views
# =============================================================================

class CreateUserAPIView(BaseAPIView):
    """
    API de cadastro de usuário.

    POST /accounts/api/users/

    Body:
        {"name", "cpf", "birthdate", "cellphone", "email", "password"}

    Respostas:
        201 - Usuário criado (sem a senha)
        400 - Campo inválido ou duplicado (meta.field indica qual)
        500 - Erro inesperado
    """

    def handle(self, body: Dict) -> JsonResponse:
        interactor = self.get_container().create_user_interactor(
            presenter=JsonPresenter(success_status=201)
        )
        return interactor.execute(CreateUserInputDTO.from_dict(body))


class AddAccountAPIView(BaseAPIView):
    """
    API para criar conta.

    POST /accounts/api/accounts/
    """

    def handle(self, body: Dict) -> JsonResponse:
        controller = self.get_container().add_account_controller()
        return to_json_response(controller.handle(CoreHttpRequest(body=body)))


class AddAccountTeacherAPIView(BaseAPIView):
    """
    API para criar conta de professor.

    POST /accounts/api/teachers/
    """

    def handle(self, body: Dict) -> JsonResponse:
        controller = self.get_container().add_account_teacher_controller()
        return to_json_response(controller.handle(CoreHttpRequest(body=body)))
