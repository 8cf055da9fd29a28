"""
Repositórios Django para persistência de Usuários e Contas.

Implementam as interfaces (Ports) definidas no Core.
São DRIVEN ADAPTERS - acionados pelo Core em resposta a operações.

Responsabilidades:
- Implementar UserRepository, AccountRepository e DuplicatedField
- Mapear entities para models e vice-versa
- Executar queries no banco via ORM

Princípios:
- Repository não contém lógica de negócio
- Usa Mapper para conversões
- Trata apenas persistência
"""

from typing import List, Optional
import logging

from src.core.accounts.dtos import AddAccountInputDTO
from src.core.accounts.entities import AccountEntity, AccountKind
from src.core.shared.validators import normalize_cpf, normalize_email
from src.core.users.dtos import CreateUserInputDTO
from src.core.users.entities import UserEntity, new_id
from src.core.users.ports import UNIQUE_FIELDS

from .mappers import AccountMapper
from .models import AccountModel

logger = logging.getLogger(__name__)


def _check_unique_field(field: str) -> None:
    if field not in UNIQUE_FIELDS:
        raise ValueError(f"Campo não pesquisável: {field}")


class DjangoUserRepository:
    """
    Implementação Django do UserRepository.

    Persiste o cadastro como AccountModel(kind="user").

    Example:
        repo = DjangoUserRepository()
        user = repo.save(request)
        user.id, user.created_at
    """

    def __init__(self):
        self._mapper = AccountMapper()

    def save(self, request: CreateUserInputDTO) -> UserEntity:
        """
        Persiste cadastro validado.

        Atribui UUID e timestamp de criação (default do model).

        Raises:
            django.db.IntegrityError: Se e-mail/CPF já existem
        """
        model = AccountModel.objects.create(
            id=new_id(),
            **self._mapper.user_request_to_fields(request),
        )
        logger.info(f"User saved: {model.id}")
        return self._mapper.to_user_entity(model)

    def get_by_id(self, user_id: str) -> Optional[UserEntity]:
        try:
            model = AccountModel.objects.get(id=user_id)
            return self._mapper.to_user_entity(model)
        except AccountModel.DoesNotExist:
            logger.debug(f"User not found: {user_id}")
            return None

    def find_by_field(self, field: str, value: str) -> Optional[UserEntity]:
        _check_unique_field(field)
        model = AccountModel.objects.filter(**{field: value}).first()
        return self._mapper.to_user_entity(model) if model else None


class DjangoAccountRepository:
    """Implementação Django do AccountRepository."""

    def __init__(self):
        self._mapper = AccountMapper()

    def add(self, params: AddAccountInputDTO, kind: AccountKind) -> AccountEntity:
        model = AccountModel.objects.create(
            id=new_id(),
            **self._mapper.account_params_to_fields(params, kind),
        )
        logger.info(f"Account saved: {model.id} ({kind.value})")
        return self._mapper.to_account_entity(model)

    def get_by_id(self, account_id: str) -> Optional[AccountEntity]:
        try:
            model = AccountModel.objects.get(id=account_id)
            return self._mapper.to_account_entity(model)
        except AccountModel.DoesNotExist:
            logger.debug(f"Account not found: {account_id}")
            return None

    def find_by_field(self, field: str, value: str) -> Optional[AccountEntity]:
        _check_unique_field(field)
        model = AccountModel.objects.filter(**{field: value}).first()
        return self._mapper.to_account_entity(model) if model else None

    def list_by_kind(self, kind: AccountKind) -> List[AccountEntity]:
        models = AccountModel.objects.filter(kind=kind.value)
        return self._mapper.to_account_entity_list(models)

    def count(self) -> int:
        return AccountModel.objects.count()


class DjangoDuplicatedField:
    """
    Implementação Django do DuplicatedField.

    Consulta somente leitura. Erros de banco propagam sem tradução
    e viram resposta 500 no Presenter.
    """

    def is_duplicated(self, field: str, value: str) -> bool:
        _check_unique_field(field)
        if field == 'cpf':
            value = normalize_cpf(value)
        elif field == 'email':
            value = normalize_email(value)
        duplicated = AccountModel.objects.filter(**{field: value}).exists()
        if duplicated:
            logger.debug(f"Duplicated {field} found")
        return duplicated
