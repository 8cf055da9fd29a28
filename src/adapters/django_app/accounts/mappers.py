"""
Mappers para conversão entre Entities (Core) e Models (Django).

Responsabilidades:
- AccountModel → UserEntity (pipeline de cadastro de usuário)
- AccountModel → AccountEntity (contas comuns e de professor)
- DTO de entrada → kwargs do AccountModel

Princípios:
- Mappers são stateless
- Não contêm lógica de negócio
- Tratam apenas conversão de dados
"""

from typing import List

from src.core.accounts.dtos import AddAccountInputDTO
from src.core.accounts.entities import AccountEntity, AccountKind
from src.core.users.dtos import CreateUserInputDTO
from src.core.users.entities import UserEntity

from .models import AccountModel

TEACHER_FIELDS = ("whatsapp", "photo", "lattes", "cv", "about")


def _or_none(value):
    return value or None


class AccountMapper:
    """Mapper para conversão entre AccountModel e as entidades do Core."""

    @staticmethod
    def user_request_to_fields(request: CreateUserInputDTO) -> dict:
        """Campos do AccountModel para um cadastro de usuário."""
        return {
            'kind': AccountKind.USER.value,
            'name': request.name,
            'cpf': request.cpf or None,
            'birthdate': request.birthdate,
            'cellphone': request.cellphone,
            'email': request.email,
            'password': request.password,
        }

    @staticmethod
    def account_params_to_fields(params: AddAccountInputDTO, kind: AccountKind) -> dict:
        """Campos do AccountModel para uma conta (comum ou professor)."""
        data = {
            'kind': kind.value,
            'name': params.name,
            'cpf': params.cpf or None,
            'birthdate': params.birthdate or '',
            'cellphone': params.cellphone or '',
            'email': params.email,
            'password': params.password,
        }
        for field in TEACHER_FIELDS:
            data[field] = getattr(params, field, None) or ''
        return data

    @staticmethod
    def to_user_entity(model: AccountModel) -> UserEntity:
        """
        Converte AccountModel para UserEntity.

        Note:
            Bypassa validações pois os dados já foram validados
            na criação original
        """
        return UserEntity(
            id=model.id,
            name=model.name,
            cpf=model.cpf or '',
            birthdate=model.birthdate,
            cellphone=model.cellphone,
            email=model.email,
            password=model.password,
            created_at=model.created_at,
        )

    @staticmethod
    def to_account_entity(model: AccountModel) -> AccountEntity:
        """Converte AccountModel para AccountEntity."""
        return AccountEntity(
            id=model.id,
            kind=AccountKind.from_string(model.kind),
            name=model.name,
            email=model.email,
            password=model.password,
            cpf=_or_none(model.cpf),
            birthdate=_or_none(model.birthdate),
            cellphone=_or_none(model.cellphone),
            whatsapp=_or_none(model.whatsapp),
            photo=_or_none(model.photo),
            lattes=_or_none(model.lattes),
            cv=_or_none(model.cv),
            about=_or_none(model.about),
            created_at=model.created_at,
        )

    @classmethod
    def to_account_entity_list(cls, models: List[AccountModel]) -> List[AccountEntity]:
        return [cls.to_account_entity(m) for m in models]
