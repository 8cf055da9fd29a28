"""
Ports (Interfaces) do Domínio de Contas.

Implementações:
- DjangoAccountRepository (src/adapters/django_app/accounts/repositories.py)
- InMemoryAccountRepository (abaixo, para testes)
"""

from dataclasses import fields
from typing import Dict, List, Optional, Protocol, runtime_checkable

from src.core.users.ports import UNIQUE_FIELDS

from .dtos import AddAccountInputDTO
from .entities import AccountEntity, AccountKind


@runtime_checkable
class AccountRepository(Protocol):
    """Interface para persistência de Contas."""

    def add(self, params: AddAccountInputDTO, kind: AccountKind) -> AccountEntity:
        """
        Persiste nova conta.

        Args:
            params: Dados já normalizados e com senha em hash
            kind: Tipo da conta

        Returns:
            Conta persistida (com id e created_at)
        """
        ...

    def get_by_id(self, account_id: str) -> Optional[AccountEntity]:
        ...

    def find_by_field(self, field: str, value: str) -> Optional[AccountEntity]:
        ...


class InMemoryAccountRepository:
    """
    Implementação em memória do AccountRepository.

    Não usar em produção!
    """

    def __init__(self):
        self._accounts: Dict[str, AccountEntity] = {}

    def add(self, params: AddAccountInputDTO, kind: AccountKind) -> AccountEntity:
        data = {f.name: getattr(params, f.name) for f in fields(params)}
        account = AccountEntity(kind=kind, **data)
        self._accounts[account.id] = account
        return account

    def get_by_id(self, account_id: str) -> Optional[AccountEntity]:
        return self._accounts.get(account_id)

    def find_by_field(self, field: str, value: str) -> Optional[AccountEntity]:
        if field not in UNIQUE_FIELDS:
            raise ValueError(f"Campo não pesquisável: {field}")
        for account in self._accounts.values():
            if getattr(account, field) == value:
                return account
        return None

    def list_by_kind(self, kind: AccountKind) -> List[AccountEntity]:
        return [a for a in self._accounts.values() if a.kind == kind]

    def count(self) -> int:
        return len(self._accounts)

    def clear(self) -> None:
        self._accounts.clear()
