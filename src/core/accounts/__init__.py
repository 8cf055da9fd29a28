"""
Domínio de Contas - Contas comuns e de professor.

- Entidades (AccountEntity, AccountKind)
- DTOs (AddAccountInputDTO, AddAccountTeacherInputDTO, AccountOutputDTO)
- Ports (AccountRepository)
- Use Cases (AddAccountService, AddAccountTeacherService)
- Controllers (AddAccountController, AddAccountTeacherController)
"""

from .entities import AccountEntity, AccountKind
from .dtos import AddAccountInputDTO, AddAccountTeacherInputDTO, AccountOutputDTO
from .ports import AccountRepository, InMemoryAccountRepository
from .use_cases import AddAccountService, AddAccountTeacherService
from .controllers import AddAccountController, AddAccountTeacherController

__all__ = [
    "AccountEntity",
    "AccountKind",
    "AddAccountInputDTO",
    "AddAccountTeacherInputDTO",
    "AccountOutputDTO",
    "AccountRepository",
    "InMemoryAccountRepository",
    "AddAccountService",
    "AddAccountTeacherService",
    "AddAccountController",
    "AddAccountTeacherController",
]
