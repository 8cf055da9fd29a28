"""
Domínio de Usuários - Cadastro.

Este módulo contém o pipeline de cadastro de usuários:
- Entidades (UserEntity)
- DTOs (CreateUserInputDTO, CreateUserOutputDTO)
- Erros de validação por campo
- Ports (UserRepository)
- Use Case (CreateUserInteractor)

Características do Domínio:
- Validação de formato fail-fast, em ordem fixa
- CPF normalizado antes da busca de duplicidade e da persistência
- Senha substituída por hash antes do save
- Erros entregues ao Presenter, nunca propagados
"""

from .entities import UserEntity
from .dtos import CreateUserInputDTO, CreateUserOutputDTO
from .exceptions import (
    UserNameInvalidError,
    UserCPFInvalidError,
    UserBirthdateInvalidError,
    UserCellphoneInvalidError,
    UserEmailInvalidError,
    UserSendEmailError,
)
from .ports import UserRepository, InMemoryUserRepository, InMemoryDuplicatedField
from .use_cases import CreateUserInteractor, ConfirmationEmailConfig

__all__ = [
    # Entities
    "UserEntity",
    # DTOs
    "CreateUserInputDTO",
    "CreateUserOutputDTO",
    # Errors
    "UserNameInvalidError",
    "UserCPFInvalidError",
    "UserBirthdateInvalidError",
    "UserCellphoneInvalidError",
    "UserEmailInvalidError",
    "UserSendEmailError",
    # Ports
    "UserRepository",
    "InMemoryUserRepository",
    "InMemoryDuplicatedField",
    # Use Cases
    "CreateUserInteractor",
    "ConfirmationEmailConfig",
]
