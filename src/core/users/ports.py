"""
Ports (Interfaces) do Domínio de Usuários.

Define os contratos que os Adapters de infraestrutura devem implementar
para persistência de usuários.

Princípio:
    Core define interfaces → Adapters implementam
    Dependências sempre apontam para o Core

Example:
    # No Adapter (Django)
    class DjangoUserRepository:
        def save(self, request: CreateUserInputDTO) -> UserEntity:
            model = AccountModel.objects.create(...)
            return UserMapper.to_entity(model)
"""

from typing import Dict, List, Optional, Protocol, runtime_checkable

from src.core.shared.validators import normalize_cpf, normalize_email

from .dtos import CreateUserInputDTO
from .entities import UserEntity


UNIQUE_FIELDS = ("email", "cpf")


@runtime_checkable
class UserRepository(Protocol):
    """
    Interface para persistência de Usuários.

    Implementações:
    - DjangoUserRepository (PostgreSQL via ORM)
    - InMemoryUserRepository (para testes)
    """

    def save(self, request: CreateUserInputDTO) -> UserEntity:
        """
        Persiste o cadastro validado.

        O repositório atribui o identificador e o timestamp de criação.

        Args:
            request: Dados validados, com CPF normalizado e senha em hash

        Returns:
            Registro persistido
        """
        ...

    def get_by_id(self, user_id: str) -> Optional[UserEntity]:
        """
        Busca usuário por ID.

        Returns:
            Entidade encontrada ou None se não existir
        """
        ...

    def find_by_field(self, field: str, value: str) -> Optional[UserEntity]:
        """
        Busca usuário por campo único (email ou cpf).

        Returns:
            Entidade encontrada ou None
        """
        ...


class InMemoryUserRepository:
    """
    Implementação em memória do UserRepository.

    Útil para:
    - Testes unitários
    - Prototipagem

    Não usar em produção!
    """

    def __init__(self):
        self._users: Dict[str, UserEntity] = {}

    def save(self, request: CreateUserInputDTO) -> UserEntity:
        """Salva usuário em memória."""
        user = UserEntity(
            name=request.name,
            cpf=request.cpf,
            birthdate=request.birthdate,
            cellphone=request.cellphone,
            email=request.email,
            password=request.password,
        )
        self._users[user.id] = user
        return user

    def get_by_id(self, user_id: str) -> Optional[UserEntity]:
        return self._users.get(user_id)

    def find_by_field(self, field: str, value: str) -> Optional[UserEntity]:
        if field not in UNIQUE_FIELDS:
            raise ValueError(f"Campo não pesquisável: {field}")
        for user in self._users.values():
            if getattr(user, field) == value:
                return user
        return None

    def list_all(self) -> List[UserEntity]:
        return list(self._users.values())

    def count(self) -> int:
        return len(self._users)

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._users.clear()


class InMemoryDuplicatedField:
    """
    DuplicatedField apoiado em um repositório com find_by_field.

    CPF e e-mail são normalizados antes da busca, na forma em que são armazenados.
    """

    def __init__(self, repository):
        self._repository = repository

    def is_duplicated(self, field: str, value: str) -> bool:
        if field == "cpf":
            value = normalize_cpf(value)
        elif field == "email":
            value = normalize_email(value)
        return self._repository.find_by_field(field, value) is not None
