"""
Data Transfer Objects (DTOs) do Domínio de Usuários.

- CreateUserInputDTO: payload de cadastro (RegistrationRequest)
- CreateUserOutputDTO: registro criado, sem a senha
"""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Dict

from src.core.shared.validators import normalize_email

from .entities import UserEntity


def _text(data: Dict[str, Any], key: str) -> str:
    value = data.get(key) or ""
    return value.strip() if isinstance(value, str) else value


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CreateUserInputDTO:
    """
    DTO de entrada para cadastro de usuário.

    Imutável: o Interactor produz cópias (via with_changes) ao
    normalizar o CPF e substituir a senha pelo hash.
    """

    name: str = ""
    cpf: str = ""
    birthdate: str = ""
    cellphone: str = ""
    email: str = ""
    password: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CreateUserInputDTO":
        """
        Cria DTO a partir de dict (corpo de requisição), ignorando extras.

        Campos de texto chegam sem espaços nas bordas e o e-mail em
        minúsculas, na mesma forma usada na busca de duplicidade.
        A senha é mantida como enviada.
        """
        email = data.get("email") or ""
        return cls(
            name=_text(data, "name"),
            cpf=_text(data, "cpf"),
            birthdate=_text(data, "birthdate"),
            cellphone=_text(data, "cellphone"),
            email=normalize_email(email) if isinstance(email, str) else email,
            password=data.get("password") or "",
        )

    def with_changes(self, **changes) -> "CreateUserInputDTO":
        return replace(self, **changes)

    def to_dict(self) -> dict:
        """Converte para dicionário (sem a senha)."""
        return {
            "name": self.name,
            "cpf": self.cpf,
            "birthdate": self.birthdate,
            "cellphone": self.cellphone,
            "email": self.email,
        }


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class CreateUserOutputDTO:
    """DTO de saída com os dados públicos do usuário criado."""

    id: str
    name: str
    cpf: str
    birthdate: str
    cellphone: str
    email: str
    created_at: datetime

    @classmethod
    def from_entity(cls, entity: UserEntity) -> "CreateUserOutputDTO":
        return cls(
            id=entity.id,
            name=entity.name,
            cpf=entity.cpf,
            birthdate=entity.birthdate,
            cellphone=entity.cellphone,
            email=entity.email,
            created_at=entity.created_at,
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "id": self.id,
            "name": self.name,
            "cpf": self.cpf,
            "birthdate": self.birthdate,
            "cellphone": self.cellphone,
            "email": self.email,
            "created_at": self.created_at.isoformat(),
        }
