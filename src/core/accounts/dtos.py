"""
Data Transfer Objects (DTOs) do Domínio de Contas.

- AddAccountInputDTO: dados de conta comum
- AddAccountTeacherInputDTO: conta comum + perfil de professor
- AccountOutputDTO: conta criada, sem a senha
"""

from dataclasses import dataclass, fields, replace
from datetime import datetime
from typing import Any, Dict, Optional

from src.core.shared.validators import normalize_email

from .entities import AccountEntity


def _pick(data: Dict[str, Any], *keys: str) -> Optional[str]:
    """
    Primeiro valor presente entre as chaves (aceita camelCase do frontend).

    Strings chegam sem espaços nas bordas; string vazia conta como ausente.
    """
    for key in keys:
        value = data.get(key)
        if isinstance(value, str):
            value = value.strip()
        if value:
            return value
    return None


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class AddAccountInputDTO:
    """
    DTO de entrada para criar conta.

    Attributes:
        name: Nome
        email: E-mail
        password: Senha em texto puro (substituída por hash no service)
        cpf, birthdate, cellphone: Dados opcionais
    """

    name: str
    email: str
    password: str
    cpf: Optional[str] = None
    birthdate: Optional[str] = None
    cellphone: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AddAccountInputDTO":
        email = data.get("email") or ""
        return cls(
            name=_pick(data, "name") or "",
            email=normalize_email(email) if isinstance(email, str) else email,
            password=data.get("password") or "",
            cpf=_pick(data, "cpf"),
            birthdate=_pick(data, "birthdate", "birthDate"),
            cellphone=_pick(data, "cellphone"),
        )

    def with_changes(self, **changes):
        return replace(self, **changes)

    def to_dict(self) -> dict:
        """Converte para dicionário (sem a senha)."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name != "password"
        }


@dataclass(frozen=True)
class AddAccountTeacherInputDTO(AddAccountInputDTO):
    """
    DTO de entrada para criar conta de professor.

    Attributes:
        whatsapp: WhatsApp de contato
        photo: URL da foto
        lattes: URL do currículo Lattes
        cv: URL do currículo
        about: Apresentação
    """

    whatsapp: Optional[str] = None
    photo: Optional[str] = None
    lattes: Optional[str] = None
    cv: Optional[str] = None
    about: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AddAccountTeacherInputDTO":
        base = AddAccountInputDTO.from_dict(data)
        return cls(
            name=base.name,
            email=base.email,
            password=base.password,
            cpf=base.cpf,
            birthdate=base.birthdate,
            cellphone=base.cellphone,
            whatsapp=_pick(data, "whatsapp", "whatsApp"),
            photo=_pick(data, "photo"),
            lattes=_pick(data, "lattes"),
            cv=_pick(data, "cv"),
            about=_pick(data, "about"),
        )


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class AccountOutputDTO:
    """DTO de saída com os dados públicos da conta."""

    id: str
    kind: str
    name: str
    email: str
    cpf: Optional[str]
    birthdate: Optional[str]
    cellphone: Optional[str]
    created_at: datetime

    @classmethod
    def from_entity(cls, entity: AccountEntity) -> "AccountOutputDTO":
        return cls(
            id=entity.id,
            kind=entity.kind.value,
            name=entity.name,
            email=entity.email,
            cpf=entity.cpf,
            birthdate=entity.birthdate,
            cellphone=entity.cellphone,
            created_at=entity.created_at,
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "id": self.id,
            "kind": self.kind,
            "name": self.name,
            "email": self.email,
            "cpf": self.cpf,
            "birthdate": self.birthdate,
            "cellphone": self.cellphone,
            "created_at": self.created_at.isoformat(),
        }
