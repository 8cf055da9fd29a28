"""
Entidades do Domínio de Contas.

AccountEntity representa uma conta persistida, seja de usuário comum
ou de professor. Campos específicos de professor ficam vazios para
contas comuns.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from src.core.users.entities import new_id


class AccountKind(Enum):
    """Tipos de conta."""

    USER = "user"
    TEACHER = "teacher"

    @classmethod
    def from_string(cls, value: str) -> "AccountKind":
        """
        Converte string para enum.

        Raises:
            ValueError: Se valor inválido
        """
        for kind in cls:
            if kind.value == value.lower() or kind.name == value.upper():
                return kind
        raise ValueError(f"Tipo de conta inválido: {value}")


@dataclass(frozen=True)
class AccountEntity:
    """
    Entidade de Domínio: Conta.

    Attributes:
        id: Identificador único (UUID)
        kind: Tipo da conta
        name: Nome
        email: E-mail (único)
        password: Hash da senha
        cpf: CPF normalizado (único, opcional)
        birthdate: Data de nascimento
        cellphone: Celular
        whatsapp, photo, lattes, cv, about: Perfil de professor
        created_at: Data/hora de criação
    """

    name: str
    email: str
    password: str = field(repr=False, default="")
    kind: AccountKind = AccountKind.USER
    cpf: Optional[str] = None
    birthdate: Optional[str] = None
    cellphone: Optional[str] = None
    whatsapp: Optional[str] = None
    photo: Optional[str] = None
    lattes: Optional[str] = None
    cv: Optional[str] = None
    about: Optional[str] = None
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def is_teacher(self) -> bool:
        return self.kind == AccountKind.TEACHER
