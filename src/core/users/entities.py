"""
Entidades do Domínio de Usuários.

UserEntity representa o registro persistido de um cadastro
(RegistrationRecord). É criada pelo Repository no momento do save,
que atribui o identificador e o timestamp de criação.

Invariantes:
- CPF armazenado sempre normalizado (apenas dígitos)
- Senha armazenada sempre como hash (nunca texto puro)
- Imutável após criação
"""

from dataclasses import dataclass, field
from datetime import datetime
import uuid


def new_id() -> str:
    """Gera identificador único (UUID4 em string)."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class UserEntity:
    """
    Entidade de Domínio: Usuário cadastrado.

    Attributes:
        id: Identificador único (UUID)
        name: Nome completo
        cpf: CPF normalizado (11 dígitos)
        birthdate: Data de nascimento como recebida e validada
        cellphone: Celular
        email: E-mail
        password: Hash da senha
        created_at: Data/hora de criação
    """

    name: str
    cpf: str
    birthdate: str
    cellphone: str
    email: str
    password: str = field(repr=False, default="")
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=datetime.now)
