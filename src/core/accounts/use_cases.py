"""
Use Cases do Domínio de Contas.

- AddAccountService: cria conta comum, retorna os dados públicos
- AddAccountTeacherService: cria conta de professor, retorna bool

Validação de entrada e verificação de duplicidade ficam nos
controllers (src/core/accounts/controllers.py); os services apenas
normalizam, aplicam hash na senha e persistem.
"""

import logging

from src.core.shared.interfaces import Security
from src.core.shared.validators import normalize_cpf

from .dtos import AccountOutputDTO, AddAccountInputDTO, AddAccountTeacherInputDTO
from .entities import AccountEntity, AccountKind
from .ports import AccountRepository

logger = logging.getLogger(__name__)


class _BaseAddAccountService:

    kind: AccountKind = AccountKind.USER

    def __init__(self, account_repo: AccountRepository, security: Security):
        self.account_repo = account_repo
        self.security = security

    def _persist(self, params: AddAccountInputDTO) -> AccountEntity:
        params = params.with_changes(
            cpf=normalize_cpf(params.cpf) if params.cpf else None,
            password=self.security.encrypt_password(params.password),
        )
        account = self.account_repo.add(params, self.kind)
        logger.info(f"Account created: {account.id} ({self.kind.value})")
        return account


class AddAccountService(_BaseAddAccountService):
    """
    Use Case: Criar conta.

    Example:
        service = AddAccountService(account_repo, security)
        output = service.add(AddAccountInputDTO(name=..., email=..., password=...))
        output.id
    """

    kind = AccountKind.USER

    def add(self, params: AddAccountInputDTO) -> AccountOutputDTO:
        """
        Cria conta.

        Args:
            params: Dados de entrada

        Returns:
            DTO com os dados públicos da conta criada
        """
        return AccountOutputDTO.from_entity(self._persist(params))


class AddAccountTeacherService(_BaseAddAccountService):
    """
    Use Case: Criar conta de professor.

    Retorna apenas se a conta foi criada; o controller monta a resposta.
    """

    kind = AccountKind.TEACHER

    def add(self, params: AddAccountTeacherInputDTO) -> bool:
        """
        Cria conta de professor.

        Returns:
            True se a conta foi gravada; False se o hash ou o repositório
            falharem (o erro fica no log)
        """
        try:
            account = self._persist(params)
        except Exception:
            logger.exception(f"Teacher account not created: {params.email}")
            return False
        return bool(account.id)
