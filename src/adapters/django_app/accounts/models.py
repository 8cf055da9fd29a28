"""
Django Models para os domínios de Usuários e Contas.

Estes models são ADAPTERS - implementam a persistência para as
entidades de domínio definidas em src/core/users/entities.py e
src/core/accounts/entities.py.

IMPORTANTE:
- Models NÃO contêm lógica de negócio
- Validação de formato fica no Core (validators + interactor)
- Models são mapeados para/de Entities via Mappers

Tabelas:
- AccountModel: contas de usuário e de professor (coluna kind)
"""

from django.db import models
from django.utils import timezone


class AccountKindChoices(models.TextChoices):
    """Choices para tipo de conta (espelha AccountKind do Core)."""
    USER = 'user', 'Usuário'
    TEACHER = 'teacher', 'Professor'


class AccountModel(models.Model):
    """
    Model Django para persistência de Contas.

    E-mail e CPF são únicos no banco. A verificação de duplicidade do
    Core roda antes do insert; a constraint cobre a corrida entre dois
    cadastros simultâneos (o perdedor recebe IntegrityError → 500).

    Fields:
        id: UUID como primary key (gerado no Repository)
        kind: Tipo da conta (choices)
        name: Nome
        cpf: CPF apenas com dígitos
        birthdate: Data de nascimento como validada no Core
        cellphone: Celular
        email: E-mail
        password: Hash da senha
        whatsapp, photo, lattes, cv, about: Perfil de professor
        created_at: Timestamp de criação
    """

    # Primary Key - UUID gerado pelo Repository
    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="UUID único da conta"
    )

    kind = models.CharField(
        max_length=20,
        choices=AccountKindChoices.choices,
        default=AccountKindChoices.USER,
        db_index=True,
        help_text="Tipo da conta"
    )

    # Dados principais
    name = models.CharField(
        max_length=200,
        help_text="Nome completo"
    )

    cpf = models.CharField(
        max_length=11,
        unique=True,
        null=True,
        blank=True,
        help_text="CPF (apenas dígitos)"
    )

    birthdate = models.CharField(
        max_length=10,
        blank=True,
        default='',
        help_text="Data de nascimento"
    )

    cellphone = models.CharField(
        max_length=20,
        blank=True,
        default='',
        help_text="Celular"
    )

    email = models.EmailField(
        max_length=254,
        unique=True,
        help_text="E-mail"
    )

    password = models.CharField(
        max_length=128,
        help_text="Hash da senha"
    )

    # Perfil de professor
    whatsapp = models.CharField(max_length=20, blank=True, default='')
    photo = models.CharField(max_length=255, blank=True, default='')
    lattes = models.CharField(max_length=255, blank=True, default='')
    cv = models.CharField(max_length=255, blank=True, default='')
    about = models.TextField(blank=True, default='')

    # Timestamps
    created_at = models.DateTimeField(
        default=timezone.now,
        db_index=True,
        help_text="Data/hora de criação"
    )

    class Meta:
        db_table = 'accounts'
        verbose_name = 'Conta'
        verbose_name_plural = 'Contas'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['kind', 'created_at'], name='idx_account_kind_created'),
        ]

    def __str__(self):
        return f"[{self.id[:8]}] {self.name} <{self.email}>"

    def __repr__(self):
        return f"<AccountModel id={self.id[:8]} kind={self.kind}>"
