"""
Migration inicial para os domínios de Usuários e Contas.

Cria as tabelas:
- accounts: Contas de usuário e de professor
"""

from django.db import migrations, models
import django.utils.timezone


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        # =================================================================
        # Tabela: accounts
        # =================================================================
        migrations.CreateModel(
            name='AccountModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='UUID único da conta'
                )),
                ('kind', models.CharField(
                    max_length=20,
                    choices=[
                        ('user', 'Usuário'),
                        ('teacher', 'Professor'),
                    ],
                    default='user',
                    db_index=True,
                    help_text='Tipo da conta'
                )),
                ('name', models.CharField(
                    max_length=200,
                    help_text='Nome completo'
                )),
                ('cpf', models.CharField(
                    max_length=11,
                    unique=True,
                    null=True,
                    blank=True,
                    help_text='CPF (apenas dígitos)'
                )),
                ('birthdate', models.CharField(
                    max_length=10,
                    blank=True,
                    default='',
                    help_text='Data de nascimento'
                )),
                ('cellphone', models.CharField(
                    max_length=20,
                    blank=True,
                    default='',
                    help_text='Celular'
                )),
                ('email', models.EmailField(
                    max_length=254,
                    unique=True,
                    help_text='E-mail'
                )),
                ('password', models.CharField(
                    max_length=128,
                    help_text='Hash da senha'
                )),
                ('whatsapp', models.CharField(max_length=20, blank=True, default='')),
                ('photo', models.CharField(max_length=255, blank=True, default='')),
                ('lattes', models.CharField(max_length=255, blank=True, default='')),
                ('cv', models.CharField(max_length=255, blank=True, default='')),
                ('about', models.TextField(blank=True, default='')),
                ('created_at', models.DateTimeField(
                    default=django.utils.timezone.now,
                    db_index=True,
                    help_text='Data/hora de criação'
                )),
            ],
            options={
                'verbose_name': 'Conta',
                'verbose_name_plural': 'Contas',
                'db_table': 'accounts',
                'ordering': ['-created_at'],
            },
        ),
        migrations.AddIndex(
            model_name='accountmodel',
            index=models.Index(
                fields=['kind', 'created_at'],
                name='idx_account_kind_created',
            ),
        ),
    ]
