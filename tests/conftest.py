"""
Configurações globais do Pytest para o backend de Cadastro de Contas.

Este arquivo é carregado automaticamente pelo pytest e
fornece fixtures e configurações compartilhadas.
"""

import pytest
from pathlib import Path
from unittest.mock import Mock

from src.core.shared.http import HttpPresenter
from src.core.users.dtos import CreateUserInputDTO


VALID_CPF = "529.982.247-25"
OTHER_VALID_CPF = "111.444.777-35"


@pytest.fixture(scope="session")
def project_root():
    """Retorna o caminho raiz do projeto."""
    return Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def reset_singletons():
    """
    Reset de singletons entre testes.

    Garante que cada teste inicia com container limpo.
    """
    from src.config.container import reset_container

    reset_container()
    yield
    reset_container()


# =============================================================================
# Payloads
# =============================================================================

@pytest.fixture
def user_payload():
    """Payload de cadastro válido."""
    return {
        "name": "Maria da Silva",
        "cpf": VALID_CPF,
        "birthdate": "1990-05-17",
        "cellphone": "(11) 98765-4321",
        "email": "maria@example.com",
        "password": "s3nh@Forte",
    }


@pytest.fixture
def user_request(user_payload):
    return CreateUserInputDTO.from_dict(user_payload)


@pytest.fixture
def account_payload():
    return {
        "name": "João Souza",
        "email": "joao@example.com",
        "password": "s3nh@Forte",
    }


@pytest.fixture
def teacher_payload(account_payload):
    return {
        **account_payload,
        "whatsApp": "(11) 91234-5678",
        "photo": "https://example.com/joao.png",
        "lattes": "http://lattes.cnpq.br/123",
        "cv": "https://example.com/joao.pdf",
        "about": "Professor de matemática",
    }


# =============================================================================
# Test doubles
# =============================================================================

@pytest.fixture
def fake_security():
    """Security previsível: hash = 'hashed:' + senha."""
    security = Mock()
    security.encrypt_password.side_effect = lambda password: f"hashed:{password}"
    security.verify_password.side_effect = lambda password, encoded: encoded == f"hashed:{password}"
    return security


@pytest.fixture
def presenter():
    return HttpPresenter()
