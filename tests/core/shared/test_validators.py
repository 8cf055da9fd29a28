"""
Testes Unitários para os validadores de formato.

Coverage:
- normalize_cpf / is_cpf
- is_date
- is_cellphone
- is_email
- RegexValidator / EmailValidation
"""

from datetime import date, timedelta

import pytest

from src.core.shared.validators import (
    EmailValidation,
    RegexValidator,
    is_cellphone,
    is_cpf,
    is_date,
    is_email,
    normalize_cpf,
    normalize_email,
    parse_date,
)


class TestCPF:
    """Testes de CPF."""

    @pytest.mark.parametrize("cpf", [
        "529.982.247-25",
        "52998224725",
        "111.444.777-35",
    ])
    def test_cpf_valido(self, cpf):
        assert is_cpf(cpf) is True

    @pytest.mark.parametrize("cpf", [
        "529.982.247-24",
        "5299822472",
        "529982247255",
        "abc.def.ghi-jk",
        "",
        None,
    ])
    def test_cpf_invalido(self, cpf):
        assert is_cpf(cpf) is False

    @pytest.mark.parametrize("digit", "0123456789")
    def test_rejeita_digitos_repetidos(self, digit):
        """Sequências repetidas passam no cálculo mas são inválidas."""
        assert is_cpf(digit * 11) is False

    def test_rejeita_111_formatado(self):
        assert is_cpf("111.111.111-11") is False

    def test_normalize_remove_pontuacao(self):
        assert normalize_cpf("529.982.247-25") == "52998224725"

    def test_normalize_idempotente(self):
        once = normalize_cpf("529.982.247-25")
        assert normalize_cpf(once) == once

    def test_normalize_none(self):
        assert normalize_cpf(None) == ""


class TestDate:
    """Testes de data de nascimento."""

    @pytest.mark.parametrize("value", ["1990-05-17", "17/05/1990", "2000-02-29"])
    def test_data_valida(self, value):
        assert is_date(value) is True

    @pytest.mark.parametrize("value", [
        "1990-02-30",
        "2001-02-29",
        "31/13/1990",
        "17-05-1990",
        "ontem",
        "",
        None,
    ])
    def test_data_invalida(self, value):
        assert is_date(value) is False

    def test_data_futura_invalida(self):
        amanha = date.today() + timedelta(days=1)
        assert is_date(amanha.isoformat()) is False

    def test_hoje_valido(self):
        assert is_date(date.today().isoformat()) is True

    def test_parse_date(self):
        assert parse_date("17/05/1990") == date(1990, 5, 17)
        assert parse_date("nada") is None


class TestCellphone:
    """Testes de celular."""

    @pytest.mark.parametrize("value", [
        "(11) 98765-4321",
        "11987654321",
        "11 98765 4321",
        "+55 11 98765-4321",
        "+5511987654321",
    ])
    def test_celular_valido(self, value):
        assert is_cellphone(value) is True

    @pytest.mark.parametrize("value", [
        "(11) 8765-4321",
        "98765-4321",
        "(11) 98765-432",
        "telefone",
        "",
        None,
    ])
    def test_celular_invalido(self, value):
        assert is_cellphone(value) is False


class TestEmail:
    """Testes de e-mail."""

    @pytest.mark.parametrize("value", [
        "maria@example.com",
        "maria.silva+cadastro@mail.example.com.br",
    ])
    def test_email_valido(self, value):
        assert is_email(value) is True

    @pytest.mark.parametrize("value", [
        "maria",
        "maria@",
        "@example.com",
        "maria@example",
        "maria silva@example.com",
        "",
        None,
    ])
    def test_email_invalido(self, value):
        assert is_email(value) is False

    def test_normalize_email(self):
        assert normalize_email("  Maria@Example.COM ") == "maria@example.com"

    def test_normalize_email_idempotente(self):
        once = normalize_email(" Maria@Example.com")
        assert normalize_email(once) == once


class TestAdapters:
    """RegexValidator e EmailValidation delegam para as funções."""

    def test_regex_validator(self):
        validator = RegexValidator()

        assert validator.is_cpf("529.982.247-25")
        assert validator.is_date("1990-05-17")
        assert validator.is_cellphone("(11) 98765-4321")
        assert validator.is_email("maria@example.com")
        assert not validator.is_cpf("11111111111")

    def test_email_validation(self):
        validation = EmailValidation()

        assert validation.validate("maria@example.com") is True
        assert validation.validate("maria") is False
