"""
Validadores de formato de campos de cadastro.

Funções puras e determinísticas, sem dependências externas:
- is_cpf: CPF com verificação dos dígitos verificadores
- is_date: data de nascimento (ISO ou DD/MM/AAAA)
- is_cellphone: celular brasileiro
- is_email: formato de e-mail

RegexValidator e EmailValidation adaptam as funções aos Ports
definidos em src/core/shared/interfaces.py.
"""

import re
from datetime import date, datetime
from typing import Optional

CPF_LENGTH = 11

DATE_FORMATS = ("%Y-%m-%d", "%d/%m/%Y")

CELLPHONE_PATTERN = re.compile(
    r"^(?:\+?55\s?)?"          # DDI opcional
    r"(?:\(\d{2}\)|\d{2})\s?"   # DDD, com ou sem parênteses
    r"9\d{4}[\s-]?\d{4}$"       # 9 + 8 dígitos
)

EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9-]+(?:\.[a-zA-Z0-9-]+)*\.[a-zA-Z]{2,}$"
)


def normalize_cpf(cpf: str) -> str:
    """Remove pontuação do CPF, mantendo apenas dígitos."""
    return re.sub(r"\D", "", cpf or "")


def normalize_email(email: str) -> str:
    """E-mail sem espaços nas bordas e em minúsculas (forma armazenada)."""
    return (email or "").strip().lower()


def _check_digit(digits: str) -> int:
    weight = len(digits) + 1
    total = sum(int(d) * (weight - i) for i, d in enumerate(digits))
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def is_cpf(cpf: Optional[str]) -> bool:
    """
    Valida CPF pelo algoritmo dos dígitos verificadores.

    Aceita CPF formatado (000.000.000-00) ou apenas dígitos.
    Sequências de dígitos repetidos (ex: 111.111.111-11) são inválidas
    mesmo tendo dígitos verificadores consistentes.
    """
    if not cpf or not isinstance(cpf, str):
        return False

    digits = normalize_cpf(cpf)
    if len(digits) != CPF_LENGTH:
        return False

    if digits == digits[0] * CPF_LENGTH:
        return False

    first = _check_digit(digits[:9])
    second = _check_digit(digits[:9] + str(first))
    return digits[-2:] == f"{first}{second}"


def parse_date(value: str) -> Optional[date]:
    """Converte string em date usando os formatos aceitos; None se inválida."""
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value.strip(), fmt).date()
        except ValueError:
            continue
    return None


def is_date(value: Optional[str]) -> bool:
    """Data de calendário real, em formato aceito, não futura."""
    if not value or not isinstance(value, str):
        return False
    parsed = parse_date(value)
    return parsed is not None and parsed <= date.today()


def is_cellphone(value: Optional[str]) -> bool:
    if not value or not isinstance(value, str):
        return False
    return CELLPHONE_PATTERN.match(value.strip()) is not None


def is_email(value: Optional[str]) -> bool:
    if not value or not isinstance(value, str):
        return False
    return EMAIL_PATTERN.match(value.strip()) is not None


class RegexValidator:
    """
    Implementação padrão do Port Validator.

    Delega para as funções puras deste módulo.
    """

    def is_cpf(self, value: str) -> bool:
        return is_cpf(value)

    def is_date(self, value: str) -> bool:
        return is_date(value)

    def is_cellphone(self, value: str) -> bool:
        return is_cellphone(value)

    def is_email(self, value: str) -> bool:
        return is_email(value)


class EmailValidation:
    """Port Validation de método único, usado pelos controllers de conta."""

    def validate(self, value: str) -> bool:
        return is_email(value)
