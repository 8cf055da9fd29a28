"""
Security Adapter - Hash de senhas via Django.

Implementa o Port Security usando django.contrib.auth.hashers, de modo
que o algoritmo segue PASSWORD_HASHERS em settings (PBKDF2 por padrão).
"""

from django.contrib.auth.hashers import check_password, make_password


class DjangoSecurity:
    """
    Implementação Django do Port Security.

    Example:
        security = DjangoSecurity()
        encoded = security.encrypt_password("s3cret")
        security.verify_password("s3cret", encoded)  # True
    """

    def __init__(self, hasher: str = 'default'):
        self._hasher = hasher

    def encrypt_password(self, password: str) -> str:
        if not password:
            raise ValueError("Senha vazia não pode ser armazenada")
        return make_password(password, hasher=self._hasher)

    def verify_password(self, password: str, encoded: str) -> bool:
        return check_password(password, encoded)
