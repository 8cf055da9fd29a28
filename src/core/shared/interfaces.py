"""
Interfaces (Ports) - Contratos entre Core e Adapters.

Este módulo define as interfaces que os Adapters devem implementar.
São os "Ports" da Arquitetura Hexagonal.

Tipos de Ports:
- Driven Ports (lado direito): DuplicatedField, Security, EmailSender,
  TemplateRenderer
- Driving Ports (lado esquerdo): Presenter, Validator, Validation

Princípio: Core define interfaces; Adapters implementam.
O fluxo de dependência sempre aponta para o Core.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Protocol, TypeVar, runtime_checkable


# Tipo da resposta produzida pelo Presenter
R = TypeVar("R")


class Presenter(ABC, Generic[R]):
    """
    Presenter - Traduz resultados do Core para o formato externo.

    O Interactor não conhece HTTP nem frameworks: entrega o payload de
    sucesso via reply() ou a exceção capturada via throw(). O Presenter
    decide status, envelope e serialização.

    Example:
        class JsonPresenter(Presenter[JsonResponse]):
            def reply(self, payload):
                return JsonResponse({"success": True, "data": payload})
    """

    @abstractmethod
    def reply(self, payload: Dict[str, Any]) -> R:
        """
        Formata resposta de sucesso.

        Args:
            payload: Dados serializáveis do resultado

        Returns:
            Resposta no formato do adapter
        """
        raise NotImplementedError

    @abstractmethod
    def throw(self, error: Exception) -> R:
        """
        Formata resposta de erro.

        Args:
            error: Exceção capturada no pipeline

        Returns:
            Resposta no formato do adapter
        """
        raise NotImplementedError


@runtime_checkable
class Validator(Protocol):
    """
    Validação de formato dos campos de cadastro.

    Implementação padrão: src.core.shared.validators.RegexValidator
    """

    def is_cpf(self, value: str) -> bool:
        ...

    def is_date(self, value: str) -> bool:
        ...

    def is_cellphone(self, value: str) -> bool:
        ...

    def is_email(self, value: str) -> bool:
        ...


@runtime_checkable
class Validation(Protocol):
    """Validação de um único campo (usada pelos controllers)."""

    def validate(self, value: str) -> bool:
        ...


@runtime_checkable
class DuplicatedField(Protocol):
    """
    Verificação de duplicidade antes da persistência.

    Consulta (somente leitura) se já existe registro com o valor
    informado para o campo. Falhas da consulta propagam como erro
    genérico, não como erro de domínio.
    """

    def is_duplicated(self, field: str, value: str) -> bool:
        """
        Args:
            field: Nome do campo único (ex: "email", "cpf")
            value: Valor a verificar

        Returns:
            True se já existe registro com o valor
        """
        ...


@runtime_checkable
class Security(Protocol):
    """
    Capacidade opaca de transformar senha em credencial armazenável.

    Implementações:
    - DjangoSecurity (django.contrib.auth.hashers)
    """

    def encrypt_password(self, password: str) -> str:
        """
        Gera hash de mão única da senha.

        Args:
            password: Senha em texto puro

        Returns:
            Credencial pronta para persistência
        """
        ...

    def verify_password(self, password: str, encoded: str) -> bool:
        ...


@runtime_checkable
class EmailSender(Protocol):
    """
    Transporte de e-mail.

    Implementações:
    - DjangoEmailSender: envio síncrono via django.core.mail
    - CeleryEmailSender: enfileira envio em worker Celery
    """

    def send_email(self, from_email: str, to: str, subject: str, html: str) -> bool:
        """
        Envia e-mail HTML.

        Returns:
            True se enviado (ou enfileirado), False em falha
        """
        ...


@runtime_checkable
class TemplateRenderer(Protocol):
    """Renderização de templates HTML de notificação."""

    def render_html(self, template: str, context: Dict[str, Any]) -> str:
        ...
