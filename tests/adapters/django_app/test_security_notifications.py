"""
Testes dos adapters de Security, e-mail e template.

E-mail usa o backend locmem (django.core.mail.outbox).
"""

import pytest
from smtplib import SMTPException
from unittest.mock import patch

from celery.exceptions import MaxRetriesExceededError
from django.core import mail

from src.adapters.django_app.accounts.tasks import send_email_task
from src.adapters.django_app.shared.notifications import (
    CeleryEmailSender,
    DjangoEmailSender,
    DjangoTemplateRenderer,
)
from src.adapters.django_app.shared.security import DjangoSecurity


class TestDjangoSecurity:

    def test_hash_e_verificacao(self):
        security = DjangoSecurity()

        encoded = security.encrypt_password("s3nh@Forte")

        assert encoded != "s3nh@Forte"
        assert security.verify_password("s3nh@Forte", encoded) is True
        assert security.verify_password("errada", encoded) is False

    def test_senha_vazia(self):
        with pytest.raises(ValueError):
            DjangoSecurity().encrypt_password("")


class TestDjangoTemplateRenderer:

    def test_renderiza_confirmacao(self):
        html = DjangoTemplateRenderer().render_html(
            "accounts/email/confirmation.html",
            {"name": "Maria", "email": "maria@example.com", "id": "abc-123"},
        )

        assert "Maria" in html
        assert "maria@example.com" in html
        assert "abc-123" in html


class TestDjangoEmailSender:

    def test_envia(self):
        sent = DjangoEmailSender().send_email(
            "no-reply@cadastro.test", "maria@example.com", "Bem-vindo", "<p>Olá</p>"
        )

        assert sent is True
        assert len(mail.outbox) == 1
        message = mail.outbox[0]
        assert message.to == ["maria@example.com"]
        assert message.subject == "Bem-vindo"
        assert message.body == "Olá"
        assert message.alternatives[0][0] == "<p>Olá</p>"

    def test_falha_smtp_retorna_false(self):
        with patch(
            "src.adapters.django_app.shared.notifications.send_mail",
            side_effect=SMTPException("recusado"),
        ):
            sent = DjangoEmailSender().send_email("a@x.com", "b@x.com", "s", "<p>x</p>")

        assert sent is False


class TestCeleryEmailSender:

    def test_enfileira_na_fila_notifications(self):
        with patch.object(send_email_task, "apply_async") as apply_async:
            sent = CeleryEmailSender().send_email("a@x.com", "b@x.com", "s", "<p>x</p>")

        assert sent is True
        apply_async.assert_called_once_with(
            kwargs={"from_email": "a@x.com", "to": "b@x.com", "subject": "s", "html": "<p>x</p>"},
            queue="notifications",
        )

    def test_broker_indisponivel(self):
        with patch.object(send_email_task, "apply_async", side_effect=ConnectionError("broker")):
            sent = CeleryEmailSender().send_email("a@x.com", "b@x.com", "s", "<p>x</p>")

        assert sent is False


class TestSendEmailTask:

    def test_envia_email(self):
        result = send_email_task.apply(
            kwargs={"from_email": "a@x.com", "to": "b@x.com", "subject": "s", "html": "<p>x</p>"}
        )

        assert result.get() is True
        assert len(mail.outbox) == 1

    def test_desiste_apos_retries(self):
        with patch(
            "src.adapters.django_app.accounts.tasks.DjangoEmailSender.send_email",
            return_value=False,
        ), patch.object(send_email_task, "retry", side_effect=MaxRetriesExceededError()):
            result = send_email_task("a@x.com", "b@x.com", "s", "<p>x</p>")

        assert result is False
