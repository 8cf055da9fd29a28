"""
Notification Adapters - E-mail e templates.

Implementações dos Ports EmailSender e TemplateRenderer:
- DjangoTemplateRenderer: render_to_string (templates dos apps)
- DjangoEmailSender: envio síncrono via django.core.mail
- CeleryEmailSender: enfileira send_email_task na fila notifications

Modo de entrega escolhido em settings.EMAIL_DELIVERY_MODE:
    'sync'   = DjangoEmailSender (desenvolvimento)
    'celery' = CeleryEmailSender (produção)
"""

from smtplib import SMTPException
from typing import Any, Dict
import logging

from django.core.mail import send_mail
from django.template.loader import render_to_string
from django.utils.html import strip_tags

logger = logging.getLogger(__name__)


class DjangoTemplateRenderer:
    """Renderiza templates HTML com o engine configurado em TEMPLATES."""

    def render_html(self, template: str, context: Dict[str, Any]) -> str:
        return render_to_string(template, context)


class DjangoEmailSender:
    """
    Envio síncrono de e-mail.

    Falhas de SMTP são logadas e reportadas como False; o Interactor
    decide se isso é erro (UserSendEmailError).
    """

    def __init__(self, fail_silently: bool = False):
        self._fail_silently = fail_silently

    def send_email(self, from_email: str, to: str, subject: str, html: str) -> bool:
        try:
            sent = send_mail(
                subject=subject,
                message=strip_tags(html),
                from_email=from_email,
                recipient_list=[to],
                html_message=html,
                fail_silently=self._fail_silently,
            )
        except (SMTPException, OSError) as e:
            logger.error(f"Failed to send e-mail: {e}")
            return False

        logger.info(f"E-mail '{subject}' sent ({sent})")
        return sent > 0


class CeleryEmailSender:
    """
    Envio assíncrono via Celery.

    Retorna True assim que a tarefa é enfileirada; retries ficam
    a cargo da própria tarefa.
    """

    def send_email(self, from_email: str, to: str, subject: str, html: str) -> bool:
        from src.adapters.django_app.accounts.tasks import send_email_task

        try:
            result = send_email_task.apply_async(
                kwargs={
                    'from_email': from_email,
                    'to': to,
                    'subject': subject,
                    'html': html,
                },
                queue='notifications',
            )
        except Exception as e:
            logger.error(f"Failed to enqueue e-mail task: {e}")
            return False

        logger.info(f"E-mail task queued: {result.id}")
        return True
