"""
Tarefas Celery do app de Contas.

- send_email_task: envio do e-mail de confirmação fora do request

Padrão:
    @shared_task(bind=True, ...)
    def <tarefa>(self, ...) -> ...:
"""

import logging

from celery import shared_task
from celery.exceptions import MaxRetriesExceededError

from src.adapters.django_app.shared.notifications import DjangoEmailSender

logger = logging.getLogger(__name__)


@shared_task(
    bind=True,
    max_retries=3,
    default_retry_delay=60,
    acks_late=True,
)
def send_email_task(self, from_email: str, to: str, subject: str, html: str) -> bool:
    """
    Envia e-mail HTML, com retry em falha de SMTP.

    Args:
        from_email: Remetente
        to: Destinatário
        subject: Assunto
        html: Corpo HTML já renderizado

    Returns:
        True se enviado, False após esgotar as tentativas
    """
    logger.info(f"[TASK] send_email: '{subject}' (attempt {self.request.retries + 1})")

    if DjangoEmailSender().send_email(from_email, to, subject, html):
        return True

    try:
        raise self.retry(countdown=60 * (2 ** self.request.retries))
    except MaxRetriesExceededError:
        logger.error(f"[TASK] send_email gave up: '{subject}'")
        return False
