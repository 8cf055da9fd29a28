"""
Configuração do Celery para processamento assíncrono.

O Celery é usado para:
- Envio de e-mails (confirmação de cadastro) fora do request/response

Arquitetura:
- Broker: RabbitMQ (mensagens entre Django e Workers)
- Backend: Redis (resultados de tarefas)
- Workers: Processos que executam as tarefas

Uso:
    # Iniciar worker
    celery -A src.config.celery worker -l INFO -Q default,notifications
"""

import os
from celery import Celery
from kombu import Queue, Exchange

# Definir módulo de settings do Django
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'src.config.settings')

# Criar aplicação Celery
app = Celery('cadastro')

# Carregar configurações do Django (prefixo CELERY_)
app.config_from_object('django.conf:settings', namespace='CELERY')

# Configurações do Celery
app.conf.update(
    # Monitoramento
    worker_send_task_events=True,
    task_send_sent_event=True,
)

# Definir filas
app.conf.task_default_queue = 'default'
app.conf.task_queues = (
    Queue('default', Exchange('default'), routing_key='default'),
    Queue('notifications', Exchange('notifications'), routing_key='notifications.#'),
)

# Roteamento de tarefas para filas
app.conf.task_routes = {
    'src.adapters.django_app.accounts.tasks.*': {'queue': 'notifications'},
}

# Auto-descoberta de tarefas nos apps Django
app.autodiscover_tasks([
    'src.adapters.django_app.accounts',
])

