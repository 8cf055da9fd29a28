"""
URL Configuration para o backend de Cadastro de Contas.

Estrutura:
- /admin/ - Django Admin
- /accounts/ - API de Contas (cadastro de usuário, conta, professor)
- /health/ - Health check
"""

from django.contrib import admin
from django.http import JsonResponse
from django.urls import path, include


def health(request):
    return JsonResponse({'status': 'ok'})


urlpatterns = [
    # Django Admin
    path('admin/', admin.site.urls),

    # Accounts App
    path('accounts/', include('src.adapters.django_app.accounts.urls')),

    # Health check
    path('health/', health, name='health'),
]
