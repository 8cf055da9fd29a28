"""
URL patterns para o domínio de Contas.

Endpoints API JSON:
- POST /accounts/api/users/ - Cadastro de usuário
- POST /accounts/api/accounts/ - Criar conta
- POST /accounts/api/teachers/ - Criar conta de professor
"""

from django.urls import path
from . import api_views

app_name = 'accounts'

urlpatterns = [
    path('api/users/', api_views.CreateUserAPIView.as_view(), name='api_users'),
    path('api/accounts/', api_views.AddAccountAPIView.as_view(), name='api_accounts'),
    path('api/teachers/', api_views.AddAccountTeacherAPIView.as_view(), name='api_teachers'),
]
