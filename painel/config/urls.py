"""
URL Configuration para o Painel de Agendamentos.

Estrutura:
- /users/ - API de Usuários
- /fornecedores/ - API de Fornecedores
- /agendamentos/ - API de Agendamentos
- /health/ - Health check
"""

from django.http import JsonResponse
from django.urls import path, include


def health(request):
    return JsonResponse({'status': 'ok'})


urlpatterns = [
    path('users/', include('painel.adapters.django_app.usuarios.urls')),
    path('fornecedores/', include('painel.adapters.django_app.fornecedores.urls')),
    path('agendamentos/', include('painel.adapters.django_app.agendamentos.urls')),

    # Health check
    path('health/', health),
]
