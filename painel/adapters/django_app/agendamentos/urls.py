"""
URL patterns para Agendamentos.
"""

from django.urls import path

from . import api_views

app_name = 'agendamentos'

urlpatterns = [
    path('', api_views.AgendamentoAPIListView.as_view(), name='api_list'),
    path('<str:pk>/', api_views.AgendamentoAPIDetailView.as_view(), name='api_detail'),
]
