"""
URL patterns para Fornecedores.
"""

from django.urls import path

from . import api_views

app_name = 'fornecedores'

urlpatterns = [
    path('', api_views.FornecedorAPIListView.as_view(), name='api_list'),
    path('<str:pk>/', api_views.FornecedorAPIDetailView.as_view(), name='api_detail'),
]
