"""
URL patterns para Usuários.

- GET/POST /users/
- PUT/DELETE /users/<id>/
- POST /users/<id>/token/
"""

from django.urls import path

from . import api_views

app_name = 'usuarios'

urlpatterns = [
    path('', api_views.UsuarioAPIListView.as_view(), name='api_list'),
    path('<str:pk>/', api_views.UsuarioAPIDetailView.as_view(), name='api_detail'),
    path('<str:pk>/token/', api_views.UsuarioAPITokenView.as_view(), name='api_token'),
]
