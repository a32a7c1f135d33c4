"""
WSGI entry point do Painel de Agendamentos.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'painel.config.settings')

application = get_wsgi_application()
