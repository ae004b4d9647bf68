# config/wsgi.py
# Apenas HTTP (admin e API); WebSockets do Kanban exigem config/asgi.py

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.production')

application = get_wsgi_application()
