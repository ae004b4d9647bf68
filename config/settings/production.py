# config/settings/production.py

from django.core.exceptions import ImproperlyConfigured

from .base import *

# === PRODUÇÃO ===
# Sem default: django-environ levanta ImproperlyConfigured se faltar

DEBUG = False

SECRET_KEY = env('SECRET_KEY')
ALLOWED_HOSTS = env.list('ALLOWED_HOSTS')
if not ALLOWED_HOSTS:
    raise ImproperlyConfigured('ALLOWED_HOSTS é obrigatório em produção')
REDIS_URL = env('REDIS_URL')

if not env('DATABASE_URL', default=None):
    for variavel in ('DB_NAME', 'DB_USER', 'DB_PASSWORD', 'DB_HOST'):
        env(variavel)

DATABASES['default']['CONN_HEALTH_CHECKS'] = True
DATABASES['default'].setdefault('OPTIONS', {}).setdefault('sslmode', env('DB_SSLMODE', default='require'))

# === HTTPS atrás do proxy ===

SECURE_SSL_REDIRECT = True
SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
SECURE_HSTS_SECONDS = env.int('SECURE_HSTS_SECONDS', default=31536000)

# /health/ responde sem redirecionar para o balanceador
SECURE_REDIRECT_EXEMPT = [r'^health/$']

# === LOGGING ===

LOGGING['handlers']['file']['filename'] = env('LOG_FILE', default='/var/log/orbita-board/orbita.log')
