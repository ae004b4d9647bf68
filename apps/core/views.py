# apps/core/views.py

import logging

from django.core.cache import cache
from django.db import DatabaseError
from django.http import JsonResponse
from django.utils import timezone
from django.views.decorators.http import require_GET

from .models import Usuario

logger = logging.getLogger(__name__)

VERSAO = '0.1.0'


@require_GET
def health_check(request):
    """
    Health check para monitoramento
    """
    try:
        # Verificar conexão com banco
        Usuario.objects.exists()

        # Verificar cache (Redis em produção)
        cache.set('health_check', 'ok', 60)
        cache_ok = cache.get('health_check') == 'ok'

    except DatabaseError as e:
        logger.error(f"❌ Health check falhou: {e}")
        return JsonResponse({
            'status': 'unhealthy',
            'error': 'database',
            'timestamp': timezone.now().isoformat(),
            'version': VERSAO
        }, status=503)

    return JsonResponse({
        'status': 'healthy',
        'database': 'ok',
        'cache': 'ok' if cache_ok else 'degraded',
        'timestamp': timezone.now().isoformat(),
        'version': VERSAO
    })
