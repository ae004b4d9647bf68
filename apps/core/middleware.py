# apps/core/middleware.py

import logging
import time

from django.conf import settings

logger = logging.getLogger(__name__)


class CabecalhosUsuarioMiddleware:
    """
    Adiciona cabeçalhos de contexto do usuário às respostas

    Também registra requisições lentas da API para facilitar diagnóstico
    de reordenações e agregações pesadas.
    """

    def __init__(self, get_response):
        self.get_response = get_response
        self.limite_lento = settings.ORBITA_REQUISICAO_LENTA_SEGUNDOS

    def __call__(self, request):
        inicio = time.monotonic()

        # Processar request
        response = self.get_response(request)

        duracao = time.monotonic() - inicio

        # Adicionar headers do usuário autenticado
        if hasattr(request, 'user') and request.user.is_authenticated:
            response['X-User-Type'] = request.user.tipo

        if duracao > self.limite_lento and request.path.startswith('/api/'):
            logger.warning(f"🐢 {request.method} {request.path} levou {duracao:.2f}s")

        return response
