# apps/board/eventos.py

import logging

from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer
from django.utils import timezone

logger = logging.getLogger(__name__)


def grupo_projeto(projeto_id):
    return f'projeto_{projeto_id}'


def grupo_workflow(workflow_id):
    return f'workflow_{workflow_id}'


def notificar_grupo(grupo, tipo, mensagem):
    """
    Envia evento para todos os clientes WebSocket do grupo

    Falhas da camada de canais não afetam a operação já confirmada no banco.
    """
    channel_layer = get_channel_layer()
    if channel_layer is None:
        return

    mensagem = dict(mensagem, timestamp=timezone.now().isoformat())
    try:
        async_to_sync(channel_layer.group_send)(grupo, {'type': tipo, 'message': mensagem})
    except Exception:
        logger.exception(f"⚠️  Falha ao notificar grupo {grupo} ({tipo})")
