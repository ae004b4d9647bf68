# apps/board/consumers.py

import json
import logging

from channels.db import database_sync_to_async
from channels.generic.websocket import AsyncWebsocketConsumer
from django.utils import timezone

from apps.core.models import Etapa, EtapaWorkflow, Projeto, Workflow
from apps.core.permissions import OrbitaPermissions
from .eventos import grupo_projeto, grupo_workflow

logger = logging.getLogger(__name__)


class KanbanConsumerBase(AsyncWebsocketConsumer):
    """
    Base dos consumers WebSocket do Kanban

    Subclasses definem o parâmetro de rota, o nome do grupo e a
    verificação de acesso. Eventos publicados por apps.board.eventos
    chegam aqui pelos handlers de mesmo nome do 'type'.
    """

    parametro_rota = None

    async def connect(self):
        """
        Conecta usuário ao grupo do projeto/workflow
        Verifica permissões antes de aceitar conexão
        """
        self.escopo_id = self.scope['url_route']['kwargs'][self.parametro_rota]
        self.grupo = self.get_grupo()
        self.user = self.scope['user']

        if not self.user.is_authenticated:
            logger.warning("❌ Conexão WebSocket rejeitada - usuário não autenticado")
            await self.close()
            return

        if not await self.verificar_acesso():
            logger.warning(f"❌ Conexão WebSocket rejeitada - {self.user.username} sem acesso a {self.grupo}")
            await self.close()
            return

        await self.channel_layer.group_add(self.grupo, self.channel_name)
        await self.accept()

        logger.info(f"✅ WebSocket conectado - {self.user.username} em {self.grupo}")

    async def disconnect(self, close_code):
        if hasattr(self, 'grupo'):
            await self.channel_layer.group_discard(self.grupo, self.channel_name)

        logger.info(f"🔌 WebSocket desconectado de {getattr(self, 'grupo', '?')}")

    async def receive(self, text_data):
        """
        Recebe mensagens do cliente WebSocket
        """
        try:
            data = json.loads(text_data)
        except json.JSONDecodeError:
            logger.error(f"❌ JSON inválido recebido via WebSocket de {self.user.username}")
            return

        message_type = data.get('type')

        # Heartbeat/Ping
        if message_type == 'ping':
            await self.send(text_data=json.dumps({
                'type': 'pong',
                'timestamp': timezone.now().isoformat()
            }))

        elif message_type == 'sync':
            estado = await self.get_estado()
            await self.send(text_data=json.dumps({
                'type': 'sync',
                'data': estado,
                'timestamp': timezone.now().isoformat()
            }))

    # === Handlers para eventos publicados pelos serviços ===

    async def tasks_reordered(self, event):
        await self.send(text_data=json.dumps({
            'type': 'tasks_reordered',
            'message': event['message']
        }))

    async def task_created(self, event):
        await self.send(text_data=json.dumps({
            'type': 'task_created',
            'message': event['message']
        }))

    async def task_reassigned(self, event):
        await self.send(text_data=json.dumps({
            'type': 'task_reassigned',
            'message': event['message']
        }))

    async def stages_reordered(self, event):
        await self.send(text_data=json.dumps({
            'type': 'stages_reordered',
            'message': event['message']
        }))

    # === Métodos a definir nas subclasses ===

    def get_grupo(self):
        raise NotImplementedError

    async def verificar_acesso(self):
        raise NotImplementedError

    async def get_estado(self):
        raise NotImplementedError


class ProjetoKanbanConsumer(KanbanConsumerBase):
    """Atualizações em tempo real das etapas de um projeto"""

    parametro_rota = 'projeto_id'

    def get_grupo(self):
        return grupo_projeto(self.escopo_id)

    @database_sync_to_async
    def verificar_acesso(self):
        try:
            projeto = Projeto.objects.select_related('equipe').get(id=self.escopo_id)
        except Projeto.DoesNotExist:
            return False
        return OrbitaPermissions.tem_acesso_projeto(self.user, projeto)

    @database_sync_to_async
    def get_estado(self):
        """Posições atuais de todas as etapas do projeto"""
        etapas = []
        for etapa in Etapa.objects.filter(projeto_id=self.escopo_id).prefetch_related('tarefas'):
            etapas.append({
                'id': etapa.id,
                'nome': etapa.nome,
                'tarefas': [
                    {'id': tarefa.id, 'position': tarefa.posicao}
                    for tarefa in etapa.tarefas.all()
                ]
            })
        return {'projectId': int(self.escopo_id), 'stages': etapas}


class WorkflowKanbanConsumer(KanbanConsumerBase):
    """Atualizações em tempo real das etapas de um workflow"""

    parametro_rota = 'workflow_id'

    def get_grupo(self):
        return grupo_workflow(self.escopo_id)

    @database_sync_to_async
    def verificar_acesso(self):
        try:
            workflow = Workflow.objects.select_related('equipe').get(id=self.escopo_id)
        except Workflow.DoesNotExist:
            return False
        return OrbitaPermissions.tem_acesso_workflow(self.user, workflow)

    @database_sync_to_async
    def get_estado(self):
        """Posições atuais de todas as etapas do workflow"""
        etapas = []
        for etapa in EtapaWorkflow.objects.filter(workflow_id=self.escopo_id).prefetch_related('tarefas'):
            etapas.append({
                'id': etapa.id,
                'nome': etapa.nome,
                'tarefas': [
                    {'id': tarefa.id, 'position': tarefa.posicao}
                    for tarefa in etapa.tarefas.all()
                ]
            })
        return {'workflowId': int(self.escopo_id), 'stages': etapas}
