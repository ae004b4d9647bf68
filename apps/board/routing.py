# apps/board/routing.py

from django.urls import re_path
from . import consumers

# Rotas WebSocket para a aplicação board
websocket_urlpatterns = [
    # Kanban de projeto - reordenação e criação de tarefas em tempo real
    re_path(r'ws/projetos/(?P<projeto_id>\d+)/$', consumers.ProjetoKanbanConsumer.as_asgi()),

    # Kanban de workflow
    re_path(r'ws/workflows/(?P<workflow_id>\d+)/$', consumers.WorkflowKanbanConsumer.as_asgi()),
]
