# apps/board/__init__.py

"""
Board - Kanban do Órbita Board

Funcionalidades:
- Reordenação de tarefas dentro e entre etapas (transacional)
- Kanban por pessoa/equipe unindo tarefas de projeto e de workflow
- WebSockets para atualizações em tempo real
"""
