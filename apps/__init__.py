# apps/__init__.py

"""
Órbita Board - Aplicações Django

Este pacote contém todas as aplicações do sistema:
- core: Models principais, permissões, erros da API
- board: Reordenação de tarefas, Kanban por pessoa e WebSockets
- relatorios: Estatísticas do dashboard e exportações
"""

__version__ = '0.1.0'
