# apps/core/__init__.py

"""
Core - Aplicação principal do Órbita Board

Contém:
- Models (Usuario, Equipe, Projeto, Etapa, Tarefa, Workflow...)
- Sistema de permissões customizado
- Erros da API e decorador api_json
- Comando de seed para desenvolvimento
"""
