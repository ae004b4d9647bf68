# apps/relatorios/__init__.py

"""
Relatórios - Dashboard do Órbita Board

Funcionalidades:
- Estatísticas gerais (projetos ativos, tarefas, membros)
- Carga de trabalho por pessoa
- Exportação CSV/Excel
"""
