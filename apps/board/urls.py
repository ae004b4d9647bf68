# apps/board/urls.py

from django.urls import path
from . import views

app_name = 'board'

urlpatterns = [
    # Reordenação de tarefas
    path('projects/<int:projeto_id>/tasks/reorder', views.reordenar_tarefas_projeto, name='reordenar_projeto'),
    path('workflows/<int:workflow_id>/tasks/reorder', views.reordenar_tarefas_workflow, name='reordenar_workflow'),
    path('projects/<int:projeto_id>/stages/reorder', views.reordenar_etapas_projeto, name='reordenar_etapas'),

    # Tarefas de uma etapa
    path('projects/<int:projeto_id>/stages/<int:etapa_id>/tasks', views.tarefas_etapa, name='tarefas_etapa'),

    # Kanban por pessoa/equipe
    path('kanban/people', views.kanban_pessoas, name='kanban_pessoas'),
    path('kanban/people/tasks', views.kanban_tarefas_pessoas, name='kanban_tarefas_pessoas'),
    path('kanban/tasks/move', views.kanban_mover_tarefa, name='kanban_mover_tarefa'),
    path('kanban/teams', views.kanban_equipes, name='kanban_equipes'),
]
