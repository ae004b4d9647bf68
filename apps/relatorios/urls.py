# apps/relatorios/urls.py

from django.urls import path
from . import views

app_name = 'relatorios'

urlpatterns = [
    # Cartões e listas do dashboard
    path('stats', views.api_estatisticas, name='stats'),
    path('people-workload', views.api_carga_pessoas, name='carga_pessoas'),
    path('recent-projects', views.api_projetos_recentes, name='projetos_recentes'),

    # Exportações
    path('people-workload/csv', views.exportar_carga_csv, name='carga_pessoas_csv'),
    path('people-workload/excel', views.exportar_carga_excel, name='carga_pessoas_excel'),
]
