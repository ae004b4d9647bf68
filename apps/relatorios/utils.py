# apps/relatorios/utils.py

from io import BytesIO
from typing import Dict, List

import xlsxwriter
from django.db.models import Count, Q

from apps.board.services import kanban_pessoas_service
from apps.core.models import ColaboradorProjeto, Projeto, Tarefa


def calcular_estatisticas_dashboard() -> Dict:
    """
    Cartões do dashboard: projetos ativos, tarefas e membros
    """
    projetos_ativos = Projeto.objects.filter(arquivado=False, status='in_progress').count()

    tarefas = Tarefa.objects.aggregate(
        pendentes=Count('id', filter=Q(status='todo')),
        concluidas=Count('id', filter=Q(status='completed')),
    )

    # Membros únicos = usuários que colaboram em algum projeto
    membros = ColaboradorProjeto.objects.values('usuario_id').distinct().count()

    return {
        'activeProjects': projetos_ativos,
        'pendingTasks': tarefas['pendentes'],
        'completedTasks': tarefas['concluidas'],
        'teamMembers': membros,
    }


def calcular_carga_pessoas() -> List[Dict]:
    """Carga de trabalho por pessoa (visão geral do Kanban por pessoa)"""
    return kanban_pessoas_service.listar_pessoas('person', None)


def projetos_recentes(usuario, limite: int = 5) -> List[Dict]:
    """Últimos projetos do usuário com progresso calculado pelas tarefas"""
    projetos = Projeto.objects.filter(dono=usuario).annotate(
        total_tarefas=Count('tarefas'),
        tarefas_concluidas=Count('tarefas', filter=Q(tarefas__status='completed')),
    ).order_by('-atualizado_em', '-id')[:limite]

    resultado = []
    for projeto in projetos:
        progresso = 0
        if projeto.total_tarefas:
            progresso = round(projeto.tarefas_concluidas * 100 / projeto.total_tarefas)

        resultado.append({
            'id': projeto.id,
            'name': projeto.nome,
            'description': projeto.descricao,
            'status': projeto.status,
            'totalTasks': projeto.total_tarefas,
            'completedTasks': projeto.tarefas_concluidas,
            'progressPercentage': progresso,
            'owner': {
                'fullName': usuario.get_nome_exibicao(),
                'avatarUrl': usuario.avatar_url or None,
            },
        })
    return resultado


def gerar_planilha_carga(pessoas: List[Dict]) -> bytes:
    """
    Gera planilha XLSX da carga de trabalho por pessoa
    """
    output = BytesIO()
    workbook = xlsxwriter.Workbook(output, {'in_memory': True})

    header_format = workbook.add_format({
        'bold': True,
        'font_color': 'white',
        'bg_color': '#366092',
        'border': 1
    })
    cell_format = workbook.add_format({'border': 1})

    sheet = workbook.add_worksheet('Carga')
    headers = ['ID', 'Nome', 'Email', 'Equipe', 'Pendentes', 'Concluídas', 'Total']
    for col, header in enumerate(headers):
        sheet.write(0, col, header, header_format)

    for row, pessoa in enumerate(pessoas, 1):
        sheet.write(row, 0, pessoa['id'], cell_format)
        sheet.write(row, 1, pessoa['name'], cell_format)
        sheet.write(row, 2, pessoa['email'], cell_format)
        sheet.write(row, 3, pessoa['team'], cell_format)
        sheet.write(row, 4, pessoa['pendingTasks'], cell_format)
        sheet.write(row, 5, pessoa['completedTasks'], cell_format)
        sheet.write(row, 6, pessoa['totalTasks'], cell_format)

    sheet.set_column(1, 3, 25)
    workbook.close()
    output.seek(0)
    return output.getvalue()
