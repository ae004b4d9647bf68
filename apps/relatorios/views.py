# apps/relatorios/views.py

import csv
import logging

from django.http import HttpResponse, JsonResponse
from django.utils import timezone
from django.views.decorators.http import require_GET

from apps.core.erros import api_json
from .utils import calcular_carga_pessoas, calcular_estatisticas_dashboard, gerar_planilha_carga, projetos_recentes

logger = logging.getLogger(__name__)


@require_GET
@api_json
def api_estatisticas(request):
    """Cartões do dashboard"""
    return JsonResponse(calcular_estatisticas_dashboard())


@require_GET
@api_json
def api_carga_pessoas(request):
    return JsonResponse({'people': calcular_carga_pessoas()})


@require_GET
@api_json
def api_projetos_recentes(request):
    return JsonResponse({'data': projetos_recentes(request.user)})


@require_GET
@api_json
def exportar_carga_csv(request):
    """
    Exporta carga de trabalho por pessoa para CSV
    """
    response = HttpResponse(content_type='text/csv; charset=utf-8')
    nome_arquivo = f"carga_pessoas_{timezone.now().strftime('%Y%m%d')}.csv"
    response['Content-Disposition'] = f'attachment; filename="{nome_arquivo}"'

    # BOM para Excel reconhecer UTF-8
    response.write('\ufeff')

    writer = csv.writer(response)
    writer.writerow(['ID', 'Nome', 'Email', 'Equipe', 'Pendentes', 'Concluídas', 'Total'])
    for pessoa in calcular_carga_pessoas():
        writer.writerow([
            pessoa['id'],
            pessoa['name'],
            pessoa['email'],
            pessoa['team'],
            pessoa['pendingTasks'],
            pessoa['completedTasks'],
            pessoa['totalTasks'],
        ])

    logger.info(f"📄 Carga por pessoa exportada em CSV por {request.user.username}")
    return response


@require_GET
@api_json
def exportar_carga_excel(request):
    """
    Exporta carga de trabalho por pessoa para Excel (XLSX)
    """
    conteudo = gerar_planilha_carga(calcular_carga_pessoas())

    response = HttpResponse(
        conteudo,
        content_type='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
    )
    nome_arquivo = f"carga_pessoas_{timezone.now().strftime('%Y%m%d')}.xlsx"
    response['Content-Disposition'] = f'attachment; filename="{nome_arquivo}"'

    logger.info(f"📊 Carga por pessoa exportada em XLSX por {request.user.username}")
    return response
