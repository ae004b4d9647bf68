# apps/board/views.py

from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from apps.core.erros import api_json, ler_corpo_json
from .services import kanban_pessoas_service, reordenacao_service, tarefas_etapa_service


# === REORDENAÇÃO (drag-and-drop entre/dentro de etapas) ===

@csrf_exempt  # Cliente JS envia JSON puro
@require_POST
@api_json
def reordenar_tarefas_projeto(request, projeto_id):
    """
    Move tarefa para nova posição/etapa do projeto
    Body: {taskId, newPosition, stageId}
    """
    dados = ler_corpo_json(request)
    resultado = reordenacao_service.reordenar_tarefa_projeto(request.user, projeto_id, dados)
    return JsonResponse(resultado)


@csrf_exempt
@require_POST
@api_json
def reordenar_tarefas_workflow(request, workflow_id):
    dados = ler_corpo_json(request)
    resultado = reordenacao_service.reordenar_tarefa_workflow(request.user, workflow_id, dados)
    return JsonResponse(resultado)


@csrf_exempt
@require_http_methods(['PUT'])
@api_json
def reordenar_etapas_projeto(request, projeto_id):
    """
    Reordena as colunas do projeto
    Body: {stages: [{id, position}]}
    """
    dados = ler_corpo_json(request)
    return JsonResponse(reordenacao_service.reordenar_etapas_projeto(request.user, projeto_id, dados))


# === TAREFAS DA ETAPA ===

@csrf_exempt
@require_http_methods(['GET', 'POST'])
@api_json
def tarefas_etapa(request, projeto_id, etapa_id):
    """
    GET: tarefas da etapa ordenadas por posição
    POST: cria tarefa no fim da etapa
    """
    if request.method == 'GET':
        tarefas = tarefas_etapa_service.listar(request.user, projeto_id, etapa_id)
        return JsonResponse({'tasks': tarefas})

    dados = ler_corpo_json(request)
    tarefa = tarefas_etapa_service.criar(request.user, projeto_id, etapa_id, dados)
    return JsonResponse({'task': tarefa}, status=201)


# === KANBAN POR PESSOA/EQUIPE ===

@require_GET
@api_json
def kanban_pessoas(request):
    """Colunas de pessoas com contagem de tarefas pendentes/concluídas"""
    pessoas = kanban_pessoas_service.listar_pessoas(
        request.GET.get('viewType'),
        request.GET.get('teamId')
    )
    return JsonResponse({'people': pessoas})


@require_GET
@api_json
def kanban_tarefas_pessoas(request):
    tarefas = kanban_pessoas_service.tarefas_por_pessoa(request.GET.get('personIds'))
    return JsonResponse({'tasksByPerson': tarefas})


@csrf_exempt
@require_http_methods(['PUT'])
@api_json
def kanban_mover_tarefa(request):
    """Reatribui tarefa arrastada para a coluna de outra pessoa"""
    dados = ler_corpo_json(request)
    return JsonResponse(kanban_pessoas_service.mover_tarefa(request.user, dados))


@require_GET
@api_json
def kanban_equipes(request):
    return JsonResponse({'teams': kanban_pessoas_service.listar_equipes()})
