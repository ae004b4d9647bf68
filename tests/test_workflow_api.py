# tests/test_workflow_api.py

import pytest

from apps.core.models import EtapaWorkflow, MembroEquipe, TarefaWorkflow, Workflow
from tests.helpers import criar_usuario, post_json, posicoes

pytestmark = pytest.mark.django_db


def url_reordenar(workflow_id):
    return f'/api/workflows/{workflow_id}/tasks/reorder'


def test_reordena_dentro_da_etapa(cliente_dono, workflow, etapas_workflow, tarefas_workflow):
    response = post_json(cliente_dono, url_reordenar(workflow.id), {
        'taskId': tarefas_workflow['R'].id, 'newPosition': 0, 'stageId': etapas_workflow[0].id
    })

    assert response.status_code == 200
    assert [t['title'] for t in response.json()['tasks']] == ['R', 'P', 'Q']
    assert posicoes(etapas_workflow[0]) == [('R', 0), ('P', 1), ('Q', 2)]


def test_move_para_outra_etapa(cliente_dono, workflow, etapas_workflow, tarefas_workflow):
    response = post_json(cliente_dono, url_reordenar(workflow.id), {
        'taskId': tarefas_workflow['P'].id, 'newPosition': 0, 'stageId': etapas_workflow[1].id
    })

    assert response.status_code == 200
    assert posicoes(etapas_workflow[0]) == [('Q', 0), ('R', 1)]
    assert posicoes(etapas_workflow[1]) == [('P', 0)]


def test_membro_da_equipe_pode_reordenar(client, django_user_model, equipe, workflow, etapas_workflow,
                                         tarefas_workflow):
    membro = criar_usuario(django_user_model, 'membro')
    MembroEquipe.objects.create(equipe=equipe, usuario=membro)
    client.force_login(membro)

    response = post_json(client, url_reordenar(workflow.id), {
        'taskId': tarefas_workflow['P'].id, 'newPosition': 2, 'stageId': etapas_workflow[0].id
    })

    assert response.status_code == 200


def test_quem_nao_e_da_equipe_recebe_403(client, outro_usuario, workflow, etapas_workflow, tarefas_workflow):
    client.force_login(outro_usuario)

    response = post_json(client, url_reordenar(workflow.id), {
        'taskId': tarefas_workflow['P'].id, 'newPosition': 2, 'stageId': etapas_workflow[0].id
    })

    assert response.status_code == 403


def test_etapa_de_outro_workflow(cliente_dono, dono, workflow, tarefas_workflow):
    outro = Workflow.objects.create(nome='RH', criado_por=dono)
    etapa_alheia = EtapaWorkflow.objects.create(workflow=outro, nome='Triagem')

    response = post_json(cliente_dono, url_reordenar(workflow.id), {
        'taskId': tarefas_workflow['P'].id, 'newPosition': 0, 'stageId': etapa_alheia.id
    })

    assert response.status_code == 400
    assert not TarefaWorkflow.objects.filter(etapa=etapa_alheia).exists()


def test_workflow_inexistente(cliente_dono, etapas_workflow, tarefas_workflow):
    response = post_json(cliente_dono, url_reordenar(9999), {
        'taskId': tarefas_workflow['P'].id, 'newPosition': 0, 'stageId': etapas_workflow[0].id
    })

    assert response.status_code == 404
