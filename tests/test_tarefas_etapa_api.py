# tests/test_tarefas_etapa_api.py

import pytest

from apps.core.models import Etapa, Projeto, Tarefa
from tests.helpers import post_json, posicoes

pytestmark = pytest.mark.django_db


def url_tarefas(projeto_id, etapa_id):
    return f'/api/projects/{projeto_id}/stages/{etapa_id}/tasks'


def test_lista_em_ordem_de_posicao(cliente_dono, projeto, etapa_a, tarefas_a):
    tarefas_a['A'].posicao = 9
    tarefas_a['A'].save()

    response = cliente_dono.get(url_tarefas(projeto.id, etapa_a.id))

    assert response.status_code == 200
    assert [t['title'] for t in response.json()['tasks']] == ['B', 'C', 'D', 'A']


def test_leitura_permitida_para_colaborador_leitor(client, projeto, etapa_a, tarefas_a, colaborador):
    client.force_login(colaborador('viewer'))
    assert client.get(url_tarefas(projeto.id, etapa_a.id)).status_code == 200


def test_cria_no_fim_da_etapa(cliente_dono, dono, projeto, etapa_a, tarefas_a):
    response = post_json(cliente_dono, url_tarefas(projeto.id, etapa_a.id), {
        'title': '  Nova  ',
        'priority': 'high',
        'assigneeId': dono.id,
        'dueDate': '2025-06-30',
        'estimatedHours': 3.5,
    })

    assert response.status_code == 201
    tarefa = response.json()['task']
    assert tarefa['title'] == 'Nova'
    assert tarefa['position'] == 4
    assert tarefa['priority'] == 'high'
    assert tarefa['assigneeId'] == dono.id
    assert tarefa['dueDate'] == '2025-06-30'
    assert tarefa['estimatedHours'] == 3.5
    assert posicoes(etapa_a)[-1] == ('Nova', 4)


def test_primeira_tarefa_da_etapa_fica_na_posicao_zero(cliente_dono, projeto, etapa_b):
    response = post_json(cliente_dono, url_tarefas(projeto.id, etapa_b.id), {'title': 'Primeira'})

    assert response.status_code == 201
    assert response.json()['task']['position'] == 0
    assert response.json()['task']['priority'] == 'medium'


@pytest.mark.parametrize('dados', [
    {},
    {'title': '   '},
    {'title': 'Ok', 'priority': 'urgent'},
    {'title': 'Ok', 'dueDate': '30/06/2025'},
    {'title': 'Ok', 'estimatedHours': -1},
    {'title': 'Ok', 'assigneeId': 'abc'},
])
def test_dados_invalidos(cliente_dono, projeto, etapa_a, dados):
    response = post_json(cliente_dono, url_tarefas(projeto.id, etapa_a.id), dados)

    assert response.status_code == 400
    assert not Tarefa.objects.filter(etapa=etapa_a).exists()


def test_responsavel_inexistente(cliente_dono, projeto, etapa_a):
    response = post_json(cliente_dono, url_tarefas(projeto.id, etapa_a.id), {'title': 'Ok', 'assigneeId': 9999})
    assert response.status_code == 404


def test_leitor_nao_pode_criar(client, projeto, etapa_a, colaborador):
    client.force_login(colaborador('viewer'))

    response = post_json(client, url_tarefas(projeto.id, etapa_a.id), {'title': 'Bloqueada'})

    assert response.status_code == 403


def test_etapa_de_outro_projeto_nao_encontrada(cliente_dono, dono, projeto):
    outro = Projeto.objects.create(nome='Outro', dono=dono)
    etapa_outra = Etapa.objects.create(projeto=outro, nome='Alheia')

    assert cliente_dono.get(url_tarefas(projeto.id, etapa_outra.id)).status_code == 404


def test_sinal_anexa_tarefas_criadas_sem_posicao(projeto, etapa_a, tarefas_a):
    tarefa = Tarefa.objects.create(projeto=projeto, etapa=etapa_a, titulo='Pelo admin')

    assert tarefa.posicao == 4
