# tests/test_relatorios.py

import pytest

from apps.core.models import ColaboradorProjeto, Projeto, Tarefa
from tests.helpers import criar_usuario

pytestmark = pytest.mark.django_db


@pytest.fixture
def cenario(django_user_model, dono, projeto, etapa_a):
    Projeto.objects.create(nome='Arquivado', dono=dono, status='in_progress', arquivado=True)
    Projeto.objects.create(nome='Planejando', dono=dono, status='planning')

    ana = criar_usuario(django_user_model, 'ana', nome_completo='Ana')
    outro = Projeto.objects.create(nome='Paralelo', dono=dono, status='in_progress')
    ColaboradorProjeto.objects.create(projeto=projeto, usuario=ana, papel='editor')
    ColaboradorProjeto.objects.create(projeto=outro, usuario=ana, papel='viewer')
    ColaboradorProjeto.objects.create(projeto=outro, usuario=dono, papel='admin')

    for status in ['todo', 'todo', 'in_progress', 'completed', 'cancelled']:
        Tarefa.objects.create(projeto=projeto, etapa=etapa_a, titulo=status, status=status, responsavel=ana)
    return {'ana': ana}


def test_estatisticas(cliente_dono, cenario):
    response = cliente_dono.get('/api/dashboard/stats')

    assert response.status_code == 200
    assert response.json() == {
        'activeProjects': 2,
        'pendingTasks': 2,
        'completedTasks': 1,
        'teamMembers': 2,
    }


def test_estatisticas_exige_login(client):
    assert client.get('/api/dashboard/stats').status_code == 401


def test_carga_por_pessoa(cliente_dono, cenario):
    response = cliente_dono.get('/api/dashboard/people-workload')

    assert response.status_code == 200
    [ana] = response.json()['people']
    assert ana['name'] == 'Ana'
    assert (ana['pendingTasks'], ana['completedTasks'], ana['totalTasks']) == (3, 1, 4)


def test_projetos_recentes_do_usuario(cliente_dono, projeto, etapa_a, cenario):
    response = cliente_dono.get('/api/dashboard/recent-projects')

    assert response.status_code == 200
    projetos = response.json()['data']
    assert len(projetos) <= 5
    lancamento = next(p for p in projetos if p['name'] == 'Lançamento')
    assert lancamento['totalTasks'] == 5
    assert lancamento['completedTasks'] == 1
    assert lancamento['progressPercentage'] == 20
    assert lancamento['owner']['fullName'] == 'Olga Dona'


def test_exportacao_csv(cliente_dono, cenario):
    response = cliente_dono.get('/api/dashboard/people-workload/csv')

    assert response.status_code == 200
    assert response['Content-Type'].startswith('text/csv')
    linhas = response.content.decode('utf-8-sig').splitlines()
    assert linhas[0].startswith('ID,Nome')
    assert 'Ana' in linhas[1]


def test_exportacao_excel(cliente_dono, cenario):
    response = cliente_dono.get('/api/dashboard/people-workload/excel')

    assert response.status_code == 200
    assert 'attachment' in response['Content-Disposition']
    assert response.content[:2] == b'PK'
