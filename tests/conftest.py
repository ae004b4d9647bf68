# tests/conftest.py

import pytest

from apps.core.models import (
    ColaboradorProjeto, Equipe, Etapa, EtapaWorkflow, MembroEquipe, Projeto, Tarefa, TarefaWorkflow, Workflow
)
from tests.helpers import criar_usuario


@pytest.fixture
def dono(django_user_model):
    return criar_usuario(django_user_model, 'dono', nome_completo='Olga Dona')


@pytest.fixture
def outro_usuario(django_user_model):
    return criar_usuario(django_user_model, 'visitante', nome_completo='Vera Visitante')


@pytest.fixture
def admin_orbita(django_user_model):
    return criar_usuario(django_user_model, 'chefe', nome_completo='Caio Chefe', tipo='admin')


@pytest.fixture
def projeto(dono):
    return Projeto.objects.create(nome='Lançamento', dono=dono, status='in_progress')


@pytest.fixture
def etapa_a(projeto):
    return Etapa.objects.create(projeto=projeto, nome='A fazer', posicao=0)


@pytest.fixture
def etapa_b(projeto):
    return Etapa.objects.create(projeto=projeto, nome='Fazendo', posicao=1)


@pytest.fixture
def tarefas_a(projeto, etapa_a):
    """A(0) B(1) C(2) D(3)"""
    return {
        titulo: Tarefa.objects.create(projeto=projeto, etapa=etapa_a, titulo=titulo, posicao=posicao)
        for posicao, titulo in enumerate('ABCD')
    }


@pytest.fixture
def tarefas_b(projeto, etapa_b):
    """X(0) Y(1)"""
    return {
        titulo: Tarefa.objects.create(projeto=projeto, etapa=etapa_b, titulo=titulo, posicao=posicao)
        for posicao, titulo in enumerate('XY')
    }


@pytest.fixture
def cliente_dono(client, dono):
    client.force_login(dono)
    return client


@pytest.fixture
def colaborador(django_user_model, projeto):
    def _criar(papel, status='active'):
        usuario = criar_usuario(django_user_model, f'colab_{papel}_{status}')
        ColaboradorProjeto.objects.create(projeto=projeto, usuario=usuario, papel=papel, status=status)
        return usuario
    return _criar


@pytest.fixture
def equipe(dono):
    equipe = Equipe.objects.create(nome='Produto', dono=dono)
    MembroEquipe.objects.create(equipe=equipe, usuario=dono, papel='owner')
    return equipe


@pytest.fixture
def workflow(dono, equipe):
    return Workflow.objects.create(nome='Compras', criado_por=dono, equipe=equipe)


@pytest.fixture
def etapas_workflow(workflow):
    return [
        EtapaWorkflow.objects.create(workflow=workflow, nome=nome, posicao=posicao)
        for posicao, nome in enumerate(['Entrada', 'Análise'])
    ]


@pytest.fixture
def tarefas_workflow(workflow, etapas_workflow):
    """P(0) Q(1) R(2) na primeira etapa do workflow"""
    return {
        titulo: TarefaWorkflow.objects.create(
            workflow=workflow, etapa=etapas_workflow[0], titulo=titulo, posicao=posicao
        )
        for posicao, titulo in enumerate('PQR')
    }
