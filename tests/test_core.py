# tests/test_core.py

import pytest
from django.core.management import CommandError, call_command

from apps.core.models import MembroEquipe, Projeto, Tarefa, TarefaWorkflow
from apps.core.permissions import OrbitaPermissions
from apps.board.reordenacao import posicoes_densas

pytestmark = pytest.mark.django_db


class TestPermissoes:

    def test_leitura_e_edicao_de_projeto(self, dono, outro_usuario, admin_orbita, projeto, colaborador):
        leitor = colaborador('viewer')
        editor = colaborador('editor')

        assert OrbitaPermissions.pode_editar_projeto(dono, projeto)
        assert OrbitaPermissions.pode_editar_projeto(admin_orbita, projeto)
        assert OrbitaPermissions.pode_editar_projeto(editor, projeto)
        assert not OrbitaPermissions.pode_editar_projeto(leitor, projeto)
        assert OrbitaPermissions.tem_acesso_projeto(leitor, projeto)
        assert not OrbitaPermissions.tem_acesso_projeto(outro_usuario, projeto)

    def test_membro_da_equipe_le_projeto_da_equipe(self, outro_usuario, projeto, equipe):
        projeto.equipe = equipe
        projeto.save()
        MembroEquipe.objects.create(equipe=equipe, usuario=outro_usuario)

        assert OrbitaPermissions.tem_acesso_projeto(outro_usuario, projeto)
        assert not OrbitaPermissions.pode_editar_projeto(outro_usuario, projeto)


def test_health_check(client):
    response = client.get('/health/')

    assert response.status_code == 200
    assert response.json()['status'] == 'healthy'


def test_cabecalho_tipo_usuario(cliente_dono):
    response = cliente_dono.get('/api/kanban/teams')
    assert response['X-User-Type'] == 'funcionario'


def test_seed_cria_dados_com_posicoes_densas():
    call_command('seed')

    projeto = Projeto.objects.get(nome='Projeto Demo')
    for etapa in projeto.etapas.all():
        assert posicoes_densas(etapa.tarefas.values_list('id', 'posicao'))

    assert TarefaWorkflow.objects.count() == 4
    assert Tarefa.objects.filter(projeto=projeto).count() == 7

    with pytest.raises(CommandError):
        call_command('seed')

    call_command('seed', '--limpar')
    assert Projeto.objects.filter(nome='Projeto Demo').count() == 1
