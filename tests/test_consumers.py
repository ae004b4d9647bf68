# tests/test_consumers.py

import pytest
from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer
from channels.testing import WebsocketCommunicator
from django.contrib.auth.models import AnonymousUser

from apps.board.consumers import ProjetoKanbanConsumer, WorkflowKanbanConsumer
from apps.board.eventos import grupo_projeto, notificar_grupo

pytestmark = pytest.mark.django_db(transaction=True)


def comunicador(escopo_id, usuario, consumer=ProjetoKanbanConsumer, parametro='projeto_id', prefixo='projetos'):
    communicator = WebsocketCommunicator(consumer.as_asgi(), f'/ws/{prefixo}/{escopo_id}/')
    communicator.scope['url_route'] = {'args': (), 'kwargs': {parametro: str(escopo_id)}}
    communicator.scope['user'] = usuario
    return communicator


def comunicador_workflow(workflow_id, usuario):
    return comunicador(workflow_id, usuario, WorkflowKanbanConsumer, 'workflow_id', 'workflows')


def test_ping_e_evento_de_reordenacao(dono, projeto):
    async def fluxo():
        communicator = comunicador(projeto.id, dono)
        connected, _ = await communicator.connect()
        assert connected

        await communicator.send_json_to({'type': 'ping'})
        pong = await communicator.receive_json_from()
        assert pong['type'] == 'pong'

        await get_channel_layer().group_send(
            grupo_projeto(projeto.id),
            {'type': 'tasks_reordered', 'message': {'taskId': 7}}
        )
        evento = await communicator.receive_json_from()
        assert evento == {'type': 'tasks_reordered', 'message': {'taskId': 7}}

        await communicator.disconnect()

    async_to_sync(fluxo)()


def test_rejeita_anonimo_e_sem_acesso(projeto, outro_usuario):
    async def fluxo(usuario):
        communicator = comunicador(projeto.id, usuario)
        connected, _ = await communicator.connect()
        assert not connected

    async_to_sync(fluxo)(AnonymousUser())
    async_to_sync(fluxo)(outro_usuario)


def test_notificar_grupo_adiciona_timestamp(monkeypatch):
    enviados = []

    class CamadaFalsa:
        async def group_send(self, grupo, evento):
            enviados.append((grupo, evento))

    monkeypatch.setattr('apps.board.eventos.get_channel_layer', lambda: CamadaFalsa())

    notificar_grupo('projeto_1', 'tasks_reordered', {'taskId': 1})

    [(grupo, evento)] = enviados
    assert grupo == 'projeto_1'
    assert evento['type'] == 'tasks_reordered'
    assert evento['message']['taskId'] == 1
    assert 'timestamp' in evento['message']


def test_notificar_grupo_nao_propaga_falha_da_camada(monkeypatch, caplog):
    class CamadaQuebrada:
        async def group_send(self, grupo, evento):
            raise ConnectionError('redis fora do ar')

    monkeypatch.setattr('apps.board.eventos.get_channel_layer', lambda: CamadaQuebrada())

    notificar_grupo('projeto_1', 'tasks_reordered', {})

    assert 'projeto_1' in caplog.text


def test_sync_do_projeto_devolve_posicoes(dono, projeto, etapa_a, tarefas_a):
    async def fluxo():
        communicator = comunicador(projeto.id, dono)
        connected, _ = await communicator.connect()
        assert connected

        await communicator.send_json_to({'type': 'sync'})
        resposta = await communicator.receive_json_from()
        await communicator.disconnect()
        return resposta

    resposta = async_to_sync(fluxo)()

    assert resposta['type'] == 'sync'
    assert resposta['data']['projectId'] == projeto.id
    [etapa] = resposta['data']['stages']
    assert etapa['id'] == etapa_a.id
    assert [t['id'] for t in etapa['tarefas']] == [tarefas_a[t].id for t in 'ABCD']
    assert [t['position'] for t in etapa['tarefas']] == [0, 1, 2, 3]


def test_sync_do_workflow_devolve_etapas_e_posicoes(dono, workflow, etapas_workflow, tarefas_workflow):
    async def fluxo():
        communicator = comunicador_workflow(workflow.id, dono)
        connected, _ = await communicator.connect()
        assert connected

        await communicator.send_json_to({'type': 'sync'})
        resposta = await communicator.receive_json_from()
        await communicator.disconnect()
        return resposta

    resposta = async_to_sync(fluxo)()

    assert resposta['type'] == 'sync'
    assert resposta['data']['workflowId'] == workflow.id
    etapas = resposta['data']['stages']
    assert [e['id'] for e in etapas] == [e.id for e in etapas_workflow]
    assert [t['id'] for t in etapas[0]['tarefas']] == [tarefas_workflow[t].id for t in 'PQR']
    assert [t['position'] for t in etapas[0]['tarefas']] == [0, 1, 2]
    assert all(e['tarefas'] == [] for e in etapas[1:])


def test_workflow_rejeita_usuario_sem_acesso(workflow, outro_usuario):
    async def fluxo():
        communicator = comunicador_workflow(workflow.id, outro_usuario)
        connected, _ = await communicator.connect()
        return connected

    assert async_to_sync(fluxo)() is False


def test_repassa_reordenacao_de_etapas(dono, projeto):
    async def fluxo():
        communicator = comunicador(projeto.id, dono)
        connected, _ = await communicator.connect()
        assert connected

        await get_channel_layer().group_send(
            grupo_projeto(projeto.id),
            {'type': 'stages_reordered', 'message': {'positions': [{'id': 3, 'position': 0}]}}
        )
        evento = await communicator.receive_json_from()
        await communicator.disconnect()
        return evento

    assert async_to_sync(fluxo)() == {
        'type': 'stages_reordered',
        'message': {'positions': [{'id': 3, 'position': 0}]},
    }
