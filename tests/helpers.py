# tests/helpers.py

import json


def criar_usuario(django_user_model, username, **extra):
    extra.setdefault('email', f'{username}@orbita.local')
    return django_user_model.objects.create_user(username=username, password='senha123', **extra)


def posicoes(etapa):
    """[(titulo, posicao)] da etapa em ordem de posição"""
    return list(etapa.tarefas.order_by('posicao', 'id').values_list('titulo', 'posicao'))


def post_json(client, url, dados):
    return client.post(url, data=json.dumps(dados), content_type='application/json')


def put_json(client, url, dados):
    return client.put(url, data=json.dumps(dados), content_type='application/json')
