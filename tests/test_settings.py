# tests/test_settings.py

import importlib
import sys

import pytest
from django.core.exceptions import ImproperlyConfigured

AMBIENTE_PRODUCAO = {
    'SECRET_KEY': 'chave-de-producao',
    'ALLOWED_HOSTS': 'orbita.example.com,api.orbita.example.com',
    'REDIS_URL': 'redis://cache:6379/0',
    'DATABASE_URL': 'postgres://orbita:segredo@db:5432/orbita',
}


def carregar_producao(monkeypatch, **ambiente):
    for chave in ('DB_SSLMODE', 'LOG_FILE', *AMBIENTE_PRODUCAO):
        monkeypatch.delenv(chave, raising=False)
    for chave, valor in ambiente.items():
        monkeypatch.setenv(chave, valor)

    for modulo in ('config.settings.production', 'config.settings.base'):
        monkeypatch.delitem(sys.modules, modulo, raising=False)
    return importlib.import_module('config.settings.production')


def test_producao_le_ambiente_e_exige_ssl(monkeypatch):
    producao = carregar_producao(monkeypatch, **AMBIENTE_PRODUCAO)

    assert producao.DEBUG is False
    assert producao.SECRET_KEY == 'chave-de-producao'
    assert producao.ALLOWED_HOSTS == ['orbita.example.com', 'api.orbita.example.com']
    banco = producao.DATABASES['default']
    assert banco['HOST'] == 'db'
    assert banco['CONN_HEALTH_CHECKS'] is True
    assert banco['OPTIONS']['sslmode'] == 'require'
    assert producao.SECURE_SSL_REDIRECT is True
    assert producao.SECURE_REDIRECT_EXEMPT == [r'^health/$']


@pytest.mark.parametrize('faltando', ['SECRET_KEY', 'ALLOWED_HOSTS', 'REDIS_URL'])
def test_producao_sem_variavel_obrigatoria(monkeypatch, faltando):
    ambiente = {chave: valor for chave, valor in AMBIENTE_PRODUCAO.items() if chave != faltando}

    with pytest.raises(ImproperlyConfigured):
        carregar_producao(monkeypatch, **ambiente)


def test_producao_sem_database_url_exige_variaveis_do_banco(monkeypatch):
    ambiente = {chave: valor for chave, valor in AMBIENTE_PRODUCAO.items() if chave != 'DATABASE_URL'}
    monkeypatch.delenv('DB_NAME', raising=False)

    with pytest.raises(ImproperlyConfigured):
        carregar_producao(monkeypatch, **ambiente)
