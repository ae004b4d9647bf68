# apps/core/erros.py

"""
Erros da aplicação e tratamento na fronteira HTTP

Serviços levantam subclasses de ErroAplicacao; o decorador api_json
converte cada uma na resposta JSON com o status correspondente.
"""

import json
import logging
from functools import wraps

from django.db import DatabaseError
from django.http import JsonResponse

logger = logging.getLogger(__name__)


class ErroAplicacao(Exception):
    """Base dos erros tratados pela API"""

    status_code = 500
    mensagem_padrao = 'Erro interno do servidor'

    def __init__(self, mensagem=None):
        self.mensagem = mensagem or self.mensagem_padrao
        super().__init__(self.mensagem)


class ErroValidacao(ErroAplicacao):
    """Entrada ausente ou malformada"""

    status_code = 400
    mensagem_padrao = 'Parâmetros inválidos'


class ErroNaoAutenticado(ErroAplicacao):
    status_code = 401
    mensagem_padrao = 'Não autorizado'


class ErroAcessoNegado(ErroAplicacao):
    """Usuário sem permissão no projeto/workflow"""

    status_code = 403
    mensagem_padrao = 'Acesso negado'


class ErroNaoEncontrado(ErroAplicacao):
    """Recurso inexistente ou fora do escopo do usuário"""

    status_code = 404
    mensagem_padrao = 'Recurso não encontrado'


class ErroArmazenamento(ErroAplicacao):
    """Falha na chamada ao banco de dados"""

    status_code = 500
    mensagem_padrao = 'Erro ao acessar o banco de dados'


def ler_corpo_json(request):
    """Decodifica o corpo da requisição como objeto JSON"""
    try:
        dados = json.loads(request.body or b'{}')
    except (ValueError, UnicodeDecodeError):
        raise ErroValidacao('Corpo da requisição não é um JSON válido')

    if not isinstance(dados, dict):
        raise ErroValidacao('Corpo da requisição deve ser um objeto JSON')
    return dados


def converter_id(valor, campo):
    """Converte identificador recebido (str ou int) para inteiro positivo"""
    if isinstance(valor, bool):
        raise ErroValidacao(f'{campo} inválido')
    try:
        convertido = int(valor)
    except (TypeError, ValueError):
        raise ErroValidacao(f'{campo} inválido')
    if convertido <= 0:
        raise ErroValidacao(f'{campo} inválido')
    return convertido


def api_json(view_func):
    """
    Decorador das views da API JSON

    - Exige usuário autenticado (401 em vez de redirecionar para login)
    - Converte ErroAplicacao em JsonResponse com o status do erro
    - Converte falhas do banco e erros inesperados em 500
    """

    @wraps(view_func)
    def wrapped_view(request, *args, **kwargs):
        try:
            if not request.user.is_authenticated:
                raise ErroNaoAutenticado()
            return view_func(request, *args, **kwargs)

        except ErroAplicacao as erro:
            if erro.status_code >= 500:
                logger.error(f"❌ {view_func.__name__}: {erro.mensagem}")
            return JsonResponse({'error': erro.mensagem}, status=erro.status_code)

        except DatabaseError:
            logger.exception(f"❌ Falha no banco em {view_func.__name__}")
            return JsonResponse({'error': ErroArmazenamento.mensagem_padrao}, status=500)

        except Exception:
            logger.exception(f"❌ Erro inesperado em {view_func.__name__}")
            return JsonResponse({'error': ErroAplicacao.mensagem_padrao}, status=500)

    return wrapped_view
