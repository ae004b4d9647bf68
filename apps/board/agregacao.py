# apps/board/agregacao.py

"""
Agregação de tarefas por pessoa para o Kanban por pessoa/equipe

Tarefas de projeto e de workflow chegam com nomes de campo e vocabulários
de status diferentes. Cada origem tem seu normalizador, e a contagem só
trabalha com o formato comum {origem, assignee_id, status}.
"""

import logging
from itertools import chain
from typing import Dict, Hashable, Iterable, Iterator, List, Optional

logger = logging.getLogger(__name__)

# === STATUS CANÔNICOS ===

PENDENTE = 'pending'
EM_ANDAMENTO = 'in_progress'
CONCLUIDA = 'completed'
CANCELADA = 'cancelled'

ORIGEM_PROJETO = 'project'
ORIGEM_WORKFLOW = 'workflow'

MAPA_STATUS_PROJETO = {
    'todo': PENDENTE,
    'in_progress': EM_ANDAMENTO,
    'in progress': EM_ANDAMENTO,
    'completed': CONCLUIDA,
    'cancelled': CANCELADA,
    'canceled': CANCELADA,
}

MAPA_STATUS_WORKFLOW = {
    'pendente': PENDENTE,
    'em_andamento': EM_ANDAMENTO,
    'em andamento': EM_ANDAMENTO,
    'concluida': CONCLUIDA,
    'concluída': CONCLUIDA,
    'cancelada': CANCELADA,
}

STATUS_PENDENTES = {PENDENTE, EM_ANDAMENTO}
STATUS_CONCLUIDOS = {CONCLUIDA}

# Workflows usam prioridades em português; a visão unificada usa as de projeto
MAPA_PRIORIDADE_WORKFLOW = {
    'baixa': 'low',
    'media': 'medium',
    'média': 'medium',
    'alta': 'high',
}


def normalizar_status(status: Optional[str], mapa: Dict[str, str]) -> Optional[str]:
    """Traduz o status de uma origem para o canônico; desconhecido vira None"""
    if not status:
        return None
    return mapa.get(status.strip().lower())


def normalizar_tarefa_projeto(registro: Dict) -> Dict:
    return {
        'origem': ORIGEM_PROJETO,
        'assignee_id': registro.get('assignee_id'),
        'status': normalizar_status(registro.get('status'), MAPA_STATUS_PROJETO),
    }


def normalizar_tarefa_workflow(registro: Dict) -> Dict:
    return {
        'origem': ORIGEM_WORKFLOW,
        'assignee_id': registro.get('assigned_to'),
        'status': normalizar_status(registro.get('status'), MAPA_STATUS_WORKFLOW),
    }


def unificar_tarefas(tarefas_projeto: Iterable[Dict], tarefas_workflow: Iterable[Dict]) -> Iterator[Dict]:
    """Une as duas origens no formato comum, descartando tarefas sem responsável"""
    normalizadas = chain(
        (normalizar_tarefa_projeto(t) for t in tarefas_projeto),
        (normalizar_tarefa_workflow(t) for t in tarefas_workflow),
    )
    return (t for t in normalizadas if t['assignee_id'] is not None)


def _pessoa_vazia(usuario: Dict, equipe: str) -> Dict:
    return {
        'id': usuario['id'],
        'name': usuario.get('nome') or '',
        'email': usuario.get('email') or '',
        'avatarUrl': usuario.get('avatar_url') or None,
        'team': equipe,
        'totalTasks': 0,
        'pendingTasks': 0,
        'completedTasks': 0,
    }


def agregar_pessoas(
        registros: Iterable[Dict],
        usuarios: Dict[Hashable, Dict],
        equipes_por_usuario: Dict[Hashable, str],
        membros_equipe: Optional[Iterable[Hashable]] = None,
        nome_equipe: Optional[str] = None,
        sem_equipe: str = 'Sem equipe'
) -> List[Dict]:
    """
    Monta as colunas de pessoas com contagem de tarefas

    Args:
        registros: tarefas já normalizadas (ver unificar_tarefas)
        usuarios: diretório id -> {id, nome, email, avatar_url}
        equipes_por_usuario: id -> nome da equipe (visão geral)
        membros_equipe: ids da equipe; quando informado, todos os membros
            aparecem, mesmo sem tarefas, e tarefas de não membros são ignoradas;
            sem ele, só entra quem tem total maior que zero
        nome_equipe: rótulo de equipe na visão por equipe

    Returns:
        Lista ordenada por nome (sem diferenciar maiúsculas)
    """
    pessoas: Dict[Hashable, Dict] = {}
    registros = list(registros)

    if membros_equipe is not None:
        for membro_id in membros_equipe:
            usuario = usuarios.get(membro_id)
            if usuario is None:
                logger.warning(f"Membro {membro_id} da equipe não encontrado no diretório de usuários")
                continue
            pessoas[membro_id] = _pessoa_vazia(usuario, nome_equipe or sem_equipe)
    else:
        for registro in registros:
            assignee_id = registro['assignee_id']
            if assignee_id in pessoas:
                continue
            usuario = usuarios.get(assignee_id)
            if usuario is None:
                logger.warning(f"Responsável {assignee_id} sem cadastro de usuário, ignorado")
                continue
            pessoas[assignee_id] = _pessoa_vazia(
                usuario, equipes_por_usuario.get(assignee_id) or sem_equipe
            )

    for registro in registros:
        pessoa = pessoas.get(registro['assignee_id'])
        if pessoa is None:
            continue

        if registro['status'] in STATUS_PENDENTES:
            pessoa['pendingTasks'] += 1
        elif registro['status'] in STATUS_CONCLUIDOS:
            pessoa['completedTasks'] += 1

    for pessoa in pessoas.values():
        pessoa['totalTasks'] = pessoa['pendingTasks'] + pessoa['completedTasks']

    resultado = pessoas.values()
    if membros_equipe is None:
        # Visão geral: só quem tem tarefa pendente ou concluída
        resultado = [p for p in resultado if p['totalTasks'] > 0]

    return sorted(resultado, key=lambda p: (p['name'].casefold(), p['id']))


# Ordem de exibição das tarefas dentro da coluna de uma pessoa
ORDEM_STATUS_COLUNA = {PENDENTE: 0, EM_ANDAMENTO: 0}


def ordenar_tarefas_pessoa(tarefas: List[Dict]) -> List[Dict]:
    """Pendentes/em andamento primeiro, depois as demais; mais recentes primeiro"""
    por_data = sorted(tarefas, key=lambda t: t['createdAt'] or '', reverse=True)
    return sorted(por_data, key=lambda t: ORDEM_STATUS_COLUNA.get(t['status'], 1))
