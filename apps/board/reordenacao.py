# apps/board/reordenacao.py

"""
Cálculo de posições de tarefas dentro de etapas

Funções puras: recebem pares (id, posicao) e devolvem apenas as posições
que mudam. A persistência fica a cargo de apps.board.services.
"""

from typing import Dict, Hashable, Iterable, List, Optional, Tuple

from apps.core.erros import ErroValidacao

ItemPosicao = Tuple[Hashable, Optional[int]]


def limitar_posicao(alvo: int, total: int) -> int:
    """Limita a posição pedida ao intervalo [0, total - 1]"""
    if total <= 0:
        return 0
    return max(0, min(alvo, total - 1))


def ordenar_itens(itens: Iterable[ItemPosicao]) -> List[Hashable]:
    """
    Ordena os ids pela posição atual

    Posições nulas vão para o fim; o id desempata posições repetidas.
    """
    def chave(item):
        item_id, posicao = item
        return (posicao is None, posicao if posicao is not None else 0, item_id)

    return [item_id for item_id, _ in sorted(itens, key=chave)]


def _diferencas(ordem: List[Hashable], originais: Dict[Hashable, Optional[int]]) -> Dict[Hashable, int]:
    return {
        item_id: posicao
        for posicao, item_id in enumerate(ordem)
        if originais.get(item_id) != posicao
    }


def reindexar_etapa(itens: Iterable[ItemPosicao], tarefa_id: Hashable, alvo: int) -> Dict[Hashable, int]:
    """
    Move uma tarefa dentro da própria etapa

    Args:
        itens: pares (id, posicao) de todas as tarefas da etapa
        tarefa_id: tarefa movida
        alvo: posição pedida (limitada ao tamanho da etapa)

    Returns:
        Dict id -> nova posição, apenas para as tarefas que mudam.
        Dict vazio significa "sem alteração".
    """
    itens = list(itens)
    if not itens:
        return {}

    originais = dict(itens)
    ordem = ordenar_itens(itens)

    if tarefa_id not in originais:
        raise ErroValidacao('Tarefa não pertence à etapa')

    atual = ordem.index(tarefa_id)
    destino = limitar_posicao(alvo, len(ordem))

    if destino == atual:
        return {}

    # Avançando: (atual, destino] sobe uma casa; recuando: [destino, atual) desce
    ordem.pop(atual)
    ordem.insert(destino, tarefa_id)

    return _diferencas(ordem, originais)


def mover_entre_etapas(
        origem: Iterable[ItemPosicao],
        destino: Iterable[ItemPosicao],
        tarefa_id: Hashable,
        alvo: int
) -> Tuple[Dict[Hashable, int], Dict[Hashable, int], int]:
    """
    Move uma tarefa da etapa de origem para a etapa de destino

    Fecha o espaço deixado na origem e abre espaço no destino a partir
    do ponto de inserção min(alvo, tamanho do destino).

    Returns:
        (mudancas_origem, mudancas_destino, posicao_final)
        A tarefa movida aparece em mudancas_destino.
    """
    origem = list(origem)
    destino = list(destino)
    originais_origem = dict(origem)
    originais_destino = dict(destino)

    if tarefa_id not in originais_origem:
        raise ErroValidacao('Tarefa não pertence à etapa de origem')

    ordem_origem = ordenar_itens(origem)
    ordem_destino = ordenar_itens(destino)

    insercao = min(max(alvo, 0), len(ordem_destino))

    ordem_origem.remove(tarefa_id)
    ordem_destino.insert(insercao, tarefa_id)

    mudancas_origem = _diferencas(ordem_origem, originais_origem)
    mudancas_destino = {
        item_id: posicao
        for posicao, item_id in enumerate(ordem_destino)
        if item_id == tarefa_id or originais_destino.get(item_id) != posicao
    }

    return mudancas_origem, mudancas_destino, insercao


def posicoes_densas(itens: Iterable[ItemPosicao]) -> bool:
    """Verifica se as posições formam exatamente 0..N-1"""
    posicoes = [posicao for _, posicao in itens]
    if any(posicao is None for posicao in posicoes):
        return False
    posicoes.sort()
    return posicoes == list(range(len(posicoes)))
