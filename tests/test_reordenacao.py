# tests/test_reordenacao.py

import pytest

from apps.board.reordenacao import (
    limitar_posicao, mover_entre_etapas, ordenar_itens, posicoes_densas, reindexar_etapa
)
from apps.core.erros import ErroValidacao


def aplicar(itens, mudancas):
    atual = dict(itens)
    atual.update(mudancas)
    return sorted(atual.items(), key=lambda item: item[1])


class TestReindexarEtapa:

    def test_move_para_o_inicio(self):
        itens = [('A', 0), ('B', 1), ('C', 2), ('D', 3)]

        mudancas = reindexar_etapa(itens, 'C', 0)

        assert mudancas == {'C': 0, 'A': 1, 'B': 2}
        assert [item_id for item_id, _ in aplicar(itens, mudancas)] == ['C', 'A', 'B', 'D']

    def test_primeiro_para_ultimo_em_cinco(self):
        itens = [(i, i - 1) for i in range(1, 6)]

        mudancas = reindexar_etapa(itens, 1, 4)

        assert mudancas == {2: 0, 3: 1, 4: 2, 5: 3, 1: 4}

    def test_mesma_posicao_nao_altera(self):
        itens = [('A', 0), ('B', 1), ('C', 2)]
        assert reindexar_etapa(itens, 'C', 2) == {}

    def test_alvo_alem_do_fim_e_limitado(self):
        itens = [('A', 0), ('B', 1), ('C', 2)]

        assert reindexar_etapa(itens, 'A', 99) == {'B': 0, 'C': 1, 'A': 2}
        assert reindexar_etapa(itens, 'C', 99) == {}

    def test_etapa_vazia_e_item_unico(self):
        assert reindexar_etapa([], 'A', 3) == {}
        assert reindexar_etapa([('A', 0)], 'A', 5) == {}

    def test_tarefa_fora_da_etapa(self):
        with pytest.raises(ErroValidacao):
            reindexar_etapa([('A', 0)], 'Z', 0)

    def test_posicoes_com_buracos_sao_compactadas(self):
        itens = [('A', 0), ('B', 3), ('C', 7)]

        mudancas = reindexar_etapa(itens, 'C', 0)

        assert mudancas == {'C': 0, 'A': 1, 'B': 2}

    def test_posicao_nula_vai_para_o_fim(self):
        itens = [('B', None), ('A', 0)]

        assert ordenar_itens(itens) == ['A', 'B']
        assert reindexar_etapa(itens, 'B', 0) == {'B': 0, 'A': 1}

    def test_posicoes_repetidas_desempatam_pelo_id_numerico(self):
        itens = [(10, 0), (2, 0), (7, 1)]

        assert ordenar_itens(itens) == [2, 10, 7]
        assert reindexar_etapa(itens, 7, 0) == {7: 0, 2: 1, 10: 2}

    @pytest.mark.parametrize('total', [1, 2, 3, 5, 8])
    def test_resultado_sempre_denso(self, total):
        itens = [(f't{i}', i) for i in range(total)]
        for tarefa_id, _ in itens:
            for alvo in range(total + 2):
                resultado = aplicar(itens, reindexar_etapa(itens, tarefa_id, alvo))
                assert posicoes_densas(resultado)
                assert dict(resultado)[tarefa_id] == limitar_posicao(alvo, total)


class TestMoverEntreEtapas:

    def test_fecha_origem_e_abre_destino(self):
        origem = [('X', 0), ('Y', 1), ('Z', 2)]
        destino = [('P', 0), ('Q', 1)]

        mudancas_origem, mudancas_destino, insercao = mover_entre_etapas(origem, destino, 'Y', 1)

        assert insercao == 1
        assert mudancas_origem == {'Z': 1}
        assert mudancas_destino == {'Y': 1, 'Q': 2}

    def test_insercao_limitada_ao_tamanho_do_destino(self):
        mudancas_origem, mudancas_destino, insercao = mover_entre_etapas(
            [('X', 0), ('Y', 1)], [('P', 0)], 'X', 10
        )

        assert insercao == 1
        assert mudancas_origem == {'Y': 0}
        assert mudancas_destino == {'X': 1}

    def test_destino_vazio(self):
        _, mudancas_destino, insercao = mover_entre_etapas([('X', 0)], [], 'X', 3)

        assert insercao == 0
        assert mudancas_destino == {'X': 0}

    def test_ambas_etapas_ficam_densas(self):
        origem = [('A', 0), ('B', 1), ('C', 2), ('D', 3)]
        destino = [('X', 0), ('Y', 1)]

        for tarefa_id, _ in origem:
            for alvo in range(4):
                mudancas_origem, mudancas_destino, _ = mover_entre_etapas(origem, destino, tarefa_id, alvo)

                restante = [item for item in origem if item[0] != tarefa_id]
                assert posicoes_densas(aplicar(restante, mudancas_origem))
                assert posicoes_densas(aplicar(destino + [(tarefa_id, None)], mudancas_destino))

    def test_tarefa_fora_da_origem(self):
        with pytest.raises(ErroValidacao):
            mover_entre_etapas([('A', 0)], [('B', 0)], 'B', 0)


def test_posicoes_densas():
    assert posicoes_densas([('A', 1), ('B', 0)])
    assert posicoes_densas([])
    assert not posicoes_densas([('A', 0), ('B', 2)])
    assert not posicoes_densas([('A', 0), ('B', 0)])
    assert not posicoes_densas([('A', None)])
