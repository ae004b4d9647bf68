# apps/board/services.py

"""
Serviços do Kanban - reordenação de tarefas, tarefas por etapa e visão por pessoa

As views apenas traduzem HTTP. Regras de negócio, permissões e acesso ao
banco ficam encapsulados aqui, um serviço por responsabilidade.
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Dict, List, Optional, Tuple

from django.conf import settings
from django.db import DatabaseError, transaction
from django.db.models import F
from django.utils.dateparse import parse_date

from apps.core.erros import ErroArmazenamento, ErroNaoEncontrado, ErroValidacao, converter_id
from apps.core.models import (
    Equipe, Etapa, EtapaWorkflow, MembroEquipe, Projeto, Tarefa, TarefaWorkflow, Usuario, Workflow
)
from apps.core.permissions import exigir_acesso_projeto, exigir_edicao_projeto, exigir_edicao_workflow
from . import agregacao
from .eventos import grupo_projeto, grupo_workflow, notificar_grupo
from .reordenacao import mover_entre_etapas, ordenar_itens, reindexar_etapa

logger = logging.getLogger(__name__)


# === SERIALIZAÇÃO ===

def serializar_tarefa(tarefa: Tarefa) -> Dict:
    return {
        'id': tarefa.id,
        'title': tarefa.titulo,
        'description': tarefa.descricao,
        'projectId': tarefa.projeto_id,
        'stageId': tarefa.etapa_id,
        'position': tarefa.posicao,
        'status': tarefa.status,
        'priority': tarefa.prioridade,
        'assigneeId': tarefa.responsavel_id,
        'estimatedHours': float(tarefa.horas_estimadas) if tarefa.horas_estimadas is not None else None,
        'dueDate': tarefa.prazo.isoformat() if tarefa.prazo else None,
    }


def serializar_tarefa_workflow(tarefa: TarefaWorkflow) -> Dict:
    return {
        'id': tarefa.id,
        'title': tarefa.titulo,
        'description': tarefa.descricao,
        'workflowId': tarefa.workflow_id,
        'stageId': tarefa.etapa_id,
        'position': tarefa.posicao,
        'status': tarefa.status,
        'priority': tarefa.prioridade,
        'assigneeId': tarefa.atribuido_a_id,
        'dueDate': tarefa.prazo.isoformat() if tarefa.prazo else None,
    }


def _buscar(modelo, objeto_id, mensagem):
    objeto = modelo.objects.filter(id=objeto_id).first()
    if objeto is None:
        raise ErroNaoEncontrado(mensagem)
    return objeto


class ReordenacaoService:
    """
    Reordena tarefas dentro de uma etapa ou entre etapas do mesmo escopo,
    e as próprias etapas de um projeto

    Leitura das posições, cálculo e gravação acontecem numa única transação
    com as linhas travadas. Qualquer falha do banco desfaz tudo.
    """

    def reordenar_tarefa_projeto(self, user, projeto_id: int, dados: Dict) -> Dict:
        tarefa_id, etapa_id, nova_posicao = self._validar_dados(dados)

        projeto = _buscar(Projeto, projeto_id, 'Projeto não encontrado')
        exigir_edicao_projeto(user, projeto)

        etapa_destino = _buscar(Etapa, etapa_id, 'Etapa não encontrada')
        if etapa_destino.projeto_id != projeto.id:
            raise ErroValidacao('Etapa de destino não pertence ao projeto')

        resultado = self._executar(
            modelo_tarefa=Tarefa,
            modelo_etapa=Etapa,
            filtro_escopo={'projeto_id': projeto.id},
            tarefa_id=tarefa_id,
            etapa_destino=etapa_destino,
            nova_posicao=nova_posicao,
            serializar=serializar_tarefa,
            grupo=grupo_projeto(projeto.id),
            user=user,
        )

        logger.info(
            f"🔀 Reordenação no projeto {projeto.id}: tarefa {tarefa_id} -> etapa {etapa_id} "
            f"posição {nova_posicao} ({'alterada' if resultado['changed'] else 'sem alteração'}) por {user.username}"
        )
        return resultado

    def reordenar_tarefa_workflow(self, user, workflow_id: int, dados: Dict) -> Dict:
        tarefa_id, etapa_id, nova_posicao = self._validar_dados(dados)

        workflow = _buscar(Workflow, workflow_id, 'Workflow não encontrado')
        exigir_edicao_workflow(user, workflow)

        etapa_destino = _buscar(EtapaWorkflow, etapa_id, 'Etapa não encontrada')
        if etapa_destino.workflow_id != workflow.id:
            raise ErroValidacao('Etapa de destino não pertence ao workflow')

        resultado = self._executar(
            modelo_tarefa=TarefaWorkflow,
            modelo_etapa=EtapaWorkflow,
            filtro_escopo={'workflow_id': workflow.id},
            tarefa_id=tarefa_id,
            etapa_destino=etapa_destino,
            nova_posicao=nova_posicao,
            serializar=serializar_tarefa_workflow,
            grupo=grupo_workflow(workflow.id),
            user=user,
        )

        logger.info(
            f"🔀 Reordenação no workflow {workflow.id}: tarefa {tarefa_id} -> etapa {etapa_id} "
            f"posição {nova_posicao} por {user.username}"
        )
        return resultado

    def reordenar_etapas_projeto(self, user, projeto_id: int, dados: Dict) -> Dict:
        """
        Reordena as colunas do projeto

        Body: {stages: [{id, position}, ...]}. Cada etapa pedida é movida
        em ordem crescente de posição; as não citadas mantêm a ordem
        relativa e o resultado fica sempre denso (0..N-1).
        """
        pedidos = self._validar_etapas(dados)

        projeto = _buscar(Projeto, projeto_id, 'Projeto não encontrado')
        exigir_edicao_projeto(user, projeto)

        try:
            with transaction.atomic():
                atuais = list(
                    Etapa.objects.select_for_update().filter(projeto_id=projeto.id)
                    .order_by('id').values_list('id', 'posicao')
                )
                ids_projeto = {etapa_id for etapa_id, _ in atuais}
                estranhas = [etapa_id for etapa_id, _ in pedidos if etapa_id not in ids_projeto]
                if estranhas:
                    raise ErroValidacao(
                        f"Etapas não pertencem ao projeto: {', '.join(str(e) for e in estranhas)}"
                    )

                posicoes = {etapa_id: indice for indice, etapa_id in enumerate(ordenar_itens(atuais))}
                for etapa_id, posicao in sorted(pedidos, key=lambda p: (p[1], p[0])):
                    posicoes.update(reindexar_etapa(posicoes.items(), etapa_id, posicao))

                originais = dict(atuais)
                mudancas = {
                    etapa_id: posicao for etapa_id, posicao in posicoes.items()
                    if originais[etapa_id] != posicao
                }
                if mudancas:
                    Etapa.objects.bulk_update(
                        [Etapa(id=etapa_id, posicao=posicao) for etapa_id, posicao in mudancas.items()],
                        ['posicao']
                    )

                etapas = [
                    {'id': etapa.id, 'name': etapa.nome, 'position': etapa.posicao}
                    for etapa in Etapa.objects.filter(projeto_id=projeto.id).order_by('posicao', 'id')
                ]

                if mudancas:
                    mensagem = {
                        'userId': user.id,
                        'positions': [{'id': e['id'], 'position': e['position']} for e in etapas],
                    }
                    transaction.on_commit(
                        lambda: notificar_grupo(grupo_projeto(projeto.id), 'stages_reordered', mensagem)
                    )

        except DatabaseError:
            logger.exception(f"❌ Falha no banco ao reordenar etapas do projeto {projeto.id}; alterações desfeitas")
            raise ErroArmazenamento('Erro ao atualizar posições das etapas')

        logger.info(
            f"🔀 Etapas do projeto {projeto.id} reordenadas por {user.username} "
            f"({len(mudancas)} alteradas)"
        )
        return {
            'message': 'Etapas reordenadas com sucesso' if mudancas else 'Nenhuma alteração necessária',
            'changed': bool(mudancas),
            'stages': etapas,
        }

    # === MÉTODOS PRIVADOS ===

    def _validar_etapas(self, dados: Dict) -> List[Tuple[int, int]]:
        """Valida o corpo {stages: [{id, position}]}"""
        etapas = dados.get('stages')
        if not isinstance(etapas, list) or not etapas:
            raise ErroValidacao('Lista de etapas é obrigatória')

        pedidos = []
        for item in etapas:
            if not isinstance(item, dict) or item.get('id') is None:
                raise ErroValidacao('Cada etapa precisa de id e position')
            posicao = item.get('position')
            if isinstance(posicao, bool) or not isinstance(posicao, int) or posicao < 0:
                raise ErroValidacao('position deve ser um inteiro não negativo')
            pedidos.append((converter_id(item['id'], 'id'), posicao))

        if len({etapa_id for etapa_id, _ in pedidos}) != len(pedidos):
            raise ErroValidacao('Etapa repetida na lista')
        return pedidos

    def _validar_dados(self, dados: Dict) -> Tuple[int, int, int]:
        """Valida o corpo {taskId, newPosition, stageId}"""
        faltando = [campo for campo in ('taskId', 'newPosition', 'stageId') if dados.get(campo) is None]
        if faltando:
            raise ErroValidacao(f"Campos obrigatórios ausentes: {', '.join(faltando)}")

        nova_posicao = dados['newPosition']
        if isinstance(nova_posicao, bool) or not isinstance(nova_posicao, int):
            raise ErroValidacao('newPosition deve ser um número inteiro')
        if nova_posicao < 0:
            raise ErroValidacao('newPosition não pode ser negativo')

        return converter_id(dados['taskId'], 'taskId'), converter_id(dados['stageId'], 'stageId'), nova_posicao

    def _executar(self, modelo_tarefa, modelo_etapa, filtro_escopo, tarefa_id, etapa_destino,
                  nova_posicao, serializar, grupo, user) -> Dict:
        try:
            with transaction.atomic():
                tarefa = modelo_tarefa.objects.select_for_update().filter(
                    id=tarefa_id, **filtro_escopo
                ).first()
                if tarefa is None:
                    raise ErroNaoEncontrado('Tarefa não encontrada')
                if tarefa.etapa_id is None or tarefa.posicao is None:
                    raise ErroValidacao('Tarefa sem etapa ou posição definida')

                etapa_origem_id = tarefa.etapa_id
                etapas_ids = [etapa_origem_id]
                if etapa_destino.id != etapa_origem_id:
                    etapas_ids.append(etapa_destino.id)

                # Etapas travadas sempre na mesma ordem
                list(modelo_etapa.objects.select_for_update().filter(id__in=etapas_ids).order_by('id'))

                origem = self._posicoes(modelo_tarefa, etapa_origem_id)

                if etapa_destino.id == etapa_origem_id:
                    mudancas = reindexar_etapa(origem, tarefa.id, nova_posicao)
                    self._gravar(modelo_tarefa, mudancas)
                else:
                    destino = self._posicoes(modelo_tarefa, etapa_destino.id)
                    mudancas_origem, mudancas_destino, _ = mover_entre_etapas(
                        origem, destino, tarefa.id, nova_posicao
                    )
                    self._gravar(modelo_tarefa, mudancas_origem)
                    self._gravar(modelo_tarefa, mudancas_destino, etapa_id=etapa_destino.id)
                    mudancas = {**mudancas_origem, **mudancas_destino}

                tarefas = []
                for etapa_id in etapas_ids:
                    tarefas.extend(
                        serializar(t) for t in modelo_tarefa.objects.filter(etapa_id=etapa_id).order_by('posicao', 'id')
                    )

                if mudancas:
                    mensagem = {
                        'taskId': tarefa.id,
                        'fromStageId': etapa_origem_id,
                        'stageId': etapa_destino.id,
                        'userId': user.id,
                        'positions': [
                            {'id': t['id'], 'stageId': t['stageId'], 'position': t['position']} for t in tarefas
                        ],
                    }
                    transaction.on_commit(lambda: notificar_grupo(grupo, 'tasks_reordered', mensagem))

        except DatabaseError:
            logger.exception(f"❌ Falha no banco ao reordenar tarefa {tarefa_id}; alterações desfeitas")
            raise ErroArmazenamento('Erro ao salvar nova ordem das tarefas')

        return {
            'message': 'Tarefas reordenadas com sucesso' if mudancas else 'Nenhuma alteração necessária',
            'changed': bool(mudancas),
            'tasks': tarefas,
        }

    def _posicoes(self, modelo_tarefa, etapa_id) -> List[Tuple[int, Optional[int]]]:
        return list(
            modelo_tarefa.objects.select_for_update().filter(etapa_id=etapa_id).values_list('id', 'posicao')
        )

    def _gravar(self, modelo_tarefa, mudancas: Dict[int, int], etapa_id: Optional[int] = None):
        """Grava as novas posições em lote; com etapa_id, também move as tarefas para ela"""
        if not mudancas:
            return

        campos = ['posicao']
        objetos = []
        for item_id, posicao in mudancas.items():
            objeto = modelo_tarefa(id=item_id, posicao=posicao)
            if etapa_id is not None:
                objeto.etapa_id = etapa_id
            objetos.append(objeto)

        if etapa_id is not None:
            campos.append('etapa')

        modelo_tarefa.objects.bulk_update(objetos, campos)


class TarefasEtapaService:
    """Listagem e criação de tarefas de uma etapa de projeto"""

    def listar(self, user, projeto_id: int, etapa_id: int) -> List[Dict]:
        projeto, etapa = self._buscar_etapa(projeto_id, etapa_id)
        exigir_acesso_projeto(user, projeto)

        return [serializar_tarefa(t) for t in etapa.tarefas.order_by('posicao', 'id')]

    def criar(self, user, projeto_id: int, etapa_id: int, dados: Dict) -> Dict:
        projeto, etapa = self._buscar_etapa(projeto_id, etapa_id)
        exigir_edicao_projeto(user, projeto)

        campos = self._validar_dados(dados)

        try:
            with transaction.atomic():
                # Trava a etapa para que duas criações simultâneas não peguem a mesma posição
                etapa = Etapa.objects.select_for_update().get(id=etapa.id)
                tarefa = Tarefa.objects.create(
                    projeto=projeto,
                    etapa=etapa,
                    posicao=etapa.proxima_posicao_tarefa(),
                    criado_por=user,
                    **campos
                )
                dados_tarefa = serializar_tarefa(tarefa)
                transaction.on_commit(
                    lambda: notificar_grupo(grupo_projeto(projeto.id), 'task_created', {'task': dados_tarefa})
                )
        except DatabaseError:
            logger.exception(f"❌ Falha no banco ao criar tarefa na etapa {etapa_id}")
            raise ErroArmazenamento('Erro ao criar tarefa')

        logger.info(f"✅ Tarefa {tarefa.id} criada na etapa {etapa.id} (posição {tarefa.posicao}) por {user.username}")
        return dados_tarefa

    # === MÉTODOS PRIVADOS ===

    def _buscar_etapa(self, projeto_id, etapa_id) -> Tuple[Projeto, Etapa]:
        projeto = _buscar(Projeto, projeto_id, 'Projeto não encontrado')
        etapa = Etapa.objects.filter(id=etapa_id, projeto=projeto).first()
        if etapa is None:
            raise ErroNaoEncontrado('Etapa não encontrada')
        return projeto, etapa

    def _validar_dados(self, dados: Dict) -> Dict:
        titulo = dados.get('title')
        if not isinstance(titulo, str) or not titulo.strip():
            raise ErroValidacao('Título é obrigatório')

        prioridade = dados.get('priority') or 'medium'
        if prioridade not in settings.ORBITA_PRIORIDADES_TAREFA:
            raise ErroValidacao(f"Prioridade inválida: {prioridade}")

        descricao = dados.get('description') or ''
        if not isinstance(descricao, str):
            raise ErroValidacao('Descrição inválida')

        campos = {
            'titulo': titulo.strip(),
            'descricao': descricao,
            'prioridade': prioridade,
        }

        if dados.get('assigneeId') is not None:
            responsavel_id = converter_id(dados['assigneeId'], 'assigneeId')
            campos['responsavel'] = _buscar(Usuario, responsavel_id, 'Responsável não encontrado')

        if dados.get('dueDate'):
            try:
                prazo = parse_date(str(dados['dueDate']))
            except ValueError:
                prazo = None
            if prazo is None:
                raise ErroValidacao('dueDate deve estar no formato AAAA-MM-DD')
            campos['prazo'] = prazo

        if dados.get('estimatedHours') is not None:
            try:
                horas = Decimal(str(dados['estimatedHours']))
            except InvalidOperation:
                raise ErroValidacao('estimatedHours inválido')
            if horas < 0:
                raise ErroValidacao('estimatedHours não pode ser negativo')
            campos['horas_estimadas'] = horas

        return campos


class KanbanPessoasService:
    """
    Kanban por pessoa/equipe

    Une tarefas de projeto e de workflow por responsável. A contagem e a
    normalização ficam em apps.board.agregacao; aqui só há consultas.
    """

    VISOES = ('person', 'team')
    TIPOS_TAREFA = (agregacao.ORIGEM_PROJETO, agregacao.ORIGEM_WORKFLOW)

    def listar_pessoas(self, view_type: Optional[str], team_id: Optional[str]) -> List[Dict]:
        if view_type not in self.VISOES:
            raise ErroValidacao('viewType deve ser "person" ou "team"')

        sem_equipe = settings.ORBITA_SEM_EQUIPE_LABEL

        if view_type == 'team':
            if not team_id:
                raise ErroValidacao('teamId é obrigatório para a visão por equipe')
            equipe = _buscar(Equipe, converter_id(team_id, 'teamId'), 'Equipe não encontrada')
            membros = equipe.get_ids_membros()

            registros = self._registros(responsaveis=membros)
            usuarios = self._diretorio_usuarios(membros)
            return agregacao.agregar_pessoas(
                registros, usuarios, {},
                membros_equipe=membros, nome_equipe=equipe.nome, sem_equipe=sem_equipe
            )

        registros = list(self._registros())
        ids = {r['assignee_id'] for r in registros}
        return agregacao.agregar_pessoas(
            registros,
            self._diretorio_usuarios(ids),
            self._equipes_por_usuario(ids),
            sem_equipe=sem_equipe
        )

    def tarefas_por_pessoa(self, person_ids: Optional[str]) -> Dict[str, List[Dict]]:
        if not person_ids or not person_ids.strip():
            raise ErroValidacao('personIds é obrigatório')

        ids = []
        for valor in person_ids.split(','):
            valor = valor.strip()
            if valor:
                ids.append(converter_id(valor, 'personIds'))
        if not ids:
            raise ErroValidacao('personIds é obrigatório')

        por_pessoa = {str(pessoa_id): [] for pessoa_id in ids}

        tarefas = Tarefa.objects.filter(responsavel_id__in=ids).select_related('projeto', 'etapa')
        for tarefa in tarefas:
            por_pessoa[str(tarefa.responsavel_id)].append(self._unificar_tarefa_projeto(tarefa))

        tarefas_workflow = TarefaWorkflow.objects.filter(atribuido_a_id__in=ids).select_related('workflow', 'etapa')
        for tarefa in tarefas_workflow:
            por_pessoa[str(tarefa.atribuido_a_id)].append(self._unificar_tarefa_workflow(tarefa))

        return {
            pessoa_id: agregacao.ordenar_tarefas_pessoa(lista)
            for pessoa_id, lista in por_pessoa.items()
        }

    def mover_tarefa(self, user, dados: Dict) -> Dict:
        """Reatribui a tarefa arrastada para a coluna de outra pessoa"""
        faltando = [campo for campo in ('taskId', 'taskType', 'newAssigneeId') if dados.get(campo) is None]
        if faltando:
            raise ErroValidacao(f"Campos obrigatórios ausentes: {', '.join(faltando)}")

        tipo = dados['taskType']
        if tipo not in self.TIPOS_TAREFA:
            raise ErroValidacao('taskType deve ser "project" ou "workflow"')

        tarefa_id = converter_id(dados['taskId'], 'taskId')
        novo_responsavel = _buscar(
            Usuario, converter_id(dados['newAssigneeId'], 'newAssigneeId'), 'Usuário não encontrado'
        )

        try:
            with transaction.atomic():
                if tipo == agregacao.ORIGEM_PROJETO:
                    tarefa = Tarefa.objects.select_for_update(of=('self',)).select_related('projeto', 'etapa').filter(
                        id=tarefa_id
                    ).first()
                    if tarefa is None:
                        raise ErroNaoEncontrado('Tarefa não encontrada')
                    exigir_edicao_projeto(user, tarefa.projeto)

                    anterior = tarefa.responsavel_id
                    tarefa.responsavel = novo_responsavel
                    tarefa.save(update_fields=['responsavel', 'atualizado_em'])
                    dados_tarefa = self._unificar_tarefa_projeto(tarefa)
                    grupo = grupo_projeto(tarefa.projeto_id)
                else:
                    tarefa = TarefaWorkflow.objects.select_for_update(of=('self',)).select_related('workflow', 'etapa').filter(
                        id=tarefa_id
                    ).first()
                    if tarefa is None:
                        raise ErroNaoEncontrado('Tarefa não encontrada')
                    exigir_edicao_workflow(user, tarefa.workflow)

                    anterior = tarefa.atribuido_a_id
                    tarefa.atribuido_a = novo_responsavel
                    tarefa.save(update_fields=['atribuido_a', 'atualizado_em'])
                    dados_tarefa = self._unificar_tarefa_workflow(tarefa)
                    grupo = grupo_workflow(tarefa.workflow_id)

                mensagem = {'task': dados_tarefa, 'previousAssigneeId': anterior, 'userId': user.id}
                transaction.on_commit(lambda: notificar_grupo(grupo, 'task_reassigned', mensagem))

        except DatabaseError:
            logger.exception(f"❌ Falha no banco ao reatribuir tarefa {tipo} {tarefa_id}")
            raise ErroArmazenamento('Erro ao mover tarefa')

        logger.info(
            f"👤 Tarefa {tipo} {tarefa_id} reatribuída de {anterior} para {novo_responsavel.id} por {user.username}"
        )
        return {
            'success': True,
            'message': f"Tarefa atribuída a {novo_responsavel.get_nome_exibicao()}",
            'task': dados_tarefa,
        }

    def listar_equipes(self) -> List[Dict]:
        return [
            {'id': equipe.id, 'name': equipe.nome, 'description': equipe.descricao}
            for equipe in Equipe.objects.order_by('nome', 'id')
        ]

    # === MÉTODOS PRIVADOS ===

    def _registros(self, responsaveis=None):
        """Tarefas das duas origens já no formato comum"""
        tarefas = Tarefa.objects.filter(responsavel__isnull=False)
        tarefas_workflow = TarefaWorkflow.objects.filter(atribuido_a__isnull=False)

        if responsaveis is not None:
            tarefas = tarefas.filter(responsavel_id__in=responsaveis)
            tarefas_workflow = tarefas_workflow.filter(atribuido_a_id__in=responsaveis)

        return agregacao.unificar_tarefas(
            tarefas.values('status', assignee_id=F('responsavel_id')),
            tarefas_workflow.values('status', assigned_to=F('atribuido_a_id')),
        )

    def _diretorio_usuarios(self, ids) -> Dict[int, Dict]:
        return {
            usuario.id: {
                'id': usuario.id,
                'nome': usuario.get_nome_exibicao(),
                'email': usuario.email,
                'avatar_url': usuario.avatar_url,
            }
            for usuario in Usuario.objects.filter(id__in=list(ids))
        }

    def _equipes_por_usuario(self, ids) -> Dict[int, str]:
        """Primeira equipe de cada usuário (ordem de entrada)"""
        equipes = {}
        participacoes = MembroEquipe.objects.filter(usuario_id__in=list(ids)).select_related('equipe').order_by(
            'entrou_em', 'id'
        )
        for participacao in participacoes:
            equipes.setdefault(participacao.usuario_id, participacao.equipe.nome)
        return equipes

    def _unificar_tarefa_projeto(self, tarefa: Tarefa) -> Dict:
        return {
            'id': tarefa.id,
            'title': tarefa.titulo,
            'type': agregacao.ORIGEM_PROJETO,
            'containerName': tarefa.projeto.nome,
            'stageName': tarefa.etapa.nome if tarefa.etapa else None,
            'status': agregacao.normalizar_status(tarefa.status, agregacao.MAPA_STATUS_PROJETO) or tarefa.status,
            'priority': tarefa.prioridade,
            'dueDate': tarefa.prazo.isoformat() if tarefa.prazo else None,
            'assignedTo': tarefa.responsavel_id,
            'createdAt': tarefa.criado_em.isoformat() if tarefa.criado_em else None,
        }

    def _unificar_tarefa_workflow(self, tarefa: TarefaWorkflow) -> Dict:
        return {
            'id': tarefa.id,
            'title': tarefa.titulo,
            'type': agregacao.ORIGEM_WORKFLOW,
            'containerName': tarefa.workflow.nome,
            'stageName': tarefa.etapa.nome if tarefa.etapa else None,
            'status': agregacao.normalizar_status(tarefa.status, agregacao.MAPA_STATUS_WORKFLOW) or tarefa.status,
            'priority': agregacao.MAPA_PRIORIDADE_WORKFLOW.get(tarefa.prioridade, tarefa.prioridade),
            'dueDate': tarefa.prazo.isoformat() if tarefa.prazo else None,
            'assignedTo': tarefa.atribuido_a_id,
            'createdAt': tarefa.criado_em.isoformat() if tarefa.criado_em else None,
        }


# Instâncias globais dos serviços
reordenacao_service = ReordenacaoService()
tarefas_etapa_service = TarefasEtapaService()
kanban_pessoas_service = KanbanPessoasService()
