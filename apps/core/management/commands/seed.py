# apps/core/management/commands/seed.py

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from apps.core.models import (
    Usuario, Equipe, MembroEquipe, Projeto, ColaboradorProjeto,
    Etapa, Tarefa, Workflow, EtapaWorkflow, TarefaWorkflow
)

SENHA_PADRAO = 'orbita123'

USUARIOS = [
    ('admin', 'Ana Administradora', 'admin'),
    ('gerente', 'Bruno Gerente', 'gerente'),
    ('carla', 'Carla Souza', 'funcionario'),
    ('diego', 'Diego Lima', 'funcionario'),
    ('elisa', 'Elisa Rocha', 'funcionario'),
]

ETAPAS_PROJETO = [('Backlog', '#6B7280'), ('Em andamento', '#3B82F6'), ('Revisão', '#F59E0B'), ('Concluído', '#10B981')]
ETAPAS_WORKFLOW = ['Entrada', 'Análise', 'Aprovação']


class Command(BaseCommand):
    help = 'Cria dados de demonstração (usuários, equipe, projeto e workflow com tarefas)'

    def add_arguments(self, parser):
        parser.add_argument(
            '--limpar',
            action='store_true',
            help='Remove projetos, workflows e equipes de demonstração antes de criar'
        )

    def handle(self, *args, **options):
        self.stdout.write('🌱 Criando dados de demonstração...')

        if Projeto.objects.filter(nome='Projeto Demo').exists() and not options['limpar']:
            raise CommandError('Dados de demonstração já existem. Use --limpar para recriar.')

        with transaction.atomic():
            if options['limpar']:
                self._limpar()

            usuarios = self._criar_usuarios()
            equipe = self._criar_equipe(usuarios)
            projeto = self._criar_projeto(usuarios, equipe)
            workflow = self._criar_workflow(usuarios, equipe)

        self.stdout.write(
            self.style.SUCCESS(
                '\n✅ DADOS DE DEMONSTRAÇÃO CRIADOS!\n'
                f'  👥 Usuários: {len(usuarios)} (senha: {SENHA_PADRAO})\n'
                f'  🏷️  Equipe: {equipe.nome}\n'
                f'  📋 Projeto: {projeto.nome} ({projeto.tarefas.count()} tarefas)\n'
                f'  🔁 Workflow: {workflow.nome} ({workflow.tarefas.count()} tarefas)\n'
            )
        )

    # === MÉTODOS PRIVADOS ===

    def _limpar(self):
        self.stdout.write('  🧹 Removendo dados anteriores...')
        Projeto.objects.filter(nome='Projeto Demo').delete()
        Workflow.objects.filter(nome='Workflow de Compras').delete()
        Equipe.objects.filter(nome='Equipe Produto').delete()

    def _criar_usuarios(self):
        usuarios = {}
        for username, nome, tipo in USUARIOS:
            usuario, criado = Usuario.objects.get_or_create(
                username=username,
                defaults={
                    'email': f'{username}@orbita.local',
                    'nome_completo': nome,
                    'tipo': tipo,
                    'is_staff': tipo == 'admin',
                    'is_superuser': tipo == 'admin',
                }
            )
            if criado:
                usuario.set_password(SENHA_PADRAO)
                usuario.save()
                self.stdout.write(f'    ✅ Usuário criado: {username}')
            usuarios[username] = usuario
        return usuarios

    def _criar_equipe(self, usuarios):
        equipe = Equipe.objects.create(
            nome='Equipe Produto',
            descricao='Time responsável pelo produto principal',
            dono=usuarios['gerente']
        )
        MembroEquipe.objects.create(equipe=equipe, usuario=usuarios['gerente'], papel='owner')
        for username in ('carla', 'diego', 'elisa'):
            MembroEquipe.objects.create(equipe=equipe, usuario=usuarios[username])
        return equipe

    def _criar_projeto(self, usuarios, equipe):
        projeto = Projeto.objects.create(
            nome='Projeto Demo',
            descricao='Projeto de exemplo com etapas e tarefas',
            dono=usuarios['gerente'],
            equipe=equipe,
            status='in_progress'
        )
        ColaboradorProjeto.objects.create(projeto=projeto, usuario=usuarios['carla'], papel='editor')
        ColaboradorProjeto.objects.create(projeto=projeto, usuario=usuarios['diego'], papel='viewer')

        etapas = [
            Etapa.objects.create(projeto=projeto, nome=nome, cor=cor, posicao=posicao)
            for posicao, (nome, cor) in enumerate(ETAPAS_PROJETO)
        ]

        tarefas = [
            (0, 'Levantar requisitos', 'todo', 'high', 'carla'),
            (0, 'Definir arquitetura', 'todo', 'medium', 'diego'),
            (0, 'Protótipo de telas', 'todo', 'low', None),
            (1, 'Implementar reordenação', 'in_progress', 'high', 'carla'),
            (1, 'Kanban por pessoa', 'in_progress', 'medium', 'elisa'),
            (2, 'Revisar permissões', 'in_progress', 'medium', 'diego'),
            (3, 'Configurar ambiente', 'completed', 'low', 'elisa'),
        ]
        for indice_etapa, titulo, status, prioridade, responsavel in tarefas:
            # Posição definida pelo sinal de anexar ao fim da etapa
            Tarefa.objects.create(
                projeto=projeto,
                etapa=etapas[indice_etapa],
                titulo=titulo,
                status=status,
                prioridade=prioridade,
                responsavel=usuarios.get(responsavel),
                criado_por=usuarios['gerente']
            )

        self.stdout.write(f'    ✅ Projeto criado: {projeto.nome}')
        return projeto

    def _criar_workflow(self, usuarios, equipe):
        workflow = Workflow.objects.create(
            nome='Workflow de Compras',
            descricao='Aprovação de pedidos de compra',
            criado_por=usuarios['gerente'],
            equipe=equipe
        )

        etapas = [
            EtapaWorkflow.objects.create(workflow=workflow, nome=nome, posicao=posicao)
            for posicao, nome in enumerate(ETAPAS_WORKFLOW)
        ]

        tarefas = [
            (0, 'Pedido de notebooks', 'pendente', 'alta', 'elisa'),
            (1, 'Cotação de licenças', 'em_andamento', 'media', 'carla'),
            (2, 'Aprovar orçamento', 'concluida', 'baixa', 'diego'),
            (2, 'Pedido cancelado', 'cancelada', 'baixa', 'diego'),
        ]
        for indice_etapa, titulo, status, prioridade, responsavel in tarefas:
            TarefaWorkflow.objects.create(
                workflow=workflow,
                etapa=etapas[indice_etapa],
                titulo=titulo,
                status=status,
                prioridade=prioridade,
                atribuido_a=usuarios[responsavel],
                criado_por=usuarios['gerente']
            )

        self.stdout.write(f'    ✅ Workflow criado: {workflow.nome}')
        return workflow
