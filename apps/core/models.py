# apps/core/models.py

from django.contrib.auth.models import AbstractUser
from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import Max


class Usuario(AbstractUser):
    """
    Modelo de usuário customizado

    Guarda os campos de exibição usados pelo Kanban por pessoa
    (nome completo e avatar) além do tipo de acesso global.
    """

    TIPO_CHOICES = [
        ('admin', 'Administrador'),
        ('gerente', 'Gerente'),
        ('funcionario', 'Funcionário'),
    ]

    # === INFORMAÇÕES PESSOAIS ===
    nome_completo = models.CharField(max_length=200, blank=True)
    avatar_url = models.URLField(max_length=500, blank=True)
    tipo = models.CharField(max_length=20, choices=TIPO_CHOICES, default='funcionario')

    # === METADADOS ===
    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'usuario'

    def get_nome_exibicao(self):
        """Nome mostrado nos cards e colunas do Kanban"""
        return self.nome_completo or self.get_full_name() or self.username

    def __str__(self):
        return self.get_nome_exibicao()


class Equipe(models.Model):
    """Equipe de trabalho - agrupa pessoas no Kanban por equipe"""

    nome = models.CharField(max_length=200)
    descricao = models.TextField(blank=True)
    dono = models.ForeignKey(
        Usuario,
        on_delete=models.PROTECT,
        related_name='equipes_criadas'
    )
    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'equipe'
        ordering = ['nome']

    def __str__(self):
        return self.nome

    def get_ids_membros(self):
        return list(self.membros.values_list('usuario_id', flat=True))


class MembroEquipe(models.Model):
    """Participação de um usuário em uma equipe"""

    PAPEL_CHOICES = [
        ('owner', 'Dono'),
        ('admin', 'Administrador'),
        ('member', 'Membro'),
    ]

    equipe = models.ForeignKey(
        Equipe,
        on_delete=models.CASCADE,
        related_name='membros'
    )
    usuario = models.ForeignKey(
        Usuario,
        on_delete=models.CASCADE,
        related_name='participacoes_equipe'
    )
    papel = models.CharField(max_length=20, choices=PAPEL_CHOICES, default='member')
    entrou_em = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'membro_equipe'
        ordering = ['entrou_em', 'id']
        unique_together = ['equipe', 'usuario']

    def __str__(self):
        return f"{self.usuario} em {self.equipe}"


class Projeto(models.Model):
    """Modelo de Projeto - agregador de etapas e tarefas"""

    STATUS_CHOICES = [
        ('planning', 'Planejamento'),
        ('in_progress', 'Em andamento'),
        ('on_hold', 'Pausado'),
        ('completed', 'Concluído'),
        ('cancelled', 'Cancelado'),
    ]

    nome = models.CharField(max_length=200)
    descricao = models.TextField(blank=True)
    dono = models.ForeignKey(
        Usuario,
        on_delete=models.PROTECT,
        related_name='projetos_criados'
    )
    equipe = models.ForeignKey(
        Equipe,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='projetos'
    )
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='planning')
    arquivado = models.BooleanField(default=False)
    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'projeto'
        ordering = ['-criado_em']

    def __str__(self):
        return self.nome


class ColaboradorProjeto(models.Model):
    """Colaborador de projeto com papel de acesso"""

    PAPEL_CHOICES = [
        ('admin', 'Administrador'),
        ('editor', 'Editor'),
        ('viewer', 'Leitor'),
    ]

    STATUS_CHOICES = [
        ('active', 'Ativo'),
        ('inactive', 'Inativo'),
    ]

    projeto = models.ForeignKey(
        Projeto,
        on_delete=models.CASCADE,
        related_name='colaboradores'
    )
    usuario = models.ForeignKey(
        Usuario,
        on_delete=models.CASCADE,
        related_name='colaboracoes'
    )
    papel = models.CharField(max_length=20, choices=PAPEL_CHOICES, default='viewer')
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='active')
    criado_em = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'colaborador_projeto'
        unique_together = ['projeto', 'usuario']

    def __str__(self):
        return f"{self.usuario} ({self.get_papel_display()}) - {self.projeto}"


class EtapaBase(models.Model):
    """
    Classe abstrata para etapas ordenadas (contêineres de tarefas)

    A posição da etapa ordena as colunas; a posição das tarefas dentro
    dela é mantida pelo serviço de reordenação.
    """

    nome = models.CharField(max_length=100)
    descricao = models.TextField(blank=True)
    posicao = models.IntegerField(default=0)
    criado_em = models.DateTimeField(auto_now_add=True)

    class Meta:
        abstract = True
        ordering = ['posicao', 'id']

    def proxima_posicao_tarefa(self):
        """Posição de uma nova tarefa anexada ao fim da etapa"""
        maior = self.tarefas.aggregate(maior=Max('posicao'))['maior']
        return 0 if maior is None else maior + 1

    def __str__(self):
        return self.nome


class Etapa(EtapaBase):
    """Etapa (coluna) de um projeto"""

    projeto = models.ForeignKey(
        Projeto,
        on_delete=models.CASCADE,
        related_name='etapas'
    )
    cor = models.CharField(max_length=7, default='#6B7280')

    class Meta(EtapaBase.Meta):
        db_table = 'etapa'


class Tarefa(models.Model):
    """Tarefa de projeto"""

    STATUS_CHOICES = [
        ('todo', 'A fazer'),
        ('in_progress', 'Em andamento'),
        ('completed', 'Concluída'),
        ('cancelled', 'Cancelada'),
    ]

    PRIORIDADE_CHOICES = [
        ('low', 'Baixa'),
        ('medium', 'Média'),
        ('high', 'Alta'),
    ]

    titulo = models.CharField(max_length=200)
    descricao = models.TextField(blank=True)
    projeto = models.ForeignKey(
        Projeto,
        on_delete=models.CASCADE,
        related_name='tarefas'
    )
    etapa = models.ForeignKey(
        Etapa,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='tarefas'
    )
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='todo')
    prioridade = models.CharField(max_length=10, choices=PRIORIDADE_CHOICES, default='medium')
    responsavel = models.ForeignKey(
        Usuario,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        db_column='assignee_id',
        related_name='tarefas_atribuidas'
    )
    criado_por = models.ForeignKey(
        Usuario,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='tarefas_criadas'
    )
    horas_estimadas = models.DecimalField(
        max_digits=6,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(0)]
    )
    prazo = models.DateField(null=True, blank=True)
    posicao = models.IntegerField(null=True, blank=True)
    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'tarefa'
        ordering = ['posicao', 'id']
        indexes = [
            models.Index(fields=['etapa', 'posicao'], name='tarefa_etapa_posicao_idx'),
        ]

    def __str__(self):
        return self.titulo


class Workflow(models.Model):
    """Workflow - processo recorrente com etapas próprias"""

    nome = models.CharField(max_length=200)
    descricao = models.TextField(blank=True)
    criado_por = models.ForeignKey(
        Usuario,
        on_delete=models.PROTECT,
        related_name='workflows_criados'
    )
    equipe = models.ForeignKey(
        Equipe,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='workflows'
    )
    arquivado = models.BooleanField(default=False)
    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'workflow'
        ordering = ['-criado_em']

    def __str__(self):
        return self.nome


class EtapaWorkflow(EtapaBase):
    """Etapa de um workflow"""

    workflow = models.ForeignKey(
        Workflow,
        on_delete=models.CASCADE,
        related_name='etapas'
    )

    class Meta(EtapaBase.Meta):
        db_table = 'etapa_workflow'


class TarefaWorkflow(models.Model):
    """Tarefa de workflow - vocabulário de status próprio"""

    STATUS_CHOICES = [
        ('pendente', 'Pendente'),
        ('em_andamento', 'Em andamento'),
        ('concluida', 'Concluída'),
        ('cancelada', 'Cancelada'),
    ]

    PRIORIDADE_CHOICES = [
        ('baixa', 'Baixa'),
        ('media', 'Média'),
        ('alta', 'Alta'),
    ]

    titulo = models.CharField(max_length=200)
    descricao = models.TextField(blank=True)
    workflow = models.ForeignKey(
        Workflow,
        on_delete=models.CASCADE,
        related_name='tarefas'
    )
    etapa = models.ForeignKey(
        EtapaWorkflow,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='tarefas'
    )
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='pendente')
    prioridade = models.CharField(max_length=10, choices=PRIORIDADE_CHOICES, default='media')
    atribuido_a = models.ForeignKey(
        Usuario,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        db_column='assigned_to',
        related_name='tarefas_workflow_atribuidas'
    )
    criado_por = models.ForeignKey(
        Usuario,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='tarefas_workflow_criadas'
    )
    prazo = models.DateField(null=True, blank=True)
    posicao = models.IntegerField(null=True, blank=True)
    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'tarefa_workflow'
        ordering = ['posicao', 'id']
        indexes = [
            models.Index(fields=['etapa', 'posicao'], name='tarefa_wf_etapa_posicao_idx'),
        ]

    def __str__(self):
        return self.titulo
