# apps/core/admin.py

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.db.models import Count
from django.utils.html import format_html

from .models import (
    Usuario, Equipe, MembroEquipe, Projeto, ColaboradorProjeto,
    Etapa, Tarefa, Workflow, EtapaWorkflow, TarefaWorkflow
)


@admin.register(Usuario)
class UsuarioAdmin(BaseUserAdmin):
    """Admin customizado para o modelo Usuario"""

    list_display = [
        'username', 'email', 'nome_completo', 'tipo_badge',
        'is_active', 'date_joined'
    ]
    list_filter = ['tipo', 'is_staff', 'is_active', 'date_joined']
    search_fields = ['username', 'nome_completo', 'first_name', 'last_name', 'email']
    ordering = ['-date_joined']

    # Adicionar campos customizados ao formulário
    fieldsets = BaseUserAdmin.fieldsets + (
        ('Informações Adicionais', {
            'fields': ('tipo', 'nome_completo', 'avatar_url')
        }),
    )

    add_fieldsets = BaseUserAdmin.add_fieldsets + (
        ('Informações Adicionais', {
            'fields': ('tipo', 'nome_completo')
        }),
    )

    def tipo_badge(self, obj):
        """Exibe o tipo de usuário com badge colorido"""
        cores = {
            'admin': '#EF4444',  # vermelho
            'gerente': '#F59E0B',  # amarelo
            'funcionario': '#3B82F6'  # azul
        }
        cor = cores.get(obj.tipo, '#6B7280')
        return format_html(
            '<span style="background-color: {}; color: white; '
            'padding: 3px 8px; border-radius: 4px; font-size: 11px;">{}</span>',
            cor, obj.get_tipo_display()
        )

    tipo_badge.short_description = 'Tipo'


# === EQUIPES ===

class MembroEquipeInline(admin.TabularInline):
    model = MembroEquipe
    extra = 0
    fields = ['usuario', 'papel', 'entrou_em']
    readonly_fields = ['entrou_em']


@admin.register(Equipe)
class EquipeAdmin(admin.ModelAdmin):
    list_display = ['nome', 'dono', 'membros_count', 'criado_em']
    search_fields = ['nome', 'descricao']
    inlines = [MembroEquipeInline]

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(total_membros=Count('membros'))

    def membros_count(self, obj):
        return obj.total_membros

    membros_count.short_description = 'Membros'
    membros_count.admin_order_field = 'total_membros'


# === PROJETOS ===

class ColaboradorInline(admin.TabularInline):
    model = ColaboradorProjeto
    extra = 0
    fields = ['usuario', 'papel', 'status']


class EtapaInline(admin.TabularInline):
    model = Etapa
    extra = 0
    fields = ['nome', 'posicao', 'cor']
    ordering = ['posicao']


@admin.register(Projeto)
class ProjetoAdmin(admin.ModelAdmin):
    """Admin para gerenciamento de projetos"""

    list_display = ['nome', 'dono', 'equipe', 'status_badge', 'arquivado', 'criado_em']
    list_filter = ['status', 'arquivado', 'equipe']
    search_fields = ['nome', 'descricao']
    readonly_fields = ['criado_em', 'atualizado_em']
    inlines = [EtapaInline, ColaboradorInline]

    fieldsets = (
        ('Informações Básicas', {
            'fields': ('nome', 'descricao', 'status', 'arquivado')
        }),
        ('Equipe', {
            'fields': ('dono', 'equipe')
        }),
        ('Datas', {
            'fields': ('criado_em', 'atualizado_em'),
            'classes': ('collapse',)
        })
    )

    def status_badge(self, obj):
        cores = {
            'planning': '#6B7280',
            'in_progress': '#3B82F6',
            'on_hold': '#F59E0B',
            'completed': '#10B981',
            'cancelled': '#EF4444',
        }
        return format_html(
            '<span style="color: {}; font-weight: bold;">{}</span>',
            cores.get(obj.status, '#6B7280'), obj.get_status_display()
        )

    status_badge.short_description = 'Status'


@admin.register(Etapa)
class EtapaAdmin(admin.ModelAdmin):
    list_display = ['nome', 'projeto', 'posicao', 'tarefas_count']
    list_filter = ['projeto']
    ordering = ['projeto', 'posicao']

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(total_tarefas=Count('tarefas'))

    def tarefas_count(self, obj):
        return obj.total_tarefas

    tarefas_count.short_description = 'Tarefas'


@admin.register(Tarefa)
class TarefaAdmin(admin.ModelAdmin):
    list_display = ['titulo', 'projeto', 'etapa', 'posicao', 'status', 'prioridade', 'responsavel', 'prazo']
    list_filter = ['status', 'prioridade', 'projeto']
    search_fields = ['titulo', 'descricao']
    list_select_related = ['projeto', 'etapa', 'responsavel']
    readonly_fields = ['criado_em', 'atualizado_em']
    ordering = ['projeto', 'etapa__posicao', 'posicao']


# === WORKFLOWS ===

class EtapaWorkflowInline(admin.TabularInline):
    model = EtapaWorkflow
    extra = 0
    fields = ['nome', 'posicao']
    ordering = ['posicao']


@admin.register(Workflow)
class WorkflowAdmin(admin.ModelAdmin):
    list_display = ['nome', 'criado_por', 'equipe', 'arquivado', 'criado_em']
    list_filter = ['arquivado', 'equipe']
    search_fields = ['nome', 'descricao']
    inlines = [EtapaWorkflowInline]


@admin.register(TarefaWorkflow)
class TarefaWorkflowAdmin(admin.ModelAdmin):
    list_display = ['titulo', 'workflow', 'etapa', 'posicao', 'status', 'prioridade', 'atribuido_a']
    list_filter = ['status', 'prioridade', 'workflow']
    search_fields = ['titulo', 'descricao']
    list_select_related = ['workflow', 'etapa', 'atribuido_a']
    readonly_fields = ['criado_em', 'atualizado_em']


# Customizar títulos do admin
admin.site.site_header = 'Órbita Board Admin'
admin.site.site_title = 'Órbita Board'
admin.site.index_title = 'Administração do Sistema'
