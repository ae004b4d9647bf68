# apps/core/permissions.py

from django.conf import settings

from .erros import ErroAcessoNegado


class OrbitaPermissions:
    """
    Sistema de permissões customizado do Órbita Board
    Baseado no tipo do usuário, na posse do recurso e no papel de colaborador
    """

    @staticmethod
    def is_membro_equipe(user, equipe):
        """Verifica se participa da equipe"""
        if equipe is None:
            return False
        return equipe.membros.filter(usuario=user).exists()

    @staticmethod
    def tem_acesso_projeto(user, projeto):
        """Leitura: admin, dono, colaborador ativo ou membro da equipe do projeto"""
        if not user.is_authenticated:
            return False

        if user.tipo == 'admin' or projeto.dono_id == user.id:
            return True

        if projeto.colaboradores.filter(usuario=user, status='active').exists():
            return True

        return OrbitaPermissions.is_membro_equipe(user, projeto.equipe)

    @staticmethod
    def pode_editar_projeto(user, projeto):
        """Escrita: admin, dono ou colaborador ativo com papel de edição"""
        if not user.is_authenticated:
            return False

        # Admin pode editar qualquer projeto
        if user.tipo == 'admin':
            return True

        # Dono do projeto pode editar
        if projeto.dono_id == user.id:
            return True

        return projeto.colaboradores.filter(
            usuario=user,
            status='active',
            papel__in=settings.ORBITA_PAPEIS_EDICAO
        ).exists()

    @staticmethod
    def tem_acesso_workflow(user, workflow):
        """Leitura e escrita de workflow: admin, criador ou membro da equipe"""
        if not user.is_authenticated:
            return False

        if user.tipo == 'admin' or workflow.criado_por_id == user.id:
            return True

        return OrbitaPermissions.is_membro_equipe(user, workflow.equipe)

    @staticmethod
    def pode_editar_workflow(user, workflow):
        return OrbitaPermissions.tem_acesso_workflow(user, workflow)


# Verificações usadas pelos serviços

def exigir_edicao_projeto(user, projeto):
    """Levanta ErroAcessoNegado se o usuário não pode alterar o projeto"""
    if not OrbitaPermissions.pode_editar_projeto(user, projeto):
        raise ErroAcessoNegado()


def exigir_acesso_projeto(user, projeto):
    if not OrbitaPermissions.tem_acesso_projeto(user, projeto):
        raise ErroAcessoNegado()


def exigir_edicao_workflow(user, workflow):
    if not OrbitaPermissions.pode_editar_workflow(user, workflow):
        raise ErroAcessoNegado()
