# apps/core/signals.py

from django.db.models.signals import pre_save
from django.dispatch import receiver

from .models import Tarefa, TarefaWorkflow


@receiver(pre_save, sender=Tarefa)
@receiver(pre_save, sender=TarefaWorkflow)
def anexar_ao_fim_da_etapa(sender, instance, **kwargs):
    """
    Nova tarefa sem posição vai para o fim da etapa

    Cobre criações feitas fora do serviço (admin, seed, shell). O serviço
    de criação já define a posição com a etapa travada.
    """
    if instance.pk is None and instance.posicao is None and instance.etapa_id is not None:
        instance.posicao = instance.etapa.proxima_posicao_tarefa()
