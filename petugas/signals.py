import logging

from django.db.models.signals import post_save
from django.dispatch import receiver
from django.contrib.auth.models import User
from .models import Petugas

logger = logging.getLogger(__name__)


@receiver(post_save, sender=User)
def create_petugas(sender, instance, created, **kwargs):
    """
    Automatically create the Petugas profile when a new User is created,
    so accounts made through createsuperuser or the admin can register
    inventaris straight away.
    """
    if created:
        Petugas.objects.get_or_create(
            user=instance,
            defaults={'nama_petugas': instance.get_full_name() or instance.username},
        )
        logger.info("Petugas profile ensured for %s", instance.username)
