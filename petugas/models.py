from django.db import models
from django.contrib.auth.models import User


class Petugas(models.Model):
    """Staff member allowed to register inventaris"""

    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name='petugas')
    nama_petugas = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.nama_petugas

    class Meta:
        db_table = 'petugas'
        verbose_name = "Petugas"
        verbose_name_plural = "Petugas"
        ordering = ['nama_petugas']
