from django.apps import AppConfig


class PetugasConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "petugas"
    verbose_name = "Petugas"

    def ready(self):
        from . import signals  # noqa: F401
