from django.apps import AppConfig


class InventarisConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "inventaris"
    verbose_name = "Inventaris Management"
