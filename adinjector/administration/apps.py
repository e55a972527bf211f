from django.apps import AppConfig


class AdministrationAppConfig(AppConfig):
    default_auto_field = "django.db.models.AutoField"
    name = "administration"
