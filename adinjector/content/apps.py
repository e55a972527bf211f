from django.apps import AppConfig


class ContentAppConfig(AppConfig):
    default_auto_field = "django.db.models.AutoField"
    name = "content"
