from django.apps import AppConfig
from prometheus_client import Info

from adinjector import __version__

version_info = Info("adinjector_version", "Google Ads injector version info")


class CommonAppConfig(AppConfig):
    default_auto_field = "django.db.models.AutoField"
    name = "common"

    def ready(self):
        version_info.info({"version": __version__})
