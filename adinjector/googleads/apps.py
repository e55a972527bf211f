from django.apps import AppConfig


class GoogleAdsAppConfig(AppConfig):
    default_auto_field = "django.db.models.AutoField"
    name = "googleads"
    verbose_name = "Google Ads"

    def ready(self):
        from administration import menu
        from content.rendering import pipeline

        from . import constants
        from .injector import GoogleAdsInjector

        pipeline.register(GoogleAdsInjector())
        menu.register(
            constants.MENU_TITLE, constants.MENU_DESCRIPTION, "googleads:settings"
        )
