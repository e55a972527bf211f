import logging

from content import constants as content_constants
from content.rendering import ContentRenderExtension
from content.rendering import RenderElement
from django.utils.safestring import mark_safe

from . import constants
from .config import GoogleAdsSettings

LOGGER = logging.getLogger(__name__)


class GoogleAdsInjector(ContentRenderExtension):
    """Adds the Google ad block to content items shown in full, and to
    teasers when the teasers setting is on."""

    def __repr__(self):
        return "GoogleAdsInjector()"

    def __eq__(self, other):
        return type(self) is type(other)

    def __hash__(self):
        return hash(type(self))

    def shows_ads(self, view_mode, ads_settings):
        if view_mode == content_constants.VIEW_MODE_FULL:
            return True
        return (
            view_mode == content_constants.VIEW_MODE_TEASER
            and ads_settings.show_on_teasers
        )

    def node_view(self, node, content, view_mode, langcode, config):
        ads_settings = GoogleAdsSettings.from_config(config)
        if not self.shows_ads(view_mode, ads_settings):
            return
        content[constants.CONTENT_KEY] = RenderElement(
            markup=mark_safe(constants.GOOGLE_AD_MARKUP),
            weight=ads_settings.weight,
        )
        LOGGER.debug(
            "Injected Google ads into %r (%s, %s) at weight %s",
            node,
            view_mode,
            langcode,
            ads_settings.weight,
        )
