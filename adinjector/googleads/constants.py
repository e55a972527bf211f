from django.utils.translation import gettext_lazy as _

GOOGLE_AD_MARKUP = """<!-- Google ads -->
                <script async="" src="//pagead2.googlesyndication.com/pagead/js/adsbygoogle.js"></script>
               more google ad code"""

# Render tree key of the ad block.
CONTENT_KEY = "google_ads"

# Setting names, also used as the settings form field names.
WEIGHT_SETTING = "googleads_weight"
TEASERS_SETTING = "googleads_teasers"

DEFAULT_WEIGHT = 50
DEFAULT_TEASERS = 0

WEIGHT_MIN = -50
WEIGHT_MAX = 50
WEIGHT_CHOICES = [(weight, weight) for weight in (0, 10, 20, 30, 40, 50)]

# Errors for a non-numeric weight and for a bad teasers value are reported
# under this key, which is not a field of the settings form.
UNUSED_ERROR_KEY = "current_pos"

MENU_TITLE = _("Google Ads")
MENU_DESCRIPTION = _("Configuration for the Google Ads injector.")
