import ast
import logging
import math
import re

from administration import models

LOGGER = logging.getLogger(__name__)

NUMERIC_RE = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")

# ########## SETTINGS ############


def get_all_settings():
    """Returns a dict of 'setting_name': value with all of the settings."""
    settings = dict(models.Settings.objects.all().values_list("name", "value"))
    for setting, value in settings.items():
        try:
            settings[setting] = ast.literal_eval(value)
        except (SyntaxError, ValueError):
            pass  # Not all the settings are Python literals
    return settings


def set_setting(setting, value=None):
    """Sets 'setting' to 'value' in models.Settings.

    'value' must be an object that can be recreated by calling literal_eval on
    its string representation.  Strings are automatically escaped."""
    # Since we call literal_eval on settings when we extract them, we need to
    # put quotes around strings so they remain strings
    if isinstance(value, str):
        value = repr(value)
    setting, _ = models.Settings.objects.get_or_create(name=setting)
    setting.value = value
    setting.save()


class SiteConfiguration:
    """Settings handed explicitly to the code that reads or changes them.

    This base class only keeps values in memory. ``StoredConfiguration`` is
    the variant backed by the Settings table.
    """

    def __init__(self, values=None):
        self._values = dict(values or {})

    def __contains__(self, name):
        return name in self._values

    def __repr__(self):
        return f"{self.__class__.__name__}({self._values!r})"

    def get(self, name, default=None):
        return self._values.get(name, default)

    def set(self, name, value):
        self._values[name] = value

    def as_dict(self):
        return dict(self._values)


class StoredConfiguration(SiteConfiguration):
    """Snapshot of the Settings table that writes changes back to it."""

    @classmethod
    def load(cls):
        return cls(get_all_settings())

    def set(self, name, value):
        set_setting(name, value)
        LOGGER.debug("Setting %s stored as %r", name, value)
        super().set(name, value)


# ########## NUMBERS ############


def is_numeric(value):
    """Whether ``value`` is a number or a string holding a decimal number.

    Booleans are not numbers here, neither are NaN or infinite floats.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return math.isfinite(value)
    if not isinstance(value, str):
        return False
    return NUMERIC_RE.match(value) is not None


def to_number(value):
    """Convert a numeric value to ``int`` when it is integral, else ``float``."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    number = float(value)
    if number.is_integer():
        return int(number)
    return number
