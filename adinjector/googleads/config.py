import logging

from common import utils

from . import constants

LOGGER = logging.getLogger(__name__)


def is_flag(value):
    """Whether ``value`` is 0 or 1, as a number, a numeric string or a bool."""
    if isinstance(value, bool):
        return True
    return utils.is_numeric(value) and utils.to_number(value) in (0, 1)


class GoogleAdsSettings:
    """Typed view of the two Google Ads settings.

    Missing or malformed values fall back to the defaults: a weight of 50 and
    no ads on teasers.
    """

    def __init__(self, weight=constants.DEFAULT_WEIGHT, show_on_teasers=False):
        self.weight = weight
        self.show_on_teasers = show_on_teasers

    def __repr__(self):
        return (
            f"GoogleAdsSettings(weight={self.weight!r}, "
            f"show_on_teasers={self.show_on_teasers!r})"
        )

    def __eq__(self, other):
        if not isinstance(other, GoogleAdsSettings):
            return NotImplemented
        return (self.weight, self.show_on_teasers) == (
            other.weight,
            other.show_on_teasers,
        )

    @classmethod
    def from_config(cls, config):
        weight = config.get(constants.WEIGHT_SETTING, constants.DEFAULT_WEIGHT)
        if utils.is_numeric(weight):
            weight = utils.to_number(weight)
        else:
            LOGGER.warning(
                "Ignoring malformed %s setting %r", constants.WEIGHT_SETTING, weight
            )
            weight = constants.DEFAULT_WEIGHT

        teasers = config.get(constants.TEASERS_SETTING, constants.DEFAULT_TEASERS)
        if not is_flag(teasers):
            LOGGER.warning(
                "Ignoring malformed %s setting %r", constants.TEASERS_SETTING, teasers
            )
            teasers = constants.DEFAULT_TEASERS
        return cls(weight=weight, show_on_teasers=utils.to_number(teasers) == 1)

    def as_tuple(self):
        return (self.weight, self.show_on_teasers)
