from administration.forms import SettingsForm
from common import utils
from django import forms
from django.utils.translation import gettext_lazy as _

from . import constants
from .config import is_flag


class BinaryCheckboxInput(forms.CheckboxInput):
    """Checkbox posting ``1`` when ticked and read as ``0`` when left empty.

    Unlike ``CheckboxInput`` the submitted value is handed to the form as is,
    so anything other than 0 or 1 can be rejected during validation.
    """

    def __init__(self, attrs=None):
        super().__init__(attrs, check_test=lambda value: str(value) in ("1", "True"))

    def format_value(self, value):
        return "1"

    def value_from_datadict(self, data, files, name):
        return data.get(name, "0")


class GoogleAdsSettingsForm(SettingsForm):
    setting_defaults = {
        constants.WEIGHT_SETTING: constants.DEFAULT_WEIGHT,
        constants.TEASERS_SETTING: constants.DEFAULT_TEASERS,
    }

    googleads_weight = forms.CharField(
        required=False,
        label=_("Weight"),
        help_text=_(
            "When the ads are shown in the content area, you can set the "
            "position at which they will be shown."
        ),
        widget=forms.Select(choices=constants.WEIGHT_CHOICES),
    )
    googleads_teasers = forms.Field(
        required=False,
        label=_("Teasers?"),
        help_text=_(
            "Select this option to show Google Ads on teaser pages as well as "
            "full content pages."
        ),
        widget=BinaryCheckboxInput,
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._add_current_weight_choice()

    def _add_current_weight_choice(self):
        """Offer the stored or submitted weight when it is not a preset step."""
        name = constants.WEIGHT_SETTING
        if self.is_bound:
            weight = self[name].data
        else:
            weight = self[name].initial
        if not utils.is_numeric(weight):
            return
        weight = utils.to_number(weight)
        widget = self.fields[name].widget
        if any(str(value) == str(weight) for value, label in widget.choices):
            return
        widget.choices = sorted(
            list(widget.choices) + [(weight, weight)], key=lambda choice: choice[0]
        )

    def _add_error_to_key(self, key, message):
        # add_error() only accepts the names of fields in the form.
        errors = self._errors.setdefault(key, self.error_class())
        errors.extend(forms.ValidationError(message).error_list)

    def clean(self):
        cleaned_data = super().clean()

        weight = cleaned_data.get(constants.WEIGHT_SETTING)
        if not utils.is_numeric(weight):
            self._add_error_to_key(
                constants.UNUSED_ERROR_KEY,
                _("You must enter a number for the weight!"),
            )
        elif utils.to_number(weight) < constants.WEIGHT_MIN:
            self.add_error(
                constants.WEIGHT_SETTING,
                _("The weight must be greater than or equal to -50."),
            )
        elif utils.to_number(weight) > constants.WEIGHT_MAX:
            message = _("The weight must be less than or equal to 50.")
            self._add_error_to_key(constants.WEIGHT_SETTING + str(message), message)
        else:
            cleaned_data[constants.WEIGHT_SETTING] = utils.to_number(weight)

        teasers = cleaned_data.get(constants.TEASERS_SETTING)
        if not is_flag(teasers):
            self._add_error_to_key(
                constants.UNUSED_ERROR_KEY,
                _("The teasers option should be yes or no (1, 0)!"),
            )
        else:
            cleaned_data[constants.TEASERS_SETTING] = int(utils.to_number(teasers))

        return cleaned_data
