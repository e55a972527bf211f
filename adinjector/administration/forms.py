from django import forms


class SettingsForm(forms.Form):
    """For all forms that save data to Settings model.

    Field names double as setting names. ``config`` is the configuration
    object the form reads its initial values from and writes to on save;
    ``setting_defaults`` supplies the initial value of a field whose setting
    has never been stored.
    """

    setting_defaults = {}

    def __init__(self, *args, config, **kwargs):
        self.config = config
        initial = kwargs.pop("initial", None) or {}
        for name in self.base_fields:
            if name not in initial:
                initial[name] = config.get(name, self.setting_defaults.get(name))
        super().__init__(*args, initial=initial, **kwargs)

    def save(self, *args, **kwargs):
        """Save each of the fields in the form to the Settings table."""
        for setting, value in self.cleaned_data.items():
            self.config.set(setting, value)
