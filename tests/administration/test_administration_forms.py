import pytest
from administration import menu
from administration.forms import SettingsForm
from common import utils
from django import forms


class ExampleSettingsForm(SettingsForm):
    setting_defaults = {"example_name": "anonymous"}

    example_name = forms.CharField()
    example_count = forms.IntegerField(required=False)


def test_initial_values_use_configuration_then_defaults():
    config = utils.SiteConfiguration({"example_count": 3})

    form = ExampleSettingsForm(config=config)

    assert form.initial == {"example_name": "anonymous", "example_count": 3}


def test_explicit_initial_values_win():
    config = utils.SiteConfiguration({"example_count": 3})

    form = ExampleSettingsForm(config=config, initial={"example_count": 9})

    assert form.initial["example_count"] == 9


@pytest.mark.django_db
def test_save_persists_every_field_under_its_name():
    config = utils.StoredConfiguration.load()
    form = ExampleSettingsForm(
        {"example_name": "ads", "example_count": "4"}, config=config
    )

    assert form.is_valid()
    form.save()

    assert utils.get_all_settings() == {"example_name": "ads", "example_count": 4}


def test_menu_registration_is_idempotent(monkeypatch):
    monkeypatch.setattr(menu, "_items", [])

    menu.register("Zeta", "Last item.", "administration:index")
    menu.register("Zeta", "Last item.", "administration:index")

    assert menu.get_items() == [
        menu.MenuItem("Zeta", "Last item.", "administration:index")
    ]
