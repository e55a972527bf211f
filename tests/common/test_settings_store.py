import pytest
from administration import models
from common import utils


@pytest.mark.django_db
def test_get_all_settings_is_empty_when_nothing_is_stored():
    assert utils.get_all_settings() == {}


@pytest.mark.django_db
@pytest.mark.parametrize(
    "value", [20, -30, 1, 0, True, "some text", "it's quoted"], ids=repr
)
def test_set_setting_round_trips_python_literals(value):
    utils.set_setting("foo", value)

    assert utils.get_all_settings() == {"foo": value}


@pytest.mark.django_db
def test_set_setting_updates_existing_row():
    utils.set_setting("googleads_weight", 10)
    utils.set_setting("googleads_weight", 40)

    assert models.Settings.objects.filter(name="googleads_weight").count() == 1
    assert utils.get_all_settings() == {"googleads_weight": 40}


@pytest.mark.django_db
def test_get_all_settings_keeps_values_that_are_not_literals():
    models.Settings.objects.create(name="googleads_weight", value="abc")

    assert utils.get_all_settings() == {"googleads_weight": "abc"}


def test_site_configuration_keeps_values_in_memory():
    config = utils.SiteConfiguration({"googleads_weight": 30})
    config.set("googleads_teasers", 1)

    assert config.get("googleads_weight") == 30
    assert config.get("googleads_teasers") == 1
    assert config.get("missing", "default") == "default"
    assert "googleads_teasers" in config
    assert config.as_dict() == {"googleads_weight": 30, "googleads_teasers": 1}


@pytest.mark.django_db
def test_stored_configuration_writes_to_settings_table():
    config = utils.StoredConfiguration.load()
    config.set("googleads_weight", 20)

    assert config.get("googleads_weight") == 20
    assert utils.StoredConfiguration.load().get("googleads_weight") == 20


@pytest.mark.django_db
def test_stored_configuration_is_a_snapshot():
    config = utils.StoredConfiguration.load()
    utils.set_setting("googleads_weight", 10)

    assert config.get("googleads_weight") is None


@pytest.mark.parametrize(
    "value,expected",
    [
        (20, True),
        (-50, True),
        (2.5, True),
        ("30", True),
        ("-50", True),
        (" 40 ", True),
        ("+1.5", True),
        (".5", True),
        ("1e2", True),
        ("abc", False),
        ("", False),
        ("12abc", False),
        ("0x1A", False),
        (None, False),
        (True, False),
        (float("nan"), False),
        (float("inf"), False),
        ([1], False),
    ],
)
def test_is_numeric(value, expected):
    assert utils.is_numeric(value) is expected


@pytest.mark.parametrize(
    "value,expected",
    [("20", 20), (" -30 ", -30), ("1e1", 10), ("2.5", 2.5), (7, 7), (4.0, 4)],
)
def test_to_number(value, expected):
    result = utils.to_number(value)

    assert result == expected
    assert type(result) is type(expected)
