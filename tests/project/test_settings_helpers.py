import pytest
from adinjector.settings import helpers
from django.core.exceptions import ImproperlyConfigured


@pytest.mark.parametrize(
    "environment_variable,expected",
    [("YES", True), ("on", True), ("1", True), ("foo", False), ("", False)],
)
def test_is_true(environment_variable: str, expected: bool) -> None:
    assert helpers.is_true(environment_variable) is expected


def test_get_env_variable_fails_when_variable_is_not_set(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    var_name = "ADINJECTOR_FOO"
    monkeypatch.delenv(var_name, raising=False)
    with pytest.raises(
        ImproperlyConfigured, match=f"Set the {var_name} environment variable"
    ):
        helpers.get_env_variable(var_name)


def test_get_env_variable_returns_variable_value_from_environment(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    var_name = "ADINJECTOR_FOO"
    monkeypatch.setenv(var_name, "bar")

    assert helpers.get_env_variable(var_name) == "bar"
