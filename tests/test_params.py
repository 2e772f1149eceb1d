import pytest

from db_settings import DatabaseQueryException
from db_settings.exceptions import ConfigNotFoundError, ConfigValidationError
from db_settings.params import (
    DATABASE_QUERY_EXCEPTION,
    HOOK_PREFIX,
    REGISTRY,
    ParamSpec,
    default_values,
    get_all_specs,
    get_param_spec,
    list_params,
    resolve_param_name,
)
from db_settings.validation import is_string


def test_exactly_two_settings_are_registered():
    assert list_params() == (DATABASE_QUERY_EXCEPTION, HOOK_PREFIX)


def test_defaults():
    assert default_values() == {
        "databaseQueryException": DatabaseQueryException,
        "hookPrefix": "",
    }


def test_aliases_resolve_to_canonical_names():
    assert resolve_param_name("hook_prefix") == "hookPrefix"
    assert resolve_param_name("database_query_exception") == "databaseQueryException"
    assert resolve_param_name("hookPrefix") == "hookPrefix"


def test_unknown_setting_raises_not_found():
    with pytest.raises(ConfigNotFoundError):
        resolve_param_name("tablePrefix")
    assert REGISTRY.has("tablePrefix") is False
    assert REGISTRY.has("hook_prefix") is True


def test_registry_is_closed():
    assert REGISTRY.frozen is True
    with pytest.raises(ConfigValidationError):
        REGISTRY.register(ParamSpec(name="tablePrefix", default="", value_type=str))
    assert "tablePrefix" not in list_params()


def test_spec_mapping_access():
    spec = get_param_spec("hook_prefix")
    assert spec["default"] == ""
    assert spec["value_type"] is str
    assert "description" in get_all_specs()["hookPrefix"]


def test_query_exception_spec_validates_without_instantiating():
    class Exploding(DatabaseQueryException):
        def __init__(self, *args, **kwargs):
            raise AssertionError("must not be instantiated")

    spec = get_param_spec(DATABASE_QUERY_EXCEPTION)
    spec.validate(Exploding)
    spec.validate(DatabaseQueryException)


@pytest.mark.parametrize("value", [ValueError, Exception, DatabaseQueryException("x"), "DatabaseQueryException", None])
def test_query_exception_spec_rejects_unrelated(value):
    spec = get_param_spec(DATABASE_QUERY_EXCEPTION)
    with pytest.raises(ConfigValidationError) as exc_info:
        spec.validate(value)
    assert "db_settings.database.exceptions.DatabaseQueryException" in str(exc_info.value)


def test_hook_prefix_spec_rejects_non_string():
    with pytest.raises(ConfigValidationError, match="must be a string"):
        get_param_spec(HOOK_PREFIX).validate(5)


def test_every_validator_conforms_to_protocol():
    from db_settings import ValidatorProtocol

    for name in list_params():
        validator = get_param_spec(name).validator
        assert validator is not None
        assert isinstance(validator, ValidatorProtocol)
    assert get_param_spec(HOOK_PREFIX).validator is is_string


class _StrSubclass(str):
    pass


def test_hook_prefix_accepts_str_subclass():
    get_param_spec(HOOK_PREFIX).validate(_StrSubclass("acme_"))
