from db_settings.exceptions import (
    ConfigError,
    ConfigNotFoundError,
    ConfigValidationError,
    UnknownOperationError,
)


def test_config_validation_error_message_and_attrs():
    err = ConfigValidationError({"hookPrefix": "bad"}, key="hookPrefix", value=123)
    assert "Validation errors" in str(err)
    assert err.errors == {"hookPrefix": "bad"}
    assert err.key == "hookPrefix"
    assert err.value == 123


def test_unknown_operation_error_names_method():
    err = UnknownOperationError("getPassword")
    assert str(err) == "Method getPassword does not exist."
    assert err.name == "getPassword"


def test_custom_exceptions_are_subclasses():
    assert issubclass(ConfigValidationError, ConfigError)
    assert issubclass(ConfigValidationError, ValueError)
    assert issubclass(UnknownOperationError, ConfigError)
    assert issubclass(UnknownOperationError, AttributeError)
    assert issubclass(ConfigNotFoundError, KeyError)
