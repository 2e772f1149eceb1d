from __future__ import annotations

from typing import Dict


class ConfigError(Exception):
    """Base config exception."""


class ConfigValidationError(ConfigError, ValueError):
    """Raised when a provided value or instance is rejected."""

    def __init__(
        self, errors: Dict[str, str], key: str | None = None, value: object | None = None
    ) -> None:
        self.errors = errors
        self.key = key
        self.value = value
        msg = f"Validation errors: {errors}"
        if key is not None and value is not None:
            msg += f" (key: {key}, value: {value!r})"
        super().__init__(msg)


class UnknownOperationError(ConfigError, AttributeError):
    """Raised when a call is routed to a name outside the accessor allowlist."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Method {name} does not exist.")
        # AttributeError.__init__ resets .name, so assign afterwards
        self.name = name


class ConfigNotFoundError(ConfigError, KeyError):
    """Raised when a requested setting name is not recognized."""
