"""
db_settings: shared configuration registry for the database library.

- One process-wide ``Config`` instance, created lazily or replaced explicitly.
- Settings are validated before they are stored.
- Accessors can be called on an instance or on the ``Config`` class itself;
  only a fixed allowlist of accessor names is routed.
"""

from __future__ import annotations

from db_settings.config import Config
from db_settings.database.exceptions import DatabaseQueryException
from db_settings.exceptions import (
    ConfigError,
    ConfigNotFoundError,
    ConfigValidationError,
    UnknownOperationError,
)
from db_settings.gateway import ALLOWLIST, Operation
from db_settings.params import get_all_specs, get_param_spec, list_params, resolve_param_name
from db_settings.validation import ValidatorProtocol

__all__ = [
    "Config",
    "DatabaseQueryException",
    "ConfigError",
    "ConfigValidationError",
    "ConfigNotFoundError",
    "UnknownOperationError",
    "ALLOWLIST",
    "Operation",
    "get_param_spec",
    "list_params",
    "resolve_param_name",
    "get_all_specs",
    "ValidatorProtocol",
]
