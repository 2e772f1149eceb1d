from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, Mapping, Tuple

from db_settings.database.exceptions import DatabaseQueryException
from db_settings.validation import (
    QUERY_EXCEPTION_REQUIREMENT,
    is_query_exception_class,
    is_string,
)

from .registry import ParamRegistry
from .spec import ParamSpec

__all__ = [
    "ParamSpec",
    "REGISTRY",
    "DATABASE_QUERY_EXCEPTION",
    "HOOK_PREFIX",
    "get_param_spec",
    "list_params",
    "resolve_param_name",
    "get_all_specs",
    "default_values",
]

DATABASE_QUERY_EXCEPTION = "databaseQueryException"
HOOK_PREFIX = "hookPrefix"

REGISTRY = ParamRegistry()

REGISTRY.register(
    ParamSpec(
        name=DATABASE_QUERY_EXCEPTION,
        default=DatabaseQueryException,
        value_type=type,
        validator=is_query_exception_class,
        requirement=QUERY_EXCEPTION_REQUIREMENT,
        description="Exception class raised when a database query fails",
        aliases=("database_query_exception",),
    )
)
REGISTRY.register(
    ParamSpec(
        name=HOOK_PREFIX,
        default="",
        value_type=str,
        validator=is_string,
        requirement="The hook prefix must be a string.",
        description="Prefix used to namespace hook names fired by the library",
        aliases=("hook_prefix",),
    )
)
REGISTRY.freeze()


def get_param_spec(key: str) -> ParamSpec:
    return REGISTRY.get(key)


@lru_cache(maxsize=64)
def resolve_param_name(key: str) -> str:
    """Resolve a setting name or alias to its canonical name.

    Cached; safe because the registry is frozen once this module is imported.
    """
    return REGISTRY.resolve_name(key)


def list_params() -> Tuple[str, ...]:
    return REGISTRY.all_names()


def get_all_specs() -> Mapping[str, Dict[str, Any]]:
    return {name: REGISTRY.get(name).to_mapping() for name in REGISTRY.all_names()}


def default_values() -> Dict[str, Any]:
    return {name: spec.default for name, spec in REGISTRY.specs().items()}
