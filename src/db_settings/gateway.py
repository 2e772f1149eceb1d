"""
Routes accessor calls by name to a settings instance.

Only the operations listed in ``ALLOWLIST`` are reachable. The same table
serves instance-style calls (``cfg.getHookPrefix()``) and class-level calls
(``Config.getHookPrefix()``), which resolve the shared instance first.
"""

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, Mapping

from db_settings.exceptions import UnknownOperationError

if TYPE_CHECKING:  # pragma: no cover
    from db_settings.config import Config

logger = logging.getLogger("db_settings.gateway")
logger.addHandler(logging.NullHandler())


class Operation(str, Enum):
    GET_DATABASE_QUERY_EXCEPTION = "getDatabaseQueryException"
    GET_HOOK_PREFIX = "getHookPrefix"
    SET_DATABASE_QUERY_EXCEPTION = "setDatabaseQueryException"
    SET_HOOK_PREFIX = "setHookPrefix"


# operation -> protected accessor on the settings instance
ACCESSORS: Mapping[Operation, str] = MappingProxyType(
    {
        Operation.GET_DATABASE_QUERY_EXCEPTION: "_get_database_query_exception",
        Operation.GET_HOOK_PREFIX: "_get_hook_prefix",
        Operation.SET_DATABASE_QUERY_EXCEPTION: "_set_database_query_exception",
        Operation.SET_HOOK_PREFIX: "_set_hook_prefix",
    }
)

ALLOWLIST: Mapping[str, Operation] = MappingProxyType(
    {
        **{op.value: op for op in Operation},
        "get_database_query_exception": Operation.GET_DATABASE_QUERY_EXCEPTION,
        "get_hook_prefix": Operation.GET_HOOK_PREFIX,
        "set_database_query_exception": Operation.SET_DATABASE_QUERY_EXCEPTION,
        "set_hook_prefix": Operation.SET_HOOK_PREFIX,
    }
)


def _is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


def resolve_operation(name: str) -> Operation:
    """
    Return the Operation registered under ``name``.

    Raises UnknownOperationError for anything outside the allowlist.
    """
    try:
        return ALLOWLIST[name]
    except (KeyError, TypeError):
        # attribute probes (hasattr, copy, pytest collection) land here too
        if not _is_dunder(str(name)):
            logger.debug("No operation named %r", name)
        raise UnknownOperationError(str(name)) from None


def dispatch(store: "Config", name: str, *args: Any, **kwargs: Any) -> Any:
    """
    Forward a call named ``name`` to the matching accessor on ``store``.

    Arguments are passed through untouched; the accessor validates them.
    """
    try:
        op = resolve_operation(name)
    except UnknownOperationError:
        logger.error("Rejected call to unknown operation %r", name)
        raise
    logger.debug("Dispatching %s to %s", op.value, type(store).__name__)
    return getattr(store, ACCESSORS[op])(*args, **kwargs)


def bind(store: "Config", name: str) -> Callable[..., Any]:
    """Return a callable for ``store.<name>``; unknown names fail immediately."""
    op = resolve_operation(name)

    def call(*args: Any, **kwargs: Any) -> Any:
        return dispatch(store, op.value, *args, **kwargs)

    call.__name__ = name
    return call


def bind_static(resolve: Callable[[], "Config"], name: str) -> Callable[..., Any]:
    """
    Return a callable for a class-level ``Config.<name>`` call.

    The shared instance is resolved when the callable runs, not when it is
    created, so a replacement made in between is honoured.
    """
    op = resolve_operation(name)

    def call(*args: Any, **kwargs: Any) -> Any:
        return dispatch(resolve(), op.value, *args, **kwargs)

    call.__name__ = name
    return call
