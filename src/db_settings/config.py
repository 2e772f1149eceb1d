from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterator, Optional, Type, TypeVar

from db_settings.database.exceptions import DatabaseQueryException
from db_settings.exceptions import ConfigValidationError

from .gateway import bind, bind_static
from .hooks import FailureMode, Hook, HookBus
from .params import (
    DATABASE_QUERY_EXCEPTION,
    HOOK_PREFIX,
    default_values,
    get_param_spec,
    resolve_param_name,
)
from .validation import qualified_name

logger = logging.getLogger("db_settings.config")
logger.addHandler(logging.NullHandler())


C = TypeVar("C", bound="Config")


class ConfigMeta(type):
    """
    Metaclass that lets allowlisted accessors be called on the class itself.

    ``Config.getHookPrefix()`` resolves ``Config.instance()`` and forwards the
    call to it. Any other missing class attribute raises UnknownOperationError.
    """

    def __getattr__(cls, name: str) -> Callable[..., Any]:
        return bind_static(cls.instance, name)


class Config(metaclass=ConfigMeta):
    """
    Shared settings for the database library.

    One instance is shared process-wide through ``Config.instance()``. The
    accessors ``getDatabaseQueryException``, ``getHookPrefix``,
    ``setDatabaseQueryException`` and ``setHookPrefix`` (and their snake_case
    spellings) can be called on an instance or directly on the class.
    Subclasses may override the protected ``_get_*``/``_set_*`` methods and be
    installed with ``Config.instance(MyConfig())``.
    """

    # single slot shared by Config and every subclass
    _instance: Optional["Config"] = None
    _instance_lock = threading.RLock()

    def __init__(self, *, hook_failure_mode: FailureMode = "raise") -> None:
        self._lock = threading.RLock()
        self._values: Dict[str, Any] = default_values()
        self._hooks = HookBus(hook_failure_mode)

    @classmethod
    def instance(cls: Type[C], provided: Optional[C] = None) -> C:
        """
        Return the shared instance, creating it with defaults if needed.

        When ``provided`` is given it must be an instance of ``cls`` (or of a
        subclass); it replaces the shared instance and is returned.
        """
        with Config._instance_lock:
            if provided is not None:
                if not isinstance(provided, cls):
                    logger.error(
                        "Rejected replacement instance of type %s for %s",
                        type(provided).__name__,
                        cls.__name__,
                    )
                    raise ConfigValidationError(
                        {
                            "instance": "The provided instance must be or must be a child of "
                            f"{qualified_name(cls)}."
                        },
                        "instance",
                        provided,
                    )
                Config._instance = provided
                logger.info("Shared config replaced with %r", provided)
            elif Config._instance is None:
                Config._instance = cls()
                logger.debug("Shared config created lazily as %s", cls.__name__)
            return Config._instance  # type: ignore[return-value]

    # accessors, reached through the gateway

    def _get_database_query_exception(self) -> Type[DatabaseQueryException]:
        with self._lock:
            return self._values[DATABASE_QUERY_EXCEPTION]

    def _get_hook_prefix(self) -> str:
        with self._lock:
            return self._values[HOOK_PREFIX]

    def _set_database_query_exception(self, cls: Type[DatabaseQueryException]) -> None:
        self._set(DATABASE_QUERY_EXCEPTION, cls)

    def _set_hook_prefix(self, prefix: str) -> None:
        self._set(HOOK_PREFIX, prefix)

    def _set(self, name: str, value: Any) -> None:
        spec = get_param_spec(name)
        with self._lock:
            try:
                spec.validate(value)
            except ConfigValidationError as exc:
                logger.error("Rejected value for %s: %s", name, exc.errors)
                raise
            prior = self._values[name]
            self._values[name] = value
            try:
                self._hooks.notify(name, self.snapshot())
            except Exception:
                self._values[name] = prior
                logger.error("Reverted %s after a post-update hook failed", name)
                raise
            logger.debug("Setting %s updated to %r", name, value)

    def __getattr__(self, name: str) -> Callable[..., Any]:
        return bind(self, name)

    # supplementary operations

    def snapshot(self) -> MappingProxyType[str, Any]:
        """
        Return a read-only copy of the current settings.
        """
        with self._lock:
            return MappingProxyType(dict(self._values))

    def register_post_update_hook(self, func: Hook) -> None:
        """
        Register ``func(setting_name, snapshot)``, called after each successful setter call.

        A failing hook undoes that change unless the instance was built with
        ``hook_failure_mode="log"`` or ``"ignore"``.
        """
        with self._lock:
            self._hooks.register(func)

    def _validate_and_resolve(self, settings: Dict[str, Any]) -> Dict[str, Any]:
        errors: Dict[str, str] = {}
        resolved: Dict[str, Any] = {}
        for key, value in settings.items():
            name = resolve_param_name(key)
            try:
                get_param_spec(name).validate(value)
                resolved[name] = value
            except ConfigValidationError as exc:
                errors.update(exc.errors)
        if errors:
            logger.error("temp_update failed with errors: %s", errors)
            raise ConfigValidationError(errors)
        return resolved

    @contextmanager
    def temp_update(self, **settings: Any) -> Iterator["Config"]:
        """
        Context manager for temporary setting changes. Restores prior values on exit.
        """
        with self._lock:
            prior = dict(self._values)
            resolved = self._validate_and_resolve(settings)
            try:
                self._values.update(resolved)
                logger.info("Temporary config update applied keys=%s", list(resolved))
                yield self
            finally:
                self._values = prior
                logger.info("Temporary config update reverted.")

    def __repr__(self) -> str:
        with self._lock:
            exc_cls = self._values[DATABASE_QUERY_EXCEPTION]
            return (
                f"<{type(self).__name__} databaseQueryException={exc_cls.__name__} "
                f"hookPrefix={self._values[HOOK_PREFIX]!r}>"
            )
