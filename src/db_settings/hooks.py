from __future__ import annotations

import logging
from typing import Any, Callable, List, Literal, Mapping

logger = logging.getLogger("db_settings.hooks")
logger.addHandler(logging.NullHandler())

# called as hook(setting_name, settings_snapshot)
Hook = Callable[[str, Mapping[str, Any]], None]
FailureMode = Literal["ignore", "log", "raise"]
FAILURE_MODES = ("ignore", "log", "raise")


class HookBus:
    """
    Notifies registered hooks after a setting has been changed.

    With ``failure_mode="raise"`` the first failing hook aborts the run and its
    exception reaches the caller, which is expected to undo the change.
    """

    def __init__(self, failure_mode: FailureMode = "raise") -> None:
        if failure_mode not in FAILURE_MODES:
            raise ValueError(f"failure_mode must be one of {FAILURE_MODES}, got {failure_mode!r}")
        self._failure_mode = failure_mode
        self._hooks: List[Hook] = []

    @property
    def failure_mode(self) -> str:
        return self._failure_mode

    def register(self, func: Hook) -> None:
        if not callable(func):
            raise TypeError("Hook must be callable")
        self._hooks.append(func)

    def notify(self, setting: str, settings_snapshot: Mapping[str, Any]) -> None:
        for hook in tuple(self._hooks):
            try:
                hook(setting, settings_snapshot)
            except Exception as exc:
                if self._failure_mode == "raise":
                    logger.error("Hook %r failed for %s: %s", hook, setting, exc)
                    raise
                if self._failure_mode == "log":
                    logger.error("Hook %r failed for %s: %s", hook, setting, exc)
                else:
                    logger.debug("Hook %r failed for %s, ignored: %s", hook, setting, exc)

    def __len__(self) -> int:
        return len(self._hooks)
