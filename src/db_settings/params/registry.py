from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from db_settings.exceptions import ConfigNotFoundError, ConfigValidationError

from .spec import ParamSpec

logger = logging.getLogger("db_settings.params")
logger.addHandler(logging.NullHandler())


class ParamRegistry:
    """Closed table of setting specs keyed by canonical name.

    Specs are added while the package is imported; ``freeze()`` then rejects
    any further registration so the set of recognized settings stays fixed.
    """

    def __init__(self) -> None:
        self._specs: Dict[str, ParamSpec] = {}
        self._aliases: Dict[str, str] = {}
        self._frozen = False

    def register(self, spec: ParamSpec) -> None:
        if self._frozen:
            logger.error("Register failed: registry is frozen (%r)", spec.name)
            raise ConfigValidationError({spec.name: "The set of settings is closed."})
        if spec.name in self._specs:
            logger.error("Register failed: %r already registered", spec.name)
            raise ConfigValidationError({spec.name: "Setting already registered."})
        self._specs[spec.name] = spec
        for alias in spec.aliases:
            if alias in self._aliases or alias in self._specs:
                owner = self._aliases.get(alias, alias)
                logger.error("Alias conflict: %r already points to %r", alias, owner)
                raise ConfigValidationError({alias: f"Alias already used for {owner}."})
            self._aliases[alias] = spec.name
            logger.debug("Alias set: %r -> %r", alias, spec.name)

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def resolve_name(self, name_or_alias: str) -> str:
        if name_or_alias in self._specs:
            return name_or_alias
        try:
            return self._aliases[name_or_alias]
        except (KeyError, TypeError):
            logger.error("Unknown setting: %r | known=%r", name_or_alias, tuple(self._specs))
            raise ConfigNotFoundError({str(name_or_alias): "Unknown setting."}) from None

    def get(self, name_or_alias: str) -> ParamSpec:
        return self._specs[self.resolve_name(name_or_alias)]

    def has(self, name_or_alias: str) -> bool:
        try:
            self.resolve_name(name_or_alias)
        except ConfigNotFoundError:
            return False
        return True

    def all_names(self) -> Tuple[str, ...]:
        return tuple(self._specs)

    def specs(self) -> Mapping[str, ParamSpec]:
        return MappingProxyType(self._specs)
