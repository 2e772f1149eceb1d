from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Type, Union

from db_settings.exceptions import ConfigValidationError
from db_settings.validation.protocol import ValidatorProtocol


@dataclass(frozen=True)
class ParamSpec:
    name: str
    default: Any
    value_type: Union[Type, Tuple[Type, ...]]
    validator: Optional[ValidatorProtocol] = None
    requirement: Optional[str] = None
    description: Optional[str] = None
    aliases: Tuple[str, ...] = ()

    def validate(self, value: Any) -> None:
        if not isinstance(value, self.value_type):
            raise ConfigValidationError(
                {self.name: self.requirement or f"Expected {self.value_type}, got {type(value)}."},
                self.name,
                value,
            )

        if self.validator is not None and not self.validator(value):
            raise ConfigValidationError(
                {self.name: self.requirement or "Custom validator returned False."},
                self.name,
                value,
            )

    def to_mapping(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {"default": self.default, "value_type": self.value_type}
        if self.validator is not None:
            d["validator"] = self.validator
        if self.description:
            d["description"] = self.description
        if self.aliases:
            d["aliases"] = self.aliases
        return d

    def __getitem__(self, item: str) -> Any:
        return self.to_mapping()[item]
