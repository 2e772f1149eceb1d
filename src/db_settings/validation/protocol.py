from typing import Any, Protocol

from typing_extensions import runtime_checkable


@runtime_checkable
class ValidatorProtocol(Protocol):
    def __call__(self, value: Any) -> bool:  # True if the value may be stored
        ...
