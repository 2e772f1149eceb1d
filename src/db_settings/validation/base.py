from __future__ import annotations

from typing import Any

from db_settings.database.exceptions import DatabaseQueryException


def qualified_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def is_query_exception_class(value: Any) -> bool:
    """
    Return True if ``value`` is DatabaseQueryException or a subclass of it.

    The check works on the class object itself; nothing is instantiated.
    """
    return isinstance(value, type) and issubclass(value, DatabaseQueryException)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


QUERY_EXCEPTION_REQUIREMENT = (
    "The provided DatabaseQueryException class must be or must extend "
    f"{qualified_name(DatabaseQueryException)}."
)
