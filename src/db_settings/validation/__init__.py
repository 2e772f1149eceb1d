from db_settings.validation.base import (
    QUERY_EXCEPTION_REQUIREMENT,
    is_query_exception_class,
    is_string,
    qualified_name,
)
from db_settings.validation.protocol import ValidatorProtocol

__all__ = [
    "ValidatorProtocol",
    "QUERY_EXCEPTION_REQUIREMENT",
    "is_query_exception_class",
    "is_string",
    "qualified_name",
]
