from __future__ import annotations

from typing import Iterable, List, Optional


class DatabaseQueryException(Exception):
    """Raised by the database layer when a query fails.

    Subclasses may be installed through ``Config.setDatabaseQueryException`` to
    change which exception type the library raises.
    """

    def __init__(self, message: str = "", query_errors: Optional[Iterable[str]] = None) -> None:
        self.query_errors: List[str] = list(query_errors or ())
        super().__init__(message)

    def get_query_errors(self) -> List[str]:
        return list(self.query_errors)
