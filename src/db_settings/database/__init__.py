from db_settings.database.exceptions import DatabaseQueryException

__all__ = ["DatabaseQueryException"]
