# python
import logging

from db_settings import Config, DatabaseQueryException


class MyPluginQueryException(DatabaseQueryException):
    pass


class MyPluginConfig(Config):
    def _get_hook_prefix(self) -> str:
        return super()._get_hook_prefix() or "my_plugin"


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    Config.setHookPrefix("acme_")
    print("Hook prefix:", Config.getHookPrefix())

    Config.setDatabaseQueryException(MyPluginQueryException)
    print("Query exception:", Config.getDatabaseQueryException().__name__)

    try:
        Config.setDatabaseQueryException(KeyError)
    except ValueError as exc:
        print("Rejected:", exc)

    Config.instance(MyPluginConfig())
    print("After replacement:", Config.instance(), Config.getHookPrefix())
