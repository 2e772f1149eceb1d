# python
import pytest

from db_settings import Config


@pytest.fixture(autouse=True)
def fresh_config():
    cfg = Config.instance(Config())
    yield cfg
    Config.instance(Config())
