import pytest

from orderprice.config import refresh_config


@pytest.fixture(autouse=True)
def clear_orderprice_env(monkeypatch):
    for key in [
        "ORDERPRICE_LOG_LEVEL",
        "ORDERPRICE_DISPLAY_PRECISION",
        "ORDERPRICE_JSON_INDENT",
    ]:
        monkeypatch.delenv(key, raising=False)
    yield
    refresh_config()
