import pytest

from wordstyle.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Make every test start from the default, lenient settings."""
    monkeypatch.delenv("WORDSTYLE_STRICT", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def base_config() -> dict:
    return {
        "width": 500,
        "unit": "pct",
        "borderSize": 6,
        "borderColor": "006699",
        "cellMargin": 80,
        "align": "center",
    }


@pytest.fixture
def first_row_config() -> dict:
    return {"bgColor": "FF0000", "borderBottomSize": 18}
