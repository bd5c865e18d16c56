import pytest

from catalog.loader import load_catalog
from catalog.schema import Item
from catalog.store import Catalog
from engine_core.config import get_config


@pytest.fixture(autouse=True)
def isolated_logs(tmp_path, monkeypatch):
    """Send the JSON event log to a temp dir for every test."""
    monkeypatch.setenv("SIMILARITY_LOG_DIR", str(tmp_path / "logs"))
    get_config.cache_clear()
    yield tmp_path / "logs"
    get_config.cache_clear()


@pytest.fixture
def demo_catalog():
    return load_catalog()


@pytest.fixture
def three_items():
    return Catalog(items=[
        Item(id=1, title="Brooklyn 99", rating=(10, 4)),
        Item(id=2, title="Rush Hour 2", rating=(10, 7)),
        Item(id=5, title="John Wick", rating=(2, 9)),
    ])
