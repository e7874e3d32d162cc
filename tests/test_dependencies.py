import pytest

from keymeow_data.core import dependencies
from keymeow_data.core.dependencies import get_store, reset_store


@pytest.fixture(autouse=True)
def _fresh_store():
    reset_store()
    yield
    reset_store()


def test_get_store_is_a_singleton(config):
    first = get_store(config)
    assert get_store() is first
    assert first.data_dir == config.data_dir


def test_reset_store_rebuilds(config):
    first = get_store(config)
    reset_store()
    assert dependencies._store is None
    assert get_store(config) is not first
