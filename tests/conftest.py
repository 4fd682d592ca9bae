import pytest

from application.services.tip_manager import TipManager
from infrastructure.key_value_store import InMemoryKeyValueStore
from infrastructure.local_store import LocalStore


@pytest.fixture
def kv_store():
    return InMemoryKeyValueStore()


@pytest.fixture
def local_store(kv_store):
    return LocalStore(kv_store)


@pytest.fixture
def manager(local_store):
    """Manager initialized over an empty store, so it holds the seed data"""
    m = TipManager(local_store)
    m.initialize()
    return m


@pytest.fixture
def empty_manager(local_store):
    """Manager that was never initialized"""
    return TipManager(local_store)
