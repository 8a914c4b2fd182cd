"""Shared test fixtures."""

import pytest

from datastore_emulator import DataStoreRegistry


@pytest.fixture
def registry():
    return DataStoreRegistry()


@pytest.fixture
def store(registry):
    return registry.get_store("players")


@pytest.fixture
def ordered(registry):
    return registry.get_ordered_store("leaderboard")
