"""In-memory store implementations."""

from datastore_emulator.stores.base import StoreIdentity, Transform
from datastore_emulator.stores.ordered import OrderedDataStore, SortDirection
from datastore_emulator.stores.plain import DataStore

__all__ = ["DataStore", "OrderedDataStore", "SortDirection", "StoreIdentity", "Transform"]
