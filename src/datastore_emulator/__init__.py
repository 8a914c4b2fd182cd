"""datastore_emulator — an in-memory stand-in for a remote key-value storage API.

A :class:`DataStoreRegistry` hands out namespaced stores by ``(name, scope)``.
Plain stores support get/set/remove and an atomic read-modify-write
``update``; ordered stores add range-filtered, sorted enumeration of their
numeric values.  Nothing is persisted and nothing touches the network.
"""

import logging

from datastore_emulator.config import RegistryConfig
from datastore_emulator.exceptions import ConfigError, DataStoreError
from datastore_emulator.page import Entry, Page
from datastore_emulator.registry import DataStoreRegistry
from datastore_emulator.stores import (
    DataStore,
    OrderedDataStore,
    SortDirection,
    StoreIdentity,
    Transform,
)
from datastore_emulator.values import Value, is_numeric

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ConfigError",
    "DataStore",
    "DataStoreError",
    "DataStoreRegistry",
    "Entry",
    "OrderedDataStore",
    "Page",
    "RegistryConfig",
    "SortDirection",
    "StoreIdentity",
    "Transform",
    "Value",
    "is_numeric",
]
