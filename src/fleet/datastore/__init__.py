"""Fleet DataStore module."""

from .adapter import FilesystemAdapter
from .file import FileDataStore
from .models import (
    DataStoreDeleteError,
    DataStoreError,
    DataStoreInvalidKeyError,
    DataStoreInvalidTargetError,
    DataStoreIOError,
    DataStoreKeyNotFoundError,
    DataStoreNotInitializedError,
    DataStoreReadError,
    DataStoreWriteError,
    ReadOptions,
    WriteOptions,
)
from .prefix import PrefixRegistry
from .protocol import DataStore
from .resolver import PathResolver, split_key
from .settings import DataStoreSettings, create_datastore

__all__ = [
    "DataStore",
    "DataStoreDeleteError",
    "DataStoreError",
    "DataStoreIOError",
    "DataStoreInvalidKeyError",
    "DataStoreInvalidTargetError",
    "DataStoreKeyNotFoundError",
    "DataStoreNotInitializedError",
    "DataStoreReadError",
    "DataStoreSettings",
    "DataStoreWriteError",
    "FileDataStore",
    "FilesystemAdapter",
    "PathResolver",
    "PrefixRegistry",
    "ReadOptions",
    "WriteOptions",
    "create_datastore",
    "split_key",
]
