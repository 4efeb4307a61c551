"""DataStore protocol."""

from __future__ import annotations

from typing import Protocol

from result import Result

from .models import DataStoreError, ReadOptions, WriteOptions


class DataStore(Protocol):
    """Protocol for local state storage addressed by hierarchical keys."""

    async def has(self, key: str) -> Result[bool, DataStoreError]: ...

    async def get(self, key: str, options: ReadOptions | None = None) -> Result[bytes | str, DataStoreError]: ...

    async def set(
        self, key: str, value: bytes | str, options: WriteOptions | None = None
    ) -> Result[None, DataStoreError]: ...

    async def remove(self, key: str) -> Result[None, DataStoreError]: ...
