"""File-based DataStore implementation."""

from __future__ import annotations

from pathlib import Path

from result import Err, Ok, Result, is_err

from fleet.common import create_logger

from .adapter import FilesystemAdapter
from .models import (
    DataStoreDeleteError,
    DataStoreError,
    DataStoreIOError,
    DataStoreInvalidTargetError,
    DataStoreKeyNotFoundError,
    DataStoreReadError,
    DataStoreWriteError,
    ReadOptions,
    WriteOptions,
)
from .prefix import PrefixRegistry
from .resolver import PathResolver

logger = create_logger("datastore")


class FileDataStore:
    """File-based implementation of DataStore protocol.

    Every key maps to a file or directory below the prefix directory. Writes
    create intermediate directories; removing a directory key removes the
    whole subtree. There is no locking: concurrent writers to the same key
    race and the last one to finish wins.
    """

    def __init__(self, root: Path | str | None = None, filesystem: FilesystemAdapter | None = None) -> None:
        self._prefix = PrefixRegistry(root)
        self._resolver = PathResolver(self._prefix)
        self._fs = filesystem or FilesystemAdapter()

    @property
    def prefix(self) -> PrefixRegistry:
        return self._prefix

    async def has(self, key: str) -> Result[bool, DataStoreError]:
        resolved = self._resolver.resolve(key)
        if is_err(resolved):
            return self._failed("has", resolved)

        return Ok(await self._fs.exists(resolved.ok_value))

    async def get(self, key: str, options: ReadOptions | None = None) -> Result[bytes | str, DataStoreError]:
        options = options or ReadOptions()
        resolved = self._resolver.resolve(key)
        if is_err(resolved):
            return self._failed("get", resolved)
        path = resolved.ok_value

        if not await self._fs.exists(path):
            return self._failed("get", Err(_not_found(key, path)))
        if await self._fs.is_dir(path):
            return self._failed(
                "get",
                Err(
                    DataStoreInvalidTargetError(
                        key=key,
                        path=path,
                        message=f"Key '{key}' is a directory and cannot be read as a value",
                    )
                ),
            )

        try:
            data = await self._fs.read_bytes(path)
            return Ok(data.decode(options.encoding) if options.encoding else data)
        except FileNotFoundError:
            return self._failed("get", Err(_not_found(key, path)))
        except (OSError, UnicodeError, LookupError) as e:
            return self._failed("get", Err(_io_error(DataStoreReadError, key, path, f"Failed to read data: {e}", e)))

    async def set(
        self, key: str, value: bytes | str, options: WriteOptions | None = None
    ) -> Result[None, DataStoreError]:
        options = options or WriteOptions()
        resolved = self._resolver.resolve(key)
        if is_err(resolved):
            return self._failed("set", resolved)
        path = resolved.ok_value

        try:
            data = value.encode(options.encoding) if isinstance(value, str) else bytes(value)
            await self._fs.write_bytes(path, data, mode=options.mode, atomic=options.atomic)
        except (OSError, UnicodeError, LookupError) as e:
            return self._failed("set", Err(_io_error(DataStoreWriteError, key, path, f"Failed to save data: {e}", e)))

        logger.debug("Saved value", key=key, path=str(path), size=len(data))
        return Ok(None)

    async def remove(self, key: str) -> Result[None, DataStoreError]:
        resolved = self._resolver.resolve(key)
        if is_err(resolved):
            return self._failed("remove", resolved)
        path = resolved.ok_value

        if not await self._fs.exists(path):
            return self._failed("remove", Err(_not_found(key, path)))

        try:
            await self._fs.remove(path)
        except FileNotFoundError:
            return self._failed("remove", Err(_not_found(key, path)))
        except OSError as e:
            return self._failed(
                "remove", Err(_io_error(DataStoreDeleteError, key, path, f"Failed to delete data: {e}", e))
            )

        logger.debug("Removed value", key=key, path=str(path))
        return Ok(None)

    def _failed(self, operation: str, result: Err[DataStoreError]) -> Err[DataStoreError]:
        error = result.err_value
        if isinstance(error, DataStoreIOError):
            logger.warning("Datastore operation failed", operation=operation, key=error.key, error=error.message)
        else:
            logger.debug("Datastore operation rejected", operation=operation, key=error.key, error=error.message)
        return result


def _not_found(key: str, path: Path) -> DataStoreKeyNotFoundError:
    return DataStoreKeyNotFoundError(key=key, path=path, message=f"Key '{key}' not found")


def _io_error(
    error_cls: type[DataStoreIOError], key: str, path: Path, message: str, exc: Exception
) -> DataStoreIOError:
    return error_cls(
        key=key,
        path=path,
        message=message,
        errno=exc.errno if isinstance(exc, OSError) else None,
    )
