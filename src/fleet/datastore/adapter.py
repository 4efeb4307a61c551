"""Async filesystem primitives used by the file datastore.

These raise ``OSError`` on failure; translating failures into datastore
errors is the store's job.
"""

from __future__ import annotations

import asyncio
import errno
import os
import shutil
import uuid
from pathlib import Path

import aiofiles
import aiofiles.os


class FilesystemAdapter:
    async def read_bytes(self, path: Path) -> bytes:
        async with aiofiles.open(path, "rb") as f:
            return await f.read()

    async def write_bytes(self, path: Path, data: bytes, mode: int | None = None, atomic: bool = False) -> None:
        """Write ``data`` to ``path``, creating missing parent directories."""
        await aiofiles.os.makedirs(path.parent, exist_ok=True)

        if not atomic:
            await self._write(path, data, mode)
            return

        if await aiofiles.os.path.isdir(path):
            raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), str(path))

        tmp_path = path.with_name(f".{path.name}.{uuid.uuid4().hex}.tmp")
        try:
            await self._write(tmp_path, data, mode)
            await aiofiles.os.replace(tmp_path, path)
        except BaseException:
            if await self.exists(tmp_path):
                await aiofiles.os.remove(tmp_path)
            raise

    async def exists(self, path: Path) -> bool:
        return await aiofiles.os.path.exists(path) or await aiofiles.os.path.islink(path)

    async def is_dir(self, path: Path) -> bool:
        return await aiofiles.os.path.isdir(path)

    async def remove(self, path: Path) -> None:
        """Delete a file, or a directory and everything below it."""
        if await self.is_dir(path) and not await aiofiles.os.path.islink(path):
            await asyncio.to_thread(shutil.rmtree, path)
        else:
            await aiofiles.os.remove(path)

    async def _write(self, path: Path, data: bytes, mode: int | None) -> None:
        async with aiofiles.open(path, "wb") as f:
            await f.write(data)
        if mode is not None:
            await asyncio.to_thread(os.chmod, path, mode)
