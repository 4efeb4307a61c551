"""Key to filesystem path resolution."""

from __future__ import annotations

import os
import re
from pathlib import Path, PureWindowsPath

from result import Err, Ok, Result, is_err

from .models import DataStoreError, DataStoreInvalidKeyError
from .prefix import PrefixRegistry

_SEPARATORS = re.compile(r"[/\\]" if os.sep == "\\" else r"/")
_DRIVE_LETTERS = os.name == "nt"


class PathResolver:
    """Maps keys such as ``"nested/text"`` onto paths below the current prefix."""

    def __init__(self, prefix: PrefixRegistry) -> None:
        self._prefix = prefix

    def resolve(self, key: str) -> Result[Path, DataStoreError]:
        root = self._prefix.current()
        if is_err(root):
            return Err(root.err_value.model_copy(update={"key": key}))

        return split_key(key).map(lambda segments: root.ok_value.joinpath(*segments))


def split_key(key: str) -> Result[list[str], DataStoreInvalidKeyError]:
    """Split a key into path segments, rejecting keys that leave the root.

    Empty segments and ``.`` are dropped, so ``"a//b/./c"`` is ``a/b/c``.
    Absolute keys, ``..`` segments and, on Windows, drive-qualified segments
    such as ``C:foo`` are rejected.
    """
    if not key:
        return Err(DataStoreInvalidKeyError(key=key, message="Key must not be empty"))
    if "\x00" in key:
        return Err(DataStoreInvalidKeyError(key=key, message="Key must not contain NUL bytes"))
    if _SEPARATORS.match(key) or os.path.isabs(key):
        return Err(DataStoreInvalidKeyError(key=key, message=f"Key '{key}' must be relative to the store root"))

    segments = [segment for segment in _SEPARATORS.split(key) if segment not in ("", ".")]
    if not segments:
        return Err(DataStoreInvalidKeyError(key=key, message=f"Key '{key}' does not name an entry"))
    if ".." in segments:
        return Err(DataStoreInvalidKeyError(key=key, message=f"Key '{key}' must not contain '..' segments"))
    if _DRIVE_LETTERS and any(PureWindowsPath(segment).drive for segment in segments):
        return Err(DataStoreInvalidKeyError(key=key, message=f"Key '{key}' must not name a drive"))

    return Ok(segments)
