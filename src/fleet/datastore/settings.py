"""File datastore settings."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from fleet.common import AppDirectories, get_data_directory_from_dirs

from .file import FileDataStore


@dataclass(frozen=True)
class DataStoreSettings:
    """Settings for the file-based datastore.

    Attributes:
        directories: Application directory settings
        root: Explicit store root. Defaults to the XDG data directory.
    """

    directories: AppDirectories
    root: Path | None = None

    @property
    def resolved_root(self) -> Path:
        if self.root is not None:
            return self.root.expanduser()
        return get_data_directory_from_dirs(self.directories)


def create_datastore(settings: DataStoreSettings) -> FileDataStore:
    return FileDataStore(root=settings.resolved_root)
