"""DataStore error and option models."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class DataStoreError(BaseModel):
    """Base datastore error."""

    model_config = ConfigDict(extra="forbid")

    message: str
    key: str | None = None


class DataStoreNotInitializedError(DataStoreError):
    """Store used before its root directory was configured."""


class DataStoreInvalidKeyError(DataStoreError):
    """Key is empty, malformed or escapes the root directory."""

    key: str


class DataStoreKeyNotFoundError(DataStoreError):
    """Nothing exists at the resolved path."""

    key: str
    path: Path


class DataStoreInvalidTargetError(DataStoreError):
    """Resolved path is a directory where a file was expected."""

    key: str
    path: Path


class DataStoreIOError(DataStoreError):
    """Underlying filesystem failure."""

    key: str
    path: Path
    operation: Literal["read", "write", "delete", "stat"]
    errno: int | None = None


class DataStoreReadError(DataStoreIOError):
    """Error reading from datastore."""

    operation: Literal["read", "write", "delete", "stat"] = "read"


class DataStoreWriteError(DataStoreIOError):
    """Error writing to datastore."""

    operation: Literal["read", "write", "delete", "stat"] = "write"


class DataStoreDeleteError(DataStoreIOError):
    """Error deleting from datastore."""

    operation: Literal["read", "write", "delete", "stat"] = "delete"


class ReadOptions(BaseModel):
    """Options for reading a stored value.

    Attributes:
        encoding: Text encoding used to decode the content. Raw bytes are
            returned when omitted.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    encoding: str | None = None


class WriteOptions(BaseModel):
    """Options for writing a stored value.

    Attributes:
        encoding: Text encoding applied to ``str`` values. Ignored for bytes.
        mode: Permission bits applied to the written file.
        atomic: Write to a temporary sibling and rename it over the target.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    encoding: str = "utf-8"
    mode: int | None = Field(default=None, ge=0, le=0o7777)
    atomic: bool = False
