"""Root directory registry for a datastore."""

from __future__ import annotations

from pathlib import Path

from result import Err, Ok, Result

from fleet.common import create_logger

from .models import DataStoreNotInitializedError

logger = create_logger("datastore")


class PrefixRegistry:
    """Holds the root directory keys are resolved against, or nothing.

    Each store owns its own registry, so stores with different roots never
    interfere with one another.
    """

    def __init__(self, root: Path | str | None = None) -> None:
        self._root: Path | None = None
        if root is not None:
            self.set(root)

    @property
    def is_set(self) -> bool:
        return self._root is not None

    def set(self, root: Path | str) -> None:
        self._root = Path(root).expanduser().absolute()
        logger.debug("Datastore prefix set", root=str(self._root))

    def clear(self) -> None:
        self._root = None
        logger.debug("Datastore prefix cleared")

    def current(self) -> Result[Path, DataStoreNotInitializedError]:
        if self._root is None:
            return Err(DataStoreNotInitializedError(message="Datastore prefix is not set"))
        return Ok(self._root)
