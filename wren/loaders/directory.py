# wren/loaders/directory.py
import logging
from pathlib import Path
from typing import Any, Optional

from wren.delegates.base import AssetCreationDelegate
from wren.handle import AssetHandle
from wren.loaders.base import AssetLoader

logger = logging.getLogger(__name__)


class DirectoryLoader(AssetLoader):
    """Loads assets as files relative to a base directory on disk."""

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def load(
        self, identifier: str, delegate: AssetCreationDelegate
    ) -> Optional[AssetHandle[Any]]:
        path = self.directory / identifier
        if not path.is_file():
            logger.debug("%s not found in %s", identifier, self.directory)
            return None

        try:
            with open(path, "rb") as f:
                value = delegate.create(identifier, f)
        except OSError as e:
            logger.warning("Failed to read %s: %s", path, e)
            return None

        if value is None:
            return None
        return AssetHandle.wrap(value)

    def __repr__(self) -> str:
        return f"DirectoryLoader({str(self.directory)!r})"
