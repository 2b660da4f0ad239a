# wren/loaders/zip.py
from __future__ import annotations

import logging
import zipfile
import zlib
from pathlib import Path
from typing import Any, Optional

from wren.delegates.base import AssetCreationDelegate
from wren.handle import AssetHandle
from wren.loaders.base import AssetLoader

logger = logging.getLogger(__name__)

ENCRYPTED_FLAG = 0x1


class ZipLoader(AssetLoader):
    """
    Loads assets as members of a ZIP archive.

    The archive must be backed by a seekable file, since members are
    located through the central directory.
    """

    def __init__(self, archive: zipfile.ZipFile) -> None:
        self.archive = archive

    @classmethod
    def open(cls, path: str | Path) -> ZipLoader:
        return cls(zipfile.ZipFile(path, "r"))

    def load(
        self, identifier: str, delegate: AssetCreationDelegate
    ) -> Optional[AssetHandle[Any]]:
        try:
            info = self.archive.getinfo(identifier)
        except KeyError:
            logger.debug("%s not found in %s", identifier, self.archive.filename)
            return None

        if info.is_dir():
            return None

        if info.flag_bits & ENCRYPTED_FLAG:
            logger.warning("%s is encrypted, skipping", identifier)
            return None

        try:
            with self.archive.open(info) as member:
                value = delegate.create(identifier, member)
        except (OSError, EOFError, zipfile.BadZipFile, zlib.error) as e:
            logger.warning("Failed to read %s from archive: %s", identifier, e)
            return None

        if value is None:
            return None
        return AssetHandle.wrap(value)

    def close(self) -> None:
        self.archive.close()
