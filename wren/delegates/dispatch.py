# wren/delegates/dispatch.py
from __future__ import annotations

import logging
from typing import Any, BinaryIO, Dict, Optional

from wren.delegates.base import AssetCreationDelegate

logger = logging.getLogger(__name__)


def extension_of(identifier: str) -> Optional[str]:
    """
    Lowercase text after the last dot of the identifier's final path
    segment, or None when there is no extension.
    """
    name = identifier.rsplit("/", 1)[-1]
    if "." not in name:
        return None
    ext = name.rsplit(".", 1)[1]
    return ext.lower() if ext else None


class ExtensionDispatchDelegate(AssetCreationDelegate):
    """Routes creation to a child delegate chosen by file extension."""

    def __init__(self) -> None:
        self._delegates: Dict[str, AssetCreationDelegate] = {}

    def register(
        self, extension: str, delegate: AssetCreationDelegate
    ) -> ExtensionDispatchDelegate:
        """Register ``delegate`` for ``extension``, replacing any previous one."""
        normalized = extension.strip().lstrip(".").lower()
        if not normalized:
            raise ValueError("extension must not be empty")
        self._delegates[normalized] = delegate
        return self

    def delegate_for(self, identifier: str) -> Optional[AssetCreationDelegate]:
        ext = extension_of(identifier)
        if ext is None:
            return None
        return self._delegates.get(ext)

    def create(self, identifier: str, reader: BinaryIO) -> Optional[Any]:
        delegate = self.delegate_for(identifier)
        if delegate is None:
            logger.debug("No creation delegate for %r", identifier)
            return None
        return delegate.create(identifier, reader)

    def __contains__(self, extension: str) -> bool:
        return extension.lstrip(".").lower() in self._delegates
