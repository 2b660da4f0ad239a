# wren/delegates/base.py
from abc import ABC, abstractmethod
from typing import Any, BinaryIO, Optional


class AssetCreationDelegate(ABC):
    @abstractmethod
    def create(self, identifier: str, reader: BinaryIO) -> Optional[Any]:
        """
        Build an asset value from the bytes in ``reader``.

        Returns None when the content is malformed or unsupported. Readers
        are sequential streams and may not support seeking.
        """
        pass
