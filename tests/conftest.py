from dataclasses import dataclass
from typing import Any, BinaryIO, Callable, Dict, List, Optional

import pytest

from wren.delegates.base import AssetCreationDelegate
from wren.handle import AssetHandle
from wren.loaders.base import AssetLoader


@dataclass
class Texture:
    name: str


@dataclass
class Material:
    texture: AssetHandle[Any]


class RecordingDelegate(AssetCreationDelegate):
    """Returns the raw bytes (or ``result``) and remembers every call."""

    def __init__(self, result: Any = ..., name: str = "") -> None:
        self.result = result
        self.name = name
        self.calls: List[str] = []

    def create(self, identifier: str, reader: BinaryIO) -> Optional[Any]:
        self.calls.append(identifier)
        data = reader.read()
        if self.result is ...:
            return data
        return self.result


class StubLoader(AssetLoader):
    """Builds assets from factories and counts how often it is asked."""

    def __init__(self, factories: Dict[str, Callable[[], Any]]) -> None:
        self.factories = factories
        self.calls: List[str] = []
        self.closed = False

    def load(
        self, identifier: str, delegate: AssetCreationDelegate
    ) -> Optional[AssetHandle[Any]]:
        self.calls.append(identifier)
        factory = self.factories.get(identifier)
        if factory is None:
            return None
        return AssetHandle.wrap(factory())

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def delegate():
    """Returns a fresh RecordingDelegate for each test."""
    return RecordingDelegate()
