# wren/delegates/tagged_json.py
"""
Type-tagged JSON assets.

An asset type is declared by subclassing TaggedJsonAsset::

    @dataclass
    class StringAsset(TaggedJsonAsset):
        value: str

and stored on disk as ``{"type": "StringAsset", "data": {"value": "hi"}}``.
TaggedJsonDelegate looks the tag up, builds the instance from ``data`` and
runs its on_create() hook. Subclasses can pick a different tag with
``class Foo(TaggedJsonAsset, tag="foo")``.
"""

from __future__ import annotations

import json
import logging
from typing import Any, BinaryIO, ClassVar, Dict, Optional, Type

from wren.delegates.base import AssetCreationDelegate

logger = logging.getLogger(__name__)


class TaggedJsonAsset:
    """Base class for assets decoded from type-tagged JSON documents."""

    _registry: ClassVar[Dict[str, Type[TaggedJsonAsset]]] = {}
    asset_tag: ClassVar[str]

    def __init_subclass__(cls, tag: Optional[str] = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        name = tag or cls.__name__
        existing = TaggedJsonAsset._registry.get(name)
        if existing is not None and existing.__qualname__ != cls.__qualname__:
            raise ValueError(
                f"tag {name!r} already registered by {existing.__qualname__}"
            )
        cls.asset_tag = name
        TaggedJsonAsset._registry[name] = cls

    def on_create(self) -> None:
        """Hook run once after the asset has been decoded."""

    @classmethod
    def lookup(cls, tag: str) -> Optional[Type[TaggedJsonAsset]]:
        return TaggedJsonAsset._registry.get(tag)


class TaggedJsonDelegate(AssetCreationDelegate):
    def create(
        self, identifier: str, reader: BinaryIO
    ) -> Optional[TaggedJsonAsset]:
        try:
            document = json.load(reader)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning("Malformed JSON in %s: %s", identifier, e)
            return None

        if not isinstance(document, dict):
            logger.warning("%s is not a tagged JSON object", identifier)
            return None

        tag = document.get("type")
        asset_cls = TaggedJsonAsset.lookup(tag) if isinstance(tag, str) else None
        if asset_cls is None:
            logger.warning("Unknown asset type %r in %s", tag, identifier)
            return None

        data = document.get("data", {})
        if not isinstance(data, dict):
            logger.warning("Payload of %s is not an object", identifier)
            return None

        try:
            asset = asset_cls(**data)
        except (TypeError, ValueError, KeyError) as e:
            logger.warning("Cannot build %s from %s: %s", tag, identifier, e)
            return None

        asset.on_create()
        return asset
