# wren/delegates/texture.py
import io
import logging
from typing import BinaryIO, Optional

from PIL import Image, UnidentifiedImageError

from wren.delegates.base import AssetCreationDelegate
from wren.types import TextureData

logger = logging.getLogger(__name__)


class TextureDelegate(AssetCreationDelegate):
    def create(self, identifier: str, reader: BinaryIO) -> Optional[TextureData]:
        # Pillow needs a seekable file; archive members are not.
        buffer = io.BytesIO(reader.read())
        try:
            with Image.open(buffer) as img:
                converted = img.convert("RGBA")

                # NOTE: flip here if the consumer expects a bottom-left origin
                # converted = converted.transpose(Image.FLIP_TOP_BOTTOM)

                width, height = converted.size
                data = converted.tobytes()
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
            logger.warning("Failed to decode texture %s: %s", identifier, e)
            return None

        return TextureData(data=data, width=width, height=height, components=4)
