# wren/delegates/shader.py
import logging
from typing import BinaryIO, Optional

from wren.delegates.base import AssetCreationDelegate
from wren.types import ShaderSource

logger = logging.getLogger(__name__)


class ShaderDelegate(AssetCreationDelegate):
    def create(self, identifier: str, reader: BinaryIO) -> Optional[ShaderSource]:
        try:
            source = reader.read().decode("utf-8")
        except UnicodeDecodeError as e:
            logger.warning("Shader %s is not valid UTF-8: %s", identifier, e)
            return None

        return ShaderSource(source=source, path=identifier)
