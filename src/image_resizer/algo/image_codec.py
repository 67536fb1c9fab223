"""JPEG/PNG decoding and PNG encoding between files and RGBA arrays."""

from pathlib import Path

import numpy as np
from loguru import logger
from numpy.typing import NDArray
from PIL import Image

from ..errors import DecodeError
from ..utils.image_formats import ImageFormat
from ..utils.profiling import timed


@timed
def decode(path: str | Path) -> NDArray[np.uint8]:
    """
    Read an image file into a read-only RGBA array.

    The decoder is chosen from the file extension and Pillow is only
    allowed to use that decoder, so a PNG named ``.jpg`` fails to decode.

    Args:
        path: Path to a ``.jpeg``, ``.jpg`` or ``.png`` file

    Returns:
        Array of shape (height, width, 4), dtype uint8, not writeable

    Raises:
        OSError: If the file cannot be opened
        UnsupportedFormatError: If the extension has no decoder
        DecodeError: If the bytes are not a valid image of that format, or
            the image exceeds Pillow's MAX_IMAGE_PIXELS limit
    """
    with open(path, "rb") as fh:
        image_format = ImageFormat.from_path(path)
        logger.debug(f"Decoding {path} as {image_format}")

        try:
            with Image.open(fh, formats=[image_format.value]) as img:
                rgba = img.convert("RGBA")
        except (
            Image.UnidentifiedImageError,
            Image.DecompressionBombError,
            OSError,
            SyntaxError,
            ValueError,
        ) as exc:
            raise DecodeError(f"failed to decode {path} as {image_format}: {exc}") from exc

    pixels = np.asarray(rgba, dtype=np.uint8)
    pixels.flags.writeable = False
    logger.info(f"Decoded {path}: {pixels.shape[1]}x{pixels.shape[0]}")
    return pixels


@timed
def encode(image: NDArray[np.uint8], path: str | Path) -> None:
    """
    Write an RGBA array to ``path`` as PNG.

    The output is PNG whatever extension ``path`` carries. An existing file
    is truncated.

    Raises:
        OSError: If the file cannot be created or written
    """
    output = Image.fromarray(np.ascontiguousarray(image, dtype=np.uint8))

    with open(path, "wb") as fh:
        output.save(fh, format="PNG")

    logger.info(f"Encoded {output.width}x{output.height} PNG to {path}")
