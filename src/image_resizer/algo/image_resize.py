"""Pure image resize computation logic (single file)."""

from pathlib import Path

from loguru import logger

from ..schema import Dimensions
from .image_codec import decode, encode
from .resample import resample


def image_resize(
    *,
    input_path: str | Path,
    output_path: str | Path,
    dimensions: Dimensions,
) -> str:
    """
    Resize a single image with nearest-neighbor sampling and write a PNG.

    Framework-agnostic, single-responsibility function. The output always
    has exactly ``dimensions``; aspect ratio is not preserved.

    Args:
        input_path: Path to input image (JPEG or PNG, chosen by extension)
        output_path: Path to output image, always written as PNG
        dimensions: Target width and height

    Returns:
        Output file path as string

    Raises:
        OSError: If the input cannot be opened or the output cannot be written
        UnsupportedFormatError: If the input extension is not jpeg, jpg or png
        DecodeError: If the input bytes cannot be decoded
    """
    output_path = Path(output_path)

    source = decode(input_path)
    resized = resample(source, dimensions)
    logger.debug(f"Resampled {source.shape[1]}x{source.shape[0]} to {dimensions}")
    encode(resized, output_path)

    return str(output_path)
