"""Pure nearest-neighbor resampling over RGBA pixel arrays."""

import numpy as np
from numpy.typing import NDArray

from ..schema import Dimensions
from ..utils.profiling import timed


def nearest_indices(src_size: int, dst_size: int) -> NDArray[np.intp]:
    """Source index for every destination index along one axis.

    ``floor(d * src_size / dst_size)`` clamped to ``[0, src_size - 1]``.
    """
    dst = np.arange(dst_size, dtype=np.intp)
    return np.minimum((dst * src_size) // dst_size, src_size - 1)


@timed
def resample(src: NDArray[np.uint8], dimensions: Dimensions) -> NDArray[np.uint8]:
    """
    Scale an image to ``dimensions`` with nearest-neighbor sampling.

    Each destination pixel copies the RGBA value of exactly one source
    pixel; nothing is blended. The source array is left untouched and a
    new, writable array is returned.

    Args:
        src: Image as an array of shape (height, width, channels)
        dimensions: Requested output size

    Returns:
        Array of shape (dimensions.height, dimensions.width, channels)

    Raises:
        ValueError: If the source image has no pixels
    """
    src_height, src_width = src.shape[:2]
    if src_width == 0 or src_height == 0:
        raise ValueError("Cannot resample an empty image")

    sy = nearest_indices(src_height, dimensions.height)
    sx = nearest_indices(src_width, dimensions.width)

    # Advanced indexing allocates the output buffer.
    return src[sy[:, np.newaxis], sx[np.newaxis, :]]
