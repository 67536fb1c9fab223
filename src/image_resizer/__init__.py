"""image_resizer - Nearest-neighbor image resizing from the command line."""

from .algo.image_codec import decode, encode
from .algo.image_resize import image_resize
from .algo.resample import resample
from .errors import (
    DecodeError,
    ImageResizerError,
    InvalidDimensionsError,
    MissingFlagError,
    UnsupportedFormatError,
)
from .schema import Dimensions, ResizeParams
from .utils.image_formats import ImageFormat

__version__ = "0.1.0"

__all__ = [
    "Dimensions",
    "ResizeParams",
    "ImageFormat",
    "decode",
    "encode",
    "resample",
    "image_resize",
    "ImageResizerError",
    "MissingFlagError",
    "InvalidDimensionsError",
    "UnsupportedFormatError",
    "DecodeError",
    "__version__",
]
