"""Image decode, resample and encode algorithms."""

from .image_codec import decode, encode
from .image_resize import image_resize
from .resample import resample

__all__ = ["decode", "encode", "image_resize", "resample"]
