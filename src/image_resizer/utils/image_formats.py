from enum import StrEnum
from pathlib import Path

from ..errors import UnsupportedFormatError


class ImageFormat(StrEnum):
    """Input formats the resizer can decode, valued by their Pillow name."""

    JPEG = "JPEG"
    PNG = "PNG"

    @classmethod
    def from_extension(cls, extension: str) -> "ImageFormat":
        # Case-sensitive: "PNG" and "Jpg" are rejected.
        if extension in ("jpeg", "jpg"):
            return ImageFormat.JPEG
        elif extension == "png":
            return ImageFormat.PNG
        else:
            raise UnsupportedFormatError(f"{extension} file extension are not supported")

    @classmethod
    def from_path(cls, path: str | Path) -> "ImageFormat":
        return cls.from_extension(extract_file_extension(path))


def extract_file_extension(path: str | Path) -> str:
    """Return the text after the last dot of the whole path.

    A path without any dot is returned unchanged.
    """
    return str(path).split(".")[-1]
