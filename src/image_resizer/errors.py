"""Error types raised while resizing an image.

Failures to open, create or write a file are not wrapped: they surface as
the built-in ``OSError`` raised by the failing call.
"""


class ImageResizerError(Exception):
    """Base class for every error the resizer raises itself."""

    def __init__(self, message: str = "An unknown resize error occurred."):
        self.message: str = message
        super().__init__(self.message)


class MissingFlagError(ImageResizerError):
    """A required command line flag (-i, -o or -d) was absent or empty."""


class InvalidDimensionsError(ImageResizerError):
    """Dimensions were not of the form WIDTHxHEIGHT with positive integers."""


class UnsupportedFormatError(ImageResizerError):
    """The input file extension has no decoder."""


class DecodeError(ImageResizerError):
    """The input bytes are not a valid image of the selected format."""
