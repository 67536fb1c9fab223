"""Pydantic schemas for resize parameters."""

import re
from typing import override

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, ValidationError

from .errors import InvalidDimensionsError

_WHITESPACE = re.compile(r"\s+")
_INTEGER = re.compile(r"[+-]?[0-9]+")


class Dimensions(BaseModel):
    """Target pixel size of the resized image.

    Attributes:
        width: Output width in pixels
        height: Output height in pixels
    """

    width: PositiveInt = Field(..., description="Output width in pixels")
    height: PositiveInt = Field(..., description="Output height in pixels")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def parse(cls, text: str) -> "Dimensions":
        """Parse ``WIDTHxHEIGHT``.

        Whitespace is ignored and the separator is case-insensitive, so
        ``"100x50"``, ``"100X50"`` and ``"100 x 50"`` are equivalent.

        Raises:
            InvalidDimensionsError: If the text is malformed or either side
                is not a positive integer
        """
        parts = _WHITESPACE.sub("", text).lower().split("x")
        if len(parts) != 2:
            raise InvalidDimensionsError(
                "invalid dimensions provided\n"
                + "dimensions should be formatted as '123x123'"
            )

        values: list[int] = []
        for part in parts:
            if not _INTEGER.fullmatch(part):
                raise InvalidDimensionsError(
                    f"invalid dimensions provided\n'{part}' is not an integer"
                )
            try:
                values.append(int(part))
            except ValueError as exc:
                raise InvalidDimensionsError(
                    f"invalid dimensions provided\n'{part[:20]}...' is too large"
                ) from exc

        try:
            return cls(width=values[0], height=values[1])
        except ValidationError as exc:
            raise InvalidDimensionsError(
                "invalid dimensions provided\nwidth and height must be positive"
            ) from exc

    @override
    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


class ResizeParams(BaseModel):
    """Everything one resize run needs, gathered from the command line.

    Attributes:
        input_path: Path of the JPEG or PNG image to read
        output_path: Path the PNG result is written to
        dimensions: Requested output size
    """

    input_path: str = Field(..., min_length=1, description="Input image path")
    output_path: str = Field(..., min_length=1, description="Output image path")
    dimensions: Dimensions

    model_config = ConfigDict(frozen=True)
