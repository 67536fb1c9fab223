"""Test configuration and fixtures for image_resizer.

This module provides:
- Function-scoped fixtures writing small JPEG/PNG images into tmp_path
- Loguru handler cleanup between tests
"""

from pathlib import Path

import numpy as np
import pytest
from loguru import logger
from numpy.typing import NDArray
from PIL import Image

from image_resizer.utils.logging_utils import LOG_LEVEL_ENV

RED = (255, 0, 0, 255)


# ============================================================================
# Logging
# ============================================================================


@pytest.fixture(autouse=True)
def reset_loguru(monkeypatch: pytest.MonkeyPatch):
    """Ignore any ambient log level and drop sinks added during a test."""
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    yield
    logger.remove()


# ============================================================================
# Sample Images
# ============================================================================


@pytest.fixture
def red_png(tmp_path: Path) -> Path:
    """10x10 PNG, every pixel opaque red."""
    path = tmp_path / "a.png"
    Image.new("RGBA", (10, 10), RED).save(path)
    return path


@pytest.fixture
def red_jpg(tmp_path: Path) -> Path:
    """16x8 JPEG filled with red."""
    path = tmp_path / "photo.jpg"
    Image.new("RGB", (16, 8), RED[:3]).save(path, format="JPEG")
    return path


@pytest.fixture
def gradient_pixels() -> NDArray[np.uint8]:
    """4x3 RGBA array where every pixel is unique (R = x, G = y)."""
    height, width = 3, 4
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    for y in range(height):
        for x in range(width):
            pixels[y, x] = (x, y, 7, 255)
    return pixels


@pytest.fixture
def gradient_png(tmp_path: Path, gradient_pixels: NDArray[np.uint8]) -> Path:
    """PNG file holding gradient_pixels."""
    path = tmp_path / "gradient.png"
    Image.fromarray(gradient_pixels).save(path, format="PNG")
    return path
