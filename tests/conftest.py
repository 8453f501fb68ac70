import io

import numpy as np
import pytest
from PIL import Image

from docvalidator.sensors.image import DecodedImage, decode_image


def _png_bytes(image: Image.Image) -> bytes:
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture()
def blank_png_bytes() -> bytes:
    """A 120x80 uniformly white PNG."""
    return _png_bytes(Image.new("RGB", (120, 80), color=(255, 255, 255)))


@pytest.fixture()
def document_array() -> np.ndarray:
    """A light card-shaped rectangle on a dark background (grayscale, 300x200)."""
    array = np.full((200, 300), 20, dtype=np.uint8)
    array[40:160, 50:250] = 235
    return array


@pytest.fixture()
def document_png_bytes(document_array: np.ndarray) -> bytes:
    return _png_bytes(Image.fromarray(document_array).convert("RGB"))


@pytest.fixture()
def blank_image(blank_png_bytes: bytes) -> DecodedImage:
    return decode_image(blank_png_bytes)


@pytest.fixture()
def checkerboard() -> np.ndarray:
    """A 10x10 single-pixel checkerboard of 0 and 255."""
    rows, cols = np.indices((10, 10))
    return (((rows + cols) % 2) * 255).astype(np.uint8)
