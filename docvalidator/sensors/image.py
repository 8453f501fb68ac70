import io
from dataclasses import dataclass
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from docvalidator.validation.exceptions import InvalidImageError

ImageSource = bytes | str | Path | Image.Image | np.ndarray


@dataclass(frozen=True)
class DecodedImage:
    """An image decoded once and shared read-only by every sensor task."""

    rgb: Image.Image
    gray: np.ndarray  # uint8, row-major, one byte per pixel

    @property
    def width(self) -> int:
        return int(self.gray.shape[1])

    @property
    def height(self) -> int:
        return int(self.gray.shape[0])

    def bgr(self) -> np.ndarray:
        """Return a fresh BGR array for OpenCV consumers."""
        return np.ascontiguousarray(np.asarray(self.rgb)[:, :, ::-1])


def decode_image(source: "ImageSource | DecodedImage") -> DecodedImage:
    """Decode ``source`` into RGB and grayscale pixel buffers.

    Raises:
        InvalidImageError: if no pixel buffer can be produced.
    """
    if isinstance(source, DecodedImage):
        return source
    image = _open(source)
    if image.width == 0 or image.height == 0:
        raise InvalidImageError("Image has zero width or height")
    rgb = image.convert("RGB")
    gray = np.asarray(rgb.convert("L"), dtype=np.uint8).copy()
    gray.setflags(write=False)
    return DecodedImage(rgb=rgb, gray=gray)


def _open(source: ImageSource) -> Image.Image:
    if isinstance(source, Image.Image):
        return source
    if isinstance(source, np.ndarray):
        return _from_array(source)
    if isinstance(source, (str, Path)):
        path = Path(source)
        if not path.exists():
            raise InvalidImageError(f"Image file not found: {path}")
        return _load(path.read_bytes(), origin=str(path))
    if isinstance(source, (bytes, bytearray)):
        return _load(bytes(source), origin="bytes")
    raise InvalidImageError(f"Unsupported image source type: {type(source).__name__}")


def _load(data: bytes, *, origin: str) -> Image.Image:
    if not data:
        raise InvalidImageError(f"Empty image data ({origin})")
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except (UnidentifiedImageError, OSError, ValueError) as exc:
        raise InvalidImageError(f"Cannot decode image ({origin}): {exc}") from exc
    return image


def _from_array(array: np.ndarray) -> Image.Image:
    if array.size == 0:
        raise InvalidImageError("Image array is empty")
    if array.dtype != np.uint8:
        raise InvalidImageError(f"Image array must be uint8, got {array.dtype}")
    if array.ndim == 2:
        return Image.fromarray(array)
    if array.ndim == 3 and array.shape[2] in (3, 4):
        return Image.fromarray(array)
    raise InvalidImageError(f"Unsupported image array shape: {array.shape}")
