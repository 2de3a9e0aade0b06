"""Decoding and the resize/binarize stage feeding the BMP encoder."""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Tuple

import numpy as np
from PIL import Image, UnidentifiedImageError

from .errors import DecodeError, InvalidDimensions
from .parameters import DEFAULT_THRESHOLD

WHITE = 255
BLACK = 0


@dataclass(frozen=True)
class GrayscaleBitmap:
    """Single-channel 8-bit raster, row-major and top-down."""

    width: int
    height: int
    pixels: bytes

    def __post_init__(self) -> None:
        check_dimensions(self.width, self.height)
        expected = self.width * self.height
        if len(self.pixels) != expected:
            raise ValueError(
                f"Bitmap of {self.width}x{self.height} needs {expected} pixels, "
                f"got {len(self.pixels)}"
            )

    @classmethod
    def from_array(cls, array: np.ndarray) -> "GrayscaleBitmap":
        array = np.asarray(array, dtype=np.uint8)
        if array.ndim != 2:
            raise ValueError("Expected a 2D array of shape (height, width)")
        height, width = array.shape
        return cls(width=int(width), height=int(height), pixels=array.tobytes())

    def as_array(self) -> np.ndarray:
        """Return a read-only ``(height, width)`` view of the pixels."""

        return np.frombuffer(self.pixels, dtype=np.uint8).reshape(self.height, self.width)


def check_dimensions(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise InvalidDimensions(width, height)


def decode_image(data: bytes) -> Image.Image:
    """Decode raw upload bytes into a fully loaded Pillow image."""

    if not data:
        raise DecodeError("Source image is empty")
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        EOFError,
    ) as exc:
        raise DecodeError(f"Unsupported or corrupt source image: {exc}") from exc
    return image


def flatten_onto_white(image: Image.Image) -> Image.Image:
    """Composite any transparency onto an opaque white background."""

    rgba = image.convert("RGBA")
    white = Image.new("RGBA", rgba.size, (WHITE, WHITE, WHITE, 255))
    return Image.alpha_composite(white, rgba).convert("RGB")


def contain_size(source: Tuple[int, int], target: Tuple[int, int]) -> Tuple[int, int]:
    """Largest size with the source aspect ratio that fits inside ``target``."""

    source_width, source_height = source
    target_width, target_height = target
    width_scale = target_width / source_width if source_width else 1.0
    height_scale = target_height / source_height if source_height else 1.0
    scale = min(width_scale, height_scale)
    scaled_width = max(1, min(target_width, int(round(source_width * scale))))
    scaled_height = max(1, min(target_height, int(round(source_height * scale))))
    return scaled_width, scaled_height


def fit_contain(
    image: Image.Image,
    width: int,
    height: int,
    background: Tuple[int, ...],
) -> Image.Image:
    """Scale ``image`` to fit inside ``width x height`` and center it on a
    canvas filled with ``background``. Nothing is cropped."""

    check_dimensions(width, height)
    mode = "RGBA" if len(background) == 4 else "RGB"
    image = image.convert(mode)
    if image.size != (width, height):
        scaled = contain_size(image.size, (width, height))
        image = image.resize(scaled, resample=Image.Resampling.LANCZOS)

    canvas = Image.new(mode, (width, height), color=background)
    left = (width - image.width) // 2
    top = (height - image.height) // 2
    canvas.paste(image, (left, top))
    return canvas


def binarize(
    image: Image.Image,
    width: int,
    height: int,
    threshold: int = DEFAULT_THRESHOLD,
) -> GrayscaleBitmap:
    """Produce a black/white bitmap of exactly ``width x height``.

    The source is flattened onto white, fitted with a contain policy, reduced
    to luminance and cut at ``threshold``: values at or above it become white.
    """

    check_dimensions(width, height)
    flattened = flatten_onto_white(image)
    fitted = fit_contain(flattened, width, height, background=(WHITE, WHITE, WHITE))
    luminance = np.asarray(fitted.convert("L"), dtype=np.uint8)
    binary = np.where(luminance >= threshold, WHITE, BLACK).astype(np.uint8)
    return GrayscaleBitmap.from_array(binary)
