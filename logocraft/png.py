"""PNG re-encoding path for every non-BMP format."""

from __future__ import annotations

import io

from PIL import Image

from .binarize import check_dimensions, fit_contain

# White with zero alpha, so padding stays transparent.
TRANSPARENT_WHITE = (255, 255, 255, 0)


def encode_png(
    image: Image.Image,
    width: int,
    height: int,
    compress_level: int = 9,
) -> bytes:
    """Fit ``image`` inside ``width x height`` and return PNG bytes."""

    check_dimensions(width, height)
    canvas = fit_contain(image, width, height, background=TRANSPARENT_WHITE)
    buffer = io.BytesIO()
    canvas.save(buffer, format="PNG", compress_level=compress_level)
    return buffer.getvalue()
