"""Processing parameters for logo rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_THRESHOLD = 128
PRINTER_DPI = 203
METRES_PER_INCH = 0.0254


def dpi_to_pixels_per_meter(dpi: float) -> int:
    """Convert dots per inch to the integer pixels-per-metre BMP field."""

    if dpi <= 0:
        raise ValueError(f"dpi must be positive, got {dpi}")
    return int(round(dpi / METRES_PER_INCH))


@dataclass(frozen=True)
class ProcessingParameters:
    """Container for the tunable rendering parameters.

    ``threshold`` is the luminance cut point used when binarizing for the
    monochrome BMP path: values at or above it become white.
    """

    threshold: int = DEFAULT_THRESHOLD
    dpi: int = PRINTER_DPI
    png_compress_level: int = 9
    archive_compress_level: int = 6
    max_workers: Optional[int] = None

    def __post_init__(self) -> None:
        if not 0 <= self.threshold <= 255:
            raise ValueError(f"threshold must be within 0..255, got {self.threshold}")
        if self.dpi <= 0:
            raise ValueError(f"dpi must be positive, got {self.dpi}")
        if not 0 <= self.png_compress_level <= 9:
            raise ValueError("png_compress_level must be within 0..9")
        if not 0 <= self.archive_compress_level <= 9:
            raise ValueError("archive_compress_level must be within 0..9")
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError("max_workers must be at least 1")

    @property
    def pixels_per_meter(self) -> int:
        """Resolution written into the BMP header for both axes."""

        return dpi_to_pixels_per_meter(self.dpi)


DEFAULT_PARAMETERS = ProcessingParameters()
