"""Exceptions raised while rendering logo variants."""

from __future__ import annotations


class LogoCraftError(Exception):
    """Base class for all rendering failures."""


class DecodeError(LogoCraftError):
    """The source bytes are not a supported raster image."""


class InvalidDimensions(LogoCraftError, ValueError):
    """A requested width or height is not strictly positive."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__(f"Target dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height


class EncodingInvariantError(LogoCraftError, RuntimeError):
    """The encoder wrote a different number of bytes than it computed."""

    def __init__(self, expected: int, written: int) -> None:
        super().__init__(
            f"BMP size mismatch: computed {expected} bytes but wrote {written}"
        )
        self.expected = expected
        self.written = written
