"""Monochrome 1-bit BMP writer."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import numpy as np

from .binarize import GrayscaleBitmap
from .errors import EncodingInvariantError
from .parameters import dpi_to_pixels_per_meter, PRINTER_DPI

FILE_HEADER_SIZE = 14
INFO_HEADER_SIZE = 40
PALETTE_SIZE = 8
PIXEL_DATA_OFFSET = FILE_HEADER_SIZE + INFO_HEADER_SIZE + PALETTE_SIZE

# Source bytes below this map to palette index 0 (black).
BIT_CUTOFF = 128

# BGRA entries: index 0 black, index 1 white.
PALETTE = struct.pack("<4B4B", 0x00, 0x00, 0x00, 0x00, 0xFF, 0xFF, 0xFF, 0x00)


def row_stride_unpadded(width: int) -> int:
    return (width + 7) // 8


def row_stride_padded(width: int) -> int:
    """Bytes per stored scanline, rounded up to a 4-byte boundary."""

    return (row_stride_unpadded(width) + 3) // 4 * 4


def bmp_file_size(width: int, height: int) -> int:
    return PIXEL_DATA_OFFSET + row_stride_padded(width) * height


@dataclass(frozen=True)
class BmpFileHeader:
    """BITMAPFILEHEADER."""

    file_size: int
    pixel_data_offset: int = PIXEL_DATA_OFFSET

    def pack(self) -> bytes:
        return struct.pack("<2sIHHI", b"BM", self.file_size, 0, 0, self.pixel_data_offset)


@dataclass(frozen=True)
class BmpInfoHeader:
    """BITMAPINFOHEADER for an uncompressed, bottom-up, two-colour image."""

    width: int
    height: int
    image_size: int
    pixels_per_meter: int
    bits_per_pixel: int = 1
    colors_used: int = 2

    def pack(self) -> bytes:
        # Positive height marks bottom-up row order.
        return struct.pack(
            "<IiiHHIIiiII",
            INFO_HEADER_SIZE,
            self.width,
            self.height,
            1,
            self.bits_per_pixel,
            0,
            self.image_size,
            self.pixels_per_meter,
            self.pixels_per_meter,
            self.colors_used,
            0,
        )


def pack_row(row: np.ndarray) -> bytes:
    """Pack one row of grayscale bytes into MSB-first bits, 1 for white."""

    return np.packbits(row >= BIT_CUTOFF, bitorder="big").tobytes()


def encode_monochrome_bmp(
    bitmap: GrayscaleBitmap,
    dpi: int = PRINTER_DPI,
) -> bytes:
    """Encode ``bitmap`` as a 1-bit BMP with a black/white palette.

    Source row ``y`` is stored as BMP row ``height - 1 - y``; each stored row
    is zero padded to a multiple of four bytes.
    """

    width, height = bitmap.width, bitmap.height
    stride = row_stride_padded(width)
    pixel_data_size = stride * height
    file_size = PIXEL_DATA_OFFSET + pixel_data_size

    buffer = bytearray(file_size)
    file_header = BmpFileHeader(file_size=file_size).pack()
    info_header = BmpInfoHeader(
        width=width,
        height=height,
        image_size=pixel_data_size,
        pixels_per_meter=dpi_to_pixels_per_meter(dpi),
    ).pack()

    offset = 0
    written = 0
    for section in (file_header, info_header, PALETTE):
        buffer[offset : offset + len(section)] = section
        offset += len(section)
        written += len(section)

    if written != PIXEL_DATA_OFFSET:
        raise EncodingInvariantError(PIXEL_DATA_OFFSET, written)

    unpadded = row_stride_unpadded(width)
    padding = stride - unpadded
    rows = bitmap.as_array()
    for y in range(height - 1, -1, -1):
        packed = pack_row(rows[y])
        if len(packed) != unpadded:
            raise EncodingInvariantError(file_size, written + len(packed) + padding)
        buffer[offset : offset + len(packed)] = packed
        offset += stride
        written += len(packed) + padding

    if written != file_size or len(buffer) != file_size:
        raise EncodingInvariantError(file_size, written)

    return bytes(buffer)


def save_bitmap(
    path: str | Path,
    bitmap: GrayscaleBitmap,
    dpi: Optional[int] = None,
) -> Path:
    """Encode ``bitmap`` and write it to ``path``."""

    data = encode_monochrome_bmp(bitmap, dpi=PRINTER_DPI if dpi is None else dpi)
    path = Path(path)
    path.write_bytes(data)
    return path
