"""Logo variant rendering with a monochrome BMP encoder."""

from .archive import build_archive, write_archive
from .binarize import GrayscaleBitmap, binarize, decode_image
from .bmp import encode_monochrome_bmp, save_bitmap
from .catalog import DEFAULT_CATALOG, FormatCatalog, FormatSpec
from .errors import DecodeError, EncodingInvariantError, InvalidDimensions, LogoCraftError
from .parameters import DEFAULT_THRESHOLD, ProcessingParameters
from .pipeline import BatchResult, RenderedAsset, render_batch, render_format
from .png import encode_png

__all__ = [
    "build_archive",
    "write_archive",
    "GrayscaleBitmap",
    "binarize",
    "decode_image",
    "encode_monochrome_bmp",
    "save_bitmap",
    "DEFAULT_CATALOG",
    "FormatCatalog",
    "FormatSpec",
    "DecodeError",
    "EncodingInvariantError",
    "InvalidDimensions",
    "LogoCraftError",
    "DEFAULT_THRESHOLD",
    "ProcessingParameters",
    "BatchResult",
    "RenderedAsset",
    "render_batch",
    "render_format",
    "encode_png",
]
