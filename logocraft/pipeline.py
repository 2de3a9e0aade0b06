"""Render a source logo into every requested catalog format."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from PIL import Image

from .binarize import binarize, decode_image
from .bmp import encode_monochrome_bmp
from .catalog import DEFAULT_CATALOG, FormatCatalog, FormatSpec
from .errors import EncodingInvariantError, LogoCraftError
from .parameters import DEFAULT_PARAMETERS, ProcessingParameters
from .png import encode_png

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedAsset:
    """Encoded bytes for one format, labelled for storage."""

    format_key: str
    data: bytes
    content_type: str
    width: int
    height: int

    def summary(self) -> Dict[str, object]:
        return {
            "name": self.format_key,
            "size": f"{self.width}×{self.height}",
            "dimensions": {"width": self.width, "height": self.height},
            "contentType": self.content_type,
            "bytes": len(self.data),
        }


@dataclass
class BatchResult:
    """Outcome of a batch, keyed by format key in request order."""

    assets: Dict[str, RenderedAsset] = field(default_factory=dict)
    failures: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return bool(self.assets)

    def as_dict(self) -> Dict[str, object]:
        return {
            "processedImages": [asset.summary() for asset in self.assets.values()],
            "failures": dict(self.failures),
        }


def render_format(
    image: Image.Image,
    spec: FormatSpec,
    params: ProcessingParameters = DEFAULT_PARAMETERS,
) -> RenderedAsset:
    """Render ``image`` for a single format spec."""

    logger.debug("Rendering %s (%dx%d)", spec.format_key, spec.width, spec.height)
    if spec.is_bmp:
        bitmap = binarize(image, spec.width, spec.height, threshold=params.threshold)
        data = encode_monochrome_bmp(bitmap, dpi=params.dpi)
    else:
        data = encode_png(
            image, spec.width, spec.height, compress_level=params.png_compress_level
        )
    return RenderedAsset(
        format_key=spec.format_key,
        data=data,
        content_type=spec.content_type,
        width=spec.width,
        height=spec.height,
    )


def _unique(keys: Iterable[str]) -> List[str]:
    seen: Dict[str, None] = {}
    for key in keys:
        seen.setdefault(key, None)
    return list(seen)


def render_batch(
    source: bytes,
    format_keys: Iterable[str],
    catalog: FormatCatalog = DEFAULT_CATALOG,
    params: ProcessingParameters = DEFAULT_PARAMETERS,
    max_workers: Optional[int] = None,
) -> BatchResult:
    """Decode ``source`` once and render each requested format independently.

    A format that fails is logged, recorded in ``failures`` and skipped; the
    remaining formats still render. A :class:`DecodeError` propagates since no
    format can be produced without a source image.
    """

    image = decode_image(source)
    keys = _unique(format_keys)
    specs = [catalog.lookup(key) for key in keys]
    workers = max_workers or params.max_workers

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = {
            spec.format_key: executor.submit(render_format, image.copy(), spec, params)
            for spec in specs
        }

    result = BatchResult()
    for key in keys:
        try:
            result.assets[key] = futures[key].result()
        except EncodingInvariantError as exc:
            logger.exception("Encoder defect while rendering %s", key)
            result.failures[key] = str(exc)
        except LogoCraftError as exc:
            logger.warning("Skipping %s: %s", key, exc)
            result.failures[key] = str(exc)

    logger.info(
        "Rendered %d of %d formats (%d failed)",
        len(result.assets),
        len(keys),
        len(result.failures),
    )
    return result
