"""ZIP packaging of rendered assets."""

from __future__ import annotations

import io
import zipfile
from pathlib import Path
from typing import Iterable, Mapping, Union

from .pipeline import RenderedAsset

DEFAULT_ARCHIVE_NAME = "logocraft_exports.zip"

Assets = Union[Mapping[str, RenderedAsset], Iterable[RenderedAsset]]


def _iter_assets(assets: Assets) -> Iterable[RenderedAsset]:
    if isinstance(assets, Mapping):
        return assets.values()
    return assets


def build_archive(assets: Assets, compress_level: int = 6) -> bytes:
    """Return a deflated ZIP with one entry per asset, named by format key."""

    buffer = io.BytesIO()
    with zipfile.ZipFile(
        buffer, "w", compression=zipfile.ZIP_DEFLATED, compresslevel=compress_level
    ) as archive:
        for asset in _iter_assets(assets):
            archive.writestr(asset.format_key, asset.data)
    return buffer.getvalue()


def write_archive(path: str | Path, assets: Assets, compress_level: int = 6) -> Path:
    path = Path(path)
    if path.is_dir():
        path = path / DEFAULT_ARCHIVE_NAME
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(build_archive(assets, compress_level=compress_level))
    return path
