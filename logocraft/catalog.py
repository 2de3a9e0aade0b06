"""Static catalog mapping output file names to target dimensions."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, Mapping, Tuple

DEFAULT_WIDTH = 300
DEFAULT_HEIGHT = 300

BMP_CONTENT_TYPE = "image/bmp"
PNG_CONTENT_TYPE = "image/png"


@dataclass(frozen=True)
class FormatSpec:
    """Target file name and pixel size for one output variant."""

    format_key: str
    width: int
    height: int

    @property
    def is_bmp(self) -> bool:
        return self.format_key.lower().endswith(".bmp")

    @property
    def content_type(self) -> str:
        return BMP_CONTENT_TYPE if self.is_bmp else PNG_CONTENT_TYPE

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height


class FormatCatalog(Mapping[str, FormatSpec]):
    """Read-only lookup of format specs by key.

    Unknown keys resolve through :meth:`lookup` to a ``300x300`` spec that
    keeps the requested key, so callers can still name their output.
    """

    def __init__(
        self,
        entries: Mapping[str, Tuple[int, int]],
        default_size: Tuple[int, int] = (DEFAULT_WIDTH, DEFAULT_HEIGHT),
    ) -> None:
        self._specs: Dict[str, FormatSpec] = {
            key: FormatSpec(key, int(width), int(height))
            for key, (width, height) in entries.items()
        }
        self.default_size = (int(default_size[0]), int(default_size[1]))

    def __getitem__(self, key: str) -> FormatSpec:
        return self._specs[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def lookup(self, key: str) -> FormatSpec:
        spec = self._specs.get(key)
        if spec is None:
            width, height = self.default_size
            return FormatSpec(key, width, height)
        return spec

    @classmethod
    def from_json(cls, path: str | Path) -> "FormatCatalog":
        """Load a catalog from a JSON object of ``key -> [w, h]`` or
        ``key -> {"width": w, "height": h}``."""

        with Path(path).open("r", encoding="utf-8") as fp:
            data = json.load(fp)
        if not isinstance(data, dict):
            raise ValueError("Catalog file must contain a JSON object")

        entries: Dict[str, Tuple[int, int]] = {}
        for key, value in data.items():
            if isinstance(value, dict):
                entries[key] = (int(value["width"]), int(value["height"]))
            elif isinstance(value, (list, tuple)) and len(value) == 2:
                entries[key] = (int(value[0]), int(value[1]))
            else:
                raise ValueError(f"Malformed catalog entry for {key!r}: {value!r}")
        return cls(entries)


DEFAULT_CATALOG = FormatCatalog(
    {
        "Logo.png": (300, 300),
        "Smalllogo.png": (136, 136),
        "KDlogo.png": (140, 112),
        "RPTlogo.bmp": (155, 110),
        "PRINTLOGO.bmp": (600, 256),
        "Feature Graphic.png": (1024, 500),
        "hpns.png": (96, 96),
        "loginLogo.png": (600, 600),
        "logo.png": (300, 300),
        "logo@2x.png": (300, 300),
        "logo@3x.png": (300, 300),
        "appicon-60.png": (60, 60),
        "appicon-60@2x.png": (120, 120),
        "appicon-60@3x.png": (180, 180),
        "appicon.png": (57, 57),
        "appicon-512.png": (512, 512),
        "appicon@2x.png": (114, 114),
        "default_app_logo.png": (512, 512),
        "DefaultIcon.png": (1024, 1024),
        "default-large.png": (640, 1136),
        "Default-568h@2x.png": (640, 1136),
        "Default-677h@2x.png": (750, 1334),
        "Default-736h@3x.png": (1242, 2208),
        "Default-Portrait-1792h@2x.png": (828, 1792),
        "Default-Portrait-2436h@3x.png": (1125, 2436),
        "Default-Portrait-2688h@3x.png": (1242, 2688),
        "Default.png": (640, 980),
        "Default@2x.png": (1242, 1902),
        "CarryoutBtn.png": (300, 300),
        "DeliveryBtn.png": (300, 300),
        "FutureBtn.png": (300, 300),
        "NowBtn.png": (300, 300),
    }
)
