from __future__ import annotations

import json

import pytest

from logocraft.catalog import DEFAULT_CATALOG, FormatCatalog, FormatSpec
from logocraft.parameters import DEFAULT_THRESHOLD, ProcessingParameters


def test_known_entries():
    assert DEFAULT_CATALOG["RPTlogo.bmp"] == FormatSpec("RPTlogo.bmp", 155, 110)
    assert DEFAULT_CATALOG.lookup("PRINTLOGO.bmp").size == (600, 256)
    assert DEFAULT_CATALOG.lookup("Feature Graphic.png").size == (1024, 500)
    assert len(DEFAULT_CATALOG) == 32


def test_unknown_key_falls_back_to_default_size():
    spec = DEFAULT_CATALOG.lookup("mystery.png")
    assert spec.format_key == "mystery.png"
    assert spec.size == (300, 300)
    assert "mystery.png" not in DEFAULT_CATALOG


def test_content_types():
    assert DEFAULT_CATALOG["RPTlogo.bmp"].content_type == "image/bmp"
    assert DEFAULT_CATALOG["Logo.png"].content_type == "image/png"
    assert FormatSpec("LOGO.BMP", 8, 8).is_bmp


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        DEFAULT_CATALOG["Logo.png"] = FormatSpec("Logo.png", 1, 1)  # type: ignore[index]


def test_from_json_accepts_both_entry_shapes(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps({"a.bmp": [16, 8], "b.png": {"width": 32, "height": 24}}),
        encoding="utf-8",
    )
    catalog = FormatCatalog.from_json(path)
    assert list(catalog) == ["a.bmp", "b.png"]
    assert catalog["a.bmp"].size == (16, 8)
    assert catalog["b.png"].size == (32, 24)


def test_from_json_rejects_malformed_entries(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"a.bmp": "big"}), encoding="utf-8")
    with pytest.raises(ValueError):
        FormatCatalog.from_json(path)


def test_default_parameters():
    params = ProcessingParameters()
    assert params.threshold == DEFAULT_THRESHOLD == 128
    assert params.dpi == 203
    assert params.pixels_per_meter == 7992


@pytest.mark.parametrize(
    "overrides",
    [{"threshold": 256}, {"threshold": -1}, {"dpi": 0}, {"png_compress_level": 10}, {"max_workers": 0}],
)
def test_parameters_reject_out_of_range_values(overrides):
    with pytest.raises(ValueError):
        ProcessingParameters(**overrides)
