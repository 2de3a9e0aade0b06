from __future__ import annotations

import json
import zipfile
from pathlib import Path

import pytest
from PIL import Image, ImageDraw

from logocraft.cli import main


@pytest.fixture
def logo_path(tmp_path: Path) -> Path:
    image = Image.new("RGBA", (200, 100), (255, 255, 255, 0))
    ImageDraw.Draw(image).rectangle((30, 20, 170, 80), fill=(0, 0, 0, 255))
    path = tmp_path / "logo.png"
    image.save(path)
    return path


def test_cli_writes_archive_and_metadata(tmp_path: Path, logo_path: Path):
    output = tmp_path / "out.zip"
    metadata = tmp_path / "metadata.json"
    code = main(
        [
            str(logo_path),
            "-o",
            str(output),
            "-f",
            "RPTlogo.bmp",
            "-f",
            "Logo.png",
            "--metadata",
            str(metadata),
        ]
    )

    assert code == 0
    with zipfile.ZipFile(output) as archive:
        assert archive.namelist() == ["RPTlogo.bmp", "Logo.png"]
        assert len(archive.read("RPTlogo.bmp")) == 2262

    summary = json.loads(metadata.read_text(encoding="utf-8"))
    assert [entry["name"] for entry in summary["processedImages"]] == ["RPTlogo.bmp", "Logo.png"]


def test_cli_params_file_and_overrides(tmp_path: Path, logo_path: Path):
    params = tmp_path / "params.json"
    params.write_text(json.dumps({"threshold": 175, "dpi": 300}), encoding="utf-8")
    output = tmp_path / "out.zip"

    code = main(
        [str(logo_path), "-o", str(output), "-f", "PRINTLOGO.bmp", "--params", str(params), "--dpi", "203"]
    )

    assert code == 0
    with zipfile.ZipFile(output) as archive:
        data = archive.read("PRINTLOGO.bmp")
    assert int.from_bytes(data[38:42], "little") == 7992


def test_cli_rejects_undecodable_source(tmp_path: Path, capsys):
    source = tmp_path / "broken.png"
    source.write_bytes(b"nope")
    assert main([str(source), "-o", str(tmp_path / "out.zip")]) == 2
    assert "error:" in capsys.readouterr().err
    assert not (tmp_path / "out.zip").exists()


def test_cli_reports_missing_source(tmp_path: Path, capsys):
    missing = tmp_path / "nowhere.png"
    assert main([str(missing), "-o", str(tmp_path / "out.zip")]) == 2
    assert "error:" in capsys.readouterr().err
    assert not (tmp_path / "out.zip").exists()


def test_cli_reports_when_every_format_fails(tmp_path: Path, logo_path: Path, capsys):
    catalog = tmp_path / "catalog.json"
    catalog.write_text(json.dumps({"zero.bmp": [0, 5]}), encoding="utf-8")
    code = main([str(logo_path), "-o", str(tmp_path / "out.zip"), "--catalog", str(catalog)])
    assert code == 1
    assert "skipped zero.bmp" in capsys.readouterr().err


def test_cli_lists_formats(capsys):
    assert main(["--list-formats"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "RPTlogo.bmp\t155x110\timage/bmp" in lines
    assert len(lines) == 32


def test_cli_rejects_invalid_threshold(logo_path: Path):
    with pytest.raises(SystemExit) as excinfo:
        main([str(logo_path), "--threshold", "300"])
    assert excinfo.value.code == 2


def test_cli_requires_source():
    with pytest.raises(SystemExit):
        main([])
