from __future__ import annotations

import json

from conftest import make_strip
from glyph_strip.cli import main


def test_cli_writes_outputs_and_prints_summary(tmp_path, capsys):
    image = tmp_path / "pixel.png"
    make_strip([3, 2]).save(image)
    out = tmp_path / "out"

    code = main([str(image), "--output-dir", str(out), "--chars", "AB", "--format", "fnt"])

    assert code == 0
    summary = json.loads(capsys.readouterr().out)
    assert summary["face"] == "pixel"
    assert summary["glyphs"] == 3
    assert summary["font_data"].endswith(".fnt")
    assert (out / summary["texture"].split("/")[-1]).exists()


def test_cli_reports_configuration_errors(tmp_path, capsys):
    image = tmp_path / "pixel.png"
    make_strip([3]).save(image)

    code = main([str(image), "--output-dir", str(tmp_path), "--chars", "A", "--charset", "Z"])

    assert code == 1
    assert "error:" in capsys.readouterr().err


def test_cli_strict_mode_fails_on_missing_glyphs(tmp_path, capsys):
    image = tmp_path / "pixel.png"
    make_strip([3]).save(image)

    code = main([str(image), "--output-dir", str(tmp_path), "--chars", "AB", "--strict"])

    assert code == 1
    assert "'B'" in capsys.readouterr().err


def test_cli_reports_unwritable_output_dir(tmp_path, capsys):
    image = tmp_path / "pixel.png"
    make_strip([3]).save(image)
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    code = main([str(image), "--output-dir", str(blocker / "out"), "--chars", "A"])

    assert code == 1
    assert "error:" in capsys.readouterr().err
