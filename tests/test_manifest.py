from pathlib import Path

import pytest

from srcbundle.errors import MissingInputError, MissingManifestError
from srcbundle.manifest.loader import iter_entries, load_manifest


def test_iter_entries_skips_blank_lines():
    lines = ["a.js\n", "\n", "   \t\n", "  b.js  \r\n", ""]
    assert list(iter_entries(lines)) == ["a.js", "b.js"]


def test_load_manifest_keeps_order_and_reports(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "a.js").write_text("x", encoding="utf-8")
    (tmp_path / "b.js").write_text("y\n", encoding="utf-8")
    manifest_path = tmp_path / "build.txt"
    manifest_path.write_text("b.js\n\n  a.js\nb.js\n", encoding="utf-8")

    reported = []
    manifest = load_manifest(manifest_path, report=reported.append)

    assert manifest.entries == ["b.js", "a.js", "b.js"]
    assert manifest.sources == [Path("b.js"), Path("a.js"), Path("b.js")]
    assert reported == ["Reading b.js", "Reading a.js", "Reading b.js"]


def test_load_manifest_missing_manifest(tmp_path: Path):
    with pytest.raises(MissingManifestError) as info:
        load_manifest(tmp_path / "nope.txt")
    assert info.value.path == str(tmp_path / "nope.txt")


def test_load_manifest_stops_at_first_missing_file(tmp_path: Path):
    present = tmp_path / "a.js"
    present.write_text("x\n", encoding="utf-8")
    missing = tmp_path / "gone.js"
    manifest_path = tmp_path / "build.txt"
    manifest_path.write_text(f"{present}\n{missing}\n{tmp_path / 'later.js'}\n", encoding="utf-8")

    reported = []
    with pytest.raises(MissingInputError) as info:
        load_manifest(manifest_path, report=reported.append)

    assert info.value.path == str(missing)
    assert str(missing) in str(info.value)
    assert reported == [f"Reading {present}", f"Reading {missing}"]
