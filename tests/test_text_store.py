from __future__ import annotations

from pathlib import Path

import pytest

from inistore.errors import StorageError
from inistore.text_store import atomic_write_text, decode_text, read_text


def test_read_missing_file_returns_none(tmp_path: Path):
    assert read_text(tmp_path / "missing.ini") is None


def test_atomic_write_leaves_no_temp_file(tmp_path: Path):
    target = tmp_path / "x.ini"
    atomic_write_text(target, "[S]\nk=v\n")
    assert target.read_text(encoding="utf-8") == "[S]\nk=v\n"
    assert [p.name for p in tmp_path.iterdir()] == ["x.ini"]


def test_atomic_write_under_a_regular_file_raises_storage_error(tmp_path: Path):
    blocker = tmp_path / "f"
    blocker.write_text("not a directory", encoding="utf-8")
    with pytest.raises(StorageError):
        atomic_write_text(blocker / "x.ini", "[S]\nk=v\n")


def test_decode_honours_bom_over_configured_encoding():
    assert decode_text("\ufeffk=v".encode("utf-8"), "latin-1") == "k=v"
    assert decode_text("k=v".encode("utf-16"), "utf-8") == "k=v"
    assert decode_text(b"k=\xe9", "latin-1") == "k=\xe9"
