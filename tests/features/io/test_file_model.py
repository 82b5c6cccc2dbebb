"""Tests for the file descriptor model."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from resyslib.features.io import FileModel


def test_decomposes_absolute_path() -> None:
    model = FileModel("/tmp/report.final.csv")

    assert model.file_name == "report.final"
    assert model.file_extension == ".csv"
    assert model.file_path == os.path.abspath("/tmp/report.final.csv")


def test_relative_path_is_made_absolute(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    model = FileModel("sub/../data.json")

    assert model.file_path == str(tmp_path / "data.json")
    assert model.file_name == "data"
    assert model.file_extension == ".json"


@pytest.mark.parametrize(
    ("raw", "name", "extension"),
    [
        ("README", "README", ""),
        ("name.", "name", ""),
        (".bashrc", ".bashrc", ""),
        ("archive.tar.gz", "archive.tar", ".gz"),
    ],
)
def test_extension_edge_cases(raw: str, name: str, extension: str) -> None:
    model = FileModel(raw)

    assert model.file_name == name
    assert model.file_extension == extension


def test_accepts_path_objects_and_does_not_require_existence(tmp_path: Path) -> None:
    model = FileModel(tmp_path / "missing.log")

    assert model.file_path == str(tmp_path / "missing.log")
    assert not Path(model.file_path).exists()


def test_fields_are_read_only() -> None:
    model = FileModel("/tmp/a.txt")

    with pytest.raises(AttributeError):
        model.file_name = "b"  # type: ignore[misc]


def test_subclasses_may_adjust_fields() -> None:
    class LowercaseFileModel(FileModel):
        def __init__(self, file_path: str) -> None:
            super().__init__(file_path)
            self._file_extension = self._file_extension.lower()

    assert LowercaseFileModel("/tmp/PHOTO.JPG").file_extension == ".jpg"


def test_equality_and_repr() -> None:
    assert FileModel("/tmp/a.txt") == FileModel("/tmp/a.txt")
    assert FileModel("/tmp/a.txt") != FileModel("/tmp/b.txt")
    assert "file_name='a'" in repr(FileModel("/tmp/a.txt"))
