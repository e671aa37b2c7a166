from pathlib import Path

import pytest

from docingest.ingestion.exceptions import FileReadError
from docingest.ingestion.file_loader import FileLoader


class TestLoad:
    def test_loads_relative_path_from_uploads_root(self, tmp_path: Path) -> None:
        (tmp_path / "plan.dwg").write_bytes(b"AC1032 drawing")
        loader = FileLoader(uploads_root=tmp_path)

        item = loader.load("plan.dwg")

        assert item.name == "plan.dwg"
        assert item.content == b"AC1032 drawing"
        assert item.size_bytes == len(b"AC1032 drawing")

    def test_loads_absolute_path(self, tmp_path: Path) -> None:
        target = tmp_path / "elsewhere" / "notes.txt"
        target.parent.mkdir()
        target.write_bytes(b"hello")
        loader = FileLoader(uploads_root=tmp_path / "uploads")

        item = loader.load(target)

        assert item.name == "notes.txt"
        assert item.content == b"hello"

    def test_raises_file_not_found(self, tmp_path: Path) -> None:
        loader = FileLoader(uploads_root=tmp_path)
        with pytest.raises(FileNotFoundError, match="missing.pdf"):
            loader.load("missing.pdf")

    def test_raises_for_directory(self, tmp_path: Path) -> None:
        (tmp_path / "folder.pdf").mkdir()
        loader = FileLoader(uploads_root=tmp_path)
        with pytest.raises(FileReadError, match="Not a regular file"):
            loader.load("folder.pdf")


class TestDiscover:
    def test_lists_files_sorted_by_name(self, tmp_path: Path) -> None:
        for name in ["b.txt", "a.dwg", "c.pdf"]:
            (tmp_path / name).write_bytes(b"x")
        (tmp_path / "subdir").mkdir()
        loader = FileLoader(uploads_root=tmp_path)

        assert [p.name for p in loader.discover()] == ["a.dwg", "b.txt", "c.pdf"]

    def test_missing_root_gives_empty_list(self, tmp_path: Path) -> None:
        loader = FileLoader(uploads_root=tmp_path / "absent")
        assert loader.discover() == []
