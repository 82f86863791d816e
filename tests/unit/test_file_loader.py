from pathlib import Path

import pytest

from cv_upload.extraction.exceptions import FileReadError
from cv_upload.extraction.file_loader import FileLoader
from cv_upload.extraction.models import SelectedFile


class TestLoadReturnsBytes:
    def test_returns_in_memory_data(self) -> None:
        file = SelectedFile.from_bytes("resume.txt", b"Hello world")
        assert FileLoader().load(file) == b"Hello world"

    def test_reads_file_from_disk(self, tmp_path: Path) -> None:
        path = tmp_path / "resume.pdf"
        path.write_bytes(b"%PDF test content")

        file = SelectedFile.from_path(path)

        assert file.name == "resume.pdf"
        assert FileLoader().load(file) == b"%PDF test content"


class TestLoadRaises:
    def test_raises_when_file_missing(self, tmp_path: Path) -> None:
        file = SelectedFile.from_path(tmp_path / "missing.txt")
        with pytest.raises(FileReadError, match="missing"):
            FileLoader().load(file)

    def test_raises_when_path_is_directory(self, tmp_path: Path) -> None:
        folder = tmp_path / "folder.txt"
        folder.mkdir()
        with pytest.raises(FileReadError, match="folder.txt"):
            FileLoader().load(SelectedFile.from_path(folder))

    def test_raises_without_any_source(self) -> None:
        with pytest.raises(FileReadError, match="no content"):
            FileLoader().load(SelectedFile(name="resume.txt"))
