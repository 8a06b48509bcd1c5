"""Unit tests for directory validation and scanning."""

import os
from pathlib import Path

import pytest

from bulkrename.processors.directory_scanner import DirectoryAccessError, scan_directory, validate_directory


class TestValidateDirectory:
    """Tests for validate_directory."""

    def test_accepts_directory(self, tmp_path):
        """Test that an existing directory is returned unchanged."""
        assert validate_directory(tmp_path) == tmp_path

    def test_missing_path_raises(self, tmp_path):
        """Test that a missing path is rejected."""
        with pytest.raises(FileNotFoundError, match="does not exist"):
            validate_directory(tmp_path / "missing")

    def test_file_path_raises(self, tmp_path):
        """Test that a regular file is rejected."""
        file_path = tmp_path / "file.txt"
        file_path.touch()

        with pytest.raises(NotADirectoryError, match="not a directory"):
            validate_directory(file_path)


class TestScanDirectory:
    """Tests for scan_directory."""

    def test_lists_files_and_subdirectories(self, tmp_path):
        """Test that files and subdirectories are both returned."""
        (tmp_path / "a.txt").touch()
        (tmp_path / "sub").mkdir()

        entries = scan_directory(tmp_path)

        assert sorted(entry.name for entry in entries) == ["a.txt", "sub"]

    def test_entry_paths_are_inside_directory(self, tmp_path):
        """Test that each entry's path joins the directory with its name."""
        (tmp_path / "a.txt").touch()

        entries = scan_directory(tmp_path)

        assert entries[0].path == tmp_path / "a.txt"

    def test_includes_hidden_entries(self, tmp_path):
        """Test that dotfiles are not filtered out."""
        (tmp_path / ".hidden").touch()

        entries = scan_directory(tmp_path)

        assert [entry.name for entry in entries] == [".hidden"]

    def test_does_not_recurse(self, tmp_path):
        """Test that nested entries are not returned."""
        sub = tmp_path / "sub"
        sub.mkdir()
        (sub / "nested.txt").touch()

        entries = scan_directory(tmp_path)

        assert [entry.name for entry in entries] == ["sub"]

    def test_empty_directory(self, tmp_path):
        """Test that an empty directory gives no entries."""
        assert scan_directory(tmp_path) == []

    def test_unreadable_directory_raises(self, tmp_path, monkeypatch):
        """Test that a read failure is reported as DirectoryAccessError."""

        def deny(path):
            raise PermissionError(13, "Permission denied", str(path))

        monkeypatch.setattr(os, "scandir", deny)

        with pytest.raises(DirectoryAccessError, match="Permission denied"):
            scan_directory(Path(tmp_path))
