"""Target directory validation and scanning."""

import os
from pathlib import Path

from bulkrename.models.rename import DirectoryEntry


class DirectoryAccessError(OSError):
    """Raised when the target directory cannot be read."""


def validate_directory(path: Path) -> Path:
    """Check that the target path exists and is a directory.

    Args:
        path: Target directory path.

    Returns:
        The same path, for chaining.

    Raises:
        FileNotFoundError: If the path does not exist.
        NotADirectoryError: If the path is not a directory.
    """
    if not path.exists():
        raise FileNotFoundError(f"Directory does not exist: {path}")
    if not path.is_dir():
        raise NotADirectoryError(f"Path is not a directory: {path}")
    return path


def scan_directory(path: Path) -> list[DirectoryEntry]:
    """List the direct entries of a directory.

    Entries come back in the order the OS enumerates them (not sorted). Hidden
    entries are included.

    Args:
        path: A validated directory path.

    Returns:
        One DirectoryEntry per file or subdirectory.

    Raises:
        DirectoryAccessError: If the directory cannot be read.
    """
    try:
        with os.scandir(path) as it:
            return [DirectoryEntry(name=entry.name, path=path / entry.name) for entry in it]
    except OSError as e:
        raise DirectoryAccessError(f"Cannot read directory {path}: {e.strerror or e}") from e
