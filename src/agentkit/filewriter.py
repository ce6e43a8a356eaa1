"""Writing generated files to disk."""

from __future__ import annotations

from pathlib import Path

from agentkit.errors import FileWriteError

DIR_MODE = 0o755


def ensure_directory(path: Path | str) -> Path:
    """Create a directory and any missing parents. Existing directories are fine."""
    path = Path(path)
    try:
        path.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
    except OSError as e:
        raise FileWriteError(path, e) from e
    return path


def write_file(path: Path | str, content: str) -> Path:
    """Write content to a file, creating parent directories as needed.

    An existing file is truncated and overwritten.

    Raises:
        FileWriteError: If a directory or the file cannot be written.
    """
    path = Path(path)
    ensure_directory(path.parent)
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise FileWriteError(path, e) from e
    return path


def path_exists(path: Path | str) -> bool:
    """Check whether a file or directory exists."""
    return Path(path).exists()


def is_directory(path: Path | str) -> bool:
    return Path(path).is_dir()
