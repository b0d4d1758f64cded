"""Filesystem utilities for the template engine."""

from __future__ import annotations

import shutil
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


def copy_dir(src: Path, dest: Path) -> None:
    """Recursively copy a directory tree from src to dest.

    Creates destination directories as needed.
    """
    for entry in src.iterdir():
        src_path = entry
        dest_path = dest / entry.name

        if entry.is_dir():
            dest_path.mkdir(parents=True, exist_ok=True)
            copy_dir(src_path, dest_path)
        else:
            dest_path.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(src_path, dest_path)


def list_dir(path: Path) -> list[str]:
    """Return entry names directly under path, sorted."""
    return sorted(entry.name for entry in path.iterdir())


def copy_path(src: Path, dest: Path) -> None:
    """Copy a file or directory to a destination that must not exist yet."""
    if not src.exists():
        raise FileNotFoundError(f"source does not exist: {src}")
    if dest.exists():
        raise FileExistsError(f"target already exists: {dest}")
    if src.is_dir():
        dest.mkdir(parents=True)
        copy_dir(src, dest)
    else:
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(src, dest)


def move_path(src: Path, dest: Path) -> None:
    """Move a file or directory to a destination that must not exist yet."""
    if not src.exists():
        raise FileNotFoundError(f"source does not exist: {src}")
    if dest.exists():
        raise FileExistsError(f"target already exists: {dest}")
    dest.parent.mkdir(parents=True, exist_ok=True)
    src.rename(dest)


def search_and_replace(pattern: str, replacement: str, file: Path) -> str | None:
    """Replace every literal occurrence of pattern in file.

    Returns an error message when the file cannot be read or written,
    None on success.
    """
    try:
        original = file.read_text(encoding="utf-8")
        new_text = original.replace(pattern, replacement)
        if new_text != original:
            file.write_text(new_text, encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return f"Failed to read or write text from {file}"
    return None
