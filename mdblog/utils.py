"""Utility functions for mdblog.

Key functions:
    titleize: Convert file or repository names to human-readable titles.
    is_markdown: Check if a document name is a Markdown file.
    is_blank: Check if a string is empty or whitespace only.
    ensure_clean_dir: Ensure a directory exists and is empty.
    copy_tree: Copy a directory's contents into another directory.
"""

from __future__ import annotations

import re
import shutil
from pathlib import Path


def titleize(filename: str) -> str:
    """Convert a filename to a human-readable title.

    Drops a ``.md`` suffix, replaces hyphens and underscores with spaces,
    and capitalizes each word.

    Args:
        filename: Filename with or without extension.

    Returns:
        Human-readable title string, or an empty string for empty input.

    Examples:
        >>> titleize("getting-started.md")
        'Getting Started'

        >>> titleize("my_blog")
        'My Blog'
    """
    base = filename.removesuffix(".md")
    words = re.split(r"[\s\-_]+", base)
    return " ".join(word.capitalize() for word in words if word)


def is_markdown(name: str) -> bool:
    """Check if a document name has the ``.md`` suffix."""
    return name.endswith(".md")


def is_blank(value: str | None) -> bool:
    """Check if a value is None, empty, or only whitespace."""
    return value is None or not value.strip()


def ensure_clean_dir(path: Path) -> None:
    """Ensure a directory exists and is empty.

    If the directory exists, removes all contents. Creates the
    directory if it doesn't exist.

    Args:
        path: Directory path to clean or create.
    """
    if path.exists():
        shutil.rmtree(path)
    path.mkdir(parents=True, exist_ok=True)


def copy_tree(source: Path, dest: Path) -> int:
    """Copy every file under ``source`` into ``dest``, keeping relative paths.

    Args:
        source: Directory to copy from.
        dest: Directory to copy into; created when missing.

    Returns:
        Number of files copied.
    """
    count = 0
    for src_path in sorted(source.rglob("*")):
        if src_path.is_dir():
            continue
        dest_path = dest / src_path.relative_to(source)
        dest_path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(src_path, dest_path)
        count += 1
    return count
