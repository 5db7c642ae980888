"""Deterministic directory traversal shared by staging and archiving."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator


def walk_tree(root: Path) -> Iterator[Path]:
    """Yield every path below ``root`` depth-first, parents before children.

    Siblings are sorted by name so the order does not depend on the host
    filesystem's listing order. ``root`` itself is not yielded.
    """
    for child in sorted(root.iterdir(), key=lambda path: path.name):
        yield child
        if child.is_dir() and not child.is_symlink():
            yield from walk_tree(child)


def relative_posix(path: Path, root: Path) -> str:
    return path.relative_to(root).as_posix()
