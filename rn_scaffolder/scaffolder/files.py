"""File and directory writing shared by every generator.

All filesystem mutation goes through :func:`make_directory` and
:func:`write_file_spec`, so every ``OSError`` surfaces as a single
``FilesystemError`` type that names the offending relative path.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path

from rn_scaffolder.utils import print_created


class FilesystemError(Exception):
    """Raised when a directory or file under the root cannot be created."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


@dataclass(frozen=True)
class FileSpec:
    """One file to generate.

    Attributes:
        path: POSIX-style path relative to the scaffolding root.
        content: Full file content.
    """

    path: str
    content: str


def _mkdir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


async def make_directory(root: Path, rel_path: str) -> Path:
    """Create ``root / rel_path`` and any missing parents.

    An existing directory is left untouched.

    Raises:
        FilesystemError: The directory could not be created, e.g. a file
            already occupies the path or permission was denied.
    """
    target = root / rel_path
    try:
        await asyncio.to_thread(_mkdir, target)
    except OSError as exc:
        raise FilesystemError(rel_path, exc.strerror or str(exc)) from exc
    return target


async def write_file_spec(root: Path, spec: FileSpec) -> Path:
    """Write *spec* under *root*, overwriting any existing file.

    Raises:
        FilesystemError: The file or one of its parent directories could not
            be written.
    """
    target = root / spec.path
    try:
        await asyncio.to_thread(_write_file, target, spec.content)
    except OSError as exc:
        raise FilesystemError(spec.path, exc.strerror or str(exc)) from exc
    return target


async def write_file_specs(
    root: Path,
    specs: list[FileSpec],
    *,
    kind: str,
    color: str,
) -> list[Path]:
    """Write *specs* in order, printing one progress line per file.

    Returns:
        List of written file paths.
    """
    written: list[Path] = []
    for spec in specs:
        path = await write_file_spec(root, spec)
        print_created(kind, spec.path, color)
        written.append(path)
    return written
