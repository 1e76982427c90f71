"""File-system collaborator used to gate and resolve content assets.

Image and audio extractors never touch the disk directly; they ask an
``AssetLocator`` whether a file exists and how its path should be spelled for
the rendering layer. ``FileSystemAssets`` is the default implementation and
tests substitute an in-memory one.
"""

from __future__ import annotations

import posixpath
import typing as typ
from pathlib import Path


class AssetLocator(typ.Protocol):
    """Interface consumed by the image and audio extractors."""

    def exists(self, path: str | Path) -> bool:
        """Return ``True`` when ``path`` exists."""
        ...

    def join(self, contents_dir: str | Path, dest_dir: str | Path, filename: str) -> str:
        """Return the resolved path string for ``filename``."""
        ...


class FileSystemAssets:
    """Resolve assets against the local file system."""

    def exists(self, path: str | Path) -> bool:
        return Path(path).exists()

    def join(self, contents_dir: str | Path, dest_dir: str | Path, filename: str) -> str:
        """Join ``filename`` onto ``dest_dir`` or, when that is empty, ``contents_dir``.

        Destination paths are written with forward slashes because they end
        up in URLs consumed by the renderer.
        """
        name = filename.strip().lstrip("/")
        if str(dest_dir) not in ("", "."):
            return posixpath.join(Path(dest_dir).as_posix(), name)
        return str(Path(contents_dir) / name)


__all__ = ["AssetLocator", "FileSystemAssets"]
