"""Filesystem access used by the scanner and the generators."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import List


class LocalFileSystem:
    """Blocking filesystem operations; async callers wrap them in ``asyncio.to_thread``."""

    def list_dirs(self, path: Path) -> List[str]:
        """Return the names of the immediate subdirectories of ``path``."""
        return [entry.name for entry in Path(path).iterdir() if entry.is_dir()]

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def is_dir(self, path: Path) -> bool:
        return Path(path).is_dir()

    def read_text(self, path: Path) -> str:
        return Path(path).read_text(encoding="utf-8")

    def write_text(self, path: Path, text: str) -> None:
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        # newline="" writes LF endings verbatim
        with target.open("w", encoding="utf-8", newline="") as handle:
            handle.write(text)

    def remove_tree(self, path: Path) -> None:
        target = Path(path)
        if target.exists():
            shutil.rmtree(target)


__all__ = ["LocalFileSystem"]
