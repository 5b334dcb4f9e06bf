"""Shared plumbing for generators that write formatted sources."""

from __future__ import annotations

from pathlib import Path

from ..postproc.formatter import SourceFormatter
from ..rendering import TemplateRenderer
from ..stores.filesystem import LocalFileSystem


class GenerationError(RuntimeError):
    """Raised when generated output cannot be written."""


class SourceWriter:
    """Formats rendered text and writes it to disk."""

    def __init__(
        self,
        fs: LocalFileSystem | None = None,
        renderer: TemplateRenderer | None = None,
        formatter: SourceFormatter | None = None,
    ) -> None:
        self.fs = fs or LocalFileSystem()
        self.renderer = renderer or TemplateRenderer()
        self.formatter = formatter or SourceFormatter(enabled=False)

    def write_source(self, path: Path, content: str) -> Path:
        formatted = self.formatter.format(content, filename=path.name)
        try:
            self.fs.write_text(path, formatted)
        except OSError as exc:
            raise GenerationError(f"Failed to write {path}: {exc}") from exc
        return path
