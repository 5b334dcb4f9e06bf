"""Storage backends for mdigen."""

from .filesystem import LocalFileSystem

__all__ = ["LocalFileSystem"]
