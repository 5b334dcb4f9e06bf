"""Generators that turn the resolved icon inventory into source files."""

from .base import GenerationError, SourceWriter
from .icons import IconGenerator, default_variant
from .indexes import DemoGenerator, IndexGenerator

__all__ = [
    "DemoGenerator",
    "GenerationError",
    "IconGenerator",
    "IndexGenerator",
    "SourceWriter",
    "default_variant",
]
