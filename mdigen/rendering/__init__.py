"""Template rendering for generated sources."""

from .builder import TemplateRenderer

__all__ = ["TemplateRenderer"]
