"""Post-processing applied to SVG inputs and generated sources."""

from .formatter import FormattingError, SourceFormatter
from .svg import InvalidSVGError, convert_svg, normalize_svg, read_and_normalize_svg

__all__ = [
    "FormattingError",
    "InvalidSVGError",
    "SourceFormatter",
    "convert_svg",
    "normalize_svg",
    "read_and_normalize_svg",
]
