"""SVG normalisation for icon-font style rendering."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Dict, Optional, Protocol

from ..logging import get_logger

XLINK_NAMESPACE = "http://www.w3.org/1999/xlink"

# Namespaced attributes with a plain SVG2 equivalent; everything else namespaced is dropped.
_TRANSLATABLE_ATTRIBUTES: Dict[tuple[str, str], str] = {
    (XLINK_NAMESPACE, "href"): "href",
}

_ROOT_ATTRIBUTES = (
    ("fill", "currentColor"),
    ("width", "1em"),
    ("height", "1em"),
)

logger = get_logger("svg")


class InvalidSVGError(ValueError):
    """Raised when an SVG document is empty or cannot be parsed."""


class TextReader(Protocol):
    def read_text(self, path: Path) -> str:  # pragma: no cover - protocol
        ...


def convert_svg(xml: str) -> str:
    """Return ``xml`` with a recolourable, em-sized root and no namespace noise."""
    if not xml or not xml.strip():
        raise InvalidSVGError("SVG document is empty")
    try:
        parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True))
        root = ET.fromstring(xml, parser=parser)
    except ET.ParseError as exc:
        raise InvalidSVGError(f"SVG document could not be parsed: {exc}") from exc

    if _local_name(root.tag) != "svg":
        raise InvalidSVGError(f"Root element is <{_local_name(root.tag)}>, expected <svg>")

    for element in root.iter():
        _strip_namespaces(element)

    for name, value in _ROOT_ATTRIBUTES:
        root.set(name, value)

    return ET.tostring(root, encoding="unicode")


def normalize_svg(xml: str) -> Optional[str]:
    """Lenient form of :func:`convert_svg` that returns ``None`` for invalid input."""
    try:
        return convert_svg(xml)
    except InvalidSVGError as exc:
        logger.warning("Invalid SVG skipped: %s", exc)
        return None


def read_and_normalize_svg(reader: TextReader, path: Path) -> Optional[str]:
    """Read ``path`` and normalise it, warning and returning ``None`` on any failure."""
    try:
        content = reader.read_text(path)
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning('Could not read SVG file "%s": %s', path, exc)
        return None

    if not content.strip():
        logger.warning("Empty SVG file: %s", path)
        return None

    try:
        return convert_svg(content)
    except InvalidSVGError as exc:
        logger.warning("Invalid SVG file %s: %s", path, exc)
        return None


def _strip_namespaces(element: ET.Element) -> None:
    if not isinstance(element.tag, str):
        # comments and processing instructions
        return
    element.tag = _local_name(element.tag)

    rewritten: Dict[str, str] = {}
    for key, value in element.attrib.items():
        if key == "xmlns" or key.startswith("xmlns:"):
            continue
        if key.startswith("{"):
            namespace, local = key[1:].split("}", 1)
            replacement = _TRANSLATABLE_ATTRIBUTES.get((namespace, local))
            if replacement is None or replacement in element.attrib:
                continue
            rewritten[replacement] = value
            continue
        rewritten[key] = value

    element.attrib.clear()
    element.attrib.update(rewritten)


def _local_name(tag: str) -> str:
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


__all__ = ["InvalidSVGError", "convert_svg", "normalize_svg", "read_and_normalize_svg"]
