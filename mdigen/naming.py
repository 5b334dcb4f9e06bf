"""Name transformations from raw icon names to identifiers, classes and labels."""

from __future__ import annotations

import re
from typing import List, Tuple, Union

from .models import IconVariant

COMPONENT_PREFIX = "MDI"
CLASS_PREFIX = "mdi-"

_WRAPPED_NAME = re.compile(r"ic_(.+)(_24px|_26x24px)")
_WORD_SEPARATORS = re.compile(r"[^A-Za-z0-9]+")
_DIGIT_RUNS = re.compile(r"(\d+)")


def normalize_name(name: str) -> str:
    """Strip the legacy ``ic_<name>_24px`` wrapping, if present."""
    return _WRAPPED_NAME.sub(r"\1", name, count=1)


def component_name(name: str) -> str:
    """Return the exported component identifier, e.g. ``3d_rotation -> MDI3dRotation``."""
    words = [word for word in _WORD_SEPARATORS.split(normalize_name(name)) if word]
    if not words:
        raise ValueError(f"Icon name {name!r} has no letters or digits")
    return COMPONENT_PREFIX + "".join(_capitalize(word) for word in words)


def css_class_name(name: str) -> str:
    return CLASS_PREFIX + normalize_name(name).replace("_", "-")


def variant_class_name(name: str, variant: IconVariant | str) -> str:
    """Class for an icon rendered in ``variant``; filled keeps the bare class."""
    value = IconVariant(variant).value
    base = css_class_name(name)
    if value == IconVariant.FILLED.value:
        return base
    return f"{base}-{value}"


def display_name(name: str) -> str:
    return _capitalize(normalize_name(name).replace("_", " "))


def category_list_name(category: str) -> str:
    return f"List{_capitalize(category)}"


def category_title(category: str) -> str:
    return _capitalize(category)


def natural_key(text: str) -> Tuple[List[Union[int, str]], str]:
    """Sort key comparing embedded digit runs numerically (``2x`` before ``10x``)."""
    parts: List[Union[int, str]] = []
    for index, part in enumerate(_DIGIT_RUNS.split(text)):
        # split() alternates text and digit runs, so odd slots are always digits
        parts.append(int(part) if index % 2 else part.casefold())
    return parts, text


def _capitalize(value: str) -> str:
    return value[:1].upper() + value[1:]


__all__ = [
    "category_list_name",
    "category_title",
    "component_name",
    "css_class_name",
    "display_name",
    "natural_key",
    "normalize_name",
    "variant_class_name",
]
