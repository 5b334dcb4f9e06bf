"""Core data models shared across mdigen components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple

ICON_CATEGORIES: Tuple[str, ...] = (
    "action",
    "alert",
    "av",
    "communication",
    "content",
    "device",
    "editor",
    "file",
    "hardware",
    "home",
    "image",
    "maps",
    "navigation",
    "notification",
    "places",
    "social",
    "toggle",
)

SVG_FILENAME = "24px.svg"


class IconVariant(str, Enum):
    """Visual style of an icon, in the fixed order used for defaults."""

    FILLED = "filled"
    OUTLINED = "outlined"
    ROUND = "round"
    SHARP = "sharp"
    TWOTONE = "twotone"

    def to_dir(self) -> str:
        return _VARIANT_TO_DIR[self]

    @classmethod
    def from_dir(cls, name: str) -> Optional["IconVariant"]:
        return _DIR_TO_VARIANT.get(name)


_VARIANT_TO_DIR: Dict[IconVariant, str] = {
    IconVariant.FILLED: "materialicons",
    IconVariant.OUTLINED: "materialiconsoutlined",
    IconVariant.ROUND: "materialiconsround",
    IconVariant.SHARP: "materialiconssharp",
    IconVariant.TWOTONE: "materialiconstwotone",
}

_DIR_TO_VARIANT: Dict[str, IconVariant] = {value: key for key, value in _VARIANT_TO_DIR.items()}

VARIANT_DIRS: Tuple[str, ...] = tuple(_VARIANT_TO_DIR[variant] for variant in IconVariant)


@dataclass(frozen=True)
class IconInfo:
    """An icon discovered on disk, before its component name is resolved."""

    category: str
    name: str
    variants: Mapping[IconVariant, Path]

    def __post_init__(self) -> None:
        if not self.variants:
            raise ValueError(f"Icon '{self.category}/{self.name}' has no variants")
        ordered = {variant: self.variants[variant] for variant in IconVariant if variant in self.variants}
        object.__setattr__(self, "variants", ordered)


@dataclass(frozen=True)
class ResolvedIcon:
    """An icon paired with its final, run-unique component identifier."""

    info: IconInfo
    component_name: str

    @property
    def category(self) -> str:
        return self.info.category

    @property
    def name(self) -> str:
        return self.info.name


@dataclass(frozen=True)
class GeneratedIcon:
    """An icon whose component file was written."""

    category: str
    name: str
    component_name: str
    variants: Tuple[IconVariant, ...]
    default_variant: IconVariant
    path: Path


@dataclass(frozen=True)
class DuplicateRecord:
    """A single rename decision made by the duplicate resolver."""

    renamed_to: str
    category: str

    def __str__(self) -> str:
        return f"{self.renamed_to} (from {self.category})"


@dataclass
class CategorySummary:
    """Per-category counts reported at the end of a run."""

    scanned: int = 0
    generated: int = 0
    skipped: int = 0


@dataclass
class GenerationSummary:
    """Outcome of a full generation run."""

    categories: Dict[str, CategorySummary] = field(default_factory=dict)
    duplicates: Dict[str, List[DuplicateRecord]] = field(default_factory=dict)
    written_files: List[Path] = field(default_factory=list)

    @property
    def scanned(self) -> int:
        return sum(item.scanned for item in self.categories.values())

    @property
    def generated(self) -> int:
        return sum(item.generated for item in self.categories.values())

    @property
    def skipped(self) -> int:
        return sum(item.skipped for item in self.categories.values())
