"""Run-scoped registry that keeps component identifiers unique across categories."""

from __future__ import annotations

from typing import Dict, List, Optional

from .logging import get_logger
from .models import DuplicateRecord
from .naming import COMPONENT_PREFIX


class DuplicateNameResolver:
    """Claims component names in processing order and renames later collisions.

    The first icon to claim a name keeps it. Any later claim of the same
    name, even from the same category, gets the capitalised category spliced
    in after the ``MDI`` prefix (``MDIHome`` from ``home`` becomes
    ``MDIHomeHome``). If that spliced form is already taken too, a numeric
    suffix is appended until the name is free, so every returned name is
    unique within the run.
    """

    def __init__(self) -> None:
        self._registered: Dict[str, str] = {}
        self._duplicates: Dict[str, List[DuplicateRecord]] = {}
        self.logger = get_logger("resolver")

    def resolve(self, component_name: str, category: str) -> str:
        if component_name not in self._registered:
            self._registered[component_name] = category
            return component_name

        renamed = component_name.replace(
            COMPONENT_PREFIX, f"{COMPONENT_PREFIX}{category[:1].upper()}{category[1:]}", 1
        )
        if renamed in self._registered:
            base = renamed
            suffix = 2
            while f"{base}{suffix}" in self._registered:
                suffix += 1
            renamed = f"{base}{suffix}"
            self.logger.warning(
                "Renamed component %s collides again; using %s", base, renamed
            )

        self._registered[renamed] = category
        self._duplicates.setdefault(component_name, []).append(
            DuplicateRecord(renamed_to=renamed, category=category)
        )
        self.logger.warning(
            "Duplicate icon name detected: %s -> %s (category: %s)",
            component_name,
            renamed,
            category,
        )
        return renamed

    def is_registered(self, name: str) -> bool:
        return name in self._registered

    def claimed_by(self, name: str) -> Optional[str]:
        return self._registered.get(name)

    def get_duplicate_log(self) -> Dict[str, List[DuplicateRecord]]:
        return {name: list(records) for name, records in self._duplicates.items()}

    def reset(self) -> None:
        self._registered.clear()
        self._duplicates.clear()


__all__ = ["DuplicateNameResolver"]
