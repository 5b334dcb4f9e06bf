"""Discovery of icons and their variant SVGs in the Material asset tree."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Dict, List, Sequence

from .logging import get_logger
from .models import ICON_CATEGORIES, SVG_FILENAME, IconInfo, IconVariant
from .naming import natural_key
from .stores.filesystem import LocalFileSystem


class AssetScanner:
    """Walks ``root/{category}/{icon}/{variant_dir}/24px.svg`` into an ordered inventory."""

    def __init__(
        self,
        fs: LocalFileSystem | None = None,
        categories: Sequence[str] = ICON_CATEGORIES,
        *,
        concurrency: int = 10,
    ) -> None:
        self.fs = fs or LocalFileSystem()
        self.categories = tuple(categories)
        self.concurrency = concurrency
        self.logger = get_logger("scanner")

    async def scan(self, root: Path) -> Dict[str, List[IconInfo]]:
        """Return ``category -> icons`` in category order, icons in natural name order."""
        root = Path(root)
        if not self.fs.is_dir(root):
            raise FileNotFoundError(f"Icon source directory not found: {root}")

        semaphore = asyncio.Semaphore(self.concurrency)

        async def _scan(category: str) -> List[IconInfo]:
            async with semaphore:
                return await asyncio.to_thread(self.scan_category, root, category)

        # gather keeps input order regardless of completion order
        results = await asyncio.gather(*(_scan(category) for category in self.categories))
        inventory: Dict[str, List[IconInfo]] = {}
        for category, icons in zip(self.categories, results):
            inventory[category] = icons
            self.logger.info("Scanned %d icons (%s)", len(icons), category)
        return inventory

    def scan_category(self, root: Path, category: str) -> List[IconInfo]:
        category_path = Path(root) / category
        try:
            icon_names = sorted(self.fs.list_dirs(category_path), key=natural_key)
        except OSError as exc:
            self.logger.warning('Could not scan category "%s": %s', category, exc)
            return []

        icons: List[IconInfo] = []
        for icon_name in icon_names:
            variants = self._scan_variants(category_path / icon_name)
            if not variants:
                self.logger.debug("No variants found for %s/%s", category, icon_name)
                continue
            icons.append(IconInfo(category=category, name=icon_name, variants=variants))
        return icons

    def _scan_variants(self, icon_path: Path) -> Dict[IconVariant, Path]:
        try:
            variant_dirs = sorted(self.fs.list_dirs(icon_path), key=natural_key)
        except OSError as exc:
            self.logger.warning('Could not scan icon "%s": %s', icon_path, exc)
            return {}

        variants: Dict[IconVariant, Path] = {}
        for dir_name in variant_dirs:
            variant = IconVariant.from_dir(dir_name)
            if variant is None:
                continue
            svg_path = icon_path / dir_name / SVG_FILENAME
            if self.fs.exists(svg_path):
                variants[variant] = svg_path
        return variants


__all__ = ["AssetScanner"]
