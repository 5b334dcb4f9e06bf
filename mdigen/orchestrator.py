"""Pipeline orchestration: clean, scan, resolve, generate icons, then indexes and demo."""

from __future__ import annotations

import asyncio
from typing import Dict, List, Mapping, Sequence

from .asset_scanner import AssetScanner
from .config import MdiGenConfig
from .generators import DemoGenerator, GenerationError, IconGenerator, IndexGenerator
from .logging import get_logger
from .models import (
    ICON_CATEGORIES,
    CategorySummary,
    GeneratedIcon,
    GenerationSummary,
    IconInfo,
    ResolvedIcon,
)
from .naming import component_name
from .postproc.formatter import SourceFormatter
from .rendering import TemplateRenderer
from .resolver import DuplicateNameResolver
from .stores.filesystem import LocalFileSystem

logger = get_logger("orchestrator")


def resolve_inventory(
    inventory: Mapping[str, Sequence[IconInfo]],
    resolver: DuplicateNameResolver,
) -> Dict[str, List[ResolvedIcon]]:
    """Assign final component names one icon at a time, in inventory order."""
    resolved: Dict[str, List[ResolvedIcon]] = {}
    for category, icons in inventory.items():
        entries: List[ResolvedIcon] = []
        for info in icons:
            try:
                name = component_name(info.name)
            except ValueError as exc:
                logger.warning("Skipping icon %s/%s: %s", category, info.name, exc)
                continue
            entries.append(ResolvedIcon(info=info, component_name=resolver.resolve(name, category)))
        resolved[category] = entries
    return resolved


class Orchestrator:
    """Coordinates a full, non-incremental generation run."""

    def __init__(
        self,
        config: MdiGenConfig,
        *,
        fs: LocalFileSystem | None = None,
        formatter: SourceFormatter | None = None,
        renderer: TemplateRenderer | None = None,
        categories: Sequence[str] = ICON_CATEGORIES,
    ) -> None:
        self.config = config
        self.fs = fs or LocalFileSystem()
        self.formatter = formatter or SourceFormatter(
            config.format.config_path,
            enabled=config.format.enabled,
            command=config.format.command,
        )
        self.renderer = renderer or TemplateRenderer(config.templates_dir)
        self.categories = tuple(categories)
        self.logger = get_logger("orchestrator")

    def run_sync(self) -> GenerationSummary:
        return asyncio.run(self.run())

    async def run(self) -> GenerationSummary:
        """Regenerate every output file and return a summary of the run."""
        self.logger.info("Source path: %s", self.config.source_root)
        await asyncio.to_thread(self.clean)

        scanner = AssetScanner(self.fs, self.categories, concurrency=self.config.concurrency)
        inventory = await scanner.scan(self.config.source_root)

        # Names are claimed sequentially before any concurrent work so that
        # collisions resolve the same way on every run.
        resolver = DuplicateNameResolver()
        resolved = resolve_inventory(inventory, resolver)

        summary = GenerationSummary(duplicates=resolver.get_duplicate_log())
        generated = await self._generate_icons(resolved, summary)

        index_generator = IndexGenerator(
            self.config.out_root, fs=self.fs, renderer=self.renderer, formatter=self.formatter
        )
        demo_generator = DemoGenerator(
            self.config.demo_root, fs=self.fs, renderer=self.renderer, formatter=self.formatter
        )
        index_files, demo_files = await asyncio.gather(
            asyncio.to_thread(index_generator.generate, generated),
            asyncio.to_thread(demo_generator.generate, generated),
        )
        summary.written_files.extend(index_files)
        summary.written_files.extend(demo_files)

        self._log_duplicates(summary)
        self.logger.info(
            "Generated %d of %d icons (%d skipped)",
            summary.generated,
            summary.scanned,
            summary.skipped,
        )
        return summary

    def clean(self) -> None:
        targets = (
            self.config.out_root / "icons",
            self.config.demo_root / "views" / "icons",
        )
        for target in targets:
            try:
                self.fs.remove_tree(target)
            except OSError as exc:
                raise GenerationError(f"Failed to clean output directory {target}: {exc}") from exc
            self.logger.debug("Cleaned %s", target)

    async def _generate_icons(
        self,
        resolved: Mapping[str, Sequence[ResolvedIcon]],
        summary: GenerationSummary,
    ) -> Dict[str, List[GeneratedIcon]]:
        icon_generator = IconGenerator(
            self.config.out_root,
            fs=self.fs,
            renderer=self.renderer,
            formatter=self.formatter,
            concurrency=self.config.concurrency,
        )
        generated: Dict[str, List[GeneratedIcon]] = {}
        for category, icons in resolved.items():
            self.logger.info("Generating %d icons (%s)...", len(icons), category)
            results = await icon_generator.generate_all(icons)
            written = [result for result in results if result is not None]
            generated[category] = written
            summary.categories[category] = CategorySummary(
                scanned=len(icons),
                generated=len(written),
                skipped=len(icons) - len(written),
            )
            summary.written_files.extend(result.path for result in written)
        return generated

    def _log_duplicates(self, summary: GenerationSummary) -> None:
        if not summary.duplicates:
            return
        self.logger.info("Duplicate icon names detected:")
        for original, records in summary.duplicates.items():
            self.logger.info("  %s: %s", original, ", ".join(str(record) for record in records))


__all__ = ["Orchestrator", "resolve_inventory"]
