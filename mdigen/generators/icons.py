"""Per-icon component synthesis."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from ..logging import get_logger
from ..models import GeneratedIcon, IconInfo, IconVariant, ResolvedIcon
from ..naming import variant_class_name
from ..postproc.formatter import SourceFormatter
from ..postproc.svg import read_and_normalize_svg
from ..rendering import TemplateRenderer
from ..rendering.constants import COMPONENT_SUFFIX, ICON_TEMPLATE
from ..stores.filesystem import LocalFileSystem
from .base import SourceWriter


def default_variant(available: Iterable[IconVariant]) -> IconVariant:
    """Prefer ``filled``; otherwise the first available variant in enum order."""
    present = set(available)
    if not present:
        raise ValueError("At least one variant is required to pick a default")
    for variant in IconVariant:
        if variant in present:
            return variant
    raise ValueError(f"Unknown variants: {sorted(present)}")  # pragma: no cover - enum is closed


class IconGenerator(SourceWriter):
    """Writes one component per icon under ``out_root/icons/{category}``."""

    def __init__(
        self,
        out_root: Path,
        *,
        fs: LocalFileSystem | None = None,
        renderer: TemplateRenderer | None = None,
        formatter: SourceFormatter | None = None,
        concurrency: int = 10,
    ) -> None:
        super().__init__(fs=fs, renderer=renderer, formatter=formatter)
        self.icons_root = Path(out_root) / "icons"
        self.concurrency = concurrency
        self.logger = get_logger("generators.icons")

    def component_path(self, category: str, component_name: str) -> Path:
        return self.icons_root / category / f"{component_name}{COMPONENT_SUFFIX}"

    def collect_variant_svgs(self, info: IconInfo) -> Dict[IconVariant, str]:
        svgs: Dict[IconVariant, str] = {}
        for variant, svg_path in info.variants.items():
            content = read_and_normalize_svg(self.fs, svg_path)
            if content is None:
                self.logger.warning(
                    "Dropping %s variant of %s/%s", variant.value, info.category, info.name
                )
                continue
            svgs[variant] = content
        return svgs

    def render_icon(self, resolved: ResolvedIcon, svgs: Mapping[IconVariant, str]) -> str:
        variants = [variant for variant in IconVariant if variant in svgs]
        fallback = default_variant(variants)
        return self.renderer.render(
            ICON_TEMPLATE,
            component_name=resolved.component_name,
            default_variant=fallback.value,
            variants=[
                {
                    "name": variant.value,
                    "class_name": variant_class_name(resolved.name, variant),
                    "svg": svgs[variant],
                }
                for variant in variants
            ],
        )

    def generate_icon(self, resolved: ResolvedIcon) -> Optional[GeneratedIcon]:
        """Write the component for ``resolved``; ``None`` when no variant is renderable."""
        svgs = self.collect_variant_svgs(resolved.info)
        if not svgs:
            self.logger.warning(
                'Icon "%s/%s" has no valid SVG content; skipped', resolved.category, resolved.name
            )
            return None

        source = self.render_icon(resolved, svgs)
        path = self.write_source(
            self.component_path(resolved.category, resolved.component_name), source
        )
        variants = tuple(variant for variant in IconVariant if variant in svgs)
        return GeneratedIcon(
            category=resolved.category,
            name=resolved.name,
            component_name=resolved.component_name,
            variants=variants,
            default_variant=default_variant(variants),
            path=path,
        )

    async def generate_all(self, icons: Sequence[ResolvedIcon]) -> List[Optional[GeneratedIcon]]:
        """Generate ``icons`` through a bounded worker pool, results in input order."""
        semaphore = asyncio.Semaphore(self.concurrency)

        async def _generate(resolved: ResolvedIcon) -> Optional[GeneratedIcon]:
            async with semaphore:
                return await asyncio.to_thread(self.generate_icon, resolved)

        return list(await asyncio.gather(*(_generate(resolved) for resolved in icons)))


__all__ = ["IconGenerator", "default_variant"]
