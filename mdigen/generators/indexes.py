"""Barrel files and the demo playground built from the generated icons."""

from __future__ import annotations

from pathlib import Path
from typing import List, Mapping, Sequence

from ..logging import get_logger
from ..models import GeneratedIcon, IconVariant
from ..naming import category_list_name, category_title, display_name, natural_key
from ..postproc.formatter import SourceFormatter
from ..rendering import TemplateRenderer
from ..rendering.constants import (
    CATEGORY_INDEX_TEMPLATE,
    COMPONENT_SUFFIX,
    DEMO_INDEX_TEMPLATE,
    DEMO_LIST_TEMPLATE,
    ICON_PANES_TEMPLATE,
    INDEX_FILENAME,
    PANES_FILENAME,
    ROOT_INDEX_TEMPLATE,
)
from ..stores.filesystem import LocalFileSystem
from .base import SourceWriter

GeneratedInventory = Mapping[str, Sequence[GeneratedIcon]]


def _populated(generated: GeneratedInventory) -> List[str]:
    # Empty categories have no index module, so nothing may import them.
    return [category for category, icons in generated.items() if icons]


class IndexGenerator(SourceWriter):
    """Writes ``icons/{category}/index.ts`` and the root ``icons/index.ts``."""

    def __init__(
        self,
        out_root: Path,
        *,
        fs: LocalFileSystem | None = None,
        renderer: TemplateRenderer | None = None,
        formatter: SourceFormatter | None = None,
    ) -> None:
        super().__init__(fs=fs, renderer=renderer, formatter=formatter)
        self.icons_root = Path(out_root) / "icons"
        self.logger = get_logger("generators.indexes")

    def render_category_index(self, component_names: Sequence[str]) -> str:
        ordered = sorted(component_names, key=lambda name: natural_key(f"{name}{COMPONENT_SUFFIX}"))
        return self.renderer.render(CATEGORY_INDEX_TEMPLATE, component_names=ordered)

    def render_root_index(self, categories: Sequence[str]) -> str:
        return self.renderer.render(ROOT_INDEX_TEMPLATE, categories=list(categories))

    def generate(self, generated: GeneratedInventory) -> List[Path]:
        written: List[Path] = []
        categories = _populated(generated)
        for category, icons in generated.items():
            if not icons:
                self.logger.warning("No components generated for category %s", category)
                continue
            source = self.render_category_index([icon.component_name for icon in icons])
            written.append(self.write_source(self.icons_root / category / INDEX_FILENAME, source))
            self.logger.info("Generated index (%s): %d components", category, len(icons))

        written.append(
            self.write_source(self.icons_root / INDEX_FILENAME, self.render_root_index(categories))
        )
        self.logger.info("Generated root index: %d categories", len(categories))
        return written


class DemoGenerator(SourceWriter):
    """Writes the playground lists, their index and the ``IconPanes`` switcher."""

    def __init__(
        self,
        demo_root: Path,
        *,
        fs: LocalFileSystem | None = None,
        renderer: TemplateRenderer | None = None,
        formatter: SourceFormatter | None = None,
    ) -> None:
        super().__init__(fs=fs, renderer=renderer, formatter=formatter)
        self.views_root = Path(demo_root) / "views"
        self.lists_root = self.views_root / "icons"
        self.logger = get_logger("generators.demo")

    def render_list(self, category: str, icons: Sequence[GeneratedIcon]) -> str:
        return self.renderer.render(
            DEMO_LIST_TEMPLATE,
            list_name=category_list_name(category),
            title=category_title(category),
            items=[
                {"component_name": icon.component_name, "label": display_name(icon.name)}
                for icon in icons
            ],
        )

    def render_index(self, categories: Sequence[str]) -> str:
        return self.renderer.render(
            DEMO_INDEX_TEMPLATE,
            list_names=[category_list_name(category) for category in categories],
        )

    def render_panes(self, categories: Sequence[str]) -> str:
        return self.renderer.render(
            ICON_PANES_TEMPLATE,
            variants=[variant.value for variant in IconVariant],
            default_variant=IconVariant.FILLED.value,
            list_names=[category_list_name(category) for category in categories],
        )

    def generate(self, generated: GeneratedInventory) -> List[Path]:
        written: List[Path] = []
        categories = _populated(generated)
        for category in categories:
            path = self.lists_root / f"{category_list_name(category)}{COMPONENT_SUFFIX}"
            written.append(self.write_source(path, self.render_list(category, generated[category])))

        written.append(
            self.write_source(self.lists_root / INDEX_FILENAME, self.render_index(categories))
        )
        written.append(
            self.write_source(self.views_root / PANES_FILENAME, self.render_panes(categories))
        )
        self.logger.info("Generated %d demo lists", len(categories))
        return written


__all__ = ["DemoGenerator", "IndexGenerator"]
