"""Tests for mdigen.generators.indexes."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List

from mdigen.generators.indexes import DemoGenerator, IndexGenerator
from mdigen.models import GeneratedIcon, IconVariant


def _icon(category: str, name: str, component: str) -> GeneratedIcon:
    return GeneratedIcon(
        category=category,
        name=name,
        component_name=component,
        variants=(IconVariant.FILLED,),
        default_variant=IconVariant.FILLED,
        path=Path(f"{component}.tsx"),
    )


def _inventory() -> Dict[str, List[GeneratedIcon]]:
    return {
        "action": [
            _icon("action", "1k", "MDI1k"),
            _icon("action", "3d_rotation", "MDI3dRotation"),
            _icon("action", "10k", "MDI10k"),
            _icon("action", "home", "MDIHome"),
        ],
        "alert": [],
        "home": [_icon("home", "home", "MDIHomeHome")],
    }


def test_category_index_is_sorted_by_file_name() -> None:
    source = IndexGenerator(Path("out")).render_category_index(
        ["MDIHome", "MDI10k", "MDI3dRotation", "MDI1k"]
    )
    assert source.splitlines() == [
        "export { MDI1k } from './MDI1k'",
        "export { MDI3dRotation } from './MDI3dRotation'",
        "export { MDI10k } from './MDI10k'",
        "export { MDIHome } from './MDIHome'",
    ]


def test_index_generator_writes_category_and_root_indexes(tmp_path: Path) -> None:
    written = IndexGenerator(tmp_path).generate(_inventory())

    icons_root = tmp_path / "icons"
    assert written == [
        icons_root / "action" / "index.ts",
        icons_root / "home" / "index.ts",
        icons_root / "index.ts",
    ]
    assert (icons_root / "home" / "index.ts").read_text(encoding="utf-8") == (
        "export { MDIHomeHome } from './MDIHomeHome'\n"
    )
    assert not (icons_root / "alert").exists()
    assert (icons_root / "index.ts").read_text(encoding="utf-8") == (
        "export * from './action'\nexport * from './home'\n"
    )


def test_demo_list_enumerates_icons_with_labels() -> None:
    source = DemoGenerator(Path("demo")).render_list("action", _inventory()["action"])

    assert "name: 'ListAction'," in source
    assert '<div class="icon-category">Action</div>' in source
    assert "<MDI.MDI3dRotation variant={props.variant} />" in source
    assert '<span class="icon-name">3d rotation</span>' in source
    assert source.index("MDI.MDI1k ") < source.index("MDI.MDI3dRotation") < source.index("MDI.MDI10k")


def test_demo_panes_switch_every_list() -> None:
    source = DemoGenerator(Path("demo")).render_panes(["action", "home"])

    assert "const VARIANTS: IconVariant[] = ['filled', 'outlined', 'round', 'sharp', 'twotone']" in source
    assert "ref<IconVariant>('filled')" in source
    assert "<panes.ListAction variant={variant.value} />" in source
    assert "<panes.ListHome variant={variant.value} />" in source


def test_demo_generator_writes_lists_index_and_panes(tmp_path: Path) -> None:
    written = DemoGenerator(tmp_path).generate(_inventory())

    views = tmp_path / "views"
    assert written == [
        views / "icons" / "ListAction.tsx",
        views / "icons" / "ListHome.tsx",
        views / "icons" / "index.ts",
        views / "IconPanes.tsx",
    ]
    assert not (views / "icons" / "ListAlert.tsx").exists()
    assert (views / "icons" / "index.ts").read_text(encoding="utf-8") == (
        "import ListAction from './ListAction'\n"
        "export { ListAction }\n"
        "import ListHome from './ListHome'\n"
        "export { ListHome }\n"
    )
    panes = (views / "IconPanes.tsx").read_text(encoding="utf-8")
    assert "ListAlert" not in panes
    assert "MDI.MDIHomeHome" in (views / "icons" / "ListHome.tsx").read_text(encoding="utf-8")
