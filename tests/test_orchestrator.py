"""End-to-end tests for mdigen.orchestrator."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Sequence

import pytest

from mdigen.config import MdiGenConfig, default_config
from mdigen.generators import GenerationError
from mdigen.models import IconInfo, IconVariant
from mdigen.orchestrator import Orchestrator, resolve_inventory
from mdigen.postproc.formatter import FormattingError, SourceFormatter
from mdigen.resolver import DuplicateNameResolver
from mdigen.stores.filesystem import LocalFileSystem
from tests._fixtures.asset_builder import AssetTreeBuilder


class RecordingFormatterRunner:
    """Formatter runner that tags output so formatting is observable."""

    def __init__(self) -> None:
        self.filenames: List[str] = []

    def __call__(self, args: Sequence[str], content: str) -> str:
        self.filenames.append(args[args.index("--stdin-filepath") + 1])
        return "// formatted\n" + content


class FailingRunner:
    def __call__(self, args: Sequence[str], content: str) -> str:
        raise FormattingError("prettier crashed")


class ReadOnlyFileSystem(LocalFileSystem):
    def remove_tree(self, path: Path) -> None:
        raise PermissionError(f"Permission denied: {path}")


def _config(tmp_path: Path, builder: AssetTreeBuilder) -> MdiGenConfig:
    config = default_config(tmp_path)
    config.source_root = builder.path()
    config.out_root = tmp_path / "out"
    config.demo_root = tmp_path / "demo"
    config.format.enabled = False
    return config


def _snapshot(root: Path) -> Dict[str, bytes]:
    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


def test_resolve_inventory_uses_category_then_icon_order() -> None:
    def info(category: str, name: str) -> IconInfo:
        return IconInfo(category=category, name=name, variants={IconVariant.FILLED: Path("x.svg")})

    inventory = {
        "action": [info("action", "home"), info("action", "settings")],
        "home": [info("home", "home")],
        "social": [info("social", "home")],
    }
    resolver = DuplicateNameResolver()

    resolved = resolve_inventory(inventory, resolver)

    assert [icon.component_name for icon in resolved["action"]] == ["MDIHome", "MDISettings"]
    assert [icon.component_name for icon in resolved["home"]] == ["MDIHomeHome"]
    assert [icon.component_name for icon in resolved["social"]] == ["MDISocialHome"]
    assert [record.category for record in resolver.get_duplicate_log()["MDIHome"]] == ["home", "social"]


def test_run_generates_components_indexes_and_demo(asset_builder: AssetTreeBuilder, tmp_path: Path) -> None:
    asset_builder.add_icon("action", "home", [IconVariant.FILLED, IconVariant.ROUND])
    asset_builder.add_icon("action", "settings", [IconVariant.OUTLINED])
    config = _config(tmp_path, asset_builder)

    summary = Orchestrator(config, categories=("action", "alert")).run_sync()

    icons_root = config.out_root / "icons"
    home = (icons_root / "action" / "MDIHome.tsx").read_text(encoding="utf-8")
    settings = (icons_root / "action" / "MDISettings.tsx").read_text(encoding="utf-8")

    assert "const availableVariants: IconVariant[] = ['filled', 'round']" in home
    assert "default: 'filled'," in home
    for absent in ("outlined", "sharp", "twotone"):
        assert absent not in home

    assert "const availableVariants: IconVariant[] = ['outlined']" in settings
    assert "default: 'outlined'," in settings
    assert "filled" not in settings

    assert (icons_root / "action" / "index.ts").read_text(encoding="utf-8") == (
        "export { MDIHome } from './MDIHome'\nexport { MDISettings } from './MDISettings'\n"
    )
    assert (icons_root / "index.ts").read_text(encoding="utf-8") == "export * from './action'\n"

    demo_list = (config.demo_root / "views" / "icons" / "ListAction.tsx").read_text(encoding="utf-8")
    assert "<MDI.MDIHome variant={props.variant} />" in demo_list
    assert "<MDI.MDISettings variant={props.variant} />" in demo_list
    assert (config.demo_root / "views" / "IconPanes.tsx").exists()

    assert summary.scanned == 2
    assert summary.generated == 2
    assert summary.skipped == 0
    assert summary.categories["alert"].scanned == 0
    assert summary.duplicates == {}
    assert len(summary.written_files) == 2 + 2 + 3


def test_run_resolves_cross_category_duplicates(asset_builder: AssetTreeBuilder, tmp_path: Path) -> None:
    asset_builder.add_icon("action", "home", [IconVariant.FILLED])
    asset_builder.add_icon("home", "home", [IconVariant.FILLED])
    config = _config(tmp_path, asset_builder)

    summary = Orchestrator(config, categories=("action", "home")).run_sync()

    assert (config.out_root / "icons" / "action" / "MDIHome.tsx").exists()
    renamed = config.out_root / "icons" / "home" / "MDIHomeHome.tsx"
    assert "export const MDIHomeHome = defineComponent" in renamed.read_text(encoding="utf-8")
    assert "mdi-home" in renamed.read_text(encoding="utf-8")
    assert [str(record) for record in summary.duplicates["MDIHome"]] == ["MDIHomeHome (from home)"]
    home_list = (config.demo_root / "views" / "icons" / "ListHome.tsx").read_text(encoding="utf-8")
    assert "<MDI.MDIHomeHome variant={props.variant} />" in home_list


def test_run_skips_icons_without_valid_svgs(asset_builder: AssetTreeBuilder, tmp_path: Path) -> None:
    asset_builder.add_icon("action", "home", [IconVariant.FILLED])
    asset_builder.write_svg("action", "broken", IconVariant.FILLED, "<svg")
    config = _config(tmp_path, asset_builder)

    summary = Orchestrator(config, categories=("action",)).run_sync()

    assert summary.generated == 1
    assert summary.skipped == 1
    index = (config.out_root / "icons" / "action" / "index.ts").read_text(encoding="utf-8")
    assert "MDIBroken" not in index
    assert not (config.out_root / "icons" / "action" / "MDIBroken.tsx").exists()


def test_run_removes_stale_outputs(asset_builder: AssetTreeBuilder, tmp_path: Path) -> None:
    asset_builder.add_icon("action", "home", [IconVariant.FILLED])
    config = _config(tmp_path, asset_builder)
    stale = config.out_root / "icons" / "action" / "MDIStale.tsx"
    stale.parent.mkdir(parents=True)
    stale.write_text("stale", encoding="utf-8")

    Orchestrator(config, categories=("action",)).run_sync()

    assert not stale.exists()


def test_run_is_byte_identical_on_rerun(asset_builder: AssetTreeBuilder, tmp_path: Path) -> None:
    for category, name in [("action", "home"), ("action", "3d_rotation"), ("home", "home"), ("av", "10k")]:
        asset_builder.add_icon(category, name, [IconVariant.FILLED, IconVariant.TWOTONE])
    config = _config(tmp_path, asset_builder)

    Orchestrator(config).run_sync()
    first = {**_snapshot(config.out_root), **_snapshot(config.demo_root)}
    Orchestrator(config).run_sync()
    second = {**_snapshot(config.out_root), **_snapshot(config.demo_root)}

    assert first == second
    assert "icons/home/MDIHomeHome.tsx" in first


def test_run_formats_every_written_file(asset_builder: AssetTreeBuilder, tmp_path: Path) -> None:
    asset_builder.add_icon("action", "home", [IconVariant.FILLED])
    config = _config(tmp_path, asset_builder)
    runner = RecordingFormatterRunner()
    formatter = SourceFormatter(enabled=True, command=["prettier"], runner=runner)

    summary = Orchestrator(config, formatter=formatter, categories=("action",)).run_sync()

    assert sorted(runner.filenames) == sorted(path.name for path in summary.written_files)
    assert all(path.read_text(encoding="utf-8").startswith("// formatted\n") for path in summary.written_files)


def test_formatting_failure_is_fatal(asset_builder: AssetTreeBuilder, tmp_path: Path) -> None:
    asset_builder.add_icon("action", "home", [IconVariant.FILLED])
    config = _config(tmp_path, asset_builder)
    formatter = SourceFormatter(enabled=True, runner=FailingRunner())

    with pytest.raises(FormattingError):
        Orchestrator(config, formatter=formatter, categories=("action",)).run_sync()


def test_clean_failure_is_fatal(asset_builder: AssetTreeBuilder, tmp_path: Path) -> None:
    config = _config(tmp_path, asset_builder)

    with pytest.raises(GenerationError):
        Orchestrator(config, fs=ReadOnlyFileSystem()).run_sync()


def test_missing_source_root_is_fatal(tmp_path: Path) -> None:
    config = default_config(tmp_path)
    config.source_root = tmp_path / "missing"
    config.format.enabled = False

    with pytest.raises(FileNotFoundError):
        Orchestrator(config).run_sync()


def test_resolve_inventory_skips_icons_without_a_usable_name() -> None:
    variants = {IconVariant.FILLED: Path("x.svg")}
    inventory = {
        "action": [
            IconInfo(category="action", name="__", variants=variants),
            IconInfo(category="action", name="home", variants=variants),
        ]
    }
    resolver = DuplicateNameResolver()

    resolved = resolve_inventory(inventory, resolver)

    assert [icon.component_name for icon in resolved["action"]] == ["MDIHome"]
    assert not resolver.is_registered("MDI")
