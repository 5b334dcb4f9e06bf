from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.asset_builder import AssetTreeBuilder


@pytest.fixture
def asset_builder(tmp_path: Path) -> AssetTreeBuilder:
    """Provide a reusable asset tree builder rooted at the pytest tmp_path."""
    return AssetTreeBuilder(tmp_path)
