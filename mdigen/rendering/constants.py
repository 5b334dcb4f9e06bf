"""Template names and locations used by the generators."""

from __future__ import annotations

from pathlib import Path

DEFAULT_TEMPLATES_DIR = Path(__file__).with_name("templates")

ICON_TEMPLATE = "icon.tsx.j2"
CATEGORY_INDEX_TEMPLATE = "category_index.ts.j2"
ROOT_INDEX_TEMPLATE = "root_index.ts.j2"
DEMO_LIST_TEMPLATE = "demo_list.tsx.j2"
DEMO_INDEX_TEMPLATE = "demo_index.ts.j2"
ICON_PANES_TEMPLATE = "icon_panes.tsx.j2"

COMPONENT_SUFFIX = ".tsx"
INDEX_FILENAME = "index.ts"
PANES_FILENAME = "IconPanes.tsx"
