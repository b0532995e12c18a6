"""
Test configuration and shared fixtures for grid_packer.

Provides item factories, a small breakpoint table, and a layout TOML
file shared by the config, CLI and integration tests.

Note:
    This file is automatically loaded by pytest and should not be
    renamed.

"""
from collections.abc import Callable
from pathlib import Path

import pytest
import tomlkit

from grid_packer.breakpoints import BreakpointTable
from grid_packer.type_defs import GridItem, ItemSize

SPONSOR_COLUMNS = {"base": 2, "xs": 3, "sm": 5, "md": 6, "lg": 12}


@pytest.fixture
def make_item() -> Callable[..., GridItem]:
    """Build GridItems from ``(cols, rows)`` tuples keyed by breakpoint."""

    def _build(
        item_id: str,
        priority: int | None = None,
        **sizes: tuple[int, int],
    ) -> GridItem:
        if not sizes:
            sizes = {"base": (1, 1)}
        return GridItem(
            id=item_id,
            sizes={name: ItemSize(*dims) for name, dims in sizes.items()},
            priority=priority,
        )

    return _build


@pytest.fixture
def small_table() -> BreakpointTable:
    """Three-tier table: lg >= 1024, sm >= 640, base."""
    return BreakpointTable((("lg", 1024), ("sm", 640), ("base", 0)))


def _sponsor_item_data() -> list[dict]:
    large = {"base": {"cols": 2, "rows": 2}, "xs": {"cols": 3, "rows": 2}}
    medium = {"base": {"cols": 2, "rows": 1}, "sm": {"cols": 2, "rows": 2}}
    default = {"base": {"cols": 2, "rows": 1}}
    small = {"base": {"cols": 1, "rows": 1}}
    items = []
    for prefix, sizes, priority, count in (
        ("large", large, 1, 2),
        ("medium", medium, 2, 2),
        ("default", default, 3, 2),
        ("small", small, 4, 4),
    ):
        for idx in range(1, count + 1):
            items.append({
                "id": f"{prefix}-{idx}",
                "priority": priority,
                "sizes": sizes,
            })
    return items


@pytest.fixture
def sponsor_items() -> list[GridItem]:
    """The ten-slot sponsor wall used across packing tests."""
    return [
        GridItem(
            id=data["id"],
            sizes={
                name: ItemSize(size["cols"], size["rows"])
                for name, size in data["sizes"].items()
            },
            priority=data["priority"],
        )
        for data in _sponsor_item_data()
    ]


@pytest.fixture
def layout_toml(tmp_path: Path) -> Path:
    """Write the sponsor wall as a layout TOML file and return its path."""
    doc = tomlkit.document()
    doc.update({
        "grid": {"columns": dict(SPONSOR_COLUMNS), "gap": 16},
        "output": {"cell_px": 20, "gap_px": 4},
        "items": _sponsor_item_data(),
    })
    path = tmp_path / "layout.toml"
    path.write_text(tomlkit.dumps(doc), encoding="utf-8")
    return path
