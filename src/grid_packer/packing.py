"""
Greedy grid packing for prioritized, variable-size cards.

Items are sorted by priority (then by area, largest first) and placed one
at a time without backtracking. Each item first tries every column left to
right, and within a column every already-used row top to bottom, so
vertical holes are filled before the grid grows. Only when nothing fits is
a new row opened below the occupied area.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from grid_packer.breakpoints import DEFAULT_BREAKPOINTS, BreakpointTable
from grid_packer.resolution import resolve_size, sanitize_columns
from grid_packer.type_defs import GridItem, PlacedItem


@dataclass(frozen=True, slots=True)
class _ResolvedItem:
    id: str
    cols: int
    rows: int
    priority: float
    area: int


class OccupancyGrid:
    """Growable rows x columns boolean grid, 0-based."""

    def __init__(self, columns: int) -> None:
        self.columns = columns
        self.cells = np.zeros((0, columns), dtype=bool)
        self.max_occupied_row = -1

    @property
    def row_count(self) -> int:
        return self.cells.shape[0]

    def ensure_rows(self, count: int) -> None:
        missing = count - self.row_count
        if missing > 0:
            self.cells = np.vstack(
                (self.cells, np.zeros((missing, self.columns), dtype=bool)),
            )

    def can_place(self, col: int, row: int, width: int, height: int) -> bool:
        if col + width > self.columns:
            return False
        self.ensure_rows(row + height)
        return not self.cells[row:row + height, col:col + width].any()

    def place(self, col: int, row: int, width: int, height: int) -> None:
        self.ensure_rows(row + height)
        self.cells[row:row + height, col:col + width] = True
        self.max_occupied_row = max(self.max_occupied_row, row + height - 1)


def _resolve_items(
    items: Sequence[GridItem],
    columns: int,
    active_breakpoint: str,
    table: BreakpointTable,
) -> list[_ResolvedItem]:
    resolved = []
    for item in items:
        size = resolve_size(item.sizes, active_breakpoint, table)
        resolved.append(_ResolvedItem(
            id=item.id,
            cols=min(size.cols, columns),
            rows=size.rows,
            priority=math.inf if item.priority is None else item.priority,
            # area uses the declared width so clamped items keep their rank
            area=size.area,
        ))
    # stable: equal priority and area keep input order
    resolved.sort(key=lambda r: (r.priority, -r.area))
    return resolved


def _find_gap(grid: OccupancyGrid, item: _ResolvedItem) -> tuple[int, int] | None:
    """Column-first scan over the rows touched so far."""
    scan_rows = grid.max_occupied_row + 1
    for col in range(grid.columns - item.cols + 1):
        for row in range(scan_rows):
            if grid.can_place(col, row, item.cols, item.rows):
                return col, row
    return None


def _open_new_row(grid: OccupancyGrid, item: _ResolvedItem) -> tuple[int, int]:
    new_row = grid.max_occupied_row + 1
    for col in range(grid.columns - item.cols + 1):
        if grid.can_place(col, new_row, item.cols, item.rows):
            return col, new_row
    # unreachable: rows below max_occupied_row are empty and cols <= columns
    return 0, new_row


def pack_items(
    items: Sequence[GridItem],
    columns: int,
    active_breakpoint: str,
    table: BreakpointTable = DEFAULT_BREAKPOINTS,
) -> list[PlacedItem]:
    """
    Place ``items`` on a grid ``columns`` wide.

    Args:
        items: Items to place. Ids are carried through unchanged.
        columns: Total grid columns. Non-positive values are treated as 1.
        active_breakpoint: Breakpoint used to resolve each item's size.
        table: Breakpoint ordering used for size fallback.

    Returns:
        One placement per item, in placement order, with 1-based
        coordinates. The result depends only on the arguments.

    """
    columns = sanitize_columns(columns)
    grid = OccupancyGrid(columns)
    placed: list[PlacedItem] = []

    for item in _resolve_items(items, columns, active_breakpoint, table):
        position = _find_gap(grid, item)
        if position is None:
            position = _open_new_row(grid, item)
        col, row = position
        grid.place(col, row, item.cols, item.rows)
        placed.append(PlacedItem(
            id=item.id,
            col=col + 1,
            row=row + 1,
            col_span=item.cols,
            row_span=item.rows,
        ))

    return placed
