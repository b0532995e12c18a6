"""
Defines the shared value types for the grid packer.

Centralizes the item, placement and result records passed between the
resolvers, the packing algorithm and the rendering helpers.
"""
from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

ColumnTable = Mapping[str, int]
Unsubscribe = Callable[[], None]


@dataclass(frozen=True, slots=True)
class ItemSize:
    """Columns and rows an item spans at one breakpoint."""

    cols: int
    rows: int

    @property
    def area(self) -> int:
        return self.cols * self.rows


@dataclass(frozen=True, slots=True)
class GridItem:
    """
    An entity to be placed.

    ``sizes`` maps breakpoint names to sizes and does not need to cover
    every breakpoint. Lower ``priority`` sorts first; ``None`` sorts last.
    """

    id: str
    sizes: Mapping[str, ItemSize] = field(default_factory=dict)
    priority: int | None = None

    # sizes is a plain mapping, so items compare by value but are unhashable
    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True, slots=True)
class PlacedItem:
    """Placement of one item, 1-based like CSS grid lines."""

    id: str
    col: int
    row: int
    col_span: int
    row_span: int

    @property
    def last_col(self) -> int:
        return self.col + self.col_span - 1

    @property
    def last_row(self) -> int:
        return self.row + self.row_span - 1

    def as_dict(self) -> dict[str, int | str]:
        return {
            "id": self.id,
            "col": self.col,
            "row": self.row,
            "colSpan": self.col_span,
            "rowSpan": self.row_span,
        }


@dataclass(frozen=True, slots=True)
class GridPackerResult:
    """Everything a renderer needs to lay out one packed grid."""

    placements: tuple[PlacedItem, ...]
    columns: int
    breakpoint: str
    cell_size: float

    @property
    def row_count(self) -> int:
        return max((p.last_row for p in self.placements), default=0)
