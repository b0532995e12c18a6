"""
Per-breakpoint size and column-count resolution.

Definitions are sparse and mobile first: a value defined at a smaller
breakpoint applies upward until a larger breakpoint overrides it, so
resolution searches from the active breakpoint toward ``base``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeVar

from grid_packer.breakpoints import DEFAULT_BREAKPOINTS, BreakpointTable
from grid_packer.constants import FALLBACK_COLUMNS
from grid_packer.logging_utils import logger
from grid_packer.type_defs import ColumnTable, ItemSize

T = TypeVar("T")

_UNIT_SIZE = ItemSize(1, 1)


def _cascade_lookup(
    values: Mapping[str, T],
    active_breakpoint: str,
    table: BreakpointTable,
) -> T | None:
    """
    Return the value for the active breakpoint or the nearest smaller one.

    Falls back to the first value in insertion order when no breakpoint in
    the cascade is defined, and to None when ``values`` is empty.
    """
    for name in table.cascade_from(active_breakpoint):
        if name in values:
            return values[name]
    first = next(iter(values), None)
    if first is None:
        return None
    logger.debug("No definition at or below %s; falling back to %s",
                 active_breakpoint, first)
    return values[first]


def sanitize_size(size: ItemSize) -> ItemSize:
    """Replace malformed sizes with 1x1 so layout never fails."""
    if size.cols >= 1 and size.rows >= 1:
        return size
    logger.warning("Invalid item size %sx%s; using 1x1",
                   size.cols, size.rows)
    return _UNIT_SIZE


def sanitize_columns(columns: int) -> int:
    """Treat non-positive column counts as a single column."""
    if columns >= 1:
        return columns
    logger.warning("Invalid column count %s; using 1", columns)
    return 1


def resolve_size(
    sizes: Mapping[str, ItemSize],
    active_breakpoint: str,
    table: BreakpointTable = DEFAULT_BREAKPOINTS,
) -> ItemSize:
    """Resolve an item's declared size at ``active_breakpoint``."""
    size = _cascade_lookup(sizes, active_breakpoint, table)
    if size is None:
        return _UNIT_SIZE
    return sanitize_size(size)


def resolve_columns(
    columns: ColumnTable,
    active_breakpoint: str,
    table: BreakpointTable = DEFAULT_BREAKPOINTS,
) -> int:
    """Resolve the grid's total column count at ``active_breakpoint``."""
    count = _cascade_lookup(columns, active_breakpoint, table)
    if count is None:
        return FALLBACK_COLUMNS
    return sanitize_columns(count)
