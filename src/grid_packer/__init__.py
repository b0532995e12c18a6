"""Public package exports for the grid packer."""

from __future__ import annotations

from .breakpoints import (
    DEFAULT_BREAKPOINTS,
    BreakpointObserver,
    BreakpointTable,
    resolve_breakpoint,
)
from .measure import ContainerMeasure, cell_size
from .packer import GridPacker
from .packing import pack_items
from .resolution import resolve_columns, resolve_size
from .type_defs import GridItem, GridPackerResult, ItemSize, PlacedItem

__all__ = [
    "DEFAULT_BREAKPOINTS",
    "BreakpointObserver",
    "BreakpointTable",
    "ContainerMeasure",
    "GridItem",
    "GridPacker",
    "GridPackerResult",
    "ItemSize",
    "PlacedItem",
    "cell_size",
    "pack_items",
    "resolve_breakpoint",
    "resolve_columns",
    "resolve_size",
]
