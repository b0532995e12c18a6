"""
Live grid packer tying breakpoint, container size and items together.

:class:`GridPacker` reads the active breakpoint from a
:class:`~grid_packer.breakpoints.BreakpointObserver` and the container
size from a :class:`~grid_packer.measure.ContainerMeasure`, resolves the
column count, and packs the items. Placements are memoized on
``(items, columns, breakpoint)`` so a resize inside one breakpoint only
recomputes the cell size.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from grid_packer.breakpoints import (
    DEFAULT_BREAKPOINTS,
    BreakpointObserver,
    BreakpointTable,
)
from grid_packer.logging_utils import logger
from grid_packer.measure import ContainerMeasure, cell_size
from grid_packer.packing import pack_items
from grid_packer.resolution import resolve_columns
from grid_packer.type_defs import (
    ColumnTable,
    GridItem,
    GridPackerResult,
    PlacedItem,
    Unsubscribe,
)


class GridPacker:
    """Recompute placements whenever an observed input changes."""

    def __init__(
        self,
        items: Sequence[GridItem],
        columns: ColumnTable,
        *,
        breakpoints: BreakpointTable | None = None,
        observer: BreakpointObserver | None = None,
        measure: ContainerMeasure | None = None,
    ) -> None:
        if observer is None:
            if breakpoints is None:
                breakpoints = DEFAULT_BREAKPOINTS
            observer = BreakpointObserver(breakpoints)
        elif breakpoints is None:
            breakpoints = observer.table
        elif observer.table is not breakpoints:
            raise ValueError(
                "observer reports tiers from a different breakpoint table"
            )
        self.breakpoints = breakpoints
        self.columns_table = dict(columns)
        self.observer = observer
        self.measure = measure or ContainerMeasure()
        self._items: tuple[GridItem, ...] = tuple(items)
        self._memo_key: tuple[tuple[GridItem, ...], int, str] | None = None
        self._memo: tuple[PlacedItem, ...] = ()
        self._callbacks: list[Callable[[GridPackerResult], None]] = []
        self._detach = [
            self.observer.subscribe(lambda _bp: self._notify()),
            self.measure.subscribe(lambda _w, _g: self._notify()),
        ]

    @property
    def items(self) -> tuple[GridItem, ...]:
        return self._items

    def set_items(self, items: Sequence[GridItem]) -> None:
        new_items = tuple(items)
        if new_items == self._items:
            return
        self._items = new_items
        self._notify()

    def _placements(
        self, columns: int, breakpoint: str,
    ) -> tuple[PlacedItem, ...]:
        key = (self._items, columns, breakpoint)
        if key != self._memo_key:
            logger.debug("Packing %d items into %d columns at %s",
                         len(self._items), columns, breakpoint)
            self._memo = tuple(
                pack_items(self._items, columns, breakpoint, self.breakpoints),
            )
            self._memo_key = key
        return self._memo

    def result(self) -> GridPackerResult:
        breakpoint = self.observer.current
        columns = resolve_columns(
            self.columns_table, breakpoint, self.breakpoints)
        return GridPackerResult(
            placements=self._placements(columns, breakpoint),
            columns=columns,
            breakpoint=breakpoint,
            cell_size=cell_size(self.measure.width, columns, self.measure.gap),
        )

    def subscribe(
        self, callback: Callable[[GridPackerResult], None],
    ) -> Unsubscribe:
        """Call ``callback`` with a fresh result after every change."""
        self._callbacks.append(callback)

        def unsubscribe() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        if not self._callbacks:
            return
        current = self.result()
        for callback in list(self._callbacks):
            callback(current)

    def close(self) -> None:
        """Detach from the observer and the measure."""
        for detach in self._detach:
            detach()
        self._detach = []
        self._callbacks.clear()
