"""Container width and gap tracking plus presentation cell sizing."""

from __future__ import annotations

from collections.abc import Callable

from grid_packer.breakpoints import parse_css_length
from grid_packer.logging_utils import logger
from grid_packer.type_defs import Unsubscribe


def cell_size(container_width: float, columns: int, gap: float) -> float:
    """
    Width of one grid cell in pixels, or 0 before the first measurement.

    Presentation only; placement never depends on it.
    """
    if container_width <= 0 or columns <= 0:
        return 0.0
    return (container_width - (columns - 1) * gap) / columns


def parse_gap(column_gap: str | float | None, gap: str | float | None) -> float:
    """
    Read the horizontal gap from computed style values.

    ``column_gap`` wins when it parses to a non-zero length, then ``gap``,
    otherwise 0. Unparseable values (``"normal"``) count as missing.
    """
    for raw in (column_gap, gap):
        if raw is None:
            continue
        try:
            value = parse_css_length(raw)
        except ValueError:
            logger.debug("Ignoring unparseable gap value %r", raw)
            continue
        if value:
            return value
    return 0.0


class ContainerMeasure:
    """Current pixel width and gap of the packing surface."""

    def __init__(self, width: float = 0.0, gap: float = 0.0) -> None:
        self._width = width
        self._gap = gap
        self._callbacks: list[Callable[[float, float], None]] = []

    @property
    def width(self) -> float:
        return self._width

    @property
    def gap(self) -> float:
        return self._gap

    def update(self, width: float, gap: float | None = None) -> bool:
        """Record a resize. Return True and notify when anything changed."""
        new_gap = self._gap if gap is None else gap
        if width == self._width and new_gap == self._gap:
            return False
        self._width = width
        self._gap = new_gap
        for callback in list(self._callbacks):
            callback(width, new_gap)
        return True

    def subscribe(
        self, callback: Callable[[float, float], None],
    ) -> Unsubscribe:
        """Register ``callback`` for resize notifications."""
        self._callbacks.append(callback)

        def unsubscribe() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return unsubscribe
