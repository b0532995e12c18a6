"""
Breakpoint tables and width-to-breakpoint resolution.

A breakpoint table is an ordered list of ``(name, min_width_px)`` pairs,
largest first, always terminated by the zero-width ``base`` tier so that
every width resolves to a name. :class:`BreakpointObserver` tracks a live
width and notifies subscribers when a tier boundary is crossed.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass

from grid_packer.config_defaults import DEFAULT_BREAKPOINT_WIDTHS
from grid_packer.constants import BASE_BREAKPOINT, ROOT_FONT_SIZE_PX
from grid_packer.logging_utils import logger
from grid_packer.type_defs import Unsubscribe

_CSS_LENGTH = re.compile(
    r"^\s*(?P<value>[+-]?(?:\d+\.?\d*|\.\d+))\s*(?P<unit>px|rem|em)?\s*$",
    re.IGNORECASE,
)


def parse_css_length(value: str | float) -> float:
    """
    Convert a CSS length (``"640px"``, ``"40rem"``) or number to pixels.

    Unitless strings are read as pixels. ``rem`` and ``em`` use a 16px
    root font size.
    """
    if isinstance(value, bool):
        msg = f"Invalid CSS length: {value!r}"
        raise ValueError(msg)
    if isinstance(value, (int, float)):
        return float(value)
    match = _CSS_LENGTH.match(value)
    if match is None:
        msg = f"Invalid CSS length: {value!r}"
        raise ValueError(msg)
    number = float(match.group("value"))
    unit = (match.group("unit") or "px").lower()
    if unit in ("rem", "em"):
        return number * ROOT_FONT_SIZE_PX
    return number


@dataclass(frozen=True, slots=True)
class BreakpointTable:
    """Immutable largest-first breakpoint table ending in ``base``."""

    entries: tuple[tuple[str, float], ...]

    def __post_init__(self) -> None:
        if not self.entries:
            msg = "Breakpoint table must not be empty"
            raise ValueError(msg)
        last_name, last_width = self.entries[-1]
        if last_name != BASE_BREAKPOINT or last_width != 0:
            msg = (f"Breakpoint table must end with ('{BASE_BREAKPOINT}', 0),"
                   f" got ({last_name!r}, {last_width!r})")
            raise ValueError(msg)
        names = [name for name, _ in self.entries]
        if len(set(names)) != len(names):
            msg = f"Duplicate breakpoint names in {names}"
            raise ValueError(msg)
        widths = [width for _, width in self.entries]
        for larger, smaller in zip(widths, widths[1:]):
            if smaller >= larger:
                msg = ("Breakpoint widths must be strictly decreasing, "
                       f"got {widths}")
                raise ValueError(msg)

    @classmethod
    def from_widths(
        cls, widths: Mapping[str, str | float],
    ) -> BreakpointTable:
        """
        Build a table from a styling system's configured breakpoints.

        Entries with a non-positive width are dropped, the rest are sorted
        largest first and ``base`` is appended. A ``base`` key in
        ``widths`` is ignored since the terminal tier is always zero.
        """
        parsed: list[tuple[str, float]] = []
        for name, raw in widths.items():
            if name == BASE_BREAKPOINT:
                continue
            width = parse_css_length(raw)
            if width > 0:
                parsed.append((name, width))
            else:
                logger.debug("Dropping breakpoint %s with width %s",
                             name, raw)
        parsed.sort(key=lambda entry: entry[1], reverse=True)
        parsed.append((BASE_BREAKPOINT, 0))
        return cls(tuple(parsed))

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self.entries)

    def index_of(self, name: str) -> int:
        """Return the position of ``name``, or -1 when it is unknown."""
        for idx, (entry_name, _) in enumerate(self.entries):
            if entry_name == name:
                return idx
        return -1

    def cascade_from(self, name: str) -> tuple[str, ...]:
        """
        Names to search for ``name``, from itself down to ``base``.

        Unknown names start from the largest breakpoint.
        """
        return self.names[max(0, self.index_of(name)):]

    def resolve(self, width: float | None) -> str:
        return resolve_breakpoint(width, self)

    def __iter__(self) -> Iterator[tuple[str, float]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


DEFAULT_BREAKPOINTS = BreakpointTable.from_widths(DEFAULT_BREAKPOINT_WIDTHS)


def resolve_breakpoint(
    width: float | None,
    table: BreakpointTable = DEFAULT_BREAKPOINTS,
) -> str:
    """
    Return the first breakpoint whose min width is <= ``width``.

    ``None`` means the width is not known yet and yields ``base``.
    """
    if width is None:
        return BASE_BREAKPOINT
    for name, min_width in table:
        if width >= min_width:
            return name
    return BASE_BREAKPOINT


class BreakpointObserver:
    """
    Track a live width and report the active breakpoint.

    Subscribers receive the new breakpoint name only when a width update
    crosses a tier boundary.
    """

    def __init__(
        self,
        table: BreakpointTable = DEFAULT_BREAKPOINTS,
        width: float | None = None,
    ) -> None:
        self.table = table
        self._width = width
        self._current = resolve_breakpoint(width, table)
        self._callbacks: list[Callable[[str], None]] = []

    @property
    def width(self) -> float | None:
        return self._width

    @property
    def current(self) -> str:
        return self._current

    def set_width(self, width: float | None) -> bool:
        """Update the width. Return True when the breakpoint changed."""
        self._width = width
        new_breakpoint = resolve_breakpoint(width, self.table)
        if new_breakpoint == self._current:
            return False
        logger.debug("Breakpoint changed: %s -> %s (width=%s)",
                     self._current, new_breakpoint, width)
        self._current = new_breakpoint
        for callback in list(self._callbacks):
            callback(new_breakpoint)
        return True

    def subscribe(self, callback: Callable[[str], None]) -> Unsubscribe:
        """Register ``callback`` and return a function that removes it."""
        self._callbacks.append(callback)

        def unsubscribe() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return unsubscribe
