"""Tests for the live GridPacker: observation, memoization, notification."""
from collections.abc import Callable

import pytest
from pytest_mock import MockerFixture

import grid_packer.packer as gp_packer
from grid_packer.breakpoints import (
    DEFAULT_BREAKPOINTS,
    BreakpointObserver,
    BreakpointTable,
)
from grid_packer.measure import ContainerMeasure
from grid_packer.packer import GridPacker
from grid_packer.type_defs import GridItem, GridPackerResult, ItemSize

SPONSOR_COLUMNS = {"base": 2, "xs": 3, "sm": 5, "md": 6, "lg": 12}


@pytest.fixture
def live_packer(
    sponsor_items: list[GridItem],
) -> tuple[GridPacker, BreakpointObserver, ContainerMeasure]:
    observer = BreakpointObserver()
    measure = ContainerMeasure()
    packer = GridPacker(
        sponsor_items, SPONSOR_COLUMNS, observer=observer, measure=measure,
    )
    return packer, observer, measure


def test_unmeasured_defaults_to_base(
    live_packer: tuple[GridPacker, BreakpointObserver, ContainerMeasure],
) -> None:
    packer, _, _ = live_packer
    result = packer.result()
    assert result.breakpoint == "base"
    assert result.columns == 2  # noqa: PLR2004
    assert result.cell_size == 0
    assert len(result.placements) == 10  # noqa: PLR2004
    assert result.row_count == 10  # noqa: PLR2004


def test_result_follows_breakpoint_and_measure(
    live_packer: tuple[GridPacker, BreakpointObserver, ContainerMeasure],
) -> None:
    packer, observer, measure = live_packer
    observer.set_width(1100)
    measure.update(1100, 20)
    result = packer.result()
    assert result.breakpoint == "lg"
    assert result.columns == 12  # noqa: PLR2004
    assert result.cell_size == pytest.approx((1100 - 11 * 20) / 12)
    assert result.placements[0].col_span == 3  # noqa: PLR2004


def test_placements_memoized_within_breakpoint(
    live_packer: tuple[GridPacker, BreakpointObserver, ContainerMeasure],
    mocker: MockerFixture,
) -> None:
    packer, observer, measure = live_packer
    spy = mocker.spy(gp_packer, "pack_items")

    observer.set_width(700)
    first = packer.result()
    measure.update(700, 8)
    observer.set_width(720)
    second = packer.result()

    assert spy.call_count == 1
    assert first.placements is second.placements
    assert first.cell_size != second.cell_size

    observer.set_width(800)
    packer.result()
    assert spy.call_count == 2  # noqa: PLR2004


def test_subscribers_receive_fresh_results(
    live_packer: tuple[GridPacker, BreakpointObserver, ContainerMeasure],
    make_item: Callable[..., GridItem],
) -> None:
    packer, observer, measure = live_packer
    seen: list[GridPackerResult] = []
    unsubscribe = packer.subscribe(seen.append)

    observer.set_width(300)  # still base, no notification
    observer.set_width(500)
    measure.update(500, 10)
    packer.set_items([make_item("solo")])
    packer.set_items([make_item("solo")])  # unchanged

    assert [r.breakpoint for r in seen] == ["xs", "xs", "xs"]
    assert [len(r.placements) for r in seen] == [10, 10, 1]
    assert seen[1].cell_size == pytest.approx((500 - 2 * 10) / 3)

    unsubscribe()
    observer.set_width(2000)
    assert len(seen) == 3  # noqa: PLR2004


def test_close_detaches(
    live_packer: tuple[GridPacker, BreakpointObserver, ContainerMeasure],
) -> None:
    packer, observer, _ = live_packer
    seen: list[GridPackerResult] = []
    packer.subscribe(seen.append)
    packer.close()
    observer.set_width(1500)
    assert seen == []
    # still usable as a plain calculator after close
    assert packer.result().breakpoint == "xl"


def test_default_collaborators(sponsor_items: list[GridItem]) -> None:
    packer = GridPacker(sponsor_items, {"base": 4})
    result = packer.result()
    assert result.breakpoint == "base"
    assert result.columns == 4  # noqa: PLR2004
    assert packer.items == tuple(sponsor_items)


def test_observer_table_drives_lookups() -> None:
    table = BreakpointTable((("desktop", 1000), ("tablet", 600), ("base", 0)))
    observer = BreakpointObserver(table, 700)
    item = GridItem(
        "card", {"base": ItemSize(1, 1), "tablet": ItemSize(2, 1)},
    )
    packer = GridPacker(
        [item], {"base": 2, "tablet": 4, "desktop": 8}, observer=observer,
    )
    assert packer.breakpoints is table
    result = packer.result()
    assert result.breakpoint == "tablet"
    assert result.columns == 4  # noqa: PLR2004
    placed = result.placements[0]
    assert (placed.col_span, placed.row_span) == (2, 1)


def test_mismatched_observer_table_rejected(
    small_table: BreakpointTable,
) -> None:
    observer = BreakpointObserver(small_table)
    with pytest.raises(ValueError, match="different breakpoint table"):
        GridPacker([], {"base": 2}, breakpoints=DEFAULT_BREAKPOINTS,
                   observer=observer)


def test_explicit_table_builds_matching_observer(
    small_table: BreakpointTable,
) -> None:
    packer = GridPacker([], {"base": 2}, breakpoints=small_table)
    assert packer.observer.table is small_table
