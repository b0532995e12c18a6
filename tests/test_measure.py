"""Unit tests for container measurement and cell sizing."""
import pytest

from grid_packer.measure import ContainerMeasure, cell_size, parse_gap


@pytest.mark.parametrize(
    ("width", "columns", "gap", "expected"),
    [
        (1200, 12, 16, (1200 - 11 * 16) / 12),
        (100, 1, 50, 100.0),
        (0, 4, 8, 0.0),
        (-10, 4, 8, 0.0),
        (300, 3, 0, 100.0),
    ],
)
def test_cell_size(
    width: float, columns: int, gap: float, expected: float,
) -> None:
    assert cell_size(width, columns, gap) == pytest.approx(expected)


@pytest.mark.parametrize(
    ("column_gap", "gap", "expected"),
    [
        ("12px", "16px", 12.0),
        ("normal", "16px", 16.0),
        ("0px", "1rem", 16.0),
        (None, None, 0.0),
        ("normal", "normal", 0.0),
        (8, None, 8.0),
    ],
)
def test_parse_gap(
    column_gap: str | None, gap: str | None, expected: float,
) -> None:
    assert parse_gap(column_gap, gap) == expected


class TestContainerMeasure:
    def test_defaults_unmeasured(self) -> None:
        measure = ContainerMeasure()
        assert measure.width == 0
        assert measure.gap == 0

    def test_update_notifies_on_change_only(self) -> None:
        measure = ContainerMeasure(800, 16)
        seen: list[tuple[float, float]] = []
        measure.subscribe(lambda w, g: seen.append((w, g)))

        assert not measure.update(800)
        assert not measure.update(800, 16)
        assert measure.update(900)
        assert measure.update(900, 24)

        assert seen == [(900, 16), (900, 24)]
        assert measure.width == 900  # noqa: PLR2004
        assert measure.gap == 24  # noqa: PLR2004

    def test_unsubscribe(self) -> None:
        measure = ContainerMeasure()
        seen: list[float] = []
        unsubscribe = measure.subscribe(lambda w, _g: seen.append(w))
        measure.update(10)
        unsubscribe()
        measure.update(20)
        assert seen == [10]
