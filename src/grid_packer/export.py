"""
Export helpers for packed placements.

Writes placements as CSV rows or JSON so layouts computed offline can be
fed to a renderer or diffed between runs.
"""

from __future__ import annotations

import csv
import json
from collections.abc import Iterable
from pathlib import Path

from grid_packer.type_defs import GridPackerResult, PlacedItem

CSV_HEADER = ("id", "col", "row", "col_span", "row_span")


def write_placements_csv(
    path: str | Path,
    placements: Iterable[PlacedItem],
) -> Path:
    """
    Write one CSV row per placement, in placement order.

    Raises:
        OSError: If the file cannot be created.

    """
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(CSV_HEADER)
        for p in placements:
            writer.writerow([p.id, p.col, p.row, p.col_span, p.row_span])
    return out_path


def result_to_dict(result: GridPackerResult) -> dict[str, object]:
    return {
        "breakpoint": result.breakpoint,
        "columns": result.columns,
        "cellSize": result.cell_size,
        "placements": [p.as_dict() for p in result.placements],
    }


def placements_to_json(result: GridPackerResult, *, indent: int | None = 2) -> str:
    """Serialize a result using the camelCase keys renderers expect."""
    return json.dumps(result_to_dict(result), indent=indent)
