"""Preview rendering of packed layouts with Pillow."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from grid_packer.config_defaults import (
    DEFAULT_CELL_PX,
    DEFAULT_GAP_PX,
    DEFAULT_SHOW_LABELS,
)
from grid_packer.constants import (
    COLOR_BLACK,
    COLOR_GRID_LINE,
    COLOR_ITEM_OUTLINE,
    COLOR_WHITE,
    ITEM_PALETTE,
)
from grid_packer.type_defs import GridPackerResult, PlacedItem

_RGB = tuple[int, int, int]

_LABEL_FRACTION = 0.3
_MIN_LABEL_PX = 8


@lru_cache(maxsize=8)
def _get_font(px: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    """Load a font at the given pixel size with fallback; cached."""
    try:
        return ImageFont.truetype("DejaVuSans.ttf", px)
    except OSError:
        return ImageFont.load_default()


def canvas_size(
    columns: int, rows: int, cell_px: int, gap_px: int,
) -> tuple[int, int]:
    """Pixel size of a grid with an outer margin equal to the gap."""
    width = columns * cell_px + (columns + 1) * gap_px
    height = rows * cell_px + (rows + 1) * gap_px
    return width, height


def item_box(
    placement: PlacedItem, cell_px: int, gap_px: int,
) -> tuple[int, int, int, int]:
    """Return the ``(x0, y0, x1, y1)`` box covered by a placement."""
    x0 = gap_px + (placement.col - 1) * (cell_px + gap_px)
    y0 = gap_px + (placement.row - 1) * (cell_px + gap_px)
    x1 = x0 + placement.col_span * cell_px + (placement.col_span - 1) * gap_px
    y1 = y0 + placement.row_span * cell_px + (placement.row_span - 1) * gap_px
    return x0, y0, x1 - 1, y1 - 1


def _draw_centered(
    draw: ImageDraw.ImageDraw,
    box: tuple[int, int, int, int],
    text: str,
    px: int,
) -> None:
    font = _get_font(px)
    bbox = draw.textbbox((0, 0), text, font=font)
    w = bbox[2] - bbox[0]
    h = bbox[3] - bbox[1]
    x = (box[0] + box[2] - w) // 2
    y = (box[1] + box[3] - h) // 2
    draw.text((x, y), text, font=font, fill=COLOR_BLACK)


def render_layout(
    result: GridPackerResult,
    *,
    cell_px: int = DEFAULT_CELL_PX,
    gap_px: int = DEFAULT_GAP_PX,
    bg_color: _RGB = COLOR_WHITE,
    show_labels: bool = DEFAULT_SHOW_LABELS,
) -> Image.Image:
    """
    Draw every placement as a filled rectangle on an empty cell grid.

    The canvas is exactly as tall as the occupied rows (at least one row).
    Colors cycle through a fixed palette in placement order.
    """
    if cell_px <= 0:
        msg = "cell_px must be positive"
        raise ValueError(msg)
    if gap_px < 0:
        msg = "gap_px must not be negative"
        raise ValueError(msg)

    rows = max(1, result.row_count)
    canvas = Image.new(
        "RGB",
        canvas_size(result.columns, rows, cell_px, gap_px),
        bg_color,
    )
    draw = ImageDraw.Draw(canvas)

    for row in range(1, rows + 1):
        for col in range(1, result.columns + 1):
            cell = PlacedItem("", col, row, 1, 1)
            draw.rectangle(item_box(cell, cell_px, gap_px),
                           outline=COLOR_GRID_LINE)

    label_px = max(_MIN_LABEL_PX, int(cell_px * _LABEL_FRACTION))
    for idx, placement in enumerate(result.placements):
        box = item_box(placement, cell_px, gap_px)
        draw.rectangle(
            box,
            fill=ITEM_PALETTE[idx % len(ITEM_PALETTE)],
            outline=COLOR_ITEM_OUTLINE,
        )
        if show_labels:
            _draw_centered(draw, box, placement.id, label_px)

    return canvas


def save_layout_image(
    result: GridPackerResult,
    out_path: Path,
    **kwargs: object,
) -> Path:
    """Render ``result`` and save it as PNG to ``out_path``."""
    if not isinstance(out_path, Path):
        msg = "out_path must be a pathlib.Path"
        raise TypeError(msg)

    out_path.parent.mkdir(parents=True, exist_ok=True)
    image = render_layout(result, **kwargs)  # type: ignore[arg-type]
    image.save(out_path, format="PNG")
    return out_path
