"""
Constants used internally by the grid packer.

These are implementation-level defaults that should not be overridden
via config files or CLI arguments.
"""

# Terminal breakpoint that matches every width
BASE_BREAKPOINT = "base"

# Column count used when a column table resolves to nothing
FALLBACK_COLUMNS = 12

# CSS length conversion
ROOT_FONT_SIZE_PX = 16.0

# Preview rendering colors
COLOR_WHITE = (255, 255, 255)
COLOR_BLACK = (0, 0, 0)
COLOR_GRID_LINE = (220, 220, 220)
COLOR_ITEM_OUTLINE = (40, 44, 52)
ITEM_PALETTE: tuple[tuple[int, int, int], ...] = (
    (102, 153, 204),
    (153, 204, 153),
    (230, 170, 104),
    (204, 153, 204),
    (240, 210, 110),
    (140, 190, 190),
)
