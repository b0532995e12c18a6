"""Shared default values for user-facing configuration settings."""

# Breakpoints (min width in px), largest first. Tailwind v4 defaults for
# sm..2xl, extended with xs, 3xl and 4xl.
DEFAULT_BREAKPOINT_WIDTHS: dict[str, float] = {
    "4xl": 2560,
    "3xl": 1920,
    "2xl": 1536,
    "xl": 1280,
    "lg": 1024,
    "md": 768,
    "sm": 640,
    "xs": 480,
}

# Grid
DEFAULT_COLUMNS: dict[str, int] = {"base": 12}
DEFAULT_GAP = 0.0
DEFAULT_WIDTH: float | None = None

# Output
DEFAULT_CELL_PX = 48
DEFAULT_GAP_PX = 8
DEFAULT_SHOW_LABELS = True
