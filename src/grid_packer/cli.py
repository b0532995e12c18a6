"""CLI argument parsing and main entry point."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

import grid_packer.config as gp_config
from grid_packer.breakpoints import BreakpointObserver, BreakpointTable
from grid_packer.export import placements_to_json, write_placements_csv
from grid_packer.logging_utils import logger, set_verbosity
from grid_packer.measure import ContainerMeasure
from grid_packer.packer import GridPacker
from grid_packer.render import save_layout_image
from grid_packer.type_defs import GridPackerResult
from grid_packer.version import resolve_project_version

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable, Sequence

T = TypeVar("T")


def positive_int(text: str) -> int:
    """Argparse-style validator that enforces a strictly positive integer."""
    try:
        value = int(text)
    except ValueError as exc:
        msg = "must be an integer"
        raise ValueError(msg) from exc
    if value <= 0:
        msg = "must be positive"
        raise ValueError(msg)
    return value


def non_negative_float(text: str) -> float:
    """Argparse-style validator for pixel widths and gaps."""
    try:
        value = float(text)
    except ValueError as exc:
        msg = "must be a number"
        raise ValueError(msg) from exc
    if value < 0:
        msg = "must not be negative"
        raise ValueError(msg)
    return value


def _wrap_validator(
    validator: Callable[[str], T],
    error_cls: type[argparse.ArgumentTypeError] = argparse.ArgumentTypeError,
) -> Callable[[str], T]:
    """Convert ``ValueError`` from a validator into ``ArgumentTypeError``."""

    def wrapper(text: str) -> T:
        try:
            return validator(text)
        except ValueError as exc:
            raise error_cls(str(exc)) from exc

    return wrapper


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the command-line interface."""
    p = argparse.ArgumentParser(
        description="Pack prioritized cards into a responsive grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "grid-packer --config layout.toml --width 1280\n"
            "grid-packer --config layout.toml --breakpoint sm --json\n"
            "grid-packer --config layout.toml --columns 4 --out preview.png"
        ),
    )
    p.add_argument(
        "--version", action="version",
        version=f"%(prog)s {resolve_project_version()}")

    cfg = p.add_argument_group("config")
    cfg.add_argument(
        "--config", type=Path,
        help="Path to a layout TOML file")
    cfg.add_argument(
        "--validate-config-only", action="store_true",
        help="Validate the config file and exit without packing")

    viewport = p.add_argument_group("viewport")
    choose = viewport.add_mutually_exclusive_group()
    choose.add_argument(
        "--width", type=_wrap_validator(non_negative_float),
        help="Container width in px; selects the breakpoint")
    choose.add_argument(
        "--breakpoint", type=str,
        help="Pack at this breakpoint's minimum width")
    viewport.add_argument(
        "--columns", type=_wrap_validator(positive_int),
        help="Override the column table with a fixed count")
    viewport.add_argument(
        "--gap", type=_wrap_validator(non_negative_float),
        help="Gap between cells in px, used for the cell size")

    output = p.add_argument_group("output")
    output.add_argument(
        "--out", type=Path,
        help="Write a PNG preview of the layout")
    output.add_argument(
        "--csv", type=Path,
        help="Write placements as CSV")
    output.add_argument(
        "--json", action="store_true",
        help="Print placements as JSON instead of a table")
    output.add_argument(
        "--verbose", action="store_true",
        help="Enable debug logging")

    return p


def log_parameters(cfg: gp_config.LayoutConfig, breakpoint: str) -> None:
    """Log the effective layout parameters."""
    logger.info("Breakpoint: %s", breakpoint)
    logger.info("Width: %s",
                "(unmeasured)" if cfg.grid.width is None else cfg.grid.width)
    logger.info("Column Table: %s", cfg.grid.columns)
    logger.info("Gap: %g", cfg.grid.gap)
    logger.info("Items: %d", len(cfg.items))
    logger.info("Preview Image: %s", cfg.output.image or "(disabled)")
    logger.info("CSV Export: %s", cfg.output.csv or "(disabled)")


def _viewport_width(
    cfg: gp_config.LayoutConfig, table: BreakpointTable,
) -> float | None:
    """Width that selects the configured breakpoint, else the raw width."""
    if cfg.grid.breakpoint is None:
        return cfg.grid.width
    widths = dict(table.entries)
    if cfg.grid.breakpoint not in widths:
        msg = (f"Unknown breakpoint '{cfg.grid.breakpoint}'. "
               f"Use one of: {', '.join(table.names)}")
        raise ValueError(msg)
    return widths[cfg.grid.breakpoint]


def format_table(result: GridPackerResult) -> str:
    """Render placements as aligned plain-text rows."""
    lines = [
        f"breakpoint={result.breakpoint} columns={result.columns} "
        f"cell_size={result.cell_size:g}",
        f"{'id':<20} {'col':>4} {'row':>4} {'span':>7}",
    ]
    for p in result.placements:
        span = f"{p.col_span}x{p.row_span}"
        lines.append(f"{p.id:<20} {p.col:>4} {p.row:>4} {span:>7}")
    return "\n".join(lines)


def run_from_args(args: argparse.Namespace) -> GridPackerResult | None:
    """Pack the configured layout and write the requested outputs."""
    base_cfg: gp_config.LayoutConfig | None = None
    if args.config:
        base_cfg = gp_config.ConfigLoader.load(args.config)
        if args.validate_config_only:
            logger.info("Config %s validated successfully.", args.config)
            return None

    cfg = gp_config.build_config_from_cli(vars(args), base_config=base_cfg)
    table = cfg.breakpoint_table()
    width = _viewport_width(cfg, table)

    observer = BreakpointObserver(table, width)
    measure = ContainerMeasure(width or 0.0, cfg.grid.gap)
    packer = GridPacker(
        cfg.to_grid_items(),
        cfg.grid.columns,
        breakpoints=table,
        observer=observer,
        measure=measure,
    )
    log_parameters(cfg, observer.current)
    if not cfg.items:
        logger.warning("No items configured; nothing to pack.")

    result = packer.result()
    packer.close()

    if args.json:
        print(placements_to_json(result))
    else:
        print(format_table(result))

    if cfg.output.image:
        saved = save_layout_image(
            result,
            Path(cfg.output.image),
            cell_px=cfg.output.cell_px,
            gap_px=cfg.output.gap_px,
            show_labels=cfg.output.show_labels,
        )
        logger.info("Layout preview saved to: %s", saved)
    if cfg.output.csv:
        saved = write_placements_csv(cfg.output.csv, result.placements)
        logger.info("Placements saved to: %s", saved)

    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command-line interface."""
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)
    set_verbosity(args.verbose)
    if args.validate_config_only and not args.config:
        arg_parser.error("--validate-config-only requires --config")

    try:
        run_from_args(args)
    except FileNotFoundError as exc:
        arg_parser.error(str(exc))
    except ValueError as exc:
        arg_parser.error(str(exc))
    except OSError as exc:
        logger.error("Failed to write output: %s", exc)
        return 1

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

