"""
The ``grid_packer`` logger.

Resolution warnings about malformed sizes, packing debug traces and CLI
progress messages all go through :data:`logger`. It lives in a module of
its own because every other module imports it.
"""

import logging

_DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logger(
        name: str = __name__,
        level: int = logging.INFO,
        formatter: logging.Formatter | None = None,
        handler: logging.Handler | None = None,
) -> logging.Logger:
    """
    Return the logger called *name*, attaching a handler on first use.

    The handler writes to stderr unless *handler* is given, so layout
    tables and JSON printed to stdout stay clean. Later calls for the same
    name only update the level.

    Args:
        name: Dotted logger name.
        level: Threshold such as ``logging.INFO``.
        formatter: Replaces the timestamped default format.
        handler: Replaces the default stderr handler.

    Returns:
        The named logger, with propagation to the root logger disabled.

    """
    named = logging.getLogger(name)
    named.setLevel(level)
    if named.handlers:
        return named
    handler = handler or logging.StreamHandler()
    handler.setFormatter(formatter or logging.Formatter(_DEFAULT_FORMAT))
    named.addHandler(handler)
    named.propagate = False
    return named


def set_verbosity(verbose: bool) -> None:
    """Show packing debug traces when *verbose*, else INFO and above."""
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


logger = setup_logger("grid_packer")
