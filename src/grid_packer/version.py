"""Version lookup for the ``grid-packer`` command's ``--version`` flag."""

from __future__ import annotations

import tomllib
from importlib import metadata as importlib_metadata
from pathlib import Path

from grid_packer.logging_utils import logger

_DISTRIBUTION_NAMES = ("grid-packer", "grid_packer")
_UNKNOWN_VERSION = "0.0.0"


def _version_from_pyproject(start: Path) -> str | None:
    """Read ``project.version`` from the nearest pyproject.toml above *start*."""
    for parent in start.parents:
        pyproject_path = parent / "pyproject.toml"
        if not pyproject_path.is_file():
            continue
        try:
            with pyproject_path.open("rb") as handle:
                data = tomllib.load(handle)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            logger.warning("Cannot read version from %s: %s",
                           pyproject_path, exc)
            return None
        version = data.get("project", {}).get("version")
        if isinstance(version, str) and version.strip():
            return version.strip()
    return None


def resolve_project_version() -> str:
    """
    Report the grid packer's version string.

    An installed distribution wins. A source checkout run through
    ``run_packer.py`` has no distribution metadata, so the version in the
    checkout's pyproject.toml is used instead. ``"0.0.0"`` means neither
    was found.
    """
    for distribution_name in _DISTRIBUTION_NAMES:
        try:
            return importlib_metadata.version(distribution_name)
        except importlib_metadata.PackageNotFoundError:
            continue

    found = _version_from_pyproject(Path(__file__).resolve())
    return found or _UNKNOWN_VERSION
