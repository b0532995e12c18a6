"""
Configuration schema and loader for the grid packer.

Defines Pydantic models for a layout file (grid, breakpoints, output and
items) and a TOML-based loader with validation support.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import tomlkit
from pydantic import (
    BaseModel,
    Field,
    PositiveInt,
    field_validator,
    model_validator,
)

from grid_packer.breakpoints import BreakpointTable
from grid_packer.config_defaults import (
    DEFAULT_BREAKPOINT_WIDTHS,
    DEFAULT_CELL_PX,
    DEFAULT_COLUMNS,
    DEFAULT_GAP,
    DEFAULT_GAP_PX,
    DEFAULT_SHOW_LABELS,
    DEFAULT_WIDTH,
)
from grid_packer.type_defs import GridItem, ItemSize


class SizeConfig(BaseModel):
    """Span of an item at one breakpoint."""

    cols: int = Field(ge=1)
    rows: int = Field(ge=1)


class ItemConfig(BaseModel):
    """One card to place."""

    id: str = Field(min_length=1)
    priority: int | None = None
    sizes: dict[str, SizeConfig] = Field(min_length=1)

    def to_grid_item(self) -> GridItem:
        return GridItem(
            id=self.id,
            sizes={
                name: ItemSize(size.cols, size.rows)
                for name, size in self.sizes.items()
            },
            priority=self.priority,
        )


class GridSection(BaseModel):
    """Column table, gap and optional fixed viewport."""

    columns: dict[str, PositiveInt] = Field(
        default_factory=lambda: dict(DEFAULT_COLUMNS),
    )
    gap: float = Field(DEFAULT_GAP, ge=0)
    width: float | None = Field(DEFAULT_WIDTH, ge=0)
    breakpoint: str | None = None


class OutputSection(BaseModel):
    """Preview image and export settings."""

    cell_px: int = Field(DEFAULT_CELL_PX, ge=1)
    gap_px: int = Field(DEFAULT_GAP_PX, ge=0)
    show_labels: bool = DEFAULT_SHOW_LABELS
    image: str | None = None
    csv: str | None = None


class LayoutConfig(BaseModel):
    """
    Root configuration object combining all supported sections.

    Mirrors the structure of a layout TOML file.
    """

    grid: GridSection = Field(
        default_factory=lambda: GridSection.model_validate({}),
    )
    output: OutputSection = Field(
        default_factory=lambda: OutputSection.model_validate({}),
    )
    breakpoints: dict[str, float | str] = Field(
        default_factory=lambda: dict(DEFAULT_BREAKPOINT_WIDTHS),
    )
    items: list[ItemConfig] = Field(default_factory=list)

    @field_validator("breakpoints")
    @classmethod
    def _breakpoints_form_a_table(
        cls, value: dict[str, float | str],
    ) -> dict[str, float | str]:
        BreakpointTable.from_widths(value)
        return value

    @model_validator(mode="after")
    def _unique_item_ids(self) -> LayoutConfig:
        seen: set[str] = set()
        for item in self.items:
            if item.id in seen:
                msg = f"Duplicate item id: {item.id}"
                raise ValueError(msg)
            seen.add(item.id)
        return self

    def breakpoint_table(self) -> BreakpointTable:
        return BreakpointTable.from_widths(self.breakpoints)

    def to_grid_items(self) -> list[GridItem]:
        return [item.to_grid_item() for item in self.items]


class ConfigLoader:
    """
    Loads and parses a TOML layout file into a typed config object.

    Falls back to defaults for any missing subsections or fields.
    """

    @staticmethod
    def load(path: str | Path) -> LayoutConfig:
        """Load and validate a layout configuration from a TOML file."""
        config_path = Path(path)
        if not config_path.is_file():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)

        with config_path.open("r", encoding="utf-8") as f:
            doc = tomlkit.load(f)

        return LayoutConfig.model_validate(doc.unwrap())


def build_config_from_cli(
    overrides: dict[str, Any],
    base_config: LayoutConfig | None = None,
) -> LayoutConfig:
    """
    Apply CLI overrides on top of a loaded (or default) configuration.

    Recognized keys are ``width``, ``breakpoint``, ``columns``, ``gap``,
    ``out`` and ``csv``; ``None`` values are ignored. A ``columns``
    override replaces the whole column table with a single count.
    """
    cfg = base_config or LayoutConfig.model_validate({})
    data = cfg.model_dump()

    grid = data["grid"]
    if overrides.get("width") is not None:
        grid["width"] = overrides["width"]
        grid["breakpoint"] = None
    if overrides.get("breakpoint") is not None:
        grid["breakpoint"] = overrides["breakpoint"]
    if overrides.get("columns") is not None:
        grid["columns"] = {"base": overrides["columns"]}
    if overrides.get("gap") is not None:
        grid["gap"] = overrides["gap"]

    output = data["output"]
    if overrides.get("out") is not None:
        output["image"] = str(overrides["out"])
    if overrides.get("csv") is not None:
        output["csv"] = str(overrides["csv"])

    return LayoutConfig.model_validate(data)
