"""Configuration for layout generation and its process-wide default."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Tuple

RED = "#c63b2d"
BLUE = "#2a59b6"
YELLOW = "#f2d31b"
GREY = "#bfbfbf"
WHITE = "#ffffff"

BLOCK_PALETTE: Tuple[str, ...] = (RED, BLUE, YELLOW)
AGENT_PALETTE: Tuple[str, ...] = (RED, BLUE, GREY)


class ConfigError(ValueError):
    """Raised when a configuration cannot produce a layout."""


@dataclass(frozen=True)
class AxisConfig:
    """Gap jitter, segment bounds and centre bias along one axis."""

    count: int = 10
    gap_base: float = 15.0
    gap_delta: float = 3.0
    min_size: float = 20.0
    max_size: float = 280.0
    center_power: float = 2.2
    spread: float = 2.0


@dataclass(frozen=True)
class BlockOptions:
    prob: float = 0.55
    min_frac: float = 0.35
    max_frac: float = 0.85
    aspect_thresh: float = 1.15
    overlay_prob: float = 0.20
    palette: Tuple[str, ...] = BLOCK_PALETTE


@dataclass(frozen=True)
class AgentOptions:
    fill_prob: float = 0.65
    spacing_min: float = 8.0
    spacing_max: float = 28.0
    speed_min: float = 0.6
    speed_max: float = 2.0
    palette: Tuple[str, ...] = AGENT_PALETTE


def worst_case_extent(axis: AxisConfig) -> float:
    """Span taken by the widest possible gaps plus every segment at ``min_size``."""

    return (axis.count - 1) * (axis.gap_base + abs(axis.gap_delta)) + axis.count * axis.min_size


def _default_columns() -> AxisConfig:
    return AxisConfig(min_size=20.0, max_size=280.0, center_power=2.2, spread=2.0)


def _default_rows() -> AxisConfig:
    return AxisConfig(min_size=40.0, max_size=140.0, center_power=2.0, spread=1.5)


@dataclass(frozen=True)
class LayoutConfig:
    width: float = 900.0
    height: float = 900.0
    columns: AxisConfig = field(default_factory=_default_columns)
    rows: AxisConfig = field(default_factory=_default_rows)
    blocks: BlockOptions = field(default_factory=BlockOptions)
    agents: AgentOptions = field(default_factory=AgentOptions)
    connector_count: int = 12
    background: str = YELLOW
    cell_color: str = WHITE

    def validate(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"canvas must be positive, got {self.width}x{self.height}")
        for label, axis, length in (("columns", self.columns, self.width), ("rows", self.rows, self.height)):
            if axis.count < 1:
                raise ConfigError(f"{label}.count must be at least 1, got {axis.count}")
            if axis.gap_base - abs(axis.gap_delta) < 0:
                raise ConfigError(f"{label} gaps can become negative ({axis.gap_base}±{axis.gap_delta})")
            if axis.min_size < 0:
                raise ConfigError(f"{label}.min_size must be non-negative")
            if axis.spread <= 0:
                raise ConfigError(f"{label}.spread must be positive")
            worst_case = worst_case_extent(axis)
            if worst_case > length:
                raise ConfigError(
                    f"{label} need up to {worst_case:g} (widest gaps plus minimum sizes) "
                    f"but the canvas only spans {length:g}"
                )
        blocks = self.blocks
        if not 0.0 <= blocks.min_frac <= blocks.max_frac <= 1.0:
            raise ConfigError(
                f"block fractions must satisfy 0 <= min_frac <= max_frac <= 1, "
                f"got {blocks.min_frac}..{blocks.max_frac}"
            )
        for label, value in (
            ("blocks.prob", blocks.prob),
            ("blocks.overlay_prob", blocks.overlay_prob),
            ("agents.fill_prob", self.agents.fill_prob),
        ):
            if not 0.0 <= value <= 1.0:
                raise ConfigError(f"{label} must lie in [0, 1], got {value}")
        if blocks.aspect_thresh <= 0:
            raise ConfigError("blocks.aspect_thresh must be positive")
        if len(blocks.palette) < 2:
            raise ConfigError("block palette needs at least two colours for overlays")
        agents = self.agents
        if not agents.palette:
            raise ConfigError("agent palette must not be empty")
        if agents.spacing_min < 0 or agents.spacing_max < agents.spacing_min:
            raise ConfigError(
                f"agent spacing must satisfy 0 <= min <= max, got {agents.spacing_min}..{agents.spacing_max}"
            )
        if agents.speed_max < agents.speed_min:
            raise ConfigError("agents.speed_max must not be below speed_min")
        if self.connector_count < 0:
            raise ConfigError("connector_count must be non-negative")


_DEFAULT_CONFIG = LayoutConfig()


def get_default_config() -> LayoutConfig:
    return copy.deepcopy(_DEFAULT_CONFIG)


def set_default_config(config: LayoutConfig) -> None:
    global _DEFAULT_CONFIG
    config.validate()
    _DEFAULT_CONFIG = copy.deepcopy(config)


__all__ = [
    "AGENT_PALETTE",
    "AgentOptions",
    "AxisConfig",
    "BLOCK_PALETTE",
    "BLUE",
    "BlockOptions",
    "ConfigError",
    "GREY",
    "LayoutConfig",
    "RED",
    "WHITE",
    "YELLOW",
    "get_default_config",
    "set_default_config",
    "worst_case_extent",
]
