"""Grid partition of the canvas into cells and gap lanes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple

import numpy as np

from .config import AxisConfig, LayoutConfig
from .geometry import Rect
from .logging_utils import apply_debug_logging
from .partition import allocate
from .random_source import RandomSource, uniform
from .weights import position_weights

logger = logging.getLogger(__name__)


def _frozen(values: np.ndarray) -> np.ndarray:
    arr = np.array(values, dtype=float)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class Layout:
    """Immutable result of :func:`build_layout`.

    Arrays are read-only; consumers receive the whole value and never patch
    individual fields.
    """

    width: float
    height: float
    col_widths: np.ndarray
    row_heights: np.ndarray
    col_gaps: np.ndarray
    row_gaps: np.ndarray
    col_starts: np.ndarray
    row_starts: np.ndarray

    @property
    def cols(self) -> int:
        return int(self.col_widths.size)

    @property
    def rows(self) -> int:
        return int(self.row_heights.size)

    def col_end(self, c: int) -> float:
        return float(self.col_starts[c] + self.col_widths[c])

    def row_end(self, r: int) -> float:
        return float(self.row_starts[r] + self.row_heights[r])

    def cell(self, r: int, c: int) -> Rect:
        return Rect(
            float(self.col_starts[c]),
            float(self.row_starts[r]),
            float(self.col_widths[c]),
            float(self.row_heights[r]),
        )

    def cells(self) -> Iterator[Tuple[int, int, Rect]]:
        """Yield ``(row, col, rect)`` in row-major order."""

        for r in range(self.rows):
            for c in range(self.cols):
                yield r, c, self.cell(r, c)

    def vertical_lane(self, c: int) -> Rect:
        """Full-height gap between column ``c`` and ``c + 1``."""

        return Rect(self.col_end(c), 0.0, float(self.col_gaps[c]), float(self.height))

    def horizontal_lane(self, r: int) -> Rect:
        """Full-width gap between row ``r`` and ``r + 1``."""

        return Rect(0.0, self.row_end(r), float(self.width), float(self.row_gaps[r]))

    def as_dict(self) -> Dict[str, object]:
        return {
            "width": float(self.width),
            "height": float(self.height),
            "col_widths": self.col_widths.tolist(),
            "row_heights": self.row_heights.tolist(),
            "col_gaps": self.col_gaps.tolist(),
            "row_gaps": self.row_gaps.tolist(),
            "col_starts": self.col_starts.tolist(),
            "row_starts": self.row_starts.tolist(),
        }


def generate_gaps(count: int, base: float, delta: float, rng: RandomSource) -> np.ndarray:
    """Return ``count`` gap sizes jittered uniformly within ``base ± delta``."""

    return np.array([base + uniform(rng, -delta, delta) for _ in range(max(count, 0))], dtype=float)


def cumulative_starts(sizes: np.ndarray, gaps: np.ndarray) -> np.ndarray:
    """Start coordinate of each segment when segments and gaps alternate."""

    starts = np.zeros(sizes.size, dtype=float)
    for i in range(1, sizes.size):
        starts[i] = starts[i - 1] + sizes[i - 1] + gaps[i - 1]
    return starts


def _partition_axis(axis: AxisConfig, available: float, rng: RandomSource) -> np.ndarray:
    weights = position_weights(axis.count, axis.center_power)
    return allocate(
        axis.count,
        available,
        axis.min_size,
        axis.max_size,
        axis.spread,
        weights,
        rng,
    )


def build_layout(config: LayoutConfig, rng: RandomSource) -> Layout:
    """Partition the canvas described by ``config``.

    Draw order is fixed: column gaps, row gaps, column widths, row heights.
    """

    col_gaps = generate_gaps(config.columns.count - 1, config.columns.gap_base, config.columns.gap_delta, rng)
    row_gaps = generate_gaps(config.rows.count - 1, config.rows.gap_base, config.rows.gap_delta, rng)

    avail_w = config.width - float(col_gaps.sum())
    avail_h = config.height - float(row_gaps.sum())
    if avail_w <= 0 or avail_h <= 0:
        logger.warning(
            "Gaps leave no room for cells (available %.3f x %.3f)", avail_w, avail_h
        )

    col_widths = _partition_axis(config.columns, avail_w, rng)
    row_heights = _partition_axis(config.rows, avail_h, rng)

    layout = Layout(
        width=float(config.width),
        height=float(config.height),
        col_widths=_frozen(col_widths),
        row_heights=_frozen(row_heights),
        col_gaps=_frozen(col_gaps),
        row_gaps=_frozen(row_gaps),
        col_starts=_frozen(cumulative_starts(col_widths, col_gaps)),
        row_starts=_frozen(cumulative_starts(row_heights, row_gaps)),
    )
    logger.info(
        "Built %dx%d layout on %.0fx%.0f canvas", layout.cols, layout.rows, layout.width, layout.height
    )
    return layout


def layouts_equal(a: Layout, b: Layout) -> bool:
    fields: List[str] = ["col_widths", "row_heights", "col_gaps", "row_gaps", "col_starts", "row_starts"]
    if a.width != b.width or a.height != b.height:
        return False
    return all(np.array_equal(getattr(a, name), getattr(b, name)) for name in fields)


apply_debug_logging(globals(), logger=logger)
