"""White bridges that fill single gap segments between neighbouring cells."""

from __future__ import annotations

import logging
from typing import List

from .geometry import Rect
from .layout import Layout
from .logging_utils import apply_debug_logging
from .random_source import RandomSource, coin, randint

logger = logging.getLogger(__name__)


def horizontal_connector(layout: Layout, r: int, c: int) -> Rect:
    """Fill the column gap ``c`` over the height of row ``r``."""

    return Rect(
        layout.col_end(c),
        float(layout.row_starts[r]),
        float(layout.col_gaps[c]),
        float(layout.row_heights[r]),
    )


def vertical_connector(layout: Layout, r: int, c: int) -> Rect:
    """Fill the row gap ``r`` over the width of column ``c``."""

    return Rect(
        float(layout.col_starts[c]),
        layout.row_end(r),
        float(layout.col_widths[c]),
        float(layout.row_gaps[r]),
    )


def generate_connectors(count: int, layout: Layout, rng: RandomSource) -> List[Rect]:
    """Pick ``count`` gap segments at random and return their rectangles.

    Duplicates and overlaps are kept. A grid with a single column has no
    column gaps, so only vertical connectors can be drawn there (and the
    reverse for a single row).
    """

    can_horizontal = layout.cols > 1
    can_vertical = layout.rows > 1
    connectors: List[Rect] = []
    if not (can_horizontal or can_vertical):
        logger.debug("1x1 grid has no gaps; skipping %d connectors", count)
        return connectors

    for _ in range(count):
        horizontal = coin(rng)
        if horizontal and not can_horizontal:
            horizontal = False
        elif not horizontal and not can_vertical:
            horizontal = True
        if horizontal:
            r = randint(rng, layout.rows)
            c = randint(rng, layout.cols - 1)
            connectors.append(horizontal_connector(layout, r, c))
        else:
            c = randint(rng, layout.cols)
            r = randint(rng, layout.rows - 1)
            connectors.append(vertical_connector(layout, r, c))

    logger.info("Generated %d connector(s)", len(connectors))
    return connectors


apply_debug_logging(globals(), logger=logger)
