"""Coloured strips inside cells plus the nested overlay pass."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from .config import BlockOptions
from .geometry import EQUAL_HEIGHT, EQUAL_WIDTH, Block, BlockMode, Rect, opposite_mode
from .layout import Layout
from .logging_utils import apply_debug_logging
from .random_source import RandomSource, choice, coin, draw, uniform

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BlockSet:
    primary: Tuple[Block, ...] = field(default_factory=tuple)
    overlay: Tuple[Block, ...] = field(default_factory=tuple)

    def all(self) -> Iterator[Block]:
        """Blocks in draw order: every primary, then every overlay."""

        yield from self.primary
        yield from self.overlay

    def __len__(self) -> int:
        return len(self.primary) + len(self.overlay)


def choose_mode(w: float, h: float, aspect_thresh: float, rng: RandomSource) -> BlockMode:
    """Wide cells get equal-height strips, tall cells equal-width ones.

    Near-square cells flip a coin; only that case consumes a draw.
    """

    if h > 0 and w / h >= aspect_thresh:
        return EQUAL_HEIGHT
    if w > 0 and h / w >= aspect_thresh:
        return EQUAL_WIDTH
    return EQUAL_HEIGHT if coin(rng) else EQUAL_WIDTH


def place_strip(
    parent: Rect,
    mode: BlockMode,
    min_frac: float,
    max_frac: float,
    rng: RandomSource,
) -> Rect:
    """Return a strip of ``mode`` inside ``parent``.

    The spanning dimension is copied from the parent; the other is drawn as a
    fraction of the parent and offset so the strip never leaves it.
    """

    if mode == EQUAL_HEIGHT:
        w = uniform(rng, min_frac * parent.w, max_frac * parent.w)
        x = parent.x + uniform(rng, 0.0, parent.w - w)
        return Rect(x, parent.y, w, parent.h)
    h = uniform(rng, min_frac * parent.h, max_frac * parent.h)
    y = parent.y + uniform(rng, 0.0, parent.h - h)
    return Rect(parent.x, y, parent.w, h)


def generate_primary_blocks(layout: Layout, options: BlockOptions, rng: RandomSource) -> List[Block]:
    primary: List[Block] = []
    for r, c, cell in layout.cells():
        if draw(rng) > options.prob:
            continue
        color = choice(rng, options.palette)
        mode = choose_mode(cell.w, cell.h, options.aspect_thresh, rng)
        rect = place_strip(cell, mode, options.min_frac, options.max_frac, rng)
        primary.append(Block(rect=rect, color=color, mode=mode, row=r, col=c))
    return primary


def generate_overlay_blocks(
    primary: List[Block], options: BlockOptions, rng: RandomSource
) -> List[Block]:
    overlay: List[Block] = []
    for parent in primary:
        if draw(rng) > options.overlay_prob:
            continue
        alternatives = [color for color in options.palette if color != parent.color]
        color = choice(rng, alternatives)
        mode = opposite_mode(parent.mode)
        rect = place_strip(parent.rect, mode, options.min_frac, options.max_frac, rng)
        overlay.append(Block(rect=rect, color=color, mode=mode, row=parent.row, col=parent.col))
    return overlay


def generate_blocks(layout: Layout, options: BlockOptions, rng: RandomSource) -> BlockSet:
    primary = generate_primary_blocks(layout, options, rng)
    overlay = generate_overlay_blocks(primary, options, rng)
    logger.info("Generated %d block(s) with %d overlay(s)", len(primary), len(overlay))
    return BlockSet(primary=tuple(primary), overlay=tuple(overlay))


apply_debug_logging(globals(), logger=logger)
