"""Biased allocation of a fixed length among ``n`` slots."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from .logging_utils import apply_debug_logging
from .random_source import RandomSource, draw

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Allocation:
    """Result of :func:`allocate_detailed`.

    ``clamped`` holds the per-slot values before the final uniform rescale,
    ``values`` the rescaled output whose sum equals the requested total.
    """

    values: np.ndarray
    clamped: np.ndarray
    scale: float
    fallback: bool

    def drift(self, min_v: float, max_v: float) -> float:
        """Largest distance any final value sits outside ``[min_v, max_v]``."""

        if self.values.size == 0:
            return 0.0
        below = np.maximum(min_v - self.values, 0.0)
        above = np.maximum(self.values - max_v, 0.0)
        return float(max(below.max(), above.max()))


def allocate_detailed(
    n: int,
    total: float,
    min_v: float,
    max_v: float,
    spread: float,
    weights: Optional[Sequence[float]],
    rng: RandomSource,
) -> Allocation:
    if n <= 0:
        empty = np.zeros(0, dtype=float)
        return Allocation(values=empty, clamped=empty, scale=1.0, fallback=False)

    base = n * min_v
    rest = max(0.0, total - base)
    pos = np.ones(n, dtype=float) if weights is None else np.asarray(weights, dtype=float)
    if pos.shape != (n,):
        raise ValueError(f"expected {n} positional weights, got shape {pos.shape}")

    # One draw per slot, in slot order, so a seeded source is reproducible.
    raw = np.array([draw(rng) ** spread for _ in range(n)], dtype=float) * pos
    total_weight = float(raw.sum())
    fallback = total_weight <= 0.0
    if fallback:
        logger.debug("Degenerate weights for %d slots; falling back to uniform", n)
        raw = np.ones(n, dtype=float)
        total_weight = float(n)

    out = min_v + (raw / total_weight) * rest
    if max_v > min_v:
        out = np.clip(out, min_v, max_v)
    clamped = out.copy()

    current = float(out.sum())
    if current > 0.0:
        scale = total / current
        out = out * scale
    else:
        # Only reachable when both min_v and the budget are zero.
        scale = 1.0
        out = np.full(n, total / n, dtype=float)

    clamped.setflags(write=False)
    out.setflags(write=False)
    return Allocation(values=out, clamped=clamped, scale=scale, fallback=fallback)


def allocate(
    n: int,
    total: float,
    min_v: float,
    max_v: float,
    spread: float,
    weights: Optional[Sequence[float]],
    rng: RandomSource,
) -> np.ndarray:
    """Split ``total`` into ``n`` segments biased by ``weights``.

    Each slot receives ``min_v`` plus a share of the remaining budget
    proportional to ``weights[i] * u ** spread``; values are clamped to
    ``[min_v, max_v]`` and then uniformly rescaled so they sum to ``total``.
    The rescale can push clamped values slightly out of bounds; that is left
    as is so the sum stays exact.
    """

    return allocate_detailed(n, total, min_v, max_v, spread, weights, rng).values


apply_debug_logging(globals(), logger=logger)
