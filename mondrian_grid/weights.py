"""Positional bias weights for the partitioner."""

from __future__ import annotations

import logging

import numpy as np

from .logging_utils import apply_debug_logging

logger = logging.getLogger(__name__)

WEIGHT_FLOOR = 0.05


def position_weights(n: int, power: float) -> np.ndarray:
    """Return ``n`` centre-biased weights.

    ``t`` runs from 0 at either edge to 1 in the middle; each weight is
    ``t ** power + WEIGHT_FLOOR`` so no slot is ever starved. A single slot has
    no edges and gets weight 1.
    """

    if n <= 0:
        return np.zeros(0, dtype=float)
    if n == 1:
        return np.ones(1, dtype=float)
    mid = (n - 1) / 2.0
    idx = np.arange(n, dtype=float)
    t = 1.0 - np.abs(idx - mid) / mid
    return np.power(t, power) + WEIGHT_FLOOR


apply_debug_logging(globals(), logger=logger)
