"""Small squares that travel along the gap lanes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Literal

from .config import AgentOptions
from .geometry import Rect
from .layout import Layout
from .logging_utils import apply_debug_logging
from .random_source import RandomSource, choice, coin, sign, uniform

logger = logging.getLogger(__name__)

LaneKind = Literal["v", "h"]

VERTICAL: LaneKind = "v"
HORIZONTAL: LaneKind = "h"


@dataclass
class LaneAgent:
    """A square confined to one lane.

    ``kind`` is ``"v"`` for lanes between columns (the agent moves along
    ``y``) and ``"h"`` for lanes between rows (moves along ``x``). ``lane`` is
    the gap index. Position is mutated by :func:`step_agents`.
    """

    kind: LaneKind
    lane: int
    x: float
    y: float
    size: float
    color: str
    speed: float

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.size, self.size)

    @property
    def center(self):
        return (self.x + self.size * 0.5, self.y + self.size * 0.5)

    @property
    def position(self) -> float:
        """Coordinate along the lane axis."""

        return self.y if self.kind == VERTICAL else self.x


def _scatter_along(length: float, side: float, options: AgentOptions, rng: RandomSource) -> Iterable[tuple]:
    """Yield ``(pos, color, speed)`` for each square dropped on a lane.

    Every iteration advances by at least ``side``, so a positive lane width
    guarantees termination.
    """

    pos = 0.0
    while pos + side <= length:
        if coin(rng, options.fill_prob):
            color = choice(rng, options.palette)
            speed = uniform(rng, options.speed_min, options.speed_max) * sign(rng)
            yield pos, color, speed
        pos += side + uniform(rng, options.spacing_min, options.spacing_max)


def seed_agents(layout: Layout, options: AgentOptions, rng: RandomSource) -> List[LaneAgent]:
    """Scatter agents over every vertical lane, then every horizontal lane."""

    agents: List[LaneAgent] = []

    for c in range(layout.cols - 1):
        side = float(layout.col_gaps[c])
        if side <= 0:
            logger.warning("Skipping vertical lane %d with non-positive width %.3f", c, side)
            continue
        x0 = layout.col_end(c)
        for y, color, speed in _scatter_along(layout.height, side, options, rng):
            agents.append(LaneAgent(VERTICAL, c, x0, y, side, color, speed))

    for r in range(layout.rows - 1):
        side = float(layout.row_gaps[r])
        if side <= 0:
            logger.warning("Skipping horizontal lane %d with non-positive height %.3f", r, side)
            continue
        y0 = layout.row_end(r)
        for x, color, speed in _scatter_along(layout.width, side, options, rng):
            agents.append(LaneAgent(HORIZONTAL, r, x, y0, side, color, speed))

    logger.info("Seeded %d lane agent(s)", len(agents))
    return agents


def wrap_position(pos: float, size: float, limit: float) -> float:
    """Toroidal wrap: past ``limit`` re-enters at ``-size`` and vice versa."""

    if pos > limit:
        return -size
    if pos < -size:
        return limit
    return pos


def step_agents(
    agents: List[LaneAgent],
    width: float,
    height: float,
    speed_factor: float = 1.0,
) -> List[LaneAgent]:
    """Advance every agent by ``speed * speed_factor`` along its lane, in place."""

    for agent in agents:
        v = agent.speed * speed_factor
        if agent.kind == VERTICAL:
            agent.y = wrap_position(agent.y + v, agent.size, height)
        else:
            agent.x = wrap_position(agent.x + v, agent.size, width)
    return agents


apply_debug_logging(globals(), logger=logger, skip={"wrap_position"})
