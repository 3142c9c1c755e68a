"""Lane-following chase game played on top of a generated layout.

A runner travels along the gap lanes and may switch to a crossing lane at an
intersection. Ghosts stay on vertical lanes and alternate between chasing the
runner and wandering on a fixed timer. The layout is only read.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Literal, Optional, Sequence

from .agents import HORIZONTAL, VERTICAL, LaneKind, wrap_position
from .layout import Layout
from .logging_utils import apply_debug_logging
from .random_source import RandomSource, coin, randint, sign, uniform

logger = logging.getLogger(__name__)

ChaseMode = Literal["chase", "scatter"]

CHASE: ChaseMode = "chase"
SCATTER: ChaseMode = "scatter"

MODE_PERIOD_MS = 5000.0
FRAME_MS = 1000.0 / 60.0
TURN_PROBABILITY = 0.15
UTURN_PROBABILITY = 0.008
SCATTER_FLIP_PROBABILITY = 0.02
LANE_FILL = 0.8
RUNNER_SPEED = 1.5
GHOST_SPEED = 1.2
GHOST_COLORS = ("#ff0000", "#00ffff", "#ffb8ff")


@dataclass
class Runner:
    kind: LaneKind
    lane: int
    x: float
    y: float
    size: float
    speed: float = RUNNER_SPEED
    direction: int = 1

    @property
    def center(self):
        return (self.x + self.size * 0.5, self.y + self.size * 0.5)


@dataclass
class Ghost:
    """A pursuer bound to vertical lane ``lane``."""

    lane: int
    x: float
    y: float
    size: float
    color: str
    speed: float = GHOST_SPEED
    direction: int = 1


def _vertical_center(layout: Layout, c: int) -> float:
    return layout.col_end(c) + float(layout.col_gaps[c]) * 0.5


def _horizontal_center(layout: Layout, r: int) -> float:
    return layout.row_end(r) + float(layout.row_gaps[r]) * 0.5


def next_mode(mode: ChaseMode) -> ChaseMode:
    return SCATTER if mode == CHASE else CHASE


def seed_runner(layout: Layout, rng: RandomSource) -> Optional[Runner]:
    """Place the runner mid-canvas on a random horizontal lane.

    Returns ``None`` for single-row grids, which have no horizontal lane.
    """

    if layout.rows < 2:
        return None
    r = randint(rng, layout.rows - 1)
    size = float(layout.row_gaps[r]) * LANE_FILL
    return Runner(HORIZONTAL, r, layout.width * 0.5, _horizontal_center(layout, r) - size * 0.5, size)


def seed_ghosts(layout: Layout, rng: RandomSource, colors: Sequence[str] = GHOST_COLORS) -> List[Ghost]:
    """One ghost per colour, each on a random vertical lane at a random height."""

    if layout.cols < 2:
        return []
    ghosts: List[Ghost] = []
    for color in colors:
        c = randint(rng, layout.cols - 1)
        size = float(layout.col_gaps[c]) * LANE_FILL
        y = uniform(rng, 0.0, layout.height)
        direction = sign(rng)
        ghosts.append(Ghost(c, _vertical_center(layout, c) - size * 0.5, y, size, color, direction=direction))
    return ghosts


def step_runner(runner: Runner, layout: Layout, rng: RandomSource, speed_factor: float = 1.0) -> Runner:
    """Move the runner one frame, possibly turning at a crossing or reversing.

    Each crossing lane within one lane-thickness of the runner's centre gets a
    turn draw until one succeeds; a U-turn draw follows every frame.
    """

    v = runner.speed * speed_factor
    if runner.kind == HORIZONTAL:
        runner.x = wrap_position(runner.x + v * runner.direction, runner.size, layout.width)
        for c in range(layout.cols - 1):
            lane_center = _vertical_center(layout, c)
            if abs(runner.center[0] - lane_center) < float(layout.col_gaps[c]) and coin(rng, TURN_PROBABILITY):
                runner.kind = VERTICAL
                runner.lane = c
                runner.x = lane_center - runner.size * 0.5
                runner.direction = sign(rng)
                logger.debug("Runner turned onto vertical lane %d", c)
                break
    else:
        runner.y = wrap_position(runner.y + v * runner.direction, runner.size, layout.height)
        for r in range(layout.rows - 1):
            lane_center = _horizontal_center(layout, r)
            if abs(runner.center[1] - lane_center) < float(layout.row_gaps[r]) and coin(rng, TURN_PROBABILITY):
                runner.kind = HORIZONTAL
                runner.lane = r
                runner.y = lane_center - runner.size * 0.5
                runner.direction = sign(rng)
                logger.debug("Runner turned onto horizontal lane %d", r)
                break

    if coin(rng, UTURN_PROBABILITY):
        runner.direction = -runner.direction
    return runner


def step_ghost(
    ghost: Ghost,
    runner: Runner,
    mode: ChaseMode,
    layout: Layout,
    rng: RandomSource,
    speed_factor: float = 1.0,
) -> Ghost:
    """Move a ghost along its lane: towards the runner in chase mode, randomly otherwise.

    Chase mode consumes no draws; scatter mode consumes one per ghost.
    """

    if mode == CHASE:
        if ghost.y < runner.y:
            ghost.direction = 1
        elif ghost.y > runner.y:
            ghost.direction = -1
    elif coin(rng, SCATTER_FLIP_PROBABILITY):
        ghost.direction = -ghost.direction

    ghost.y = wrap_position(ghost.y + ghost.speed * speed_factor * ghost.direction, ghost.size, layout.height)
    if 0 <= ghost.lane < layout.cols - 1:
        ghost.x = _vertical_center(layout, ghost.lane) - ghost.size * 0.5
    return ghost


class ChaseGame:
    """Runner, ghosts and the chase/scatter timer for one layout.

    :meth:`update` is a no-op when the grid has no horizontal lane to host
    the runner.
    """

    def __init__(
        self,
        layout: Layout,
        runner: Optional[Runner],
        ghosts: List[Ghost],
        rng: RandomSource,
        mode: ChaseMode = CHASE,
    ):
        self.layout = layout
        self.runner = runner
        self.ghosts = ghosts
        self.mode = mode
        self.mode_elapsed = 0.0
        self._rng = rng

    @classmethod
    def seed(cls, layout: Layout, rng: RandomSource) -> "ChaseGame":
        """Draw the runner lane first, then each ghost's lane, height and heading."""

        runner = seed_runner(layout, rng)
        ghosts = seed_ghosts(layout, rng)
        logger.info(
            "Seeded chase game: runner=%s, %d ghost(s)",
            "none" if runner is None else f"{runner.kind}{runner.lane}",
            len(ghosts),
        )
        return cls(layout, runner, ghosts, rng)

    def _advance_timer(self, dt_ms: float) -> None:
        self.mode_elapsed += dt_ms
        if self.mode_elapsed > MODE_PERIOD_MS:
            self.mode = next_mode(self.mode)
            self.mode_elapsed = 0.0
            logger.debug("Ghosts switched to %s mode", self.mode)

    def update(self, dt_ms: float = FRAME_MS, speed_factor: float = 1.0) -> None:
        if self.runner is None:
            return
        self._advance_timer(dt_ms)
        step_runner(self.runner, self.layout, self._rng, speed_factor)
        for ghost in self.ghosts:
            step_ghost(ghost, self.runner, self.mode, self.layout, self._rng, speed_factor)


apply_debug_logging(globals(), logger=logger)

__all__ = [
    "CHASE",
    "ChaseGame",
    "ChaseMode",
    "FRAME_MS",
    "GHOST_COLORS",
    "Ghost",
    "MODE_PERIOD_MS",
    "Runner",
    "SCATTER",
    "next_mode",
    "seed_ghosts",
    "seed_runner",
    "step_ghost",
    "step_runner",
]
