"""Full regeneration pipeline and the holder that publishes its result."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from .agents import LaneAgent, seed_agents, step_agents
from .blocks import BlockSet, generate_blocks
from .config import LayoutConfig, get_default_config
from .connectors import generate_connectors
from .geometry import Rect
from .layout import Layout, build_layout
from .random_source import RandomSource, make_rng

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Scene:
    """Everything one regeneration produces.

    Geometry is immutable. ``agents`` is the only mutable part: the frame
    loop moves agents in place via :meth:`Composition.step`.
    """

    config: LayoutConfig
    layout: Layout
    connectors: Tuple[Rect, ...]
    blocks: BlockSet
    agents: List[LaneAgent]
    seed: Optional[int] = None


def regenerate(
    config: Optional[LayoutConfig] = None,
    *,
    seed: Optional[int] = None,
    rng: Optional[RandomSource] = None,
) -> Scene:
    """Build a fresh scene: gaps, segments, connectors, blocks, agents.

    ``rng`` takes precedence over ``seed``; with neither, a fresh unseeded
    generator is used.
    """

    config = config or get_default_config()
    config.validate()
    if rng is None:
        rng = make_rng(seed)

    layout = build_layout(config, rng)
    connectors = generate_connectors(config.connector_count, layout, rng)
    blocks = generate_blocks(layout, config.blocks, rng)
    agents = seed_agents(layout, config.agents, rng)

    logger.info(
        "Regenerated scene: %d connector(s), %d block(s), %d overlay(s), %d agent(s)",
        len(connectors),
        len(blocks.primary),
        len(blocks.overlay),
        len(agents),
    )
    return Scene(
        config=config,
        layout=layout,
        connectors=tuple(connectors),
        blocks=blocks,
        agents=agents,
        seed=seed,
    )


class Composition:
    """Holds the current scene for a frame loop.

    :meth:`regenerate` builds the replacement completely before swapping the
    reference, so a reader never sees a half-built scene. The random source is
    shared across regenerations and is not reentrant.
    """

    def __init__(
        self,
        config: Optional[LayoutConfig] = None,
        *,
        seed: Optional[int] = None,
        rng: Optional[RandomSource] = None,
    ):
        self.config = config or get_default_config()
        self.seed = seed
        self._rng = rng if rng is not None else make_rng(seed)
        self.moving = True
        self.generation = 0
        self._scene = self._build(self.seed)

    def _build(self, seed: Optional[int]) -> Scene:
        return replace(regenerate(self.config, rng=self._rng), seed=seed)

    @property
    def scene(self) -> Scene:
        return self._scene

    def regenerate(self) -> Scene:
        # Later scenes continue the shared stream; no seed alone reproduces them.
        scene = self._build(None)
        self._scene = scene
        self.generation += 1
        logger.info("Composition regenerated (generation %d)", self.generation)
        return scene

    def toggle_motion(self) -> bool:
        self.moving = not self.moving
        return self.moving

    def step(self, speed_factor: float = 1.0) -> Scene:
        scene = self._scene
        if self.moving:
            step_agents(scene.agents, scene.layout.width, scene.layout.height, speed_factor)
        return scene
