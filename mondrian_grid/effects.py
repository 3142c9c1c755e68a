"""Per-frame transforms applied on top of a generated scene.

Nothing here touches layout generation; each helper reads agents and returns
a derived value.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Dict, List, Sequence

from .agents import LaneAgent
from .blocks import BlockSet
from .config import AGENT_PALETTE

logger = logging.getLogger(__name__)

BLACK_HOLE_MIN = 15.0
BLACK_HOLE_MAX = 120.0
AMPLITUDE_SCALE = 3.0
BEAT_DECAY = 0.92
BEAT_PULSE_THRESHOLD = 0.5
BEAT_PULSE_GAIN = 0.3
BLOCK_BRIGHTEN_THRESHOLD = 0.3
BLOCK_BRIGHTEN_GAIN = 0.2
BRIGHTEN_STEP = 50.0
BLACK_HOLE_RADIUS = 45.0


def clamp_radius(radius: float) -> float:
    return min(max(radius, BLACK_HOLE_MIN), BLACK_HOLE_MAX)


@dataclass(frozen=True)
class BlackHole:
    x: float
    y: float
    radius: float = BLACK_HOLE_RADIUS

    def __post_init__(self) -> None:
        object.__setattr__(self, "radius", clamp_radius(self.radius))

    def moved_to(self, x: float, y: float) -> "BlackHole":
        return replace(self, x=x, y=y)

    def resized(self, delta: float) -> "BlackHole":
        return replace(self, radius=clamp_radius(self.radius + delta))

    def swallows(self, agent: LaneAgent) -> bool:
        cx, cy = agent.center
        dx = cx - self.x
        dy = cy - self.y
        return dx * dx + dy * dy < self.radius * self.radius


def evict_agents(agents: Sequence[LaneAgent], hole: BlackHole) -> List[LaneAgent]:
    """Return the agents whose centre is outside ``hole``."""

    kept = [agent for agent in agents if not hole.swallows(agent)]
    if len(kept) != len(agents):
        logger.debug("Black hole at (%.1f, %.1f) swallowed %d agent(s)", hole.x, hole.y, len(agents) - len(kept))
    return kept


@dataclass(frozen=True)
class BandLevels:
    """Normalised band energies in ``[0, 1]``."""

    bass: float = 0.0
    mid: float = 0.0
    treble: float = 0.0

    @classmethod
    def from_energies(cls, bass: float, mid: float, treble: float, full_scale: float = 255.0) -> "BandLevels":
        def norm(value: float) -> float:
            return min(max(value / full_scale, 0.0), 1.0)

        return cls(norm(bass), norm(mid), norm(treble))


def band_for_colors(palette: Sequence[str] = AGENT_PALETTE) -> Dict[str, str]:
    """Map the first three palette colours to bass, mid and treble."""

    return dict(zip(palette, ("bass", "mid", "treble")))


def decay_beat_flash(flash: float, detected: bool, decay: float = BEAT_DECAY) -> float:
    return 1.0 if detected else flash * decay


def audio_scaled_sizes(
    agents: Sequence[LaneAgent],
    levels: BandLevels,
    palette: Sequence[str] = AGENT_PALETTE,
    amplitude_scale: float = AMPLITUDE_SCALE,
    beat_flash: float = 0.0,
) -> List[float]:
    """Display size of each agent given the current band levels.

    Agents whose colour is not in ``palette`` keep their seeded size (before
    the beat pulse).
    """

    bands = band_for_colors(palette)
    pulse = 1.0 + beat_flash * BEAT_PULSE_GAIN if beat_flash > BEAT_PULSE_THRESHOLD else 1.0
    sizes: List[float] = []
    for agent in agents:
        band = bands.get(agent.color)
        energy = 1.0 if band is None else 1.0 + getattr(levels, band) * amplitude_scale
        sizes.append(agent.size * energy * pulse)
    return sizes


def block_brightness(beat_flash: float) -> float:
    """Brightness factor for colour blocks; ``1.0`` unless the beat is strong enough."""

    if beat_flash > BLOCK_BRIGHTEN_THRESHOLD:
        return 1.0 + beat_flash * BLOCK_BRIGHTEN_GAIN
    return 1.0


def brighten_color(color: str, factor: float) -> str:
    """Lift each channel of a ``#rrggbb`` colour by ``(factor - 1) * 50``, saturating at 255."""

    if factor <= 1.0:
        return color
    value = color.strip().lstrip("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    if len(value) != 6:
        raise ValueError(f"expected a hex colour, got {color!r}")
    lift = (factor - 1.0) * BRIGHTEN_STEP
    channels = [min(255, round(int(value[i:i + 2], 16) + lift)) for i in (0, 2, 4)]
    return "#" + "".join(f"{channel:02x}" for channel in channels)


def beat_block_colors(blocks: BlockSet, beat_flash: float) -> List[str]:
    """Display colour of every block in :meth:`BlockSet.all` order."""

    factor = block_brightness(beat_flash)
    return [brighten_color(block.color, factor) for block in blocks.all()]


__all__ = [
    "AMPLITUDE_SCALE",
    "BEAT_DECAY",
    "BLACK_HOLE_MAX",
    "BLACK_HOLE_MIN",
    "BLACK_HOLE_RADIUS",
    "BandLevels",
    "BlackHole",
    "audio_scaled_sizes",
    "band_for_colors",
    "beat_block_colors",
    "block_brightness",
    "brighten_color",
    "clamp_radius",
    "decay_beat_flash",
    "evict_agents",
]
