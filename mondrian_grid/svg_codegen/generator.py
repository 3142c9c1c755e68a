"""SVG renderer for generated scenes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from ..geometry import Rect
from ..scene import Scene
from .utils import format_number, normalize_color, svg_escape

standalone_tpl = """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="%s" height="%s" viewBox="0 0 %s %s">
%s%s
</svg>
"""

# Paint order: lanes (background), cells, agents, connectors, blocks.
LAYER_ORDER = ("cells", "agents", "connectors", "blocks")


@dataclass
class RectSpec:
    rect: Rect
    color: str


@dataclass
class RenderPlan:
    width: float
    height: float
    background: str
    layers: dict = field(default_factory=lambda: {name: [] for name in LAYER_ORDER})

    def add(self, layer: str, rect: Rect, color: str) -> None:
        self.layers[layer].append(RectSpec(rect, color))


def _build_render_plan(
    scene: Scene,
    agent_sizes: Optional[Sequence[float]],
    block_colors: Optional[Sequence[str]] = None,
) -> RenderPlan:
    layout = scene.layout
    config = scene.config
    plan = RenderPlan(width=layout.width, height=layout.height, background=config.background)

    for _, _, cell in layout.cells():
        plan.add("cells", cell, config.cell_color)

    if agent_sizes is not None and len(agent_sizes) != len(scene.agents):
        raise ValueError(f"expected {len(scene.agents)} agent sizes, got {len(agent_sizes)}")
    for idx, agent in enumerate(scene.agents):
        size = agent.size if agent_sizes is None else float(agent_sizes[idx])
        # Scaled squares stay centred on the lane.
        offset = (size - agent.size) * 0.5
        plan.add("agents", Rect(agent.x - offset, agent.y - offset, size, size), agent.color)

    for rect in scene.connectors:
        plan.add("connectors", rect, config.cell_color)

    blocks = list(scene.blocks.all())
    if block_colors is not None and len(block_colors) != len(blocks):
        raise ValueError(f"expected {len(blocks)} block colours, got {len(block_colors)}")
    for idx, block in enumerate(blocks):
        color = block.color if block_colors is None else block_colors[idx]
        plan.add("blocks", block.rect, color)

    return plan


def _emit_rect(spec: RectSpec) -> str:
    rect = spec.rect
    return (
        f'<rect x="{format_number(rect.x)}" y="{format_number(rect.y)}" '
        f'width="{format_number(rect.w)}" height="{format_number(rect.h)}" '
        f'fill="{normalize_color(spec.color)}"/>'
    )


def _emit_svg_body(plan: RenderPlan, scale: float) -> str:
    lines: List[str] = []
    transform = "" if scale == 1.0 else f' transform="scale({format_number(scale)})"'
    lines.append(f'<g shape-rendering="crispEdges"{transform}>')
    lines.append(
        f'  <rect x="0" y="0" width="{format_number(plan.width)}" height="{format_number(plan.height)}" '
        f'fill="{normalize_color(plan.background)}"/>'
    )
    for layer in LAYER_ORDER:
        specs = plan.layers[layer]
        if not specs:
            continue
        lines.append(f'  <g id="{layer}">')
        lines.extend(f"    {_emit_rect(spec)}" for spec in specs)
        lines.append("  </g>")
    lines.append("</g>")
    return "\n".join(lines)


def generate_svg_code(
    scene: Scene,
    *,
    scale: float = 1.0,
    agent_sizes: Optional[Sequence[float]] = None,
    block_colors: Optional[Sequence[str]] = None,
) -> str:
    """Return the ``<g>`` element drawing ``scene`` in paint order."""

    if not isinstance(scene, Scene):
        raise TypeError("scene must be an instance of Scene")
    if scale <= 0:
        raise ValueError("scale must be positive")
    plan = _build_render_plan(scene, agent_sizes, block_colors)
    return _emit_svg_body(plan, scale)


def generate_svg_document(
    scene: Scene,
    *,
    scale: float = 1.0,
    title: Optional[str] = None,
    agent_sizes: Optional[Sequence[float]] = None,
    block_colors: Optional[Sequence[str]] = None,
) -> str:
    """Render a standalone SVG document."""

    header = ""
    if title:
        header = f"<title>{svg_escape(title.strip())}</title>\n"
    body = generate_svg_code(scene, scale=scale, agent_sizes=agent_sizes, block_colors=block_colors)
    size: Tuple[str, str] = (
        format_number(scene.layout.width * scale),
        format_number(scene.layout.height * scale),
    )
    return standalone_tpl % (size[0], size[1], size[0], size[1], header, body)
