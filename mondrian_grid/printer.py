from typing import Iterable, List

from .chase import ChaseGame
from .geometry import Rect
from .scene import Scene


def number_str(value: float) -> str:
    return f"{float(value):.2f}"


def numbers_str(values: Iterable[float]) -> str:
    return "[" + ", ".join(number_str(v) for v in values) + "]"


def rect_str(rect: Rect) -> str:
    return f"({number_str(rect.x)}, {number_str(rect.y)}) {number_str(rect.w)}x{number_str(rect.h)}"


def format_scene(scene: Scene, *, verbose: bool = False) -> str:
    layout = scene.layout
    lines: List[str] = []
    seed = "none" if scene.seed is None else str(scene.seed)
    lines.append(
        f"canvas {number_str(layout.width)}x{number_str(layout.height)} "
        f"grid {layout.cols}x{layout.rows} seed={seed}"
    )
    lines.append(f"columns {numbers_str(layout.col_widths)}")
    lines.append(f"column gaps {numbers_str(layout.col_gaps)}")
    lines.append(f"rows {numbers_str(layout.row_heights)}")
    lines.append(f"row gaps {numbers_str(layout.row_gaps)}")
    lines.append(f"connectors {len(scene.connectors)}")
    lines.append(f"blocks {len(scene.blocks.primary)}")
    lines.append(f"overlays {len(scene.blocks.overlay)}")
    vertical = sum(1 for agent in scene.agents if agent.kind == "v")
    lines.append(f"agents {len(scene.agents)} (vertical={vertical}, horizontal={len(scene.agents) - vertical})")
    if verbose:
        for rect in scene.connectors:
            lines.append(f"  connector {rect_str(rect)}")
        for block in scene.blocks.all():
            lines.append(f"  block r{block.row}c{block.col} {block.mode} {block.color} {rect_str(block.rect)}")
        for agent in scene.agents:
            lines.append(
                f"  agent {agent.kind}{agent.lane} {agent.color} {rect_str(agent.rect)} speed={agent.speed:+.3f}"
            )
    return "\n".join(lines)


def format_chase(game: ChaseGame) -> str:
    lines: List[str] = [f"chase mode={game.mode} ghosts {len(game.ghosts)}"]
    runner = game.runner
    if runner is None:
        lines.append("  runner none")
    else:
        lines.append(
            f"  runner {runner.kind}{runner.lane} ({number_str(runner.x)}, {number_str(runner.y)}) "
            f"dir={runner.direction:+d}"
        )
    for ghost in game.ghosts:
        lines.append(f"  ghost v{ghost.lane} {ghost.color} y={number_str(ghost.y)} dir={ghost.direction:+d}")
    return "\n".join(lines)
