import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

from mondrian_grid import (
    ConfigError,
    Composition,
    format_scene,
    generate_svg_document,
    get_default_config,
    make_rng,
)
from mondrian_grid.chase import ChaseGame
from mondrian_grid.effects import BLACK_HOLE_RADIUS, BlackHole, beat_block_colors, evict_agents
from mondrian_grid.printer import format_chase

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _parse_point(value: Optional[str]):
    if not value:
        return None
    parts = [part.strip() for part in value.split(",") if part.strip()]
    if len(parts) != 2:
        logger.warning("Black hole position needs exactly two coordinates, got %r", value)
        return None
    try:
        return float(parts[0]), float(parts[1])
    except ValueError:
        logger.warning("Black hole position must be numeric, got %r", value)
        return None


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Generate Mondrian-style grid compositions")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a reproducible composition",
    )
    parser.add_argument(
        "--regenerations",
        type=int,
        default=0,
        help="Number of extra regenerations before output (like pressing reset)",
    )
    parser.add_argument(
        "--connectors",
        type=int,
        help="Override the connector count",
    )
    parser.add_argument(
        "--steps",
        type=int,
        default=0,
        help="Advance lane agents by this many frames",
    )
    parser.add_argument(
        "--speed-factor",
        type=float,
        default=1.0,
        help="Global speed multiplier applied while stepping (default: 1.0)",
    )
    parser.add_argument(
        "--black-hole",
        help="Remove agents swallowed by a black hole at X,Y after stepping",
    )
    parser.add_argument(
        "--black-hole-radius",
        type=float,
        default=BLACK_HOLE_RADIUS,
        help="Black hole radius, clamped to [15, 120] (default: 45)",
    )
    parser.add_argument(
        "--beat-flash",
        type=float,
        help="Beat flash level in [0, 1]; strong beats brighten the colour blocks in SVG output",
    )
    parser.add_argument(
        "--chase-steps",
        type=int,
        help="Seed the chase game on the final layout and advance it by this many frames",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="List every connector, block and agent",
    )
    parser.add_argument(
        "--svg-output-path",
        help="Write a standalone SVG document to the given path",
    )
    parser.add_argument(
        "--scale",
        type=float,
        default=1.0,
        help="Scale factor for SVG output (default: 1.0)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    config = get_default_config()
    if args.connectors is not None:
        config = replace(config, connector_count=args.connectors)

    try:
        composition = Composition(config, seed=args.seed)
    except ConfigError as exc:
        logger.error("Invalid configuration: %s", exc)
        raise SystemExit(2)

    for _ in range(max(args.regenerations, 0)):
        composition.regenerate()

    for _ in range(max(args.steps, 0)):
        composition.step(args.speed_factor)
    if args.steps:
        logger.info("Advanced agents by %d step(s) at speed x%.2f", args.steps, args.speed_factor)

    scene = composition.scene
    hole_pos = _parse_point(args.black_hole)
    if hole_pos is not None:
        hole = BlackHole(hole_pos[0], hole_pos[1], args.black_hole_radius)
        kept = evict_agents(scene.agents, hole)
        logger.info("Black hole removed %d agent(s)", len(scene.agents) - len(kept))
        scene.agents[:] = kept

    print(format_scene(scene, verbose=args.verbose))

    if args.chase_steps is not None:
        game = ChaseGame.seed(scene.layout, make_rng(args.seed))
        for _ in range(max(args.chase_steps, 0)):
            game.update(speed_factor=args.speed_factor)
        print(format_chase(game))

    if args.svg_output_path:
        output_path = Path(args.svg_output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing SVG document to %s", output_path)
        title = None if scene.seed is None else f"Composition seed {scene.seed}"
        svg_kwargs = {"scale": args.scale, "title": title}
        if args.beat_flash is not None:
            svg_kwargs["block_colors"] = beat_block_colors(scene.blocks, args.beat_flash)
        document = generate_svg_document(scene, **svg_kwargs)
        output_path.write_text(document, encoding="utf-8")
        print(f"SVG document written to {output_path}")


if __name__ == "__main__":
    main(sys.argv[1:])
