from .config import (
    AgentOptions,
    AxisConfig,
    BlockOptions,
    ConfigError,
    LayoutConfig,
    get_default_config,
    set_default_config,
)
from .random_source import RandomSource, SequenceRandomSource, make_rng
from .geometry import Block, BlockMode, Rect
from .weights import position_weights
from .partition import Allocation, allocate, allocate_detailed
from .layout import Layout, build_layout
from .connectors import generate_connectors
from .blocks import BlockSet, generate_blocks
from .agents import LaneAgent, seed_agents, step_agents
from .effects import BandLevels, BlackHole, audio_scaled_sizes, beat_block_colors, evict_agents
from .chase import ChaseGame
from .scene import Composition, Scene, regenerate
from .printer import format_chase, format_scene
from .svg_codegen import generate_svg_code, generate_svg_document

__all__ = [
    'AgentOptions',
    'Allocation',
    'AxisConfig',
    'BandLevels',
    'BlackHole',
    'Block',
    'BlockMode',
    'BlockOptions',
    'BlockSet',
    'ChaseGame',
    'Composition',
    'ConfigError',
    'LaneAgent',
    'Layout',
    'LayoutConfig',
    'RandomSource',
    'Rect',
    'Scene',
    'SequenceRandomSource',
    'allocate',
    'allocate_detailed',
    'audio_scaled_sizes',
    'beat_block_colors',
    'build_layout',
    'evict_agents',
    'format_chase',
    'format_scene',
    'generate_blocks',
    'generate_connectors',
    'generate_svg_code',
    'generate_svg_document',
    'get_default_config',
    'make_rng',
    'position_weights',
    'regenerate',
    'seed_agents',
    'set_default_config',
    'step_agents',
]
