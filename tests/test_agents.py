from collections import defaultdict

import numpy as np
import pytest

from mondrian_grid.agents import HORIZONTAL, VERTICAL, LaneAgent, seed_agents, step_agents, wrap_position
from mondrian_grid.config import RED, AgentOptions, LayoutConfig
from mondrian_grid.layout import build_layout
from mondrian_grid.random_source import SequenceRandomSource

from helpers import make_layout


def _seeded(seed: int):
    rng = np.random.default_rng(seed)
    layout = build_layout(LayoutConfig(), rng)
    return layout, seed_agents(layout, AgentOptions(), rng)


@pytest.mark.parametrize("seed", [0, 1, 17])
def test_agents_fit_their_lane(seed):
    layout, agents = _seeded(seed)
    assert agents
    for agent in agents:
        if agent.kind == VERTICAL:
            assert agent.size == layout.col_gaps[agent.lane]
            assert agent.x == layout.col_end(agent.lane)
            assert 0.0 <= agent.y <= layout.height - agent.size
        else:
            assert agent.kind == HORIZONTAL
            assert agent.size == layout.row_gaps[agent.lane]
            assert agent.y == layout.row_end(agent.lane)
            assert 0.0 <= agent.x <= layout.width - agent.size
        assert 0.6 <= abs(agent.speed) <= 2.0


def test_agents_never_overlap_within_a_lane():
    _, agents = _seeded(4)
    lanes = defaultdict(list)
    for agent in agents:
        lanes[(agent.kind, agent.lane)].append(agent)
    for members in lanes.values():
        positions = sorted(agent.position for agent in members)
        size = members[0].size
        assert all(b - a >= size for a, b in zip(positions, positions[1:]))


def test_scripted_vertical_lane():
    layout = make_layout([40.0, 50.0], [40.0], [10.0], [])
    rng = SequenceRandomSource([
        0.1,  # place at y=0
        0.0,  # red
        0.5,  # speed 0.6 + 0.5 * 1.4
        0.7,  # negative direction
        0.1,  # advance 10 + 10
        0.9,  # skip y=20
        0.0,  # advance 10 + 8 -> 38, 38 + 10 > 40
    ])

    agents = seed_agents(layout, AgentOptions(), rng)

    assert rng.remaining == 0
    assert agents == [LaneAgent(VERTICAL, 0, 40.0, 0.0, 10.0, RED, pytest.approx(-1.3))]


def test_zero_width_lane_is_skipped():
    layout = make_layout([40.0, 50.0], [40.0], [0.0], [])
    assert seed_agents(layout, AgentOptions(), SequenceRandomSource([])) == []


def test_zero_spacing_still_terminates():
    layout = make_layout([40.0, 50.0], [40.0, 40.0], [10.0], [10.0])
    options = AgentOptions(fill_prob=1.0, spacing_min=0.0, spacing_max=0.0)
    agents = seed_agents(layout, options, np.random.default_rng(0))
    vertical = [a for a in agents if a.kind == VERTICAL]
    horizontal = [a for a in agents if a.kind == HORIZONTAL]
    # Lane length 90 with side 10 packs exactly nine squares.
    assert [a.y for a in vertical] == pytest.approx([10.0 * i for i in range(9)])
    assert len(horizontal) == 10


def test_wrap_past_far_edge():
    agent = LaneAgent(HORIZONTAL, 0, 899.0, 100.0, 15.0, RED, 5.0)
    step_agents([agent], 900.0, 900.0, speed_factor=1.0)
    assert agent.x == -15.0


def test_wrap_past_near_edge():
    agent = LaneAgent(VERTICAL, 0, 100.0, -14.0, 15.0, RED, -2.0)
    step_agents([agent], 900.0, 600.0)
    assert agent.y == 600.0


def test_step_scales_speed_and_moves_along_lane_axis_only():
    vertical = LaneAgent(VERTICAL, 0, 50.0, 10.0, 12.0, RED, 1.5)
    horizontal = LaneAgent(HORIZONTAL, 0, 10.0, 50.0, 12.0, RED, -1.0)
    step_agents([vertical, horizontal], 900.0, 900.0, speed_factor=2.0)
    assert (vertical.x, vertical.y) == (50.0, 13.0)
    assert (horizontal.x, horizontal.y) == (8.0, 50.0)


def test_zero_speed_factor_freezes_agents():
    agent = LaneAgent(VERTICAL, 0, 50.0, 10.0, 12.0, RED, 1.5)
    step_agents([agent], 900.0, 900.0, speed_factor=0.0)
    assert agent.y == 10.0


def test_wrap_position_boundaries_are_exclusive():
    assert wrap_position(900.0, 15.0, 900.0) == 900.0
    assert wrap_position(-15.0, 15.0, 900.0) == -15.0
    assert wrap_position(900.1, 15.0, 900.0) == -15.0
