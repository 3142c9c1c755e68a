import itertools

import numpy as np
import pytest

from mondrian_grid.config import AxisConfig, LayoutConfig
from mondrian_grid.layout import build_layout, cumulative_starts, generate_gaps, layouts_equal
from mondrian_grid.random_source import SequenceRandomSource


def _default_layout(seed: int = 0):
    return build_layout(LayoutConfig(), np.random.default_rng(seed))


@pytest.mark.parametrize("seed", [0, 5, 2024])
def test_columns_and_gaps_fill_canvas_exactly(seed):
    layout = _default_layout(seed)
    assert layout.cols == 10 and layout.rows == 10
    assert layout.col_gaps.shape == (9,)
    assert layout.row_gaps.shape == (9,)
    assert float(layout.col_widths.sum() + layout.col_gaps.sum()) == pytest.approx(900.0, rel=1e-9)
    assert float(layout.row_heights.sum() + layout.row_gaps.sum()) == pytest.approx(900.0, rel=1e-9)


@pytest.mark.parametrize("seed", [0, 5, 2024])
def test_cells_and_gaps_pack_tightly(seed):
    layout = _default_layout(seed)
    for c in range(layout.cols - 1):
        expected = layout.col_starts[c] + layout.col_widths[c] + layout.col_gaps[c]
        assert layout.col_starts[c + 1] == pytest.approx(expected, abs=1e-9)
    for r in range(layout.rows - 1):
        expected = layout.row_starts[r] + layout.row_heights[r] + layout.row_gaps[r]
        assert layout.row_starts[r + 1] == pytest.approx(expected, abs=1e-9)
    assert layout.col_starts[0] == 0.0
    assert layout.col_end(layout.cols - 1) == pytest.approx(900.0, abs=1e-9)
    assert layout.row_end(layout.rows - 1) == pytest.approx(900.0, abs=1e-9)


def test_gaps_stay_within_jitter():
    layout = _default_layout(11)
    assert np.all(layout.col_gaps >= 12.0) and np.all(layout.col_gaps <= 18.0)
    assert np.all(layout.row_gaps >= 12.0) and np.all(layout.row_gaps <= 18.0)


def test_cells_never_overlap_each_other_or_lanes():
    layout = _default_layout(8)
    cells = [rect for _, _, rect in layout.cells()]
    assert len(cells) == 100
    for a, b in itertools.combinations(cells, 2):
        assert not a.overlaps(b)
    lanes = [layout.vertical_lane(c) for c in range(layout.cols - 1)]
    lanes += [layout.horizontal_lane(r) for r in range(layout.rows - 1)]
    for cell in cells:
        for lane in lanes:
            assert not cell.overlaps(lane)


def test_layout_arrays_are_read_only():
    layout = _default_layout(1)
    with pytest.raises(ValueError):
        layout.col_widths[0] = 1.0
    with pytest.raises(ValueError):
        layout.row_starts[0] = 1.0


def test_same_seed_reproduces_layout():
    assert layouts_equal(_default_layout(77), _default_layout(77))
    assert not layouts_equal(_default_layout(77), _default_layout(78))


def test_scripted_build_matches_hand_computation():
    axis = AxisConfig(count=2, gap_base=10.0, gap_delta=0.0, min_size=10.0, max_size=80.0, center_power=1.0, spread=1.0)
    config = LayoutConfig(width=100.0, height=100.0, columns=axis, rows=axis)
    # column gap, row gap, two column draws, two row draws
    rng = SequenceRandomSource([0.5, 0.5, 0.25, 0.75, 0.5, 0.5])

    layout = build_layout(config, rng)

    assert rng.remaining == 0
    assert layout.col_gaps.tolist() == [10.0]
    assert layout.row_gaps.tolist() == [10.0]
    assert layout.col_widths == pytest.approx([27.5, 62.5])
    assert layout.row_heights == pytest.approx([45.0, 45.0])
    assert layout.col_starts == pytest.approx([0.0, 37.5])
    assert layout.row_starts == pytest.approx([0.0, 55.0])


def test_configurable_grid_size():
    config = LayoutConfig(
        width=600.0,
        height=300.0,
        columns=AxisConfig(count=4, min_size=30.0, max_size=250.0),
        rows=AxisConfig(count=3, min_size=30.0, max_size=150.0, center_power=2.0, spread=1.5),
    )
    layout = build_layout(config, np.random.default_rng(4))
    assert layout.cols == 4 and layout.rows == 3
    assert layout.col_end(3) == pytest.approx(600.0)
    assert layout.row_end(2) == pytest.approx(300.0)


def test_single_column_takes_full_width():
    config = LayoutConfig(columns=AxisConfig(count=1))
    layout = build_layout(config, np.random.default_rng(0))
    assert layout.col_gaps.size == 0
    assert layout.col_widths.tolist() == pytest.approx([900.0])


def test_generate_gaps_draws_symmetric_jitter():
    rng = SequenceRandomSource([0.0, 0.5, 0.999])
    gaps = generate_gaps(3, 15.0, 3.0, rng)
    assert gaps == pytest.approx([12.0, 15.0, 17.994])


def test_cumulative_starts_skips_last_gap():
    starts = cumulative_starts(np.array([10.0, 20.0, 30.0]), np.array([1.0, 2.0]))
    assert starts.tolist() == [0.0, 11.0, 33.0]


def test_lanes_sit_between_cells(small_layout):
    lane = small_layout.vertical_lane(0)
    assert (lane.x, lane.y, lane.w, lane.h) == (27.5, 0.0, 10.0, 100.0)
    lane = small_layout.horizontal_lane(0)
    assert (lane.x, lane.y, lane.w, lane.h) == (0.0, 45.0, 100.0, 10.0)
