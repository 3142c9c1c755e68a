import numpy as np
import pytest

from mondrian_grid.weights import WEIGHT_FLOOR, position_weights


def test_single_slot_gets_unit_weight():
    weights = position_weights(1, 2.2)
    assert weights.tolist() == [1.0]


def test_empty_request_returns_empty_array():
    assert position_weights(0, 2.0).size == 0


def test_edges_get_floor_and_centre_gets_peak():
    weights = position_weights(11, 2.0)
    assert weights[0] == pytest.approx(WEIGHT_FLOOR)
    assert weights[-1] == pytest.approx(WEIGHT_FLOOR)
    assert weights[5] == pytest.approx(1.0 + WEIGHT_FLOOR)


def test_two_slots_are_both_edges():
    weights = position_weights(2, 3.0)
    assert np.allclose(weights, [WEIGHT_FLOOR, WEIGHT_FLOOR])


@pytest.mark.parametrize("n", [2, 3, 10, 11, 50])
@pytest.mark.parametrize("power", [0.5, 1.0, 2.2, 5.0])
def test_weights_rise_towards_centre(n, power):
    weights = position_weights(n, power)
    assert weights.shape == (n,)
    assert np.all(weights > 0)
    half = (n + 1) // 2
    left = weights[:half]
    assert np.all(np.diff(left) >= 0)
    assert np.allclose(weights, weights[::-1])


def test_higher_power_sharpens_bias():
    soft = position_weights(10, 1.0)
    sharp = position_weights(10, 4.0)
    # Same peak region, but off-centre slots lose more weight.
    assert sharp[2] < soft[2]
    assert sharp[0] == pytest.approx(soft[0])
