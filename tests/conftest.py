import pytest

from mondrian_grid.layout import Layout

from helpers import make_layout


@pytest.fixture
def small_layout() -> Layout:
    # 2x2 grid on a 100x100 canvas: columns 27.5 | 10 | 62.5, rows 45 | 10 | 45.
    return make_layout([27.5, 62.5], [45.0, 45.0], [10.0], [10.0])
