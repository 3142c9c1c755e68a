from typing import Sequence

import numpy as np

from mondrian_grid.layout import Layout, cumulative_starts


def make_layout(
    col_widths: Sequence[float],
    row_heights: Sequence[float],
    col_gaps: Sequence[float] = (),
    row_gaps: Sequence[float] = (),
) -> Layout:
    cw = np.asarray(col_widths, dtype=float)
    rh = np.asarray(row_heights, dtype=float)
    cg = np.asarray(col_gaps, dtype=float)
    rg = np.asarray(row_gaps, dtype=float)
    return Layout(
        width=float(cw.sum() + cg.sum()),
        height=float(rh.sum() + rg.sum()),
        col_widths=cw,
        row_heights=rh,
        col_gaps=cg,
        row_gaps=rg,
        col_starts=cumulative_starts(cw, cg),
        row_starts=cumulative_starts(rh, rg),
    )
