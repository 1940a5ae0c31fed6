"""Delta (and delta-delta) features computed over a window of frames."""

import numpy as np


def calculate_deltas(x, soff, doff, fcnt, wsize):
    """Compute deltas of columns soff..soff+fcnt into columns doff..doff+fcnt.

    x is a 2-D array of frames, one per row, updated in place and returned.
    Frames beyond either end of the sequence contribute nothing.
    """
    rows = x.shape[0]
    src = np.array(x[:, soff:soff + fcnt], dtype=np.float64)
    numerator = np.zeros_like(src)
    for n in range(1, wsize + 1):
        if n < rows:
            numerator[:rows - n] += n * src[n:]
            numerator[n:] -= n * src[:rows - n]
    denominator = 2 * sum(n * n for n in range(1, wsize + 1))
    x[:, doff:doff + fcnt] = numerator / denominator
    return x