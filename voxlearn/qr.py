"""QR decomposition by Householder reflections."""

import numpy as np


def qr(m):
    """Decompose the 2-D matrix m as Q @ R.

    For an r x c matrix with d = min(r, c), returns float32 arrays Q of
    shape (r, d) with orthonormal columns and R of shape (d, c), upper
    triangular.
    """
    a = np.asarray(m, dtype=np.float32)
    if a.ndim != 2:
        raise ValueError(f"expected a 2-D matrix, got {a.ndim} dimensions")
    rows, cols = a.shape
    d = min(rows, cols)
    q = np.eye(rows, dtype=np.float64)
    r = a.astype(np.float64)
    for k in range(d):
        x = r[k:, k].copy()
        v = np.zeros_like(x)
        v[0] = np.linalg.norm(x)
        if x[0] < 0:
            v[0] = -v[0]
        v += x
        vn = np.linalg.norm(v)
        if vn == 0.0:
            # A zero column needs no reflection.
            continue
        v /= vn
        qk = np.eye(rows, dtype=np.float64)
        qk[k:, k:] -= 2.0 * np.outer(v, v)
        r = qk @ r
        q = q @ qk.T
    return q[:, :d].astype(np.float32), r[:d].astype(np.float32)