"""Principal component analysis through singular value decomposition."""

import numpy as np

from voxlearn.svd import svd


def pca(a, nc):
    """Project the rows of a onto its first nc principal components.

    a is an m x n array of m observations with n features; the result is
    an m x nc float32 array. nc is capped at n, and a non-positive nc
    gives an m x 0 array. The data is normally centred and scaled to unit
    variance before the call.
    """
    arr = np.asarray(a, dtype=np.float32)
    if arr.ndim != 2:
        raise ValueError(f"expected a 2-D matrix, got {arr.ndim} dimensions")
    m, n = arr.shape
    if nc <= 0:
        return np.zeros((m, 0), dtype=np.float32)
    nc = min(nc, n)
    _, _, vt = svd(arr)
    basis = np.zeros((nc, n), dtype=np.float32)
    rows = min(nc, vt.shape[0])
    basis[:rows] = vt[:rows]
    projected = arr.astype(np.float64) @ basis.T.astype(np.float64)
    return projected.astype(np.float32)