"""Singular value decomposition by Householder bidiagonalisation and QR.

The algorithm follows Golub and Reinsch, "Singular value decomposition and
least squares solutions", Numer. Math. 14, 403-420 (1970).
"""

import math

import numpy as np

SVD_TOL = 3e-23
SVD_EPS = 3e-13
MAX_ITER = 100


def _bidiagonalize(u, m, n):
    """Householder reduction of u (in place) to bidiagonal form.

    Returns (q, e, x, g): the diagonal, the superdiagonal, the largest
    row norm estimate and the last Householder value.
    """
    q = [0.0] * n
    e = [0.0] * n
    g = x = 0.0
    for i in range(n):
        e[i] = g
        l = i + 1

        s = sum(u[j][i] * u[j][i] for j in range(i, m))
        if s < SVD_TOL:
            g = 0.0
        else:
            f = u[i][i]
            g = math.sqrt(s) if f < 0.0 else -math.sqrt(s)
            h = f * g - s
            u[i][i] = f - g
            for j in range(l, n):
                s = sum(u[k][i] * u[k][j] for k in range(i, m))
                f = s / h
                for k in range(i, m):
                    u[k][j] += f * u[k][i]

        q[i] = g
        s = sum(u[i][j] * u[i][j] for j in range(l, n))
        if s < SVD_TOL:
            g = 0.0
        else:
            f = u[i][i + 1]
            g = math.sqrt(s) if f < 0.0 else -math.sqrt(s)
            h = f * g - s
            u[i][i + 1] = f - g
            for j in range(l, n):
                e[j] = u[i][j] / h
            for j in range(l, m):
                s = sum(u[j][k] * u[i][k] for k in range(l, n))
                for k in range(l, n):
                    u[j][k] += s * e[k]

        y = abs(q[i]) + abs(e[i])
        if y > x:
            x = y
    return q, e, x, g


def _accumulate_right(u, vt, e, n, g):
    l = n
    for i in range(n - 1, -1, -1):
        if g != 0.0:
            h = u[i][i + 1] * g
            for j in range(l, n):
                vt[i][j] = u[i][j] / h
            for j in range(l, n):
                s = sum(u[i][k] * vt[j][k] for k in range(l, n))
                for k in range(l, n):
                    vt[j][k] += s * vt[i][k]
        for j in range(l, n):
            vt[j][i] = vt[i][j] = 0.0
        vt[i][i] = 1.0
        g = e[i]
        l = i


def _accumulate_left(u, q, m, n):
    for i in range(n - 1, -1, -1):
        g = q[i]
        l = i + 1
        for j in range(l, n):
            u[i][j] = 0.0
        if g != 0.0:
            h = u[i][i] * g
            for j in range(l, n):
                s = sum(u[k][i] * u[k][j] for k in range(l, m))
                f = s / h
                for k in range(i, m):
                    u[k][j] += f * u[k][i]
            for j in range(i, m):
                u[j][i] /= g
        else:
            for j in range(i, m):
                u[j][i] = 0.0
        u[i][i] += 1.0


def _rotate_columns(mat, rows, a, b, c, s):
    for j in range(rows):
        y = mat[j][a]
        z = mat[j][b]
        mat[j][a] = y * c + z * s
        mat[j][b] = -y * s + z * c


def _diagonalize(u, vt, q, e, x, m, n):
    eps = SVD_EPS * x
    z = 0.0
    for k in range(n - 1, -1, -1):
        for _ in range(MAX_ITER):
            l = k
            while l > 0:
                if abs(e[l]) <= eps or abs(q[l - 1]) <= eps:
                    break
                l -= 1
            if not (abs(e[l]) <= eps or l == 0):
                # cancellation of e[l]
                c = 0.0
                s = 1.0
                for i in range(l, k):
                    f = s * e[i]
                    e[i] = c * e[i]
                    if abs(f) <= eps:
                        break
                    g = q[i]
                    h = math.sqrt(f * f + g * g)
                    q[i] = h
                    c = g / h
                    s = -f / h
                    _rotate_columns(u, m, l - 1, i, c, s)

            z = q[k]
            if l == k:
                break

            # shift from the bottom 2 x 2 minor
            x = q[l]
            y = q[k - 1]
            g = e[k - 1]
            h = e[k]
            f = ((y - z) * (y + z) + (g - h) * (g + h)) / (2 * h * y)
            g = math.sqrt(f * f + 1.0)
            t = f - g if f < 0.0 else f + g
            f = ((x - z) * (x + z) + h * (y / t - h)) / x

            # next QR transformation
            c = s = 1.0
            for i in range(l + 1, k + 1):
                g = e[i]
                y = q[i]
                h = s * g
                g = c * g
                z = math.sqrt(f * f + h * h)
                e[i - 1] = z
                c = f / z
                s = h / z
                f = x * c + g * s
                g = -x * s + g * c
                h = y * s
                y = y * c
                row_a = vt[i - 1]
                row_b = vt[i]
                for j in range(n):
                    xa = row_a[j]
                    zb = row_b[j]
                    row_a[j] = xa * c + zb * s
                    row_b[j] = -xa * s + zb * c
                z = math.sqrt(f * f + h * h)
                q[i - 1] = z
                c = f / z
                s = h / z
                f = c * g + s * y
                x = -s * g + c * y
                _rotate_columns(u, m, i - 1, i, c, s)
            e[l] = 0.0
            e[k] = f
            q[k] = x

        if q[k] < 0.0:
            q[k] = -z
            vt[k] = [-v for v in vt[k]]


def _svd_tall(a):
    """Decompose a tall (m >= n) matrix; returns unordered (u, q, vt)."""
    m, n = a.shape
    u = a.astype(np.float64).tolist()
    vt = [[0.0] * n for _ in range(n)]
    q, e, x, g = _bidiagonalize(u, m, n)
    _accumulate_right(u, vt, e, n, g)
    _accumulate_left(u, q, m, n)
    _diagonalize(u, vt, q, e, x, m, n)
    return np.array(u), np.array(q), np.array(vt)


def svd(a):
    """Decompose the 2-D matrix a as U @ diag(S) @ Vt.

    For an m x n matrix with k = min(m, n), returns float32 arrays U of
    shape (m, k), S of length k holding the non-negative singular values
    in descending order, and Vt of shape (k, n).
    """
    arr = np.asarray(a, dtype=np.float32)
    if arr.ndim != 2:
        raise ValueError(f"expected a 2-D matrix, got {arr.ndim} dimensions")
    m, n = arr.shape
    k = min(m, n)
    if k == 0:
        return (np.zeros((m, k), np.float32), np.zeros(k, np.float32),
                np.zeros((k, n), np.float32))
    if m >= n:
        u, q, vt = _svd_tall(arr)
    else:
        ut, q, vtt = _svd_tall(arr.T)
        u, vt = vtt.T, ut.T
    order = np.argsort(-q, kind="stable")
    return (u[:, order].astype(np.float32),
            q[order].astype(np.float32),
            vt[order, :].astype(np.float32))