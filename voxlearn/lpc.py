"""Linear prediction coefficients: analysis and noise-driven synthesis."""

import numpy as np


def _levinson(x, order):
    """Return (coefficients, error), or None when the analysis fails."""
    if order < 1:
        return None
    n = x.shape[0]
    r = [float(np.dot(x[:max(n - i, 0)], x[i:])) for i in range(order + 1)]
    if r[0] == 0:
        return None
    err = r[0]
    pc = [0.0] * (order + 1)
    pc[0] = 1.0
    for k in range(1, order + 1):
        acc = 0.0
        for i in range(1, k + 1):
            acc -= pc[k - i] * r[i]
        akk = acc / err
        pc[k] = akk
        for i in range(1, k // 2 + 1):
            ai = pc[i]
            aj = pc[k - i]
            pc[i] = ai + akk * aj
            pc[k - i] = aj + akk * ai
        err = err * (1.0 - akk * akk)
        if err <= 0:
            return None
    return pc, err


def compute_lpc(samples, order):
    """Compute order+1 LPC coefficients of the samples.

    Returns (coefficients, error): the coefficients are normalised so that
    the first is 1.0, and error is the residual power. When the signal has
    no power or the recursion fails, all coefficients and the error are 0.
    """
    x = np.asarray(samples, dtype=np.float32).astype(np.float64).ravel()
    coeffs = np.zeros(max(order + 1, 0), dtype=np.float64)
    result = _levinson(x, order)
    if result is None:
        return coeffs, 0.0
    pc, err = result
    coeffs[:] = pc
    return coeffs, float(np.float32(err))


def lpc_synthesis(lpcc, order, sigma, num_samples, rng=None):
    """Synthesise num_samples float32 samples from LPC coefficients.

    The filter is driven by Gaussian noise of standard deviation sigma;
    rng is a numpy Generator (a fresh one is made when None). The first
    order samples are zero, and a zero sigma gives silence.
    """
    out = np.zeros(num_samples, dtype=np.float32)
    if sigma == 0.0 or num_samples <= 0:
        return out
    if rng is None:
        rng = np.random.default_rng()
    sig = float(sigma) * rng.standard_normal(num_samples)
    history = [0.0] * num_samples
    for m in range(order, num_samples):
        sample = sig[0]
        for n in range(1, order + 1):
            sample += sig[m - n] - lpcc[n] * history[m - n]
        history[m] = float(np.float32(sample))
    out[:] = history
    return (out * 0.03).astype(np.float32)