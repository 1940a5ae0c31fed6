"""Data set statistics, normalisation and class weighting."""

import numpy as np


def summary_stats(x):
    """Return per-column mean and standard deviation, excluding the last column.

    x is an array of shape (num_vectors, D) whose last column is the bias;
    both results are float32 arrays of length D - 1 (zeros if x is empty).
    """
    data = np.asarray(x, dtype=np.float32)
    dim = data.shape[1] - 1
    if data.shape[0] <= 0:
        return np.zeros(dim, np.float32), np.zeros(dim, np.float32)
    values = data[:, :dim].astype(np.float64)
    mean = (values.sum(axis=0) / data.shape[0]).astype(np.float32)
    diff = values - mean.astype(np.float64)
    var = (diff * diff).sum(axis=0) / data.shape[0]
    return mean, np.sqrt(var).astype(np.float32)


def normalize_data(x, mean, stddev):
    """Normalise x in place, excluding the last column, and return it.

    Columns with zero standard deviation become zero.
    """
    dim = x.shape[1] - 1
    mean = np.asarray(mean, dtype=np.float32)[:dim]
    stddev = np.asarray(stddev, dtype=np.float32)[:dim]
    positive = stddev > 0.0
    safe = np.where(positive, stddev, 1.0)
    x[:, :dim] = np.where(positive, (x[:, :dim] - mean) / safe, 0.0)
    return x


def class_stats(y):
    """Return class weights from one-hot labels y of shape (num_vectors, K).

    Each present class gets num_vectors / count, and the weights are then
    scaled to sum to K. Absent classes get weight zero.
    """
    labels = np.asarray(y, dtype=np.float32)
    num_vectors, k = labels.shape
    counts = labels.astype(np.float64).sum(axis=0)
    weights = np.zeros(k, dtype=np.float64)
    present = counts > 0
    weights[present] = num_vectors / counts[present]
    with np.errstate(divide="ignore", invalid="ignore"):
        weights = k * weights / weights.sum()
    return weights.astype(np.float32)