"""Conversion between 16-bit PCM samples and floating point samples."""

import numpy as np

INT16_MAX = 32767


def pcm_to_float(samples):
    """Scale int16 PCM samples to float32 values, dividing by 32767."""
    pcm = np.asarray(samples, dtype=np.int16)
    return pcm.astype(np.float32) / np.float32(INT16_MAX)


def float_to_pcm(samples):
    """Convert float samples to int16 PCM.

    Each sample is scaled by 32769, clamped to the range [-1, 1] and then
    truncated toward zero.
    """
    data = np.asarray(samples, dtype=np.float32)
    scaled = data * np.float32(INT16_MAX + 2.0)
    return np.clip(scaled, -1.0, 1.0).astype(np.int16)