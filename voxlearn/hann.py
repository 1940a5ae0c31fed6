"""Hann window applied to frames of audio samples."""

import numpy as np

MAX_WINDOW_SIZE = 1024


class HannWindow:
    """A Hann window of an even size between 2 and 1024."""

    def __init__(self, win_size):
        if win_size < 2 or win_size > MAX_WINDOW_SIZE:
            raise ValueError(
                f"window size must be 2 to {MAX_WINDOW_SIZE}, got {win_size}")
        if win_size % 2 != 0:
            raise ValueError(f"window size must be even, got {win_size}")
        self.win_size = win_size
        n = np.arange(win_size // 2, dtype=np.float64)
        self.coeff = 0.5 * (1.0 - np.cos((2.0 * np.pi * n) / (win_size - 1)))
        self._full = np.concatenate([self.coeff, self.coeff[::-1]])

    def apply(self, data):
        """Return the frame multiplied by the window, as float32."""
        frame = np.asarray(data, dtype=np.float32).ravel()
        if frame.shape[0] != self.win_size:
            raise ValueError(
                f"frame has {frame.shape[0]} samples, "
                f"window size is {self.win_size}")
        return (frame.astype(np.float64) * self._full).astype(np.float32)