"""Butterworth low-pass and high-pass IIR filters."""

import math

import numpy as np

MAX_FILTER_ORDER = 4


class ButterworthFilter:
    """A stateful Butterworth IIR filter of order 1 to 4.

    kind is 'l' (low-pass) or 'h' (high-pass); only its first character is
    looked at. The filter keeps its input and output history between calls
    to run(), so a signal may be filtered in chunks.
    """

    def __init__(self, order, kind, sample_rate, cutoff_freq):
        if not 1 <= order <= MAX_FILTER_ORDER:
            raise ValueError(
                f"filter order must be 1 to {MAX_FILTER_ORDER}, got {order}")
        if not kind or kind[0] not in ("l", "h"):
            raise ValueError(f"filter kind must be 'l' or 'h', got {kind!r}")
        if sample_rate < 16:
            raise ValueError(f"sample rate must be >= 16, got {sample_rate}")
        if cutoff_freq < 2 or cutoff_freq * 2 >= sample_rate:
            raise ValueError(
                f"cutoff frequency must be 2 to {sample_rate // 2 - 1}, "
                f"got {cutoff_freq}")
        self.order = order
        self.kind = kind[0]
        self.sample_rate = sample_rate
        self.cutoff_freq = cutoff_freq

        n = order
        cutoff = -float(cutoff_freq) / float(sample_rate) * 2.0 * math.pi
        invert = 1.0 if self.kind == "l" else -1.0
        sin_c = math.sin(cutoff)
        cos_c = math.cos(cutoff)

        yf0 = [0.0] * (n + 1)
        yf1 = [0.0] * (n + 1)
        xf = [0.0] * (n + 1)
        yf0[0] = -1.0
        xf[0] = 1.0

        scale = 1.0
        for i in range(1, n + 1):
            angle = (i - 0.5) / n * math.pi
            sin2 = 1.0 - sin_c * math.sin(angle)
            rcof0 = cos_c / sin2
            rcof1 = sin_c * math.cos(angle) / sin2
            for j in range(i, 0, -1):
                yf0[j] += rcof0 * yf0[j - 1] + rcof1 * yf1[j - 1]
                yf1[j] += rcof0 * yf1[j - 1] - rcof1 * yf0[j - 1]
            scale *= sin2 * 2.0 / (1.0 - cos_c * invert)
            xf[i] = xf[i - 1] * invert * float(n - i + 1) / float(i)

        scale = math.sqrt(scale)
        self.b_coeff = [v / scale for v in xf]
        self.a_coeff = [v * (1.0 if i % 2 else -1.0)
                        for i, v in enumerate(yf0)]
        self._x_prev = [0.0] * (n + 1)
        self._y_prev = [0.0] * (n + 1)

    def run(self, samples):
        """Filter the samples and return them as a float32 array."""
        data = np.asarray(samples, dtype=np.float32).ravel()
        b, a = self.b_coeff, self.a_coeff
        x_prev, y_prev = self._x_prev, self._y_prev
        taps = range(1, self.order + 1)
        out = []
        for sample in data.tolist():
            x_prev.insert(0, sample)
            x_prev.pop()
            y_prev.insert(0, 0.0)
            y_prev.pop()
            y = b[0] * x_prev[0]
            for j in taps:
                y += b[j] * x_prev[j] - a[j] * y_prev[j]
            y_prev[0] = y
            out.append(y)
        return np.array(out, dtype=np.float32)