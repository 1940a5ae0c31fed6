"""Feature scaling to zero mean and unit standard deviation."""

import numpy as np


class Scaler:
    """Normalises sample vectors column by column.

    In standard mode the statistics are computed afresh from each data set
    passed with calc set; in batch mode they are running statistics updated
    sample by sample. With exc_last set, the last column (the bias) is
    neither measured nor scaled. dim is the number of columns.
    """

    def __init__(self, batch, dim, exc_last=False):
        if dim < 1:
            raise ValueError(f"dimension must be positive, got {dim}")
        self.batch = bool(batch)
        self.dim = dim
        self.exc_last = 1 if exc_last else 0
        self.count = 0
        self.mean = np.zeros(dim, dtype=np.float32)
        self.var = np.zeros(dim, dtype=np.float32)

    @property
    def _cols(self):
        return self.dim - self.exc_last

    def normalize(self, data, calc=True):
        """Normalise data (num x dim) and return it.

        A float32 array is updated in place. With calc set, the stored
        statistics are first updated from the data. Nothing is scaled while
        fewer than two samples have been measured.
        """
        if isinstance(data, np.ndarray) and data.dtype == np.float32:
            arr = data
        else:
            arr = np.array(data, dtype=np.float32)
        if arr.ndim != 2 or arr.shape[1] != self.dim:
            raise ValueError(
                f"data must have shape (num, {self.dim}), got {arr.shape}")
        if calc:
            if self.batch:
                self._update_running(arr)
            else:
                self._compute(arr)
        self._apply(arr)
        return arr

    def _compute(self, arr):
        cols = self._cols
        num = arr.shape[0]
        if self.count > 0:
            self.mean.fill(0.0)
            self.var.fill(0.0)
        self.count = num
        values = arr[:, :cols]
        with np.errstate(divide="ignore", invalid="ignore"):
            self.mean[:cols] = (values.sum(axis=0, dtype=np.float32)
                                / np.float32(num))
        diff = values - self.mean[:cols]
        self.var[:cols] = (diff * diff).sum(axis=0, dtype=np.float32)

    def _update_running(self, arr):
        cols = self._cols
        mean = self.mean[:cols]
        var = self.var[:cols]
        for row in arr[:, :cols]:
            self.count += 1
            d = row - mean
            mean += d / np.float32(self.count)
            d2 = row - mean
            var += d * d2

    def _apply(self, arr):
        cols = self._cols
        cnt = self.count
        if cnt < 2 or arr.shape[0] == 0 or cols < 1:
            return
        if self.batch:
            stddev = np.sqrt(self.var[:cols] / np.float32(cnt - 1))
            stddev[stddev < 1.0] = 1.0
        else:
            stddev = np.sqrt(self.var[:cols] / np.float32(cnt))
            stddev[stddev == 0.0] = 1.0
        arr[:, :cols] = (arr[:, :cols] - self.mean[:cols]) / stddev