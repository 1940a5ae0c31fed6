"""Iteration over (optionally shuffled) batches of training vectors."""

import numpy as np


class Batcher:
    """Returns batches of input vectors, and optionally their labels.

    x holds one input vector per row and y, when given, the matching
    output vectors. With lengths naming more than one sequence, batches
    never cross a sequence boundary and shuffling reorders whole
    sequences; otherwise single vectors are batched and shuffled. rng is
    a numpy Generator used for shuffling.
    """

    def __init__(self, x, y=None, batch_size=32, lengths=None,
                 shuffle=False, add_bias=False, rng=None):
        self.x = np.asarray(x, dtype=np.float32)
        if self.x.ndim != 2:
            raise ValueError("x must be a 2-D array")
        self.y = None if y is None else np.asarray(y, dtype=np.float32)
        if self.y is not None and self.y.ndim != 2:
            raise ValueError("y must be a 2-D array")
        if batch_size < 1:
            raise ValueError(f"batch size must be positive, got {batch_size}")
        self.batch_size = batch_size
        self.shuffle = bool(shuffle)
        self.add_bias = bool(add_bias)
        self._rng = rng if rng is not None else np.random.default_rng()

        lengths = None if lengths is None else [int(n) for n in lengths]
        if lengths is not None and any(n < 0 for n in lengths):
            raise ValueError("sequence lengths must not be negative")
        if lengths is not None and len(lengths) > 1:
            starts = np.concatenate(
                [[0], np.cumsum(lengths[:-1])]).astype(int).tolist()
            self._sequences = list(zip(starts, lengths))
            self._order = None
            self.num = len(lengths)
            total = sum(lengths)
        else:
            self._sequences = None
            self.num = lengths[0] if lengths else len(self.x)
            self._order = list(range(self.num)) if self.shuffle else None
            total = self.num
        if total > len(self.x):
            raise ValueError(
                f"data has {len(self.x)} vectors, {total} required")
        if self.y is not None and len(self.y) < total:
            raise ValueError(
                f"labels have {len(self.y)} vectors, {total} required")
        self._cur_seq = 0
        self._cur_vec = 0

    @property
    def exhausted(self):
        """True when every vector has been returned since the last reset."""
        if self._sequences is not None:
            return self._cur_seq >= self.num
        return self._cur_vec >= self.num

    def reshuffle(self):
        """Reset the cursor and, if shuffling is enabled, shuffle."""
        self._cur_seq = 0
        self._cur_vec = 0
        if not self.shuffle:
            return
        items = self._sequences if self._sequences is not None else self._order
        if items is None:
            return
        for _ in range(3):
            for i in range(len(items) - 1, 0, -1):
                j = int(self._rng.integers(0, i + 1))
                items[i], items[j] = items[j], items[i]

    def _next_indices(self):
        size = self.batch_size
        if self._sequences is not None:
            if self._cur_seq >= self.num:
                return []
            start, length = self._sequences[self._cur_seq]
            count = max(min(size, length - self._cur_vec), 0)
            first = start + self._cur_vec
            self._cur_vec += count
            if self._cur_vec >= length:
                self._cur_seq += 1
                self._cur_vec = 0
            return list(range(first, first + count))
        count = max(min(size, self.num - self._cur_vec), 0)
        first = self._cur_vec
        self._cur_vec += count
        if self._order is not None:
            return self._order[first:first + count]
        return list(range(first, first + count))

    def copy(self):
        """Return (x_batch, y_batch, count) for the next batch.

        x_batch has batch_size rows (plus a bias column of ones when
        add_bias is set); rows past count are filled with ones. y_batch is
        None without labels, else its rows past count are zeros. count is
        zero past the end of the data.
        """
        dim = self.x.shape[1]
        xb = np.ones((self.batch_size, dim + self.add_bias), dtype=np.float32)
        yb = None
        if self.y is not None:
            yb = np.zeros((self.batch_size, self.y.shape[1]), dtype=np.float32)
        indices = self._next_indices()
        count = len(indices)
        if count:
            xb[:count, :dim] = self.x[indices]
            if yb is not None:
                yb[:count] = self.y[indices]
        return xb, yb, count

    def __iter__(self):
        while not self.exhausted:
            xb, yb, count = self.copy()
            if count:
                yield xb, yb, count