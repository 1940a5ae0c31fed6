import numpy as np
import pytest

from voxlearn.batch import Batcher


def _data(n=10, d=2, k=3):
    x = np.arange(n * d, dtype=np.float32).reshape(n, d)
    y = np.zeros((n, k), dtype=np.float32)
    y[np.arange(n), np.arange(n) % k] = 1.0
    return x, y


def test_sequential_batches_and_padding():
    x, y = _data()
    b = Batcher(x, y, batch_size=4)
    xb, yb, n = b.copy()
    assert n == 4
    np.testing.assert_array_equal(xb, x[0:4])
    np.testing.assert_array_equal(yb, y[0:4])
    b.copy()
    xb, yb, n = b.copy()
    assert n == 2
    np.testing.assert_array_equal(xb[:2], x[8:10])
    assert np.all(xb[2:] == 1.0)
    assert np.all(yb[2:] == 0.0)
    _, _, n = b.copy()
    assert n == 0


def test_add_bias_column():
    x, _ = _data()
    b = Batcher(x, None, batch_size=3, add_bias=True)
    xb, yb, n = b.copy()
    assert yb is None
    assert xb.shape == (3, x.shape[1] + 1)
    np.testing.assert_array_equal(xb[:, :-1], x[:3])
    assert np.all(xb[:, -1] == 1.0)


def test_sequences_do_not_cross_boundary():
    x, y = _data(n=5)
    b = Batcher(x, y, batch_size=4, lengths=[3, 2])
    counts = []
    while True:
        xb, yb, n = b.copy()
        if n == 0:
            break
        counts.append(n)
    assert counts == [3, 2]


def test_iteration_covers_all_vectors_once():
    x, y = _data(n=11)
    b = Batcher(x, y, batch_size=4, shuffle=True,
                rng=np.random.default_rng(7))
    b.reshuffle()
    rows = []
    for xb, yb, n in b:
        for i in range(n):
            rows.append(tuple(xb[i]))
            idx = int(xb[i, 0]) // x.shape[1]
            np.testing.assert_array_equal(yb[i], y[idx])
    assert sorted(rows) == sorted(tuple(r) for r in x)


def test_shuffled_sequences_stay_contiguous():
    x, y = _data(n=9)
    lengths = [2, 3, 4]
    b = Batcher(x, y, batch_size=8, lengths=lengths, shuffle=True,
                rng=np.random.default_rng(3))
    b.reshuffle()
    seen = []
    for xb, _, n in b:
        first = xb[:n, 0] // x.shape[1]
        assert np.all(np.diff(first) == 1)
        seen.append(n)
    assert sorted(seen) == sorted(lengths)


def test_reshuffle_resets_cursor():
    x, y = _data()
    b = Batcher(x, y, batch_size=10)
    assert b.copy()[2] == 10
    assert b.exhausted
    b.reshuffle()
    assert not b.exhausted
    xb, _, n = b.copy()
    assert n == 10
    np.testing.assert_array_equal(xb, x)


def test_shuffle_is_permutation():
    x, _ = _data(n=20)
    b = Batcher(x, None, batch_size=20, shuffle=True,
                rng=np.random.default_rng(11))
    b.reshuffle()
    xb, _, n = b.copy()
    assert n == 20
    assert sorted(xb[:, 0].tolist()) == sorted(x[:, 0].tolist())


def test_lengths_longer_than_data_raise():
    x, _ = _data(n=4)
    with pytest.raises(ValueError):
        Batcher(x, None, batch_size=2, lengths=[3, 3])


def test_short_labels_raise():
    x, y = _data(n=4)
    with pytest.raises(ValueError):
        Batcher(x, y[:2], batch_size=2)


def test_bad_batch_size_raises():
    x, _ = _data()
    with pytest.raises(ValueError):
        Batcher(x, None, batch_size=0)