import numpy as np
import pytest

from voxlearn.iirfilter import ButterworthFilter


@pytest.mark.parametrize(
    "args",
    [
        (0, "l", 16000, 1000),
        (5, "l", 16000, 1000),
        (2, "x", 16000, 1000),
        (2, "", 16000, 1000),
        (2, "l", 15, 2),
        (2, "l", 16000, 1),
        (2, "l", 8000, 4000),
    ],
)
def test_invalid_parameters_raise(args):
    with pytest.raises(ValueError):
        ButterworthFilter(*args)


@pytest.mark.parametrize("order", [1, 2, 3, 4])
def test_coefficient_layout(order):
    f = ButterworthFilter(order, "lowpass", 16000, 1000)
    assert f.kind == "l"
    assert len(f.a_coeff) == order + 1
    assert len(f.b_coeff) == order + 1
    assert f.a_coeff[0] == 1.0


def test_first_order_lowpass_passes_dc():
    f = ButterworthFilter(1, "l", 16000, 1000)
    out = f.run(np.ones(3000, dtype=np.float32))
    assert out[-1] == pytest.approx(1.0, abs=1e-3)


@pytest.mark.parametrize("order", [1, 2, 3, 4])
def test_lowpass_blocks_nyquist(order):
    f = ButterworthFilter(order, "l", 16000, 1000)
    signal = np.tile([1.0, -1.0], 2000).astype(np.float32)
    out = f.run(signal)
    assert np.max(np.abs(out[-100:])) < 1e-3


@pytest.mark.parametrize("order", [1, 2, 3, 4])
def test_highpass_blocks_dc(order):
    f = ButterworthFilter(order, "h", 16000, 1000)
    out = f.run(np.ones(4000, dtype=np.float32))
    assert np.max(np.abs(out[-100:])) < 1e-3


def test_chunked_run_matches_single_run():
    rng = np.random.default_rng(7)
    signal = rng.standard_normal(500).astype(np.float32)
    whole = ButterworthFilter(3, "l", 8000, 500).run(signal)
    chunked_filter = ButterworthFilter(3, "l", 8000, 500)
    parts = [chunked_filter.run(signal[:123]), chunked_filter.run(signal[123:])]
    assert np.array_equal(whole, np.concatenate(parts))


def test_output_shape_and_type():
    f = ButterworthFilter(2, "h", 16000, 300)
    out = f.run([0.5, -0.25, 0.125])
    assert out.dtype == np.float32
    assert out.shape == (3,)