import io

import numpy as np
import pytest

from voxlearn.featfile import (
    EOP,
    EXPANDED_FEAT_CNT,
    FEAT_CNT,
    REDUCED_PHONEME_NAMES,
    TIMIT_PHONEME_NAMES,
    TIMIT_TO_REDUCED,
    read_feature_file,
    read_feature_files,
)

HEADER = "phoneme, label, stime, etime, filename, fcnt, nfrm, features\n"


def _line(ph, nfrm, frames, fcnt=FEAT_CNT):
    label = TIMIT_PHONEME_NAMES.index(ph)
    values = ",".join(repr(float(v)) for v in np.ravel(frames))
    return f"{ph}, {label}, 0.0, 0.1, SA1, {fcnt}, {nfrm}, {values}\n"


def _frames(n, offset=0.0):
    return (np.arange(n * FEAT_CNT, dtype=np.float32).reshape(n, FEAT_CNT)
            / 4 + offset)


def test_reads_features_and_labels():
    frames = _frames(2)
    fp = io.StringIO(HEADER + _line("aa", 2, frames))
    x, y = read_feature_file(fp, 100)
    assert x.shape == (2, EXPANDED_FEAT_CNT)
    np.testing.assert_array_equal(x[:, :FEAT_CNT], frames)
    reduced = TIMIT_TO_REDUCED[TIMIT_PHONEME_NAMES.index("aa")]
    assert y.tolist() == [reduced, reduced + EOP]


def test_timit_labels_map_to_reduced_set():
    frames = _frames(1)
    fp = io.StringIO(_line("ao", 1, frames))
    _, y = read_feature_file(fp, 10)
    assert REDUCED_PHONEME_NAMES[y[0] - EOP] == "aa"


def test_deltas_of_linear_ramp_equal_slope():
    slope = 0.5
    count = 11
    ramp = np.repeat(np.arange(count, dtype=np.float32)[:, None] * slope,
                     FEAT_CNT, axis=1)
    text = "".join(_line("s", 1, row) for row in ramp)
    x, y = read_feature_file(io.StringIO(text), 100)
    assert len(y) == count
    np.testing.assert_allclose(x[3:8, 14:28], slope, rtol=1e-5)
    np.testing.assert_allclose(x[5, 42:56], slope, rtol=1e-5)


def test_lines_without_frames_are_skipped():
    frames = _frames(1)
    text = _line("h#", 0, []) + _line("iy", 1, frames)
    x, y = read_feature_file(io.StringIO(text), 10)
    assert len(x) == len(frames)
    assert y[0] == TIMIT_TO_REDUCED[TIMIT_PHONEME_NAMES.index("iy")] + EOP


def test_wrong_feature_count_raises():
    text = _line("aa", 1, _frames(1), fcnt=FEAT_CNT + 1)
    with pytest.raises(ValueError, match="feature count"):
        read_feature_file(io.StringIO(text), 10)


def test_missing_trailing_newline_raises():
    text = _line("aa", 1, _frames(1)).rstrip("\n")
    with pytest.raises(ValueError, match="malformed"):
        read_feature_file(io.StringIO(text), 10)


def test_too_few_features_raises():
    text = _line("aa", 2, _frames(1))
    with pytest.raises(ValueError, match="malformed feature"):
        read_feature_file(io.StringIO(text), 10)


def test_too_few_fields_raises():
    with pytest.raises(ValueError, match="malformed"):
        read_feature_file(io.StringIO("aa, 1, 0.0\n"), 10)


def test_max_samples_truncates_without_end_marker():
    frames = _frames(3)
    fp = io.StringIO(_line("aa", 3, frames))
    x, y = read_feature_file(fp, 2)
    assert len(x) == 2
    np.testing.assert_array_equal(x[:, :FEAT_CNT], frames[:2])
    reduced = TIMIT_TO_REDUCED[TIMIT_PHONEME_NAMES.index("aa")]
    assert y.tolist() == [reduced, reduced]


def test_read_feature_files_skips_missing(tmp_path):
    content = _line("aa", 2, _frames(2)) + _line("b", 1, _frames(1, 7.0))
    (tmp_path / "TRAIN_DR1_SA1.FEAT").write_text(content)
    listing = tmp_path / "list.txt"
    listing.write_text("TRAIN/DR1/SA1.WAV\nTRAIN/DR1/SA2.WAV\n")
    x, y, lengths = read_feature_files(str(tmp_path), str(listing), 10, 100)
    expected_x, expected_y = read_feature_file(io.StringIO(content), 100)
    assert lengths == [len(expected_y)]
    np.testing.assert_array_equal(x, expected_x)
    np.testing.assert_array_equal(y, expected_y)


def test_read_feature_files_limits_sequences(tmp_path):
    for name in ("A", "B"):
        (tmp_path / f"{name}.FEAT").write_text(_line("aa", 1, _frames(1)))
    listing = tmp_path / "list.txt"
    listing.write_text("A.wav\nB.wav\n")
    x, _, lengths = read_feature_files(str(tmp_path), str(listing), 1, 100)
    assert len(lengths) == 1
    assert sum(lengths) == len(x)


def test_malformed_file_counts_as_empty_sequence(tmp_path):
    (tmp_path / "A.FEAT").write_text("bad line\n")
    (tmp_path / "B.FEAT").write_text(_line("aa", 1, _frames(1)))
    listing = tmp_path / "list.txt"
    listing.write_text("A.wav\nB.wav\n")
    x, _, lengths = read_feature_files(str(tmp_path), str(listing), 10, 100)
    assert lengths[0] == 0
    assert sum(lengths) == len(x)


def test_long_directory_name_raises(tmp_path):
    listing = tmp_path / "list.txt"
    listing.write_text("")
    with pytest.raises(ValueError, match="too long"):
        read_feature_files("d" * 600, str(listing), 10, 100)


def test_missing_file_list_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_feature_files(str(tmp_path), str(tmp_path / "none.txt"), 10, 10)