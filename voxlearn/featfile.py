"""Reading speech feature files of phoneme-labelled frames.

A feature file holds one phoneme per line: the phoneme name, its TIMIT
label, start and end times, a file name, the feature count per frame, the
number of frames, and then the features of all frames, comma separated.
Frames are expanded with deltas and delta-deltas, and TIMIT labels are
mapped to the reduced 39 phoneme set.
"""

import logging
import os

import numpy as np

from voxlearn.delta import calculate_deltas

FEAT_CNT = 14
EXPANDED_FEAT_CNT = 70

TIMIT_PHONEME_CNT = 64
REDUCED_PHONEME_CNT = 39

SIL = 0
EOP = REDUCED_PHONEME_CNT

TIMIT_PHONEME_NAMES = (
    "", "aa", "ae", "ah", "ao", "aw", "ax", "axr",
    "ax-h", "ay", "b", "bcl", "ch", "d", "dcl", "dh",
    "dx", "eh", "el", "em", "en", "eng", "er", "ey",
    "f", "g", "gcl", "h", "hh", "hv", "ih", "ix",
    "iy", "jh", "k", "kcl", "l", "m", "n", "ng",
    "nx", "ow", "oy", "p", "pcl", "q", "r", "s",
    "sh", "t", "tcl", "th", "uh", "uw", "ux", "v",
    "w", "wh", "y", "z", "zh", "pau", "epi", "h#",
)

REDUCED_PHONEME_NAMES = (
    "sil", "aa", "ae", "ah", "aw", "ay", "b", "ch",
    "d", "dh", "dx", "eh", "er", "ey", "f", "g",
    "hh", "ih", "iy", "jh", "k", "l", "m", "n",
    "ng", "ow", "oy", "p", "r", "s", "sh", "t",
    "th", "uh", "uw", "v", "w", "y", "z",
)

TIMIT_TO_REDUCED = (
    0, 1, 2, 3, 1, 4, 3, 12,
    3, 5, 6, 0, 7, 8, 0, 9,
    10, 11, 21, 22, 23, 24, 12, 13,
    14, 15, 0, 16, 16, 16, 17, 17,
    18, 19, 20, 0, 21, 22, 23, 24,
    23, 25, 26, 27, 0, 0, 28, 29,
    30, 31, 0, 32, 33, 34, 34, 35,
    36, 36, 37, 38, 30, 0, 0, 0,
)

_MAX_LINE = 19999
_HEADER_PREFIX = "phoneme,"
_MAX_PATH = 512

logger = logging.getLogger(__name__)


def _parse_header_fields(fields, lineno):
    try:
        label = int(fields[1])
        float(fields[2])
        float(fields[3])
        fcnt = int(fields[5])
        nfrm = int(fields[6])
    except ValueError:
        raise ValueError(f"line {lineno} is malformed") from None
    return label, fcnt, nfrm


def read_feature_file(fp, max_samples):
    """Read phoneme frames from an open feature file.

    Returns (x, labels): x is a float32 array of shape (n, 70) whose first
    14 columns are the features and the rest their deltas and
    delta-deltas; labels holds reduced phoneme indices, with EOP added on
    the last frame of each phoneme. At most max_samples frames are read.
    Raises ValueError on a malformed line.
    """
    frames = []
    labels = []
    for lineno, raw in enumerate(fp, 1):
        if len(frames) >= max_samples:
            break
        if isinstance(raw, bytes):
            raw = raw.decode("latin-1")
        if len(raw) > _MAX_LINE or not raw.endswith("\n"):
            raise ValueError(f"line {lineno} too long or malformed")
        compact = "".join(raw.split())
        if compact.startswith(_HEADER_PREFIX):
            continue
        text = compact.replace(",", " ")
        fields = text.split()
        if len(fields) < 7:
            raise ValueError(f"line {lineno} is malformed")
        label, fcnt, nfrm = _parse_header_fields(fields, lineno)
        if fcnt != FEAT_CNT:
            raise ValueError(
                f"in line {lineno}: feature count (fcnt) is {fcnt}, "
                f"should be {FEAT_CNT}")
        if nfrm <= 0:
            continue
        if not 0 <= label < TIMIT_PHONEME_CNT:
            raise ValueError(f"in line {lineno}: invalid label {label}")
        parts = text.split(" ", 7)
        tokens = parts[7].split() if len(parts) == 8 else []
        reduced = TIMIT_TO_REDUCED[label]
        for i in range(nfrm):
            row = []
            for j in range(FEAT_CNT):
                k = i * FEAT_CNT + j
                try:
                    row.append(float(tokens[k]))
                except (IndexError, ValueError):
                    raise ValueError(
                        f"in line {lineno}: malformed feature #{k}") from None
            frames.append(row)
            labels.append(reduced + EOP if i == nfrm - 1 else reduced)
            if len(frames) >= max_samples:
                logger.warning("in line %d: reached %d samples, "
                               "ignoring the rest", lineno, max_samples)
                break

    x = np.zeros((len(frames), EXPANDED_FEAT_CNT), dtype=np.float32)
    if frames:
        x[:, :FEAT_CNT] = np.array(frames, dtype=np.float32)
    calculate_deltas(x, 0, 14, 14, 3)
    calculate_deltas(x, 14, 28, 14, 3)
    calculate_deltas(x, 0, 42, 14, 5)
    calculate_deltas(x, 42, 56, 14, 5)
    return x, np.array(labels, dtype=np.int64)


def _feature_path(input_dir, entry):
    name = entry[:-1] if entry.endswith("\n") else entry
    name = name.replace("/", "_")
    stem, dot, _ = name.rpartition(".")
    if dot:
        name = stem
    return os.path.join(input_dir, name + ".FEAT")


def read_feature_files(input_dir, file_list, max_sequences, max_samples):
    """Read the feature files named in file_list from input_dir.

    Each entry of the list has its slashes replaced by underscores and its
    extension replaced by '.FEAT'. Missing files are skipped; a malformed
    file counts as a sequence of length zero. Returns (x, labels,
    lengths), where lengths holds the number of frames of each sequence.
    """
    if len(input_dir) >= _MAX_PATH:
        raise ValueError(f"directory name too long: {input_dir!r}")
    xs = []
    ys = []
    lengths = []
    total = 0
    with open(file_list, encoding="latin-1") as lfp:
        for fileno, entry in enumerate(lfp, 1):
            if len(lengths) >= max_sequences or total >= max_samples:
                break
            path = _feature_path(input_dir, entry)
            try:
                fp = open(path, encoding="latin-1")
            except OSError:
                logger.warning("failed to open file '%s' (%d) for read - "
                               "skipping file", path, fileno)
                continue
            with fp:
                try:
                    x, y = read_feature_file(fp, max_samples - total)
                except ValueError as exc:
                    logger.warning("%s: %s", path, exc)
                    x = np.zeros((0, EXPANDED_FEAT_CNT), dtype=np.float32)
                    y = np.zeros(0, dtype=np.int64)
            xs.append(x)
            ys.append(y)
            lengths.append(len(y))
            total += len(y)
    if xs:
        return np.concatenate(xs), np.concatenate(ys), lengths
    return (np.zeros((0, EXPANDED_FEAT_CNT), dtype=np.float32),
            np.zeros(0, dtype=np.int64), lengths)