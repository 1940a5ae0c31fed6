"""Reading the Iris flower data set from a comma separated file."""

import itertools
import re

import numpy as np

IRIS_SAMPLE_CNT = 150
IRIS_FEAT_CNT = 4
IRIS_CLASS_CNT = 3
IRIS_CLASS_NAMES = ("setosa", "versicolor", "virginica")

_FLOAT = r"\s*([-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?)"
_LINE = re.compile(",".join([_FLOAT] * IRIS_FEAT_CNT) + r",\s*(\S{1,15})")


def read_iris_file(path, num_samples):
    """Read num_samples lines of Iris data.

    Returns a float32 array of shape (num_samples, 4) with the features and
    an integer array of class indices into IRIS_CLASS_NAMES. Raises
    ValueError on a missing, malformed or unknown-class line.
    """
    features = []
    labels = []
    with open(path, encoding="latin-1") as fp:
        for lineno, line in enumerate(itertools.islice(fp, num_samples), 1):
            match = _LINE.match(line)
            if match is None:
                raise ValueError(
                    f"{path}: at line {lineno}: "
                    f"failed to parse 5 values from file")
            cname = match.group(IRIS_FEAT_CNT + 1)
            label = next((j for j, name in enumerate(IRIS_CLASS_NAMES)
                          if name in cname), None)
            if label is None:
                raise ValueError(
                    f"{path}: at line {lineno}: unknown plant name {cname}")
            features.append(
                [float(v) for v in match.groups()[:IRIS_FEAT_CNT]])
            labels.append(label)
    if len(labels) < num_samples:
        raise ValueError(
            f"{path}: at line {len(labels) + 1}: failed to read from file")
    x = np.array(features, dtype=np.float32).reshape(-1, IRIS_FEAT_CNT)
    y = np.array(labels, dtype=np.int64)
    return x, y