"""Loading and storing 2-D float arrays as whitespace separated text."""

import sys

import numpy as np

DEFAULT_FORMAT = "%.6g "


class ArrayIOError(Exception):
    """Raised when an array cannot be read or written."""


def _next_token(fp):
    """Read one whitespace delimited token from fp, or None at end of file.

    Characters are consumed one at a time so that whatever follows the
    token stays in the stream for the next reader.
    """
    ch = fp.read(1)
    if isinstance(ch, bytes):
        return _next_byte_token(fp, ch)
    while ch and ch.isspace():
        ch = fp.read(1)
    if not ch:
        return None
    chars = []
    while ch and not ch.isspace():
        chars.append(ch)
        ch = fp.read(1)
    return "".join(chars)


def _next_byte_token(fp, ch):
    while ch and ch.isspace():
        ch = fp.read(1)
    if not ch:
        return None
    chars = bytearray()
    while ch and not ch.isspace():
        chars += ch
        ch = fp.read(1)
    return chars.decode("latin-1")


def _read_value(fp):
    token = _next_token(fp)
    if token is None:
        return None
    try:
        return float(token)
    except ValueError:
        return None


def read_array(fp, rows, cols, exc_last=False):
    """Read rows x cols values from fp into a float32 array.

    With exc_last set, one extra value (the bias) is read and discarded at
    the end of each row. Raises ArrayIOError when a value is missing or
    malformed.
    """
    a = np.zeros((rows, cols), dtype=np.float32)
    for i in range(rows):
        for j in range(cols):
            value = _read_value(fp)
            if value is None:
                raise ArrayIOError(
                    f"failed to read value at row {i}, col {j}")
            a[i, j] = value
        if exc_last and _read_value(fp) is None:
            raise ArrayIOError(
                f"failed to read (and discard) value at row {i}, "
                f"past col {cols}")
    return a


def write_array(a, fp, fmt=None, exc_last=False):
    """Write a 2-D array to fp, one row per line.

    Each value is formatted with fmt (default '%.6g '). With exc_last set,
    the last column (the bias) is not written.
    """
    if fmt is None:
        fmt = DEFAULT_FORMAT
    arr = np.atleast_2d(np.asarray(a, dtype=np.float32))
    keep = arr.shape[1] - (1 if exc_last else 0)
    try:
        for row in arr:
            fp.write("".join(fmt % float(v) for v in row[:keep]) + "\n")
    except OSError as exc:
        raise ArrayIOError(f"failed to write array data: {exc}") from exc


def load_array(filename, rows, cols, exc_last=False):
    """Open filename and read a rows x cols array from it."""
    try:
        fp = open(filename, encoding="latin-1")
    except OSError as exc:
        raise ArrayIOError(
            f"failed to open file '{filename}' for read") from exc
    with fp:
        return read_array(fp, rows, cols, exc_last)


def store_array(a, filename, fmt=None, exc_last=False):
    """Write the array to filename, replacing its contents."""
    try:
        fp = open(filename, "w", encoding="latin-1")
    except OSError as exc:
        raise ArrayIOError(
            f"failed to open file '{filename}' for write") from exc
    with fp:
        write_array(a, fp, fmt, exc_last)


def print_array(a, name, fmt=None, exc_last=False):
    """Print the array to standard output under a 'name M X N' heading."""
    arr = np.atleast_2d(np.asarray(a, dtype=np.float32))
    rows, cols = arr.shape
    print(f"{name} {rows} X {cols}")
    write_array(arr, sys.stdout, fmt, exc_last)
    sys.stdout.flush()