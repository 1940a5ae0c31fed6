# voxlearn

This package provides building blocks for speech and machine-learning experiments. It covers WAV file reading and writing, signal filtering and features, dataset loaders, and a few numeric decompositions. All arrays are numpy arrays.

## Installation

```
pip install .
pip install ".[test]"   # with the test dependencies
```

## What is inside

### Audio

- `voxlearn.pcm`
  - `pcm_to_float` divides int16 samples by 32767 and returns float32 samples.
  - `float_to_pcm` converts float samples back to int16.
- `voxlearn.wav`
  - `WavFile(path, mode, audio_format, num_channels, sample_rate, bit_depth)` opens a RIFF/WAVE file with a 44-byte header.
    - In mode `"r"` the format fields come from the header. The accepted formats are PCM (1), float (3) and µ-law (7).
    - In mode `"w"` the format fields come from the arguments. The data size is written into the header on `close()`.
    - `read(num_samples)` returns raw bytes, whole samples only.
    - `write(data)` appends raw bytes or a numpy array and returns the number of samples written.
    - `seek(offset_samples)` moves the read position; it is for read mode only.
    - `describe()` returns a text summary of the format.
    - The class is a context manager.
  - Errors raise `WavError`.
- `voxlearn.iirfilter`
  - `ButterworthFilter(order, kind, sample_rate, cutoff_freq)` is a stateful low-pass (`kind` starting with `l`) or high-pass (`kind` starting with `h`) filter.
    - The order is 1 to 4.
    - `run(samples)` filters a chunk and returns float32 samples. The filter state carries over from one call to the next.
    - Invalid parameters raise `ValueError`.

### Features

- `voxlearn.hann`
  - `HannWindow(win_size)` is a Hann window of even size between 2 and 1024.
  - `apply(frame)` returns the windowed frame.
- `voxlearn.delta`
  - `calculate_deltas(x, soff, doff, fcnt, wsize)` computes deltas of `fcnt` columns.
  - It reads from column `soff` and writes from column `doff`, over a window of `wsize` frames.
  - The array is updated in place.
- `voxlearn.lpc`
  - `compute_lpc(samples, order)` returns `(coefficients, error)`, computed with the Levinson–Durbin recursion. The first coefficient is 1.0.
  - `lpc_synthesis(lpcc, order, sigma, num_samples, rng)` drives the LPC filter with Gaussian noise. `rng` is an optional `numpy.random.Generator`.

### Data

- `voxlearn.arrayio`
  - `read_array`, `write_array`, `load_array`, `store_array` and `print_array` read and write 2-D float arrays as whitespace-separated text.
  - The default value format is `"%.6g "`.
  - With `exc_last`, the last column is skipped on write and an extra value is discarded per row on read.
  - Failures raise `ArrayIOError`.
- `voxlearn.batch`
  - `Batcher(x, y, batch_size, lengths, shuffle, add_bias, rng)` produces fixed-size batches of vectors.
    - When `lengths` names several sequences, batches stay within a sequence and shuffling reorders whole sequences.
    - `copy()` returns `(x_batch, y_batch, count)`. Padding rows of `x_batch` are filled with ones and padding rows of `y_batch` with zeros.
    - Iterating yields the remaining non-empty batches.
    - `reshuffle()` resets the cursor and shuffles, if shuffling is enabled.
- `voxlearn.scaler`
  - `Scaler(batch, dim, exc_last)` standardizes columns.
  - Its statistics are computed either per call or as running batch statistics.
  - `normalize(data, calc)` standardizes the data; a float32 array is updated in place.
- `voxlearn.normdata`
  - `summary_stats(x)` returns the per-column mean and standard deviation, excluding the last (bias) column.
  - `normalize_data(x, mean, stddev)` standardizes `x` with those statistics.
  - `class_stats(y)` returns class weights computed from one-hot labels.
- `voxlearn.hashmap`
  - `HashMap(map_size, mem_size)` is a fixed-capacity, open-addressing map of strings to consecutive indices.
    - `str2inx(text, insert)` returns the index of `text`, or -1.
    - `inx2str(index)` returns the string for an index, or `""`.
    - `len()` gives the number of stored strings.
  - `djb2_hash` and `string_hash` are the hash functions the map uses.
- `voxlearn.newsfile`
  - `process_file(fp, hmap, add_new, max_vocab, word_freq, max_file_words)` splits text into lower-cased words of ASCII letters.
  - It optionally builds a vocabulary in a `HashMap` and counts words in a list of `WordFrequency` entries.
  - It returns `(count, indices)`.
- `voxlearn.irisfile`
  - `read_iris_file(path, num_samples)` reads the Iris CSV file.
  - It returns a `(num_samples, 4)` float32 feature array and class indices into `IRIS_CLASS_NAMES`.
  - Malformed input raises `ValueError`.
- `voxlearn.featfile`
  - `read_feature_file(fp, max_samples)` reads phoneme-labelled feature lines of 14 features per frame.
    - It expands each frame to 70 columns with deltas and delta-deltas.
    - It maps TIMIT labels to the reduced 39-phoneme set and marks the last frame of each phoneme with `EOP`.
  - `read_feature_files(input_dir, file_list, max_sequences, max_samples)` reads the `.FEAT` files named in a list. It returns `(x, labels, lengths)`.

### Linear algebra

- `voxlearn.qr`
  - `qr(m)` is a Householder QR decomposition.
  - It returns `Q` with orthonormal columns and an upper-triangular `R`.
- `voxlearn.svd`
  - `svd(a)` is a Golub–Reinsch singular value decomposition.
  - It returns `U`, `S` and `Vt`, with `S` in descending order, such that `a ≈ U @ diag(S) @ Vt`.
- `voxlearn.pca`
  - `pca(a, nc)` projects the rows of `a` onto its first `nc` principal components.

### Timing

- `voxlearn.etime`
  - `current_time()` returns the CPU time of the current thread, in seconds.
  - `elapsed_time(start)` returns the thread CPU time elapsed since `start`.
  - `date_time()` returns a local timestamp of the form `YYYY-MM-DDTHH:MM:SS`.

## Example

```python
import numpy as np
from voxlearn.wav import WavFile
from voxlearn.pcm import pcm_to_float
from voxlearn.iirfilter import ButterworthFilter

with WavFile("speech.wav", "r") as wav:
    pcm = wav.read(wav.num_samples)

signal = pcm_to_float(np.frombuffer(pcm, dtype="<i2"))
lowpass = ButterworthFilter(4, "lowpass", 16000, 4000)
filtered = lowpass.run(signal)
```

## What it does not do

- It has no reader for NIST SPHERE audio files.
- It has no µ-law encoder or decoder. `WavFile` reports µ-law files but returns their raw bytes.
- It has no zero-crossing-rate feature.
- It has no loader that pairs raw TIMIT audio with its phoneme transcriptions. Only precomputed feature files are read, through `voxlearn.featfile`.
- It has no command-line programs.

## Running the tests

```
pytest
```