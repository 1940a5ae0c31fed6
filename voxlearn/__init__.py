"""Speech WAV I/O, signal features, dataset loaders and numeric decompositions."""

__version__ = "0.1.0"