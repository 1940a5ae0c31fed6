"""Reading and writing canonical 44-byte-header RIFF WAV files."""

import struct

_HEADER = struct.Struct("<4sI4s4sIHHIIHH4sI")
HEADER_SIZE = _HEADER.size

_FORMAT_NAMES = {1: "PCM", 3: "float", 7: "uLaw"}
_ENDIAN_NAMES = {"l": "little-endian", "b": "big-endian"}
_SUPPORTED_FORMATS = (1, 3, 7)


class WavError(Exception):
    """Raised when a WAV file is malformed or used incorrectly."""


class WavFile:
    """A WAV file opened for reading ('r') or writing ('w').

    In read mode the format fields are taken from the file header; in write
    mode they come from the arguments and the data size is filled in when
    the file is closed.
    """

    def __init__(self, path, mode="r", audio_format=1, num_channels=1,
                 sample_rate=16000, bit_depth=16):
        if not mode or mode[0] not in ("r", "w"):
            raise ValueError(
                f"{path}: invalid mode {mode!r}; only 'r' and 'w' supported")
        self.path = path
        self.mode = mode[0]
        self.audio_format = audio_format
        self.num_channels = num_channels
        self.sample_rate = sample_rate
        self.bit_depth = bit_depth
        self.endianess = "l"
        self.data_size = 0
        self.num_samples = 0
        self.num_samples_per_channel = 0
        self._file = None
        if self.mode == "r":
            self._open_for_read()
        else:
            self._open_for_write()

    def _open_for_read(self):
        f = open(self.path, "rb")
        try:
            header = f.read(HEADER_SIZE)
            if len(header) != HEADER_SIZE:
                raise WavError(f"{self.path}: failed to read WAV header")
            if header[0:4] != b"RIFF" or header[8:12] != b"WAVE":
                raise WavError(f"{self.path}: not a WAV file")
            fields = _HEADER.unpack(header)
            self.audio_format = fields[5]
            self.num_channels = fields[6]
            self.sample_rate = fields[7]
            self.bit_depth = fields[10]
            self.data_size = fields[12]
            if self.audio_format not in _SUPPORTED_FORMATS:
                raise WavError(
                    f"{self.path}: unsupported audio format "
                    f"{self.audio_format}; only PCM (1), float (3) and "
                    f"uLaw (7) supported")
            width = self.bit_depth // 8
            if width == 0 or self.num_channels == 0:
                raise WavError(f"{self.path}: invalid sample layout")
            self.num_samples = self.data_size // width
            self.num_samples_per_channel = (
                self.num_samples // self.num_channels)
        except BaseException:
            f.close()
            raise
        self._file = f

    def _open_for_write(self):
        f = open(self.path, "wb")
        try:
            f.write(self._pack_header())
        except BaseException:
            f.close()
            raise
        self._file = f

    def _pack_header(self):
        width = self.bit_depth // 8
        return _HEADER.pack(
            b"RIFF",
            (self.data_size + HEADER_SIZE - 8) & 0xFFFFFFFF,
            b"WAVE",
            b"fmt ",
            16,
            self.audio_format & 0xFFFF,
            self.num_channels & 0xFFFF,
            self.sample_rate & 0xFFFFFFFF,
            (self.sample_rate * self.num_channels * width) & 0xFFFFFFFF,
            (self.num_channels * width) & 0xFFFF,
            self.bit_depth & 0xFFFF,
            b"data",
            self.data_size & 0xFFFFFFFF,
        )

    @property
    def closed(self):
        """True once the file has been closed."""
        return self._file is None

    def _handle(self):
        if self._file is None:
            raise WavError(f"{self.path}: file is closed")
        return self._file

    def _width(self):
        width = self.bit_depth // 8
        if width < 1:
            raise WavError(f"{self.path}: invalid bit depth {self.bit_depth}")
        return width

    def read(self, num_samples):
        """Read up to num_samples raw samples; returns whole samples only."""
        f = self._handle()
        width = self._width()
        data = f.read(num_samples * width)
        return data[: len(data) // width * width]

    def seek(self, offset_samples):
        """Position the read cursor at the given sample offset."""
        if self.mode != "r":
            raise WavError(f"{self.path}: seek is supported only in read mode")
        f = self._handle()
        f.seek(HEADER_SIZE + offset_samples * self.bit_depth // 8)

    def write(self, data):
        """Append raw sample bytes; returns the number of whole samples."""
        if self.mode != "w":
            raise WavError(f"{self.path}: file is not open for write")
        f = self._handle()
        width = self._width()
        buf = data.tobytes() if hasattr(data, "tobytes") else bytes(data)
        f.write(buf)
        return len(buf) // width

    def close(self):
        """Close the file, updating the header data size in write mode."""
        f = self._file
        if f is None:
            return
        self._file = None
        try:
            if self.mode == "w":
                f.flush()
                self.data_size = (f.tell() - HEADER_SIZE) & 0xFFFFFFFF
                f.seek(0)
                f.write(self._pack_header())
        finally:
            f.close()

    def describe(self):
        """Return a multi-line summary of the file's format."""
        lines = [
            f"Audio Format: {_FORMAT_NAMES.get(self.audio_format, 'unknown')}",
            f"Endianess: {_ENDIAN_NAMES.get(self.endianess, 'unknown')}",
            f"Sample Rate: {self.sample_rate} Hz",
            f"Bit Depth: {self.bit_depth} bits",
            f"Number of Channels: {self.num_channels}",
        ]
        if self.mode != "w":
            lines += [
                f"Number of Samples per Channel: "
                f"{self.num_samples_per_channel}",
                f"Total Number of Samples: {self.num_samples}",
                f"Data Size: {self.data_size} bytes",
            ]
        return "\n".join(lines)

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
        return False