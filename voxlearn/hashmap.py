"""String to index map with open addressing and djb2 hashing."""

UINT_MAX = 0xFFFFFFFF


def djb2_hash(text):
    """Return the 32-bit unsigned djb2 hash of the UTF-8 bytes of text.

    Bytes of 128 and above count as negative (signed char) values.
    """
    h = 5381
    for byte in text.encode("utf-8"):
        c = byte - 256 if byte >= 128 else byte
        h = ((h << 5) + h + c) & UINT_MAX
    return h


def string_hash(text):
    """Return a non-negative hash that fits a signed 32-bit int."""
    return djb2_hash(text) % (UINT_MAX // 2)


class HashMap:
    """Fixed-capacity map assigning consecutive indices to strings.

    map_size is the number of slots (and the maximum number of strings);
    mem_size is the initial size of the string store, grown as needed.
    """

    def __init__(self, map_size, mem_size):
        if map_size < 1:
            raise ValueError(f"map size must be positive, got {map_size}")
        self.map_size = map_size
        self.mem_size = mem_size
        self.mem_used = 0
        self._slots = [None] * map_size
        self._slot_index = [0] * map_size
        self._index_slot = []

    def __len__(self):
        return len(self._index_slot)

    def str2inx(self, text, insert=False):
        """Return the index of text, or -1 when absent.

        With insert set, an absent string is added and given the next
        index; -1 is returned when the map is full.
        """
        first = string_hash(text) % self.map_size
        slot = first
        while True:
            stored = self._slots[slot]
            if stored is None:
                if not insert or len(self._index_slot) >= self.map_size:
                    return -1
                return self._insert(slot, text)
            if stored == text:
                return self._slot_index[slot]
            slot = (slot + 1) % self.map_size
            if slot == first:
                return -1

    def _insert(self, slot, text):
        size = len(text.encode("utf-8")) + 1
        if self.mem_used + size >= self.mem_size:
            self.mem_size = self.mem_size * 3 // 2 + size
        self.mem_used += size
        index = len(self._index_slot)
        self._slots[slot] = text
        self._slot_index[slot] = index
        self._index_slot.append(slot)
        return index

    def inx2str(self, index):
        """Return the string with the given index, or '' if there is none."""
        if 0 <= index < len(self._index_slot):
            return self._slots[self._index_slot[index]]
        return ""