import math
import struct

from vm_sim.errors import FatalVMError

WORD_SIZE = 4

_INT = struct.Struct("<i")
_UINT = struct.Struct("<I")
_FLOAT = struct.Struct("<f")


def to_float32(value):
    """
    Convert a number the way a C float cast does, magnitudes float32 cannot hold become +-inf
    :param value: int or float
    :return: float that packs into 4 bytes
    """
    value = float(value)
    try:
        _FLOAT.pack(value)
    except OverflowError:
        return math.copysign(math.inf, value)
    return value


class WordStore:
    """
    A run of page-sized blocks of 32-bit words, used for both simulated physical memory
    and the backing store. Words are kept little-endian in a single bytearray and start out zeroed.
    """
    def __init__(self, name, n_pages, page_size):
        self.name = name
        self.n_pages = n_pages
        self.page_size = page_size
        self.page_bytes = page_size * WORD_SIZE
        try:
            self.data = bytearray(n_pages * self.page_bytes)
        except (MemoryError, OverflowError) as exc:
            raise FatalVMError(
                f"Unable to allocate {name}: {n_pages} pages of {page_size} words"
            ) from exc

    def _byte_offset(self, word_address):
        return word_address * WORD_SIZE

    def read_int(self, word_address):
        return _INT.unpack_from(self.data, self._byte_offset(word_address))[0]

    def write_int(self, word_address, value):
        # keep the low 32 bits, same as storing into a C int
        _UINT.pack_into(self.data, self._byte_offset(word_address), value & 0xFFFFFFFF)

    def read_float(self, word_address):
        return _FLOAT.unpack_from(self.data, self._byte_offset(word_address))[0]

    def write_float(self, word_address, value):
        _FLOAT.pack_into(self.data, self._byte_offset(word_address), to_float32(value))

    def read_page(self, page):
        """
        Copy out one page
        :param page: int block number
        :return: bytes of length page_size * 4
        """
        start = page * self.page_bytes
        return bytes(self.data[start:start + self.page_bytes])

    def write_page(self, page, content):
        """
        Overwrite one page
        :param page: int block number
        :param content: bytes-like of length page_size * 4
        :return: None
        """
        if len(content) != self.page_bytes:
            raise ValueError(f"{self.name}: page content must be {self.page_bytes} bytes, got {len(content)}")
        start = page * self.page_bytes
        self.data[start:start + self.page_bytes] = content

    def release(self):
        self.data = bytearray()
