from cirqbuf.os_utils import cache_lines
from cirqbuf.ring import RingBuffer

import mmap, operator, numpy as np


class Region:
    """
    A fixed block of private memory, mapped once, that ring buffers borrow.

    The mapping is anonymous, so no other process can reach it, and is sized
    to whole cache lines so a zero capacity still maps.
    """

    def __init__(self, capacity, dtype):
        if isinstance(capacity, bool):
            raise ValueError(f"Capacity must be a non-negative integer, got {capacity!r}")
        try:
            capacity = operator.index(capacity)
        except TypeError:
            raise ValueError(f"Capacity must be a non-negative integer, got {capacity!r}") from None
        if capacity < 0:
            raise ValueError(f"Capacity must be a non-negative integer, got {capacity!r}")
        self._dtype = np.dtype(dtype)
        self._capacity = capacity
        self._nbytes = cache_lines(capacity * self._dtype.itemsize)
        self._mapfile = mmap.mmap(-1, self._nbytes)
        self._array = np.ndarray(capacity,
                                 dtype=self._dtype,
                                 buffer=memoryview(self._mapfile))

    @property
    def array(self) -> np.ndarray:
        return self._array

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def nbytes(self) -> int:
        return self._nbytes

    def ring(self) -> RingBuffer:
        """Lend the whole block to a fresh RingBuffer."""
        return RingBuffer.from_region(self._array)

    def __repr__(self):
        return f"Region(capacity={self._capacity}, dtype={self._dtype}, nbytes={self._nbytes})"
