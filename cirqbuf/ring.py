from enum import Enum

import numpy as np


class Error(Enum):
    """Returned (not raised) by RingBuffer.try_push. Members are truthy."""
    FullBuffer = "buffer is full"


def _as_storage(region, dtype):
    """Typed, writable view over the caller's region. Never copies."""
    if isinstance(region, np.ndarray):
        if dtype is not None and np.dtype(dtype) != region.dtype:
            raise ValueError(f"Region dtype {region.dtype} does not match requested {np.dtype(dtype)}")
        if region.ndim == 0:
            raise ValueError("Region must have at least one axis, got a 0-d array")
        if not region.flags.c_contiguous:
            raise ValueError("Region must be C-contiguous")
        if not region.flags.writeable:
            raise ValueError("Region must be writeable")
        if region.dtype.hasobject:
            raise ValueError(f"Region dtype {region.dtype} holds Python objects, elements must be plain values")
        return region.view()
    try:
        mv = memoryview(region)
    except TypeError:
        raise TypeError(f"Region must be a numpy array or expose the buffer protocol, got {type(region).__name__}") from None
    if dtype is None:
        raise TypeError("A dtype is required when the region is a raw buffer")
    if mv.readonly:
        raise ValueError("Region must be writeable")
    dtype = np.dtype(dtype)
    if dtype.itemsize == 0:
        raise ValueError(f"Element type {dtype} has zero size")
    if dtype.hasobject:
        raise ValueError(f"Element type {dtype} holds Python objects, elements must be plain values")
    mv = mv.cast("B")
    return np.ndarray(mv.nbytes // dtype.itemsize, dtype=dtype, buffer=mv)


class RingBuffer:
    """
    Fixed-capacity FIFO over a borrowed region. Never allocates element storage.

    The ring holds the region exclusively until release(). For numpy regions the
    caller's array is made read-only while borrowed; for raw buffers (bytearray,
    mmap, memoryview) writing through another alias is undefined behaviour.

    Full and empty are ordinary states, reported by return value:
    try_push -> None or Error.FullBuffer, pop -> element or None.
    """

    def __init__(self, storage, region=None, locked=False):
        self._storage = storage
        self._region = region
        self._locked = locked
        self._head = 0   # next slot to read, valid while count > 0
        self._tail = 0   # next slot to write, valid while count < capacity
        self._count = 0

    @classmethod
    def from_region(cls, region, dtype=None):
        storage = _as_storage(region, dtype)
        locked = False
        if isinstance(region, np.ndarray):
            region.flags.writeable = False
            locked = True
        return cls(storage, region, locked)

    def _borrowed(self):
        if self._storage is None:
            raise RuntimeError("RingBuffer used after its region was released")
        return self._storage

    @property
    def capacity(self) -> int:
        return len(self._borrowed())

    @property
    def dtype(self):
        return self._borrowed().dtype

    def try_push(self, element):
        storage = self._borrowed()
        if self._count == len(storage):
            return Error.FullBuffer
        # write first: a failed cast must leave the ring untouched
        storage[self._tail] = element
        self._count += 1
        self._tail = (self._tail + 1) % len(storage)
        assert 0 < self._count <= len(storage)
        return None

    def pop(self):
        storage = self._borrowed()
        if self._count == 0:
            return None
        head = self._head
        elem = storage[head:head + 1].copy()[0]
        self._count -= 1
        self._head = (head + 1) % len(storage)
        assert 0 <= self._count < len(storage)
        return elem

    def is_full(self) -> bool:
        return self._count == len(self._borrowed())

    def is_empty(self) -> bool:
        self._borrowed()
        return self._count == 0

    def __len__(self) -> int:
        self._borrowed()
        return self._count

    def release(self):
        """End the borrow and hand the region back. Safe to call twice."""
        region = self._region
        if self._storage is None:
            return region
        self._storage = None
        if self._locked:
            region.flags.writeable = True
            self._locked = False
        return region

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.release()
        return False

    def __repr__(self):
        if self._storage is None:
            return "RingBuffer(released)"
        return (f"RingBuffer(capacity={len(self._storage)}, len={self._count}, "
                f"head={self._head}, tail={self._tail}, dtype={self._storage.dtype})")
