from __future__ import annotations

import threading
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import Generic, TypeVar

from parsort.errors import CapacityError, PoisonedLockError

T = TypeVar("T")


class GuardedBuffer(Generic[T]):
    """
    Fixed-capacity buffer behind a mutex.

    Access only through ``acquire()``:

        buf = GuardedBuffer(14)
        with buf.acquire() as data:
            buf.write(data, values)

    If the body of an acquisition raises, the buffer is poisoned and every
    later ``acquire()`` raises PoisonedLockError.
    """

    def __init__(self, capacity: int, fill: T = 0):
        if capacity < 0:
            raise ValueError("capacity must be >= 0")
        self._lock = threading.Lock()
        self._data: list[T] = [fill] * capacity
        self._poisoned = False

    @property
    def capacity(self) -> int:
        return len(self._data)

    @property
    def poisoned(self) -> bool:
        return self._poisoned

    @contextmanager
    def acquire(self) -> Iterator[list[T]]:
        with self._lock:
            if self._poisoned:
                raise PoisonedLockError("guarded buffer was poisoned by a failed holder")
            try:
                yield self._data
            except BaseException:
                self._poisoned = True
                raise

    def write(self, data: list[T], values: Sequence[T]) -> None:
        """Copy *values* into the acquired *data* element by element."""
        if len(values) > len(data):
            raise CapacityError(len(data), len(values))
        for i, v in enumerate(values):
            data[i] = v
