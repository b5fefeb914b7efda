"""
Errors raised by the parallel sort coordinator and the guarded buffer.
"""

from __future__ import annotations


class ParallelSortError(RuntimeError):
    """Base class for parsort failures. None of them are recoverable."""


class WorkerFailedError(ParallelSortError):
    """
    Raised on join when a sort or merge worker terminated with an exception.
    The original exception is chained as ``__cause__``.
    """

    def __init__(self, message: str | None = None, *, worker: str | None = None) -> None:
        if message is None:
            message = f"worker {worker!r} failed"
        super().__init__(message)
        self.worker = worker


class PoisonedLockError(ParallelSortError):
    """Raised when acquiring a buffer whose previous holder failed mid-access."""


class CapacityError(ParallelSortError):
    """
    Raised when more values are written into a guarded buffer than it holds.
    """

    def __init__(self, capacity: int, observed: int) -> None:
        super().__init__(f"buffer holds {capacity} values, got {observed}")
        self.capacity = capacity
        self.observed = observed
