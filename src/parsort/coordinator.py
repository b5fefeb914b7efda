"""
Parallel Coordinator
====================
Two-way parallel merge sort.

The source is split once at its midpoint. Each half is sorted by its own
worker thread, both workers are joined, and a third worker merges the two
sorted halves and publishes the result:

- ``sink=None``: the merged list is returned straight from the merge worker.
- ``sink=GuardedBuffer(...)``: the merge worker writes the merged list into
  the buffer under its lock; the coordinator reads it back under the lock
  after joining the merge worker.

Recursion below the top-level split stays single-threaded.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Callable, Optional, TypeVar

from parsort.errors import CapacityError, WorkerFailedError
from parsort.guarded import GuardedBuffer
from parsort.merge_sort import merge, merge_sort
from parsort.worker import Worker

T = TypeVar("T")

logger = logging.getLogger(__name__)


def split(source: Sequence[T]) -> tuple[tuple[T, ...], tuple[T, ...]]:
    """Split into ``[0, mid)`` and ``[mid, n)`` with ``mid = n // 2``."""
    items = tuple(source)
    mid = len(items) // 2
    return items[:mid], items[mid:]


def _sort_half(half: tuple[T, ...], key: Callable[[T], object] | None) -> list[T]:
    return merge_sort(half, key=key)


def _merge_and_publish(
    left: list[T],
    right: list[T],
    key: Callable[[T], object] | None,
    sink: Optional[GuardedBuffer[T]],
) -> Optional[list[T]]:
    merged = merge(left, right, key=key)
    if sink is None:
        return merged

    with sink.acquire() as data:
        sink.write(data, merged)
    return None


def _join(worker: Worker):
    try:
        return worker.join()
    except WorkerFailedError as e:
        logger.error("worker %s failed: %r", worker.name, e.__cause__)
        raise


def parallel_merge_sort(
    source: Sequence[T],
    *,
    key: Callable[[T], object] | None = None,
    sink: Optional[GuardedBuffer[T]] = None,
) -> list[T]:
    """
    Sort *source* with two sort workers and one merge worker.

    Parameters
    ----------
    source : sequence
        Values to sort. Snapshotted into a tuple, never mutated.
    key : callable, optional
        Same semantics as ``sorted(..., key=...)``.
    sink : GuardedBuffer, optional
        Caller-owned buffer the merge worker publishes into. Its capacity
        must equal ``len(source)``.

    Returns
    -------
    list
        The sorted values. With a sink, a copy of the buffer contents read
        under its lock.

    Raises
    ------
    WorkerFailedError
        A sort or merge worker raised. No partial result is produced.
    CapacityError
        *sink* capacity differs from ``len(source)``. Raised before any
        worker starts.
    """
    if sink is not None and sink.capacity != len(source):
        raise CapacityError(sink.capacity, len(source))

    logger.debug("splitting %d values", len(source))
    left_half, right_half = split(source)

    left_worker = Worker(_sort_half, left_half, key, name="sort-left")
    right_worker = Worker(_sort_half, right_half, key, name="sort-right")
    left_worker.start()
    right_worker.start()
    logger.debug("sort workers running (%d + %d)", len(left_half), len(right_half))

    try:
        left = _join(left_worker)
    finally:
        right_worker.wait()
    right = _join(right_worker)
    logger.debug("sort workers joined")

    merge_worker = Worker(_merge_and_publish, left, right, key, sink, name="merge")
    merge_worker.start()
    logger.debug("merge worker running")

    merged = _join(merge_worker)
    logger.debug("merge worker joined")

    if sink is None:
        return merged

    with sink.acquire() as data:
        return list(data)
