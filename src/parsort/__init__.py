from parsort.coordinator import parallel_merge_sort, split
from parsort.errors import (
    CapacityError,
    ParallelSortError,
    PoisonedLockError,
    WorkerFailedError,
)
from parsort.guarded import GuardedBuffer
from parsort.merge_sort import merge, merge_sort

__all__ = [
    "CapacityError",
    "GuardedBuffer",
    "ParallelSortError",
    "PoisonedLockError",
    "WorkerFailedError",
    "merge",
    "merge_sort",
    "parallel_merge_sort",
    "split",
]
