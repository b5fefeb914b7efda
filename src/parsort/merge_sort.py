from __future__ import annotations

from collections.abc import Sequence
from typing import Callable, TypeVar

T = TypeVar("T")


def merge(
    left: Sequence[T],
    right: Sequence[T],
    *,
    key: Callable[[T], object] | None = None,
) -> list[T]:
    if key is None:
        def get_key(x):
            return x
    else:
        get_key = key

    n_left = len(left)
    n_right = len(right)
    out: list[T] = [None] * (n_left + n_right)

    i, j, k = 0, 0, 0
    while i < n_left and j < n_right:
        # ties go left
        if get_key(left[i]) <= get_key(right[j]):
            out[k] = left[i]
            i += 1
        else:
            out[k] = right[j]
            j += 1
        k += 1

    if i < n_left:
        out[k:] = left[i:]
    elif j < n_right:
        out[k:] = right[j:]

    return out



def merge_sort(
    seq: Sequence[T],
    *,
    key: Callable[[T], object] | None = None,
) -> list[T]:
    """Return a new ascending list with the items of *seq*.

    Single-threaded recursion; *seq* is never mutated.
    """
    n = len(seq)
    if n <= 1:
        return list(seq)

    m = n // 2
    left = merge_sort(seq[:m], key=key)
    right = merge_sort(seq[m:], key=key)
    return merge(left, right, key=key)
