from __future__ import annotations

import logging

from parsort.coordinator import parallel_merge_sort
from parsort.guarded import GuardedBuffer

DEFAULT_SOURCE = (16, 26, 53, 44, 65, 36, 77, 89, 91, 106, 51, 62, 123, 69)


def main():
    logging.basicConfig(level=logging.WARNING)

    sorted_arr = GuardedBuffer(len(DEFAULT_SOURCE))
    result = parallel_merge_sort(DEFAULT_SOURCE, sink=sorted_arr)
    print(f"Sorted array: {result}")



if __name__ == "__main__":
    main()
