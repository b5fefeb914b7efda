from __future__ import annotations

import logging
import random
import time
from concurrent.futures import ProcessPoolExecutor
from random import randint as rd

import matplotlib.pyplot as plt

from parsort.coordinator import parallel_merge_sort
from parsort.merge_sort import merge_sort

SIZES = list(range(1, 200_000, 20_000))
REPS = 3


def builtin_sort(arr):
    arr.sort()
    return arr

def measure(sort_fn, base_arr, reps=REPS):
    best = float('inf')
    if len(base_arr) <= 1:
        return 0.0
    for _ in range(reps):
        arr = base_arr.copy()
        start = time.perf_counter()
        sort_fn(arr)
        end = time.perf_counter()
        best = min(best, end - start)
    return best

def bench_one_n(args):
    n, base_arr = args

    t_sequential = measure(merge_sort, base_arr)
    t_parallel = measure(parallel_merge_sort, base_arr)
    t_builtin = measure(builtin_sort, base_arr)

    return n, t_sequential, t_parallel, t_builtin

def run_bench(tasks):
    times_sequential = []
    times_parallel = []
    times_builtin = []

    with ProcessPoolExecutor() as executor:
        for n, t_sequential, t_parallel, t_builtin in executor.map(bench_one_n, tasks):
            times_sequential.append(t_sequential)
            times_parallel.append(t_parallel)
            times_builtin.append(t_builtin)

    return times_sequential, times_parallel, times_builtin

def random_data(n):
    return [rd(1, 10_000_000) for _ in range(n)]

def presorted(n):
    return list(range(n))

def reversed_data(n):
    return list(range(n, 0, -1))

def sorted_halves(n):
    # both halves already sorted, so all the work lands in the final merge
    mid = n // 2
    return list(range(0, 2 * mid, 2)) + list(range(1, 2 * (n - mid), 2))

def tagged_duplicates(n, distinct_values=3):
    # (value, position) pairs; few distinct values, so most comparisons tie on value
    values = random.sample(range(1, 100), k=distinct_values)
    return [(random.choice(values), i) for i in range(n)]


LABELS = ("merge_sort", "parallel_merge_sort", ".sort()")


def plot_results(sizes, times, title):
    fig, ax = plt.subplots(figsize=(10, 6))
    for label, values in zip(LABELS, times):
        ax.plot(sizes, values, label=label)

    ax.set_title(title)
    ax.set_xlabel("Array size")
    ax.set_ylabel("Time, sec")
    ax.grid(True)
    ax.legend()
    fig.tight_layout()
    plt.show()


def main():
    logging.basicConfig(level=logging.WARNING)

    shapes = [
        ("Random data", random_data),
        ("Presorted data", presorted),
        ("Reversed data", reversed_data),
        ("Pre-sorted halves", sorted_halves),
        ("Tagged duplicates", tagged_duplicates),
    ]
    for title, generate in shapes:
        tasks = [(n, generate(n)) for n in SIZES]
        plot_results(SIZES, run_bench(tasks), f"{title}: sequential vs two-thread merge sort")



if __name__ == "__main__":
    main()
