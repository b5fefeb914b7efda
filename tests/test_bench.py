import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")

from parsort import bench


def test_measure_short_input_is_zero():
    assert bench.measure(bench.merge_sort, [1]) == 0.0


def test_measure_does_not_touch_base_array():
    base = [3, 1, 2]
    t = bench.measure(bench.builtin_sort, base, reps=2)
    assert t >= 0.0
    assert base == [3, 1, 2]


def test_bench_one_n():
    n, t_seq, t_par, t_builtin = bench.bench_one_n((50, bench.reversed_data(50)))
    assert n == 50
    assert min(t_seq, t_par, t_builtin) >= 0.0


def test_data_shapes():
    assert bench.presorted(4) == [0, 1, 2, 3]
    assert bench.reversed_data(4) == [4, 3, 2, 1]
    assert len(bench.random_data(10)) == 10


def test_sorted_halves():
    data = bench.sorted_halves(7)
    assert data == [0, 2, 4, 1, 3, 5, 7]
    assert data[:3] == sorted(data[:3])
    assert data[3:] == sorted(data[3:])


def test_tagged_duplicates_sort_stably():
    data = bench.tagged_duplicates(200, distinct_values=3)
    assert len({value for value, _ in data}) <= 3
    result = bench.parallel_merge_sort(data, key=lambda t: t[0])
    assert result == sorted(data, key=lambda t: t[0])
