import threading

import pytest

from parsort.errors import CapacityError, PoisonedLockError
from parsort.guarded import GuardedBuffer


def test_initial_contents_are_fill():
    buf = GuardedBuffer(3)
    with buf.acquire() as data:
        assert data == [0, 0, 0]
    assert buf.capacity == 3


def test_write_then_read():
    buf = GuardedBuffer(4)
    with buf.acquire() as data:
        buf.write(data, [4, 3, 2, 1])
    with buf.acquire() as data:
        assert list(data) == [4, 3, 2, 1]


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        GuardedBuffer(-1)


def test_acquire_is_exclusive():
    buf = GuardedBuffer(1)
    entered = threading.Event()
    release = threading.Event()
    second_got_lock = threading.Event()

    def holder():
        with buf.acquire():
            entered.set()
            release.wait()

    def contender():
        with buf.acquire():
            second_got_lock.set()

    t1 = threading.Thread(target=holder)
    t1.start()
    entered.wait()
    t2 = threading.Thread(target=contender)
    t2.start()
    assert not second_got_lock.wait(0.1)
    release.set()
    t1.join()
    t2.join()
    assert second_got_lock.is_set()


def test_failure_while_held_poisons():
    buf = GuardedBuffer(2)
    with pytest.raises(KeyError):
        with buf.acquire():
            raise KeyError("boom")

    assert buf.poisoned
    with pytest.raises(PoisonedLockError):
        with buf.acquire():
            pass


def test_lock_released_after_failure():
    buf = GuardedBuffer(2)
    with pytest.raises(RuntimeError):
        with buf.acquire():
            raise RuntimeError("boom")
    assert not buf._lock.locked()


def test_overfill_raises_and_writes_nothing():
    buf = GuardedBuffer(2, fill=-1)
    with pytest.raises(CapacityError) as exc_info:
        with buf.acquire() as data:
            buf.write(data, [1, 2, 3])
    assert exc_info.value.capacity == 2
    assert exc_info.value.observed == 3
    assert buf._data == [-1, -1]
