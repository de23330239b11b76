import threading

import pytest

from ppcnn.mapqueue import ConcurrentMapQueue


def _filled():
    queue = ConcurrentMapQueue()
    for key, value in [(3, "c"), (1, "a"), (2, "b")]:
        queue.push(key, value)
    return queue


def test_push_and_len():
    assert len(_filled()) == 3


def test_duplicate_key_rejected():
    queue = _filled()
    with pytest.raises(ValueError):
        queue.push(2, "again")
    assert queue.get(2) == "b"


def test_popitem_returns_smallest_key_first():
    queue = _filled()
    assert [queue.popitem() for _ in range(3)] == [(1, "a"), (2, "b"), (3, "c")]
    assert len(queue) == 0


def test_popitem_empty_raises():
    with pytest.raises(KeyError):
        ConcurrentMapQueue().popitem()


def test_pop_by_key():
    queue = _filled()
    assert queue.pop(2) == "b"
    assert 2 not in queue
    assert len(queue) == 2


def test_pop_missing_raises():
    queue = _filled()
    with pytest.raises(KeyError):
        queue.pop(99)


def test_get_does_not_remove():
    queue = _filled()
    assert queue.get(3) == "c"
    assert queue.count(3) == 1
    assert queue.get(42) is None


def test_count_and_contains():
    queue = _filled()
    assert queue.count(1) == 1
    assert queue.count(5) == 0
    assert 1 in queue
    assert 5 not in queue


def test_iteration_in_key_order():
    assert list(_filled()) == [1, 2, 3]


def test_concurrent_pushes():
    queue = ConcurrentMapQueue()

    def worker(base):
        for i in range(100):
            queue.push(base + i, i)

    threads = [threading.Thread(target=worker, args=(n * 1000,)) for n in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert len(queue) == 400
    assert list(queue) == sorted(list(queue))