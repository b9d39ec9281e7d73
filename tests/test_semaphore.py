import threading

import pytest

from nacoskit.semaphore import Semaphore


def test_try_acquire_until_exhausted():
    size = 3
    sem = Semaphore(size)
    results = [sem.try_acquire() for _ in range(size)]
    assert all(results)
    assert sem.try_acquire() is False
    assert sem.available_permits() == 0


def test_release_restores_permit():
    size = 2
    sem = Semaphore(size)
    sem.acquire()
    assert sem.available_permits() == size - 1
    sem.release()
    assert sem.available_permits() == size


def test_release_without_acquire_raises():
    sem = Semaphore(1)
    with pytest.raises(ValueError):
        sem.release()


def test_context_manager_holds_permit():
    size = 1
    sem = Semaphore(size)
    with sem:
        assert sem.available_permits() == size - 1
        assert sem.try_acquire() is False
    assert sem.available_permits() == size


def test_acquire_waits_for_release():
    sem = Semaphore(1)
    sem.acquire()
    acquired = threading.Event()

    def worker():
        sem.acquire()
        acquired.set()

    thread = threading.Thread(target=worker)
    thread.start()
    assert acquired.wait(0.1) is False
    sem.release()
    assert acquired.wait(2.0) is True
    thread.join(2.0)
    assert sem.available_permits() == 0