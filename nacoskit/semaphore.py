"""A counting semaphore with a fixed number of permits."""

from __future__ import annotations

import threading


class Semaphore:
    """Limits concurrency to a fixed number of holders."""

    def __init__(self, concurrency_num: int) -> None:
        self._size = concurrency_num
        self._held = 0
        self._condition = threading.Condition()

    def try_acquire(self) -> bool:
        """Take a permit if one is free and report whether it was taken."""
        with self._condition:
            if self._held >= self._size:
                return False
            self._held += 1
            return True

    def acquire(self) -> None:
        """Take a permit, waiting until one is free."""
        with self._condition:
            self._condition.wait_for(lambda: self._held < self._size)
            self._held += 1

    def release(self) -> None:
        """Give back a permit; raises ValueError if none is held."""
        with self._condition:
            if self._held == 0:
                raise ValueError("semaphore released more times than acquired")
            self._held -= 1
            self._condition.notify()

    def available_permits(self) -> int:
        """Return the number of free permits."""
        with self._condition:
            return self._size - self._held

    def __enter__(self) -> Semaphore:
        self.acquire()
        return self

    def __exit__(self, *exc_info) -> None:
        self.release()