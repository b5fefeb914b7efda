"""
Worker
======
One thread, one call. The thread's return value (or the exception it died
with) is handed back to whoever joins it.
"""

from __future__ import annotations

import threading
from typing import Any, Callable, Optional

from parsort.errors import WorkerFailedError


class Worker:
    """
    Runs ``target(*args)`` in its own thread.

    Usage:
        worker = Worker(merge_sort, half, name="sort-left")
        worker.start()
        ...
        sorted_half = worker.join()   # raises WorkerFailedError on failure
    """

    def __init__(self, target: Callable[..., Any], *args: Any, name: str = "worker"):
        self.target = target
        self.args = args
        self.name = name

        self._result: Any = None
        self._error: Optional[BaseException] = None
        self._thread: Optional[threading.Thread] = None

    def start(self):
        if self._thread is not None:
            raise RuntimeError(f"worker {self.name!r} already started")
        self._thread = threading.Thread(target=self._run, name=self.name)
        self._thread.start()

    def wait(self):
        """Block until the thread finishes. Never raises the worker's error."""
        if self._thread is None:
            raise RuntimeError(f"worker {self.name!r} was never started")
        self._thread.join()

    def join(self) -> Any:
        """Block until the thread finishes, then return its result."""
        self.wait()
        if self._error is not None:
            raise WorkerFailedError(worker=self.name) from self._error
        return self._result

    def _run(self):
        try:
            self._result = self.target(*self.args)
        except BaseException as e:
            self._error = e
