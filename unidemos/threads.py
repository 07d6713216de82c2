"""Sleep precision and thread-local storage checks."""

import os
import sys
import threading
import time

_INITIAL = 0x42


class _Slot(threading.local):
    def __init__(self):
        self.value = _INITIAL

    def take(self):
        value, self.value = self.value, 0
        return value


_SLOT = _Slot()


def sleep(duration=0.1, tolerance=1.0):
    """Sleep for ``duration`` seconds and return the measured time.

    Raises RuntimeError when the measured time is shorter than requested or
    longer than ``duration + tolerance``.
    """
    print(file=sys.stderr)
    start = time.perf_counter()
    time.sleep(duration)
    elapsed = time.perf_counter() - start
    print(f"Measured time for {duration}s sleep: {elapsed:.6f}s", file=sys.stderr)
    if elapsed < duration:
        raise RuntimeError(f"slept {elapsed}s, less than {duration}s")
    if elapsed > duration + tolerance:
        raise RuntimeError(f"slept {elapsed}s, more than {duration + tolerance}s")
    return elapsed


def spawn(thread_number=None):
    """Start threads that each take their thread-local value twice.

    Returns, per thread, the two values taken; each thread must see its own
    fresh value first and the emptied one second, or RuntimeError is raised.
    """
    print(file=sys.stderr)
    available = os.cpu_count() or 1
    print(f"available_parallelism = {available}", file=sys.stderr)
    if thread_number is None:
        thread_number = available * 2
    if thread_number < 0:
        raise ValueError("thread_number must not be negative")
    print("Thread:", end="", file=sys.stderr)

    results = [None] * thread_number

    def worker(index):
        print(f" {index}", end="", file=sys.stderr, flush=True)
        time.sleep((thread_number - index) * 0.01)
        first = _SLOT.take()
        time.sleep(index * 0.02)
        second = _SLOT.take()
        results[index] = (first, second)

    workers = [threading.Thread(target=worker, args=(i,)) for i in range(thread_number)]
    for thread in workers:
        thread.start()
    for thread in workers:
        thread.join()
    print(file=sys.stderr)

    for index, taken in enumerate(results):
        if taken != (_INITIAL, 0):
            raise RuntimeError(f"thread {index} saw unexpected thread-local values {taken}")
    return results