"""Numerical integration of pi, sequentially or split across threads."""

import enum
import math
import os
import sys
import time
from concurrent.futures import ThreadPoolExecutor

DEFAULT_STEPS = 50_000


class Mode(enum.Enum):
    """How the integration sum is evaluated."""

    SEQUENTIAL = "Sequential"
    PARALLEL = "Parallel"


def _range_sum(steps, step_size):
    return sum(4.0 / (1.0 + ((i + 0.5) * step_size) ** 2) for i in steps)


def _parallel_sum(steps, step_size):
    workers = max(1, min(os.cpu_count() or 1, steps))
    chunk = -(-steps // workers)
    ranges = [range(start, min(start + chunk, steps)) for start in range(0, steps, chunk)]
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return sum(pool.map(lambda r: _range_sum(r, step_size), ranges))


def calculate_pi(mode, steps=DEFAULT_STEPS):
    """Approximate pi with the midpoint rule and return the value.

    Raises ArithmeticError when the result is not within 1e-10 of pi.
    """
    if steps <= 0:
        raise ValueError("steps must be positive")
    print(file=sys.stderr)
    label = f"({mode.value}): "
    print(f"Calculating Pi {label:14}", end="", file=sys.stderr)

    step_size = 1.0 / steps
    start = time.perf_counter()
    if mode is Mode.SEQUENTIAL:
        total = _range_sum(range(steps), step_size)
    else:
        total = _parallel_sum(steps, step_size)
    mypi = total * step_size
    elapsed = time.perf_counter() - start
    print(f"{elapsed:.6f}s", file=sys.stderr)

    if not abs(mypi - math.pi) < 1e-10:
        raise ArithmeticError(f"approximation {mypi} is not close enough to pi")
    return mypi


def pi(steps=DEFAULT_STEPS):
    """Compute pi in both modes and return the two results."""
    print(file=sys.stderr)
    return calculate_pi(Mode.SEQUENTIAL, steps), calculate_pi(Mode.PARALLEL, steps)