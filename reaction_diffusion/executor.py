"""
Execution strategies for per-tick work.

The engine hands an executor a function ``fn(y0, y1)`` that computes rows
[y0, y1) from read-only inputs into its own slice of an output array.
run() returns only once every row has been processed, which makes it the
synchronization point between ticks.

numpy releases the GIL inside its array kernels, so row bands on a thread
pool run in parallel without copying the grids.
"""

import os
from concurrent.futures import ThreadPoolExecutor, wait


def split_rows(height, parts):
    """Split [0, height) into at most ``parts`` contiguous, disjoint bands."""
    parts = max(1, min(int(parts), height))
    base, extra = divmod(height, parts)
    bands = []
    y0 = 0
    for i in range(parts):
        y1 = y0 + base + (1 if i < extra else 0)
        bands.append((y0, y1))
        y0 = y1
    return bands


class SequentialExecutor:
    """Single band, current thread."""

    workers = 1

    def run(self, fn, height):
        fn(0, height)

    def close(self):
        pass

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def __repr__(self):
        return "SequentialExecutor()"


class ThreadedExecutor:
    """Fork-join over row bands on a thread pool."""

    def __init__(self, workers=None):
        if workers is None:
            workers = os.cpu_count() or 1
        self.workers = max(1, int(workers))
        self._pool = ThreadPoolExecutor(
            max_workers=self.workers, thread_name_prefix="rd-worker")

    def run(self, fn, height):
        futures = [self._pool.submit(fn, y0, y1)
                   for y0, y1 in split_rows(height, self.workers)]
        # Barrier: every band finishes before any worker error is re-raised.
        wait(futures)
        for fut in futures:
            fut.result()

    def close(self):
        self._pool.shutdown(wait=True)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def __repr__(self):
        return f"ThreadedExecutor(workers={self.workers})"
