"""Fork-join thread team for row-partitioned kernels.

Each parallel region submits one task per row partition to a
``ThreadPoolExecutor`` and waits on every future before returning, so a
region behaves as a barrier: no caller proceeds until all workers of the
region are done. Exceptions raised inside a worker re-raise in the caller.
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Sequence, Tuple


class ThreadTeam:
    """Pool of worker threads executing disjoint row ranges.

    Parameters
    ----------
    num_threads : int
        Number of worker threads (>= 1).
    """

    def __init__(self, num_threads: int):
        if num_threads < 1:
            raise ValueError(f"num_threads must be >= 1, got {num_threads}")
        self.num_threads = num_threads
        self._executor = ThreadPoolExecutor(max_workers=num_threads,
                                            thread_name_prefix="heatplate")
        self._lock = threading.Lock()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.shutdown()

    def shutdown(self):
        self._executor.shutdown(wait=True)

    def partition(self, start: int, stop: int) -> List[Tuple[int, int]]:
        """Split ``[start, stop)`` into contiguous, disjoint ranges.

        At most ``num_threads`` ranges are returned and none is empty. The
        first ``remainder`` ranges receive one extra row.

        Parameters
        ----------
        start, stop : int
            Half-open index range to split.

        Returns
        -------
        list of (int, int)
            ``(lo, hi)`` pairs covering the range in order.
        """
        n = stop - start
        if n <= 0:
            return []
        parts = min(self.num_threads, n)
        chunk, remainder = divmod(n, parts)

        ranges = []
        lo = start
        for rank in range(parts):
            hi = lo + chunk + (1 if rank < remainder else 0)
            ranges.append((lo, hi))
            lo = hi
        return ranges

    def run(self, tasks: Sequence[Tuple[Callable, tuple]]) -> list:
        """Run independent ``(func, args)`` tasks and wait for all of them.

        Returns
        -------
        list
            Results in the order the tasks were given.
        """
        futures = [self._executor.submit(func, *args) for func, args in tasks]
        return [f.result() for f in futures]

    def parallel_for(self, kernel: Callable, start: int, stop: int, *args):
        """Call ``kernel(*args, lo, hi)`` for every partition of ``[start, stop)``."""
        tasks = [(kernel, args + (lo, hi)) for lo, hi in self.partition(start, stop)]
        self.run(tasks)

    def max_reduce(self, kernel: Callable, start: int, stop: int, *args) -> float:
        """Maximum of ``kernel(*args, lo, hi)`` over every partition.

        Each worker computes its private partial maximum and merges it into
        the shared result inside a single locked section.
        """
        shared = [0.0]

        def work(lo, hi):
            my_max = kernel(*args, lo, hi)
            with self._lock:
                if shared[0] < my_max:
                    shared[0] = my_max

        self.run([(work, (lo, hi)) for lo, hi in self.partition(start, stop)])
        return shared[0]

    def sum_reduce(self, tasks: Sequence[Tuple[Callable, tuple]]) -> float:
        """Sum of task results, combined in task order.

        The order of the tasks fixes the order of the additions, so the
        result does not depend on the number of threads.
        """
        total = 0.0
        for partial in self.run(tasks):
            total += partial
        return total
