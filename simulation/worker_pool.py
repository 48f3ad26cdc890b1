"""
simulation/worker_pool.py

Fixed pool of worker threads driving NodeSimulator.

Every worker repeatedly claims the next node index from a shared WorkClaim
and runs that node to completion (drop or complete) before claiming the
next one. Delays are real blocking waits inside the worker thread. There
is no priority, retry or cancellation: the only early stop is a fatal
error in some worker, after which the others finish their current node and
exit, and run() re-raises that error.
"""

import logging
import secrets
import threading
import time
from typing import List, Optional

from config import Config
from simulation.collector import ResultCollector
from simulation.node_simulator import NodeSimulator
from utils.rng import RandomSource

log = logging.getLogger("simulation.worker_pool")


class WorkClaim:
    """Shared fetch-and-add counter handing out each index in [0, total) once."""

    def __init__(self, total: int):
        self.total = total
        self._next = 0
        self._lock = threading.Lock()

    def claim(self) -> Optional[int]:
        with self._lock:
            idx = self._next
            self._next += 1
        if idx >= self.total:
            return None
        return idx


class WorkerPool:
    def __init__(self, config: Config, simulator: NodeSimulator, collector: ResultCollector,
                 seed: Optional[int] = None):
        self.config = config
        self.simulator = simulator
        self.collector = collector
        self.seed = seed if seed is not None else config.seed
        self.workers = config.effective_workers
        self.claims = WorkClaim(config.nodes)

        self._abort = threading.Event()
        self._errors: List[BaseException] = []
        self._errors_lock = threading.Lock()

    def _worker(self, worker_index: int, rng: RandomSource):
        processed = 0
        log.debug("worker %d started (seed=%d)", worker_index, rng.seed)
        try:
            while not self._abort.is_set():
                idx = self.claims.claim()
                if idx is None:
                    break
                outcome = self.simulator.run(idx, rng)
                self.collector.append(outcome)
                processed += 1
        except Exception as e:
            log.exception("worker %d failed: %s", worker_index, e)
            with self._errors_lock:
                self._errors.append(e)
            self._abort.set()
        finally:
            log.debug("worker %d exiting after %d nodes", worker_index, processed)

    def run(self) -> float:
        """Run all nodes, block until every worker has exited; return wall time in seconds."""
        base_seed = self.seed if self.seed is not None else secrets.randbits(64)
        threads = []
        run_start = time.perf_counter()
        for i in range(self.workers):
            rng = RandomSource.for_worker(i, base_seed)
            t = threading.Thread(target=self._worker, args=(i, rng),
                                 name=f"node-worker-{i}", daemon=True)
            threads.append(t)
            t.start()
        for t in threads:
            t.join()
        wall_time = time.perf_counter() - run_start
        self.collector.freeze()

        if self._errors:
            raise self._errors[0]
        log.info("pool finished: %d nodes, %d workers, %.6f s", len(self.collector), self.workers, wall_time)
        return wall_time
