"""Thread-safe append-only sink for per-node outcomes."""

import threading
from typing import List

from simulation.node_simulator import NodeOutcome


class ResultCollector:
    """
    Workers call `append` concurrently while the pool runs. Once the pool has
    joined it calls `freeze`; only then may `drain_all` read the outcomes.
    Insertion order across workers is unspecified.
    """

    def __init__(self):
        self.records: List[NodeOutcome] = []
        self.lock = threading.Lock()
        self._frozen = False

    def append(self, outcome: NodeOutcome):
        with self.lock:
            if self._frozen:
                raise RuntimeError("collector is frozen, run already finished")
            self.records.append(outcome)

    def freeze(self):
        with self.lock:
            self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def drain_all(self) -> List[NodeOutcome]:
        with self.lock:
            if not self._frozen:
                raise RuntimeError("collector is still accepting results")
            return list(self.records)

    def __len__(self):
        with self.lock:
            return len(self.records)
