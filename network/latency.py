"""
network/latency.py

Simulated network/storage latency. No real I/O happens in this project: a
"hop" between TA, Node and MW is a wait drawn from an inclusive millisecond
range.

 - SleepLatency blocks the calling worker thread for the drawn duration.
 - InstantLatency returns immediately and only records the synthetic
   duration, so tests run fast while NodeSimulator still reports it.
"""

import logging
import threading
import time
from typing import Tuple

from utils.rng import RandomSource

log = logging.getLogger("network.latency")


class LatencyModel:
    """Base class for latency models."""

    # True when wait() really blocks, i.e. wall clock already reflects the delay
    realtime = True

    def wait(self, delay_range: Tuple[int, int], rng: RandomSource) -> int:
        """Wait for a duration drawn from delay_range; return it in milliseconds."""
        low, high = delay_range
        return rng.randint(low, high)


class SleepLatency(LatencyModel):
    realtime = True

    def wait(self, delay_range: Tuple[int, int], rng: RandomSource) -> int:
        ms = super().wait(delay_range, rng)
        if ms > 0:
            time.sleep(ms / 1000.0)
        return ms


class InstantLatency(LatencyModel):
    realtime = False

    def __init__(self):
        self.count = 0
        self.total_ms = 0
        self.lock = threading.Lock()

    def wait(self, delay_range: Tuple[int, int], rng: RandomSource) -> int:
        ms = super().wait(delay_range, rng)
        with self.lock:
            self.count += 1
            self.total_ms += ms
        log.debug("synthetic wait %d ms", ms)
        return ms
