"""
simulation/simulation_manager.py

Orchestrator that wires KeyMaterial + TokenAuthority + NodeSimulator +
WorkerPool + ResultCollector, runs every node of a Config and aggregates
the outcomes into a RunSummary.

Usage:
    from simulation.simulation_manager import SimulationManager
    sm = SimulationManager(Config())
    summary = sm.run()
    sm.write_reports()
"""

import logging
from typing import List, Optional

from config import Config
from core.keys import KeyMaterial
from core.token_authority import TokenAuthority
from network.latency import LatencyModel, SleepLatency
from simulation.collector import ResultCollector
from simulation.metrics import RunSummary, aggregate
from simulation.node_simulator import NodeOutcome, NodeSimulator
from simulation.reports import append_perf_csv, write_summary_txt
from simulation.worker_pool import WorkerPool

log = logging.getLogger("simulation.manager")


class SimulationManager:
    def __init__(self,
                 config: Config,
                 keys: Optional[KeyMaterial] = None,
                 latency: Optional[LatencyModel] = None,
                 seed: Optional[int] = None):
        self.config = config
        # derived once per run, shared read-only by every worker
        self.keys = keys or KeyMaterial.derive()
        self.latency = latency or SleepLatency()
        self.seed = seed if seed is not None else config.seed

        self.authority = TokenAuthority(self.keys)
        self.simulator = NodeSimulator(config, self.keys, self.authority, self.latency)
        # storage, reset by every run
        self.collector: Optional[ResultCollector] = None
        self.records: List[NodeOutcome] = []
        self.summary: Optional[RunSummary] = None

    def run(self) -> RunSummary:
        cfg = self.config
        self.collector = ResultCollector()
        self.records = []
        self.summary = None
        pool = WorkerPool(cfg, self.simulator, self.collector, seed=self.seed)
        log.info("Simulating %d nodes with %d workers", cfg.nodes, pool.workers)
        wall_time = pool.run()

        self.records = sorted(self.collector.drain_all(), key=lambda m: m.node_index)
        self.summary = aggregate(self.records, cfg.nodes, pool.workers, wall_time)
        log.info("Run complete: success=%.2f%% dropped=%.2f%% wall=%.6fs",
                 self.summary.success_pct, self.summary.drop_pct, self.summary.wall_time_s)
        return self.summary

    def write_reports(self, csv: bool = True, txt: bool = True) -> List[str]:
        """Append the run's summary to the configured CSV and/or text report."""
        if self.summary is None:
            raise RuntimeError("run() must complete before reports can be written")
        written = []
        if csv:
            written.append(append_perf_csv(self.summary, self.config.out_file))
        if txt:
            written.append(write_summary_txt(self.summary, self.config.report_file))
        return written


def run_simulation(config: Config, **kwargs) -> RunSummary:
    """Convenience wrapper: build a SimulationManager and run it once."""
    return SimulationManager(config, **kwargs).run()
