"""Summary statistics over the frozen outcome set of a run."""

from dataclasses import dataclass
from typing import Iterable, List

from simulation.node_simulator import NodeOutcome


@dataclass(frozen=True)
class RunSummary:
    nodes: int
    workers: int
    completed: int
    dropped: int
    succeeded: int
    avg_us: int
    min_us: int
    max_us: int
    median_us: int
    success_pct: float
    drop_pct: float
    wall_time_s: float


def median_of(values: Iterable[int]) -> int:
    """Middle value; mean of the two middle values (integer division) for even counts; 0 if empty."""
    v = sorted(values)
    n = len(v)
    if n == 0:
        return 0
    if n % 2 == 1:
        return v[n // 2]
    return (v[n // 2 - 1] + v[n // 2]) // 2


def aggregate(outcomes: Iterable[NodeOutcome], nodes: int, workers: int,
              wall_time_s: float) -> RunSummary:
    """
    Timing statistics cover completed (non-dropped) nodes only. Success and
    drop percentages use the configured node count as denominator, so a
    dropped node counts against the success rate.
    """
    totals: List[int] = []
    success_cnt = 0
    drop_cnt = 0
    for m in outcomes:
        if m.dropped:
            drop_cnt += 1
        else:
            totals.append(m.elapsed_us)
        if m.success:
            success_cnt += 1

    return RunSummary(
        nodes=nodes,
        workers=workers,
        completed=len(totals),
        dropped=drop_cnt,
        succeeded=success_cnt,
        avg_us=sum(totals) // len(totals) if totals else 0,
        min_us=min(totals) if totals else 0,
        max_us=max(totals) if totals else 0,
        median_us=median_of(totals),
        success_pct=100.0 * success_cnt / nodes if nodes > 0 else 0.0,
        drop_pct=100.0 * drop_cnt / nodes if nodes > 0 else 0.0,
        wall_time_s=wall_time_s,
    )
