"""Sweep worker counts and tabulate the resulting performance rows.

Usage:
    python generate_perf_table.py --nodes 500 --workers 1 2 4 8 --out sweep.csv

Each worker count is one full simulation run appending a row to the CSV;
afterwards the CSV is read back with pandas and a per-worker-count table
(average/median node time, success, drop, wall time) is printed.
"""
import argparse
import logging
import time

import pandas as pd

import config as settings
from config import Config
from simulation.reports import append_perf_csv, load_perf_history
from simulation.simulation_manager import SimulationManager

log = logging.getLogger("generate_perf_table")


def run_sweep(base: Config, worker_counts, out_path: str):
    summaries = []
    for workers in worker_counts:
        cfg = Config.from_values(
            nodes=base.nodes, workers=workers, tamper_percent=base.tamper_percent,
            payload_bytes=base.payload_bytes, node_jitter_ms=base.node_jitter_ms,
            net_ta_node=base.net_ta_node, net_node_mw=base.net_node_mw, db_delay=base.db_delay,
            fail_percent=base.fail_percent, out_file=out_path, report_file=base.report_file,
            seed=base.seed)
        start = time.time()
        summary = SimulationManager(cfg).run()
        append_perf_csv(summary, out_path)
        log.info("workers=%d finished in %.1fs", summary.workers, time.time() - start)
        summaries.append(summary)
    return summaries


def perf_table(df: pd.DataFrame) -> pd.DataFrame:
    """Mean of each metric per worker count, latencies converted to ms."""
    if df.empty:
        return df
    table = df.groupby('Workers').agg({
        'Nodes': 'max',
        'Avg Total (us)': 'mean',
        'Median (us)': 'mean',
        'Success %': 'mean',
        'Dropped %': 'mean',
        'Wall Time (s)': 'mean',
    })
    table['Avg (ms)'] = table.pop('Avg Total (us)') / 1000.0
    table['Median (ms)'] = table.pop('Median (us)') / 1000.0
    return table[['Nodes', 'Avg (ms)', 'Median (ms)', 'Success %', 'Dropped %', 'Wall Time (s)']].round(3)


if __name__ == '__main__':
    p = argparse.ArgumentParser()
    p.add_argument('--nodes', type=int, default=settings.NUM_NODES)
    p.add_argument('--workers', type=int, nargs='+', default=[1, 2, 4, 8])
    p.add_argument('--tamper-percent', type=float, default=settings.TAMPER_PERCENT)
    p.add_argument('--fail-percent', type=float, default=settings.FAIL_PERCENT)
    p.add_argument('--out', type=str, default='perf_sweep.csv')
    p.add_argument('--seed', type=int, default=None)
    args = p.parse_args()
    logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    base = Config.from_values(nodes=args.nodes, tamper_percent=args.tamper_percent,
                              fail_percent=args.fail_percent, out_file=args.out, seed=args.seed)
    start = time.time()
    run_sweep(base, args.workers, args.out)
    elapsed = time.time() - start

    df = load_perf_history(args.out)
    print(f"Loaded {len(df)} runs from {args.out} (sweep took {elapsed:.1f}s)")
    print(perf_table(df).to_string())
