"""
simulation/reports.py

Append-only run reports:
 - a CSV row per run (header only when the file does not exist yet)
 - a human readable summary block per run
and a loader for the CSV history used by the sweep script and the UI.
"""

import datetime
import logging
import os

import pandas as pd

from config import CSV_COLUMNS, TIMESTAMP_FORMAT
from simulation.metrics import RunSummary

log = logging.getLogger("simulation.reports")


def current_timestamp() -> str:
    return datetime.datetime.now().strftime(TIMESTAMP_FORMAT)


def summary_row(summary: RunSummary, timestamp: str = None) -> dict:
    return {
        "Timestamp": timestamp or current_timestamp(),
        "Nodes": summary.nodes,
        "Workers": summary.workers,
        "Avg Total (us)": summary.avg_us,
        "Min (us)": summary.min_us,
        "Max (us)": summary.max_us,
        "Median (us)": summary.median_us,
        # fixed decimals, pre-rendered so pandas does not reformat them
        "Success %": f"{summary.success_pct:.2f}",
        "Dropped %": f"{summary.drop_pct:.2f}",
        "Wall Time (s)": f"{summary.wall_time_s:.6f}",
    }


def append_perf_csv(summary: RunSummary, out_path: str) -> str:
    """Append one row to out_path, writing the header only for a new file."""
    new_file = not os.path.exists(out_path)
    df = pd.DataFrame([summary_row(summary)], columns=CSV_COLUMNS)
    df.to_csv(out_path, mode="a", header=new_file, index=False)
    log.info("Appended perf row to %s (new_file=%s)", out_path, new_file)
    return out_path


def write_summary_txt(summary: RunSummary, out_path: str) -> str:
    rule = "-----------------------------------------"
    lines = [
        "Performance Summary Report",
        f"Generated: {current_timestamp()}",
        rule,
        f"Nodes: {summary.nodes}",
        f"Workers: {summary.workers}",
        f"Average Time Per Node: {summary.avg_us / 1000.0:.3f} ms",
        f"Minimum Time Observed: {summary.min_us / 1000.0:.3f} ms",
        f"Maximum Time Observed: {summary.max_us / 1000.0:.3f} ms",
        f"Median Time Per Node: {summary.median_us / 1000.0:.3f} ms",
        f"Success Percentage: {summary.success_pct:.2f} %",
        f"Dropped Percentage: {summary.drop_pct:.2f} %",
        f"Run Wall Time: {summary.wall_time_s:.6f} s",
        rule,
        "",
    ]
    with open(out_path, "a", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")
    log.info("Appended summary report to %s", out_path)
    return out_path


def load_perf_history(path: str) -> pd.DataFrame:
    """Read the per-run CSV back; empty frame with the CSV columns if missing."""
    if not os.path.exists(path):
        return pd.DataFrame(columns=CSV_COLUMNS)
    return pd.read_csv(path)
