"""Runner for the token authentication simulation.
Usage:
  python run_sim.py --nodes 200 --workers 4 --tamper-percent 1 --payload-bytes 512 \
      --node-jitter 100 --net-ta-node 10 50 --net-node-mw 10 50 --db-delay 20 60 \
      --fail-percent 3 --out results.csv
"""
import argparse
import logging
import sys

import config as settings
from config import Config
from core.exceptions import ConfigError
from simulation.simulation_manager import SimulationManager


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description='Simulate TA -> Node -> MW token authentication across many concurrent nodes.',
        epilog='Example: %(prog)s --nodes 1000 --workers 4 --tamper-percent 5 --payload-bytes 512 --fail-percent 2')
    p.add_argument('--nodes', type=int, default=settings.NUM_NODES, metavar='N',
                   help='Number of simulated nodes (<= 0 falls back to %d)' % settings.FALLBACK_NODES)
    p.add_argument('--workers', type=int, default=settings.NUM_WORKERS, metavar='N',
                   help='Concurrent worker threads, clamped to [1, nodes]')
    p.add_argument('--tamper-percent', type=float, default=settings.TAMPER_PERCENT, metavar='P',
                   help='Chance (0-100) that a node forwards a forged token')
    p.add_argument('--payload-bytes', type=int, default=settings.PAYLOAD_BYTES, metavar='N',
                   help='Request body size in bytes')
    p.add_argument('--node-jitter', type=int, default=settings.NODE_JITTER_MS, metavar='MS',
                   help='Upper bound of the staggered node start')
    p.add_argument('--net-ta-node', type=int, nargs=2, default=list(settings.NET_TA_NODE_MS),
                   metavar=('MIN', 'MAX'), help='TA -> Node network delay range (ms)')
    p.add_argument('--net-node-mw', type=int, nargs=2, default=list(settings.NET_NODE_MW_MS),
                   metavar=('MIN', 'MAX'), help='Node -> MW network delay range (ms)')
    p.add_argument('--db-delay', type=int, nargs=2, default=list(settings.DB_DELAY_MS),
                   metavar=('MIN', 'MAX'), help='DB write delay range (ms)')
    p.add_argument('--fail-percent', type=float, default=settings.FAIL_PERCENT, metavar='P',
                   help='Chance (0-100) that a request is dropped')
    p.add_argument('--out', default=settings.OUT_FILE, metavar='FILE',
                   help='CSV file receiving one row per run')
    p.add_argument('--report', default=settings.REPORT_FILE, metavar='FILE',
                   help='Text file receiving the human readable summary')
    p.add_argument('--no-csv', dest='write_csv', action='store_false',
                   help='Do not append a row to the CSV file')
    p.add_argument('--seed', type=int, default=None,
                   help='Base seed for reproducible worker random streams')
    p.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    return p


def config_from_args(args: argparse.Namespace) -> Config:
    return Config.from_values(
        nodes=args.nodes,
        workers=args.workers,
        tamper_percent=args.tamper_percent,
        payload_bytes=args.payload_bytes,
        node_jitter_ms=args.node_jitter,
        net_ta_node=args.net_ta_node,
        net_node_mw=args.net_node_mw,
        db_delay=args.db_delay,
        fail_percent=args.fail_percent,
        out_file=args.out,
        report_file=args.report,
        seed=args.seed,
    )


def main(argv=None) -> int:
    p = build_parser()
    args = p.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    try:
        cfg = config_from_args(args)
    except ConfigError as e:
        p.error(str(e))

    print(f"Simulating {cfg.nodes} nodes with {cfg.effective_workers} workers...")
    print(f"Network delays: TA->Node {cfg.net_ta_node.low}-{cfg.net_ta_node.high}ms, "
          f"Node->MW {cfg.net_node_mw.low}-{cfg.net_node_mw.high}ms, "
          f"DB {cfg.db_delay.low}-{cfg.db_delay.high}ms")
    print(f"Tamper %: {cfg.tamper_percent}, Drop %: {cfg.fail_percent}, Payload: {cfg.payload_bytes} bytes")

    sm = SimulationManager(cfg)
    summary = sm.run()
    written = sm.write_reports(csv=args.write_csv)

    print(f"Done. Avg node time: {summary.avg_us / 1000.0:.3f} ms, Success: {summary.success_pct:.2f}%, "
          f"Dropped: {summary.drop_pct:.2f}%, Wall time: {summary.wall_time_s:.6f} s")
    print('Results written to:', ' and '.join(written))
    return 0


if __name__ == '__main__':
    sys.exit(main())
