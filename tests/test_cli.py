"""Command line runner."""

import pytest

from run_sim import build_parser, config_from_args, main

FAST = ['--node-jitter', '0', '--net-ta-node', '0', '0', '--net-node-mw', '0', '0',
        '--db-delay', '0', '1']


def test_parser_maps_flags_to_config():
    args = build_parser().parse_args([
        '--nodes', '200', '--workers', '4', '--tamper-percent', '1', '--payload-bytes', '512',
        '--node-jitter', '100', '--net-ta-node', '10', '50', '--net-node-mw', '11', '51',
        '--db-delay', '20', '60', '--fail-percent', '3', '--out', 'results.csv',
    ])
    cfg = config_from_args(args)
    assert cfg.nodes == 200
    assert cfg.workers == 4
    assert cfg.tamper_percent == 1.0
    assert cfg.payload_bytes == 512
    assert cfg.node_jitter_ms == 100
    assert tuple(cfg.net_ta_node) == (10, 50)
    assert tuple(cfg.net_node_mw) == (11, 51)
    assert tuple(cfg.db_delay) == (20, 60)
    assert cfg.fail_percent == 3.0
    assert cfg.out_file == 'results.csv'


def test_main_writes_reports(tmp_path, capsys):
    out = tmp_path / 'perf.csv'
    report = tmp_path / 'final.txt'
    rc = main(['--nodes', '6', '--workers', '2', '--out', str(out), '--report', str(report),
               '--seed', '3'] + FAST)
    assert rc == 0
    assert out.exists()
    assert report.exists()
    stdout = capsys.readouterr().out
    assert 'Simulating 6 nodes with 2 workers...' in stdout
    assert 'Success: 100.00%' in stdout


def test_no_csv_flag(tmp_path):
    out = tmp_path / 'perf.csv'
    report = tmp_path / 'final.txt'
    assert main(['--nodes', '2', '--no-csv', '--out', str(out), '--report', str(report)] + FAST) == 0
    assert not out.exists()
    assert report.exists()


def test_unknown_flag_exits_nonzero():
    with pytest.raises(SystemExit) as exc:
        main(['--bogus'])
    assert exc.value.code == 2


def test_non_numeric_value_exits_nonzero():
    with pytest.raises(SystemExit) as exc:
        main(['--nodes', 'many'])
    assert exc.value.code == 2


def test_inverted_range_exits_nonzero(capsys):
    with pytest.raises(SystemExit) as exc:
        main(['--db-delay', '60', '20'])
    assert exc.value.code == 2
    assert 'db_delay' in capsys.readouterr().err


def test_help_exits_zero(capsys):
    with pytest.raises(SystemExit) as exc:
        main(['--help'])
    assert exc.value.code == 0
    assert '--net-ta-node' in capsys.readouterr().out
