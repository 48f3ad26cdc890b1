"""End-to-end runs through SimulationManager."""

import pytest

from simulation.simulation_manager import SimulationManager, run_simulation


def run(cfg, latency):
    sm = SimulationManager(cfg, latency=latency)
    summary = sm.run()
    return sm, summary


def test_ten_nodes_one_worker_all_succeed(latency, make_config):
    sm, s = run(make_config(nodes=10, workers=1), latency)
    assert len(sm.records) == 10
    assert s.completed == 10
    assert s.dropped == 0
    assert s.success_pct == 100.0


def test_all_dropped(latency, make_config):
    sm, s = run(make_config(nodes=50, workers=8, fail_percent=100), latency)
    assert len(sm.records) == 50
    assert all(o.dropped and not o.success for o in sm.records)
    assert s.success_pct == 0.0
    assert s.drop_pct == 100.0
    assert (s.avg_us, s.min_us, s.max_us, s.median_us) == (0, 0, 0, 0)


def test_full_tamper_never_succeeds(latency, make_config):
    _, s = run(make_config(nodes=300, workers=8, tamper_percent=100), latency)
    assert s.success_pct == 0.0
    assert s.completed == 300


def test_no_tamper_baseline(latency, make_config):
    _, s = run(make_config(nodes=300, workers=8), latency)
    assert s.success_pct == 100.0


@pytest.mark.parametrize("workers", [1, 16])
def test_completeness_and_partition(latency, make_config, workers):
    cfg = make_config(nodes=200, workers=workers, tamper_percent=30, fail_percent=20)
    sm, s = run(cfg, latency)
    assert [o.node_index for o in sm.records] == list(range(200))
    failed = sum(1 for o in sm.records if not o.dropped and not o.success)
    assert s.dropped + s.succeeded + failed == 200
    assert s.completed == s.succeeded + failed
    assert s.workers == workers


def test_partial_drop_and_tamper_rates(latency, make_config):
    """Rates land near the configured percentages over many nodes."""
    _, s = run(make_config(nodes=2000, workers=8, tamper_percent=50, fail_percent=25), latency)
    assert 15.0 < s.drop_pct < 35.0
    # succeed = not dropped and not tampered: about 0.75 * 0.5
    assert 27.0 < s.success_pct < 48.0


def test_fixed_seed_is_reproducible(make_config):
    from network.latency import InstantLatency
    cfg = make_config(nodes=100, workers=1, tamper_percent=40, fail_percent=20, seed=7)
    a = SimulationManager(cfg, latency=InstantLatency())
    b = SimulationManager(cfg, latency=InstantLatency())
    a.run()
    b.run()
    assert [(o.success, o.dropped) for o in a.records] == [(o.success, o.dropped) for o in b.records]


def test_run_simulation_wrapper(latency, make_config):
    s = run_simulation(make_config(nodes=5, workers=2), latency=latency)
    assert s.nodes == 5
    assert s.success_pct == 100.0


def test_reports_require_a_run(tmp_path, make_config):
    sm = SimulationManager(make_config(out_file=str(tmp_path / "x.csv")))
    with pytest.raises(RuntimeError):
        sm.write_reports()


def test_manager_can_run_twice(latency, make_config):
    """A second run starts from an empty collector and reports every node again."""
    sm = SimulationManager(make_config(nodes=5, workers=2), latency=latency)
    first = sm.run()
    second = sm.run()
    assert [o.node_index for o in sm.records] == list(range(5))
    assert len(sm.collector) == 5
    assert first.completed == second.completed == 5
    assert second.success_pct == 100.0
