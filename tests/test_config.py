"""Run configuration: defaults, fallbacks, clamps and validation."""

import dataclasses

import pytest

from config import Config, DelayRange
from core.exceptions import ConfigError


def test_defaults():
    cfg = Config()
    assert cfg.nodes == 100
    assert cfg.workers == 2
    assert cfg.payload_bytes == 500
    assert cfg.net_ta_node == DelayRange(5, 20)
    assert cfg.db_delay == DelayRange(10, 30)
    assert cfg.out_file == "realistic_perf.csv"


def test_config_is_immutable():
    cfg = Config()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.nodes = 5


def test_fallbacks_for_non_positive_counts():
    cfg = Config.from_values(nodes=0, workers=-3)
    assert cfg.nodes == 1000
    assert cfg.workers == 1


def test_percentages_are_clamped():
    cfg = Config.from_values(tamper_percent=150, fail_percent=-5)
    assert cfg.tamper_percent == 100.0
    assert cfg.fail_percent == 0.0


def test_negative_payload_clamped():
    assert Config.from_values(payload_bytes=-1).payload_bytes == 0


def test_inverted_range_rejected():
    with pytest.raises(ConfigError):
        Config.from_values(net_ta_node=(50, 10))
    with pytest.raises(ConfigError):
        Config.from_values(db_delay=(5, 4))


def test_equal_bounds_allowed():
    assert Config.from_values(net_node_mw=(7, 7)).net_node_mw == DelayRange(7, 7)


def test_negative_delay_rejected():
    with pytest.raises(ConfigError):
        Config.from_values(net_node_mw=(-1, 5))
    with pytest.raises(ConfigError):
        Config.from_values(node_jitter_ms=-1)


def test_malformed_range_rejected():
    with pytest.raises(ConfigError):
        Config.from_values(db_delay=(1, 2, 3))


def test_direct_construction_validates():
    with pytest.raises(ConfigError):
        Config(nodes=0)
    with pytest.raises(ConfigError):
        Config(tamper_percent=101)


def test_config_error_is_value_error():
    assert issubclass(ConfigError, ValueError)


def test_effective_workers_clamped_to_nodes():
    assert Config.from_values(nodes=3, workers=10).effective_workers == 3
    assert Config.from_values(nodes=10, workers=4).effective_workers == 4
