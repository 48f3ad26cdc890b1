"""Shared fixtures: fast configs with instant latency and the default keys."""

import pytest

from config import Config
from core.keys import KeyMaterial
from network.latency import InstantLatency


def fast_config(**overrides) -> Config:
    """A Config with small, non-zero delays; run with InstantLatency it finishes instantly."""
    values = dict(
        nodes=20, workers=4, tamper_percent=0.0, fail_percent=0.0, payload_bytes=64,
        node_jitter_ms=5, net_ta_node=(1, 3), net_node_mw=(2, 4), db_delay=(3, 5),
        seed=1234,
    )
    values.update(overrides)
    return Config.from_values(**values)


@pytest.fixture
def keys():
    return KeyMaterial.derive()


@pytest.fixture
def latency():
    return InstantLatency()


@pytest.fixture
def make_config():
    return fast_config
