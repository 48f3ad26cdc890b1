"""
config/run_config.py

Immutable run parameters for one simulation.

`Config.from_values` is the entry point used by the CLI: it applies the
fallbacks for non-positive node/worker counts and clamps percentages to
[0, 100]. Direct construction only validates, so a hand-built Config with a
`min > max` delay range or an out-of-range percentage raises ConfigError.
"""

from dataclasses import dataclass, field
from typing import NamedTuple, Optional, Sequence

from config import settings
from core.exceptions import ConfigError


class DelayRange(NamedTuple):
    """Inclusive millisecond range for one simulated delay."""
    low: int
    high: int

    @classmethod
    def of(cls, value: Sequence[int], name: str = "delay") -> "DelayRange":
        try:
            low, high = value
            rng = cls(int(low), int(high))
        except (TypeError, ValueError) as e:
            raise ConfigError(f"{name}: expected a MIN MAX pair of integers, got {value!r}") from e
        rng.check(name)
        return rng

    def check(self, name: str = "delay") -> None:
        if self.low < 0:
            raise ConfigError(f"{name}: negative delay {self.low} ms")
        if self.low > self.high:
            raise ConfigError(f"{name}: min {self.low} ms is greater than max {self.high} ms")


def _clamp_percent(value: float) -> float:
    return min(100.0, max(0.0, float(value)))


@dataclass(frozen=True)
class Config:
    nodes: int = settings.NUM_NODES
    workers: int = settings.NUM_WORKERS
    tamper_percent: float = settings.TAMPER_PERCENT
    payload_bytes: int = settings.PAYLOAD_BYTES
    node_jitter_ms: int = settings.NODE_JITTER_MS
    net_ta_node: DelayRange = field(default_factory=lambda: DelayRange(*settings.NET_TA_NODE_MS))
    net_node_mw: DelayRange = field(default_factory=lambda: DelayRange(*settings.NET_NODE_MW_MS))
    db_delay: DelayRange = field(default_factory=lambda: DelayRange(*settings.DB_DELAY_MS))
    fail_percent: float = settings.FAIL_PERCENT
    out_file: str = settings.OUT_FILE
    report_file: str = settings.REPORT_FILE
    seed: Optional[int] = None

    def __post_init__(self):
        if self.nodes <= 0:
            raise ConfigError(f"nodes must be positive, got {self.nodes}")
        if self.workers <= 0:
            raise ConfigError(f"workers must be positive, got {self.workers}")
        for name in ("tamper_percent", "fail_percent"):
            value = getattr(self, name)
            if not 0.0 <= value <= 100.0:
                raise ConfigError(f"{name} must be within [0, 100], got {value}")
        if self.payload_bytes < 0:
            raise ConfigError(f"payload_bytes must not be negative, got {self.payload_bytes}")
        if self.node_jitter_ms < 0:
            raise ConfigError(f"node_jitter_ms must not be negative, got {self.node_jitter_ms}")
        for name in ("net_ta_node", "net_node_mw", "db_delay"):
            # frozen: coerce plain (min, max) tuples in place
            object.__setattr__(self, name, DelayRange.of(getattr(self, name), name))

    @classmethod
    def from_values(cls,
                    nodes: int = settings.NUM_NODES,
                    workers: int = settings.NUM_WORKERS,
                    tamper_percent: float = settings.TAMPER_PERCENT,
                    payload_bytes: int = settings.PAYLOAD_BYTES,
                    node_jitter_ms: int = settings.NODE_JITTER_MS,
                    net_ta_node: Sequence[int] = settings.NET_TA_NODE_MS,
                    net_node_mw: Sequence[int] = settings.NET_NODE_MW_MS,
                    db_delay: Sequence[int] = settings.DB_DELAY_MS,
                    fail_percent: float = settings.FAIL_PERCENT,
                    out_file: str = settings.OUT_FILE,
                    report_file: str = settings.REPORT_FILE,
                    seed: Optional[int] = None) -> "Config":
        """Build a Config from raw (CLI) values, applying fallbacks and clamps."""
        return cls(
            nodes=nodes if nodes > 0 else settings.FALLBACK_NODES,
            workers=workers if workers > 0 else settings.FALLBACK_WORKERS,
            tamper_percent=_clamp_percent(tamper_percent),
            payload_bytes=max(0, payload_bytes),
            node_jitter_ms=node_jitter_ms,
            net_ta_node=DelayRange.of(net_ta_node, "net_ta_node"),
            net_node_mw=DelayRange.of(net_node_mw, "net_node_mw"),
            db_delay=DelayRange.of(db_delay, "db_delay"),
            fail_percent=_clamp_percent(fail_percent),
            out_file=out_file,
            report_file=report_file,
            seed=seed,
        )

    @property
    def effective_workers(self) -> int:
        """Worker threads actually spawned: never more than there are nodes."""
        return max(1, min(self.workers, self.nodes))
