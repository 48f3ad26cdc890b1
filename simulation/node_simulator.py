"""
simulation/node_simulator.py

One pass of the TA -> Node -> MW protocol for a single node index.

Order of steps (no loops, no retries):
  jitter -> net TA->Node -> drop check -> issue & decrypt -> tamper check
  -> build request -> net Node->MW + encrypt -> MW validate -> DB delay

A dropped request never reaches token issuance. A token mismatch is a
normal negative outcome; cipher errors (MalformedCiphertext,
DecryptionError) propagate to the caller.
"""

import logging
import time
from dataclasses import dataclass

from config import Config, TOKEN_SIZE
from core.crypto_utils import decrypt_message, encrypt_message, generate_token_hex
from core.keys import KeyMaterial
from core.token_authority import (
    TokenAuthority, build_request, extract_token, node_id_for, parse_request_token
)
from network.latency import LatencyModel, SleepLatency
from utils.rng import RandomSource

log = logging.getLogger("simulation.node")


@dataclass(frozen=True)
class NodeOutcome:
    node_index: int
    elapsed_us: int
    success: bool
    dropped: bool


class NodeSimulator:
    def __init__(self, config: Config, keys: KeyMaterial,
                 authority: TokenAuthority = None, latency: LatencyModel = None):
        self.config = config
        self.keys = keys
        self.authority = authority or TokenAuthority(keys)
        self.latency = latency or SleepLatency()

    def run(self, index: int, rng: RandomSource) -> NodeOutcome:
        cfg = self.config
        t_start = time.perf_counter()
        synthetic_ms = 0

        def wait(delay_range):
            nonlocal synthetic_ms
            ms = self.latency.wait(delay_range, rng)
            if not self.latency.realtime:
                synthetic_ms += ms

        def elapsed_us() -> int:
            return int((time.perf_counter() - t_start) * 1_000_000) + synthetic_ms * 1000

        # staggered start, then TA -> Node hop
        wait((0, cfg.node_jitter_ms))
        wait(cfg.net_ta_node)

        if rng.chance(cfg.fail_percent):
            log.debug("node %d dropped", index)
            return NodeOutcome(index, elapsed_us(), success=False, dropped=True)

        node_id = node_id_for(index)
        issued = self.authority.issue(node_id)

        # Node recovers its token
        token = extract_token(decrypt_message(self.keys.ta_node, issued.enc_for_node))

        if rng.chance(cfg.tamper_percent):
            token = generate_token_hex(TOKEN_SIZE)
            log.debug("node %d token tampered", index)

        request = build_request(node_id, token, cfg.payload_bytes, index)

        wait(cfg.net_node_mw)
        encrypted_for_mw = encrypt_message(self.keys.node_mw, request)

        # MW validates the submitted token against the TA's expectation
        expected = extract_token(decrypt_message(self.keys.ta_mw, issued.enc_for_mw))
        submitted = parse_request_token(decrypt_message(self.keys.node_mw, encrypted_for_mw))
        success = submitted == expected

        wait(cfg.db_delay)

        return NodeOutcome(index, elapsed_us(), success=success, dropped=False)
