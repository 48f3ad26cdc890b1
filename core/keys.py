"""Symmetric key material for the three logical channels (TA-Node, Node-MW, TA-MW)."""

from dataclasses import dataclass

from config import PASSPHRASE_NODE_MW, PASSPHRASE_TA_MW, PASSPHRASE_TA_NODE
from core.crypto_utils import derive_key


@dataclass(frozen=True)
class KeyMaterial:
    """Read-only keys shared by every worker for the whole run."""
    ta_node: bytes
    node_mw: bytes
    ta_mw: bytes

    @classmethod
    def from_passphrases(cls, ta_node: str, node_mw: str, ta_mw: str) -> "KeyMaterial":
        return cls(
            ta_node=derive_key(ta_node),
            node_mw=derive_key(node_mw),
            ta_mw=derive_key(ta_mw),
        )

    @classmethod
    def derive(cls) -> "KeyMaterial":
        """Keys for the built-in passphrases; identical in every process."""
        return cls.from_passphrases(PASSPHRASE_TA_NODE, PASSPHRASE_NODE_MW, PASSPHRASE_TA_MW)

    def __repr__(self):
        # never print raw key bytes into logs
        return f"KeyMaterial(ta_node=<{len(self.ta_node)}B>, node_mw=<{len(self.node_mw)}B>, ta_mw=<{len(self.ta_mw)}B>)"
