"""
core/token_authority.py

Trusted Authority token issuance and the structured Node -> MW request.

The TA hands every node a fresh token and produces two independently
encrypted attestations of it:
 - for the Node (TA-Node key):  "NODE_ID:<id>;TOKEN:<token>"
 - for the MW   (TA-MW key):    "MW_EXPECTS_NODE:<id>;TOKEN:<token>"

The node forwards the token to the MW inside
    HEADER[NODE_ID:<id>;TOKEN:<token>]|BODY[<payload>]
"""

from dataclasses import dataclass

from config import NODE_ID_BASE, TOKEN_SIZE
from core.crypto_utils import encrypt_message, generate_token_hex
from core.keys import KeyMaterial

TOKEN_MARKER = "TOKEN:"
HEADER_OPEN = "HEADER["
HEADER_CLOSE = "]"


@dataclass(frozen=True)
class IssuedToken:
    token: str
    enc_for_node: str
    enc_for_mw: str


def node_id_for(index: int) -> str:
    return f"{NODE_ID_BASE}{index}"


def extract_token(payload: str) -> str:
    """Return everything after the first TOKEN: marker, or "" when absent."""
    pos = payload.find(TOKEN_MARKER)
    if pos == -1:
        return ""
    return payload[pos + len(TOKEN_MARKER):]


def build_request(node_id: str, token: str, payload_bytes: int, node_index: int) -> str:
    """Node -> MW request; the body filler is a letter keyed by node index."""
    filler = chr(ord("A") + node_index % 26) * payload_bytes
    header = f"NODE_ID:{node_id};TOKEN:{token}"
    return f"{HEADER_OPEN}{header}{HEADER_CLOSE}|BODY[{filler}]"


def parse_request_token(message: str) -> str:
    """Token carried in the HEADER[...] section of a request, "" if missing."""
    start = message.find(HEADER_OPEN)
    if start == -1:
        return ""
    start += len(HEADER_OPEN)
    end = message.find(HEADER_CLOSE, start)
    if end == -1:
        return ""
    return extract_token(message[start:end])


class TokenAuthority:
    def __init__(self, keys: KeyMaterial, token_size: int = TOKEN_SIZE):
        self.keys = keys
        self.token_size = token_size

    def issue(self, node_id: str) -> IssuedToken:
        token = generate_token_hex(self.token_size)
        payload_for_node = f"NODE_ID:{node_id};{TOKEN_MARKER}{token}"
        payload_for_mw = f"MW_EXPECTS_NODE:{node_id};{TOKEN_MARKER}{token}"
        return IssuedToken(
            token=token,
            enc_for_node=encrypt_message(self.keys.ta_node, payload_for_node),
            enc_for_mw=encrypt_message(self.keys.ta_mw, payload_for_mw),
        )
