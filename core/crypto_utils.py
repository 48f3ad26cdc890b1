"""
This file implements the core cryptographic utilities shared by the TA, Node and MW

Includes:
- Key derivation (SHA-256 truncated to the AES key size)
- Token generation (random bytes rendered as hex)
- AES-CBC encryption with a fresh IV per message, hex wire encoding
"""

import hashlib
import os
import secrets
from typing import Union

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.backends import default_backend

from config import IV_SIZE, KEY_SIZE, TOKEN_SIZE, WIRE_SEPARATOR
from core.exceptions import DecryptionError, MalformedCiphertext

#Key derivation
def derive_key(passphrase: str, size: int = KEY_SIZE) -> bytes:
    return hashlib.sha256(passphrase.encode("utf-8")).digest()[:size]

#Token generation
def generate_token_hex(size: int = TOKEN_SIZE) -> str:
    return secrets.token_bytes(size).hex()

#AES-CBC mode with PKCS7 padding, wire format hex(iv):hex(ciphertext)
def encrypt_message(key: bytes, plaintext: Union[str, bytes]) -> str:
    if isinstance(plaintext, str):
        plaintext = plaintext.encode("utf-8")
    iv = os.urandom(IV_SIZE)
    cipher = Cipher(algorithms.AES(key), modes.CBC(iv), backend=default_backend())
    encryptor = cipher.encryptor()
    padder = padding.PKCS7(128).padder()
    padded_data = padder.update(plaintext) + padder.finalize()
    ciphertext = encryptor.update(padded_data) + encryptor.finalize()
    return iv.hex() + WIRE_SEPARATOR + ciphertext.hex()

def split_wire(wire: str):
    """Return (iv, ciphertext) bytes from a wire string."""
    iv_hex, sep, ct_hex = wire.partition(WIRE_SEPARATOR)
    if not sep:
        raise MalformedCiphertext("bad ciphertext format: missing IV separator")
    try:
        iv = bytes.fromhex(iv_hex)
        ct = bytes.fromhex(ct_hex)
    except ValueError as e:
        raise MalformedCiphertext(f"bad ciphertext format: {e}") from e
    if len(iv) != IV_SIZE:
        raise MalformedCiphertext(f"bad ciphertext format: IV is {len(iv)} bytes, expected {IV_SIZE}")
    return iv, ct

def decrypt_message(key: bytes, wire: str) -> str:
    iv, actual_ct = split_wire(wire)
    cipher = Cipher(algorithms.AES(key), modes.CBC(iv), backend=default_backend())
    decryptor = cipher.decryptor()
    try:
        padded_plaintext = decryptor.update(actual_ct) + decryptor.finalize()
        unpadder = padding.PKCS7(128).unpadder()
        plaintext = unpadder.update(padded_plaintext) + unpadder.finalize()
        return plaintext.decode("utf-8")
    except ValueError as e:
        # ValueError covers incomplete blocks, invalid padding and UnicodeDecodeError
        raise DecryptionError(f"decryption_failed: {e}") from e
