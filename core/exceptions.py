"""Project-specific exception types for clearer error semantics."""


class SimulationError(Exception):
    """Base class for every error raised by the simulator."""
    pass


class ConfigError(SimulationError, ValueError):
    """Invalid run configuration, raised before any node is simulated."""
    pass


class CipherError(SimulationError):
    """Channel-level encryption/decryption errors."""
    pass


class MalformedCiphertext(CipherError):
    """Wire string lacks the IV separator or carries undecodable hex."""
    pass


class DecryptionError(CipherError):
    """Padding or decoding failed, typically because the wrong key was used."""
    pass
