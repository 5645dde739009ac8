"""Input-layer public API: raw key decoding and key-binding tables."""

from .key_registry import KeyBinding, KeyBindingTable
from .reader import ESC_SEQUENCE_TIMEOUT_MS, INVALID_TOKEN, _PENDING_BYTES, read_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "INVALID_TOKEN",
    "KeyBinding",
    "KeyBindingTable",
]
