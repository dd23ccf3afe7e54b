"""Small helpers shared across the client."""

from __future__ import annotations

import json
import secrets
from typing import Any


def generate_random_string(length: int) -> str:
    """Return a random lowercase hex string built from ``length // 2`` random bytes."""
    return bytes_to_hex(secrets.token_bytes(length // 2))


def bytes_to_hex(data: bytes) -> str:
    """Encode bytes as a lowercase hexadecimal string."""
    return bytes(data).hex()


def must_to_json(obj: Any) -> str:
    """Serialise ``obj`` to compact JSON, falling back to ``"{}"`` when it cannot be encoded."""
    try:
        return json.dumps(obj, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError):
        return "{}"