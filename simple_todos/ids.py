"""Task identifier generation."""

import random
import time
from uuid import uuid4

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
SUFFIX_LENGTH = 6


def to_base36(value: int) -> str:
    """Render a non-negative integer in lowercase base 36."""
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_ALPHABET[rem])
    return "".join(reversed(digits))


def fallback_id() -> str:
    """Timestamp plus random suffix, both base 36."""
    suffix = "".join(random.choice(_ALPHABET) for _ in range(SUFFIX_LENGTH))
    return f"id-{to_base36(time.time_ns() // 1_000_000)}-{suffix}"


def new_id() -> str:
    """Return a fresh task id.

    Uses a random UUID when the OS provides a secure random source and
    degrades to :func:`fallback_id` otherwise.
    """
    try:
        return str(uuid4())
    except NotImplementedError:
        return fallback_id()
