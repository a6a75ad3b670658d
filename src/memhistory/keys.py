"""Random keys that tell apart entries sharing the same path."""

import secrets
import string

DEFAULT_KEY_LENGTH = 6

# Base-36 alphabet, lowercase
KEY_ALPHABET = string.digits + string.ascii_lowercase


def create_key(length: int = DEFAULT_KEY_LENGTH) -> str:
    """Generate a random base-36 key of the given length."""
    if length < 1:
        raise ValueError(f"Key length must be at least 1, got {length}")
    return "".join(secrets.choice(KEY_ALPHABET) for _ in range(length))
