"""
Identifier generation for UI elements.
"""
import secrets
import string
import time

_ALPHABET = string.digits + string.ascii_lowercase


def generate_id() -> str:
    """
    Generate a process-unique element identifier.

    Format is ``el-<epoch ms>-<9 random base36 chars>``; the random suffix
    keeps ids distinct for elements created within the same millisecond.

    Returns:
        Opaque identifier string
    """
    suffix = ''.join(secrets.choice(_ALPHABET) for _ in range(9))
    return f"el-{int(time.time() * 1000)}-{suffix}"
