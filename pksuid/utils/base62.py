"""Base62 alphabet membership checks."""

from pksuid.utils.ksuid import BASE62

# Non-alphabet bytes map to 0, which is not an ASCII code of any symbol.
_BASE62_TABLE = bytes(code if chr(code) in BASE62 else 0 for code in range(256))


def is_base62_bytes(data):
    """True if ``data`` is non-empty and made only of ``0-9A-Za-z``."""
    if len(data) == 0:
        return False
    for byte in bytes(data):
        if _BASE62_TABLE[byte] == 0:
            return False
    return True
