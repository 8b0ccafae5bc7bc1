"""
KSUID - K-Sortable Unique Identifier.

Time-sortable, globally unique IDs without coordination.
Format: 4 bytes timestamp + 16 bytes random = 27 char base62 string.
"""

import os
import struct
import time
from datetime import datetime, timezone

# KSUID epoch: 2014-05-13
KSUID_EPOCH = 1400000000
BASE62 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"

TIMESTAMP_LENGTH = 4
PAYLOAD_LENGTH = 16
BYTE_LENGTH = TIMESTAMP_LENGTH + PAYLOAD_LENGTH
STRING_ENCODED_LENGTH = 27

_BASE62_INDEX = {char: i for i, char in enumerate(BASE62)}
_MAX_VALUE = (1 << (8 * BYTE_LENGTH)) - 1


def _encode(raw):
    n = int.from_bytes(raw, byteorder="big")

    chars = []
    while n > 0:
        n, remainder = divmod(n, 62)
        chars.append(BASE62[remainder])

    return "".join(reversed(chars)).rjust(STRING_ENCODED_LENGTH, "0")


def _decode(encoded):
    n = 0
    for char in encoded:
        try:
            n = n * 62 + _BASE62_INDEX[char]
        except KeyError:
            raise ValueError(f"invalid base62 character {char!r}") from None
    if n > _MAX_VALUE:
        raise ValueError("value out of range for a 20 byte KSUID")
    return n.to_bytes(BYTE_LENGTH, byteorder="big")


class KSUID:
    """Immutable 20-byte KSUID value."""

    __slots__ = ("_raw",)

    def __init__(self, raw=None):
        if raw is None:
            raw = bytes(BYTE_LENGTH)
        raw = bytes(raw)
        if len(raw) != BYTE_LENGTH:
            raise ValueError(f"KSUIDs are {BYTE_LENGTH} bytes, got {len(raw)}")
        self._raw = raw

    @classmethod
    def new(cls):
        """Generate a KSUID for the current second."""
        # 4 bytes: seconds since KSUID epoch
        timestamp = int(time.time()) - KSUID_EPOCH
        ts_bytes = struct.pack(">I", timestamp)

        # 16 bytes: random
        random_bytes = os.urandom(PAYLOAD_LENGTH)

        return cls(ts_bytes + random_bytes)

    @classmethod
    def parse(cls, encoded):
        """Decode the 27-character base62 form."""
        if len(encoded) != STRING_ENCODED_LENGTH:
            raise ValueError(
                f"encoded KSUIDs are {STRING_ENCODED_LENGTH} characters, got {len(encoded)}"
            )
        return cls(_decode(encoded))

    @classmethod
    def from_bytes(cls, raw):
        return cls(raw)

    @property
    def timestamp(self):
        """Seconds since the KSUID epoch, uncorrected."""
        return struct.unpack(">I", self._raw[:TIMESTAMP_LENGTH])[0]

    @property
    def time(self):
        return datetime.fromtimestamp(self.timestamp + KSUID_EPOCH, tz=timezone.utc)

    @property
    def payload(self):
        return self._raw[TIMESTAMP_LENGTH:]

    @property
    def bytes(self):
        return self._raw

    def __bytes__(self):
        return self._raw

    def __str__(self):
        return _encode(self._raw)

    def __repr__(self):
        return f"KSUID('{self}')"

    def __eq__(self, other):
        if not isinstance(other, KSUID):
            return NotImplemented
        return self._raw == other._raw

    def __lt__(self, other):
        if not isinstance(other, KSUID):
            return NotImplemented
        return self._raw < other._raw

    def __hash__(self):
        return hash(self._raw)


def generate_ksuid():
    """Generate a 27-character sortable unique ID."""
    return str(KSUID.new())
