"""
PKSUID - prefixed KSUID.

PKSUIDs are 36 bytes:
    00-15 byte: arbitrary prefix, zero-padded
    KSUID:
    16-19 byte: uint32 BE UTC timestamp with custom epoch
    20-35 byte: random "payload"

The canonical string form is the prefix up to its first null byte followed by
the 27 character base62 KSUID, without a separator.
"""

from pksuid.core.errors import (
    MalformedIDError,
    PrefixTooLongError,
    TooLongError,
    TooShortError,
)
from pksuid.utils.ksuid import BYTE_LENGTH as KSUID_BYTE_LENGTH
from pksuid.utils.ksuid import STRING_ENCODED_LENGTH as KSUID_STRING_ENCODED_LENGTH
from pksuid.utils.ksuid import KSUID

PREFIX_BYTE_LENGTH = 16
PKSUID_BYTE_LENGTH = PREFIX_BYTE_LENGTH + KSUID_BYTE_LENGTH

ERR_MIN_SIZE = f"pksuid: valid PKSUIDs cannot be less than {KSUID_BYTE_LENGTH} bytes"
ERR_MAX_SIZE = f"pksuid: valid PKSUIDs cannot be greater than {PKSUID_BYTE_LENGTH} bytes"
ERR_STR_SIZE = (
    f"pksuid: valid encoded PKSUIDs cannot be less than {KSUID_STRING_ENCODED_LENGTH} characters"
)
ERR_PREFIX_SIZE = f"pksuid: prefix must not be longer than {PREFIX_BYTE_LENGTH} bytes"
ERR_RAW_MIN_SIZE = f"pksuid: raw PKSUIDs cannot be less than {PKSUID_BYTE_LENGTH} bytes"

_NIL_KSUID = bytes(KSUID_BYTE_LENGTH)
_NIL_PKSUID = bytes(PKSUID_BYTE_LENGTH)


def _as_bytes(value):
    if isinstance(value, str):
        return value.encode("utf-8", "surrogateescape")
    if isinstance(value, (bytes, bytearray, memoryview, Prefix)):
        return bytes(value)
    raise TypeError(f"expected str, bytes or Prefix, got {type(value).__name__}")


def _as_text(raw):
    return raw.decode("utf-8", "surrogateescape")


def trim_after_null(raw):
    """Cut ``raw`` at its first null byte, dropping the null byte too."""
    index = raw.find(b"\x00")
    if index != -1:
        return raw[:index]
    return raw


class Prefix:
    """Fixed 16-byte label stored in front of the KSUID."""

    __slots__ = ("_raw",)

    def __init__(self, value=b""):
        value = _as_bytes(value)
        if len(value) > PREFIX_BYTE_LENGTH:
            raise PrefixTooLongError(ERR_PREFIX_SIZE, prefix=value)
        self._raw = value.ljust(PREFIX_BYTE_LENGTH, b"\x00")

    @property
    def bytes(self):
        """All 16 bytes, padding included."""
        return self._raw

    @property
    def printable(self):
        return trim_after_null(self._raw)

    def __bytes__(self):
        return self._raw

    def __str__(self):
        return _as_text(self.printable)

    def __repr__(self):
        return f"Prefix({self._raw!r})"

    def __eq__(self, other):
        if not isinstance(other, Prefix):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self):
        return hash(self._raw)


NIL_PREFIX = Prefix()


class PKSUID:
    """A 36-byte prefixed KSUID.

    Compares and hashes by its raw bytes. ``set_prefix`` is the only mutation,
    so identifiers used as dict keys or set members should not be re-prefixed.
    """

    __slots__ = ("_raw",)

    def __init__(self, raw=None):
        if raw is None:
            raw = _NIL_PKSUID
        raw = bytearray(_as_bytes(raw))
        if len(raw) < PKSUID_BYTE_LENGTH:
            raise TooShortError(ERR_RAW_MIN_SIZE, length=len(raw))
        if len(raw) > PKSUID_BYTE_LENGTH:
            raise TooLongError(ERR_MAX_SIZE, length=len(raw))
        self._raw = raw

    @classmethod
    def new(cls, prefix=NIL_PREFIX):
        """Generate a new PKSUID with the given prefix."""
        pksuid = cls()
        pksuid.set_prefix(prefix)
        pksuid._raw[PREFIX_BYTE_LENGTH:] = KSUID.new().bytes
        return pksuid

    @classmethod
    def parse(cls, encoded):
        """Decode the string form ``<prefix><27 char KSUID>``.

        ``encoded`` may be ``str`` or bytes-like. Raises ``TooShortError``,
        ``MalformedIDError`` or ``PrefixTooLongError``.
        """
        data = _as_bytes(encoded)
        if len(data) < KSUID_STRING_ENCODED_LENGTH:
            raise TooShortError(ERR_STR_SIZE, length=len(data))

        head = data[: len(data) - KSUID_STRING_ENCODED_LENGTH]
        tail = data[len(data) - KSUID_STRING_ENCODED_LENGTH :]

        try:
            uid = KSUID.parse(tail.decode("ascii"))
        except ValueError as exc:
            raise MalformedIDError(
                f"pksuid: failed to parse encoded KSUID: {exc}",
                encoded=tail.decode("ascii", "replace"),
                cause=exc,
            ) from exc

        if len(head) > PREFIX_BYTE_LENGTH:
            raise PrefixTooLongError(ERR_PREFIX_SIZE, prefix=head)

        return cls(head.ljust(PREFIX_BYTE_LENGTH, b"\x00") + uid.bytes)

    @classmethod
    def from_bytes(cls, data):
        """Construct a PKSUID from 20 to 36 raw bytes.

        The last 20 bytes are the KSUID, anything before them is the prefix.
        """
        data = bytes(data)
        if len(data) < KSUID_BYTE_LENGTH:
            raise TooShortError(ERR_MIN_SIZE, length=len(data))
        if len(data) > PKSUID_BYTE_LENGTH:
            raise TooLongError(ERR_MAX_SIZE, length=len(data))

        head = data[: len(data) - KSUID_BYTE_LENGTH]
        return cls(head.ljust(PREFIX_BYTE_LENGTH, b"\x00") + data[len(head) :])

    def set_prefix(self, prefix):
        """Overwrite all 16 prefix bytes.

        Accepts a ``Prefix`` or raw bytes, which are cut to 16 bytes and
        zero-padded without any other validation.
        """
        raw = _as_bytes(prefix)[:PREFIX_BYTE_LENGTH]
        self._raw[:PREFIX_BYTE_LENGTH] = raw.ljust(PREFIX_BYTE_LENGTH, b"\x00")

    def is_nil(self):
        """True if the KSUID part is all zeros, whatever the prefix."""
        return self._raw[PREFIX_BYTE_LENGTH:] == _NIL_KSUID

    def is_fully_nil(self):
        """True if prefix and KSUID are both all zeros."""
        return self._raw == _NIL_PKSUID

    @property
    def bytes(self):
        return bytes(self._raw)

    @property
    def ksuid(self):
        return KSUID(self.id_bytes)

    @property
    def time(self):
        return self.ksuid.time

    @property
    def timestamp(self):
        """Timestamp as a bare integer, uncorrected for the KSUID epoch."""
        return self.ksuid.timestamp

    @property
    def payload(self):
        return self.ksuid.payload

    @property
    def prefix(self):
        return Prefix(self.prefix_bytes)

    @property
    def prefix_bytes(self):
        return bytes(self._raw[:PREFIX_BYTE_LENGTH])

    @property
    def id(self):
        """The encoded KSUID without the prefix."""
        return str(self.ksuid)

    @property
    def id_bytes(self):
        return bytes(self._raw[PREFIX_BYTE_LENGTH:])

    def __bytes__(self):
        return bytes(self._raw)

    def __str__(self):
        return _as_text(trim_after_null(self.prefix_bytes)) + self.id

    def __repr__(self):
        return f"PKSUID('{self}')"

    def __eq__(self, other):
        if not isinstance(other, PKSUID):
            return NotImplemented
        return self._raw == other._raw

    def __lt__(self, other):
        if not isinstance(other, PKSUID):
            return NotImplemented
        return self._raw < other._raw

    def __hash__(self):
        return hash(bytes(self._raw))


# Shared constant, never re-prefix it.
NIL = PKSUID()
