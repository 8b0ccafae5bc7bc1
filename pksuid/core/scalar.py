"""
Conversion between PKSUIDs and database scalars.

A scalar is whatever a storage driver hands back: ``None``, raw bytes or a
string. Bytes are ambiguous, they may hold the 36 byte binary form or the
encoded text form, and are classified by inspecting them:

* longer than 36 bytes: text, the binary form never exceeds 36 bytes
* at least 27 bytes ending in 27 base62 symbols: text
* anything else: binary

The second rule is a heuristic. A binary value whose last 27 bytes all happen
to be base62 symbols is read as text.
"""

import sqlite3
from typing import Annotated

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from pksuid.core.errors import UnsupportedScalarTypeError
from pksuid.core.identifier import PKSUID, PKSUID_BYTE_LENGTH
from pksuid.internal.logging import get_logger
from pksuid.utils.base62 import is_base62_bytes
from pksuid.utils.ksuid import STRING_ENCODED_LENGTH

_BYTE_TYPES = (bytes, bytearray, memoryview)


def to_scalar(pksuid):
    """Nil identifiers become ``None``, everything else its string form."""
    if pksuid.is_nil():
        return None
    return str(pksuid)


def looks_like_text(data):
    """Classify a byte scalar as encoded text (True) or binary (False)."""
    if len(data) > PKSUID_BYTE_LENGTH:
        return True
    return len(data) >= STRING_ENCODED_LENGTH and is_base62_bytes(
        data[len(data) - STRING_ENCODED_LENGTH :]
    )


def from_scalar(value):
    """Build a PKSUID from ``None``, bytes or a string.

    ``None`` yields a fully nil identifier, so a nil identifier carrying a
    prefix does not survive a ``to_scalar``/``from_scalar`` round trip.
    """
    log = get_logger()

    if value is None:
        return PKSUID()
    if isinstance(value, PKSUID):
        return PKSUID(value.bytes)
    if isinstance(value, str):
        return PKSUID.parse(value)
    if isinstance(value, _BYTE_TYPES):
        data = bytes(value)
        if looks_like_text(data):
            log.debug("scalar read as text", length=len(data))
            return PKSUID.parse(data)
        log.debug("scalar read as binary", length=len(data))
        return PKSUID.from_bytes(data)

    type_name = type(value).__name__
    raise UnsupportedScalarTypeError(
        f"scan: unable to scan type {type_name} into PKSUID", type_name=type_name
    )


# Pydantic field type, e.g. ``owner: PKSUIDField``.
PKSUIDField = Annotated[
    PKSUID,
    PlainValidator(from_scalar),
    PlainSerializer(str, return_type=str),
    WithJsonSchema({"type": "string", "description": "Prefixed KSUID"}),
]


def register_sqlite3(declared_type="PKSUID"):
    """Store PKSUIDs through sqlite3 and read back columns of ``declared_type``.

    Converters only run on connections opened with
    ``detect_types=sqlite3.PARSE_DECLTYPES``, and sqlite3 never runs them on
    NULL. Nil identifiers are written as NULL and come back as ``None``; pass
    such values through ``from_scalar`` to get the fully nil identifier.
    """
    sqlite3.register_adapter(PKSUID, to_scalar)
    sqlite3.register_converter(declared_type, from_scalar)
