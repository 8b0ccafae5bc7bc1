from pksuid.core.errors import (
    PKSUIDError,
    TooShortError,
    TooLongError,
    PrefixTooLongError,
    MalformedIDError,
    UnsupportedScalarTypeError,
)
from pksuid.core.identifier import PKSUID, Prefix, NIL, NIL_PREFIX
from pksuid.core.scalar import to_scalar, from_scalar, PKSUIDField, register_sqlite3
from pksuid.utils.ksuid import KSUID

__all__ = [
    "PKSUID",
    "Prefix",
    "NIL",
    "NIL_PREFIX",
    "KSUID",
    "to_scalar",
    "from_scalar",
    "PKSUIDField",
    "register_sqlite3",
    "PKSUIDError",
    "TooShortError",
    "TooLongError",
    "PrefixTooLongError",
    "MalformedIDError",
    "UnsupportedScalarTypeError",
]
