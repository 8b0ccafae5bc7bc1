"""Identifier generation and inspection routes."""

from fastapi import APIRouter

from pksuid.core.identifier import PKSUID, Prefix
from pksuid.utils.timestamp import format_datetime

router = APIRouter(prefix="/api/v1/ids", tags=["ids"])

# Set by app.py
_ids_config = None


def init(ids_config):
    """Initialize with the ids config section."""
    global _ids_config
    _ids_config = ids_config


def describe(pksuid):
    return {
        "id": str(pksuid),
        "prefix": str(pksuid.prefix),
        "ksuid": pksuid.id,
        "timestamp": pksuid.timestamp,
        "time": format_datetime(pksuid.time),
        "payload": pksuid.payload.hex(),
        "nil": pksuid.is_nil(),
    }


@router.post("", status_code=201)
async def generate(prefix: str | None = None):
    """Generate an identifier, using the configured prefix when none is given."""
    if prefix is None:
        prefix = _ids_config.default_prefix
    return describe(PKSUID.new(Prefix(prefix)))


@router.get("/{value}")
async def inspect(value: str):
    """Parse an identifier and break it into its parts."""
    return describe(PKSUID.parse(value))
