"""Protocol names and their stable dispatch hashes."""

from __future__ import annotations

import zlib

PROTOCOL_SEPARATOR = "://"
NATURAL_PROTOCOL = "file"


def normalize_protocol(protocol: str) -> str:
    """Lower-case a protocol name for comparison and hashing."""
    return protocol.lower()


def protocol_hash(protocol: str) -> int:
    """Deterministic 32-bit hash of the lower-cased protocol name.

    Unlike :func:`hash`, the value is identical across interpreter runs
    (``PYTHONHASHSEED`` has no effect), so it can be persisted or used as a
    dispatch key shared between processes.

    :param protocol: Protocol name, in any case.
    """
    return zlib.crc32(normalize_protocol(protocol).encode("utf-8"))
