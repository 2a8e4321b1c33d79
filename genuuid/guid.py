"""
GUID helpers — byte-order normalization and tolerant token parsing.

Usage:
    from genuuid.guid import parse_identifier, from_raw_bytes

    parse_identifier("urn:uuid:9b2f0c1e-...")   # UUID or None
    from_raw_bytes(hashlib.md5(data).digest())  # UUID in GUID layout
"""

import re
import uuid
from typing import Callable, Optional

BRACKETS = "{[]}"

_HEX = "[0-9a-fA-F]"
_CANONICAL = re.compile(rf"^{_HEX}{{8}}-{_HEX}{{4}}-{_HEX}{{4}}-{_HEX}{{4}}-{_HEX}{{12}}$")
_COMPACT = re.compile(rf"^{_HEX}{{32}}$")


class IdentifierFormatError(ValueError):
    """Raw identifier bytes are not exactly 16 bytes long."""


# ─────────────────────────────────────────────────────────────────────────────
# Byte order
# ─────────────────────────────────────────────────────────────────────────────

def change_byte_order(raw: bytes) -> bytes:
    """
    Reorder 16 bytes into GUID layout.

    The first group of 4 bytes is reversed, each of the next two groups of
    2 bytes is reversed, the last 8 bytes are kept as they are.
    """
    if raw is None or len(raw) != 16:
        raise IdentifierFormatError(
            f"expected 16 bytes, got {0 if raw is None else len(raw)}"
        )
    raw = bytes(raw)
    return raw[3::-1] + raw[5:3:-1] + raw[7:5:-1] + raw[8:]


def from_raw_bytes(raw: bytes) -> uuid.UUID:
    """Identifier for a raw 16-byte value (content hash, PDF trailer ID)."""
    return uuid.UUID(bytes_le=change_byte_order(raw))


# ─────────────────────────────────────────────────────────────────────────────
# Token parsing
# ─────────────────────────────────────────────────────────────────────────────

def _strict(token: str) -> Optional[uuid.UUID]:
    token = token.strip()
    if _CANONICAL.match(token):
        return uuid.UUID(token)
    return None


def _compact(token: str) -> Optional[uuid.UUID]:
    if _COMPACT.match(token):
        return uuid.UUID(hex=token)
    return None


def _trim(token: str) -> str:
    return token.strip().strip(BRACKETS)


def _strict_trimmed(token: str) -> Optional[uuid.UUID]:
    trimmed = _trim(token)
    if len(trimmed) > 31:
        return _strict(trimmed)
    return None


def _without_hyphens(token: str) -> Optional[uuid.UUID]:
    return _compact(_trim(token).replace("-", ""))


def _after_first_hyphen(token: str) -> Optional[uuid.UUID]:
    trimmed = _trim(token)
    if "-" not in trimmed:
        return None
    tail = trimmed[trimmed.index("-") + 1:]
    return _compact(tail.replace("-", ""))


# Order matters: each step is a heuristic for a variant seen in real files.
CLEANING_STEPS: list[Callable[[str], Optional[uuid.UUID]]] = [
    _strict,
    _strict_trimmed,
    _without_hyphens,
    _after_first_hyphen,
]


def _first_match(token: str) -> Optional[uuid.UUID]:
    for step in CLEANING_STEPS:
        result = step(token)
        if result is not None:
            return result
    return None


def parse_identifier(token: Optional[str]) -> Optional[uuid.UUID]:
    """
    Parse an identifier token, tolerating the usual decorations.

    Strips a namespace prefix up to the last colon (``urn:uuid:``, ``uuid:``),
    then runs CLEANING_STEPS. Returns None when nothing matches.
    """
    if not token or not token.strip():
        return None
    if ":" in token:
        token = token[token.rindex(":") + 1:]
    return _first_match(token)


def parse_fb2_id(value: Optional[str]) -> Optional[uuid.UUID]:
    """
    Parse a FictionBook document-info/id value.

    Values of 31 characters or fewer are rejected outright; no prefix is
    stripped. Longer values run through CLEANING_STEPS.
    """
    if not value:
        return None
    value = value.strip()
    if len(value) <= 31:
        return None
    return _first_match(value)
