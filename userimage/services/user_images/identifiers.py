"""Caller-supplied user identifiers and their lookup keys.

A user id reaches the service as a path segment and may be a canonical
24-character hex id, a string with such an id embedded in it (``user-<hex>``,
a pasted URL, ...), or an arbitrary legacy key. ``normalize_identifier``
classifies the input once; everything downstream matches on ``Identifier.key``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
import re

CANONICAL_ID_LENGTH = 24

_CANONICAL_RE = re.compile(r"[0-9a-fA-F]{24}")


class IdentifierKind(StrEnum):
    CANONICAL = "canonical"
    EMBEDDED = "embedded"
    LITERAL = "literal"


@dataclass(frozen=True)
class Identifier:
    kind: IdentifierKind
    key: str

    @classmethod
    def canonical(cls, value: str) -> Identifier:
        return cls(IdentifierKind.CANONICAL, value.lower())

    @classmethod
    def embedded(cls, value: str) -> Identifier:
        return cls(IdentifierKind.EMBEDDED, value.lower())

    @classmethod
    def literal(cls, value: str) -> Identifier:
        return cls(IdentifierKind.LITERAL, value)


def is_canonical_id(value: str) -> bool:
    return _CANONICAL_RE.fullmatch(value) is not None


def normalize_identifier(raw: str | None) -> Identifier | None:
    """Classify ``raw``; returns ``None`` for absent or blank input and never raises."""
    if raw is None:
        return None
    cleaned = str(raw).strip()
    if not cleaned:
        return None
    if is_canonical_id(cleaned):
        return Identifier.canonical(cleaned)
    match = _CANONICAL_RE.search(cleaned)
    if match is not None:
        return Identifier.embedded(match.group(0))
    return Identifier.literal(cleaned)
