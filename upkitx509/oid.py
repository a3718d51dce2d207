"""Object identifier text encoding and decoding."""

from __future__ import annotations

import re
from collections.abc import Iterable

from .errors import DecodingError

_ARC = re.compile(r"\+?[0-9]+")
_ARC_MAX = 0xFFFFFFFF


def _parse_arc(part: str) -> int:
    if not part:
        raise DecodingError("cannot parse integer from empty string")
    if not _ARC.fullmatch(part):
        raise DecodingError("invalid digit found in string")
    value = int(part)
    if value > _ARC_MAX:
        raise DecodingError("number too large to fit in target type")
    return value


def from_string(oid: str) -> list[int]:
    """Convert a dot separated string of numbers into a list of arcs."""
    return [_parse_arc(part) for part in oid.split(".")]


def as_string(oid: Iterable[int]) -> str:
    """Convert a sequence of arcs into a dot separated string."""
    return ".".join(str(part) for part in oid)