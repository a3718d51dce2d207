"""Partial description of an entity's identity."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class IdentityFragment:
    """A named piece of identity whose value is represented as text.

    This can be a general name or an attribute of a distinguished name.
    `name` should be snake_case.
    """

    name: str
    value: str

    @classmethod
    def from_pair(cls, pair: Sequence[str]) -> IdentityFragment:
        """Return a new instance from a `(name, value)` pair."""
        if len(pair) != 2:
            raise ValueError(f"Expected a (name, value) pair, got {len(pair)} items.")
        name, value = pair
        return cls(str(name), str(value))