"""Enums addressed by their snake_case names."""

from __future__ import annotations

import functools
import re
from enum import Enum

_WORD_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def to_snake_case(name: str) -> str:
    """Return the snake_case form of a CamelCase or UPPER_SNAKE name."""
    if "_" in name or name.isupper():
        return name.lower()
    return _WORD_BOUNDARY.sub("_", name).lower()


@functools.cache
def _members_by_name(enum_cls: type[NamedEnum]) -> dict[str, NamedEnum]:
    return {member.as_name(): member for member in enum_cls}


class NamedEnum(Enum):
    """Enum whose members have a recognizable snake_case label."""

    def as_name(self) -> str:
        """Return the snake_case label of this member."""
        return to_snake_case(self.name)

    @classmethod
    def by_name(cls, name: str) -> NamedEnum | None:
        """Return the member with the snake_case label `name`, if any."""
        return _members_by_name(cls).get(name)