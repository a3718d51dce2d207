"""Certificate serial number."""

from __future__ import annotations

import secrets
from dataclasses import dataclass, field

from . import der
from .errors import DecodingError

_MIN_OCTETS = 9
_MAX_OCTETS = 20


def _random_octets(count: int = _MAX_OCTETS) -> bytes:
    """Return `count` random octets forming a positive, non-zero big-endian number."""
    while True:
        rnd = bytearray(secrets.token_bytes(count))
        rnd[0] &= 0x7F
        if any(rnd):
            return bytes(rnd)


@dataclass(frozen=True)
class SerialNumber:
    """Certificate serial number as big-endian octets.

    A default instance holds 20 random octets, the most RFC 5280 allows.
    """

    octets: bytes = field(default_factory=_random_octets)

    def __post_init__(self) -> None:
        object.__setattr__(self, "octets", bytes(self.octets))

    @classmethod
    def generate(cls, octets: int | None = None) -> SerialNumber:
        """Generate a positive, non-zero serial number of 9 to 20 random octets."""
        count = _MAX_OCTETS if octets is None else octets
        count = min(max(count, _MIN_OCTETS), _MAX_OCTETS)
        return cls(_random_octets(count))

    @classmethod
    def from_int(cls, value: int) -> SerialNumber:
        """Return a serial number holding the non-negative integer `value`."""
        if value < 0:
            raise ValueError(f"A serial number cannot be negative: {value}.")
        return cls(der.integer_to_bytes_be(value))

    def to_int(self) -> int:
        """Return the serial number as a non-negative integer."""
        return int.from_bytes(self.octets, "big")

    def to_der(self) -> bytes:
        """Return the DER encoded INTEGER."""
        return der.encode_integer(self.to_int())

    @classmethod
    def from_der(cls, data: bytes) -> SerialNumber:
        """Return a serial number from a DER encoded INTEGER."""
        tag, content, rest = der.decode_tlv(data)
        if tag != der.Tag.INTEGER:
            raise DecodingError(f"Expected INTEGER, found tag {tag}.")
        if rest:
            raise DecodingError("Trailing data after serial number.")
        return cls(der.integer_to_bytes_be(der.decode_integer(content)))