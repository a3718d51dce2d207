"""Certificate validity period."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from . import der
from .errors import DecodingError

_log = logging.getLogger(__name__)

_BACKDATE_SECONDS = 10 * 60


def now_epoch_seconds() -> int:
    """Return the current time as seconds since 1970-01-01 00:00:00 UTC."""
    return int(time.time())


@dataclass(frozen=True)
class Validity:
    """Certificate validity period in seconds since the UNIX epoch.

    Both bounds are inclusive. Times are encoded as GeneralizedTime.
    """

    not_before: int
    not_after: int

    def __post_init__(self) -> None:
        if self.not_before < 0 or self.not_after < 0:
            raise ValueError("Validity times cannot be before the UNIX epoch.")
        if self.not_after < self.not_before:
            _log.info(
                "New validity can never be valid! not_before: %s, not_after: %s",
                self.not_before,
                self.not_after,
            )

    @classmethod
    def with_backdated_not_before_now(cls, not_after: int) -> Validity:
        """Return a validity where `not_before` is 10 minutes before now.

        Backdating allows immediate use of a certificate despite clock skew.
        """
        return cls(now_epoch_seconds() - _BACKDATE_SECONDS, not_after)

    def is_valid_at(self, point_in_time_epoch_seconds: int) -> bool:
        """Return True if the period covers `point_in_time_epoch_seconds`."""
        return self.not_before <= point_in_time_epoch_seconds <= self.not_after

    def to_der(self) -> bytes:
        """Return the DER encoded Validity SEQUENCE."""
        return der.encode_sequence(
            [
                der.encode_generalized_time(self.not_before),
                der.encode_generalized_time(self.not_after),
            ]
        )

    @classmethod
    def from_der(cls, data: bytes) -> Validity:
        """Return a validity from a DER encoded Validity SEQUENCE."""
        tag, content, rest = der.decode_tlv(data)
        if tag != der.Tag.SEQUENCE:
            raise DecodingError(f"Expected SEQUENCE, found tag {tag}.")
        if rest:
            raise DecodingError("Trailing data after validity.")
        elements = der.decode_sequence(content)
        if len(elements) != 2:
            raise DecodingError(f"Validity must hold two times, found {len(elements)}.")
        (nb_tag, nb_content), (na_tag, na_content) = elements
        return cls(der.decode_time(nb_tag, nb_content), der.decode_time(na_tag, na_content))