"""Distinguished Name."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from . import der
from .attributes import WellKnownAttribute
from .errors import DecodingError
from .fingerprint import fingerprint_data
from .identity_fragment import IdentityFragment

RDNs = tuple[tuple[IdentityFragment, ...], ...]


@dataclass(frozen=True)
class DistinguishedName:
    """A sequence of relative distinguished names of attribute fragments.

    Multi-valued relative distinguished names are supported, but discouraged.
    """

    rdns: RDNs = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "rdns", tuple(tuple(rdn) for rdn in self.rdns))

    @classmethod
    def validated(
        cls, rdns: Iterable[Iterable[IdentityFragment]]
    ) -> DistinguishedName:
        """Return a new instance after validating every attribute value."""
        dn = cls(rdns)
        for rdn in dn.rdns:
            for idf in rdn:
                WellKnownAttribute.validate(idf)
        return dn

    @classmethod
    def from_pairs(
        cls, rdns: Iterable[Iterable[Sequence[str]]]
    ) -> DistinguishedName:
        """Return a new instance from `(name, value)` pairs grouped by RDN."""
        return cls(
            tuple(IdentityFragment.from_pair(pair) for pair in rdn) for rdn in rdns
        )

    def fingerprint(self) -> str:
        """Return a hash of the DER encoding; the order of the DN is significant."""
        return fingerprint_data(self.to_der())

    def is_empty(self) -> bool:
        """Return True when no attributes are present."""
        return not any(self.rdns)

    def to_der(self) -> bytes:
        """Return the DER encoded Name."""
        return der.encode_sequence(
            der.encode_set(WellKnownAttribute.to_der(idf) for idf in rdn)
            for rdn in self.rdns
        )

    @classmethod
    def from_der(cls, data: bytes) -> DistinguishedName:
        """Return a new instance from a DER encoded Name of well-known attributes."""
        tag, content, rest = der.decode_tlv(data)
        if tag != der.Tag.SEQUENCE:
            raise DecodingError(f"Expected SEQUENCE, found tag {tag}.")
        if rest:
            raise DecodingError("Trailing data after Name.")
        rdns = []
        for rdn_tag, rdn_content in der.decode_sequence(content):
            if rdn_tag != der.Tag.SET:
                raise DecodingError(f"Expected SET, found tag {rdn_tag}.")
            rdns.append(
                tuple(
                    WellKnownAttribute.from_der(der.encode_tlv(atav_tag, atav_content))
                    for atav_tag, atav_content in der.decode_sequence(rdn_content)
                )
            )
        return cls(rdns)