"""Metadata about well-known distinguished name attributes."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from collections.abc import Iterable

from . import der
from .errors import IdentityFragmentErrorKind


class Asn1EncodingType(Enum):
    """Preferred ASN.1 string encoding of an attribute value."""

    IA5_STRING = "IA5String"
    PRINTABLE_STRING = "PrintableString"
    UTF8_STRING = "Utf8String"

    def __str__(self) -> str:
        return self.value

    @property
    def tag(self) -> der.Tag:
        """Return the universal DER tag of this string type."""
        return _TAGS[self]


_TAGS = {
    Asn1EncodingType.IA5_STRING: der.Tag.IA5_STRING,
    Asn1EncodingType.PRINTABLE_STRING: der.Tag.PRINTABLE_STRING,
    Asn1EncodingType.UTF8_STRING: der.Tag.UTF8_STRING,
}


@dataclass(frozen=True)
class AttributeTypeAndValueInfo:
    """Object identifier, preferred encoding and maximum length of an attribute."""

    oid: tuple[int, ...]
    encoding: Asn1EncodingType
    max_char_len: int


_UNBOUNDED = sys.maxsize

_IA5 = Asn1EncodingType.IA5_STRING
_PRINTABLE = Asn1EncodingType.PRINTABLE_STRING
_UTF8 = Asn1EncodingType.UTF8_STRING

_COMMON = (
    ("serial_number", (2, 5, 4, 5), _PRINTABLE, 64),
    ("domain_component", (0, 9, 2342, 19200300, 100, 1, 25), _IA5, 63),
    ("country_name", (2, 5, 4, 6), _PRINTABLE, 2),
    ("state_or_province_name", (2, 5, 4, 8), _UTF8, 128),
    ("locality_name", (2, 5, 4, 7), _UTF8, 128),
    ("postal_code", (2, 5, 4, 17), _UTF8, 40),
    ("street_address", (2, 5, 4, 9), _UTF8, 128),
    ("organization_name", (2, 5, 4, 10), _UTF8, 64),
    ("surname", (2, 5, 4, 4), _UTF8, 64),
    ("given_name", (2, 5, 4, 42), _UTF8, 64),
    ("organizational_unit_name", (2, 5, 4, 11), _UTF8, 64),
    ("common_name", (2, 5, 4, 3), _UTF8, 64),
)

_EXTENDED_VALIDATION = (
    ("business_category", (2, 5, 4, 15), _UTF8, 128),
    ("jurisdiction_country", (1, 3, 6, 1, 4, 1, 311, 60, 2, 1, 3), _PRINTABLE, 2),
    ("jurisdiction_state_or_province", (1, 3, 6, 1, 4, 1, 311, 60, 2, 1, 2), _UTF8, 128),
    ("jurisdiction_locality", (1, 3, 6, 1, 4, 1, 311, 60, 2, 1, 1), _UTF8, 128),
    ("organization_identifier", (2, 5, 4, 97), _UTF8, _UNBOUNDED),
)

_INFO_BY_NAME = MappingProxyType(
    {
        name: AttributeTypeAndValueInfo(oid, encoding, max_len)
        for name, oid, encoding, max_len in (*_COMMON, *_EXTENDED_VALIDATION)
    }
)

_NAME_BY_OID = MappingProxyType({info.oid: name for name, info in _INFO_BY_NAME.items()})


def info_by_name(name: str) -> AttributeTypeAndValueInfo | None:
    """Return the metadata of the attribute named `name`, if it is known."""
    return _INFO_BY_NAME.get(name)


def name_by_oid(oid: Iterable[int]) -> str:
    """Return the snake_case name of the attribute with object identifier `oid`."""
    arcs = tuple(oid)
    try:
        return _NAME_BY_OID[arcs]
    except KeyError:
        raise IdentityFragmentErrorKind.UNKNOWN_ATTRIBUTE.error(
            f"'{list(arcs)}' is not a known attribute."
        ) from None