"""Well-known distinguished name attributes."""

from __future__ import annotations

import string
from enum import auto

from . import der
from .attribute_info import Asn1EncodingType, AttributeTypeAndValueInfo, info_by_name, name_by_oid
from .errors import DecodingError, IdentityFragmentErrorKind
from .identity_fragment import IdentityFragment
from .naming import NamedEnum

_PRINTABLE_CHARS = frozenset(string.ascii_letters + string.digits + " '()+,-./:=?")


def _is_ia5(value: str) -> bool:
    return value.isascii()


def _is_printable(value: str) -> bool:
    return all(char in _PRINTABLE_CHARS for char in value)


def _checked_length(idf: IdentityFragment, encoding: Asn1EncodingType) -> int:
    """Check the characters of the value and return its length in the encoding."""
    if encoding is Asn1EncodingType.IA5_STRING:
        valid = _is_ia5(idf.value)
    elif encoding is Asn1EncodingType.PRINTABLE_STRING:
        valid = _is_printable(idf.value)
    else:
        return len(idf.value.encode("utf-8"))
    if not valid:
        raise IdentityFragmentErrorKind.INVALID_ATTRIBUTE_VALUE.error(
            f"Attribute '{idf.name}' has invalid value '{idf.value}': "
            f"not a valid {encoding}."
        )
    return len(idf.value)


def _decode_ia5(tag: int, content: bytes) -> str | None:
    if tag != der.Tag.IA5_STRING or any(octet >= 0x80 for octet in content):
        return None
    return content.decode("ascii")


def _decode_printable(tag: int, content: bytes) -> str | None:
    if tag != der.Tag.PRINTABLE_STRING or not content.isascii():
        return None
    text = content.decode("ascii")
    return text if _is_printable(text) else None


def _decode_utf8(tag: int, content: bytes) -> str | None:
    if tag != der.Tag.UTF8_STRING:
        return None
    try:
        return content.decode("utf-8")
    except UnicodeDecodeError:
        return None


class WellKnownAttribute(NamedEnum):
    """Well-known distinguished name attributes."""

    SERIAL_NUMBER = auto()
    DOMAIN_COMPONENT = auto()
    COUNTRY_NAME = auto()
    STATE_OR_PROVINCE_NAME = auto()
    LOCALITY_NAME = auto()
    POSTAL_CODE = auto()
    STREET_ADDRESS = auto()
    ORGANIZATION_NAME = auto()
    SURNAME = auto()
    GIVEN_NAME = auto()
    ORGANIZATIONAL_UNIT_NAME = auto()
    COMMON_NAME = auto()
    # Extended validation
    BUSINESS_CATEGORY = auto()
    JURISDICTION_COUNTRY = auto()
    JURISDICTION_STATE_OR_PROVINCE = auto()
    JURISDICTION_LOCALITY = auto()
    ORGANIZATION_IDENTIFIER = auto()

    @classmethod
    def _by_name_or_raise(cls, name: str) -> WellKnownAttribute:
        attribute = cls.by_name(name)
        if attribute is None:
            raise IdentityFragmentErrorKind.UNKNOWN_ATTRIBUTE.error(
                f"'{name}' is not a known attribute."
            )
        return attribute

    @classmethod
    def by_oid(cls, oid) -> WellKnownAttribute:
        """Return the attribute with object identifier `oid`."""
        return cls._by_name_or_raise(name_by_oid(oid))

    def with_value(self, value: str) -> IdentityFragment:
        """Return an identity fragment of this attribute holding `value`."""
        return IdentityFragment(self.as_name(), value)

    @classmethod
    def meta_data_by_name(cls, name: str) -> AttributeTypeAndValueInfo:
        """Return the metadata of the attribute named `name`."""
        info = info_by_name(name)
        if info is None:
            raise IdentityFragmentErrorKind.UNKNOWN_ATTRIBUTE.error(
                f"'{name}' is not a known attribute."
            )
        return info

    @classmethod
    def validate(cls, idf: IdentityFragment) -> None:
        """Check that the value of `idf` is well-formed for its attribute.

        Only characters and length are checked, not the meaning of the value.
        """
        info = cls.meta_data_by_name(idf.name)
        length = _checked_length(idf, info.encoding)
        if length > info.max_char_len:
            raise IdentityFragmentErrorKind.INVALID_ATTRIBUTE_VALUE.error(
                f"Attribute '{idf.name}' has value '{idf.value}' that exceeds "
                f"{info.max_char_len} chars as {info.encoding}."
            )

    @classmethod
    def from_der(cls, data: bytes) -> IdentityFragment:
        """Return an identity fragment from a DER encoded AttributeTypeAndValue."""
        tag, content, rest = der.decode_tlv(data)
        if tag != der.Tag.SEQUENCE:
            raise DecodingError(f"Expected SEQUENCE, found tag {tag}.")
        if rest:
            raise DecodingError("Trailing data after AttributeTypeAndValue.")
        elements = der.decode_sequence(content)
        if len(elements) != 2:
            raise DecodingError(
                f"AttributeTypeAndValue must hold two elements, found {len(elements)}."
            )
        (oid_tag, oid_content), (value_tag, value_content) = elements
        if oid_tag != der.Tag.OBJECT_IDENTIFIER:
            raise DecodingError(f"Expected OBJECT IDENTIFIER, found tag {oid_tag}.")
        attribute = cls.by_oid(der.decode_oid(oid_content))
        name = attribute.as_name()
        encoding = cls.meta_data_by_name(name).encoding
        if encoding is Asn1EncodingType.IA5_STRING:
            value = _decode_ia5(value_tag, value_content)
            failure = f"Failed to decode IA5String for attribute '{name}'."
        elif encoding is Asn1EncodingType.PRINTABLE_STRING:
            value = _decode_printable(value_tag, value_content)
            failure = f"Failed to decode PrintableString for attribute '{name}'."
        else:
            value = _decode_utf8(value_tag, value_content)
            if value is None:
                value = _decode_printable(value_tag, value_content)
            failure = (
                f"Failed to decode Utf8String for attribute '{name}'. "
                "Even PrintableString decoding failed."
            )
        if value is None:
            raise IdentityFragmentErrorKind.DECODING_FAILURE.error(failure)
        return IdentityFragment(name, value)

    @classmethod
    def to_der(cls, idf: IdentityFragment) -> bytes:
        """Return the DER encoded AttributeTypeAndValue of `idf`."""
        info = cls.meta_data_by_name(idf.name)
        _checked_length(idf, info.encoding)
        encoded_value = der.encode_tlv(info.encoding.tag, idf.value.encode("utf-8"))
        return der.encode_sequence([der.encode_oid(info.oid), encoded_value])