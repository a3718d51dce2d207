"""Well-known X.509 GeneralName types."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass

from . import der, oid, punycode
from .errors import DecodingError
from .naming import NamedEnum

_CONTEXT_CLASS = 0x80
_CONSTRUCTED = 0x20
# otherName, x400Address, directoryName and ediPartyName are constructed.
_CONSTRUCTED_CHOICES = frozenset({0, 3, 4, 5})
_MAX_CHOICE = 8

_OTHER_NAME = 0
_RFC822_NAME = 1
_DNS_NAME = 2
_X400_ADDRESS = 3
_DIRECTORY_NAME = 4
_EDI_PARTY_NAME = 5
_URI = 6
_IP_ADDRESS = 7
_REGISTERED_ID = 8


@dataclass(frozen=True)
class GeneralName:
    """A GeneralName choice: its context tag number and raw content octets."""

    tag_number: int
    content: bytes

    def __post_init__(self) -> None:
        if not 0 <= self.tag_number <= _MAX_CHOICE:
            raise ValueError(f"Unknown GeneralName choice [{self.tag_number}].")
        object.__setattr__(self, "content", bytes(self.content))

    def to_der(self) -> bytes:
        """Return the DER encoding of this GeneralName."""
        tag = _CONTEXT_CLASS | self.tag_number
        if self.tag_number in _CONSTRUCTED_CHOICES:
            tag |= _CONSTRUCTED
        return der.encode_tlv(tag, self.content)

    @classmethod
    def from_der(cls, data: bytes) -> GeneralName:
        """Return a GeneralName from its DER encoding."""
        tag, content, rest = der.decode_tlv(data)
        if rest:
            raise DecodingError("Trailing data after GeneralName.")
        if tag & 0xC0 != _CONTEXT_CLASS:
            raise DecodingError(f"Tag {tag:#04x} is not a context specific tag.")
        number = tag & 0x1F
        if number > _MAX_CHOICE:
            raise DecodingError(f"Unknown GeneralName choice [{number}].")
        if bool(tag & _CONSTRUCTED) != (number in _CONSTRUCTED_CHOICES):
            raise DecodingError(f"Wrong form for GeneralName choice [{number}].")
        return cls(number, content)


def _ia5(text: str) -> bytes:
    if not text.isascii():
        raise ValueError(f"'{text}' is not a valid IA5String.")
    return text.encode("ascii")


def _ia5_text(content: bytes) -> str:
    return der.display_text_as_string(der.Tag.IA5_STRING, content)


def _split_mailbox(mailbox: str) -> tuple[str, str]:
    parts = mailbox.split("@")
    if len(parts) != 2:
        raise ValueError(f"'{mailbox}' is not a mailbox of the form local@domain.")
    return parts[0], parts[1]


class WellKnownGeneralName(NamedEnum):
    """Well-known GeneralName types, valued by their context tag number."""

    RFC822_NAME = _RFC822_NAME
    DNS_NAME = _DNS_NAME
    URI = _URI
    IP_ADDRESS = _IP_ADDRESS
    REGISTERED_ID = _REGISTERED_ID

    def to_general_name(self, value: str) -> GeneralName:
        """Encode the textual `value` as a GeneralName of this type."""
        if self is WellKnownGeneralName.RFC822_NAME:
            local, domain = _split_mailbox(value)
            content = _ia5(f"{local}@{punycode.encode(domain)}")
        elif self is WellKnownGeneralName.DNS_NAME:
            content = _ia5(punycode.encode(value))
        elif self is WellKnownGeneralName.URI:
            content = _ia5(value)
        elif self is WellKnownGeneralName.IP_ADDRESS:
            content = ipaddress.ip_address(value).packed
        else:
            arcs = oid.from_string(value)
            _, content, _ = der.decode_tlv(der.encode_oid(arcs))
        return GeneralName(self.value, content)

    @classmethod
    def from_general_name(
        cls, general_name: GeneralName
    ) -> tuple[WellKnownGeneralName, str] | None:
        """Return the type and text of a GeneralName if it is of a well-known type."""
        number = general_name.tag_number
        content = general_name.content
        if number in (_OTHER_NAME, _X400_ADDRESS, _EDI_PARTY_NAME):
            return None
        if number == _DIRECTORY_NAME:
            raise DecodingError("directoryName is not supported as a well-known GeneralName.")
        if number == _RFC822_NAME:
            try:
                local, domain = _split_mailbox(_ia5_text(content))
            except ValueError as e:
                raise DecodingError(str(e)) from e
            return cls.RFC822_NAME, f"{local}@{punycode.decode(domain)}"
        if number == _DNS_NAME:
            return cls.DNS_NAME, punycode.decode(_ia5_text(content))
        if number == _URI:
            return cls.URI, _ia5_text(content)
        if number == _IP_ADDRESS:
            if len(content) == 4:
                return cls.IP_ADDRESS, str(ipaddress.IPv4Address(content))
            if len(content) == 16:
                return cls.IP_ADDRESS, str(ipaddress.IPv6Address(content))
            raise DecodingError(f"IP address of {len(content)} octets.")
        return cls.REGISTERED_ID, oid.as_string(der.decode_oid(content))