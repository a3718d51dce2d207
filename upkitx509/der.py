"""Small DER toolkit for the ASN.1 types that appear in certificates."""

from __future__ import annotations

import datetime as _dt
import re
from collections.abc import Iterable, Sequence
from enum import IntEnum

from .errors import DecodingError

_EPOCH = _dt.datetime(1970, 1, 1, tzinfo=_dt.timezone.utc)
_SECOND = _dt.timedelta(seconds=1)
_UTC_TIME = re.compile(r"([0-9]{2})([0-9]{2})([0-9]{2})([0-9]{2})([0-9]{2})([0-9]{2})Z")
_GENERALIZED_TIME = re.compile(
    r"([0-9]{4})([0-9]{2})([0-9]{2})([0-9]{2})([0-9]{2})([0-9]{2})(?:\.[0-9]+)?Z"
)


class Tag(IntEnum):
    """Universal ASN.1 tags (single identifier octet)."""

    BOOLEAN = 0x01
    INTEGER = 0x02
    BIT_STRING = 0x03
    OCTET_STRING = 0x04
    NULL = 0x05
    OBJECT_IDENTIFIER = 0x06
    UTF8_STRING = 0x0C
    PRINTABLE_STRING = 0x13
    IA5_STRING = 0x16
    UTC_TIME = 0x17
    GENERALIZED_TIME = 0x18
    VISIBLE_STRING = 0x1A
    BMP_STRING = 0x1E
    SEQUENCE = 0x30
    SET = 0x31


def _encode_length(length: int) -> bytes:
    if length < 0x80:
        return bytes([length])
    body = length.to_bytes((length.bit_length() + 7) // 8, "big")
    return bytes([0x80 | len(body)]) + body


def encode_tlv(tag: int, content: bytes) -> bytes:
    """Encode a tag, length and content."""
    if not 0 <= tag <= 0xFF or tag & 0x1F == 0x1F:
        raise ValueError(f"Unsupported tag {tag!r}.")
    content = bytes(content)
    return bytes([tag]) + _encode_length(len(content)) + content


def decode_tlv(data: bytes) -> tuple[int, bytes, bytes]:
    """Split the first element off `data` as (tag, content, remaining bytes)."""
    data = bytes(data)
    if len(data) < 2:
        raise DecodingError("Truncated tag and length.")
    tag = data[0]
    if tag & 0x1F == 0x1F:
        raise DecodingError("High tag numbers are not supported.")
    first = data[1]
    offset = 2
    if first < 0x80:
        length = first
    elif first == 0x80:
        raise DecodingError("Indefinite length is not allowed in DER.")
    else:
        count = first & 0x7F
        length_bytes = data[offset:offset + count]
        if len(length_bytes) < count:
            raise DecodingError("Truncated length.")
        if length_bytes[0] == 0:
            raise DecodingError("Non-minimal length encoding.")
        length = int.from_bytes(length_bytes, "big")
        if length < 0x80:
            raise DecodingError("Non-minimal length encoding.")
        offset += count
    end = offset + length
    if len(data) < end:
        raise DecodingError("Truncated content.")
    return tag, data[offset:end], data[end:]


def integer_to_bytes_be(value: int) -> bytes:
    """Return the minimal big-endian two's complement form of `value`."""
    magnitude = value if value >= 0 else ~value
    return value.to_bytes(magnitude.bit_length() // 8 + 1, "big", signed=True)


def encode_integer(value: int) -> bytes:
    """Encode an INTEGER."""
    return encode_tlv(Tag.INTEGER, integer_to_bytes_be(value))


def decode_integer(content: bytes) -> int:
    """Decode the content octets of an INTEGER."""
    if not content:
        raise DecodingError("Empty INTEGER.")
    return int.from_bytes(content, "big", signed=True)


def _base128(value: int) -> bytes:
    out = [value & 0x7F]
    value >>= 7
    while value:
        out.append(0x80 | (value & 0x7F))
        value >>= 7
    return bytes(reversed(out))


def encode_oid(oid: Sequence[int]) -> bytes:
    """Encode an OBJECT IDENTIFIER from its arcs."""
    arcs = list(oid)
    if len(arcs) < 2:
        raise ValueError("An object identifier needs at least two arcs.")
    if any(arc < 0 for arc in arcs):
        raise ValueError("Object identifier arcs must be non-negative.")
    first, second, *rest = arcs
    if first > 2 or (first < 2 and second >= 40):
        raise ValueError(f"Invalid leading arcs {first}.{second}.")
    body = b"".join(_base128(sub) for sub in [first * 40 + second, *rest])
    return encode_tlv(Tag.OBJECT_IDENTIFIER, body)


def decode_oid(content: bytes) -> tuple[int, ...]:
    """Decode the content octets of an OBJECT IDENTIFIER into its arcs."""
    if not content:
        raise DecodingError("Empty OBJECT IDENTIFIER.")
    subids: list[int] = []
    value = 0
    in_progress = False
    for octet in content:
        if not in_progress and octet == 0x80:
            raise DecodingError("Non-minimal OBJECT IDENTIFIER sub-identifier.")
        value = (value << 7) | (octet & 0x7F)
        in_progress = bool(octet & 0x80)
        if not in_progress:
            subids.append(value)
            value = 0
    if in_progress:
        raise DecodingError("Truncated OBJECT IDENTIFIER.")
    head, *rest = subids
    if head < 40:
        leading = (0, head)
    elif head < 80:
        leading = (1, head - 40)
    else:
        leading = (2, head - 80)
    return (*leading, *rest)


def encode_sequence(items: Iterable[bytes]) -> bytes:
    """Encode a SEQUENCE of already encoded elements."""
    return encode_tlv(Tag.SEQUENCE, b"".join(items))


def encode_set(items: Iterable[bytes]) -> bytes:
    """Encode a SET OF already encoded elements in DER order."""
    return encode_tlv(Tag.SET, b"".join(sorted(bytes(item) for item in items)))


def decode_sequence(content: bytes) -> list[tuple[int, bytes]]:
    """Split constructed content into its (tag, content) elements."""
    elements = []
    rest = bytes(content)
    while rest:
        tag, value, rest = decode_tlv(rest)
        elements.append((tag, value))
    return elements


def encode_generalized_time(epoch_seconds: int) -> bytes:
    """Encode seconds since the UNIX epoch as a GeneralizedTime."""
    try:
        moment = _EPOCH + _dt.timedelta(seconds=epoch_seconds)
    except OverflowError as e:
        raise ValueError(f"Time {epoch_seconds} is out of range.") from e
    text = (
        f"{moment.year:04d}{moment.month:02d}{moment.day:02d}"
        f"{moment.hour:02d}{moment.minute:02d}{moment.second:02d}Z"
    )
    return encode_tlv(Tag.GENERALIZED_TIME, text.encode("ascii"))


def decode_time(tag: int, content: bytes) -> int:
    """Decode a UTCTime or GeneralizedTime into seconds since the UNIX epoch."""
    try:
        text = bytes(content).decode("ascii")
    except UnicodeDecodeError as e:
        raise DecodingError("Time is not ASCII.") from e
    if tag == Tag.UTC_TIME:
        match = _UTC_TIME.fullmatch(text)
        if match is None:
            raise DecodingError(f"Malformed UTCTime '{text}'.")
        two_digit_year = int(match.group(1))
        year = 1900 + two_digit_year if two_digit_year >= 50 else 2000 + two_digit_year
    elif tag == Tag.GENERALIZED_TIME:
        match = _GENERALIZED_TIME.fullmatch(text)
        if match is None:
            raise DecodingError(f"Malformed GeneralizedTime '{text}'.")
        year = int(match.group(1))
    else:
        raise DecodingError(f"Tag {tag} is not a time type.")
    month, day, hour, minute, second = (int(group) for group in match.groups()[1:6])
    try:
        moment = _dt.datetime(year, month, day, hour, minute, second, tzinfo=_dt.timezone.utc)
    except ValueError as e:
        raise DecodingError(f"Invalid time '{text}': {e}") from e
    seconds = (moment - _EPOCH) // _SECOND
    if seconds < 0:
        raise DecodingError(f"Time '{text}' is before the UNIX epoch.")
    return seconds


def _decode_bmp(content: bytes) -> str:
    if len(content) % 2:
        raise DecodingError("BMPString has an odd number of octets.")
    units = [int.from_bytes(content[i:i + 2], "big") for i in range(0, len(content), 2)]
    if any(0xD800 <= unit <= 0xDFFF for unit in units):
        raise DecodingError("BMPString contains a surrogate code unit.")
    return "".join(chr(unit) for unit in units)


def display_text_as_string(tag: int, content: bytes) -> str:
    """Decode a DisplayText choice (IA5, Visible, BMP or UTF-8 string)."""
    content = bytes(content)
    if tag == Tag.IA5_STRING:
        if any(octet >= 0x80 for octet in content):
            raise DecodingError("IA5String contains non-ASCII octets.")
        return content.decode("ascii")
    if tag == Tag.VISIBLE_STRING:
        if any(not 0x20 <= octet <= 0x7E for octet in content):
            raise DecodingError("VisibleString contains invisible octets.")
        return content.decode("ascii")
    if tag == Tag.BMP_STRING:
        return _decode_bmp(content)
    if tag == Tag.UTF8_STRING:
        try:
            return content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodingError(f"Invalid UTF8String: {e}") from e
    raise DecodingError(f"Tag {tag} is not a DisplayText type.")