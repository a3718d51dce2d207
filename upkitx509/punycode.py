"""Punycode (RFC 3492) encoding of DNS names, label by label."""

from __future__ import annotations

import logging

from .errors import DecodingError

_log = logging.getLogger(__name__)

_ACE_PREFIX = "xn--"


def _encode_label(label: str) -> str:
    if label.isascii():
        return label
    return _ACE_PREFIX + label.encode("punycode").decode("ascii")


def _decode_label(label: str) -> str:
    if not label.startswith(_ACE_PREFIX):
        return label
    try:
        return label[len(_ACE_PREFIX):].encode("ascii").decode("punycode")
    except UnicodeError as e:
        raise DecodingError(f"Invalid punycode label '{label}': {e}") from e


def encode(dns_name_utf8: str) -> str:
    """Lower-case the name and punycode every label that is not ASCII."""
    dns_name_punycode = ".".join(
        _encode_label(label) for label in dns_name_utf8.lower().split(".")
    )
    _log.debug("dns_name. input: %s, punycode: %s", dns_name_utf8, dns_name_punycode)
    return dns_name_punycode


def decode(dns_name_punycode: str) -> str:
    """Lower-case the name and decode every 'xn--' label to UTF-8 text."""
    dns_name_utf8 = ".".join(
        _decode_label(label) for label in dns_name_punycode.lower().split(".")
    )
    _log.debug("dns_name. punycode: %s, output: %s", dns_name_punycode, dns_name_utf8)
    return dns_name_utf8