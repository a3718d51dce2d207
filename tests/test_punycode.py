import pytest

from upkitx509.errors import DecodingError
from upkitx509.punycode import decode, encode


def test_encdec_puny():
    dns_name_utf8 = "übernice.fantastic.åäö"
    assert decode(encode(dns_name_utf8)) == dns_name_utf8


def test_encode_marks_only_non_ascii_labels():
    encoded = encode("übernice.fantastic.åäö")
    labels = encoded.split(".")
    assert encoded.isascii()
    assert labels[0].startswith("xn--")
    assert labels[1] == "fantastic"
    assert labels[2].startswith("xn--")


def test_known_label():
    assert encode("bücher.example") == "xn--bcher-kva.example"
    assert decode("xn--bcher-kva.example") == "bücher.example"


def test_ascii_names_are_lower_cased():
    assert encode("Example.COM") == "example.com"
    assert decode("Example.COM") == "example.com"


def test_decode_is_case_insensitive():
    assert decode("XN--BCHER-KVA.example") == decode("xn--bcher-kva.example")


def test_invalid_punycode_raises():
    with pytest.raises(DecodingError):
        decode("xn--$$$.example")