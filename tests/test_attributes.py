import pytest

from upkitx509 import der
from upkitx509.attribute_info import Asn1EncodingType
from upkitx509.attributes import WellKnownAttribute
from upkitx509.errors import IdentityFragmentError, IdentityFragmentErrorKind
from upkitx509.identity_fragment import IdentityFragment


def _atav(oid, tag, value: bytes) -> bytes:
    return der.encode_sequence([der.encode_oid(oid), der.encode_tlv(tag, value)])


def test_by_oid_common_name():
    assert WellKnownAttribute.by_oid((2, 5, 4, 3)) is WellKnownAttribute.COMMON_NAME


def test_by_oid_extended_validation():
    oid = [1, 3, 6, 1, 4, 1, 311, 60, 2, 1, 3]
    assert WellKnownAttribute.by_oid(oid) is WellKnownAttribute.JURISDICTION_COUNTRY


def test_by_oid_unknown():
    with pytest.raises(IdentityFragmentError) as info:
        WellKnownAttribute.by_oid((1, 2, 3))
    assert info.value.kind is IdentityFragmentErrorKind.UNKNOWN_ATTRIBUTE


def test_names_round_trip():
    for attribute in WellKnownAttribute:
        assert WellKnownAttribute.by_name(attribute.as_name()) is attribute
        info = WellKnownAttribute.meta_data_by_name(attribute.as_name())
        assert WellKnownAttribute.by_oid(info.oid) is attribute


def test_with_value():
    idf = WellKnownAttribute.COMMON_NAME.with_value("An entity")
    assert idf == IdentityFragment("common_name", "An entity")


def test_meta_data_country_name():
    info = WellKnownAttribute.meta_data_by_name("country_name")
    assert info.oid == (2, 5, 4, 6)
    assert info.encoding is Asn1EncodingType.PRINTABLE_STRING
    assert info.max_char_len == 2


def test_meta_data_unknown():
    with pytest.raises(IdentityFragmentError) as info:
        WellKnownAttribute.meta_data_by_name("no_such_attribute")
    assert info.value.kind is IdentityFragmentErrorKind.UNKNOWN_ATTRIBUTE


def test_validate_too_long_country():
    with pytest.raises(IdentityFragmentError) as info:
        WellKnownAttribute.validate(WellKnownAttribute.COUNTRY_NAME.with_value("SWE"))
    assert info.value.kind is IdentityFragmentErrorKind.INVALID_ATTRIBUTE_VALUE


def test_validate_invalid_printable_chars():
    with pytest.raises(IdentityFragmentError) as info:
        WellKnownAttribute.validate(WellKnownAttribute.COUNTRY_NAME.with_value("S!"))
    assert info.value.kind is IdentityFragmentErrorKind.INVALID_ATTRIBUTE_VALUE


def test_validate_invalid_ia5_chars():
    with pytest.raises(IdentityFragmentError) as info:
        WellKnownAttribute.validate(WellKnownAttribute.DOMAIN_COMPONENT.with_value("åäö"))
    assert info.value.kind is IdentityFragmentErrorKind.INVALID_ATTRIBUTE_VALUE


def test_validate_utf8_counts_bytes():
    idf = WellKnownAttribute.COMMON_NAME.with_value("å" * 33)
    with pytest.raises(IdentityFragmentError) as info:
        WellKnownAttribute.validate(idf)
    assert "exceeds 64 chars" in str(info.value)


def test_validate_unknown_name():
    with pytest.raises(IdentityFragmentError) as info:
        WellKnownAttribute.validate(IdentityFragment("unknown", "x"))
    assert info.value.kind is IdentityFragmentErrorKind.UNKNOWN_ATTRIBUTE


def test_to_der_common_name_bytes():
    encoded = WellKnownAttribute.to_der(WellKnownAttribute.COMMON_NAME.with_value("A"))
    assert encoded == bytes.fromhex("300806035504030c0141")


@pytest.mark.parametrize(
    "attribute, value",
    [
        (WellKnownAttribute.COMMON_NAME, "Übernice entity"),
        (WellKnownAttribute.COUNTRY_NAME, "SE"),
        (WellKnownAttribute.DOMAIN_COMPONENT, "example"),
        (WellKnownAttribute.ORGANIZATION_IDENTIFIER, "VATDE-123456789"),
    ],
)
def test_round_trip(attribute, value):
    idf = attribute.with_value(value)
    assert WellKnownAttribute.from_der(WellKnownAttribute.to_der(idf)) == idf


def test_to_der_uses_preferred_encoding():
    encoded = WellKnownAttribute.to_der(WellKnownAttribute.COUNTRY_NAME.with_value("SE"))
    _, content, _ = der.decode_tlv(encoded)
    elements = der.decode_sequence(content)
    assert elements[1] == (der.Tag.PRINTABLE_STRING, b"SE")


def test_to_der_rejects_invalid_chars():
    with pytest.raises(IdentityFragmentError) as info:
        WellKnownAttribute.to_der(WellKnownAttribute.COUNTRY_NAME.with_value("å"))
    assert info.value.kind is IdentityFragmentErrorKind.INVALID_ATTRIBUTE_VALUE


def test_from_der_utf8_attribute_accepts_printable():
    data = _atav((2, 5, 4, 3), der.Tag.PRINTABLE_STRING, b"Legacy")
    assert WellKnownAttribute.from_der(data) == IdentityFragment("common_name", "Legacy")


def test_from_der_ia5_attribute_rejects_utf8_tag():
    data = _atav((0, 9, 2342, 19200300, 100, 1, 25), der.Tag.UTF8_STRING, b"example")
    with pytest.raises(IdentityFragmentError) as info:
        WellKnownAttribute.from_der(data)
    assert info.value.kind is IdentityFragmentErrorKind.DECODING_FAILURE


def test_from_der_unknown_oid():
    data = _atav((1, 2, 3), der.Tag.UTF8_STRING, b"x")
    with pytest.raises(IdentityFragmentError) as info:
        WellKnownAttribute.from_der(data)
    assert info.value.kind is IdentityFragmentErrorKind.UNKNOWN_ATTRIBUTE