import pytest

from upkitx509 import der
from upkitx509.errors import DecodingError
from upkitx509.validity import Validity, now_epoch_seconds


def test_is_valid_at_inclusive_bounds():
    validity = Validity(100, 200)
    assert validity.is_valid_at(100)
    assert validity.is_valid_at(150)
    assert validity.is_valid_at(200)


def test_is_not_valid_outside_bounds():
    validity = Validity(100, 200)
    assert not validity.is_valid_at(99)
    assert not validity.is_valid_at(201)


def test_inverted_validity_is_never_valid():
    validity = Validity(200, 100)
    assert not any(validity.is_valid_at(t) for t in (50, 100, 150, 200, 250))


def test_backdated_not_before():
    before = now_epoch_seconds()
    validity = Validity.with_backdated_not_before_now(before + 3600)
    after = now_epoch_seconds()
    assert before - 600 <= validity.not_before <= after - 600
    assert validity.not_after == before + 3600
    assert validity.is_valid_at(after)


def test_to_der_of_epoch():
    time_der = b"\x18\x0f19700101000000Z"
    assert Validity(0, 0).to_der() == b"\x30\x22" + time_der + time_der


def test_der_round_trip():
    validity = Validity(1_700_000_000, 2_600_000_000)
    assert Validity.from_der(validity.to_der()) == validity


def test_from_der_accepts_utc_time():
    utc = der.encode_tlv(der.Tag.UTC_TIME, b"700101000000Z")
    data = der.encode_sequence([utc, der.encode_generalized_time(86400)])
    assert Validity.from_der(data) == Validity(0, 86400)


def test_from_der_rejects_wrong_tag():
    with pytest.raises(DecodingError):
        Validity.from_der(der.encode_set([der.encode_generalized_time(0)]))


def test_from_der_rejects_wrong_element_count():
    with pytest.raises(DecodingError):
        Validity.from_der(der.encode_sequence([der.encode_generalized_time(0)]))


def test_negative_time_rejected():
    with pytest.raises(ValueError):
        Validity(-1, 10)