import pytest

from upkitx509.errors import (
    CertificateValidationError,
    CertificateValidationErrorKind,
    DecodingError,
    IdentityFragmentError,
    IdentityFragmentErrorKind,
)


def test_decoding_error_without_message():
    assert str(DecodingError()) == "DecodingError"
    assert DecodingError().msg is None


def test_decoding_error_with_message():
    err = DecodingError("bad input")
    assert str(err) == "DecodingError bad input"
    assert err.msg == "bad input"


def test_identity_fragment_error_with_message():
    msg = "'x' is not a known attribute."
    err = IdentityFragmentErrorKind.UNKNOWN_ATTRIBUTE.error(msg)
    assert str(err) == "UnknownAttribute 'x' is not a known attribute."
    assert err.kind is IdentityFragmentErrorKind.UNKNOWN_ATTRIBUTE
    assert err.msg == msg


def test_certificate_validation_error_without_message():
    err = CertificateValidationErrorKind.NOT_TRUSTED.error()
    assert str(err) == "NotTrusted"
    assert err.msg is None


@pytest.mark.parametrize("kind", list(IdentityFragmentErrorKind))
def test_identity_fragment_kinds_raise(kind):
    with pytest.raises(IdentityFragmentError) as info:
        raise IdentityFragmentErrorKind.error(kind, "detail")
    assert info.value.kind is kind
    assert str(info.value).endswith(" detail")
    assert str(info.value).startswith(kind.value)


@pytest.mark.parametrize("kind", list(CertificateValidationErrorKind))
def test_certificate_validation_kinds_raise(kind):
    with pytest.raises(CertificateValidationError) as info:
        raise CertificateValidationErrorKind.error(kind)
    assert info.value.kind is kind
    assert str(info.value) == kind.value


def test_error_families_are_distinct():
    err = IdentityFragmentErrorKind.DECODING_FAILURE.error("x")
    assert err.kind is IdentityFragmentErrorKind.DECODING_FAILURE
    assert str(err) == "DecodingFailure x"
    assert not isinstance(err, CertificateValidationError)
    assert not isinstance(err, DecodingError)