"""Errors raised while encoding, decoding and validating certificate data."""

from __future__ import annotations

from enum import Enum


class DecodingError(Exception):
    """Raised when encoded data cannot be decoded."""

    def __init__(self, msg: str | None = None) -> None:
        super().__init__(*(() if msg is None else (msg,)))
        self.msg = msg

    def __str__(self) -> str:
        if self.msg is None:
            return "DecodingError"
        return f"DecodingError {self.msg}"


class _KindError(Exception):
    """Error carrying a kind and an optional message."""

    def __init__(self, kind: Enum, msg: str | None = None) -> None:
        super().__init__(kind, msg)
        self.kind = kind
        self.msg = msg

    def __str__(self) -> str:
        if self.msg is None:
            return str(self.kind)
        return f"{self.kind} {self.msg}"


class IdentityFragmentErrorKind(Enum):
    """Cause of an identity fragment handling error."""

    ENCODING_FAILURE = "EncodingFailure"
    DECODING_FAILURE = "DecodingFailure"
    UNKNOWN_ATTRIBUTE = "UnknownAttribute"
    INVALID_ATTRIBUTE_VALUE = "InvalidAttributeValue"

    def __str__(self) -> str:
        return self.value

    def error(self, msg: str | None = None) -> IdentityFragmentError:
        """Return a new error of this kind."""
        return IdentityFragmentError(self, msg)


class IdentityFragmentError(_KindError):
    """Identity fragment handling error."""

    kind: IdentityFragmentErrorKind


class CertificateValidationErrorKind(Enum):
    """Cause of a certificate validation error."""

    CERTIFICATE_PARSING_ERROR = "CertificateParsingError"
    INVALID_SIGNATURE = "InvalidSignature"
    UNKNOWN_SIGNATURE = "UnknownSignature"
    INVALID_LIFE_SPAN = "InvalidLifeSpan"
    NOT_ONE_LEAF = "NotOneLeaf"
    NOT_TRUSTED = "NotTrusted"
    UNHANDLED_CRITICAL_EXTENSIONS = "UnhandledCriticalExtensions"
    EXTENSION_HANDLING_FAILURE = "ExtensionHandlingFailure"

    def __str__(self) -> str:
        return self.value

    def error(self, msg: str | None = None) -> CertificateValidationError:
        """Return a new error of this kind."""
        return CertificateValidationError(self, msg)


class CertificateValidationError(_KindError):
    """Certificate validation error."""

    kind: CertificateValidationErrorKind