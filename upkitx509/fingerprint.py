"""Fingerprints of binary data."""

from __future__ import annotations

import hashlib


def fingerprint_data(data: bytes) -> str:
    """Return the lower case hex encoded SHA3-512 digest of `data`."""
    return hashlib.sha3_512(bytes(data)).hexdigest()