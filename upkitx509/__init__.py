"""X.509 certificate building blocks: names, attributes, general names, serial numbers, validity and DER helpers."""

__version__ = "0.1.0"