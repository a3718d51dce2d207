# upkitx509

Building blocks for X.509 certificate data in pure Python, with no
third-party dependencies.

## What it offers

- `upkitx509.distinguished_name.DistinguishedName` – names made of relative
  distinguished names of `IdentityFragment`s. `validated()` checks every
  attribute value, `from_pairs()` builds one from `(name, value)` pairs,
  `to_der()` / `from_der()` encode and decode it, `is_empty()` tells whether
  any attribute is present and `fingerprint()` returns the SHA3-512 hex digest
  of the DER encoding.
- `upkitx509.attributes.WellKnownAttribute` – the well-known name attributes
  (`common_name`, `country_name`, `organization_name`, `domain_component`,
  the extended-validation jurisdiction attributes and more). `with_value()`
  makes an `IdentityFragment`, `validate()` checks characters and length
  against the attribute's preferred encoding, `by_oid()` and
  `meta_data_by_name()` look attributes up, and `to_der()` / `from_der()`
  handle a single AttributeTypeAndValue.
- `upkitx509.attribute_info` – `Asn1EncodingType`,
  `AttributeTypeAndValueInfo`, `info_by_name()` and `name_by_oid()`: the OID,
  preferred string encoding and maximum length of each attribute.
- `upkitx509.identity_fragment.IdentityFragment` – a `name` / `value` pair.
- `upkitx509.general_name` – `GeneralName` (a context tag number and raw
  content, with `to_der()` / `from_der()`) and `WellKnownGeneralName`
  (`rfc822_name`, `dns_name`, `uri`, `ip_address`, `registered_id`).
  Non-ASCII labels in DNS names and mail domains are punycoded on the way in
  and decoded on the way out.
- `upkitx509.serial_number.SerialNumber` – random, positive, non-zero serial
  numbers of 9 to 20 octets (20 by default), with `from_int()`, `to_int()`,
  `to_der()` and `from_der()`.
- `upkitx509.validity.Validity` – inclusive not-before / not-after times in
  Unix epoch seconds, encoded as GeneralizedTime; `now_epoch_seconds()` and
  `Validity.with_backdated_not_before_now()` help build one.
- `upkitx509.oid`, `upkitx509.punycode`, `upkitx509.der` and
  `upkitx509.fingerprint` – the helpers the above are built on: dotted OID
  text, per-label punycode, a small DER encoder and decoder, and SHA3-512
  fingerprints.
- `upkitx509.errors` – `DecodingError`, plus `IdentityFragmentError` and
  `CertificateValidationError`, which carry a `kind` from
  `IdentityFragmentErrorKind` and `CertificateValidationErrorKind`.

## What it does not do

It does not parse or build whole certificates, verify signatures, or validate
certificate chains against trust anchors. `CertificateValidationError` and its
kinds are provided, but nothing in the package raises them.

## Installing

```
pip install upkitx509
```

## Examples

```python
from upkitx509.attributes import WellKnownAttribute
from upkitx509.distinguished_name import DistinguishedName

dn = DistinguishedName.validated([
    [WellKnownAttribute.COMMON_NAME.with_value("An entity")],
    [WellKnownAttribute.JURISDICTION_COUNTRY.with_value("SE")],
])
encoded = dn.to_der()
assert DistinguishedName.from_der(encoded).to_der() == encoded
print(dn.fingerprint())
```

```python
from upkitx509.general_name import GeneralName, WellKnownGeneralName

name = WellKnownGeneralName.DNS_NAME.to_general_name("übernice.example.com")
encoded = name.to_der()
print(WellKnownGeneralName.from_general_name(GeneralName.from_der(encoded)))
```

```python
from upkitx509.serial_number import SerialNumber
from upkitx509.validity import Validity, now_epoch_seconds

serial = SerialNumber.generate(16)
validity = Validity.with_backdated_not_before_now(now_epoch_seconds() + 86400)
assert validity.is_valid_at(now_epoch_seconds())
```

## Running the tests

```
pip install -e ".[test]"
pytest
```