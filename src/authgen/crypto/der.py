"""Minimal ASN.1 DER reader for ECDSA signatures.

The crypto backend returns ECDSA signatures DER-encoded as
``SEQUENCE { INTEGER r, INTEGER s }``. JWS (:rfc:`7518#section-3.4`)
instead wants the two integers as fixed-width big-endian octet strings
concatenated together. This module provides just enough DER parsing to
perform that conversion:

- :func:`parse` reads one TLV element and returns the next offset along
  with the element's content (``None`` for constructed types, whose
  children the caller walks itself).
- :func:`to_fixed_width` converts a DER signature to the raw ``r || s``
  form for a given curve size.
"""

from __future__ import annotations

from typing import Optional

from authgen.exceptions import DomainError

ASN1_BIT_STRING = 0x03
"""Tag number of the BIT STRING universal type."""

_CONSTRUCTED_BIT = 0x20
_TAG_NUMBER_MASK = 0x1F
_LONG_FORM_BIT = 0x80
_LENGTH_COUNT_MASK = 0x7F


def _byte_at(buffer: bytes, pos: int) -> int:
    if pos >= len(buffer):
        raise DomainError(f"truncated DER data: expected a byte at offset {pos}")
    return buffer[pos]


def parse(buffer: bytes, offset: int = 0) -> tuple[int, Optional[bytes]]:
    """Read a single DER element starting at *offset*.

    Both the short length form and the long form (high bit set, low seven
    bits giving the number of big-endian length bytes that follow) are
    supported. For a BIT STRING the leading "unused bits" byte is skipped.

    Args:
        buffer: DER-encoded bytes.
        offset: Position of the element's tag byte.

    Returns:
        A ``(new_offset, value)`` tuple. ``value`` is the element content
        for primitive types and ``None`` for constructed types, in which
        case ``new_offset`` points at the first child element.

    Raises:
        DomainError: If the buffer ends before the element does.
    """
    pos = offset
    tag = _byte_at(buffer, pos)
    pos += 1
    constructed = bool(tag & _CONSTRUCTED_BIT)
    tag_number = tag & _TAG_NUMBER_MASK

    length = _byte_at(buffer, pos)
    pos += 1
    if length & _LONG_FORM_BIT:
        count = length & _LENGTH_COUNT_MASK
        length = 0
        for _ in range(count):
            length = (length << 8) | _byte_at(buffer, pos)
            pos += 1

    if tag_number == ASN1_BIT_STRING:
        pos += 1
        end = pos + max(length - 1, 0)
    elif not constructed:
        end = pos + length
    else:
        return pos, None

    if end > len(buffer):
        raise DomainError(
            f"truncated DER data: element at offset {offset} needs {end} bytes, "
            f"got {len(buffer)}"
        )
    return end, bytes(buffer[pos:end])


def to_fixed_width(der_signature: bytes, key_bits: int) -> bytes:
    """Convert a DER ECDSA signature into the raw ``r || s`` JWS form.

    Leading ``0x00`` sign-padding bytes are stripped from each integer,
    which is then left-padded with zeros to ``ceil(key_bits / 8)`` bytes.

    Args:
        der_signature: ``SEQUENCE { INTEGER r, INTEGER s }`` in DER.
        key_bits: Curve size in bits (256 for P-256/secp256k1, 384 for P-384).

    Returns:
        Exactly ``2 * ceil(key_bits / 8)`` bytes.

    Raises:
        DomainError: If the signature is truncated, does not hold two
            integers, or a component is wider than the curve allows.
    """
    width = (key_bits + 7) // 8

    offset, _ = parse(der_signature)
    offset, r = parse(der_signature, offset)
    offset, s = parse(der_signature, offset)
    if r is None or s is None:
        raise DomainError("malformed DER signature: expected two INTEGER values")

    components = []
    for name, value in (("r", r), ("s", s)):
        value = value.lstrip(b"\x00")
        if len(value) > width:
            raise DomainError(
                f"malformed DER signature: {name} is {len(value)} bytes, "
                f"exceeds {width} for a {key_bits}-bit curve"
            )
        components.append(value.rjust(width, b"\x00"))
    return b"".join(components)
