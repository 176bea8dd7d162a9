"""JSON Web Token generator (:rfc:`7519`, :rfc:`7515` compact serialisation).

Produces ``base64url(header).base64url(payload).base64url(signature)``
where:

- the header is the caller's headers merged with ``{"typ": "JWT",
  "alg": <id>}`` -- the two fixed keys always win;
- ``None`` and empty-string values are dropped from both header and
  payload before encoding;
- the signature is computed over ``header.payload`` by the strategy the
  :mod:`authgen.crypto.registry` resolves for the algorithm.

Only token *generation* is provided. Verifying or decoding tokens is out
of scope.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from authgen.crypto.registry import resolve
from authgen.crypto.signers import signer_for
from authgen.encoding import base64url_encode, decode_base64_key, json_segment
from authgen.generators.base import Generator
from authgen.models import SigningRequest

logger = logging.getLogger(__name__)


def filter_empty(mapping: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of *mapping* without ``None`` or ``""`` values."""
    return {
        key: value
        for key, value in mapping.items()
        if value is not None and not (isinstance(value, str) and value == "")
    }


def signing_input(request: SigningRequest) -> str:
    """Return the canonical ``header.payload`` message that gets signed."""
    header = filter_empty(
        {**request.headers, "typ": "JWT", "alg": request.algorithm.value}
    )
    payload = filter_empty(request.payload)
    return f"{json_segment(header)}.{json_segment(payload)}"


def _key_bytes(request: SigningRequest) -> bytes:
    if request.key_base64_encoded:
        return decode_base64_key(request.key)
    if isinstance(request.key, bytes):
        return request.key
    return request.key.encode("utf-8")


def sign(request: SigningRequest) -> str:
    """Build and sign a JWT.

    Args:
        request: Headers, claims, algorithm and key material.

    Returns:
        The compact serialised token.

    Raises:
        ConfigurationError: If the algorithm is unknown, the payload holds
            a value JSON cannot represent, or the key is
            flagged as base64 but does not decode.
        DomainError: If the key is rejected by the crypto backend or the
            algorithm has no signing strategy.
    """
    spec = resolve(request.algorithm)
    key = _key_bytes(request)
    message = signing_input(request)
    logger.debug("Signing JWT with %s (%s)", spec.algorithm.value, spec.family.value)
    signature = signer_for(spec).sign(message.encode("ascii"), key)
    return f"{message}.{base64url_encode(signature)}"


class JWTGenerator(Generator):
    """Generate a signed JWT for use as a ``Bearer`` credential."""

    scheme = "Bearer"

    def __init__(self, data: SigningRequest) -> None:
        self.data = data

    def generate(self) -> str:
        return sign(self.data)
