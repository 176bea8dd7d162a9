"""Fluent builder for signed JSON Web Tokens.

Example::

    token = (
        JWTBuilder()
        .key(private_key_pem)
        .algorithm("RS256")
        .issued_by("example.org")
        .subject("1234567890")
        .expires_in(300)
        .to_string()
    )

Claims are checked for JSON-serialisability as they are added; header
values must be scalars and are stored as strings. ``typ`` and ``alg`` are
always set by the signer and cannot be overridden through :meth:`header`.
"""

from __future__ import annotations

import secrets
import time
from typing import Any, Callable, Optional, Union

from pydantic import ValidationError

from authgen.builders.base import Builder
from authgen.builders.claims import stringify_header_value, validate_claim
from authgen.crypto.registry import parse_algorithm
from authgen.exceptions import ConfigurationError
from authgen.generators.base import RandomSource
from authgen.generators.jwt import JWTGenerator
from authgen.models import Algorithm, SigningRequest


class JWTBuilder(Builder):
    """Collect claims, headers, algorithm and key for a JWT.

    Args:
        clock: Returns the current Unix time; used by the timestamp helpers.
        random_bytes: Source for :meth:`with_unique_jwt_id`.
    """

    CLAIM_ISSUER = "iss"
    CLAIM_SUBJECT = "sub"
    CLAIM_AUDIENCE = "aud"
    CLAIM_EXPIRATION = "exp"
    CLAIM_NOT_BEFORE = "nbf"
    CLAIM_ISSUED_AT = "iat"
    CLAIM_JWT_ID = "jti"

    def __init__(
        self,
        clock: Optional[Callable[[], float]] = None,
        random_bytes: Optional[RandomSource] = None,
    ) -> None:
        self._clock = clock or time.time
        self._random_bytes = random_bytes or secrets.token_bytes
        self._key: Union[str, bytes] = ""
        self._key_base64_encoded = False
        self._algorithm = Algorithm.HS256
        self._payload: dict[str, Any] = {}
        self._headers: dict[str, str] = {}

    def _now(self) -> int:
        return int(self._clock())

    def key(self, key: Union[str, bytes], base64_encoded: bool = False) -> JWTBuilder:
        """Set the signing key.

        Args:
            key: HMAC secret, PEM private key (RSA/ECDSA), or base64 Ed25519
                key depending on the algorithm.
            base64_encoded: Whether *key* is itself base64-encoded and must
                be decoded before use.
        """
        self._key = key
        self._key_base64_encoded = base64_encoded
        return self

    def algorithm(self, algorithm: Union[Algorithm, str]) -> JWTBuilder:
        """Set the signing algorithm.

        Raises:
            ConfigurationError: If *algorithm* is not a supported identifier.
        """
        self._algorithm = parse_algorithm(algorithm)
        return self

    def claim(self, name: str, value: Any) -> JWTBuilder:
        """Add a payload claim.

        Raises:
            ConfigurationError: If *value* is not JSON-serialisable.
        """
        if not validate_claim(value):
            raise ConfigurationError(f"claim '{name}' contains non-serializable data")
        self._payload[name] = value
        return self

    def claims(self, claims: dict[str, Any]) -> JWTBuilder:
        for name, value in claims.items():
            self.claim(name, value)
        return self

    def header(self, name: str, value: Any) -> JWTBuilder:
        """Add a JOSE header. ``None`` values are ignored.

        Raises:
            ConfigurationError: If *value* is not a scalar.
        """
        if value is None:
            return self
        self._headers[name] = stringify_header_value(value)
        return self

    def headers(self, headers: dict[str, Any]) -> JWTBuilder:
        for name, value in headers.items():
            self.header(name, value)
        return self

    def expires_in(self, seconds: int) -> JWTBuilder:
        """Set ``iat`` to now and ``exp`` to now + *seconds*."""
        now = self._now()
        self.claim(self.CLAIM_ISSUED_AT, now)
        self.claim(self.CLAIM_EXPIRATION, now + seconds)
        return self

    def not_before(self, timestamp: int) -> JWTBuilder:
        return self.claim(self.CLAIM_NOT_BEFORE, timestamp)

    def with_jwt_id(self, jwt_id: str) -> JWTBuilder:
        return self.claim(self.CLAIM_JWT_ID, jwt_id)

    def with_unique_jwt_id(self) -> JWTBuilder:
        """Set ``jti`` to 16 random bytes in hex, to help servers detect replays."""
        return self.claim(self.CLAIM_JWT_ID, self._random_bytes(16).hex())

    def issued_by(self, issuer: str) -> JWTBuilder:
        return self.claim(self.CLAIM_ISSUER, issuer)

    def subject(self, subject: str) -> JWTBuilder:
        return self.claim(self.CLAIM_SUBJECT, subject)

    def audience(self, audience: Union[str, list[str]]) -> JWTBuilder:
        return self.claim(self.CLAIM_AUDIENCE, audience)

    def with_timestamp_claims(
        self, expires_in: int, not_before: Optional[int] = None
    ) -> JWTBuilder:
        """Set ``iat``, ``exp`` and ``nbf`` at once.

        Args:
            expires_in: Seconds from now until the token expires.
            not_before: Unix time the token becomes valid; defaults to now.
        """
        now = self._now()
        self.claim(self.CLAIM_ISSUED_AT, now)
        self.claim(self.CLAIM_EXPIRATION, now + expires_in)
        self.claim(self.CLAIM_NOT_BEFORE, now if not_before is None else not_before)
        return self

    def build(self) -> JWTGenerator:
        try:
            request = SigningRequest(
                headers=dict(self._headers),
                payload=dict(self._payload),
                algorithm=self._algorithm,
                key=self._key,
                key_base64_encoded=self._key_base64_encoded,
            )
        except ValidationError as exc:
            raise ConfigurationError(f"invalid JWT settings: {exc}") from exc
        return JWTGenerator(request)
