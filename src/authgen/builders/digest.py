"""Fluent builder for HTTP Digest credentials.

The server nonce and client nonce default to fresh random hex strings
(16 and 8 random bytes). When answering a real challenge, set ``nonce``,
``opaque``, ``realm`` and ``qop`` from the server's ``WWW-Authenticate``
header.
"""

from __future__ import annotations

import secrets
from typing import Optional, Union

from pydantic import ValidationError

from authgen.builders.base import Builder
from authgen.exceptions import ConfigurationError
from authgen.generators.base import RandomSource
from authgen.generators.digest import DigestAuthGenerator
from authgen.models import DigestAlgorithm, DigestChallenge


def parse_digest_algorithm(algorithm: Union[DigestAlgorithm, str]) -> DigestAlgorithm:
    """Turn an identifier such as ``"SHA-256-sess"`` into a :class:`DigestAlgorithm`.

    Raises:
        ConfigurationError: If the identifier is unknown.
    """
    if isinstance(algorithm, DigestAlgorithm):
        return algorithm
    try:
        return DigestAlgorithm(algorithm)
    except ValueError:
        known = ", ".join(a.value for a in DigestAlgorithm)
        raise ConfigurationError(
            f"unknown digest algorithm '{algorithm}'. Supported: {known}"
        ) from None


class DigestAuthBuilder(Builder):
    """Collect credentials and challenge values for a Digest response.

    Args:
        random_bytes: Source for the default nonce and client nonce. Unset
            nonces are drawn again on every :meth:`build`, so a reused
            builder never repeats a client nonce.

    Example::

        (
            DigestAuthBuilder()
            .username("user")
            .password("pass")
            .realm("example.com")
            .uri("/path")
            .qop("auth")
            .nonce_count("00000001")
            .to_header()
        )
    """

    def __init__(self, random_bytes: Optional[RandomSource] = None) -> None:
        self._random_bytes = random_bytes or secrets.token_bytes
        self._username = ""
        self._password = ""
        self._algorithm = DigestAlgorithm.MD5
        self._realm = ""
        self._method = "GET"
        self._uri = "/"
        self._nonce: Optional[str] = None
        self._nc = ""
        self._cnonce: Optional[str] = None
        self._qop = ""
        self._opaque = ""
        self._entity_body = ""

    def username(self, username: str) -> DigestAuthBuilder:
        self._username = username
        return self

    def password(self, password: str) -> DigestAuthBuilder:
        self._password = password
        return self

    def algorithm(self, algorithm: Union[DigestAlgorithm, str]) -> DigestAuthBuilder:
        self._algorithm = parse_digest_algorithm(algorithm)
        return self

    def realm(self, realm: str) -> DigestAuthBuilder:
        self._realm = realm
        return self

    def method(self, method: str) -> DigestAuthBuilder:
        self._method = method
        return self

    def uri(self, uri: str) -> DigestAuthBuilder:
        self._uri = uri
        return self

    def nonce(self, nonce: str) -> DigestAuthBuilder:
        self._nonce = nonce
        return self

    def nonce_count(self, nc: str) -> DigestAuthBuilder:
        self._nc = nc
        return self

    def client_nonce(self, cnonce: str) -> DigestAuthBuilder:
        self._cnonce = cnonce
        return self

    def qop(self, qop: str) -> DigestAuthBuilder:
        """Set the quality of protection: ``""``, ``"auth"`` or ``"auth-int"``."""
        self._qop = qop
        return self

    def opaque(self, opaque: str) -> DigestAuthBuilder:
        self._opaque = opaque
        return self

    def entity_body(self, body: str) -> DigestAuthBuilder:
        """Set the request body hashed into HA2 when qop is ``auth-int``."""
        self._entity_body = body
        return self

    def _random_hex(self, size: int) -> str:
        return self._random_bytes(size).hex()

    def build(self) -> DigestAuthGenerator:
        try:
            challenge = DigestChallenge(
                username=self._username,
                password=self._password,
                realm=self._realm,
                method=self._method,
                uri=self._uri,
                nonce=self._random_hex(16) if self._nonce is None else self._nonce,
                nc=self._nc,
                cnonce=self._random_hex(8) if self._cnonce is None else self._cnonce,
                qop=self._qop,
                opaque=self._opaque,
                entity_body=self._entity_body,
                algorithm=self._algorithm,
            )
        except ValidationError as exc:
            raise ConfigurationError(f"invalid digest settings: {exc}") from exc
        return DigestAuthGenerator(challenge)
