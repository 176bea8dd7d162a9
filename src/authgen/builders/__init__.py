"""Fluent builders -- the main entry point of the library.

:class:`AuthGenerator` hands out a fresh builder per credential type; the
same factories are available as module-level functions::

    from authgen import builders

    builders.basic_auth().username("user").password("pass").to_header()
    builders.bearer_token().length(48).prefix("sk_").to_string()
    builders.jwt().key("secret").issued_by("me").expires_in(60).to_headers()
    builders.digest_auth().username("u").password("p").realm("r").to_header()
"""

from authgen.builders.base import Builder
from authgen.builders.basic import BasicAuthBuilder
from authgen.builders.bearer import BearerTokenBuilder
from authgen.builders.claims import stringify_header_value, validate_claim
from authgen.builders.digest import DigestAuthBuilder, parse_digest_algorithm
from authgen.builders.jwt import JWTBuilder


class AuthGenerator:
    """Factory for the credential builders."""

    @staticmethod
    def basic_auth() -> BasicAuthBuilder:
        """Create a Basic authentication builder."""
        return BasicAuthBuilder()

    @staticmethod
    def bearer_token() -> BearerTokenBuilder:
        """Create a random bearer token builder."""
        return BearerTokenBuilder()

    @staticmethod
    def digest_auth() -> DigestAuthBuilder:
        """Create a Digest authentication builder."""
        return DigestAuthBuilder()

    @staticmethod
    def jwt() -> JWTBuilder:
        """Create a JWT builder."""
        return JWTBuilder()


basic_auth = AuthGenerator.basic_auth
bearer_token = AuthGenerator.bearer_token
digest_auth = AuthGenerator.digest_auth
jwt = AuthGenerator.jwt

__all__ = [
    "AuthGenerator",
    "BasicAuthBuilder",
    "BearerTokenBuilder",
    "Builder",
    "DigestAuthBuilder",
    "JWTBuilder",
    "basic_auth",
    "bearer_token",
    "digest_auth",
    "jwt",
    "parse_digest_algorithm",
    "stringify_header_value",
    "validate_claim",
]
