"""JSON Web Token generator plugin.

Implements the ``jwt`` profile type. The signing key is read from
``key_source`` with surrounding whitespace stripped.
Static ``claims`` and ``headers`` come from the profile; when
``expires_in`` is set, ``iat`` and ``exp`` are added relative to the time
of generation.
"""

from __future__ import annotations

from authgen.auth.base import AuthResult, GeneratorPlugin
from authgen.builders import JWTBuilder
from authgen.builders.claims import validate_claim
from authgen.config import resolve_credential
from authgen.headers import AUTHORIZATION
from authgen.models import CredentialProfile


class JWTPlugin(GeneratorPlugin):
    """Generate ``Authorization: Bearer <signed JWT>``."""

    @property
    def auth_type(self) -> str:
        return "jwt"

    def authenticate(self, profile: CredentialProfile) -> AuthResult:
        """Resolve the key, sign the token, and return a Bearer header.

        Raises:
            ConfigurationError: If the key source cannot be resolved, the
                key is flagged as base64 but does not decode, or a claim is
                not serialisable.
            DomainError: If the crypto backend rejects the key.
        """
        key = resolve_credential(profile.key_source) if profile.key_source else ""
        builder = (
            JWTBuilder()
            .key(key, base64_encoded=profile.key_base64_encoded)
            .algorithm(profile.algorithm)
            .headers(profile.headers)
            .claims(profile.claims)
        )
        if profile.expires_in is not None:
            builder.expires_in(profile.expires_in)
        return AuthResult(headers={AUTHORIZATION: builder.to_header()})

    def validate_config(self, profile: CredentialProfile) -> list[str]:
        errors: list[str] = []
        if not profile.key_source:
            errors.append("JWT auth requires a 'key_source' for the signing key")
        for name, value in profile.claims.items():
            if not validate_claim(value):
                errors.append(f"claim '{name}' contains non-serializable data")
        if profile.expires_in is not None and profile.expires_in <= 0:
            errors.append("'expires_in' must be a positive number of seconds")
        return errors
