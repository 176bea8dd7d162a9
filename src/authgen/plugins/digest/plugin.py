"""HTTP Digest generator plugin.

Implements the ``digest`` profile type. The profile carries the values a
server sent in its ``WWW-Authenticate`` challenge (``realm``, ``nonce``,
``qop``, ``opaque``) together with the request line (``method``, ``uri``).
When ``nonce`` or ``cnonce`` is absent a random value is generated.

See Also:
    :class:`authgen.builders.DigestAuthBuilder`
"""

from __future__ import annotations

from authgen.auth.base import AuthResult, GeneratorPlugin
from authgen.builders import DigestAuthBuilder
from authgen.config import resolve_credential
from authgen.headers import AUTHORIZATION
from authgen.models import CredentialProfile


class DigestPlugin(GeneratorPlugin):
    """Generate ``Authorization: Digest <attributes>``."""

    @property
    def auth_type(self) -> str:
        return "digest"

    def authenticate(self, profile: CredentialProfile) -> AuthResult:
        """Resolve the password and compute the Digest response.

        Raises:
            ConfigurationError: If the password source cannot be resolved.
            DomainError: If the username or realm is empty.
        """
        password = (
            resolve_credential(profile.password_source)
            if profile.password_source
            else ""
        )
        builder = (
            DigestAuthBuilder()
            .username(profile.username or "")
            .password(password)
            .realm(profile.realm or "")
            .algorithm(profile.digest_algorithm)
            .method(profile.method)
            .uri(profile.uri)
            .nonce_count(profile.nc)
            .qop(profile.qop)
            .opaque(profile.opaque)
        )
        if profile.nonce is not None:
            builder.nonce(profile.nonce)
        if profile.cnonce is not None:
            builder.client_nonce(profile.cnonce)
        return AuthResult(headers={AUTHORIZATION: builder.to_header()})

    def validate_config(self, profile: CredentialProfile) -> list[str]:
        errors: list[str] = []
        if not profile.username:
            errors.append("Digest auth requires a 'username'")
        if not profile.realm:
            errors.append("Digest auth requires a 'realm'")
        if profile.qop not in ("", "auth", "auth-int"):
            errors.append(f"Unsupported qop '{profile.qop}' (expected auth or auth-int)")
        return errors
