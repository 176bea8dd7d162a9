"""Random bearer token generator plugin.

Implements the ``bearer`` profile type. Each call draws a fresh token of
``length`` random bytes behind the profile's ``prefix``; nothing is stored.
"""

from __future__ import annotations

from authgen.auth.base import AuthResult, GeneratorPlugin
from authgen.builders import BearerTokenBuilder
from authgen.exceptions import ConfigurationError
from authgen.generators.bearer import validate_bearer_spec
from authgen.headers import AUTHORIZATION
from authgen.models import BearerTokenSpec, CredentialProfile


class BearerPlugin(GeneratorPlugin):
    """Generate ``Authorization: Bearer <prefix><random>``."""

    @property
    def auth_type(self) -> str:
        return "bearer"

    def authenticate(self, profile: CredentialProfile) -> AuthResult:
        header = BearerTokenBuilder(length=profile.length, prefix=profile.prefix).to_header()
        return AuthResult(headers={AUTHORIZATION: header})

    def validate_config(self, profile: CredentialProfile) -> list[str]:
        """Check the token length and prefix bounds."""
        try:
            validate_bearer_spec(
                BearerTokenSpec(length=profile.length, prefix=profile.prefix)
            )
        except ConfigurationError as exc:
            return [str(exc)]
        return []
