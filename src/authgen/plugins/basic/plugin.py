"""HTTP Basic generator plugin.

Implements the ``basic`` profile type: the password is resolved from the
profile's ``password_source`` and the pair is encoded per :rfc:`7617`.

See Also:
    :class:`authgen.auth.base.GeneratorPlugin` for the base interface.
"""

from __future__ import annotations

from authgen.auth.base import AuthResult, GeneratorPlugin
from authgen.builders import BasicAuthBuilder
from authgen.config import resolve_credential
from authgen.headers import AUTHORIZATION
from authgen.models import CredentialProfile


class BasicPlugin(GeneratorPlugin):
    """Generate ``Authorization: Basic <base64(username:password)>``."""

    @property
    def auth_type(self) -> str:
        return "basic"

    def authenticate(self, profile: CredentialProfile) -> AuthResult:
        """Resolve the password and return a Basic auth header.

        A profile without ``password_source`` uses an empty password.

        Raises:
            ConfigurationError: If the password source cannot be resolved.
            DomainError: If the username is empty.
        """
        password = (
            resolve_credential(profile.password_source)
            if profile.password_source
            else ""
        )
        header = (
            BasicAuthBuilder()
            .username(profile.username or "")
            .password(password)
            .to_header()
        )
        return AuthResult(headers={AUTHORIZATION: header})

    def validate_config(self, profile: CredentialProfile) -> list[str]:
        errors: list[str] = []
        if not profile.username:
            errors.append("Basic auth requires a 'username'")
        return errors
