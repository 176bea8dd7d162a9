"""Abstract base class for credential generator plugins.

This module defines the two foundational types of the plugin subsystem:

- :class:`AuthResult` -- a plain container for the HTTP headers, query
  parameters, and cookies that a plugin produces.
- :class:`GeneratorPlugin` -- the abstract base class that every profile
  type must extend.

To support a new profile type, subclass :class:`GeneratorPlugin`, set the
:attr:`~GeneratorPlugin.auth_type` property, and implement
:meth:`~GeneratorPlugin.authenticate`. Optionally override
:meth:`~GeneratorPlugin.validate_config` for upfront profile validation.

See Also:
    :mod:`authgen.auth.manager` for plugin registration and dispatch.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from authgen.models import CredentialProfile


class AuthResult:
    """Container for authentication artifacts to inject into HTTP requests.

    Produced by a :class:`GeneratorPlugin` and merged into outgoing
    requests by :class:`~authgen.client.GeneratedAuth`.

    Args:
        headers: HTTP headers to add (e.g. ``{"Authorization": "Bearer ..."}``).
        params: Query-string parameters to add.
        cookies: Cookies to add.

    Example::

        result = AuthResult(headers={"Authorization": "Basic dXNlcjpwYXNz"})
        assert result.headers["Authorization"].startswith("Basic ")
    """

    def __init__(
        self,
        headers: dict[str, str] | None = None,
        params: dict[str, str] | None = None,
        cookies: dict[str, str] | None = None,
    ):
        self.headers = headers or {}
        self.params = params or {}
        self.cookies = cookies or {}

    def __repr__(self) -> str:
        return (
            f"AuthResult(headers={sorted(self.headers)}, "
            f"params={sorted(self.params)}, cookies={sorted(self.cookies)})"
        )


class GeneratorPlugin(ABC):
    """Abstract base class for credential generator plugins.

    Every concrete profile type (``basic``, ``bearer``, ``digest``,
    ``jwt``) subclasses this and provides:

    1. An :attr:`auth_type` property returning the profile ``type`` it
       handles.
    2. An :meth:`authenticate` implementation that resolves any secret
       sources in the :class:`~authgen.models.CredentialProfile`, runs the
       matching builder, and returns an :class:`AuthResult`.

    Plugins are registered with :class:`~authgen.auth.manager.AuthManager`
    and looked up by their ``auth_type`` at runtime.
    """

    @property
    @abstractmethod
    def auth_type(self) -> str:
        """Return the profile ``type`` this plugin handles."""
        ...

    @abstractmethod
    def authenticate(self, profile: CredentialProfile) -> AuthResult:
        """Generate a fresh credential for *profile*.

        Args:
            profile: The credential profile to generate for.

        Returns:
            An :class:`AuthResult` whose headers contain ``Authorization``.

        Raises:
            ConfigurationError: If a secret source cannot be resolved or the
                profile settings are invalid.
            DomainError: If no credential can be produced from the inputs.
        """
        ...

    def validate_config(self, profile: CredentialProfile) -> list[str]:
        """Validate the profile before use.

        Args:
            profile: The profile to validate.

        Returns:
            A list of human-readable error messages; empty means valid.
        """
        return []
