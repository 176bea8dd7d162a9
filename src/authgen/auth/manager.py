"""Auth manager -- registry and dispatcher for generator plugins.

The :class:`AuthManager` maps profile types (``"basic"``, ``"bearer"``,
``"digest"``, ``"jwt"``) to concrete
:class:`~authgen.auth.base.GeneratorPlugin` instances and exposes a single
:meth:`~AuthManager.authenticate` method used by the CLI and by
:class:`~authgen.client.GeneratedAuth`.

For most use cases, call :func:`create_default_manager` to get a manager
pre-loaded with every built-in plugin.
"""

from __future__ import annotations

import logging

from authgen.auth.base import AuthResult, GeneratorPlugin
from authgen.exceptions import ConfigurationError
from authgen.models import CredentialProfile

logger = logging.getLogger(__name__)


class AuthManager:
    """Registry and dispatcher for generator plugins.

    Example::

        from authgen.auth import AuthManager
        from authgen.plugins.jwt import JWTPlugin

        manager = AuthManager()
        manager.register(JWTPlugin())
        result = manager.authenticate(profile)
    """

    def __init__(self) -> None:
        self._plugins: dict[str, GeneratorPlugin] = {}

    def register(self, plugin: GeneratorPlugin) -> None:
        """Register a plugin, replacing any plugin for the same type."""
        self._plugins[plugin.auth_type] = plugin

    def get_plugin(self, auth_type: str) -> GeneratorPlugin:
        """Retrieve a registered plugin by its type identifier.

        Raises:
            ConfigurationError: If no plugin is registered for *auth_type*.
        """
        plugin = self._plugins.get(auth_type)
        if plugin is None:
            available = ", ".join(sorted(self._plugins)) or "(none)"
            raise ConfigurationError(
                f"No generator plugin registered for type '{auth_type}'. "
                f"Available types: {available}"
            )
        return plugin

    def authenticate(self, profile: CredentialProfile) -> AuthResult:
        """Generate a credential for *profile* with the matching plugin.

        Raises:
            ConfigurationError: If the profile type has no registered plugin
                or the plugin rejects the profile.
            DomainError: If the plugin cannot produce a credential.
        """
        plugin = self.get_plugin(profile.type)
        logger.debug("Generating %s credential for profile %s", profile.type, profile.name)
        return plugin.authenticate(profile)

    def validate(self, profile: CredentialProfile) -> list[str]:
        """Return the validation errors the matching plugin reports for *profile*."""
        return self.get_plugin(profile.type).validate_config(profile)

    def list_types(self) -> list[str]:
        """Return the identifiers of all registered types, sorted."""
        return sorted(self._plugins.keys())


def create_default_manager() -> AuthManager:
    """Create an :class:`AuthManager` pre-loaded with all built-in plugins.

    - ``basic`` -- HTTP Basic from username and password source.
    - ``bearer`` -- random bearer token.
    - ``digest`` -- HTTP Digest response.
    - ``jwt`` -- signed JSON Web Token.
    """
    from authgen.plugins.basic import BasicPlugin
    from authgen.plugins.bearer import BearerPlugin
    from authgen.plugins.digest import DigestPlugin
    from authgen.plugins.jwt import JWTPlugin

    manager = AuthManager()
    manager.register(BasicPlugin())
    manager.register(BearerPlugin())
    manager.register(DigestPlugin())
    manager.register(JWTPlugin())
    return manager
