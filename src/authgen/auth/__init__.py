"""Plugin-based credential generation for stored profiles.

The main entry points are:

- :class:`GeneratorPlugin` -- abstract base class for a profile type.
- :class:`AuthManager` -- registry that maps profile types to plugin
  instances and dispatches generation for a
  :class:`~authgen.models.CredentialProfile`.
- :func:`create_default_manager` -- factory returning an :class:`AuthManager`
  pre-loaded with the built-in plugins.

Typical usage::

    from authgen.auth import create_default_manager

    manager = create_default_manager()
    result = manager.authenticate(profile)
    # result.headers["Authorization"] is ready to send.
"""

from authgen.auth.base import AuthResult, GeneratorPlugin
from authgen.auth.manager import AuthManager, create_default_manager

__all__ = [
    "AuthManager",
    "AuthResult",
    "GeneratorPlugin",
    "create_default_manager",
]
