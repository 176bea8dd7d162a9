"""JSON Web Token generator plugin.

See Also:
    :class:`~authgen.plugins.jwt.plugin.JWTPlugin`
"""

from authgen.plugins.jwt.plugin import JWTPlugin

__all__ = ["JWTPlugin"]
