"""Random bearer token generator plugin.

See Also:
    :class:`~authgen.plugins.bearer.plugin.BearerPlugin`
"""

from authgen.plugins.bearer.plugin import BearerPlugin

__all__ = ["BearerPlugin"]
