"""HTTP Digest generator plugin.

See Also:
    :class:`~authgen.plugins.digest.plugin.DigestPlugin`
"""

from authgen.plugins.digest.plugin import DigestPlugin

__all__ = ["DigestPlugin"]
