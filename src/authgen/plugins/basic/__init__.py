"""HTTP Basic generator plugin.

See Also:
    :class:`~authgen.plugins.basic.plugin.BasicPlugin`
"""

from authgen.plugins.basic.plugin import BasicPlugin

__all__ = ["BasicPlugin"]
