"""HTTP client integration.

- :class:`GeneratedAuth` -- :class:`httpx.Auth` that attaches a freshly
  generated credential to every outgoing request.
"""

from authgen.client.auth import AuthProvider, GeneratedAuth

__all__ = ["AuthProvider", "GeneratedAuth"]
