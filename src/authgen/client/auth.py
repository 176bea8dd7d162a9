"""httpx authentication adapter for generated credentials.

:class:`GeneratedAuth` plugs any credential source into :mod:`httpx`.
It calls a zero-argument provider once per request. A provider backed by
a profile builds everything anew each time, so a JWT gets a new ``iat``
and ``exp``. :meth:`GeneratedAuth.from_builder` reuses one builder: bearer
tokens and unpinned Digest nonces are redrawn per request, while JWT
claims keep the values the setters gave them. The Digest nonce count is
sent as configured and is not incremented::

    manager = create_default_manager()
    auth = GeneratedAuth(lambda: manager.authenticate(profile))

    with httpx.Client(auth=auth) as client:
        client.get("https://api.example.com/users")

Headers from the provider are applied before the request's own headers
are considered, so an explicit ``Authorization`` on the request wins.
Cookies are appended to any existing ``Cookie`` header.
"""

from __future__ import annotations

import logging
from typing import Callable, Generator

import httpx

from authgen.auth.base import AuthResult
from authgen.builders.base import Builder

logger = logging.getLogger(__name__)

AuthProvider = Callable[[], AuthResult]


class GeneratedAuth(httpx.Auth):
    """Inject an :class:`~authgen.auth.base.AuthResult` into each request.

    Args:
        provider: Called once per request to produce the credential.
    """

    def __init__(self, provider: AuthProvider) -> None:
        self._provider = provider

    @classmethod
    def from_builder(cls, builder: Builder) -> GeneratedAuth:
        """Wrap a configured builder; ``to_headers()`` runs per request."""
        return cls(lambda: AuthResult(headers=builder.to_headers()))

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        result = self._provider()
        logger.debug(
            "Injecting generated credentials into %s %s", request.method, request.url.path
        )

        for name, value in result.headers.items():
            if name not in request.headers:
                request.headers[name] = value

        if result.params:
            request.url = request.url.copy_merge_params(result.params)

        if result.cookies:
            cookie_str = "; ".join(f"{k}={v}" for k, v in result.cookies.items())
            existing = request.headers.get("Cookie")
            if existing:
                cookie_str = f"{existing}; {cookie_str}"
            request.headers["Cookie"] = cookie_str

        yield request
