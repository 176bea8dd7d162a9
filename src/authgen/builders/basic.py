"""Fluent builder for HTTP Basic credentials."""

from __future__ import annotations

from authgen.builders.base import Builder
from authgen.generators.basic import BasicAuthGenerator
from authgen.models import BasicCredentials


class BasicAuthBuilder(Builder):
    """Collect a username and password.

    Example::

        BasicAuthBuilder().username("user").password("pass").to_header()
        # -> "Basic dXNlcjpwYXNz"
    """

    def __init__(self) -> None:
        self._username = ""
        self._password = ""

    def username(self, username: str) -> BasicAuthBuilder:
        self._username = username
        return self

    def password(self, password: str) -> BasicAuthBuilder:
        self._password = password
        return self

    def build(self) -> BasicAuthGenerator:
        return BasicAuthGenerator(
            BasicCredentials(username=self._username, password=self._password)
        )
