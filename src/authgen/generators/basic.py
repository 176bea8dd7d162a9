"""HTTP Basic credential generator (:rfc:`7617`)."""

from __future__ import annotations

from authgen.encoding import base64_encode
from authgen.exceptions import DomainError
from authgen.generators.base import Generator
from authgen.models import BasicCredentials


class BasicAuthGenerator(Generator):
    """Encode ``username:password`` as standard base64."""

    scheme = "Basic"

    def __init__(self, data: BasicCredentials) -> None:
        self.data = data

    def generate(self) -> str:
        if self.data.username == "":
            raise DomainError("username cannot be empty")
        return base64_encode(f"{self.data.username}:{self.data.password}")
