"""Fluent builder for random bearer tokens."""

from __future__ import annotations

from typing import Optional

from authgen.builders.base import Builder
from authgen.generators.base import RandomSource
from authgen.generators.bearer import BearerTokenGenerator, validate_bearer_spec
from authgen.models import BearerTokenSpec


class BearerTokenBuilder(Builder):
    """Configure the length and prefix of a random bearer token.

    Args:
        length: Number of random bytes, between 32 and 128.
        prefix: Literal prefix of at most 10 characters.
        random_bytes: Random byte source passed through to the generator.
    """

    def __init__(
        self,
        length: int = 32,
        prefix: str = "brr_",
        random_bytes: Optional[RandomSource] = None,
    ) -> None:
        self._length = length
        self._prefix = prefix
        self._random_bytes = random_bytes

    def length(self, length: int) -> BearerTokenBuilder:
        self._length = length
        return self

    def prefix(self, prefix: str) -> BearerTokenBuilder:
        self._prefix = prefix
        return self

    def build(self) -> BearerTokenGenerator:
        """Validate the token shape and return the generator.

        Raises:
            ConfigurationError: If the length or prefix is out of range.
        """
        spec = BearerTokenSpec(length=self._length, prefix=self._prefix)
        validate_bearer_spec(spec)
        return BearerTokenGenerator(spec, random_bytes=self._random_bytes)
