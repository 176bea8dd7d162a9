"""Random bearer token generator.

Tokens are ``<prefix><base64url(random bytes)>``. The random byte source is
injected so tests can substitute a deterministic sequence; it defaults to
:func:`secrets.token_bytes`.
"""

from __future__ import annotations

import secrets
from typing import Optional

from authgen.encoding import base64url_encode
from authgen.exceptions import ConfigurationError
from authgen.generators.base import Generator, RandomSource
from authgen.models import BearerTokenSpec

MIN_LENGTH = 32
MAX_LENGTH = 128
MAX_PREFIX_LENGTH = 10


def validate_bearer_spec(spec: BearerTokenSpec) -> None:
    """Check the token shape before any random bytes are drawn.

    Raises:
        ConfigurationError: If ``length`` is outside ``[32, 128]`` or the
            prefix is longer than 10 characters.
    """
    if spec.length < MIN_LENGTH or spec.length > MAX_LENGTH:
        raise ConfigurationError(
            f"token length must be between {MIN_LENGTH} and {MAX_LENGTH} bytes, "
            f"got {spec.length}"
        )
    if len(spec.prefix) > MAX_PREFIX_LENGTH:
        raise ConfigurationError(
            f"prefix length must not exceed {MAX_PREFIX_LENGTH} characters, "
            f"got {len(spec.prefix)}"
        )


class BearerTokenGenerator(Generator):
    """Generate an opaque random bearer token.

    Args:
        data: Length and prefix of the token. Validated by the caller with
            :func:`validate_bearer_spec`.
        random_bytes: Source of random bytes.
    """

    scheme = "Bearer"

    def __init__(
        self,
        data: BearerTokenSpec,
        random_bytes: Optional[RandomSource] = None,
    ) -> None:
        self.data = data
        self._random_bytes = random_bytes or secrets.token_bytes

    def generate(self) -> str:
        raw = self._random_bytes(max(1, self.data.length))
        return f"{self.data.prefix}{base64url_encode(raw)}"
