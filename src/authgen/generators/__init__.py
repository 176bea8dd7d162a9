"""Credential generators, one per ``Authorization`` scheme.

Each generator takes an immutable input model from :mod:`authgen.models`
and returns the credential string that follows the scheme name:

- :class:`BasicAuthGenerator` -- ``base64(username:password)``.
- :class:`BearerTokenGenerator` -- random ``<prefix><base64url bytes>``.
- :class:`DigestAuthGenerator` -- :rfc:`7616` attribute list.
- :class:`JWTGenerator` -- signed compact JWT.

Most callers go through the fluent builders in :mod:`authgen.builders`
instead of constructing generators directly.
"""

from authgen.generators.base import Generator, RandomSource
from authgen.generators.basic import BasicAuthGenerator
from authgen.generators.bearer import BearerTokenGenerator, validate_bearer_spec
from authgen.generators.digest import DigestAuthGenerator, compute_response
from authgen.generators.jwt import JWTGenerator, sign, signing_input

__all__ = [
    "BasicAuthGenerator",
    "BearerTokenGenerator",
    "DigestAuthGenerator",
    "Generator",
    "JWTGenerator",
    "RandomSource",
    "compute_response",
    "sign",
    "signing_input",
    "validate_bearer_spec",
]
