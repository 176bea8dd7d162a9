"""Canonical Pydantic models shared across all authgen modules.

This is the single source of truth for data shapes in the project. Every other
module imports from here rather than defining its own models. The models fall
into two groups:

**Credential inputs** -- immutable values handed to the generators:
    :class:`Algorithm`, :class:`DigestAlgorithm`, :class:`SigningRequest`,
    :class:`DigestChallenge`, :class:`BasicCredentials`, and
    :class:`BearerTokenSpec`.

**Configuration models** -- serialised as JSON in the user's config directory:
    :class:`OutputConfig`, :class:`GeneratorDefaults`, :class:`GlobalConfig`,
    and :class:`CredentialProfile`.

Credential inputs are frozen: the generators never mutate them, and a new
instance is built for every credential. Configuration models that accept
plugin-defined extensions use ``extra="allow"`` so that unknown keys are
preserved in ``model_extra``.
"""

from __future__ import annotations

import enum
import hashlib
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# --- Algorithms ---


class Algorithm(str, enum.Enum):
    """JWS algorithm identifiers supported for JWT signing.

    The value is written verbatim into the ``alg`` header of every token.
    See :mod:`authgen.crypto.registry` for the family, digest and curve
    each identifier maps to.
    """

    HS256 = "HS256"
    HS384 = "HS384"
    HS512 = "HS512"
    RS256 = "RS256"
    RS384 = "RS384"
    RS512 = "RS512"
    ES256 = "ES256"
    ES384 = "ES384"
    ES256K = "ES256K"
    EdDSA = "EdDSA"


class DigestAlgorithm(str, enum.Enum):
    """Digest Authentication algorithms per :rfc:`2617` and :rfc:`7616`.

    The ``-sess`` variants additionally bind the server nonce and client
    nonce into HA1.
    """

    MD5 = "MD5"
    MD5_SESS = "MD5-sess"
    SHA256 = "SHA-256"
    SHA256_SESS = "SHA-256-sess"

    @property
    def hash_name(self) -> str:
        """The :mod:`hashlib` name of the underlying hash function."""
        if self in (DigestAlgorithm.MD5, DigestAlgorithm.MD5_SESS):
            return "md5"
        return "sha256"

    @property
    def is_session_variant(self) -> bool:
        """Whether this is a ``-sess`` variant."""
        return self.value.endswith("-sess")

    def hash(self, text: str) -> str:
        """Return the lowercase hex digest of *text* (UTF-8 encoded)."""
        return hashlib.new(self.hash_name, text.encode("utf-8")).hexdigest()


# --- Credential inputs ---


class SigningRequest(BaseModel):
    """Everything needed to produce one signed JWT.

    Header and payload entries whose value is ``None`` or an empty string are
    dropped before encoding. ``typ`` and ``alg`` are always set by the
    signer and override any caller-supplied header of the same name.

    Example::

        SigningRequest(
            payload={"sub": "1234567890", "iat": 1356999524},
            algorithm=Algorithm.HS256,
            key="your-256-bit-secret",
        )
    """

    model_config = ConfigDict(frozen=True)

    headers: dict[str, Optional[str]] = Field(default_factory=dict)
    payload: dict[str, Any] = Field(default_factory=dict)
    algorithm: Algorithm = Algorithm.HS256
    key: Union[str, bytes] = Field(default="", repr=False)
    key_base64_encoded: bool = False


class DigestChallenge(BaseModel):
    """Server challenge values plus client credentials for one Digest response."""

    model_config = ConfigDict(frozen=True)

    username: str = ""
    password: str = Field(default="", repr=False)
    realm: str = ""
    method: str = "GET"
    uri: str = "/"
    nonce: str = ""
    nc: str = ""
    cnonce: str = ""
    qop: str = ""
    opaque: str = ""
    entity_body: str = ""
    algorithm: DigestAlgorithm = DigestAlgorithm.MD5


class BasicCredentials(BaseModel):
    """Username/password pair for HTTP Basic authentication."""

    model_config = ConfigDict(frozen=True)

    username: str = ""
    password: str = Field(default="", repr=False)


class BearerTokenSpec(BaseModel):
    """Shape of a randomly generated bearer token."""

    model_config = ConfigDict(frozen=True)

    length: int = Field(default=32, description="Number of random bytes")
    prefix: str = Field(default="brr_", description="Literal prefix")


# --- Configuration ---


class OutputConfig(BaseModel):
    """Default output format preferences stored in :class:`GlobalConfig`."""

    format: str = Field(
        default="auto", description="Output format: auto, json, plain, rich"
    )


class GeneratorDefaults(BaseModel):
    """Defaults applied by the CLI when a flag is not given."""

    jwt_algorithm: Algorithm = Algorithm.HS256
    digest_algorithm: DigestAlgorithm = DigestAlgorithm.MD5
    bearer_length: int = 32
    bearer_prefix: str = "brr_"


class GlobalConfig(BaseModel):
    """User-wide configuration persisted at ``~/.config/authgen/config.json``.

    Loaded and saved by :func:`~authgen.config.load_global_config` and
    :func:`~authgen.config.save_global_config`.
    """

    default_profile: Optional[str] = None
    auto_select_single_profile: bool = True
    output: OutputConfig = Field(default_factory=OutputConfig)
    defaults: GeneratorDefaults = Field(default_factory=GeneratorDefaults)


class CredentialProfile(BaseModel):
    """A named, reusable credential definition stored under ``profiles/``.

    The ``type`` field selects the generator plugin (``basic``, ``bearer``,
    ``digest`` or ``jwt``); the remaining fields supply type-specific
    parameters. Secrets are never stored inline: ``password_source`` and
    ``key_source`` hold credential source descriptors (``env:VAR``,
    ``file:/path``, ``prompt``) resolved by
    :func:`~authgen.config.resolve_credential` at generation time.

    Example::

        CredentialProfile(
            name="billing",
            type="jwt",
            algorithm=Algorithm.RS256,
            key_source="file:~/.keys/billing.pem",
            claims={"iss": "billing-cli"},
            expires_in=300,
        )
    """

    model_config = ConfigDict(extra="allow")

    name: str
    type: str = Field(description="Credential type: basic, bearer, digest, jwt")
    # basic / digest
    username: Optional[str] = None
    password_source: Optional[str] = Field(
        default=None, description="Credential source for the password"
    )
    # bearer
    length: int = 32
    prefix: str = "brr_"
    # digest
    realm: Optional[str] = None
    method: str = "GET"
    uri: str = "/"
    nonce: Optional[str] = None
    nc: str = ""
    cnonce: Optional[str] = None
    qop: str = ""
    opaque: str = ""
    digest_algorithm: DigestAlgorithm = DigestAlgorithm.MD5
    # jwt
    algorithm: Algorithm = Algorithm.HS256
    key_source: Optional[str] = Field(
        default=None, description="Credential source for the signing key"
    )
    key_base64_encoded: bool = False
    claims: dict[str, Any] = Field(default_factory=dict)
    headers: dict[str, str] = Field(default_factory=dict)
    expires_in: Optional[int] = Field(
        default=None, description="Seconds until expiry; adds iat and exp claims"
    )
