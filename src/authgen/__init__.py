"""authgen -- Authorization credentials for outbound HTTP requests.

Generates ``Authorization`` header values for four schemes:

* **Basic** -- base64 of ``username:password``.
* **Bearer** -- random opaque tokens, or signed JSON Web Tokens
  (HMAC, RSA, ECDSA and Ed25519).
* **Digest** -- :rfc:`7616` responses for MD5, MD5-sess, SHA-256 and
  SHA-256-sess, with or without ``qop``.

Library usage goes through the fluent builders::

    from authgen import AuthGenerator

    header = (
        AuthGenerator.jwt()
        .key("your-256-bit-secret")
        .issued_by("example.org")
        .expires_in(300)
        .to_header()
    )

The ``authgen`` command exposes the same generators on the command line
and can store reusable credential profiles.

Modules:
    app: Typer application and CLI entry point.
    builders: Fluent builders, the main library entry point.
    generators: One credential generator per scheme.
    crypto: Algorithm registry, DER codec, and signing strategies.
    models: Pydantic models shared across the package.
    config: XDG-aware configuration and profile management.
    exceptions: Exception hierarchy with exit-code mapping.
    output: stdout/stderr formatting with Rich support.
"""

__version__ = "0.1.0"

from authgen.builders import (  # noqa: E402
    AuthGenerator,
    BasicAuthBuilder,
    BearerTokenBuilder,
    DigestAuthBuilder,
    JWTBuilder,
)
from authgen.exceptions import (  # noqa: E402
    AuthgenError,
    ConfigurationError,
    DomainError,
)
from authgen.models import Algorithm, DigestAlgorithm  # noqa: E402

__all__ = [
    "Algorithm",
    "AuthGenerator",
    "AuthgenError",
    "BasicAuthBuilder",
    "BearerTokenBuilder",
    "ConfigurationError",
    "DigestAlgorithm",
    "DigestAuthBuilder",
    "DomainError",
    "JWTBuilder",
    "__version__",
]
