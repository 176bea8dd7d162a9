"""Exception hierarchy for authgen.

All exceptions inherit from :class:`AuthgenError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`authgen.exit_codes`.
The top-level error handler in :func:`authgen.app.main` catches
``AuthgenError`` and exits with the appropriate code, while unexpected
exceptions produce a crash log and exit with :data:`EXIT_GENERIC_FAILURE`.

The two categories raised by the credential generators are:

* :class:`ConfigurationError` -- detectable before any cryptographic
  operation runs (unknown algorithm, invalid base64 key, bearer length out
  of range, unreadable credential source).
* :class:`DomainError` -- the input was well-formed but no credential can be
  produced from it (empty username, key rejected by the crypto backend,
  malformed DER signature).

Subclass hierarchy::

    AuthgenError (exit 1)
    +-- InvalidUsageError   (exit 2)
    +-- ConfigurationError  (exit 2)
    +-- DomainError         (exit 3)
"""

from authgen.exit_codes import (
    EXIT_CONFIGURATION_ERROR,
    EXIT_DOMAIN_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
)


class AuthgenError(Exception):
    """Base exception for all authgen errors.

    Every subclass sets a class-level ``exit_code`` corresponding to one of
    the constants in :mod:`authgen.exit_codes`. The entry point catches
    this exception type and calls ``sys.exit(exc.exit_code)``.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(AuthgenError):
    """Raised for invalid CLI arguments or missing required parameters."""

    exit_code = EXIT_INVALID_USAGE


class ConfigurationError(AuthgenError):
    """Raised for configuration problems detected before any signing happens."""

    exit_code = EXIT_CONFIGURATION_ERROR


class DomainError(AuthgenError):
    """Raised when a credential cannot be produced from the supplied input."""

    exit_code = EXIT_DOMAIN_ERROR
