"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~authgen.exceptions.AuthgenError` subclass.
Shell wrappers can inspect the exit code to tell a bad invocation apart
from a credential that could not be produced.

Example::

    $ authgen jwt --algorithm RS256 --key-source file:./broken.pem
    $ echo $?
    3   # EXIT_DOMAIN_ERROR -- the key was rejected by the crypto backend
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments or missing required parameters."""

EXIT_CONFIGURATION_ERROR = 2
"""The credential configuration is invalid (unknown algorithm, bad key encoding, ...)."""

EXIT_DOMAIN_ERROR = 3
"""A credential could not be produced from otherwise well-formed input."""
