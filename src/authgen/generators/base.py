"""Abstract base class for credential generators.

A generator wraps one immutable credential input model (see
:mod:`authgen.models`) and turns it into the credential string that goes
after the scheme name in an ``Authorization`` header. Generators hold no
state beyond their input and may be called any number of times.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

RandomSource = Callable[[int], bytes]
"""Callable returning *n* cryptographically secure random bytes."""


class Generator(ABC):
    """Produces a credential string for a single ``Authorization`` scheme."""

    scheme: str
    """The HTTP authentication scheme name (``Basic``, ``Bearer``, ``Digest``)."""

    @abstractmethod
    def generate(self) -> str:
        """Return the credential, without the scheme prefix.

        Raises:
            ConfigurationError: If the input is invalid before any work is done.
            DomainError: If no credential can be produced from the input.
        """
        ...
