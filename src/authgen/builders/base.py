"""Common interface of the fluent credential builders.

Every builder collects settings through chainable setters and then offers
three ways to get the result:

- :meth:`Builder.to_string` -- the bare credential;
- :meth:`Builder.to_header` -- ``"<Scheme> <credential>"``;
- :meth:`Builder.to_headers` -- a header mapping ready for an HTTP client.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from authgen.generators.base import Generator
from authgen.headers import AUTHORIZATION, format_header


class Builder(ABC):
    """Base class for the fluent builders in :mod:`authgen.builders`."""

    @abstractmethod
    def build(self) -> Generator:
        """Freeze the collected settings into a generator.

        Raises:
            ConfigurationError: If the settings are invalid.
        """
        ...

    def to_string(self) -> str:
        """Generate the credential without a scheme prefix."""
        return self.build().generate()

    def to_header(self) -> str:
        """Generate the full ``Authorization`` header value."""
        generator = self.build()
        return format_header(generator.scheme, generator.generate())

    def to_headers(
        self, additional_headers: Optional[dict[str, str]] = None
    ) -> dict[str, str]:
        """Generate a header mapping with ``Authorization`` first.

        Args:
            additional_headers: Extra headers merged after ``Authorization``.
                An ``Authorization`` key here replaces the generated one.
        """
        return {AUTHORIZATION: self.to_header(), **(additional_headers or {})}
