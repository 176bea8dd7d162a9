"""Validation helpers for JWT claims and header values."""

from __future__ import annotations

import math
from typing import Any

from authgen.exceptions import ConfigurationError

_SCALARS = (str, int, float, bool)


def stringify_header_value(value: Any) -> str:
    """Coerce a scalar JWT header value to a string.

    Raises:
        ConfigurationError: If *value* is not a scalar.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, _SCALARS):
        return str(value)
    raise ConfigurationError(
        f"header value must be scalar, {type(value).__name__} given"
    )


def validate_claim(value: Any) -> bool:
    """Return whether *value* can be encoded as a JSON claim.

    Strings, finite numbers, booleans and ``None`` are accepted, as are lists,
    tuples and string-keyed dicts of those (checked recursively).
    """
    if isinstance(value, float):
        return math.isfinite(value)
    if value is None or isinstance(value, _SCALARS):
        return True
    if isinstance(value, (list, tuple)):
        return all(validate_claim(item) for item in value)
    if isinstance(value, dict):
        return all(
            isinstance(key, str) and validate_claim(item)
            for key, item in value.items()
        )
    return False
