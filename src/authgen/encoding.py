"""Base64 helpers shared by the generators.

JWT segments and bearer tokens use *base64url*: standard base64 with ``+``
replaced by ``-``, ``/`` by ``_``, and the ``=`` padding removed. Basic
auth uses plain standard base64.
"""

from __future__ import annotations

import base64
import binascii
import json
from typing import Any, Union

from authgen.exceptions import ConfigurationError


def base64url_encode(data: Union[bytes, str]) -> str:
    """Encode *data* as unpadded base64url.

    Args:
        data: Raw bytes, or a string which is UTF-8 encoded first.

    Returns:
        An ASCII string containing none of ``+``, ``/`` or ``=``.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def base64_encode(data: Union[bytes, str]) -> str:
    """Encode *data* as padded standard base64."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return base64.b64encode(data).decode("ascii")


def json_segment(mapping: dict[str, Any]) -> str:
    """Serialise *mapping* as compact JSON and base64url-encode it.

    Key order is preserved; an empty mapping encodes as ``{}``. ``/`` is
    written as-is rather than escaped as ``\\/``, so a claim holding a URL
    gives a different (equally valid) segment than encoders that escape it.

    Raises:
        ConfigurationError: If *mapping* holds a value JSON cannot
            represent, such as a ``datetime`` or a NaN/infinite float.
    """
    try:
        text = json.dumps(mapping, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError("payload contains non-serializable data") from exc
    return base64url_encode(text)


def decode_base64_key(key: Union[bytes, str]) -> bytes:
    """Strictly decode base64-encoded key material.

    ASCII whitespace is ignored, so a key wrapped at 64 or 76 columns
    decodes the same as the unwrapped text.

    Raises:
        ConfigurationError: If *key* contains other characters outside the
            standard base64 alphabet or has invalid padding.
    """
    if isinstance(key, str):
        key = key.encode("ascii", errors="replace")
    try:
        return base64.b64decode(b"".join(key.split()), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ConfigurationError("invalid base64 encoded key") from exc
