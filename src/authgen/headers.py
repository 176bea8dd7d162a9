"""Formatting of ``Authorization`` header values.

A header value is the scheme name, a single space, and the credential::

    format_header("Basic", "dXNlcjpwYXNz")  # -> "Basic dXNlcjpwYXNz"
"""

from __future__ import annotations

AUTHORIZATION = "Authorization"


def format_header(scheme: str, token: str) -> str:
    """Join *scheme* and *token* into an ``Authorization`` header value."""
    return f"{scheme} {token}"


def format_basic_auth(token: str) -> str:
    return format_header("Basic", token)


def format_bearer_token(token: str) -> str:
    return format_header("Bearer", token)


def format_digest_auth(token: str) -> str:
    return format_header("Digest", token)
