"""Generate commands -- one-off credentials from command-line flags.

Registers ``authgen basic``, ``authgen bearer``, ``authgen digest`` and
``authgen jwt`` on the root application. Each prints the full
``Authorization`` header value to stdout, or only the credential with
``--token-only``. In ``--json`` mode the result is printed as
``{"Authorization": ...}`` (or ``{"token": ...}``).

Secrets can be given literally (``--password``, ``--key``) or through a
credential source (``--password-source env:PASS``, ``--key-source
file:~/.keys/jwt.pem``) so they stay out of shell history.

Typical usage::

    authgen basic --username user --password-source env:API_PASS
    authgen bearer --length 48 --prefix sk_ --token-only
    authgen jwt --key-source file:key.pem --algorithm RS256 --claim sub=42 --expires-in 300
    authgen digest --username u --password-source prompt --realm api --qop auth --nc 00000001
"""

from __future__ import annotations

import json
from typing import Any, Optional

import typer

from authgen.builders import (
    BasicAuthBuilder,
    BearerTokenBuilder,
    Builder,
    DigestAuthBuilder,
    JWTBuilder,
)
from authgen.exceptions import AuthgenError, InvalidUsageError
from authgen.output import credential, error


def emit(builder: Builder, token_only: bool) -> None:
    """Generate once from *builder* and print the result to stdout."""
    generator = builder.build()
    credential(generator.scheme, generator.generate(), token_only)


def fail(exc: AuthgenError) -> typer.Exit:
    """Report *exc* on stderr and return the matching :class:`typer.Exit`."""
    error(str(exc))
    return typer.Exit(code=exc.exit_code)


def _secret(
    literal: Optional[str],
    source: Optional[str],
    option: str,
) -> str:
    """Pick a secret from a literal flag or a credential source, not both."""
    from authgen.config import resolve_credential

    if literal is not None and source is not None:
        raise InvalidUsageError(f"Use either --{option} or --{option}-source, not both")
    if source is not None:
        return resolve_credential(source)
    return literal or ""


def parse_pairs(pairs: list[str], option: str) -> dict[str, Any]:
    """Parse repeated ``name=value`` options.

    Values that parse as JSON (numbers, booleans, arrays, objects) keep
    their JSON type; anything else is used as a string.

    Raises:
        InvalidUsageError: If an item has no ``=``.
    """
    parsed: dict[str, Any] = {}
    for pair in pairs:
        name, sep, raw = pair.partition("=")
        if not sep or not name:
            raise InvalidUsageError(f"--{option} expects name=value, got '{pair}'")
        try:
            parsed[name] = json.loads(raw)
        except json.JSONDecodeError:
            parsed[name] = raw
    return parsed


_TOKEN_ONLY = typer.Option(
    False, "--token-only", "-t", help="Print only the credential, without the scheme."
)


def basic_command(
    username: str = typer.Option(..., "--username", "-u", help="User name."),
    password: Optional[str] = typer.Option(None, "--password", help="Password (literal)."),
    password_source: Optional[str] = typer.Option(
        None, "--password-source", help="Password source: env:VAR, file:/path, prompt."
    ),
    token_only: bool = _TOKEN_ONLY,
) -> None:
    """Generate an HTTP Basic credential.

    Example::

        authgen basic -u user --password-source env:API_PASS
    """
    try:
        secret = _secret(password, password_source, "password")
        emit(BasicAuthBuilder().username(username).password(secret), token_only)
    except AuthgenError as exc:
        raise fail(exc) from None


def bearer_command(
    length: Optional[int] = typer.Option(
        None, "--length", "-l", help="Random bytes in the token (32-128)."
    ),
    prefix: Optional[str] = typer.Option(
        None, "--prefix", help="Literal token prefix (max 10 characters)."
    ),
    token_only: bool = _TOKEN_ONLY,
) -> None:
    """Generate a random opaque bearer token.

    Defaults for ``--length`` and ``--prefix`` come from the ``defaults``
    section of the global config.
    """
    from authgen.config import load_global_config

    try:
        defaults = load_global_config().defaults
        builder = BearerTokenBuilder(
            length=defaults.bearer_length if length is None else length,
            prefix=defaults.bearer_prefix if prefix is None else prefix,
        )
        emit(builder, token_only)
    except AuthgenError as exc:
        raise fail(exc) from None


def digest_command(
    username: str = typer.Option(..., "--username", "-u", help="User name."),
    realm: str = typer.Option(..., "--realm", "-r", help="Realm from the server challenge."),
    password: Optional[str] = typer.Option(None, "--password", help="Password (literal)."),
    password_source: Optional[str] = typer.Option(
        None, "--password-source", help="Password source: env:VAR, file:/path, prompt."
    ),
    method: str = typer.Option("GET", "--method", "-X", help="HTTP method of the request."),
    uri: str = typer.Option("/", "--uri", help="Request URI."),
    nonce: Optional[str] = typer.Option(
        None, "--nonce", help="Server nonce. Random when omitted."
    ),
    nc: str = typer.Option("", "--nc", help="Nonce count, e.g. 00000001."),
    cnonce: Optional[str] = typer.Option(
        None, "--cnonce", help="Client nonce. Random when omitted."
    ),
    qop: str = typer.Option("", "--qop", help="Quality of protection: auth or auth-int."),
    opaque: str = typer.Option("", "--opaque", help="Opaque value from the server challenge."),
    body: str = typer.Option("", "--body", help="Request body, hashed for qop=auth-int."),
    algorithm: Optional[str] = typer.Option(
        None, "--algorithm", "-a", help="MD5, MD5-sess, SHA-256 or SHA-256-sess."
    ),
    token_only: bool = _TOKEN_ONLY,
) -> None:
    """Compute an HTTP Digest response for a server challenge."""
    from authgen.config import load_global_config

    try:
        secret = _secret(password, password_source, "password")
        builder = (
            DigestAuthBuilder()
            .username(username)
            .password(secret)
            .realm(realm)
            .algorithm(algorithm or load_global_config().defaults.digest_algorithm)
            .method(method)
            .uri(uri)
            .nonce_count(nc)
            .qop(qop)
            .opaque(opaque)
            .entity_body(body)
        )
        if nonce is not None:
            builder.nonce(nonce)
        if cnonce is not None:
            builder.client_nonce(cnonce)
        emit(builder, token_only)
    except AuthgenError as exc:
        raise fail(exc) from None


def jwt_command(
    key: Optional[str] = typer.Option(None, "--key", "-k", help="Signing key (literal)."),
    key_source: Optional[str] = typer.Option(
        None, "--key-source", help="Key source: env:VAR, file:/path, prompt."
    ),
    base64_key: bool = typer.Option(
        False, "--base64-key", help="The key is base64 encoded and must be decoded first."
    ),
    algorithm: Optional[str] = typer.Option(
        None, "--algorithm", "-a", help="Signing algorithm, e.g. HS256, RS256, ES256, EdDSA."
    ),
    claim: Optional[list[str]] = typer.Option(
        None, "--claim", "-c", help="Payload claim as name=value. Repeatable."
    ),
    header: Optional[list[str]] = typer.Option(
        None, "--header", "-H", help="JOSE header as name=value. Repeatable."
    ),
    issuer: Optional[str] = typer.Option(None, "--issuer", help="'iss' claim."),
    subject: Optional[str] = typer.Option(None, "--subject", help="'sub' claim."),
    audience: Optional[str] = typer.Option(None, "--audience", help="'aud' claim."),
    expires_in: Optional[int] = typer.Option(
        None, "--expires-in", help="Seconds until expiry; sets 'iat' and 'exp'."
    ),
    jti: bool = typer.Option(False, "--jti", help="Add a random 'jti' claim."),
    token_only: bool = _TOKEN_ONLY,
) -> None:
    """Sign a JSON Web Token.

    Example::

        authgen jwt -k your-256-bit-secret -c iss=example.org -c iat=1356999524
    """
    from authgen.config import load_global_config

    try:
        secret = _secret(key, key_source, "key")
        builder = (
            JWTBuilder()
            .key(secret, base64_encoded=base64_key)
            .algorithm(algorithm or load_global_config().defaults.jwt_algorithm)
            .headers(parse_pairs(header or [], "header"))
            .claims(parse_pairs(claim or [], "claim"))
        )
        if issuer is not None:
            builder.issued_by(issuer)
        if subject is not None:
            builder.subject(subject)
        if audience is not None:
            builder.audience(audience)
        if expires_in is not None:
            builder.expires_in(expires_in)
        if jti:
            builder.with_unique_jwt_id()
        emit(builder, token_only)
    except AuthgenError as exc:
        raise fail(exc) from None
