"""Profile commands -- manage stored credential profiles.

Provides the ``authgen profile`` sub-command group. A profile describes a
reusable credential (type, username, key source, claims ...) and is stored
as JSON under the config directory. Secrets are referenced through
credential sources and never written to disk.

Typical workflow::

    authgen profile add billing --type jwt --algorithm RS256 \\
        --key-source file:~/.keys/billing.pem --claim iss=billing-cli --expires-in 300
    authgen profile generate billing
    curl -H "Authorization: $(authgen profile generate billing)" https://...
"""

from __future__ import annotations

from typing import Optional

import typer

from authgen.commands.generate import fail, parse_pairs
from authgen.exceptions import AuthgenError, InvalidUsageError
from authgen.headers import AUTHORIZATION
from authgen.output import credential, error, info, record, success, suggest, table


profile_app = typer.Typer(no_args_is_help=True)


@profile_app.command("list")
def profile_list() -> None:
    """List all stored profiles with their type.

    Profiles that fail to load are shown with an ``error`` type.
    """
    from authgen.config import list_profiles, load_global_config, load_profile

    profiles = list_profiles()
    if not profiles:
        info("No profiles configured.")
        suggest("Create one: authgen profile add <name> --type jwt --key-source env:JWT_KEY")
        return

    default = load_global_config().default_profile
    rows: list[list[str]] = []
    for name in profiles:
        try:
            profile = load_profile(name)
        except AuthgenError:
            rows.append([name, "error", ""])
            continue
        rows.append([name, profile.type, "*" if name == default else ""])

    table(["Profile", "Type", "Default"], rows, title="Profiles")


@profile_app.command("show")
def profile_show(
    name: str = typer.Argument(help="Profile name."),
) -> None:
    """Show a profile's stored settings."""
    from authgen.config import load_profile

    try:
        profile = load_profile(name)
    except AuthgenError as exc:
        raise fail(exc) from None
    record(profile.model_dump(mode="json", exclude_none=True), title=f"Profile {name}")


@profile_app.command("add")
def profile_add(
    name: str = typer.Argument(help="Profile name."),
    auth_type: str = typer.Option(
        ..., "--type", "-t", help="Credential type: basic, bearer, digest, jwt."
    ),
    username: Optional[str] = typer.Option(None, "--username", "-u", help="User name."),
    password_source: Optional[str] = typer.Option(
        None, "--password-source", help="Password source: env:VAR, file:/path, prompt."
    ),
    length: int = typer.Option(32, "--length", help="Bearer token bytes."),
    prefix: str = typer.Option("brr_", "--prefix", help="Bearer token prefix."),
    realm: Optional[str] = typer.Option(None, "--realm", help="Digest realm."),
    method: str = typer.Option("GET", "--method", help="Digest request method."),
    uri: str = typer.Option("/", "--uri", help="Digest request URI."),
    qop: str = typer.Option("", "--qop", help="Digest quality of protection."),
    opaque: str = typer.Option("", "--opaque", help="Digest opaque value."),
    digest_algorithm: str = typer.Option(
        "MD5", "--digest-algorithm", help="MD5, MD5-sess, SHA-256 or SHA-256-sess."
    ),
    algorithm: str = typer.Option("HS256", "--algorithm", "-a", help="JWT signing algorithm."),
    key_source: Optional[str] = typer.Option(
        None, "--key-source", help="JWT key source: env:VAR, file:/path, prompt."
    ),
    base64_key: bool = typer.Option(False, "--base64-key", help="The JWT key is base64 encoded."),
    claim: Optional[list[str]] = typer.Option(
        None, "--claim", "-c", help="Static JWT claim as name=value. Repeatable."
    ),
    header: Optional[list[str]] = typer.Option(
        None, "--header", "-H", help="Static JOSE header as name=value. Repeatable."
    ),
    expires_in: Optional[int] = typer.Option(
        None, "--expires-in", help="JWT lifetime in seconds."
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing profile."),
) -> None:
    """Create or replace a credential profile.

    The profile is validated by the plugin for its type before it is
    saved. Secrets are stored only as source descriptors.

    Example::

        authgen profile add ci --type basic -u deploy --password-source env:DEPLOY_PASS
    """
    from pydantic import ValidationError

    from authgen.auth import create_default_manager
    from authgen.builders.claims import stringify_header_value
    from authgen.config import profile_exists, save_profile
    from authgen.models import CredentialProfile

    try:
        if profile_exists(name) and not force:
            raise InvalidUsageError(
                f"Profile '{name}' already exists (use --force to overwrite)"
            )
        try:
            profile = CredentialProfile(
                name=name,
                type=auth_type,
                username=username,
                password_source=password_source,
                length=length,
                prefix=prefix,
                realm=realm,
                method=method,
                uri=uri,
                qop=qop,
                opaque=opaque,
                digest_algorithm=digest_algorithm,
                algorithm=algorithm,
                key_source=key_source,
                key_base64_encoded=base64_key,
                claims=parse_pairs(claim or [], "claim"),
                headers={
                    k: stringify_header_value(v)
                    for k, v in parse_pairs(header or [], "header").items()
                },
                expires_in=expires_in,
            )
        except ValidationError as exc:
            raise InvalidUsageError(f"Invalid profile settings: {exc}") from exc

        problems = create_default_manager().validate(profile)
    except AuthgenError as exc:
        raise fail(exc) from None

    if problems:
        for problem in problems:
            error(problem)
        raise typer.Exit(code=2)

    save_profile(profile)
    success(f'Profile "{name}" saved ({auth_type}).')
    suggest(f"Generate a credential: authgen profile generate {name}")


@profile_app.command("delete")
def profile_delete(
    name: str = typer.Argument(help="Profile name."),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation."),
) -> None:
    """Delete a stored profile."""
    from authgen.config import delete_profile, profile_exists

    if not profile_exists(name):
        error(f"Profile '{name}' not found.")
        raise typer.Exit(code=2)

    if not force:
        confirmed = typer.confirm(f'Delete profile "{name}"?')
        if not confirmed:
            info("Cancelled.")
            raise typer.Exit()

    delete_profile(name)
    success(f'Profile "{name}" deleted.')


@profile_app.command("generate")
def profile_generate(
    name: Optional[str] = typer.Argument(
        None, help="Profile name. Defaults to AUTHGEN_PROFILE or the default profile."
    ),
    token_only: bool = typer.Option(
        False, "--token-only", "-t", help="Print only the credential, without the scheme."
    ),
) -> None:
    """Generate a fresh credential from a stored profile."""
    from authgen.auth import create_default_manager
    from authgen.config import resolve_config

    try:
        _, profile = resolve_config(cli_profile=name)
        if profile is None:
            raise InvalidUsageError(
                "No profile selected. Pass a name, set AUTHGEN_PROFILE, "
                "or set default_profile in the config."
            )
        result = create_default_manager().authenticate(profile)
    except AuthgenError as exc:
        raise fail(exc) from None

    scheme, _, token = result.headers[AUTHORIZATION].partition(" ")
    credential(scheme, token, token_only)
