"""Shared test fixtures for authgen.

Provides reusable fixtures for key material, isolated config
environments, output state, and running CLI commands. These fixtures are
automatically discovered by pytest and available to all test modules.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, ed25519

from authgen.output import reset_output


FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time; CliRunner swaps those streams per invocation.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Key material
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def rsa_pem() -> str:
    """The 2048-bit RSA key that signs the published RS256 example token."""
    return (FIXTURES_DIR / "rsa_private.pem").read_text(encoding="utf-8")


def _ec_pem(curve: ec.EllipticCurve) -> tuple[str, ec.EllipticCurvePublicKey]:
    key = ec.generate_private_key(curve)
    pem = key.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.PKCS8,
        serialization.NoEncryption(),
    ).decode("ascii")
    return pem, key.public_key()


@pytest.fixture(scope="session")
def p256_key() -> tuple[str, ec.EllipticCurvePublicKey]:
    return _ec_pem(ec.SECP256R1())


@pytest.fixture(scope="session")
def p384_key() -> tuple[str, ec.EllipticCurvePublicKey]:
    return _ec_pem(ec.SECP384R1())


@pytest.fixture(scope="session")
def secp256k1_key() -> tuple[str, ec.EllipticCurvePublicKey]:
    return _ec_pem(ec.SECP256K1())


@pytest.fixture(scope="session")
def ed25519_key() -> tuple[bytes, ed25519.Ed25519PublicKey]:
    """A raw 32-byte Ed25519 seed and its public key."""
    key = ed25519.Ed25519PrivateKey.generate()
    seed = key.private_bytes(
        serialization.Encoding.Raw,
        serialization.PrivateFormat.Raw,
        serialization.NoEncryption(),
    )
    return seed, key.public_key()


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration to a temporary directory.

    Points XDG_CONFIG_HOME and XDG_DATA_HOME at subdirectories of
    tmp_path, forces the XDG layout, clears ``AUTHGEN_PROFILE``, and
    changes the working directory to tmp_path.

    Returns:
        The tmp_path root directory for additional file creation.
    """
    monkeypatch.setattr("authgen.config._is_xdg_platform", lambda: True)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.delenv("AUTHGEN_PROFILE", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
