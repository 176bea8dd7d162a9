"""Signature strategies, one per cryptographic family.

Each :class:`Signer` subclass implements ``sign(message, key) -> bytes``
for one :class:`~authgen.crypto.registry.AlgorithmFamily`. The JWT
generator resolves an algorithm through the registry once and hands the
resulting :class:`~authgen.crypto.registry.AlgorithmSpec` to
:func:`signer_for`, which picks the strategy:

- :class:`MacSigner` -- HMAC with the spec's digest.
- :class:`RsaSigner` -- RSASSA-PKCS1-v1_5 with a PEM private key.
- :class:`EcdsaSigner` -- ECDSA with a PEM private key on the spec's curve,
  output normalised from DER to raw ``r || s`` by :mod:`authgen.crypto.der`.
- :class:`EdDsaSigner` -- Ed25519 with a base64 seed or libsodium secret key.

All key material arrives as bytes; any base64 transport encoding chosen by
the caller has already been removed.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import logging
from abc import ABC, abstractmethod
from typing import Any

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec, ed25519, padding, rsa

from authgen.crypto import der
from authgen.crypto.registry import AlgorithmFamily, AlgorithmSpec
from authgen.exceptions import DomainError

logger = logging.getLogger(__name__)

_ED25519_SEED_SIZE = 32
_SODIUM_SECRET_KEY_SIZE = 64


class Signer(ABC):
    """Base class for a family-specific signing strategy.

    Args:
        spec: The resolved algorithm this signer works for.
    """

    family: AlgorithmFamily

    def __init__(self, spec: AlgorithmSpec) -> None:
        self.spec = spec

    @abstractmethod
    def sign(self, message: bytes, key: bytes) -> bytes:
        """Sign *message* with *key* and return the raw JWS signature bytes.

        Raises:
            DomainError: If the key is unusable or the backend fails.
        """
        ...

    def _hash_algorithm(self) -> hashes.HashAlgorithm:
        return getattr(hashes, self.spec.digest_name)()


class MacSigner(Signer):
    family = AlgorithmFamily.MAC

    def sign(self, message: bytes, key: bytes) -> bytes:
        digest = getattr(hashlib, self.spec.digest_name.lower())
        return hmac.new(key, message, digest).digest()


def _load_private_key(key: bytes) -> Any:
    """Load a PEM private key, mapping backend failures to :class:`DomainError`."""
    try:
        return serialization.load_pem_private_key(key, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        logger.debug("Private key rejected: %s", exc)
        raise DomainError("key rejected by crypto backend") from exc


class RsaSigner(Signer):
    family = AlgorithmFamily.RSA

    def sign(self, message: bytes, key: bytes) -> bytes:
        private_key = _load_private_key(key)
        if not isinstance(private_key, rsa.RSAPrivateKey):
            raise DomainError(
                f"key rejected by crypto backend: {self.spec.algorithm.value} "
                "requires an RSA private key"
            )
        return private_key.sign(message, padding.PKCS1v15(), self._hash_algorithm())


class EcdsaSigner(Signer):
    """ECDSA signer producing fixed-width ``r || s`` output."""

    family = AlgorithmFamily.ECDSA

    def sign(self, message: bytes, key: bytes) -> bytes:
        private_key = _load_private_key(key)
        if not isinstance(private_key, ec.EllipticCurvePrivateKey):
            raise DomainError(
                f"key rejected by crypto backend: {self.spec.algorithm.value} "
                "requires an EC private key"
            )
        if private_key.curve.name != self.spec.curve:
            raise DomainError(
                f"key rejected by crypto backend: {self.spec.algorithm.value} "
                f"requires curve {self.spec.curve}, got {private_key.curve.name}"
            )
        signature = private_key.sign(message, ec.ECDSA(self._hash_algorithm()))
        return der.to_fixed_width(signature, self.spec.curve_bits)


class EdDsaSigner(Signer):
    """Ed25519 signer.

    The key is one or more newline separated base64 blocks; the last
    non-empty line is decoded and used as the signing key. A 32-byte value
    is an Ed25519 seed, a 64-byte value a libsodium secret key (seed
    followed by the public key).
    """

    family = AlgorithmFamily.EDDSA

    def sign(self, message: bytes, key: bytes) -> bytes:
        lines = [
            line.strip()
            for line in key.decode("latin-1").split("\n")
            if line.strip()
        ]
        try:
            raw = base64.b64decode(lines[-1]) if lines else b""
            if not raw:
                raise DomainError("key cannot be empty")
            if len(raw) == _SODIUM_SECRET_KEY_SIZE:
                raw = raw[:_ED25519_SEED_SIZE]
            private_key = ed25519.Ed25519PrivateKey.from_private_bytes(raw)
            return private_key.sign(message)
        except DomainError:
            raise
        except Exception as exc:
            raise DomainError(str(exc)) from exc


_SIGNERS: dict[AlgorithmFamily, type[Signer]] = {
    cls.family: cls for cls in (MacSigner, RsaSigner, EcdsaSigner, EdDsaSigner)
}


def signer_for(spec: AlgorithmSpec) -> Signer:
    """Return the signing strategy for *spec*'s family.

    Raises:
        DomainError: If no strategy is registered for the family.
    """
    signer_cls = _SIGNERS.get(spec.family)
    if signer_cls is None:
        raise DomainError(f"algorithm not supported: {spec.algorithm.value}")
    logger.debug(
        "Using %s for %s", signer_cls.__name__, spec.algorithm.value
    )
    return signer_cls(spec)
