"""Algorithm registry for JWT signing.

Maps every :class:`~authgen.models.Algorithm` to the cryptographic family
that implements it, the digest it signs with and, for ECDSA, the curve and
its bit width:

    ======== ====== ======== ========= ====
    id       family digest   curve     bits
    ======== ====== ======== ========= ====
    HS256    MAC    SHA256
    HS384    MAC    SHA384
    HS512    MAC    SHA512
    RS256    RSA    SHA256
    RS384    RSA    SHA384
    RS512    RSA    SHA512
    ES256    ECDSA  SHA256   secp256r1 256
    ES384    ECDSA  SHA384   secp384r1 384
    ES256K   ECDSA  SHA256   secp256k1 256
    EdDSA    EdDSA           (Ed25519)
    ======== ====== ======== ========= ====

The set is closed. Identifiers arriving from untyped sources (CLI flags,
profile JSON) go through :func:`resolve`, which rejects anything else with
a :class:`~authgen.exceptions.ConfigurationError`.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Union

from authgen.exceptions import ConfigurationError
from authgen.models import Algorithm


class AlgorithmFamily(str, enum.Enum):
    """Cryptographic families a JWS algorithm can belong to."""

    MAC = "mac"
    RSA = "rsa"
    ECDSA = "ecdsa"
    EDDSA = "eddsa"


@dataclass(frozen=True)
class AlgorithmSpec:
    algorithm: Algorithm
    family: AlgorithmFamily
    digest_name: Optional[str] = None
    curve: Optional[str] = None
    curve_bits: Optional[int] = None

    @property
    def component_size(self) -> int:
        """Byte width of one ECDSA signature component (``ceil(bits / 8)``)."""
        if self.curve_bits is None:
            raise ValueError(f"{self.algorithm.value} has no curve")
        return (self.curve_bits + 7) // 8


_REGISTRY: dict[Algorithm, AlgorithmSpec] = {
    spec.algorithm: spec
    for spec in (
        AlgorithmSpec(Algorithm.HS256, AlgorithmFamily.MAC, "SHA256"),
        AlgorithmSpec(Algorithm.HS384, AlgorithmFamily.MAC, "SHA384"),
        AlgorithmSpec(Algorithm.HS512, AlgorithmFamily.MAC, "SHA512"),
        AlgorithmSpec(Algorithm.RS256, AlgorithmFamily.RSA, "SHA256"),
        AlgorithmSpec(Algorithm.RS384, AlgorithmFamily.RSA, "SHA384"),
        AlgorithmSpec(Algorithm.RS512, AlgorithmFamily.RSA, "SHA512"),
        AlgorithmSpec(Algorithm.ES256, AlgorithmFamily.ECDSA, "SHA256", "secp256r1", 256),
        AlgorithmSpec(Algorithm.ES384, AlgorithmFamily.ECDSA, "SHA384", "secp384r1", 384),
        AlgorithmSpec(Algorithm.ES256K, AlgorithmFamily.ECDSA, "SHA256", "secp256k1", 256),
        AlgorithmSpec(Algorithm.EdDSA, AlgorithmFamily.EDDSA),
    )
}


def parse_algorithm(algorithm_id: Union[Algorithm, str]) -> Algorithm:
    """Turn an identifier into an :class:`Algorithm` member.

    Raises:
        ConfigurationError: If *algorithm_id* is not a known identifier.
    """
    if isinstance(algorithm_id, Algorithm):
        return algorithm_id
    try:
        return Algorithm(algorithm_id)
    except ValueError:
        known = ", ".join(a.value for a in Algorithm)
        raise ConfigurationError(
            f"unknown algorithm '{algorithm_id}'. Supported: {known}"
        ) from None


def resolve(algorithm_id: Union[Algorithm, str]) -> AlgorithmSpec:
    """Look up the family, digest and curve for *algorithm_id*.

    Args:
        algorithm_id: An :class:`Algorithm` member or its string value
            (e.g. ``"ES384"``).

    Returns:
        The matching :class:`AlgorithmSpec`.

    Raises:
        ConfigurationError: If *algorithm_id* is outside the supported set.
    """
    return _REGISTRY[parse_algorithm(algorithm_id)]


def supported_algorithms() -> list[str]:
    """Return every supported identifier in registry order."""
    return [a.value for a in _REGISTRY]
