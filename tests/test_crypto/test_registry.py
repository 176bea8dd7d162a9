"""Tests for authgen.crypto.registry."""

from __future__ import annotations

import pytest

from authgen.crypto.registry import (
    AlgorithmFamily,
    parse_algorithm,
    resolve,
    supported_algorithms,
)
from authgen.exceptions import ConfigurationError
from authgen.models import Algorithm


class TestResolve:
    @pytest.mark.parametrize(
        ("algorithm_id", "family", "digest"),
        [
            ("HS256", AlgorithmFamily.MAC, "SHA256"),
            ("HS384", AlgorithmFamily.MAC, "SHA384"),
            ("HS512", AlgorithmFamily.MAC, "SHA512"),
            ("RS256", AlgorithmFamily.RSA, "SHA256"),
            ("RS384", AlgorithmFamily.RSA, "SHA384"),
            ("RS512", AlgorithmFamily.RSA, "SHA512"),
            ("ES256", AlgorithmFamily.ECDSA, "SHA256"),
            ("ES384", AlgorithmFamily.ECDSA, "SHA384"),
            ("ES256K", AlgorithmFamily.ECDSA, "SHA256"),
            ("EdDSA", AlgorithmFamily.EDDSA, None),
        ],
    )
    def test_family_and_digest(self, algorithm_id, family, digest) -> None:
        spec = resolve(algorithm_id)
        assert spec.algorithm.value == algorithm_id
        assert spec.family is family
        assert spec.digest_name == digest

    @pytest.mark.parametrize(
        ("algorithm_id", "curve", "size"),
        [
            ("ES256", "secp256r1", 32),
            ("ES384", "secp384r1", 48),
            ("ES256K", "secp256k1", 32),
        ],
    )
    def test_ecdsa_curves(self, algorithm_id, curve, size) -> None:
        spec = resolve(algorithm_id)
        assert spec.curve == curve
        assert spec.component_size == size

    def test_accepts_enum_member(self) -> None:
        assert resolve(Algorithm.RS512).digest_name == "SHA512"

    def test_component_size_without_curve_raises(self) -> None:
        with pytest.raises(ValueError):
            resolve("HS256").component_size

    @pytest.mark.parametrize("bad", ["none", "hs256", "PS256", ""])
    def test_unknown_identifier_raises(self, bad: str) -> None:
        with pytest.raises(ConfigurationError, match="unknown algorithm"):
            resolve(bad)


class TestParseAlgorithm:
    def test_error_lists_supported(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            parse_algorithm("XX1")
        assert "EdDSA" in str(exc_info.value)
        assert exc_info.value.exit_code == 2

    def test_supported_algorithms_is_closed_set(self) -> None:
        assert supported_algorithms() == [a.value for a in Algorithm]
        assert len(supported_algorithms()) == 10
