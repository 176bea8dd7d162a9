"""Tests for the Basic, Bearer and Digest builders and the factory."""

from __future__ import annotations

import pytest

from authgen.builders import (
    AuthGenerator,
    BasicAuthBuilder,
    BearerTokenBuilder,
    DigestAuthBuilder,
    basic_auth,
    bearer_token,
    digest_auth,
    jwt,
)
from authgen.builders.digest import parse_digest_algorithm
from authgen.exceptions import ConfigurationError, DomainError
from authgen.generators.digest import DigestAuthGenerator
from authgen.models import DigestAlgorithm


class TestFactory:
    def test_returns_fresh_builders(self) -> None:
        assert isinstance(AuthGenerator.basic_auth(), BasicAuthBuilder)
        assert isinstance(AuthGenerator.bearer_token(), BearerTokenBuilder)
        assert isinstance(AuthGenerator.digest_auth(), DigestAuthBuilder)
        assert AuthGenerator.basic_auth() is not AuthGenerator.basic_auth()

    def test_module_level_aliases(self) -> None:
        assert basic_auth().username("u").to_string() == "dTo="
        assert bearer_token().to_string().startswith("brr_")
        assert digest_auth().username("u").realm("r").to_header().startswith("Digest ")
        assert jwt().key("k").to_string().count(".") == 2


class TestBasicAuthBuilder:
    def test_to_header(self) -> None:
        header = BasicAuthBuilder().username("user").password("pass").to_header()
        assert header == "Basic dXNlcjpwYXNz"

    def test_to_headers(self) -> None:
        headers = BasicAuthBuilder().username("user").password("pass").to_headers(
            {"X-Trace": "1"}
        )
        assert headers == {"Authorization": "Basic dXNlcjpwYXNz", "X-Trace": "1"}

    def test_additional_authorization_replaces_generated(self) -> None:
        headers = BasicAuthBuilder().username("u").to_headers({"Authorization": "x"})
        assert headers == {"Authorization": "x"}

    def test_empty_username(self) -> None:
        with pytest.raises(DomainError):
            BasicAuthBuilder().password("pass").to_string()


class TestBearerTokenBuilder:
    def test_defaults(self) -> None:
        token = BearerTokenBuilder().to_string()
        assert token.startswith("brr_")
        assert len(token) == 4 + 43

    def test_length_and_prefix(self) -> None:
        token = BearerTokenBuilder().length(48).prefix("sk_").to_string()
        assert token.startswith("sk_")
        assert len(token) == 3 + 64

    def test_deterministic_source(self) -> None:
        builder = BearerTokenBuilder(random_bytes=lambda n: b"\x00" * n)
        assert builder.to_string() == "brr_" + "A" * 43

    def test_to_header(self) -> None:
        assert BearerTokenBuilder().to_header().startswith("Bearer brr_")

    @pytest.mark.parametrize("length", [31, 129])
    def test_invalid_length_rejected_at_build(self, length: int) -> None:
        builder = BearerTokenBuilder().length(length)
        with pytest.raises(ConfigurationError):
            builder.build()

    def test_invalid_prefix_rejected_at_build(self) -> None:
        with pytest.raises(ConfigurationError):
            BearerTokenBuilder().prefix("way_too_long_").build()


class TestDigestAuthBuilder:
    def _full(self) -> DigestAuthBuilder:
        return (
            DigestAuthBuilder()
            .username("user")
            .password("pass")
            .realm("example.com")
            .method("GET")
            .uri("/path")
            .nonce("nonce123")
            .nonce_count("00000001")
            .client_nonce("0a4f113b")
            .qop("auth")
            .opaque("opaque123")
        )

    def test_full_header(self) -> None:
        assert self._full().to_header() == (
            'Digest username="user", realm="example.com", nonce="nonce123", '
            'uri="/path", algorithm="MD5", qop=auth, nc=00000001, '
            'cnonce="0a4f113b", response="95b1b30f94a1a47da30be528807d1293", '
            'opaque="opaque123"'
        )

    @pytest.mark.parametrize(
        "algorithm", [DigestAlgorithm.SHA256_SESS, "SHA-256-sess"]
    )
    def test_algorithm_accepts_enum_or_string(self, algorithm) -> None:
        token = self._full().algorithm(algorithm).to_string()
        assert 'algorithm="SHA-256-sess"' in token
        assert (
            'response="2f3b67327484fead11b62971f5b1710628cc3e7f46f6b9612873615237efe0be"'
            in token
        )

    def test_auth_int_with_body(self) -> None:
        token = self._full().method("POST").qop("auth-int").entity_body("foo=bar").to_string()
        assert 'response="ea60fba829b499794a1203f158f0b3f5"' in token

    def test_unknown_algorithm_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="unknown digest algorithm"):
            DigestAuthBuilder().algorithm("SHA-1")

    def test_default_nonces_come_from_random_source(self) -> None:
        sizes: list[int] = []

        def _random(n: int) -> bytes:
            sizes.append(n)
            return b"\x0f" * n

        generator = DigestAuthBuilder(random_bytes=_random).username("u").realm("r").build()
        assert sizes == [16, 8]
        assert isinstance(generator, DigestAuthGenerator)
        assert generator.data.nonce == "0f" * 16
        assert generator.data.cnonce == "0f" * 8
        assert generator.data.method == "GET"
        assert generator.data.uri == "/"
        assert generator.data.algorithm is DigestAlgorithm.MD5

    def test_default_nonces_are_random(self) -> None:
        first = DigestAuthBuilder().username("u").realm("r").build().data
        second = DigestAuthBuilder().username("u").realm("r").build().data
        assert first.nonce != second.nonce
        assert len(first.nonce) == 32
        assert len(first.cnonce) == 16

    def test_reused_builder_draws_new_nonces(self) -> None:
        builder = DigestAuthBuilder().username("u").realm("r")
        first, second = builder.build().data, builder.build().data
        assert first.cnonce != second.cnonce
        assert first.nonce != second.nonce

    def test_pinned_nonces_are_kept(self) -> None:
        builder = DigestAuthBuilder().username("u").realm("r").nonce("n1").client_nonce("c1")
        assert builder.build().data.cnonce == builder.build().data.cnonce == "c1"
        assert builder.build().data.nonce == "n1"

    def test_missing_realm(self) -> None:
        with pytest.raises(DomainError, match="username and realm required"):
            DigestAuthBuilder().username("u").to_string()


class TestParseDigestAlgorithm:
    @pytest.mark.parametrize("value", ["MD5", "MD5-sess", "SHA-256", "SHA-256-sess"])
    def test_known_values(self, value: str) -> None:
        assert parse_digest_algorithm(value).value == value

    def test_error_lists_supported(self) -> None:
        with pytest.raises(ConfigurationError, match="SHA-256-sess"):
            parse_digest_algorithm("md5")
