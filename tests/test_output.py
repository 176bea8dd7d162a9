"""Tests for authgen.output.

Covers:
- OutputFormat resolution (auto -> rich/plain based on TTY)
- NO_COLOR / TERM=dumb color disabling
- credentials, settings records and tables in every format
- stdout vs stderr discipline and quiet mode
- Global instance management
"""

from __future__ import annotations

import json

import pytest

from authgen import output as output_module
from authgen.output import (
    OutputFormat,
    OutputManager,
    _should_disable_color,
    get_output,
    reset_output,
    set_output,
)

JWT = (
    "eyJ0eXAiOiJKV1QiLCJhbGciOiJIUzI1NiJ9"
    ".eyJpc3MiOiJleGFtcGxlLm9yZyIsImF1ZCI6ImV4YW1wbGUuY29tIn0"
    ".b5Y0c5LFpUc0aK0BhDgTxPRgNXzXTDFJDsFmhvuVEUU"
)


@pytest.fixture()
def non_tty(monkeypatch):
    monkeypatch.setattr("authgen.output._is_tty", lambda: False)


@pytest.fixture()
def tty(monkeypatch):
    monkeypatch.setattr("authgen.output._is_tty", lambda: True)


# ------------------------------------------------------------------ #
# Format resolution
# ------------------------------------------------------------------ #


class TestOutputFormatResolution:
    def test_auto_resolves_to_plain_when_not_tty(self, non_tty):
        assert OutputManager(format=OutputFormat.AUTO).format == OutputFormat.PLAIN

    def test_auto_resolves_to_rich_when_tty(self, tty, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.delenv("TERM", raising=False)
        assert OutputManager(format=OutputFormat.AUTO).format == OutputFormat.RICH

    def test_auto_resolves_to_plain_when_tty_but_no_color(self, tty):
        mgr = OutputManager(format=OutputFormat.AUTO, no_color=True)
        assert mgr.format == OutputFormat.PLAIN

    def test_explicit_json_stays_json(self, tty):
        assert OutputManager(format=OutputFormat.JSON).format == OutputFormat.JSON


class TestColorDisabling:
    def test_no_color_env_any_value(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "")
        assert _should_disable_color() is True

    def test_term_dumb_disables_color(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("TERM", "dumb")
        assert _should_disable_color() is True

    def test_normal_term_keeps_color(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("TERM", "xterm-256color")
        assert _should_disable_color() is False


# ------------------------------------------------------------------ #
# Credentials
# ------------------------------------------------------------------ #


class TestCredential:
    def test_plain_header(self, capfd, non_tty):
        OutputManager(format=OutputFormat.PLAIN).credential("Basic", "dXNlcjpwYXNz")
        captured = capfd.readouterr()
        assert captured.out == "Basic dXNlcjpwYXNz\n"
        assert captured.err == ""

    def test_plain_token_only(self, capfd, non_tty):
        OutputManager(format=OutputFormat.PLAIN).credential("Bearer", JWT, token_only=True)
        assert capfd.readouterr().out == f"{JWT}\n"

    def test_json_header(self, capfd, non_tty):
        OutputManager(format=OutputFormat.JSON).credential("Bearer", JWT)
        assert json.loads(capfd.readouterr().out) == {"Authorization": f"Bearer {JWT}"}

    def test_json_token_only(self, capfd, non_tty):
        OutputManager(format=OutputFormat.JSON).credential("Bearer", JWT, token_only=True)
        assert json.loads(capfd.readouterr().out) == {"token": JWT}

    def test_rich_keeps_long_token_on_one_line(self, capfd, non_tty):
        OutputManager(format=OutputFormat.RICH, no_color=True).credential("Bearer", JWT)
        out = capfd.readouterr().out
        assert f"Bearer {JWT}" in out
        assert out.count("\n") == 1

    def test_digest_quotes_are_not_markup(self, capfd, non_tty):
        value = 'username="u", realm="[api]", response="abc"'
        OutputManager(format=OutputFormat.RICH, no_color=True).credential("Digest", value)
        assert f"Digest {value}" in capfd.readouterr().out

    def test_quiet_does_not_suppress_credential(self, capfd, non_tty):
        OutputManager(format=OutputFormat.PLAIN, quiet=True).credential("Basic", "eDp5")
        assert capfd.readouterr().out == "Basic eDp5\n"


# ------------------------------------------------------------------ #
# Records and tables
# ------------------------------------------------------------------ #


SETTINGS = {
    "default_profile": None,
    "auto_select_single_profile": True,
    "output": {"format": "auto"},
    "defaults": {"jwt_algorithm": "HS256", "bearer_length": 32},
}


class TestRecord:
    def test_plain_flattens_to_dotted_names(self, capfd, non_tty):
        OutputManager(format=OutputFormat.PLAIN).record(SETTINGS)
        assert capfd.readouterr().out.splitlines() == [
            "default_profile\t",
            "auto_select_single_profile\ttrue",
            "output.format\tauto",
            "defaults.jwt_algorithm\tHS256",
            "defaults.bearer_length\t32",
        ]

    def test_plain_renders_lists_and_empty_maps_as_json(self, capfd, non_tty):
        OutputManager(format=OutputFormat.PLAIN).record(
            {"claims": {"scopes": ["a", "b"]}, "headers": {}}
        )
        assert capfd.readouterr().out.splitlines() == [
            'claims.scopes\t["a", "b"]',
            "headers\t{}",
        ]

    def test_json_keeps_nesting(self, capfd, non_tty):
        OutputManager(format=OutputFormat.JSON).record(SETTINGS)
        out = capfd.readouterr().out
        assert json.loads(out) == SETTINGS
        assert "  " in out

    def test_rich_table(self, capfd, non_tty):
        mgr = OutputManager(format=OutputFormat.RICH, no_color=True)
        mgr.record(SETTINGS, title="Configuration")
        out = capfd.readouterr().out
        assert "Configuration" in out
        assert "defaults.jwt_algorithm" in out
        assert "HS256" in out


class TestTable:
    def test_json_mode(self, capfd, non_tty):
        OutputManager(format=OutputFormat.JSON).table(
            ["Profile", "Type"], [["svc", "basic"], ["signer", "jwt"]]
        )
        assert json.loads(capfd.readouterr().out) == [
            {"Profile": "svc", "Type": "basic"},
            {"Profile": "signer", "Type": "jwt"},
        ]

    def test_plain_mode(self, capfd, non_tty):
        OutputManager(format=OutputFormat.PLAIN).table(["Profile", "Type"], [["svc", "basic"]])
        assert capfd.readouterr().out.splitlines() == ["Profile\tType", "svc\tbasic"]

    def test_rich_mode(self, capfd, non_tty):
        mgr = OutputManager(format=OutputFormat.RICH, no_color=True)
        mgr.table(["Profile", "Type"], [["svc", "basic"]], title="Profiles")
        out = capfd.readouterr().out
        assert "Profiles" in out
        assert "svc" in out


# ------------------------------------------------------------------ #
# Notices (stderr)
# ------------------------------------------------------------------ #


class TestNotices:
    @pytest.mark.parametrize("method", ["info", "success", "warning", "error", "suggest"])
    def test_notices_go_to_stderr(self, capfd, non_tty, method):
        getattr(OutputManager(no_color=True), method)("something happened")
        captured = capfd.readouterr()
        assert captured.out == ""
        assert "something happened" in captured.err

    def test_error_prefix(self, capfd, non_tty):
        OutputManager(no_color=True).error("key rejected by crypto backend")
        assert capfd.readouterr().err == "Error: key rejected by crypto backend\n"

    def test_colored_error_keeps_brackets(self, capfd, non_tty, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.delenv("TERM", raising=False)
        OutputManager().error("--claim expects name=value, got '[x]'")
        assert "got '[x]'" in capfd.readouterr().err

    @pytest.mark.parametrize("method", ["info", "success", "suggest"])
    def test_quiet_suppresses(self, capfd, non_tty, method):
        getattr(OutputManager(quiet=True, no_color=True), method)("hidden")
        assert capfd.readouterr().err == ""

    @pytest.mark.parametrize("method", ["warning", "error"])
    def test_quiet_keeps_problems(self, capfd, non_tty, method):
        getattr(OutputManager(quiet=True, no_color=True), method)("shown")
        assert "shown" in capfd.readouterr().err


# ------------------------------------------------------------------ #
# Global instance
# ------------------------------------------------------------------ #


class TestGlobalInstance:
    def test_get_output_creates_default(self, non_tty):
        reset_output()
        assert isinstance(get_output(), OutputManager)

    def test_set_output_replaces_global(self):
        mgr = OutputManager(format=OutputFormat.JSON)
        set_output(mgr)
        assert get_output() is mgr

    def test_reset_output_clears_global(self):
        set_output(OutputManager(format=OutputFormat.JSON))
        reset_output()
        assert output_module._output is None

    def test_module_helpers_delegate(self, capfd, non_tty):
        set_output(OutputManager(format=OutputFormat.PLAIN, no_color=True))
        output_module.credential("Basic", "dXNlcjpwYXNz", token_only=True)
        output_module.warning("careful")
        captured = capfd.readouterr()
        assert captured.out == "dXNlcjpwYXNz\n"
        assert captured.err == "Warning: careful\n"
