"""Integration tests for the command-line workflows.

Each test drives the click group end to end through CliRunner with the real
platform primitives, inside a temporary working directory so no stray .env
file leaks into the configuration.
"""

from __future__ import annotations

import hashlib
import json
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner

from texthash.cli import cli

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def runner(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> CliRunner:
    """Provide a CliRunner isolated from the developer's environment."""
    monkeypatch.chdir(tmp_path)
    for name in ("TEXTHASH_LOG_LEVEL", "TEXTHASH_DEFAULT_ALGORITHM", "TEXTHASH_MAX_WORKERS"):
        monkeypatch.delenv(name, raising=False)
    return CliRunner()


class TestHashCommand:
    """Workflow: hash one text with one algorithm."""

    def test_default_algorithm_is_sha256(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["hash", "abc"])
        assert result.exit_code == 0
        assert result.output.strip() == hashlib.sha256(b"abc").hexdigest()

    def test_md5(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["hash", "abc", "--algorithm", "md5"])
        assert result.exit_code == 0
        assert result.output.strip() == "900150983cd24fb0d6963f7d28e17f72"

    def test_default_algorithm_from_environment(
        self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TEXTHASH_DEFAULT_ALGORITHM", "SHA-1")
        result = runner.invoke(cli, ["hash", "abc"])
        assert result.output.strip() == "a9993e364706816aba3e25717850c26c9cd0d89d"

    def test_json_output(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["hash", "café", "-a", "MD5", "--output-format", "json"])
        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload == {
            "algorithm": "MD5",
            "success": True,
            "hash": hashlib.md5("café".encode()).hexdigest(),
            "error": None,
        }

    def test_empty_text_gives_empty_hash(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["hash", "", "-a", "SHA-512"])
        assert result.exit_code == 0
        assert result.output.strip() == ""

    def test_stdin(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["hash", "--stdin", "-a", "md5"], input="hello\n")
        assert result.exit_code == 0
        assert result.output.strip() == hashlib.md5(b"hello\n").hexdigest()

    def test_unknown_algorithm_rejected(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["hash", "abc", "-a", "crc32"])
        assert result.exit_code == 2
        assert "unsupported algorithm" in result.output

    def test_missing_text_is_usage_error(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["hash"])
        assert result.exit_code == 2
        assert "missing TEXT" in result.output

    def test_text_and_stdin_conflict(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["hash", "abc", "--stdin"], input="x")
        assert result.exit_code == 2


class TestHashAllCommand:
    """Workflow: hash one text with every algorithm."""

    def test_lists_all_five(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["hash-all", "abc"])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines == [
            f"MD5: {hashlib.md5(b'abc').hexdigest()}",
            f"SHA-1: {hashlib.sha1(b'abc').hexdigest()}",
            f"SHA-256: {hashlib.sha256(b'abc').hexdigest()}",
            f"SHA-384: {hashlib.sha384(b'abc').hexdigest()}",
            f"SHA-512: {hashlib.sha512(b'abc').hexdigest()}",
        ]

    def test_json_output(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["hash-all", "naïve", "--output-format", "json"])
        payload = json.loads(result.output)
        assert payload["errors"] == {}
        assert payload["sha384"] == hashlib.sha384("naïve".encode()).hexdigest()
        assert set(payload) == {"md5", "sha1", "sha256", "sha384", "sha512", "errors"}

    def test_empty_text(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["hash-all", "", "--output-format", "json"])
        payload = json.loads(result.output)
        assert all(payload[key] == "" for key in ("md5", "sha1", "sha256", "sha384", "sha512"))


class TestHashLinesCommand:
    """Workflow: hash every line of a file."""

    def test_each_line_hashed(self, runner: CliRunner, tmp_path: Path) -> None:
        source = tmp_path / "input.txt"
        source.write_text("alpha\nbeta\n\ngamma\n", encoding="utf-8")

        result = runner.invoke(cli, ["hash-lines", str(source), "-a", "MD5", "--skip-blank"])

        assert result.exit_code == 0
        for word in ("alpha", "beta", "gamma"):
            assert f"{hashlib.md5(word.encode()).hexdigest()}  {word}" in result.output
        assert "skipped: 1" in result.output
        assert "successful: 3" in result.output

    def test_form_feed_stays_inside_line(self, runner: CliRunner, tmp_path: Path) -> None:
        source = tmp_path / "input.txt"
        source.write_text("a\x0cb\nc\n", encoding="utf-8")

        result = runner.invoke(cli, ["hash-lines", str(source), "-a", "MD5"])

        assert result.exit_code == 0
        assert "Hashing 2 lines" in result.output
        digest = hashlib.md5(b"a\x0cb").hexdigest()
        assert f"{digest}  a\x0cb" in result.output
        assert hashlib.md5(b"a").hexdigest() not in result.output

    def test_crlf_endings_and_line_separator(self, runner: CliRunner, tmp_path: Path) -> None:
        source = tmp_path / "input.txt"
        source.write_bytes("one\r\ntwo\u2028three\r\n".encode())

        result = runner.invoke(cli, ["hash-lines", str(source), "-a", "SHA-1"])

        assert result.exit_code == 0
        assert "Hashing 2 lines" in result.output
        assert hashlib.sha1(b"one").hexdigest() in result.output
        assert hashlib.sha1("two\u2028three".encode()).hexdigest() in result.output

    def test_invalid_utf8_reported(self, runner: CliRunner, tmp_path: Path) -> None:
        source = tmp_path / "binary.bin"
        source.write_bytes(b"\xff\xfe\xfa")

        result = runner.invoke(cli, ["hash-lines", str(source)])

        assert result.exit_code == 1
        assert "[ERROR]" in result.output
        assert "not valid UTF-8" in result.output
        assert not isinstance(result.exception, UnicodeDecodeError)

    def test_missing_file(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["hash-lines", str(tmp_path / "nope.txt")])
        assert result.exit_code == 2


class TestCheckCommand:
    """Workflow: structural digest check."""

    def test_matching_algorithm(self, runner: CliRunner) -> None:
        digest = hashlib.sha1(b"x").hexdigest()
        result = runner.invoke(cli, ["check", digest, "-a", "sha1"])
        assert result.exit_code == 0
        assert "[OK]" in result.output

    def test_wrong_length(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["check", "abc", "-a", "md5"])
        assert result.exit_code == 1
        assert "expected 32 hex characters" in result.output

    def test_detects_algorithm(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["check", "D41D8CD98F00B204E9800998ECF8427E"])
        assert result.exit_code == 0
        assert "MD5" in result.output

    def test_no_match(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["check", "not-a-hash"])
        assert result.exit_code == 1


class TestAlgorithmsCommand:
    """Workflow: list supported algorithms."""

    def test_lists_every_algorithm(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["algorithms"])
        assert result.exit_code == 0
        for name in ("MD5", "SHA-1", "SHA-256", "SHA-384", "SHA-512"):
            assert name in result.output
        assert "128 bits" in result.output
