"""Tests for TOML config file loading."""

from __future__ import annotations

import argparse
from pathlib import Path

import pytest

from calclex.cli import build_parser, load_config, main, resolve_options


class TestLoadConfig:
    def test_missing_config_returns_empty(self, tmp_path: Path) -> None:
        assert load_config(None, tmp_path) == {}

    def test_explicit_path(self, tmp_path: Path) -> None:
        cfg = tmp_path / "custom.toml"
        cfg.write_text('[output]\nformat = "json"\n')
        result = load_config(cfg, tmp_path)
        assert result["output"] == {"format": "json"}

    def test_auto_discover_calclex_toml(self, tmp_path: Path) -> None:
        cfg = tmp_path / "calclex.toml"
        cfg.write_text('[diagnostics]\nfilename = "repl"\n')
        result = load_config(None, tmp_path)
        assert result["diagnostics"] == {"filename": "repl"}


class TestConfigMerge:
    def test_defaults(self, tmp_path: Path) -> None:
        opts = resolve_options(build_parser().parse_args(["1"]), tmp_path)
        assert opts.output_format == "text"
        assert opts.filename == "<input>"

    def test_config_format(self, tmp_path: Path) -> None:
        (tmp_path / "calclex.toml").write_text('[output]\nformat = "json"\n')
        opts = resolve_options(build_parser().parse_args(["1"]), tmp_path)
        assert opts.output_format == "json"

    def test_cli_overrides_config_format(self, tmp_path: Path) -> None:
        (tmp_path / "calclex.toml").write_text('[output]\nformat = "json"\n')
        ns = build_parser().parse_args(["1", "--format", "text"])
        assert resolve_options(ns, tmp_path).output_format == "text"

    def test_invalid_config_format(self, tmp_path: Path) -> None:
        (tmp_path / "calclex.toml").write_text('[output]\nformat = "yaml"\n')
        with pytest.raises(argparse.ArgumentTypeError):
            resolve_options(build_parser().parse_args(["1"]), tmp_path)

    def test_config_filename(self, tmp_path: Path) -> None:
        (tmp_path / "calclex.toml").write_text('[diagnostics]\nfilename = "repl"\n')
        opts = resolve_options(build_parser().parse_args(["1"]), tmp_path)
        assert opts.filename == "repl"

    def test_input_file_overrides_config_filename(self, tmp_path: Path) -> None:
        (tmp_path / "calclex.toml").write_text('[diagnostics]\nfilename = "repl"\n')
        opts = resolve_options(build_parser().parse_args(["-f", "e.txt"]), tmp_path)
        assert opts.filename == "e.txt"

    def test_explicit_config_flag(self, tmp_path: Path) -> None:
        cfg = tmp_path / "other.toml"
        cfg.write_text('[output]\nformat = "json"\n')
        ns = build_parser().parse_args(["1", "--config", str(cfg)])
        assert resolve_options(ns, tmp_path).output_format == "json"


class TestConfigInMain:
    def test_config_filename_in_diagnostic(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (tmp_path / "calclex.toml").write_text('[diagnostics]\nfilename = "repl"\n')
        monkeypatch.chdir(tmp_path)
        assert main(["1 ? 2"]) == 1
        assert "repl:1:3" in capsys.readouterr().err

    def test_malformed_config_exit_2(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (tmp_path / "calclex.toml").write_text("[output\n")
        monkeypatch.chdir(tmp_path)
        assert main(["1"]) == 2
        assert "invalid config file" in capsys.readouterr().err

    def test_invalid_format_exit_2(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (tmp_path / "calclex.toml").write_text('[output]\nformat = "csv"\n')
        monkeypatch.chdir(tmp_path)
        assert main(["1"]) == 2
        assert "csv" in capsys.readouterr().err
