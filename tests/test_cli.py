"""Tests for the compgraph command line interface."""

import math
from pathlib import Path

import pytest
from typer.testing import CliRunner

from compgraph._cli.main import app

runner = CliRunner()


class TestDemoCommand:
    def test_default_inputs(self) -> None:
        result = runner.invoke(app, ["demo"])

        assert result.exit_code == 0
        expected = 10.0 + 20.0 * math.sin(20.0 + 30.0**3)
        assert repr(expected) in result.output
        assert "(x1 + (x2 * sin((x2 + x3^3))))" in result.output

    def test_custom_inputs(self) -> None:
        result = runner.invoke(app, ["demo", "--x1", "1", "--x2", "0", "--x3", "2"])

        assert result.exit_code == 0
        assert repr(1.0) in result.output

    def test_domain_error_exits_with_error(self) -> None:
        result = runner.invoke(app, ["demo", "--x3", "1e200"])

        assert result.exit_code == 1
        assert "Evaluation failed" in result.output

    def test_depth_limit(self) -> None:
        result = runner.invoke(app, ["demo", "--max-depth", "3"])

        assert result.exit_code == 1
        assert "limit of 3" in result.output

    def test_config_file(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.compgraph]\nmax_depth = 2\n")

        result = runner.invoke(app, ["demo", "--config", str(pyproject)])

        assert result.exit_code == 1
        assert "limit of 2" in result.output

    def test_invalid_config_file(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.compgraph]\nmax_depth = 0\n")

        result = runner.invoke(app, ["demo", "--config", str(pyproject)])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_missing_config_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["demo", "--config", str(tmp_path / "missing.toml")])

        assert result.exit_code == 1
        assert "Cannot read config file" in result.output
        assert not isinstance(result.exception, FileNotFoundError)


class TestConfigCommand:
    def test_shows_settings(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.compgraph]\nmax_depth = 42\n")

        result = runner.invoke(app, ["config", "--config", str(pyproject)])

        assert result.exit_code == 0
        assert "max_depth" in result.output
        assert "42" in result.output
        assert "max_render_length" in result.output

    def test_defaults(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["config"])

        assert result.exit_code == 0
        assert "10000" in result.output
        assert "(defaults)" in result.output
