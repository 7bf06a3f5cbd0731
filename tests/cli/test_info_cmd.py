"""Tests for the ``addonkeeper info`` command."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from addonkeeper.cli.main import cli


class TestInfoText:
    """Human-readable addon details."""

    def test_shows_all_fields(self, runner: CliRunner, mixed_addons_dir: Path) -> None:
        result = runner.invoke(
            cli, ["--addons-dir", str(mixed_addons_dir), "info", "Bagnon"]
        )
        assert result.exit_code == 0
        assert "Bagnon" in result.output
        assert "10.2.0" in result.output
        assert "Single window displays for your inventory" in result.output
        assert "Author: Jaliborc" in result.output
        assert str(mixed_addons_dir / "Bagnon") in result.output
        assert "BagBrother" in result.output
        assert "WildAddon-1.1" in result.output

    def test_lookup_ignores_case(self, runner: CliRunner, mixed_addons_dir: Path) -> None:
        result = runner.invoke(
            cli, ["--addons-dir", str(mixed_addons_dir), "info", "bAgNoN"]
        )
        assert result.exit_code == 0
        assert "Jaliborc" in result.output

    def test_addon_without_version(
        self, runner: CliRunner, mixed_addons_dir: Path
    ) -> None:
        result = runner.invoke(
            cli, ["--addons-dir", str(mixed_addons_dir), "info", "nameplates"]
        )
        assert result.exit_code == 0
        assert "unknown" in result.output
        assert "Dependencies" not in result.output

    def test_not_found(self, runner: CliRunner, mixed_addons_dir: Path) -> None:
        result = runner.invoke(
            cli, ["--addons-dir", str(mixed_addons_dir), "info", "Questie"]
        )
        assert result.exit_code == 1
        assert "Addon not found: Questie" in result.output

    def test_bad_version_is_an_error(
        self, runner: CliRunner, mixed_addons_dir: Path
    ) -> None:
        result = runner.invoke(
            cli, ["--addons-dir", str(mixed_addons_dir), "info", "Broken"]
        )
        assert result.exit_code == 1
        assert "Unparseable version" in result.output

    def test_missing_toc_is_an_error(
        self, runner: CliRunner, mixed_addons_dir: Path
    ) -> None:
        result = runner.invoke(
            cli, ["--addons-dir", str(mixed_addons_dir), "info", "Blizzard_Stub"]
        )
        assert result.exit_code == 1
        assert "Cannot read TOC file" in result.output

    def test_missing_root_exits_2(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            cli, ["--addons-dir", str(tmp_path / "nope"), "info", "Bagnon"]
        )
        assert result.exit_code == 2

    def test_name_is_required(self, runner: CliRunner, addons_dir: Path) -> None:
        result = runner.invoke(cli, ["--addons-dir", str(addons_dir), "info"])
        assert result.exit_code == 2
        assert "Missing argument" in result.output or "Usage" in result.output


class TestInfoJson:
    """Machine-readable addon details."""

    def test_json_record(self, runner: CliRunner, mixed_addons_dir: Path) -> None:
        result = runner.invoke(
            cli,
            ["--addons-dir", str(mixed_addons_dir), "info", "bagnon", "--format", "json"],
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["name"] == "Bagnon"
        assert data["version"] == "10.2.0"
        assert data["dependencies"] == ["BagBrother", "WildAddon-1.1"]

    def test_json_error(self, runner: CliRunner, mixed_addons_dir: Path) -> None:
        result = runner.invoke(
            cli,
            ["--addons-dir", str(mixed_addons_dir), "info", "nope", "--format", "json"],
        )
        assert result.exit_code == 1
        assert "error" in json.loads(result.output)
