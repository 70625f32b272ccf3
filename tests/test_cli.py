"""Tests for the express CLI command."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

from typer.testing import CliRunner

from express_generator import __version__
from express_generator.cli.main import app
from express_generator.cli.prompts import ConsolePrompter

runner = CliRunner()


class TestCreateCommand:
    """Tests for generating through the CLI."""

    def test_generates_with_force(self, tmp_path: Path) -> None:
        target = tmp_path / "my-app"
        result = runner.invoke(
            app, [str(target), "--view", "pug", "--tsconfig", "node16", "--force"]
        )
        assert result.exit_code == 0, result.output
        assert (target / "src" / "views" / "index.pug").is_file()
        assert "create : " in result.output
        assert "npm install" in result.output
        assert "DEBUG=my-app:* npm start" in result.output

    def test_css_short_option(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app, [str(tmp_path), "--no-view", "-c", "stylus", "--tsconfig", "node16"]
        )
        assert result.exit_code == 0, result.output
        pkg = json.loads((tmp_path / "package.json").read_text(encoding="utf-8"))
        assert pkg["dependencies"]["stylus"] == "0.54.5"

    def test_decline_exits_nonzero(self, tmp_path: Path) -> None:
        (tmp_path / "existing.txt").write_text("keep", encoding="utf-8")
        with patch.object(ConsolePrompter, "confirm", return_value=False) as confirm:
            result = runner.invoke(
                app, [str(tmp_path), "--view", "ejs", "--tsconfig", "node16"]
            )
        assert result.exit_code == 1
        confirm.assert_called_once()
        assert sorted(p.name for p in tmp_path.iterdir()) == ["existing.txt"]

    def test_accept_generates(self, tmp_path: Path) -> None:
        (tmp_path / "existing.txt").write_text("keep", encoding="utf-8")
        with patch.object(ConsolePrompter, "confirm", return_value=True):
            result = runner.invoke(
                app, [str(tmp_path), "--view", "ejs", "--tsconfig", "node16"]
            )
        assert result.exit_code == 0, result.output
        assert (tmp_path / "package.json").is_file()

    def test_flavor_prompt_used_without_option(self, tmp_path: Path) -> None:
        with patch.object(ConsolePrompter, "select", return_value="svelte") as select:
            result = runner.invoke(app, [str(tmp_path), "--view", "ejs"])
        assert result.exit_code == 0, result.output
        select.assert_called_once()
        tsconfig = json.loads((tmp_path / "tsconfig.json").read_text(encoding="utf-8"))
        assert tsconfig["extends"] == "@tsconfig/svelte/tsconfig.json"

    def test_invalid_view_is_usage_error(self, tmp_path: Path) -> None:
        result = runner.invoke(app, [str(tmp_path), "--view", "mustache"])
        assert result.exit_code == 2
        assert not any(tmp_path.iterdir())

    def test_invalid_css_is_usage_error(self, tmp_path: Path) -> None:
        result = runner.invoke(app, [str(tmp_path), "--no-view", "--css", "postcss"])
        assert result.exit_code == 2

    def test_legacy_flag_warns(self, tmp_path: Path) -> None:
        result = runner.invoke(app, [str(tmp_path), "--hbs", "--tsconfig", "node16"])
        assert result.exit_code == 0, result.output
        assert "has been renamed to `--view=hbs'" in result.output
        assert (tmp_path / "src" / "views" / "layout.hbs").is_file()


class TestCliMeta:
    """Tests for --help and --version."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help(self) -> None:
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "--view" in result.output
        assert "--force" in result.output
