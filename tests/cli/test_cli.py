"""
Tests for the homekit-label CLI
"""
from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from homekit_label.cli.main import app


@pytest.fixture
def runner():
    return CliRunner()


class TestListCategories:
    """Tests for the list-categories command."""

    def test_lists_all(self, runner):
        result = runner.invoke(app, ["list-categories"])
        assert result.exit_code == 0
        assert "Light" in result.output
        assert "Target remote" in result.output


class TestUriCommand:
    """Tests for the uri command."""

    def test_prints_uri(self, runner):
        result = runner.invoke(app, ["uri", "-c", "5", "-p", "613-80-755", "-s", "hspn"])
        assert result.exit_code == 0
        assert result.output.strip() == "X-HM://0053158R7HSPN"

    def test_unknown_category(self, runner):
        result = runner.invoke(app, ["uri", "-c", "25", "-p", "613-80-755", "-s", "HSPN"])
        assert result.exit_code == 1
        assert "Invalid category ID: 25" in result.output


class TestGenerateCommand:
    """Tests for the generate command."""

    def test_writes_label(self, runner):
        result = runner.invoke(
            app,
            ["generate", "-c", "5", "-p", "482-91-573", "-s", "HSPN", "-m", "30AEA40506A0", "-o", "out/label.png"],
        )
        assert result.exit_code == 0, result.output
        assert Path("out/label.png").exists()
        assert "saved" in result.output

    def test_invalid_password(self, runner):
        result = runner.invoke(
            app,
            ["generate", "-c", "5", "-p", "48291573", "-s", "HSPN", "-m", "30AEA40506A0", "-o", "label.png"],
        )
        assert result.exit_code == 1
        assert "Invalid password length" in result.output
        assert not Path("label.png").exists()

    def test_trivial_password_warns(self, runner):
        result = runner.invoke(
            app,
            ["generate", "-c", "5", "-p", "123-45-678", "-s", "HSPN", "-m", "30AEA40506A0", "-o", "label.png"],
        )
        assert result.exit_code == 0, result.output
        assert "easy to guess" in result.output

    def test_requires_png(self, runner):
        result = runner.invoke(
            app,
            ["generate", "-c", "5", "-p", "482-91-573", "-s", "HSPN", "-m", "30AEA40506A0", "-o", "label.jpg"],
        )
        assert result.exit_code == 1
        assert ".png" in result.output

    def test_missing_option(self, runner):
        result = runner.invoke(app, ["generate", "-c", "5"])
        assert result.exit_code != 0


class TestCodeCommand:
    """Tests for the code command."""

    def test_auto_generates_values(self, runner):
        result = runner.invoke(app, ["code", "-c", "5", "-o", "label.png"])
        assert result.exit_code == 0, result.output
        assert "Setup Code" in result.output
        assert "5 (Light)" in result.output
        assert Path("label.png").exists()

    def test_custom_setup_id_and_mac(self, runner):
        result = runner.invoke(app, ["code", "-c", "7", "-o", "label.png", "-s", "ab12", "-m", "30aea40506a0"])
        assert result.exit_code == 0, result.output
        assert "AB12" in result.output
        assert "30:AE:A4:05:06:A0" in result.output

    def test_invalid_mac(self, runner):
        result = runner.invoke(app, ["code", "-c", "5", "-o", "label.png", "-m", "XYZ"])
        assert result.exit_code == 1
        assert "MAC address" in result.output


class TestConfigOption:
    """Tests for the --config option."""

    def test_uses_config_file(self, runner):
        Path("label.json5").write_text("{width: 421}", encoding="utf-8")
        result = runner.invoke(app, ["--config", "label.json5", "code", "-c", "5", "-o", "label.png"])
        assert result.exit_code == 0, result.output

        from PIL import Image

        with Image.open("label.png") as img:
            assert img.width == 421

    def test_invalid_config(self, runner):
        Path("label.json").write_text('{"width": 5}', encoding="utf-8")
        result = runner.invoke(app, ["--config", "label.json", "list-categories"])
        assert result.exit_code == 1
        assert "Error" in result.output
