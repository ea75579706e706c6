"""Smoke tests for CLI commands.

Tests that CLI commands parse correctly and don't crash. Uses Click's
CliRunner for testing without actually running the full application.
"""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from colorpicker.cli.main import cli
from colorpicker.cli.params import parse_color
from colorpicker.exceptions import ColorParseError
from colorpicker.models import Color, InputMode


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.mark.integration
class TestCLIHelp:
    """Test that all commands have working help text."""

    def test_main_help(self, runner):
        """Test main CLI help displays."""
        result = runner.invoke(cli, ['--help'])
        assert result.exit_code == 0
        assert 'Color Picker' in result.output
        assert '--color' in result.output
        assert '--mode' in result.output

    def test_version_flag(self, runner):
        """Test --version flag works."""
        result = runner.invoke(cli, ['--version'])
        assert result.exit_code == 0
        assert '0.1.0' in result.output

    def test_convert_help(self, runner):
        result = runner.invoke(cli, ['convert', '--help'])
        assert result.exit_code == 0

    def test_config_help(self, runner):
        """Test config command help."""
        result = runner.invoke(cli, ['config', '--help'])
        assert result.exit_code == 0
        assert 'reset' in result.output


@pytest.mark.integration
class TestConvert:
    """Test the convert command."""

    def test_convert_hex(self, runner):
        result = runner.invoke(cli, ['convert', '#f80'])
        assert result.exit_code == 0
        assert 'HEX: #ff8800' in result.output
        assert 'RGB: 255, 136, 0' in result.output
        assert 'HSV: 32, 100, 100' in result.output

    def test_convert_channels(self, runner):
        result = runner.invoke(cli, ['convert', '0, 0, 255'])
        assert result.exit_code == 0
        assert 'HEX: #0000ff' in result.output
        assert 'HSV: 240, 100, 100' in result.output

    def test_convert_invalid(self, runner):
        result = runner.invoke(cli, ['convert', 'banana'])
        assert result.exit_code == 1
        assert "Could not read color 'banana'" in result.output

    def test_convert_out_of_range(self, runner):
        result = runner.invoke(cli, ['convert', '1,2,300'])
        assert result.exit_code == 1
        assert 'between 0 and 255' in result.output


@pytest.mark.integration
class TestConfigCommands:
    """Test config show/path/reset against a temporary config file."""

    def test_path(self, runner, temp_dir):
        path = temp_dir / "config.json"
        result = runner.invoke(cli, ['--config-file', str(path), 'config', 'path'])
        assert result.exit_code == 0
        assert str(path) in result.output

    def test_show_defaults(self, runner, temp_dir):
        path = temp_dir / "config.json"
        result = runner.invoke(cli, ['--config-file', str(path), 'config', 'show'])
        assert result.exit_code == 0
        assert 'defaults' in result.output
        assert 'surface_width: 48' in result.output
        assert 'input_mode: hex' in result.output

    def test_show_invalid_file(self, runner, temp_dir):
        path = temp_dir / "config.json"
        path.write_text("{not json")
        result = runner.invoke(cli, ['--config-file', str(path), 'config', 'show'])
        assert result.exit_code == 1
        assert 'invalid syntax' in result.output

    def test_reset(self, runner, temp_dir):
        path = temp_dir / "config.json"
        path.write_text(json.dumps({"surface_width": 10}))

        result = runner.invoke(cli, ['--config-file', str(path), 'config', 'reset', '--yes'])

        assert result.exit_code == 0
        assert json.loads(path.read_text())["surface_width"] == 48

    def test_reset_asks_for_confirmation(self, runner, temp_dir):
        path = temp_dir / "config.json"
        result = runner.invoke(cli, ['--config-file', str(path), 'config', 'reset'], input="n\n")
        assert result.exit_code != 0
        assert not path.exists()


@pytest.mark.integration
class TestLaunch:
    """Test launching the picker with the TUI mocked out."""

    def test_prints_picked_color(self, runner, temp_dir):
        with patch("colorpicker.cli.main.setup_logging", return_value=temp_dir / "log.txt"), \
             patch("colorpicker.tui.ColorPickerApp") as mock_app:
            mock_app.return_value.run.return_value = Color(r=255, g=136, b=0)

            result = runner.invoke(
                cli,
                ['--config-file', str(temp_dir / "config.json"), '--color', '255,136,0', '--mode', 'rgb'],
            )

        assert result.exit_code == 0
        assert result.output.strip() == '#ff8800'
        kwargs = mock_app.call_args.kwargs
        assert kwargs['initial_color'] == Color(r=255, g=136, b=0)
        assert kwargs['config'].input_mode is InputMode.RGB

    def test_cancel_exits_non_zero(self, runner, temp_dir):
        with patch("colorpicker.cli.main.setup_logging", return_value=temp_dir / "log.txt"), \
             patch("colorpicker.tui.ColorPickerApp") as mock_app:
            mock_app.return_value.run.return_value = None
            result = runner.invoke(cli, ['--config-file', str(temp_dir / "config.json")])

        assert result.exit_code == 1
        assert result.output.strip() == ''

    def test_bad_color_shows_error(self, runner, temp_dir):
        with patch("colorpicker.cli.main.setup_logging", return_value=temp_dir / "log.txt"), \
             patch("colorpicker.tui.ColorPickerApp") as mock_app:
            result = runner.invoke(
                cli, ['--config-file', str(temp_dir / "config.json"), '--color', '#12']
            )

        assert result.exit_code == 1
        assert "Could not read color '#12'" in result.output
        mock_app.assert_not_called()


class TestParseColor:
    """Test command line color parsing."""

    @pytest.mark.unit
    def test_hex(self):
        assert parse_color("#3366cc") == Color(r=51, g=102, b=204)

    @pytest.mark.unit
    def test_channels(self):
        assert parse_color(" 51, 102,204 ") == Color(r=51, g=102, b=204)

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["", "red", "1,2", "1,2,x", "1,2,256"])
    def test_invalid(self, text):
        with pytest.raises(ColorParseError):
            parse_color(text)
