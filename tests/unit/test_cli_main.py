"""Tests for the ui-designer-mcp command."""

from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from ui_designer_mcp import __version__
from ui_designer_mcp.cli import main
from ui_designer_mcp.config import get_config


@pytest.fixture
def cli_runner():
    return CliRunner()


@pytest.fixture
def clean_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name in ("GEMINI_API_KEY", "GOOGLE_API_KEY", "UI_DESIGNER_MCP_CONFIG_FILE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    return tmp_path


class TestMain:
    def test_version(self, cli_runner):
        result = cli_runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_missing_api_key_exits_with_error(self, cli_runner, clean_env):
        with patch("ui_designer_mcp.server.create_server") as create_server:
            result = cli_runner.invoke(main, [])

        assert result.exit_code == 1
        assert "GEMINI_API_KEY" in result.output
        create_server.assert_not_called()

    def test_runs_server_with_overrides(self, cli_runner, clean_env, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "test-key")
        server = MagicMock()

        with patch("ui_designer_mcp.server.create_server", return_value=server) as create_server:
            result = cli_runner.invoke(
                main, ["--log-level", "debug", "--workspace", str(clean_env)]
            )

        assert result.exit_code == 0, result.output
        server.run.assert_called_once_with()
        config = create_server.call_args.args[0]
        assert config.log_level == "DEBUG"
        assert config.get_workspace_root() == clean_env
        assert get_config() is config

    def test_invalid_log_level_rejected(self, cli_runner):
        result = cli_runner.invoke(main, ["--log-level", "loud"])

        assert result.exit_code == 2
