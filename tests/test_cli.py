"""Tests for the click entry point."""

import pytest
from click.testing import CliRunner

from ticketing.cli import cli

ENV = {
    "COLUMNS": "200",
    "TICKETING_DATE_FORMAT": None,
    "TICKETING_TODAY": None,
    "TICKETING_SEED_SAMPLES": None,
    "TICKETING_MAX_LOGIN_ATTEMPTS": None,
}


@pytest.fixture
def runner():
    return CliRunner()


class TestMenuCommand:
    """Tests for `ticketing menu`."""

    def test_view_offers_and_exit(self, runner):
        result = runner.invoke(
            cli, ["menu", "--today", "2024-06-15"], input="guest\nguest\n4\n0\n", env=ENV
        )
        assert result.exit_code == 0
        assert "London" in result.output
        assert "Manchester" in result.output
        assert "2024-06-10" in result.output
        assert "Application closed." in result.output

    def test_no_samples(self, runner):
        result = runner.invoke(
            cli, ["menu", "--no-samples"], input="guest\nguest\n4\n0\n", env=ENV
        )
        assert result.exit_code == 0
        assert "No offers available." in result.output

    def test_failed_login_exits_with_error(self, runner):
        result = runner.invoke(cli, ["menu"], input="x\ny\n" * 3, env=ENV)
        assert result.exit_code == 1
        assert "Login failed. Exiting." in result.output

    def test_end_of_input_ends_session(self, runner):
        result = runner.invoke(cli, ["menu"], input="admin\nadmin123\n", env=ENV)
        assert result.exit_code == 0
        assert "Session ended." in result.output

    def test_invalid_config(self, runner):
        env = dict(ENV, TICKETING_MAX_LOGIN_ATTEMPTS="0")
        result = runner.invoke(cli, ["menu"], input="", env=env)
        assert result.exit_code == 1
        assert "max_login_attempts" in result.output

    def test_malformed_today_reports_error(self, runner):
        env = dict(ENV, TICKETING_TODAY="15/06/2024")
        result = runner.invoke(cli, ["menu"], input="", env=env)
        assert result.exit_code == 1
        assert "TICKETING_TODAY" in result.output
        assert not isinstance(result.exception, ValueError)


class TestConfigShow:
    """Tests for `ticketing config-show`."""

    def test_config_show(self, runner):
        result = runner.invoke(cli, ["config-show"], env=dict(ENV, TICKETING_TODAY="2024-06-15"))
        assert result.exit_code == 0
        assert "Current Configuration" in result.output
        assert "2024-06-15" in result.output

    def test_malformed_attempts_reports_error(self, runner):
        env = dict(ENV, TICKETING_MAX_LOGIN_ATTEMPTS="three")
        result = runner.invoke(cli, ["config-show"], env=env)
        assert result.exit_code == 1
        assert "TICKETING_MAX_LOGIN_ATTEMPTS" in result.output
        assert not isinstance(result.exception, ValueError)
