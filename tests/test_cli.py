"""Tests for the manage.py command line."""

import pytest
from click.testing import CliRunner

import manage


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr(manage, "setup_logger", lambda: None)


@pytest.fixture
def runner():
    return CliRunner()


class TestSyncCommand:
    def test_sync_success(self, runner, locales, write_json, read_json):
        write_json(locales / "en" / "common.json", {"a": {"b": 1}})

        result = runner.invoke(manage.cli, ["sync", "--root", str(locales), "-l", "tr", "-l", "es"])

        assert result.exit_code == 0, result.output
        assert "Synced 1 file(s) into 2 translation(s)" in result.output
        assert read_json(locales / "tr" / "common.json") == {"a": {"b": 1}}

    def test_sync_failure_exit_code(self, runner, locales):
        result = runner.invoke(manage.cli, ["sync", "--root", str(locales), "-l", "tr"])

        assert result.exit_code == 1
        assert "Main language folder not found" in result.output

    def test_invalid_configuration_is_a_usage_error(self, runner, locales):
        result = runner.invoke(manage.cli, ["sync", "--root", str(locales), "-l", "en"])

        assert result.exit_code == 2
        assert "at least 1 other language" in result.output

    def test_continue_on_error_flag(self, runner, locales, write_json):
        write_json(locales / "en" / "bad.json", {"a": 1})
        write_json(locales / "tr" / "bad.json", "{broken")
        write_json(locales / "en" / "good.json", {"b": 2})

        result = runner.invoke(
            manage.cli,
            ["sync", "--root", str(locales), "-l", "tr", "--continue-on-error"],
        )

        assert result.exit_code == 1
        assert (locales / "tr" / "good.json").read_text(encoding="utf-8") == '{\n\t"b": 2\n}'

    def test_relative_root_segments(self, runner, locales, write_json):
        write_json(locales / "en" / "common.json", {"a": 1})

        result = runner.invoke(manage.cli, ["sync", "--root", "locales", "-l", "tr"])

        assert result.exit_code == 0, result.output
        assert (locales / "tr" / "common.json").exists()


class TestDiscoverCommand:
    def test_lists_files(self, runner, locales, write_json):
        write_json(locales / "en" / "pages" / "home.json", {})

        result = runner.invoke(manage.cli, ["discover", "--root", str(locales), "-l", "tr"])

        assert result.exit_code == 0, result.output
        assert "Found 1 translation file(s)" in result.output
        assert "pages/home.json" in result.output
        assert not (locales / "tr").exists()

    def test_limit_exceeded(self, runner, locales, write_json):
        for i in range(3):
            write_json(locales / "en" / f"f{i}.json", {})

        result = runner.invoke(
            manage.cli, ["discover", "--root", str(locales), "-l", "tr", "--max-db-size", "1"]
        )

        assert result.exit_code == 1
        assert "Exceeded maximum file exploration size of 1" in result.output
