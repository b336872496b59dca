"""Tests for CLI argument parsing."""

from unittest.mock import patch

from pixbuild.cli import app
from pixbuild.cli.app import resolve_configuration


def test_help_flag(cli_runner, patched_toolchain, tmp_path):
    """Test -h prints usage and exits 0 without touching anything."""
    result = cli_runner.invoke(app, ["-h"])

    assert result.exit_code == 0
    assert "Usage" in result.output
    assert "--board" in result.output
    assert "--upload-fs" in result.output
    patched_toolchain.factory.assert_not_called()


def test_long_help_flag_wins_over_other_flags(cli_runner, patched_toolchain):
    result = cli_runner.invoke(app, ["-u", "-c", "--help", "-b", "bogus"])

    assert result.exit_code == 0
    assert "Usage" in result.output
    patched_toolchain.factory.assert_not_called()
    patched_toolchain.run_target.assert_not_called()


def test_help_lists_supported_boards(cli_runner):
    result = cli_runner.invoke(app, ["--help"])

    assert "Supported boards" in result.output
    for board in ["d1_mini_pro", "espsv3", "esp01s", "d1_mini32", "d32_pro", "esp32_cam"]:
        assert board in result.output
    assert "ESP8266" in result.output
    assert "ESP32" in result.output


def test_version_flag(cli_runner):
    with patch("pixbuild.cli.app.__version__", "1.2.3"):
        result = cli_runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert "pixbuild v1.2.3" in result.output


def test_unknown_option(cli_runner, patched_toolchain):
    """Test an unknown flag is named and the run aborts with a usage error."""
    result = cli_runner.invoke(app, ["--bogus"])

    assert result.exit_code == 2
    assert "--bogus" in result.output
    assert "Usage" in result.output
    patched_toolchain.factory.assert_not_called()


def test_unexpected_argument(cli_runner, patched_toolchain):
    result = cli_runner.invoke(app, ["-u", "extra"])

    assert result.exit_code == 2
    assert "extra" in result.output
    patched_toolchain.run_target.assert_not_called()


def test_board_without_value(cli_runner, patched_toolchain):
    """Test a dangling -b is a usage error."""
    result = cli_runner.invoke(app, ["-c", "-b"])

    assert result.exit_code == 2
    assert "-b" in result.output
    patched_toolchain.run_target.assert_not_called()


def test_empty_board_value(cli_runner, patched_toolchain):
    result = cli_runner.invoke(app, ["--board", ""])

    assert result.exit_code == 2
    assert "requires a board name" in result.output
    assert "Usage" in result.output
    patched_toolchain.factory.assert_not_called()


def test_verbose_flag_sets_log_level(
    cli_runner, no_logging_setup, patched_toolchain, firmware_project
):
    result = cli_runner.invoke(app, ["-vv", "--project-dir", str(firmware_project)])

    assert result.exit_code == 0
    no_logging_setup.assert_called_once()
    assert no_logging_setup.call_args.kwargs["level"] == 10


def test_flags_in_any_order(cli_runner, patched_toolchain, firmware_project, invoked_targets):
    result = cli_runner.invoke(
        app,
        ["-f", "--project-dir", str(firmware_project), "-u", "--board", "d32_pro", "-c"],
    )

    assert result.exit_code == 0
    assert invoked_targets(patched_toolchain) == [
        "clean",
        None,
        "buildfs",
        "upload",
        "uploadfs",
    ]
    assert patched_toolchain.run_target.call_args_list[0].args[0] == "d32_pro"


def test_repeated_verbose_flags_enable_debug(
    cli_runner, no_logging_setup, patched_toolchain, firmware_project
):
    result = cli_runner.invoke(
        app, ["-v", "--verbose", "--project-dir", str(firmware_project)]
    )

    assert result.exit_code == 0
    assert no_logging_setup.call_args.kwargs["level"] == 10


def test_logging_configured_before_resolving_configuration(
    cli_runner, no_logging_setup, patched_toolchain, firmware_project
):
    order = []
    no_logging_setup.side_effect = lambda **kwargs: order.append("logging")

    def _resolve(*args):
        order.append("configuration")
        return resolve_configuration(*args)

    with patch("pixbuild.cli.app.resolve_configuration", side_effect=_resolve):
        result = cli_runner.invoke(app, ["--project-dir", str(firmware_project)])

    assert result.exit_code == 0
    assert order == ["logging", "configuration"]
