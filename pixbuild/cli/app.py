"""Main CLI application for pixbuild."""

import logging
import sys
from importlib.metadata import PackageNotFoundError, distribution
from pathlib import Path
from typing import Annotated

import typer

from pixbuild.adapters.toolchain_adapter import create_toolchain_adapter
from pixbuild.build.pipeline import create_pipeline_runner
from pixbuild.build.prerequisites import PrerequisiteChecker
from pixbuild.build.staging import AssetStager
from pixbuild.build.summary import build_next_steps
from pixbuild.cli.decorators.error_handling import handle_errors
from pixbuild.cli.helpers.output import (
    ConsoleStageObserver,
    print_info_message,
    print_next_steps,
    print_success_message,
    print_warning_message,
)
from pixbuild.config.settings import load_settings
from pixbuild.config.targets import DEFAULT_TARGET, profiles_by_family, validate_target
from pixbuild.core.logging import level_from_name, set_log_level, setup_logging
from pixbuild.core.structlog_logger import get_struct_logger
from pixbuild.models.build import BuildConfiguration


__all__ = ["app", "main", "__version__", "setup_logging"]

try:
    __version__ = distribution("pixbuild").version
except PackageNotFoundError:
    __version__ = "0.0.0"

logger = get_struct_logger(__name__)


def _supported_boards_epilog() -> str:
    lines = ["Supported boards:"]
    for family, profiles in profiles_by_family().items():
        names = ", ".join(profile.value for profile in profiles)
        lines.append(f"  {names} ({family.value})")
    lines.extend(
        [
            "",
            "Examples:",
            "  pixbuild -b espsv3 -c -u -f",
            "  pixbuild --board d1_mini32 --clean --upload --monitor",
        ]
    )
    # Blank-line separation keeps each line intact in the rich help formatter.
    return "\n\n".join(lines)


app = typer.Typer(
    name="pixbuild",
    help="Build, package and deploy the LED controller firmware with PlatformIO.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"pixbuild v{__version__}")
        raise typer.Exit()


def _resolve_log_level(verbose: int, debug: bool) -> int:
    if debug or verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING


def _board_callback(value: str) -> str:
    value = value.strip()
    if not value:
        raise typer.BadParameter("requires a board name")
    return value


def resolve_configuration(
    board: str,
    clean: bool,
    upload: bool,
    upload_fs: bool,
    monitor: bool,
) -> BuildConfiguration:
    """Turn parsed flags into the immutable build configuration."""
    return BuildConfiguration(
        target=board,
        clean_build=clean,
        upload_firmware=upload,
        upload_filesystem=upload_fs,
        start_monitor=monitor,
    )


@app.command(epilog=_supported_boards_epilog())
@handle_errors
def build(
    board: Annotated[
        str,
        typer.Option(
            "-b",
            "--board",
            metavar="BOARD",
            callback=_board_callback,
            help="Target board (default: d1_mini)",
        ),
    ] = DEFAULT_TARGET.value,
    clean: Annotated[
        bool, typer.Option("-c", "--clean", help="Clean build before compiling")
    ] = False,
    upload: Annotated[
        bool, typer.Option("-u", "--upload", help="Upload firmware after build")
    ] = False,
    upload_fs: Annotated[
        bool, typer.Option("-f", "--upload-fs", help="Upload filesystem after build")
    ] = False,
    monitor: Annotated[
        bool,
        typer.Option("-m", "--monitor", help="Start serial monitor after operations"),
    ] = False,
    project_dir: Annotated[
        Path,
        typer.Option(
            "-d",
            "--project-dir",
            help="Firmware project root (default: current directory)",
            file_okay=False,
        ),
    ] = Path("."),
    config_file: Annotated[
        Path | None,
        typer.Option("--config-file", help="Path to a pixbuild.yaml settings file"),
    ] = None,
    verbose: Annotated[
        int,
        typer.Option(
            "-v", "--verbose", count=True, help="Increase verbosity (-v=INFO, -vv=DEBUG)"
        ),
    ] = 0,
    debug: Annotated[
        bool, typer.Option("--debug", help="Enable debug logging (equivalent to -vv)")
    ] = False,
    log_file: Annotated[
        str | None, typer.Option("--log-file", help="Write JSON logs to a file")
    ] = None,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """Build the firmware and optionally upload it and its web filesystem."""
    setup_logging(level=_resolve_log_level(verbose, debug), log_file=log_file)
    config = resolve_configuration(board, clean, upload, upload_fs, monitor)
    logger.debug("build_configuration", **config.to_dict_full())

    project_dir = project_dir.resolve()
    settings = load_settings(project_dir, config_file)
    if not (verbose or debug):
        set_log_level(level_from_name(settings.log_level))

    profile = validate_target(config.target)
    print_info_message(f"Starting build for board: {profile.value}")

    toolchain = create_toolchain_adapter(settings.toolchain_executable)
    PrerequisiteChecker(settings, toolchain, project_dir).check()
    print_success_message("All required files found")

    print_info_message("Preparing filesystem data...")
    staging = AssetStager(
        project_dir, settings.staging_dir, settings.asset_sources
    ).stage()
    if staging.has_assets:
        print_success_message("Filesystem data prepared")
    else:
        print_warning_message("No filesystem data found - web interfaces may not work")

    runner = create_pipeline_runner(
        toolchain,
        project_dir=project_dir,
        monitor_baud=settings.monitor_baud,
        observer=ConsoleStageObserver(profile),
    )
    runner.run(config, profile, staging)

    print_info_message("Build completed successfully!")
    steps = build_next_steps(config, staging, toolchain, settings.monitor_baud)
    print_next_steps(steps, settings.device_urls)
    print_success_message("Firmware build complete!")


def main() -> int:
    """Main CLI entry point."""
    try:
        app()
        exit_code = 0
    except SystemExit as e:
        exit_code = e.code if isinstance(e.code, int) else 0
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
