"""Helper functions for CLI output formatting with Rich integration."""

from pixbuild.cli.helpers.theme import get_themed_console
from pixbuild.config.targets import TargetProfile
from pixbuild.models.results import NextStep, Stage, StageResult, StageStatus


def print_success_message(message: str) -> None:
    get_themed_console().print_success(message)


def print_error_message(message: str) -> None:
    get_themed_console().print_error(message)


def print_warning_message(message: str) -> None:
    get_themed_console().print_warning(message)


def print_info_message(message: str) -> None:
    get_themed_console().print_info(message)


def print_list_item(item: str, indent: int = 1) -> None:
    get_themed_console().print_list_item(item, indent)


def print_next_steps(steps: list[NextStep], device_urls: list[str]) -> None:
    """Print the numbered follow-up commands and the device URL footer."""
    console = get_themed_console()
    console.print_plain()
    console.print_plain("Next steps:", style="header")
    width = max((len(step.description) for step in steps), default=0) + 1
    for step in steps:
        label = f"{step.description}:".ljust(width + 1)
        console.print_plain(f"{step.number}. {label} {step.command}")

    if device_urls:
        console.print_plain()
        console.print_plain("After uploading:", style="header")
        for url in device_urls:
            console.print_list_item(url, indent=0)


_STAGE_START_MESSAGES: dict[Stage, str] = {
    Stage.CLEAN: "Cleaning previous build...",
    Stage.COMPILE: "Building firmware for {target}...",
    Stage.PACKAGE_ASSETS: "Building filesystem...",
    Stage.DEPLOY_FIRMWARE: "Uploading firmware...",
    Stage.DEPLOY_ASSETS: "Uploading filesystem...",
    Stage.MONITOR: "Starting serial monitor (Press Ctrl+C to exit)...",
}

_STAGE_SUCCESS_MESSAGES: dict[Stage, str] = {
    Stage.CLEAN: "Build cleaned",
    Stage.COMPILE: "Firmware built successfully",
    Stage.PACKAGE_ASSETS: "Filesystem built successfully",
    Stage.DEPLOY_FIRMWARE: "Firmware uploaded successfully",
    Stage.DEPLOY_ASSETS: "Filesystem uploaded successfully",
}


class ConsoleStageObserver:
    """Print pipeline progress to the console.

    Failures are not printed here; the error handler reports them once the
    StageFailure reaches the command.
    """

    def __init__(self, profile: TargetProfile) -> None:
        self.profile = profile

    def stage_started(self, stage: Stage) -> None:
        message = _STAGE_START_MESSAGES[stage].format(target=self.profile.value)
        print_info_message(message)

    def stage_finished(self, result: StageResult) -> None:
        if result.status != StageStatus.SUCCESS:
            return
        message = _STAGE_SUCCESS_MESSAGES.get(result.stage)
        if message:
            print_success_message(message)


__all__ = [
    "ConsoleStageObserver",
    "print_error_message",
    "print_info_message",
    "print_list_item",
    "print_next_steps",
    "print_success_message",
    "print_warning_message",
]
