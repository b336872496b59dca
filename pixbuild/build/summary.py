"""Derive the manual follow-up steps printed after a successful build."""

import shlex

from pixbuild.models.build import BuildConfiguration
from pixbuild.models.results import NextStep, StagingResult
from pixbuild.protocols.toolchain_protocol import ToolchainAdapterProtocol


def build_next_steps(
    config: BuildConfiguration,
    staging: StagingResult,
    toolchain: ToolchainAdapterProtocol,
    monitor_baud: int = 115200,
) -> list[NextStep]:
    """List the commands the user still has to run by hand.

    Uploads that were not part of this run are suggested; the filesystem
    upload only when there are staged assets to upload. The monitor command is
    always listed.
    """
    entries: list[tuple[str, list[str]]] = []

    if not config.upload_firmware:
        entries.append(
            ("Upload firmware", toolchain.command_for(config.target, "upload"))
        )
    if not config.upload_filesystem and staging.has_assets:
        entries.append(
            ("Upload filesystem", toolchain.command_for(config.target, "uploadfs"))
        )
    entries.append(("Start monitor", toolchain.monitor_command(monitor_baud)))

    return [
        NextStep(number=number, description=description, command=shlex.join(cmd))
        for number, (description, cmd) in enumerate(entries, start=1)
    ]


__all__ = ["build_next_steps"]
