"""Prerequisite checks run before any build stage."""

from pathlib import Path

from pixbuild.config.settings import BuildSettings
from pixbuild.core.errors import PreconditionError
from pixbuild.core.structlog_logger import StructlogMixin
from pixbuild.protocols.toolchain_protocol import ToolchainAdapterProtocol


class PrerequisiteChecker(StructlogMixin):
    """Verify the toolchain and project layout before building.

    Gates run in order and the first failing one raises; nothing is
    aggregated.
    """

    def __init__(
        self,
        settings: BuildSettings,
        toolchain: ToolchainAdapterProtocol,
        project_dir: Path,
    ) -> None:
        super().__init__()
        self.settings = settings
        self.toolchain = toolchain
        self.project_dir = project_dir

    def check(self) -> None:
        """Run every gate.

        Raises:
            PreconditionError: On the first failing gate
        """
        self.check_toolchain()
        self.check_project_root()
        self.check_required_files()
        self.logger.info("prerequisites_satisfied", project_dir=str(self.project_dir))

    def check_toolchain(self) -> None:
        if not self.toolchain.is_available():
            raise PreconditionError(
                "PlatformIO is not installed. Please install it with:",
                guidance=[self.settings.install_hint],
                context={"executable": self.toolchain.executable},
            )

    def check_project_root(self) -> None:
        marker = self.project_dir / self.settings.marker_file
        if not marker.is_file():
            raise PreconditionError(
                f"{self.settings.marker_file} not found. "
                "Please run this script from the firmware project root directory.",
                guidance=["Or pass the project location with --project-dir."],
                context={"marker": str(marker)},
            )

    def check_required_files(self) -> None:
        for relative in self.settings.required_files:
            if not (self.project_dir / relative).is_file():
                raise PreconditionError(
                    f"Required file not found: {relative}",
                    context={"path": relative},
                )
        self.logger.debug(
            "required_files_present", count=len(self.settings.required_files)
        )
