"""Protocol definitions for the external build toolchain."""

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class ToolchainAdapterProtocol(Protocol):
    """Protocol for the external build/upload toolchain.

    Each operation is opaque: the orchestrator only looks at the exit code.
    """

    executable: str

    def is_available(self) -> bool:
        """Check if the toolchain executable is resolvable on PATH."""
        ...

    def run_target(
        self, environment: str, target: str | None = None, cwd: Path | None = None
    ) -> int:
        """Run ``environment`` with an optional build target.

        Args:
            environment: Toolchain environment (the board name)
            target: Build target such as "clean", "buildfs" or "upload";
                None builds the firmware
            cwd: Project directory

        Returns:
            The command's exit code

        Raises:
            ToolchainError: If the executable cannot be launched
        """
        ...

    def monitor(self, baud: int, cwd: Path | None = None) -> int:
        """Start an interactive serial monitor session and block until it ends."""
        ...

    def command_for(self, environment: str, target: str | None = None) -> list[str]:
        """Return the argument vector ``run_target`` would execute."""
        ...

    def monitor_command(self, baud: int) -> list[str]:
        """Return the argument vector ``monitor`` would execute."""
        ...
