"""PlatformIO adapter for build, upload and monitor operations."""

import shlex
import shutil
import subprocess
from pathlib import Path
from typing import cast

from pixbuild.core.errors import ToolchainError
from pixbuild.core.structlog_logger import get_struct_logger
from pixbuild.protocols.toolchain_protocol import ToolchainAdapterProtocol
from pixbuild.utils.stream_process import OutputMiddleware


logger = get_struct_logger(__name__)


class PlatformIOAdapter:
    """Implementation of the toolchain adapter on top of the ``pio`` CLI."""

    def __init__(
        self,
        executable: str = "pio",
        middleware: OutputMiddleware[str] | None = None,
    ) -> None:
        self.executable = executable
        self.middleware = middleware

    def is_available(self) -> bool:
        """Check if the PlatformIO executable is resolvable on PATH."""
        resolved = shutil.which(self.executable)
        if resolved is None:
            logger.warning("toolchain_not_found", executable=self.executable)
            return False

        logger.debug("toolchain_found", executable=self.executable, path=resolved)
        return True

    def command_for(self, environment: str, target: str | None = None) -> list[str]:
        cmd = [self.executable, "run", "-e", environment]
        if target:
            cmd.extend(["--target", target])
        return cmd

    def monitor_command(self, baud: int) -> list[str]:
        return [self.executable, "device", "monitor", "-b", str(baud)]

    def run_target(
        self, environment: str, target: str | None = None, cwd: Path | None = None
    ) -> int:
        """Run ``pio run`` for an environment and return its exit code."""
        from pixbuild.utils import stream_process

        cmd = self.command_for(environment, target)
        cmd_str = " ".join(shlex.quote(arg) for arg in cmd)
        logger.debug("toolchain_command", command=cmd_str, cwd=str(cwd or "."))

        try:
            middleware = cast(
                OutputMiddleware[str],
                self.middleware or stream_process.ConsoleOutputMiddleware(),
            )
            return_code, _stdout, stderr = stream_process.run_command(
                cmd, middleware, cwd=cwd
            )
        except OSError as e:
            logger.error("toolchain_launch_failed", command=cmd_str, error=str(e))
            raise ToolchainError(
                f"Could not run {cmd_str}: {e}", context={"command": cmd_str}
            ) from e

        if return_code != 0:
            logger.warning(
                "toolchain_command_failed",
                command=cmd_str,
                return_code=return_code,
                stderr_tail=stderr[-5:],
            )
        return return_code

    def monitor(self, baud: int, cwd: Path | None = None) -> int:
        """Start the serial monitor attached to the current terminal."""
        from pixbuild.utils import stream_process

        cmd = self.monitor_command(baud)
        logger.debug("toolchain_monitor", command=" ".join(cmd))
        try:
            return stream_process.run_interactive(cmd, cwd=cwd)
        except (OSError, subprocess.SubprocessError) as e:
            logger.error("toolchain_launch_failed", command=" ".join(cmd), error=str(e))
            raise ToolchainError(f"Could not start serial monitor: {e}") from e


def create_toolchain_adapter(
    executable: str = "pio",
    middleware: OutputMiddleware[str] | None = None,
) -> ToolchainAdapterProtocol:
    """Factory function to create a PlatformIOAdapter instance.

    Example:
        >>> adapter = create_toolchain_adapter()
        >>> if adapter.is_available():
        ...     adapter.run_target("d1_mini")
    """
    logger.debug("creating_toolchain_adapter", executable=executable)
    return PlatformIOAdapter(executable=executable, middleware=middleware)


__all__ = ["PlatformIOAdapter", "create_toolchain_adapter"]
