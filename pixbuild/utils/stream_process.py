"""Process execution and streaming output handling.

Toolchain commands run as subprocesses whose stdout and stderr are read line by
line and passed through an output middleware, so build output reaches the user
while the command is still running.

Example:
    ```python
    from pixbuild.utils.stream_process import run_command

    return_code, stdout, stderr = run_command(["pio", "run", "-e", "d1_mini"])
    ```
"""

import subprocess
from pathlib import Path
from threading import Thread
from typing import IO, Generic, TypeAlias, TypeVar, cast

from rich.console import Console
from rich.markup import escape


T = TypeVar("T")

# (return_code, stdout, stderr)
ProcessResult: TypeAlias = tuple[int, list[T], list[T]]


class OutputMiddleware(Generic[T]):
    """Base class for processing command output streams.

    Type parameter T is the type returned by ``process``; lines for which
    ``process`` returns None are not collected.
    """

    def process(self, line: str, stream_type: str) -> T:
        """Process a line of output from a subprocess stream.

        Args:
            line: A line of text from the process output
            stream_type: Either "stdout" or "stderr"
        """
        raise NotImplementedError()


class ConsoleOutputMiddleware(OutputMiddleware[str]):
    """Echo every line to a rich console, dimming stderr."""

    def __init__(self, console: Console | None = None, prefix: str = "") -> None:
        self.console = console or Console(highlight=False)
        self.prefix = prefix

    def process(self, line: str, stream_type: str) -> str:
        text = f"{self.prefix}{escape(line)}"
        if stream_type == "stderr":
            self.console.print(text, style="dim")
        else:
            self.console.print(text)
        return line


class SilentOutputMiddleware(OutputMiddleware[str]):
    """Collect output without printing it."""

    def process(self, line: str, stream_type: str) -> str:
        return line


def run_command(
    cmd: list[str],
    middleware: OutputMiddleware[T] | None = None,
    cwd: Path | None = None,
) -> ProcessResult[T]:
    """Run a command and process its output through middleware.

    Blocks until the process exits.

    Args:
        cmd: Command and its arguments
        middleware: Output middleware (ConsoleOutputMiddleware if None)
        cwd: Working directory for the process

    Returns:
        Tuple of return code, processed stdout lines and processed stderr lines

    Raises:
        OSError: If the executable cannot be started
    """
    if middleware is None:
        middleware = cast(OutputMiddleware[T], ConsoleOutputMiddleware())

    process = subprocess.Popen(
        cmd,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        encoding="utf-8",
        errors="replace",
        bufsize=1,
        cwd=cwd,
    )

    def stream_output(stream: IO[str], stream_type: str, captured: list[T]) -> None:
        for line in iter(stream.readline, ""):
            processed = middleware.process(line.rstrip(), stream_type)
            if processed is not None:
                captured.append(processed)
        stream.close()

    stdout_lines: list[T] = []
    stderr_lines: list[T] = []

    threads = [
        Thread(
            target=stream_output,
            args=(process.stdout, "stdout", stdout_lines),
            daemon=True,
        ),
        Thread(
            target=stream_output,
            args=(process.stderr, "stderr", stderr_lines),
            daemon=True,
        ),
    ]
    for thread in threads:
        thread.start()

    return_code = process.wait()

    for thread in threads:
        thread.join()

    return return_code, stdout_lines, stderr_lines


def run_interactive(cmd: list[str], cwd: Path | None = None) -> int:
    """Run a command attached to the current terminal and return its exit code."""
    completed = subprocess.run(cmd, cwd=cwd, check=False)
    return completed.returncode
