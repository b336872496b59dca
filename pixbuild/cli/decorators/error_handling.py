"""Error handling decorators for CLI commands."""

import logging
import sys
import traceback
from collections.abc import Callable
from functools import wraps
from typing import Any

import typer

from pixbuild.cli.helpers.output import print_error_message, print_list_item
from pixbuild.core.errors import (
    ConfigError,
    PixbuildError,
    PreconditionError,
    StageFailure,
    TargetValidationError,
)
from pixbuild.core.structlog_logger import get_struct_logger


__all__ = ["handle_errors", "print_stack_trace_if_verbose"]

logger = get_struct_logger(__name__)

_EVENT_NAMES: list[tuple[type[PixbuildError], str]] = [
    (ConfigError, "configuration_error"),
    (TargetValidationError, "target_validation_error"),
    (PreconditionError, "precondition_error"),
    (StageFailure, "stage_failure"),
]


def _event_name(error: PixbuildError) -> str:
    for error_type, name in _EVENT_NAMES:
        if isinstance(error, error_type):
            return name
    return "pixbuild_error"


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to handle pixbuild exceptions in CLI commands.

    Each error is logged, printed with its guidance lines, and turned into a
    ``typer.Exit`` carrying the error's exit code.

    Args:
        func: The function to decorate

    Returns:
        Decorated function with error handling
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except PixbuildError as e:
            logger.error(_event_name(e), error=str(e), **e.context)
            print_error_message(str(e))
            for line in e.guidance:
                print_list_item(line)
            print_stack_trace_if_verbose()
            raise typer.Exit(e.exit_code) from e
        except KeyboardInterrupt as e:
            print_error_message("Interrupted")
            raise typer.Exit(130) from e
        except OSError as e:
            exc_info = logger.isEnabledFor(logging.DEBUG)
            logger.error("os_error", error=str(e), exc_info=exc_info)
            print_error_message(str(e))
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e

    return wrapper


def print_stack_trace_if_verbose() -> None:
    """Print the current stack trace when debug logging is enabled."""
    if logging.getLogger().isEnabledFor(logging.DEBUG):
        print("\nStack trace:", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
