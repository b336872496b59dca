"""Core infrastructure: errors and logging."""

from pixbuild.core.errors import (
    ConfigError,
    PixbuildError,
    PreconditionError,
    StageFailure,
    TargetValidationError,
    ToolchainError,
)
from pixbuild.core.logging import setup_logging
from pixbuild.core.structlog_logger import StructlogMixin, get_struct_logger


__all__ = [
    "ConfigError",
    "PixbuildError",
    "PreconditionError",
    "StageFailure",
    "StructlogMixin",
    "TargetValidationError",
    "ToolchainError",
    "get_struct_logger",
    "setup_logging",
]
