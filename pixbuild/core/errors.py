"""Error types raised by the pixbuild build pipeline.

Every error carries a human-readable message, optional guidance lines telling
the user what to do next, and a context dictionary used for structured logging.
"""

from typing import Any


class PixbuildError(Exception):
    """Base exception for all pixbuild errors."""

    exit_code: int = 1

    def __init__(
        self,
        message: str,
        guidance: list[str] | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.guidance = guidance or []
        self.context = context or {}

    def __str__(self) -> str:
        return self.message


class ConfigError(PixbuildError):
    """Raised when settings cannot be loaded or validated."""


class TargetValidationError(PixbuildError):
    """Raised when the requested target profile is not supported."""

    def __init__(self, target: str, supported: list[str]) -> None:
        super().__init__(
            f"Unsupported board: {target}",
            guidance=[f"Supported boards: {' '.join(supported)}"],
            context={"target": target, "supported": supported},
        )
        self.target = target
        self.supported = supported


class PreconditionError(PixbuildError):
    """Raised when the toolchain, project root or a required file is missing."""


class ToolchainError(PixbuildError):
    """Raised when the external toolchain executable cannot be launched."""


class StageFailure(PixbuildError):
    """Raised when a pipeline stage's external command reports failure."""

    def __init__(
        self,
        stage: str,
        return_code: int | None = None,
        cause: str | None = None,
        result: Any = None,
    ) -> None:
        message = f"{stage} failed"
        if return_code is not None:
            message = f"{message} (exit code {return_code})"
        if cause:
            message = f"{message}: {cause}"
        super().__init__(
            message, context={"stage": stage, "return_code": return_code}
        )
        self.stage = stage
        self.return_code = return_code
        self.result = result


__all__ = [
    "ConfigError",
    "PixbuildError",
    "PreconditionError",
    "StageFailure",
    "TargetValidationError",
    "ToolchainError",
]
