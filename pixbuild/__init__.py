"""pixbuild - PlatformIO firmware build pipeline orchestrator."""

from importlib.metadata import PackageNotFoundError, distribution

from .models import BuildConfiguration, PipelineResult, StagingResult


try:
    __version__ = distribution(__package__ or "pixbuild").version
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "BuildConfiguration",
    "PipelineResult",
    "StagingResult",
    "__version__",
]

# Import CLI after setting __version__ to avoid circular imports
from .cli import app, main


__all__ += ["app", "main"]
