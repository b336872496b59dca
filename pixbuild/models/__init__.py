"""Domain models for pixbuild."""

from pixbuild.models.base import PixbuildBaseModel
from pixbuild.models.build import BuildConfiguration
from pixbuild.models.results import (
    CopyFailure,
    NextStep,
    PipelineResult,
    PipelineState,
    Stage,
    StageResult,
    StageStatus,
    StagingResult,
)


__all__ = [
    "BuildConfiguration",
    "CopyFailure",
    "NextStep",
    "PipelineResult",
    "PipelineState",
    "PixbuildBaseModel",
    "Stage",
    "StageResult",
    "StageStatus",
    "StagingResult",
]
