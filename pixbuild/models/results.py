"""Result models for asset staging and pipeline execution."""

from enum import Enum
from pathlib import Path

from pydantic import Field

from pixbuild.models.base import PixbuildBaseModel


class Stage(str, Enum):
    """Pipeline stages in execution order."""

    CLEAN = "clean"
    COMPILE = "compile"
    PACKAGE_ASSETS = "package_assets"
    DEPLOY_FIRMWARE = "deploy_firmware"
    DEPLOY_ASSETS = "deploy_assets"
    MONITOR = "monitor"

    @property
    def label(self) -> str:
        return _STAGE_LABELS[self]


_STAGE_LABELS: dict[Stage, str] = {
    Stage.CLEAN: "Clean",
    Stage.COMPILE: "Firmware build",
    Stage.PACKAGE_ASSETS: "Filesystem build",
    Stage.DEPLOY_FIRMWARE: "Firmware upload",
    Stage.DEPLOY_ASSETS: "Filesystem upload",
    Stage.MONITOR: "Serial monitor",
}


class PipelineState(str, Enum):
    """States of the pipeline state machine; DONE and FAILED are terminal."""

    IDLE = "idle"
    CLEANING = "cleaning"
    COMPILING = "compiling"
    PACKAGING_ASSETS = "packaging_assets"
    DEPLOYING_FIRMWARE = "deploying_firmware"
    DEPLOYING_ASSETS = "deploying_assets"
    MONITORING = "monitoring"
    DONE = "done"
    FAILED = "failed"

    @classmethod
    def for_stage(cls, stage: Stage) -> "PipelineState":
        return _STAGE_STATES[stage]

    @property
    def is_terminal(self) -> bool:
        return self in (PipelineState.DONE, PipelineState.FAILED)


_STAGE_STATES: dict[Stage, PipelineState] = {
    Stage.CLEAN: PipelineState.CLEANING,
    Stage.COMPILE: PipelineState.COMPILING,
    Stage.PACKAGE_ASSETS: PipelineState.PACKAGING_ASSETS,
    Stage.DEPLOY_FIRMWARE: PipelineState.DEPLOYING_FIRMWARE,
    Stage.DEPLOY_ASSETS: PipelineState.DEPLOYING_ASSETS,
    Stage.MONITOR: PipelineState.MONITORING,
}


class StageStatus(str, Enum):
    SKIPPED = "skipped"
    SUCCESS = "success"
    FAILED = "failed"


class StageResult(PixbuildBaseModel):
    """Outcome of a single pipeline stage."""

    stage: Stage
    status: StageStatus
    return_code: int | None = None
    reason: str | None = None


class PipelineResult(PixbuildBaseModel):
    """Outcome of one pipeline run."""

    state: PipelineState = PipelineState.IDLE
    stages: list[StageResult] = Field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.state == PipelineState.DONE

    def status_of(self, stage: Stage) -> StageStatus | None:
        """Return the recorded status of ``stage``, or None if never reached."""
        for result in self.stages:
            if result.stage == stage:
                return result.status
        return None

    def executed(self) -> list[Stage]:
        """Stages whose external command was invoked, in order."""
        return [r.stage for r in self.stages if r.status != StageStatus.SKIPPED]


class CopyFailure(PixbuildBaseModel):
    """An asset that could not be copied into the staging directory."""

    source: Path
    reason: str


class StagingResult(PixbuildBaseModel):
    """Non-fatal outcome of asset staging.

    Copy failures are recorded here instead of being raised; ``has_assets``
    decides whether the filesystem stages run.
    """

    staging_dir: Path
    copied: list[Path] = Field(default_factory=list)
    failures: list[CopyFailure] = Field(default_factory=list)
    has_assets: bool = False


class NextStep(PixbuildBaseModel):
    """A manual follow-up action printed after a successful run."""

    number: int
    description: str
    command: str
