"""Sequential build pipeline with fail-fast semantics.

The runner walks the stages in a fixed order:

    clean -> compile -> package_assets -> deploy_firmware -> deploy_assets -> monitor

Each stage either runs its toolchain command or is skipped because of the
build configuration or an empty staging directory. The first failing command
moves the pipeline to FAILED and raises StageFailure; no later stage runs and
completed stages are not rolled back.
"""

from pathlib import Path

from pixbuild.config.targets import TargetProfile
from pixbuild.core.errors import StageFailure, ToolchainError
from pixbuild.core.structlog_logger import StructlogMixin
from pixbuild.models.build import BuildConfiguration
from pixbuild.models.results import (
    PipelineResult,
    PipelineState,
    Stage,
    StageResult,
    StageStatus,
    StagingResult,
)
from pixbuild.protocols.stage_observer_protocol import StageObserverProtocol
from pixbuild.protocols.toolchain_protocol import ToolchainAdapterProtocol


# Toolchain build target per stage; None builds the firmware itself.
STAGE_TARGETS: dict[Stage, str | None] = {
    Stage.CLEAN: "clean",
    Stage.COMPILE: None,
    Stage.PACKAGE_ASSETS: "buildfs",
    Stage.DEPLOY_FIRMWARE: "upload",
    Stage.DEPLOY_ASSETS: "uploadfs",
}

NO_ASSETS_REASON = "no staged assets"


class NullStageObserver:
    """Observer that ignores every event."""

    def stage_started(self, stage: Stage) -> None:
        pass

    def stage_finished(self, result: StageResult) -> None:
        pass


class PipelineRunner(StructlogMixin):
    """Run the build stages for one configuration."""

    def __init__(
        self,
        toolchain: ToolchainAdapterProtocol,
        project_dir: Path | None = None,
        monitor_baud: int = 115200,
        observer: StageObserverProtocol | None = None,
    ) -> None:
        super().__init__()
        self.toolchain = toolchain
        self.project_dir = project_dir
        self.monitor_baud = monitor_baud
        self.observer = observer or NullStageObserver()

    def plan(
        self, config: BuildConfiguration, staging: StagingResult
    ) -> list[tuple[Stage, str | None]]:
        """Decide for every stage whether it runs.

        Returns:
            (stage, skip_reason) pairs in execution order; a None reason means
            the stage runs
        """
        return [
            (Stage.CLEAN, None if config.clean_build else "clean not requested"),
            (Stage.COMPILE, None),
            (Stage.PACKAGE_ASSETS, None if staging.has_assets else NO_ASSETS_REASON),
            (
                Stage.DEPLOY_FIRMWARE,
                None if config.upload_firmware else "firmware upload not requested",
            ),
            (Stage.DEPLOY_ASSETS, self._deploy_assets_skip_reason(config, staging)),
            (Stage.MONITOR, None if config.start_monitor else "monitor not requested"),
        ]

    def run(
        self,
        config: BuildConfiguration,
        profile: TargetProfile,
        staging: StagingResult,
    ) -> PipelineResult:
        """Execute the pipeline.

        Args:
            config: Resolved build configuration
            profile: Validated target profile
            staging: Result of asset staging

        Returns:
            PipelineResult in state DONE

        Raises:
            StageFailure: When a stage's command fails; the partial
                PipelineResult is attached as ``result``
        """
        result = PipelineResult()
        log = self.logger.bind(target=profile.value)
        log.info("pipeline_started")

        for stage, skip_reason in self.plan(config, staging):
            if skip_reason is not None:
                self._record(
                    result,
                    StageResult(
                        stage=stage, status=StageStatus.SKIPPED, reason=skip_reason
                    ),
                )
                continue

            result.state = PipelineState.for_stage(stage)
            self.observer.stage_started(stage)
            log.info("stage_started", stage=stage.value)

            try:
                return_code = self._invoke(stage, profile)
            except ToolchainError as e:
                raise self._fail(result, stage, None, str(e)) from e

            if stage != Stage.MONITOR and return_code != 0:
                raise self._fail(result, stage, return_code, None)

            self._record(
                result,
                StageResult(
                    stage=stage, status=StageStatus.SUCCESS, return_code=return_code
                ),
            )

        result.state = PipelineState.DONE
        log.info("pipeline_done", executed=[s.value for s in result.executed()])
        return result

    def _invoke(self, stage: Stage, profile: TargetProfile) -> int:
        if stage == Stage.MONITOR:
            # Interactive hand-off; its exit status does not affect the run.
            return_code = self.toolchain.monitor(
                self.monitor_baud, cwd=self.project_dir
            )
            self.logger.debug("monitor_exited", return_code=return_code)
            return return_code
        return self.toolchain.run_target(
            profile.value, STAGE_TARGETS[stage], cwd=self.project_dir
        )

    def _record(self, result: PipelineResult, stage_result: StageResult) -> None:
        result.stages.append(stage_result)
        if stage_result.status == StageStatus.SKIPPED:
            self.logger.debug(
                "stage_skipped",
                stage=stage_result.stage.value,
                reason=stage_result.reason,
            )
        self.observer.stage_finished(stage_result)

    def _fail(
        self,
        result: PipelineResult,
        stage: Stage,
        return_code: int | None,
        cause: str | None,
    ) -> StageFailure:
        result.state = PipelineState.FAILED
        self.logger.error(
            "stage_failed", stage=stage.value, return_code=return_code, cause=cause
        )
        self._record(
            result,
            StageResult(
                stage=stage,
                status=StageStatus.FAILED,
                return_code=return_code,
                reason=cause,
            ),
        )
        return StageFailure(
            stage.label, return_code=return_code, cause=cause, result=result
        )

    @staticmethod
    def _deploy_assets_skip_reason(
        config: BuildConfiguration, staging: StagingResult
    ) -> str | None:
        if not config.upload_filesystem:
            return "filesystem upload not requested"
        if not staging.has_assets:
            return NO_ASSETS_REASON
        return None


def create_pipeline_runner(
    toolchain: ToolchainAdapterProtocol,
    project_dir: Path | None = None,
    monitor_baud: int = 115200,
    observer: StageObserverProtocol | None = None,
) -> PipelineRunner:
    """Factory function to create a PipelineRunner."""
    return PipelineRunner(
        toolchain=toolchain,
        project_dir=project_dir,
        monitor_baud=monitor_baud,
        observer=observer,
    )


__all__ = [
    "NO_ASSETS_REASON",
    "NullStageObserver",
    "PipelineRunner",
    "STAGE_TARGETS",
    "create_pipeline_runner",
]
