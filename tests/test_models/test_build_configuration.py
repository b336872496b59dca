"""Tests for the build configuration and result models."""

import pytest
from pydantic import ValidationError

from pixbuild.models.build import BuildConfiguration
from pixbuild.models.results import (
    PipelineResult,
    PipelineState,
    Stage,
    StageResult,
    StageStatus,
)


class TestBuildConfiguration:
    """Test BuildConfiguration model."""

    def test_defaults(self):
        config = BuildConfiguration()

        assert config.target == "d1_mini"
        assert config.clean_build is False
        assert config.upload_firmware is False
        assert config.upload_filesystem is False
        assert config.start_monitor is False

    def test_is_immutable(self):
        """Test fields cannot be changed after construction."""
        config = BuildConfiguration(target="espsv3", clean_build=True)

        with pytest.raises(ValidationError):
            config.clean_build = False

        assert config.clean_build is True

    def test_empty_target_rejected(self):
        with pytest.raises(ValidationError):
            BuildConfiguration(target="")

    def test_unknown_fields_rejected(self):
        with pytest.raises(ValidationError):
            BuildConfiguration(board="d1_mini")


class TestPipelineModels:
    """Test pipeline result helpers."""

    def test_stage_states(self):
        assert PipelineState.for_stage(Stage.CLEAN) is PipelineState.CLEANING
        assert PipelineState.for_stage(Stage.MONITOR) is PipelineState.MONITORING
        assert PipelineState.DONE.is_terminal
        assert PipelineState.FAILED.is_terminal
        assert not PipelineState.COMPILING.is_terminal

    def test_result_queries(self):
        result = PipelineResult(
            state=PipelineState.DONE,
            stages=[
                StageResult(stage=Stage.CLEAN, status=StageStatus.SKIPPED),
                StageResult(stage=Stage.COMPILE, status=StageStatus.SUCCESS),
            ],
        )

        assert result.success
        assert result.executed() == [Stage.COMPILE]
        assert result.status_of(Stage.CLEAN) is StageStatus.SKIPPED
        assert result.status_of(Stage.MONITOR) is None

    def test_stage_labels(self):
        assert Stage.COMPILE.label == "Firmware build"
        assert Stage.DEPLOY_ASSETS.label == "Filesystem upload"
