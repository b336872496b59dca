"""Build pipeline components: prerequisites, asset staging, stages, summary."""

from pixbuild.build.pipeline import PipelineRunner, create_pipeline_runner
from pixbuild.build.prerequisites import PrerequisiteChecker
from pixbuild.build.staging import AssetStager
from pixbuild.build.summary import build_next_steps


__all__ = [
    "AssetStager",
    "PipelineRunner",
    "PrerequisiteChecker",
    "build_next_steps",
    "create_pipeline_runner",
]
