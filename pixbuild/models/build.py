"""Build configuration resolved from the command line."""

from pydantic import ConfigDict, Field

from pixbuild.config.targets import DEFAULT_TARGET
from pixbuild.models.base import PixbuildBaseModel


class BuildConfiguration(PixbuildBaseModel):
    """What to do in one pipeline run.

    Constructed once from the parsed flags and never mutated afterwards; every
    later component receives it explicitly. ``target`` holds the raw board
    name until the target validator has checked it.
    """

    model_config = ConfigDict(frozen=True)

    target: str = Field(default=DEFAULT_TARGET.value, min_length=1)
    clean_build: bool = False
    upload_firmware: bool = False
    upload_filesystem: bool = False
    start_monitor: bool = False
