"""Configuration: build settings and supported target profiles."""

from pixbuild.config.settings import AssetSource, BuildSettings, load_settings
from pixbuild.config.targets import (
    DEFAULT_TARGET,
    HardwareFamily,
    TargetProfile,
    profiles_by_family,
    validate_target,
)


__all__ = [
    "AssetSource",
    "BuildSettings",
    "DEFAULT_TARGET",
    "HardwareFamily",
    "TargetProfile",
    "load_settings",
    "profiles_by_family",
    "validate_target",
]
