"""Supported hardware target profiles.

Each profile name matches a PlatformIO environment in the firmware's
``platformio.ini``. Adding a board means adding one enum member and mapping it
to its hardware family.
"""

from enum import Enum

from pixbuild.core.errors import TargetValidationError
from pixbuild.core.structlog_logger import get_struct_logger


logger = get_struct_logger(__name__)


class HardwareFamily(str, Enum):
    """Microcontroller family a target profile belongs to."""

    ESP8266 = "ESP8266"
    ESP32 = "ESP32"


class TargetProfile(str, Enum):
    """Closed set of boards the firmware can be built for."""

    D1_MINI = "d1_mini"
    D1_MINI_PRO = "d1_mini_pro"
    ESPSV3 = "espsv3"
    ESP01S = "esp01s"
    D1_MINI32 = "d1_mini32"
    D32_PRO = "d32_pro"
    ESP32_CAM = "esp32_cam"

    @property
    def family(self) -> HardwareFamily:
        return _FAMILIES[self]

    @classmethod
    def names(cls) -> list[str]:
        """Profile names in declaration order."""
        return [profile.value for profile in cls]


_FAMILIES: dict[TargetProfile, HardwareFamily] = {
    TargetProfile.D1_MINI: HardwareFamily.ESP8266,
    TargetProfile.D1_MINI_PRO: HardwareFamily.ESP8266,
    TargetProfile.ESPSV3: HardwareFamily.ESP8266,
    TargetProfile.ESP01S: HardwareFamily.ESP8266,
    TargetProfile.D1_MINI32: HardwareFamily.ESP32,
    TargetProfile.D32_PRO: HardwareFamily.ESP32,
    TargetProfile.ESP32_CAM: HardwareFamily.ESP32,
}

DEFAULT_TARGET = TargetProfile.D1_MINI


def profiles_by_family() -> dict[HardwareFamily, list[TargetProfile]]:
    """Group the supported profiles by hardware family."""
    grouped: dict[HardwareFamily, list[TargetProfile]] = {
        family: [] for family in HardwareFamily
    }
    for profile in TargetProfile:
        grouped[profile.family].append(profile)
    return grouped


def validate_target(value: str) -> TargetProfile:
    """Resolve a board name to its target profile.

    Args:
        value: Board name as given on the command line

    Returns:
        The matching TargetProfile

    Raises:
        TargetValidationError: If the name is not one of the supported profiles
    """
    try:
        profile = TargetProfile(value)
    except ValueError:
        logger.debug("target_rejected", target=value)
        raise TargetValidationError(value, TargetProfile.names()) from None

    logger.debug("target_validated", target=profile.value, family=profile.family.value)
    return profile


__all__ = [
    "DEFAULT_TARGET",
    "HardwareFamily",
    "TargetProfile",
    "profiles_by_family",
    "validate_target",
]
