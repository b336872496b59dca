"""Build settings for pixbuild.

Settings are loaded from multiple sources with the following precedence:
1. Environment variables prefixed with ``PIXBUILD_`` (highest precedence)
2. YAML config file (``--config-file`` or ``pixbuild.yaml`` in the project)
3. Default values (lowest precedence)
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pixbuild.core.errors import ConfigError
from pixbuild.core.structlog_logger import get_struct_logger


logger = get_struct_logger(__name__)

CONFIG_FILE_NAME = "pixbuild.yaml"

DEFAULT_REQUIRED_FILES = [
    "src/main.cpp",
    "src/SerialConsole.hpp",
    "src/SerialConsole.cpp",
    "src/LEDEffects.hpp",
    "src/LEDEffects.cpp",
    "src/WebMgr.cpp",
    "html/console.html",
    "html/effects_enhanced.html",
    "html/index.html",
]


class AssetSource(BaseModel):
    """A directory and glob pattern whose matches are staged as web assets."""

    directory: Path
    pattern: str

    def __str__(self) -> str:
        return f"{self.directory}/{self.pattern}"


def _default_asset_sources() -> list[AssetSource]:
    return [
        AssetSource(directory=Path("html"), pattern="*.html"),
        AssetSource(directory=Path("html/css"), pattern="*.css"),
        AssetSource(directory=Path("html/js"), pattern="*.js"),
    ]


class BuildSettings(BaseSettings):
    """Settings describing the firmware project layout and the toolchain."""

    model_config = SettingsConfigDict(
        env_prefix="PIXBUILD_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: Any,
        env_settings: Any,
        dotenv_settings: Any,
        file_secret_settings: Any,
    ) -> tuple[Any, ...]:
        """Environment variables override values read from the YAML file."""
        return (env_settings, init_settings)

    toolchain_executable: str = Field(
        default="pio", description="PlatformIO command used for every stage"
    )
    install_hint: str = Field(
        default="pip install platformio",
        description="Command suggested when the toolchain is missing",
    )
    marker_file: str = Field(
        default="platformio.ini",
        description="File that identifies the firmware project root",
    )
    required_files: list[str] = Field(
        default_factory=lambda: list(DEFAULT_REQUIRED_FILES)
    )
    asset_sources: list[AssetSource] = Field(default_factory=_default_asset_sources)
    staging_dir: Path = Field(
        default=Path("data/www"),
        description="Directory packaged into the filesystem image",
    )
    monitor_baud: int = Field(default=115200, gt=0)
    log_level: str = "WARNING"
    device_urls: list[str] = Field(
        default_factory=lambda: [
            "Access web interface at http://[DEVICE_IP]/",
            "Access serial console at http://[DEVICE_IP]/console",
            "Access enhanced effects at http://[DEVICE_IP]/effects_enhanced.html",
            "Test API with: curl http://[DEVICE_IP]/api/effects",
        ]
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in levels:
            raise ValueError(f"log_level must be one of {', '.join(sorted(levels))}")
        return v.upper()

    @field_validator("required_files")
    @classmethod
    def validate_required_files(cls, v: list[str]) -> list[str]:
        return [path.strip() for path in v if path.strip()]


def _read_config_file(path: Path) -> dict[str, Any]:
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return data


def load_settings(
    project_dir: Path, config_file: Path | None = None
) -> BuildSettings:
    """Load settings for a project.

    Args:
        project_dir: Firmware project root, searched for ``pixbuild.yaml``
        config_file: Explicit config file; must exist when given

    Returns:
        Validated BuildSettings

    Raises:
        ConfigError: If the file cannot be read or the values are invalid
    """
    data: dict[str, Any] = {}
    if config_file is not None:
        if not config_file.is_file():
            raise ConfigError(f"Config file not found: {config_file}")
        data = _read_config_file(config_file)
        logger.debug("settings_file_loaded", path=str(config_file))
    else:
        candidate = project_dir / CONFIG_FILE_NAME
        if candidate.is_file():
            data = _read_config_file(candidate)
            logger.debug("settings_file_loaded", path=str(candidate))

    try:
        return BuildSettings(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings: {e}") from e


__all__ = [
    "AssetSource",
    "BuildSettings",
    "CONFIG_FILE_NAME",
    "DEFAULT_REQUIRED_FILES",
    "load_settings",
]
