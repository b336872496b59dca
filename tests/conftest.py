"""Core test fixtures for the pixbuild project."""

import logging
from collections.abc import Callable, Generator
from pathlib import Path
from unittest.mock import Mock

import pytest
from typer.testing import CliRunner

from pixbuild.adapters.toolchain_adapter import PlatformIOAdapter
from pixbuild.config.settings import DEFAULT_REQUIRED_FILES
from pixbuild.core.logging import configure_structlog


# ---- Base Fixtures ----


@pytest.fixture(autouse=True)
def quiet_structlog() -> Generator[None, None, None]:
    """Route structlog through stdlib logging at WARNING for every test."""
    configure_structlog(logging.WARNING)
    yield


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def mock_toolchain() -> Mock:
    """Toolchain mock whose commands all succeed.

    Command construction is delegated to a real PlatformIOAdapter so the
    summary shows real ``pio`` commands; nothing is ever executed.
    """
    toolchain = Mock(wraps=PlatformIOAdapter())
    toolchain.executable = "pio"
    toolchain.is_available.return_value = True
    toolchain.run_target.return_value = 0
    toolchain.monitor.return_value = 0
    return toolchain


@pytest.fixture
def invoked_targets() -> Callable[[Mock], list[str | None]]:
    """Return a helper listing the build targets passed to ``run_target``."""

    def _targets(toolchain: Mock) -> list[str | None]:
        return [c.args[1] for c in toolchain.run_target.call_args_list]

    return _targets


# ---- Project Fixtures ----


def write_project(root: Path, with_assets: bool = True) -> Path:
    """Create a minimal firmware project tree under ``root``."""
    root.mkdir(parents=True, exist_ok=True)
    (root / "platformio.ini").write_text("[env:d1_mini]\nplatform = espressif8266\n")
    for relative in DEFAULT_REQUIRED_FILES:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"// {relative}\n")

    if with_assets:
        (root / "html" / "css").mkdir(parents=True, exist_ok=True)
        (root / "html" / "js").mkdir(parents=True, exist_ok=True)
        (root / "html" / "css" / "style.css").write_text("body { color: red; }\n")
        (root / "html" / "js" / "app.js").write_text("console.log('ready');\n")
    return root


@pytest.fixture
def firmware_project(tmp_path: Path) -> Path:
    """A complete project with required files and web assets."""
    return write_project(tmp_path / "firmware")


@pytest.fixture
def assetless_project(tmp_path: Path) -> Path:
    """A project whose settings require no HTML and which ships no assets."""
    root = tmp_path / "bare"
    (root / "src").mkdir(parents=True)
    (root / "platformio.ini").write_text("[env:d1_mini]\n")
    (root / "src" / "main.cpp").write_text("int main() {}\n")
    (root / "pixbuild.yaml").write_text("required_files:\n  - src/main.cpp\n")
    return root
