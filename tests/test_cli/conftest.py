"""Test fixtures for CLI tests."""

from collections.abc import Generator
from unittest.mock import Mock, patch

import pytest


@pytest.fixture(autouse=True)
def no_logging_setup() -> Generator[Mock, None, None]:
    """Keep CLI runs from installing real log handlers."""
    with (
        patch("pixbuild.cli.app.setup_logging") as mock_setup,
        patch("pixbuild.cli.app.set_log_level"),
    ):
        yield mock_setup


@pytest.fixture
def patched_toolchain(mock_toolchain: Mock) -> Generator[Mock, None, None]:
    """Make the CLI use the mock toolchain instead of a real ``pio``."""
    with patch(
        "pixbuild.cli.app.create_toolchain_adapter", return_value=mock_toolchain
    ) as factory:
        mock_toolchain.factory = factory
        yield mock_toolchain
