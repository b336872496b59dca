"""Tests for next-step derivation."""

from pathlib import Path

from pixbuild.build.summary import build_next_steps
from pixbuild.models.build import BuildConfiguration
from pixbuild.models.results import StagingResult


ASSETS = StagingResult(staging_dir=Path("data/www"), has_assets=True)
NO_ASSETS = StagingResult(staging_dir=Path("data/www"), has_assets=False)


def test_nothing_uploaded(mock_toolchain):
    steps = build_next_steps(BuildConfiguration(target="d32_pro"), ASSETS, mock_toolchain)

    assert [(s.number, s.description, s.command) for s in steps] == [
        (1, "Upload firmware", "pio run -e d32_pro --target upload"),
        (2, "Upload filesystem", "pio run -e d32_pro --target uploadfs"),
        (3, "Start monitor", "pio device monitor -b 115200"),
    ]


def test_everything_uploaded_leaves_monitor_only(mock_toolchain):
    config = BuildConfiguration(
        target="espsv3", upload_firmware=True, upload_filesystem=True
    )

    steps = build_next_steps(config, ASSETS, mock_toolchain)

    assert [s.description for s in steps] == ["Start monitor"]
    assert steps[0].number == 1


def test_filesystem_step_needs_assets(mock_toolchain):
    steps = build_next_steps(BuildConfiguration(), NO_ASSETS, mock_toolchain)

    assert [s.description for s in steps] == ["Upload firmware", "Start monitor"]
    assert [s.number for s in steps] == [1, 2]


def test_monitor_listed_even_when_started(mock_toolchain):
    config = BuildConfiguration(upload_firmware=True, start_monitor=True)

    steps = build_next_steps(config, NO_ASSETS, mock_toolchain, monitor_baud=74880)

    assert [s.command for s in steps] == ["pio device monitor -b 74880"]
