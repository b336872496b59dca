"""Stage web assets for the filesystem image."""

import shutil
from pathlib import Path

from pixbuild.config.settings import AssetSource
from pixbuild.core.structlog_logger import StructlogMixin
from pixbuild.models.results import CopyFailure, StagingResult


class AssetStager(StructlogMixin):
    """Copy HTML, CSS and JS assets into the staging directory.

    Copying is best effort. A file that cannot be copied is recorded in the
    returned StagingResult and the run continues; only the final contents of
    the staging directory decide whether the filesystem stages run.
    """

    def __init__(
        self, project_dir: Path, staging_dir: Path, sources: list[AssetSource]
    ) -> None:
        super().__init__()
        self.project_dir = project_dir
        self.staging_dir = (
            staging_dir if staging_dir.is_absolute() else project_dir / staging_dir
        )
        self.sources = sources

    def stage(self) -> StagingResult:
        """Copy every matching asset and report what ended up staged.

        Raises:
            OSError: If the staging directory itself cannot be created
        """
        self.staging_dir.mkdir(parents=True, exist_ok=True)
        result = StagingResult(staging_dir=self.staging_dir)

        for source in self.sources:
            for path in self._matches(source):
                self._copy(path, result)

        result.has_assets = self.has_assets()
        self.logger.info(
            "assets_staged",
            staging_dir=str(self.staging_dir),
            copied=len(result.copied),
            failed=len(result.failures),
            has_assets=result.has_assets,
        )
        return result

    def has_assets(self) -> bool:
        """True if the staging directory exists and is not empty."""
        if not self.staging_dir.is_dir():
            return False
        return any(self.staging_dir.iterdir())

    def _matches(self, source: AssetSource) -> list[Path]:
        directory = self.project_dir / source.directory
        if not directory.is_dir():
            self.logger.debug("asset_source_missing", source=str(source))
            return []
        return sorted(p for p in directory.glob(source.pattern) if p.is_file())

    def _copy(self, path: Path, result: StagingResult) -> None:
        try:
            copied = shutil.copy2(path, self.staging_dir / path.name)
        except OSError as e:
            self.logger.warning("asset_copy_failed", source=str(path), error=str(e))
            result.failures.append(CopyFailure(source=path, reason=str(e)))
            return
        result.copied.append(Path(copied))
