"""Protocol for receiving pipeline stage lifecycle events."""

from typing import Protocol, runtime_checkable

from pixbuild.models.results import Stage, StageResult


@runtime_checkable
class StageObserverProtocol(Protocol):
    """Receives stage events from the pipeline runner, in order."""

    def stage_started(self, stage: Stage) -> None: ...

    def stage_finished(self, result: StageResult) -> None:
        """Called once per stage with its final result, including skips."""
        ...
