"""Protocol definitions for pixbuild collaborators."""

from pixbuild.protocols.stage_observer_protocol import StageObserverProtocol
from pixbuild.protocols.toolchain_protocol import ToolchainAdapterProtocol


__all__ = ["StageObserverProtocol", "ToolchainAdapterProtocol"]
