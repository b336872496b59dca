"""Adapters for external collaborators."""

from pixbuild.adapters.toolchain_adapter import (
    PlatformIOAdapter,
    create_toolchain_adapter,
)


__all__ = ["PlatformIOAdapter", "create_toolchain_adapter"]
