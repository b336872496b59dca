"""Command-line interface for pixbuild."""

from pixbuild.cli.app import app, main


__all__ = ["app", "main"]
