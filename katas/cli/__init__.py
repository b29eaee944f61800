"""Command-line interface for the katas tracker."""

from katas.cli.katas_cli import app, run

__all__ = ["app", "run"]
