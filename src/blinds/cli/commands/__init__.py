"""CLI command modules."""

from .validate import validate_command

__all__ = ["validate_command"]
