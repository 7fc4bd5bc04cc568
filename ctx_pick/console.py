"""Shared Rich console instance for CLI status output.

Status, warnings and the error report go to stderr; stdout carries only the
assembled context so it can be piped.
"""

from rich.console import Console

console = Console(stderr=True)

__all__ = ["console"]
