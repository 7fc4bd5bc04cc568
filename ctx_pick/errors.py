"""Exception hierarchy for ctx-pick.

Resolution outcomes (not found, ambiguous, ...) are values, see
``ctx_pick.models``. Exceptions are reserved for conditions that stop a single
operation: a bad pattern, an unreadable config, an unsupported grammar.
"""

from __future__ import annotations

from pathlib import Path


class CtxPickError(Exception):
    """Base class for all ctx-pick errors."""


class ConfigError(CtxPickError):
    """Settings could not be loaded or the working directory is unavailable."""


class PatternError(CtxPickError):
    """A glob pattern failed validation.

    Attributes:
        pattern: The offending pattern
        pos: Zero-based character index the problem was detected at
        msg: Short description of the problem
    """

    def __init__(self, pattern: str, pos: int, msg: str):
        self.pattern = pattern
        self.pos = pos
        self.msg = msg
        super().__init__(f"Pattern syntax error near position {pos}: {msg}")


class CanonicalizationError(CtxPickError):
    """A path exists but could not be made absolute and symlink-free."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to canonicalize path {str(path)!r}: {reason}")


class UnsupportedLanguageError(CtxPickError):
    """No grammar (or no definition query) is registered for a language."""

    def __init__(self, language: str, detail: str = "Language support not configured for"):
        self.language = language
        super().__init__(f"{detail}: '{language}'")


class ParseFailureError(CtxPickError):
    """The parser could not produce a syntax tree for the source."""


class ClipboardError(CtxPickError):
    """Text could not be placed on the system clipboard."""
