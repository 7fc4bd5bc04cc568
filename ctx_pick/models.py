"""Data types shared by the resolver, aggregator, extractor and assembler."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from pathlib import Path

from pydantic import BaseModel
from pydantic import Field


@dataclass(frozen=True)
class ResolvedFile:
    """A file that will be included in the context.

    Identity is the canonical path: two instances discovered through
    different inputs (or shown with different display paths) are equal when
    their canonical paths are equal.

    Attributes:
        canonical_path: Absolute, symlink-resolved path, used for reading
        display_path: Path relative to the working directory, for humans
    """

    canonical_path: Path
    display_path: Path = field(compare=False)

    def __str__(self) -> str:
        return str(self.display_path)


@dataclass(frozen=True)
class Success:
    """The input resolved to zero or more files (a directory may be empty)."""

    files: tuple[ResolvedFile, ...]

    def __post_init__(self):
        object.__setattr__(self, "files", tuple(self.files))


@dataclass(frozen=True)
class Ambiguous:
    """A fuzzy input matched several files; the user must be more specific."""

    token: str
    candidates: tuple[Path, ...]

    def __post_init__(self):
        object.__setattr__(self, "candidates", tuple(self.candidates))


@dataclass(frozen=True)
class NotFound:
    """Nothing matched the input."""

    token: str


@dataclass(frozen=True)
class PathDoesNotExist:
    """The input looked like a path but nothing exists there."""

    token: str
    path_tried: Path


@dataclass(frozen=True)
class InvalidPattern:
    """The input was glob-shaped but not a valid pattern."""

    token: str
    error: str


InputResolution = Success | Ambiguous | NotFound | PathDoesNotExist | InvalidPattern


@dataclass(frozen=True, order=True)
class Tag:
    """A definition found by the tag-based skeleton extractor.

    Ordering compares ``start_byte`` only, so a list of tags sorts into
    source order.
    """

    start_byte: int
    name: str = field(compare=False)
    kind: str = field(compare=False)
    line_text: str = field(compare=False)


class FileContext(BaseModel):
    """Extracted content for one resolved file, ready for assembly.

    Attributes:
        display_path: Path shown in the Markdown header
        content: Full text, skeleton, or an error block
        language_hint: Code fence language (empty for skeletons)
        is_skeleton: True when ``content`` is a skeleton
        fallback_reason: Why skeleton extraction fell back to full content
        source_lines: Line count of the file on disk (0 if unreadable)
    """

    display_path: Path
    content: str
    language_hint: str = ""
    is_skeleton: bool = False
    fallback_reason: str | None = None
    source_lines: int = Field(default=0, ge=0)
