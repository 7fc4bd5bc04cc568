"""Merge per-token resolutions into one ordered, deduplicated report."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from dataclasses import field
from pathlib import Path

from ..models import Ambiguous
from ..models import InputResolution
from ..models import InvalidPattern
from ..models import NotFound
from ..models import PathDoesNotExist
from ..models import ResolvedFile
from ..models import Success


@dataclass
class ResolutionReport:
    """Outcome of resolving all inputs.

    Attributes:
        files: Resolved files, first-mention order, one entry per canonical path
        invalid_patterns: Glob-shaped inputs that failed validation
        missing_paths: Path-shaped inputs with nothing at that path
        not_found: Inputs that matched nothing
        ambiguous: Fuzzy inputs that matched several files
    """

    files: list[ResolvedFile] = field(default_factory=list)
    invalid_patterns: list[InvalidPattern] = field(default_factory=list)
    missing_paths: list[PathDoesNotExist] = field(default_factory=list)
    not_found: list[NotFound] = field(default_factory=list)
    ambiguous: list[Ambiguous] = field(default_factory=list)

    @property
    def failed(self) -> bool:
        """True if any input failed. Resolved files are then for diagnostics only."""
        return bool(self.invalid_patterns or self.missing_paths or self.not_found or self.ambiguous)

    @property
    def failure_count(self) -> int:
        return len(self.invalid_patterns) + len(self.missing_paths) + len(self.not_found) + len(self.ambiguous)


def aggregate(resolutions: Iterable[InputResolution]) -> ResolutionReport:
    """Deduplicate successes by canonical path and bucket the failures.

    Args:
        resolutions: Per-token outcomes, in the order the user gave the tokens

    Returns:
        ResolutionReport; check ``failed`` before using ``files``
    """
    report = ResolutionReport()
    seen: set[Path] = set()

    for resolution in resolutions:
        if isinstance(resolution, Success):
            for resolved in resolution.files:
                if resolved.canonical_path not in seen:
                    seen.add(resolved.canonical_path)
                    report.files.append(resolved)
        elif isinstance(resolution, InvalidPattern):
            report.invalid_patterns.append(resolution)
        elif isinstance(resolution, PathDoesNotExist):
            report.missing_paths.append(resolution)
        elif isinstance(resolution, NotFound):
            report.not_found.append(resolution)
        elif isinstance(resolution, Ambiguous):
            report.ambiguous.append(resolution)
        else:
            raise TypeError(f"Unexpected resolution type: {type(resolution).__name__}")

    return report
