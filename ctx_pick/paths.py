"""Path canonicalization and display-path policy.

Every file that leaves the resolver goes through ``make_resolved_file`` so
identity (canonical path) and presentation (display path) are decided in one
place.
"""

import os
from pathlib import Path

from .errors import CanonicalizationError
from .models import ResolvedFile


def canonicalize(path: Path) -> Path:
    """Return the absolute, symlink-resolved form of an existing path.

    Raises:
        CanonicalizationError: The path does not exist, a symlink loops, or
            a component cannot be read.
    """
    try:
        return path.resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise CanonicalizationError(path, str(e) or type(e).__name__) from e


def display_path_for(path: Path, working_dir: Path) -> Path:
    """Path relative to ``working_dir``, or ``path`` itself if none exists.

    Paths outside the working directory get ``..`` components, matching what
    a user would type from their shell. On Windows a path on another drive
    has no relative form.
    """
    try:
        return Path(os.path.relpath(path, working_dir))
    except ValueError:
        return path


def make_resolved_file(path: Path, working_dir: Path) -> ResolvedFile:
    """Canonicalize ``path`` and pair it with its display path."""
    canonical = canonicalize(path)
    return ResolvedFile(canonical_path=canonical, display_path=display_path_for(canonical, working_dir))
