"""Input resolution: turn one user token into files or a typed failure.

Resolution order (first phase that applies wins):
1. Direct match: the token names an existing file or directory
2. Glob match: the token contains ``* ? [ {`` and is expanded as a pattern
3. Fuzzy search: files whose relative path contains the token

Literal paths and globs are never ambiguous; the user spelled out what they
meant. Only the fuzzy fallback can report ``Ambiguous``, because a vague
token that matches several files must not be silently narrowed to one.
"""

from __future__ import annotations

import glob
import logging
import os
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from ..errors import CanonicalizationError
from ..errors import PatternError
from ..models import Ambiguous
from ..models import InputResolution
from ..models import InvalidPattern
from ..models import NotFound
from ..models import PathDoesNotExist
from ..models import ResolvedFile
from ..models import Success
from ..paths import display_path_for
from ..paths import make_resolved_file
from .patterns import expand_braces
from .patterns import is_glob_pattern
from .patterns import validate_pattern
from .walker import iter_files

logger = logging.getLogger(__name__)


def resolve_input(token: str, working_dir: Path) -> InputResolution:
    """Resolve a single input token against ``working_dir``.

    Args:
        token: Raw user input (path, directory, glob or filename fragment)
        working_dir: Directory relative inputs are anchored at

    Returns:
        One InputResolution variant. Never raises for filesystem problems;
        those are logged and the affected entry is skipped.
    """
    # Checked before globbing so files literally named "file[1].txt" work
    direct = _resolve_direct(token, working_dir)
    if direct is not None:
        return direct

    if is_glob_pattern(token):
        return _resolve_glob(token, working_dir)

    return _resolve_fuzzy(token, working_dir)


def resolve_inputs(tokens: Sequence[str], working_dir: Path, jobs: int = 1) -> list[InputResolution]:
    """Resolve every token, returning results in token order.

    Args:
        tokens: Raw user inputs
        working_dir: Anchor for relative inputs
        jobs: Worker threads; values above 1 resolve tokens concurrently

    Returns:
        One InputResolution per token, same order as ``tokens``
    """
    if jobs <= 1 or len(tokens) <= 1:
        return [resolve_input(token, working_dir) for token in tokens]

    with ThreadPoolExecutor(max_workers=min(jobs, len(tokens))) as pool:
        # map() yields in submission order, not completion order
        return list(pool.map(lambda token: resolve_input(token, working_dir), tokens))


def _resolve_direct(token: str, working_dir: Path) -> InputResolution | None:
    """Phase 1: literal file or directory. Returns None when nothing exists there."""
    candidate = working_dir / token
    try:
        if not candidate.exists():
            return None
    except OSError as e:
        logger.warning(f"Could not inspect '{token}': {e}")
        return None

    if candidate.is_file():
        try:
            return Success([make_resolved_file(candidate, working_dir)])
        except CanonicalizationError as e:
            logger.warning(f"Found explicit file '{token}' but could not process it: {e}")
            return NotFound(token)

    if candidate.is_dir():
        files: list[ResolvedFile] = []
        for path in iter_files(candidate):
            try:
                files.append(make_resolved_file(path, working_dir))
            except CanonicalizationError as e:
                logger.warning(f"Could not process file {str(path)!r} in directory '{token}': {e}")
        logger.debug(f"Directory '{token}' expanded to {len(files)} files")
        return Success(files)

    # Exists but is neither (a FIFO, a socket, ...); let the other phases try
    return None


def _resolve_glob(token: str, working_dir: Path) -> InputResolution:
    """Phase 2: expand a glob pattern. Many matches are expected, not ambiguous."""
    try:
        validate_pattern(token)
    except PatternError as e:
        return InvalidPattern(token, str(e))

    resolved: list[ResolvedFile] = []
    seen: set[Path] = set()

    for pattern in expand_braces(token):
        for match in _glob_files(pattern, working_dir):
            try:
                resolved_file = make_resolved_file(match, working_dir)
            except CanonicalizationError as e:
                logger.warning(f"Glob matched file {str(match)!r} but could not process it: {e}")
                continue
            if resolved_file.canonical_path not in seen:
                seen.add(resolved_file.canonical_path)
                resolved.append(resolved_file)

    if not resolved:
        logger.debug(f"Glob '{token}' matched no files")
        return NotFound(token)
    return Success(resolved)


def _glob_files(pattern: str, working_dir: Path) -> list[Path]:
    """Regular files matching ``pattern``, sorted, anchored at ``working_dir``."""
    if os.path.isabs(pattern):
        matches = [Path(m) for m in glob.glob(pattern, recursive=True, include_hidden=True)]
    else:
        matches = [
            working_dir / m
            for m in glob.glob(pattern, root_dir=working_dir, recursive=True, include_hidden=True)
        ]
    return sorted(m for m in matches if m.is_file())


def _resolve_fuzzy(token: str, working_dir: Path) -> InputResolution:
    """Phase 3: substring search over every file's path relative to ``working_dir``."""
    candidates: list[Path] = []
    for path in iter_files(working_dir):
        relative = display_path_for(path, working_dir)
        if token in str(relative) or token in relative.as_posix():
            candidates.append(path)

    # Several links to one file are one candidate, listed under its first name
    distinct: dict[str, Path] = {}
    for path in sorted(set(candidates)):
        distinct.setdefault(os.path.realpath(path), path)
    candidates = list(distinct.values())

    if not candidates:
        if _looks_like_path(token):
            return PathDoesNotExist(token, working_dir / token)
        return NotFound(token)

    if len(candidates) == 1:
        try:
            return Success([make_resolved_file(candidates[0], working_dir)])
        except CanonicalizationError as e:
            logger.warning(f"Found unique match for '{token}' but failed to process it: {e}")
            return NotFound(token)

    logger.debug(f"Fuzzy input '{token}' matched {len(candidates)} files")
    return Ambiguous(token, [display_path_for(path, working_dir) for path in candidates])


def _looks_like_path(token: str) -> bool:
    return os.sep in token or (os.altsep is not None and os.altsep in token)
