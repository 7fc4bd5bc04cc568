"""Turn resolved files into FileContext objects and the Markdown payload."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Literal

from .errors import ParseFailureError
from .errors import UnsupportedLanguageError
from .models import FileContext
from .models import ResolvedFile
from .skeleton import extract_skeleton
from .skeleton import extract_tag_skeleton
from .utils.error_format import format_error_message

logger = logging.getLogger(__name__)

SkeletonMode = Literal["depth", "tags"]


def build_file_context(
    resolved: ResolvedFile,
    depth: int | None = None,
    mode: SkeletonMode = "depth",
) -> FileContext:
    """Read one file and extract its content.

    Args:
        resolved: File to read
        depth: Skeleton depth; None includes the full content
        mode: Skeleton flavour when ``depth`` is set

    Returns:
        FileContext. Read failures become an error block in ``content``;
        skeleton failures fall back to the full content with a notice.
    """
    extension = resolved.display_path.suffix.lstrip(".")

    try:
        content = resolved.canonical_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read {str(resolved.display_path)!r}: {format_error_message(e)}")
        return FileContext(
            display_path=resolved.display_path,
            content=(
                f"Error: Could not read file content for {str(resolved.display_path)!r}.\n"
                f"Details: {format_error_message(e, include_type=False)}"
            ),
        )

    source_lines = len(content.splitlines())

    if depth is None:
        return FileContext(
            display_path=resolved.display_path,
            content=content,
            language_hint=extension,
            source_lines=source_lines,
        )

    try:
        if mode == "tags":
            skeleton = extract_tag_skeleton(content, extension)
        else:
            skeleton = extract_skeleton(content, extension, depth)
    except (UnsupportedLanguageError, ParseFailureError) as e:
        logger.info(f"Skeleton unavailable for {str(resolved.display_path)!r}, using full content: {e}")
        notice = (
            f"---\n-- ERROR: Could not extract symbols from {str(resolved.display_path)!r}: {e}\n"
            "-- Falling back to full file content.\n---\n\n"
        )
        return FileContext(
            display_path=resolved.display_path,
            content=notice + content,
            is_skeleton=True,
            fallback_reason=str(e),
            source_lines=source_lines,
        )

    return FileContext(
        display_path=resolved.display_path,
        content=skeleton,
        is_skeleton=True,
        source_lines=source_lines,
    )


def build_file_contexts(
    files: Sequence[ResolvedFile],
    depth: int | None = None,
    mode: SkeletonMode = "depth",
) -> list[FileContext]:
    """``build_file_context`` for each file, order preserved."""
    return [build_file_context(resolved, depth=depth, mode=mode) for resolved in files]


def render_markdown(contexts: Sequence[FileContext]) -> str:
    """Assemble the clipboard payload.

    Each file becomes its display path followed by a fenced block. Skeletons
    get no language hint since they are not valid source.
    """
    parts = []
    for ctx in contexts:
        hint = "" if ctx.is_skeleton else ctx.language_hint
        parts.append(f"{ctx.display_path}\n```{hint}\n{ctx.content.rstrip()}\n```\n\n")
    return "".join(parts)
