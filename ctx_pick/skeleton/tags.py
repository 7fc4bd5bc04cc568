"""Definition-tag skeleton extraction.

Runs the language's definition query over the parsed tree and keeps the
first source line of every definition, in source order. Richer than the
depth flatten for code with deep nesting (methods inside classes inside
modules), at the cost of needing a query per language.
"""

from __future__ import annotations

import logging

from tree_sitter import Query
from tree_sitter import QueryCursor
from tree_sitter import QueryError

from ..errors import ParseFailureError
from ..errors import UnsupportedLanguageError
from ..models import Tag
from .depth import NO_STRUCTURE
from .languages import get_language
from .languages import get_language_spec
from .languages import get_parser

logger = logging.getLogger(__name__)

DEFINITION_PREFIX = "definition."


def extract_tags(source: str, language: str) -> list[Tag]:
    """Find definitions in ``source``.

    Args:
        source: File content
        language: Language name or file extension

    Returns:
        Tags sorted by start byte

    Raises:
        UnsupportedLanguageError: No grammar or no definition query
        ParseFailureError: The source (or the query) could not be parsed
    """
    spec = get_language_spec(language)
    if not spec.tags_query:
        raise UnsupportedLanguageError(language, "No definition query registered for")

    try:
        query = Query(get_language(spec.name), spec.tags_query)
    except QueryError as e:
        raise ParseFailureError(f"Invalid definition query for {spec.name}: {e}") from e

    source_bytes = source.encode("utf-8")
    try:
        tree = get_parser(spec.name).parse(source_bytes)
    except (ValueError, TypeError) as e:
        raise ParseFailureError(f"Failed to parse source code: {e}") from e

    lines = source_bytes.split(b"\n")
    tags: list[Tag] = []

    for _, captures in QueryCursor(query).matches(tree.root_node):
        names = captures.get("name", [])
        for capture_name, nodes in captures.items():
            if not capture_name.startswith(DEFINITION_PREFIX):
                continue
            kind = capture_name[len(DEFINITION_PREFIX) :]
            for node in nodes:
                row = node.start_point[0]
                line = lines[row].decode("utf-8", errors="replace").rstrip() if row < len(lines) else ""
                name = names[0].text.decode("utf-8", errors="replace") if names and names[0].text else ""
                tags.append(Tag(start_byte=node.start_byte, name=name, kind=kind, line_text=line))

    tags.sort()
    logger.debug(f"Extracted {len(tags)} definition tags from {spec.name} source")
    return tags


def render_tags(tags: list[Tag]) -> str:
    """One line per definition, consecutive duplicate lines removed."""
    lines: list[str] = []
    for tag in tags:
        if not tag.line_text.strip():
            continue
        if lines and lines[-1] == tag.line_text:
            continue
        lines.append(tag.line_text)
    return "\n".join(lines) if lines else NO_STRUCTURE


def extract_tag_skeleton(source: str, language: str) -> str:
    """``extract_tags`` then ``render_tags``."""
    return render_tags(extract_tags(source, language))
