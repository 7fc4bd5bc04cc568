"""Depth-bounded skeleton extraction.

The skeleton is a flattened view of a file's concrete syntax tree: the text
of every leaf node reachable within a fixed depth, joined by single spaces.
It is a compact structural summary for an LLM, not re-parseable code.

Depth convention: the root is depth 0 and a node at depth ``d`` is examined
only when ``d <= max_depth + 1``. With ``max_depth=0`` the root's immediate
children are examined, so top-level terminals (such as top-level comments)
appear and nothing nested does. For Rust ``fn main() {}``:

    max_depth=0  ->  (No structure found)
    max_depth=1  ->  fn main
    max_depth=2  ->  fn main ( ) { }
"""

from __future__ import annotations

import logging

from tree_sitter import Node

from ..errors import ParseFailureError
from .languages import get_parser

logger = logging.getLogger(__name__)

NO_STRUCTURE = "(No structure found)"


def extract_skeleton(source: str, language: str, max_depth: int) -> str:
    """Flatten ``source`` to the leaf tokens within ``max_depth``.

    Args:
        source: File content
        language: Language name or file extension (see ``languages``)
        max_depth: Non-negative depth bound

    Returns:
        Space-joined leaf tokens in source order, or ``NO_STRUCTURE``

    Raises:
        ValueError: ``max_depth`` is negative
        UnsupportedLanguageError: No grammar for ``language``
        ParseFailureError: The parser could not produce a tree
    """
    tokens = collect_tokens(source, language, max_depth)
    if not tokens:
        return NO_STRUCTURE
    return " ".join(tokens)


def collect_tokens(source: str, language: str, max_depth: int) -> list[str]:
    """The token stream behind ``extract_skeleton``."""
    if max_depth < 0:
        raise ValueError(f"max_depth must be non-negative, got {max_depth}")

    parser = get_parser(language)
    try:
        tree = parser.parse(source.encode("utf-8"))
    except (ValueError, TypeError) as e:
        raise ParseFailureError(f"Failed to parse source code: {e}") from e
    if tree is None:
        raise ParseFailureError("Failed to parse source code.")

    if tree.root_node.has_error:
        logger.debug(f"Syntax errors in {language} source; skeleton may be partial")

    tokens: list[str] = []
    _collect(tree.root_node, 0, max_depth + 1, tokens)
    return tokens


def _collect(node: Node, depth: int, limit: int, tokens: list[str]) -> None:
    if depth > limit:
        return

    if node.child_count == 0:
        text = node.text.decode("utf-8", errors="replace").strip() if node.text else ""
        if text:
            tokens.append(text)
        return

    for child in node.children:
        _collect(child, depth + 1, limit, tokens)
