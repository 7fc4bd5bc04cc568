"""Skeleton extraction: compact structural summaries of source files."""

from .depth import NO_STRUCTURE
from .depth import extract_skeleton
from .languages import get_language_spec
from .languages import supported_extensions
from .tags import extract_tag_skeleton
from .tags import extract_tags
from .tags import render_tags

__all__ = [
    "NO_STRUCTURE",
    "extract_skeleton",
    "extract_tag_skeleton",
    "extract_tags",
    "get_language_spec",
    "render_tags",
    "supported_extensions",
]
