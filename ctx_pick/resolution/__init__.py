"""Input resolution engine and aggregator."""

from .aggregator import ResolutionReport
from .aggregator import aggregate
from .resolver import resolve_input
from .resolver import resolve_inputs

__all__ = [
    "ResolutionReport",
    "aggregate",
    "resolve_input",
    "resolve_inputs",
]
