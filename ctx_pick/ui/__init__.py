"""Terminal UI for the ctx-pick CLI."""

from .display import DisplayManager
from .display import DisplayStyles
from .error_display import display_resolution_report

__all__ = ["DisplayManager", "DisplayStyles", "display_resolution_report"]
