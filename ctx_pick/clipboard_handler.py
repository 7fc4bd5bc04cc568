"""Cross-platform clipboard text handler for the ctx-pick CLI."""

import logging
import platform
import shutil
import subprocess

from .errors import ClipboardError

logger = logging.getLogger(__name__)


class ClipboardTextHandler:
    """Copy text to the clipboard across macOS, Linux, and Windows."""

    def __init__(self, timeout: int = 5):
        """Initialize handler with platform detection.

        Args:
            timeout: Seconds to wait for the clipboard command
        """
        self.platform = platform.system()
        self.timeout = timeout

    def get_platform_commands(self) -> list[list[str]]:
        """Candidate copy commands for this platform, in preference order."""
        if self.platform == "Darwin":  # macOS
            return [["pbcopy"]]
        elif self.platform == "Linux":
            # Wayland first, then the X11 tools
            return [
                ["wl-copy"],
                ["xclip", "-selection", "clipboard"],
                ["xsel", "--clipboard", "--input"],
            ]
        elif self.platform == "Windows":
            return [["clip"]]
        else:
            return []

    def find_command(self) -> list[str] | None:
        """First platform command whose executable is on PATH."""
        for command in self.get_platform_commands():
            if shutil.which(command[0]):
                return command
        return None

    def copy(self, text: str) -> None:
        """Place ``text`` on the system clipboard.

        Raises:
            ClipboardError: No clipboard tool is available or it failed
        """
        command = self.find_command()
        if command is None:
            raise ClipboardError(f"No clipboard command available on {self.platform or 'this platform'}")

        # clip.exe reads the console code page; UTF-16 is what it understands reliably
        encoding = "utf-16" if self.platform == "Windows" else "utf-8"

        try:
            result = subprocess.run(
                command,
                input=text.encode(encoding),
                capture_output=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise ClipboardError(f"Clipboard command '{command[0]}' timed out") from e
        except OSError as e:
            raise ClipboardError(f"Clipboard command '{command[0]}' failed: {e}") from e

        if result.returncode != 0:
            stderr = result.stderr.decode("utf-8", errors="replace").strip()
            raise ClipboardError(
                f"Clipboard command '{command[0]}' exited with status {result.returncode}"
                + (f": {stderr}" if stderr else "")
            )
        logger.debug(f"Copied {len(text)} characters with {command[0]}")

    def get_platform_hint(self) -> str:
        """Platform-specific hint for when no clipboard tool is found."""
        if self.platform == "Linux":
            return "Install wl-clipboard (Wayland) or xclip/xsel (X11) to enable clipboard copy."
        return "Use --stdout to print the context instead."
