"""Recursive regular-file enumeration that follows symbolic links."""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

logger = logging.getLogger(__name__)


def iter_files(root: Path) -> Iterator[Path]:
    """Yield every regular file beneath ``root``, following symlinks.

    Entries are visited in sorted name order; a directory's files come
    before its subdirectories. A directory reached through several links is
    walked under each name; a link back to one of its own ancestors is a
    loop and is not descended. Unreadable directories and broken links are
    logged and skipped.

    Args:
        root: Directory to walk

    Yields:
        Paths under ``root`` (not canonicalized; symlinked paths keep the
        name they were found under)
    """
    # dirpath -> real paths of the directories above it in this walk
    ancestors: dict[str, frozenset[str]] = {}

    def _on_error(error: OSError) -> None:
        logger.warning(f"Skipping unreadable entry {error.filename!r}: {error.strerror or error}")

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error, followlinks=True):
        real = os.path.realpath(dirpath)
        chain = ancestors.pop(dirpath, frozenset())
        if real in chain:
            logger.warning(f"Skipping directory {dirpath!r}: symlink loop back to {real!r}")
            dirnames[:] = []
            continue

        dirnames.sort()
        below = chain | {real}
        for name in dirnames:
            ancestors[os.path.join(dirpath, name)] = below
        for name in sorted(filenames):
            path = Path(dirpath) / name
            try:
                if path.is_file():
                    yield path
                elif path.is_symlink() and not path.exists():
                    logger.warning(f"Skipping broken symlink {str(path)!r}")
            except OSError as e:
                logger.warning(f"Skipping {str(path)!r}: {e}")
