"""Shared fixtures for ctx-pick tests."""

from pathlib import Path

import pytest


def write_tree(root: Path, files: dict[str, str]) -> None:
    """Create ``files`` (relative path -> content) under ``root``."""
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """A small project tree used as the working directory.

    Layout:
        readme.md
        docs/readme.txt
        docs/guide.md
        src/main.rs
        src/lib/util.py
        src/lib/helpers.py
    """
    root = tmp_path / "project"
    root.mkdir()
    write_tree(
        root,
        {
            "readme.md": "# Project\n",
            "docs/readme.txt": "plain readme\n",
            "docs/guide.md": "# Guide\n",
            "src/main.rs": "fn main() {}\n",
            "src/lib/util.py": "def util():\n    return 1\n",
            "src/lib/helpers.py": "import os\n",
        },
    )
    monkeypatch.chdir(root)
    # Resolved form, so comparisons hold when tmp_path sits behind a symlink (macOS /var)
    return root.resolve()


@pytest.fixture
def make_tree():
    """The ``write_tree`` helper, as a fixture."""
    return write_tree
