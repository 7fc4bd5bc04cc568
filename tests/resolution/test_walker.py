"""Tests for the symlink-following file walker."""

import logging
import os
from pathlib import Path

import pytest

from ctx_pick.resolution.walker import iter_files


def _rel(paths, root):
    return [Path(os.path.relpath(p, root)).as_posix() for p in paths]


def test_files_before_subdirectories_in_sorted_order(make_tree, tmp_path):
    make_tree(tmp_path, {"b.txt": "", "a.txt": "", "sub/z.txt": "", "sub/deeper/y.txt": "", "aa/x.txt": ""})

    assert _rel(iter_files(tmp_path), tmp_path) == [
        "a.txt",
        "b.txt",
        "aa/x.txt",
        "sub/z.txt",
        "sub/deeper/y.txt",
    ]


def test_follows_directory_symlinks(make_tree, tmp_path):
    make_tree(tmp_path, {"real/inner.txt": ""})
    (tmp_path / "linked").symlink_to(tmp_path / "real", target_is_directory=True)
    outside = tmp_path.parent / f"{tmp_path.name}-outside"
    make_tree(outside, {"ext.txt": ""})
    (tmp_path / "ext").symlink_to(outside, target_is_directory=True)

    found = _rel(iter_files(tmp_path), tmp_path)

    assert "ext/ext.txt" in found
    assert "linked/inner.txt" in found
    assert "real/inner.txt" in found


def test_link_sorting_before_its_target_does_not_hide_it(make_tree, tmp_path, caplog):
    make_tree(tmp_path, {"zreal/widget_impl.txt": ""})
    (tmp_path / "alink").symlink_to(tmp_path / "zreal", target_is_directory=True)

    with caplog.at_level(logging.WARNING, logger="ctx_pick"):
        found = _rel(iter_files(tmp_path), tmp_path)

    assert found == ["alink/widget_impl.txt", "zreal/widget_impl.txt"]
    assert caplog.text == ""


def test_symlink_loop_terminates(make_tree, tmp_path, caplog):
    make_tree(tmp_path, {"dir/file.txt": ""})
    (tmp_path / "dir" / "loop").symlink_to(tmp_path, target_is_directory=True)

    with caplog.at_level(logging.WARNING, logger="ctx_pick"):
        found = _rel(iter_files(tmp_path), tmp_path)

    assert found == ["dir/file.txt"]
    assert "symlink loop" in caplog.text


def test_broken_symlink_skipped_with_warning(make_tree, tmp_path, caplog):
    make_tree(tmp_path, {"ok.txt": ""})
    (tmp_path / "dangling.txt").symlink_to(tmp_path / "missing.txt")

    with caplog.at_level(logging.WARNING, logger="ctx_pick"):
        found = _rel(iter_files(tmp_path), tmp_path)

    assert found == ["ok.txt"]
    assert "broken symlink" in caplog.text


@pytest.mark.skipif(os.name == "nt" or os.geteuid() == 0, reason="permission bits not enforced")
def test_unreadable_directory_skipped(make_tree, tmp_path, caplog):
    make_tree(tmp_path, {"ok.txt": "", "locked/secret.txt": ""})
    locked = tmp_path / "locked"
    locked.chmod(0)
    try:
        with caplog.at_level(logging.WARNING, logger="ctx_pick"):
            found = _rel(iter_files(tmp_path), tmp_path)
    finally:
        locked.chmod(0o755)

    assert found == ["ok.txt"]
    assert "unreadable" in caplog.text.lower()
