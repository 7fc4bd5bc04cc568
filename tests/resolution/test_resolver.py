"""Tests for the three-phase input resolver."""

import logging
from pathlib import Path

import pytest

from ctx_pick.errors import CanonicalizationError
from ctx_pick.models import Ambiguous
from ctx_pick.models import InvalidPattern
from ctx_pick.models import NotFound
from ctx_pick.models import PathDoesNotExist
from ctx_pick.models import Success
from ctx_pick.resolution import resolver as resolver_module
from ctx_pick.resolution.resolver import resolve_input
from ctx_pick.resolution.resolver import resolve_inputs


def _display(resolution):
    assert isinstance(resolution, Success), resolution
    return [f.display_path.as_posix() for f in resolution.files]


class TestDirectMatch:
    """Phase 1: literal files and directories."""

    def test_existing_file(self, workspace):
        result = resolve_input("src/main.rs", workspace)

        assert isinstance(result, Success)
        assert len(result.files) == 1
        assert result.files[0].canonical_path == (workspace / "src" / "main.rs").resolve()
        assert result.files[0].display_path == Path("src/main.rs")

    def test_absolute_path(self, workspace):
        result = resolve_input(str(workspace / "docs" / "guide.md"), workspace)

        assert _display(result) == ["docs/guide.md"]

    def test_directory_expands_recursively(self, workspace):
        result = resolve_input("src", workspace)

        assert _display(result) == ["src/main.rs", "src/lib/helpers.py", "src/lib/util.py"]

    def test_directory_counts_every_nested_file(self, workspace, make_tree):
        make_tree(workspace, {f"deep/a/b/c/file{i}.txt": "" for i in range(5)})
        make_tree(workspace, {"deep/top.txt": ""})

        result = resolve_input("deep", workspace)

        assert isinstance(result, Success)
        assert len(result.files) == 6

    def test_empty_directory_is_success(self, workspace):
        (workspace / "empty").mkdir()

        assert resolve_input("empty", workspace) == Success([])

    def test_literal_name_with_glob_characters(self, workspace):
        (workspace / "file[1].txt").write_text("bracketed")

        assert _display(resolve_input("file[1].txt", workspace)) == ["file[1].txt"]

    def test_symlinked_file_resolves_to_target(self, workspace):
        (workspace / "alias.rs").symlink_to(workspace / "src" / "main.rs")

        result = resolve_input("alias.rs", workspace)

        assert isinstance(result, Success)
        assert result.files[0].canonical_path == workspace / "src" / "main.rs"

    def test_canonicalization_failure_degrades_to_not_found(self, workspace, monkeypatch, caplog):
        def _fail(path, working_dir):
            raise CanonicalizationError(path, "boom")

        monkeypatch.setattr(resolver_module, "make_resolved_file", _fail)

        with caplog.at_level(logging.WARNING, logger="ctx_pick"):
            result = resolve_input("src/main.rs", workspace)

        assert result == NotFound("src/main.rs")
        assert "could not process it" in caplog.text

    def test_directory_drops_files_that_fail(self, workspace, monkeypatch, caplog):
        real = resolver_module.make_resolved_file

        def _flaky(path, working_dir):
            if path.name == "util.py":
                raise CanonicalizationError(path, "boom")
            return real(path, working_dir)

        monkeypatch.setattr(resolver_module, "make_resolved_file", _flaky)

        with caplog.at_level(logging.WARNING, logger="ctx_pick"):
            result = resolve_input("src", workspace)

        assert _display(result) == ["src/main.rs", "src/lib/helpers.py"]
        assert "util.py" in caplog.text


class TestGlobMatch:
    """Phase 2: patterns expand to many files without ambiguity."""

    def test_recursive_glob(self, workspace):
        assert _display(resolve_input("src/**/*.py", workspace)) == ["src/lib/helpers.py", "src/lib/util.py"]

    def test_star_does_not_cross_directories(self, workspace):
        assert _display(resolve_input("*.md", workspace)) == ["readme.md"]

    def test_many_matches_are_not_ambiguous(self, workspace):
        result = resolve_input("**/*.md", workspace)

        assert not isinstance(result, Ambiguous)
        assert _display(result) == ["docs/guide.md", "readme.md"]

    def test_brace_alternatives(self, workspace):
        result = resolve_input("src/**/*.{rs,py}", workspace)

        assert _display(result) == ["src/main.rs", "src/lib/helpers.py", "src/lib/util.py"]

    def test_brace_alternatives_deduplicate(self, workspace):
        result = resolve_input("src/{**/*.py,lib/util.py}", workspace)

        assert _display(result) == ["src/lib/helpers.py", "src/lib/util.py"]

    def test_wildcards_match_dotfiles(self, workspace):
        (workspace / ".env").write_text("KEY=1\n")

        assert ".env" in _display(resolve_input("*", workspace))

    def test_directories_are_not_matched(self, workspace):
        assert _display(resolve_input("sr?/*", workspace)) == ["src/main.rs"]

    def test_absolute_pattern(self, workspace):
        result = resolve_input(str(workspace / "docs" / "*.txt"), workspace)

        assert _display(result) == ["docs/readme.txt"]

    def test_no_matches_is_not_found(self, workspace):
        assert resolve_input("*.java", workspace) == NotFound("*.java")

    def test_invalid_pattern(self, workspace):
        result = resolve_input("src/***/x.rs", workspace)

        assert isinstance(result, InvalidPattern)
        assert result.token == "src/***/x.rs"
        assert "wildcards are either regular `*` or recursive `**`" in result.error

    def test_unclosed_class_is_invalid(self, workspace):
        result = resolve_input("file[12.txt", workspace)

        assert isinstance(result, InvalidPattern)
        assert "unclosed character class" in result.error


class TestFuzzySearch:
    """Phase 3: substring match on relative paths."""

    def test_unique_fragment(self, workspace):
        assert _display(resolve_input("main", workspace)) == ["src/main.rs"]

    def test_fragment_with_directory(self, workspace):
        assert _display(resolve_input("lib/util", workspace)) == ["src/lib/util.py"]

    def test_ambiguous_fragment(self, workspace):
        result = resolve_input("readme", workspace)

        assert result == Ambiguous("readme", [Path("docs/readme.txt"), Path("readme.md")])

    def test_not_found(self, workspace):
        assert resolve_input("nonexistent123", workspace) == NotFound("nonexistent123")

    def test_real_path_fragment_with_sibling_link(self, workspace, make_tree):
        make_tree(workspace, {"zreal/widget_impl.txt": "widget\n"})
        (workspace / "alink").symlink_to(workspace / "zreal", target_is_directory=True)

        assert _display(resolve_input("zreal/widget", workspace)) == ["zreal/widget_impl.txt"]

    def test_links_to_one_file_are_not_ambiguous(self, workspace, make_tree):
        make_tree(workspace, {"zreal/widget_impl.txt": "widget\n"})
        (workspace / "alink").symlink_to(workspace / "zreal", target_is_directory=True)

        result = resolve_input("widget_impl", workspace)

        assert isinstance(result, Success)
        assert result.files[0].canonical_path == workspace / "zreal" / "widget_impl.txt"

    def test_distinct_files_behind_links_stay_ambiguous(self, workspace, make_tree):
        make_tree(workspace, {"zreal/widget_impl.txt": "", "other/widget_impl.txt": ""})
        (workspace / "alink").symlink_to(workspace / "zreal", target_is_directory=True)

        result = resolve_input("widget_impl", workspace)

        assert result == Ambiguous("widget_impl", [Path("alink/widget_impl.txt"), Path("other/widget_impl.txt")])

    def test_path_shaped_miss_reports_path_tried(self, workspace):
        result = resolve_input("src/missing.rs", workspace)

        assert result == PathDoesNotExist("src/missing.rs", workspace / "src/missing.rs")

    def test_canonicalization_failure_degrades_to_not_found(self, workspace, monkeypatch):
        def _fail(path, working_dir):
            raise CanonicalizationError(path, "boom")

        monkeypatch.setattr(resolver_module, "make_resolved_file", _fail)

        assert resolve_input("guide", workspace) == NotFound("guide")


@pytest.mark.parametrize("token", ["src/main.rs", "src", "**/*.py", "readme", "nonexistent123", "src/***"])
def test_resolution_is_repeatable(workspace, token):
    assert resolve_input(token, workspace) == resolve_input(token, workspace)


class TestResolveInputs:
    def test_preserves_token_order(self, workspace):
        tokens = ["src/main.rs", "nonexistent123", "docs", "readme"]

        results = resolve_inputs(tokens, workspace)

        assert [type(r) for r in results] == [Success, NotFound, Success, Ambiguous]

    def test_concurrent_matches_sequential(self, workspace):
        tokens = ["docs", "src", "guide", "*.md", "readme", "missing/file.txt"]

        assert resolve_inputs(tokens, workspace, jobs=4) == resolve_inputs(tokens, workspace, jobs=1)
