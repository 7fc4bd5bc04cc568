"""Tests for ctx-pick data models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from ctx_pick.models import Ambiguous
from ctx_pick.models import FileContext
from ctx_pick.models import NotFound
from ctx_pick.models import ResolvedFile
from ctx_pick.models import Success
from ctx_pick.models import Tag


class TestResolvedFile:
    """Identity is the canonical path."""

    def test_equal_when_canonical_paths_match(self):
        a = ResolvedFile(canonical_path=Path("/repo/src/main.rs"), display_path=Path("src/main.rs"))
        b = ResolvedFile(canonical_path=Path("/repo/src/main.rs"), display_path=Path("../repo/src/main.rs"))

        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_different_canonical_paths_differ(self):
        a = ResolvedFile(canonical_path=Path("/repo/a.py"), display_path=Path("a.py"))
        b = ResolvedFile(canonical_path=Path("/repo/b.py"), display_path=Path("a.py"))

        assert a != b

    def test_immutable(self):
        resolved = ResolvedFile(canonical_path=Path("/repo/a.py"), display_path=Path("a.py"))

        with pytest.raises(AttributeError):
            resolved.display_path = Path("b.py")  # type: ignore[misc]

    def test_str_is_display_path(self):
        resolved = ResolvedFile(canonical_path=Path("/repo/a.py"), display_path=Path("a.py"))
        assert str(resolved) == "a.py"


class TestInputResolution:
    def test_success_normalizes_to_tuple(self):
        resolved = ResolvedFile(canonical_path=Path("/repo/a.py"), display_path=Path("a.py"))

        assert Success([resolved]) == Success((resolved,))
        assert isinstance(Success([resolved]).files, tuple)

    def test_ambiguous_normalizes_to_tuple(self):
        assert Ambiguous("read", [Path("a"), Path("b")]) == Ambiguous("read", (Path("a"), Path("b")))

    def test_variants_are_distinct(self):
        assert NotFound("x") != Ambiguous("x", [])
        assert NotFound("x") == NotFound("x")


class TestTag:
    def test_sorts_by_start_byte_only(self):
        tags = [
            Tag(start_byte=30, name="b", kind="function", line_text="def b():"),
            Tag(start_byte=0, name="z", kind="class", line_text="class Z:"),
            Tag(start_byte=10, name="a", kind="function", line_text="    def a(self):"),
        ]

        assert [t.start_byte for t in sorted(tags)] == [0, 10, 30]


class TestFileContext:
    def test_defaults(self):
        ctx = FileContext(display_path=Path("a.py"), content="x = 1\n")

        assert ctx.language_hint == ""
        assert ctx.is_skeleton is False
        assert ctx.fallback_reason is None
        assert ctx.source_lines == 0

    def test_rejects_negative_line_count(self):
        with pytest.raises(ValidationError):
            FileContext(display_path=Path("a.py"), content="", source_lines=-1)
