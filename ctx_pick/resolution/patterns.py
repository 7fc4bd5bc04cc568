"""Glob pattern detection, validation and brace expansion.

The standard library ``glob`` module accepts any string and silently treats
malformed syntax as literal text. Users who type a broken pattern should hear
about it instead of getting "not found", so patterns are checked here before
they are expanded.

Supported syntax:
    ``*``       any run of characters within one path component
    ``?``       any single character
    ``[...]``   character class, ``[!...]`` negated, ``a-z`` ranges
    ``**``      any number of directories (must be a whole component)
    ``{a,b}``   alternatives, may nest
"""

from __future__ import annotations

from ..errors import PatternError

GLOB_CHARS = frozenset("*?[{")


def is_glob_pattern(token: str) -> bool:
    """True when the token contains any glob metacharacter."""
    return any(ch in GLOB_CHARS for ch in token)


def _is_separator(ch: str) -> bool:
    return ch in ("/", "\\")


def validate_pattern(pattern: str) -> None:
    """Check pattern syntax.

    Raises:
        PatternError: On the first problem found, with its position.
    """
    i = 0
    n = len(pattern)
    brace_stack: list[int] = []

    while i < n:
        ch = pattern[i]

        if ch == "*":
            run_start = i
            while i < n and pattern[i] == "*":
                i += 1
            run = i - run_start
            if run > 2:
                raise PatternError(pattern, run_start + 2, "wildcards are either regular `*` or recursive `**`")
            if run == 2:
                # Inside a brace group, `{` `,` `}` also delimit a component
                before = pattern[run_start - 1] if run_start else ""
                after = pattern[i] if i < n else ""
                before_ok = not before or _is_separator(before) or (brace_stack and before in "{,")
                after_ok = not after or _is_separator(after) or (brace_stack and after in ",}")
                if not (before_ok and after_ok):
                    raise PatternError(pattern, run_start, "recursive wildcards must form a single path component")
            continue

        if ch == "[":
            i = _check_class(pattern, i)
            continue

        if ch == "{":
            brace_stack.append(i)
        elif ch == "}":
            if not brace_stack:
                raise PatternError(pattern, i, "unmatched `}`")
            brace_stack.pop()

        i += 1

    if brace_stack:
        raise PatternError(pattern, brace_stack[-1], "unclosed `{`")


def _check_class(pattern: str, start: int) -> int:
    """Validate the character class opening at ``start``; return the index after it."""
    n = len(pattern)
    i = start + 1
    if i < n and pattern[i] == "!":
        i += 1
    # A leading ']' is a literal member, as in fnmatch
    if i < n and pattern[i] == "]":
        i += 1

    while i < n and pattern[i] != "]":
        if _is_separator(pattern[i]):
            raise PatternError(pattern, i, "path separators are not allowed in character classes")
        if i + 2 < n and pattern[i + 1] == "-" and pattern[i + 2] != "]":
            if pattern[i] > pattern[i + 2]:
                raise PatternError(pattern, i, "invalid range pattern")
            i += 3
        else:
            i += 1

    if i >= n:
        raise PatternError(pattern, start, "unclosed character class")
    return i + 1


def expand_braces(pattern: str) -> list[str]:
    """Expand ``{a,b}`` alternatives into separate patterns.

    The first top-level brace group is expanded and each result is expanded
    again, so nested and repeated groups work. A brace group without a comma
    is kept literally.

    Examples:
        >>> expand_braces("src/*.{py,rs}")
        ['src/*.py', 'src/*.rs']
        >>> expand_braces("{a,b{1,2}}.txt")
        ['a.txt', 'b1.txt', 'b2.txt']
    """
    open_idx = -1
    depth = 0
    commas: list[int] = []
    in_class = False

    for i, ch in enumerate(pattern):
        if in_class:
            if ch == "]":
                in_class = False
            continue
        if ch == "[":
            in_class = True
        elif ch == "{":
            if depth == 0:
                open_idx = i
                commas = []
            depth += 1
        elif ch == "," and depth == 1:
            commas.append(i)
        elif ch == "}" and depth > 0:
            depth -= 1
            if depth == 0:
                if not commas:
                    # Literal braces: expand whatever follows, keep this part as-is
                    head = pattern[: i + 1]
                    return [head + rest for rest in expand_braces(pattern[i + 1 :])]
                prefix = pattern[:open_idx]
                suffix = pattern[i + 1 :]
                bounds = [open_idx, *commas, i]
                results: list[str] = []
                for start, end in zip(bounds, bounds[1:]):
                    alternative = pattern[start + 1 : end]
                    results.extend(expand_braces(prefix + alternative + suffix))
                return results

    return [pattern]
