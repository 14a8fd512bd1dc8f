"""Glob patterns and the file-name colour mappings built from them."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field

from lstheme.style import Style

_ERROR_WILDCARDS = "wildcards are either regular `*` or recursive `**`"
_ERROR_RECURSIVE_WILDCARDS = "recursive wildcards must form a single path component"
_ERROR_INVALID_RANGE = "invalid range pattern"

_SEPARATORS = "".join(sorted({"/", os.sep, os.altsep or "/"}))
_SEPARATOR_CLASS = "[" + "".join(re.escape(sep) for sep in _SEPARATORS) + "]"


class PatternError(ValueError):
    """A glob pattern could not be parsed."""

    def __init__(self, pos: int, msg: str) -> None:
        super().__init__(f"Pattern syntax error near position {pos}: {msg}")
        self.pos = pos
        self.msg = msg


def _is_separator(char: str) -> bool:
    return char in _SEPARATORS


def _char_class(specifiers: str, negate: bool) -> str:
    """Regex for a bracket expression's single characters and ranges."""
    items: list[str] = []
    rest = specifiers
    while rest:
        if len(rest) >= 3 and rest[1] == "-":
            low, high = rest[0], rest[2]
            # A backwards range matches nothing rather than being an error.
            if low <= high:
                items.append(f"{re.escape(low)}-{re.escape(high)}")
            rest = rest[3:]
        else:
            items.append(re.escape(rest[0]))
            rest = rest[1:]
    if not items:
        return "." if negate else "(?!)"
    return "[" + ("^" if negate else "") + "".join(items) + "]"


def _translate(pattern: str) -> str:
    """Turn a glob pattern into an equivalent regular expression."""
    parts: list[str] = []
    length = len(pattern)
    i = 0
    while i < length:
        char = pattern[i]
        if char == "?":
            parts.append(".")
            i += 1
        elif char == "*":
            start = i
            while i < length and pattern[i] == "*":
                i += 1
            count = i - start
            if count > 2:
                raise PatternError(start + 2, _ERROR_WILDCARDS)
            if count == 1:
                parts.append(".*")
                continue
            if start != 0 and not _is_separator(pattern[start - 1]):
                raise PatternError(start, _ERROR_RECURSIVE_WILDCARDS)
            if i < length and _is_separator(pattern[i]):
                i += 1
                parts.append(f"(?:.*{_SEPARATOR_CLASS})?")
            elif i == length:
                parts.append(".*")
            else:
                raise PatternError(i, _ERROR_RECURSIVE_WILDCARDS)
        elif char == "[":
            if i + 4 <= length and pattern[i + 1] == "!":
                close = pattern.find("]", i + 3)
                if close != -1:
                    parts.append(_char_class(pattern[i + 2 : close], negate=True))
                    i = close + 1
                    continue
            elif i + 3 <= length and pattern[i + 1] != "!":
                close = pattern.find("]", i + 2)
                if close != -1:
                    parts.append(_char_class(pattern[i + 1 : close], negate=False))
                    i = close + 1
                    continue
            raise PatternError(i, _ERROR_INVALID_RANGE)
        else:
            parts.append(re.escape(char))
            i += 1
    return "".join(parts)


class GlobPattern:
    """A shell-style glob pattern, matched case-sensitively against whole names.

    ``?`` matches one character, ``*`` any run of characters, ``[...]`` one
    character from a set or range and ``[!...]`` one character outside it.
    ``**`` must form a whole path component and matches any number of them.
    """

    __slots__ = ("_pattern", "_regex")

    def __init__(self, pattern: str) -> None:
        self._pattern = pattern
        self._regex = re.compile(_translate(pattern), re.DOTALL)

    @property
    def pattern(self) -> str:
        """The original pattern text."""
        return self._pattern

    def matches(self, name: str) -> bool:
        """Whether the whole of ``name`` matches this pattern."""
        return self._regex.fullmatch(name) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GlobPattern):
            return NotImplemented
        return self._pattern == other._pattern

    def __hash__(self) -> int:
        return hash(self._pattern)

    def __str__(self) -> str:
        return self._pattern

    def __repr__(self) -> str:
        return f"GlobPattern({self._pattern!r})"


@dataclass
class ExtensionMappings:
    """File-name globs paired with the style for names that match them."""

    mappings: list[tuple[GlobPattern, Style]] = field(default_factory=list)

    def add(self, pattern: GlobPattern | str, style: Style) -> None:
        """Append a mapping; later mappings take precedence over earlier ones."""
        if isinstance(pattern, str):
            pattern = GlobPattern(pattern)
        self.mappings.append((pattern, style))

    def is_non_empty(self) -> bool:
        """Whether any mapping has been added."""
        return bool(self.mappings)

    def colour_file(self, name: str) -> Style | None:
        """The style of the last-added pattern matching ``name``, if any."""
        for pattern, style in reversed(self.mappings):
            if pattern.matches(name):
                return style
        return None