"""Parsing of LS_COLORS-style strings into styles."""

from __future__ import annotations

import re
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

from lstheme.style import RGB, AnyColour, Colour, Fixed, Style

_EFFECTS = {
    "1": Style.bold,
    "2": Style.dimmed,
    "3": Style.italic,
    "4": Style.underline,
    "5": Style.blink,
    "7": Style.reverse,
    "8": Style.hidden,
    "9": Style.strikethrough,
}

_BASIC = [
    Colour.Black,
    Colour.Red,
    Colour.Green,
    Colour.Yellow,
    Colour.Blue,
    Colour.Purple,
    Colour.Cyan,
    Colour.White,
]
_FOREGROUNDS = {str(30 + offset): colour for offset, colour in enumerate(_BASIC)}
_BACKGROUNDS = {str(40 + offset): colour for offset, colour in enumerate(_BASIC)}

_BYTE = re.compile(r"\+?[0-9]+")


def _parse_byte(text: str | None) -> int | None:
    if text is None or not _BYTE.fullmatch(text):
        return None
    value = int(text)
    return value if value <= 255 else None


def _take(parts: deque[str]) -> str | None:
    return parts.popleft() if parts else None


def _parse_high_colour(parts: deque[str]) -> AnyColour | None:
    """Read a 256-colour or true-colour specification after a 38 or 48 code."""
    if not parts:
        return None
    kind = parts[0]
    if kind == "5":
        parts.popleft()
        number = _parse_byte(_take(parts))
        return Fixed(number) if number is not None else None
    if kind == "2":
        parts.popleft()
        first = _take(parts)
        if first is None:
            return None
        red = _parse_byte(first)
        green = _parse_byte(_take(parts))
        blue = _parse_byte(_take(parts))
        if red is not None and green is not None and blue is not None:
            return RGB(red, green, blue)
    return None


@dataclass(frozen=True)
class Pair:
    """One key=value entry of an LS_COLORS-style string."""

    key: str
    value: str

    def to_style(self) -> Style:
        """Interpret the value's semicolon-separated ANSI codes as a style."""
        style = Style()
        parts = deque(self.value.split(";"))
        while parts:
            code = parts.popleft().lstrip("0")
            if code in _EFFECTS:
                style = _EFFECTS[code](style)
            elif code in _FOREGROUNDS:
                style = style.fg(_FOREGROUNDS[code])
            elif code in _BACKGROUNDS:
                style = style.on(_BACKGROUNDS[code])
            elif code == "38":
                colour = _parse_high_colour(parts)
                if colour is not None:
                    style = style.fg(colour)
            elif code == "48":
                colour = _parse_high_colour(parts)
                if colour is not None:
                    style = style.on(colour)
        return style


def each_pair(text: str) -> Iterator[Pair]:
    """Yield the well-formed key=value pairs of a colon-separated string."""
    for entry in text.split(":"):
        bits = entry.split("=")[:3]
        if len(bits) == 2 and bits[0] and bits[1]:
            yield Pair(bits[0], bits[1])