"""Terminal colours and text styles."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Union


def _check_byte(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 255:
        raise ValueError(f"{name} must be an integer from 0 to 255, got {value!r}")


class Colour(Enum):
    """The eight basic terminal colours."""

    Black = "black"
    Red = "red"
    Green = "green"
    Yellow = "yellow"
    Blue = "blue"
    Purple = "purple"
    Cyan = "cyan"
    White = "white"

    def normal(self) -> Style:
        """A style with this foreground and nothing else."""
        return Style(foreground=self)

    def bold(self) -> Style:
        """A bold style with this foreground."""
        return Style(foreground=self, is_bold=True)

    def underline(self) -> Style:
        """An underlined style with this foreground."""
        return Style(foreground=self, is_underline=True)

    def on(self, background: AnyColour) -> Style:
        """A style with this foreground and the given background."""
        return Style(foreground=self, background=background)


@dataclass(frozen=True)
class Fixed:
    """A colour from the 256-colour palette."""

    number: int

    def __post_init__(self) -> None:
        _check_byte("number", self.number)

    def normal(self) -> Style:
        """A style with this foreground and nothing else."""
        return Style(foreground=self)

    def bold(self) -> Style:
        """A bold style with this foreground."""
        return Style(foreground=self, is_bold=True)

    def underline(self) -> Style:
        """An underlined style with this foreground."""
        return Style(foreground=self, is_underline=True)

    def on(self, background: AnyColour) -> Style:
        """A style with this foreground and the given background."""
        return Style(foreground=self, background=background)


@dataclass(frozen=True)
class RGB:
    """A 24-bit true colour."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        _check_byte("red", self.red)
        _check_byte("green", self.green)
        _check_byte("blue", self.blue)

    def normal(self) -> Style:
        """A style with this foreground and nothing else."""
        return Style(foreground=self)

    def bold(self) -> Style:
        """A bold style with this foreground."""
        return Style(foreground=self, is_bold=True)

    def underline(self) -> Style:
        """An underlined style with this foreground."""
        return Style(foreground=self, is_underline=True)

    def on(self, background: AnyColour) -> Style:
        """A style with this foreground and the given background."""
        return Style(foreground=self, background=background)


AnyColour = Union[Colour, Fixed, RGB]


@dataclass(frozen=True)
class Style:
    """An immutable set of colours and text attributes."""

    foreground: AnyColour | None = None
    background: AnyColour | None = None
    is_bold: bool = False
    is_dimmed: bool = False
    is_italic: bool = False
    is_underline: bool = False
    is_blink: bool = False
    is_reverse: bool = False
    is_hidden: bool = False
    is_strikethrough: bool = False

    def bold(self) -> Style:
        return replace(self, is_bold=True)

    def dimmed(self) -> Style:
        return replace(self, is_dimmed=True)

    def italic(self) -> Style:
        return replace(self, is_italic=True)

    def underline(self) -> Style:
        return replace(self, is_underline=True)

    def blink(self) -> Style:
        return replace(self, is_blink=True)

    def reverse(self) -> Style:
        return replace(self, is_reverse=True)

    def hidden(self) -> Style:
        return replace(self, is_hidden=True)

    def strikethrough(self) -> Style:
        return replace(self, is_strikethrough=True)

    def fg(self, colour: AnyColour) -> Style:
        """This style with the given foreground colour."""
        return replace(self, foreground=colour)

    def on(self, colour: AnyColour) -> Style:
        """This style with the given background colour."""
        return replace(self, background=colour)