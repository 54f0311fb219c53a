"""Terminal text styles: colours and attribute flags."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Union


class Colour(Enum):
    """The eight basic terminal colours."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    PURPLE = 5
    CYAN = 6
    WHITE = 7

    def normal(self) -> Style:
        """A style with this colour as foreground and nothing else."""
        return Style(foreground=self)

    def bold(self) -> Style:
        """A bold style with this colour as foreground."""
        return Style(foreground=self, is_bold=True)

    def underline(self) -> Style:
        """An underlined style with this colour as foreground."""
        return Style(foreground=self, is_underline=True)

    def on(self, background: AnyColour) -> Style:
        """A style with this colour as foreground over the given background."""
        return Style(foreground=self, background=background)


def _check_byte(value: int, what: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an integer, not {type(value).__name__}")
    if not 0 <= value <= 255:
        raise ValueError(f"{what} must be between 0 and 255, got {value}")


@dataclass(frozen=True)
class Fixed:
    """One of the 256 indexed terminal colours."""

    number: int

    def __post_init__(self) -> None:
        _check_byte(self.number, "colour number")

    def normal(self) -> Style:
        """A style with this colour as foreground and nothing else."""
        return Style(foreground=self)

    def bold(self) -> Style:
        """A bold style with this colour as foreground."""
        return Style(foreground=self, is_bold=True)

    def underline(self) -> Style:
        """An underlined style with this colour as foreground."""
        return Style(foreground=self, is_underline=True)

    def on(self, background: AnyColour) -> Style:
        """A style with this colour as foreground over the given background."""
        return Style(foreground=self, background=background)


@dataclass(frozen=True)
class RGB:
    """A 24-bit true colour."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        _check_byte(self.r, "red")
        _check_byte(self.g, "green")
        _check_byte(self.b, "blue")

    def normal(self) -> Style:
        """A style with this colour as foreground and nothing else."""
        return Style(foreground=self)

    def bold(self) -> Style:
        """A bold style with this colour as foreground."""
        return Style(foreground=self, is_bold=True)

    def underline(self) -> Style:
        """An underlined style with this colour as foreground."""
        return Style(foreground=self, is_underline=True)

    def on(self, background: AnyColour) -> Style:
        """A style with this colour as foreground over the given background."""
        return Style(foreground=self, background=background)


AnyColour = Union[Colour, Fixed, RGB]


@dataclass(frozen=True)
class Style:
    """An immutable set of colours and text attributes.

    Every modifier returns a new style, leaving the original untouched.
    """

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
        """Return this style with the given foreground colour."""
        return replace(self, foreground=colour)

    def on(self, colour: AnyColour) -> Style:
        """Return this style with the given background colour."""
        return replace(self, background=colour)