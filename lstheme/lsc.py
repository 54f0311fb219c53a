"""Parsing of LS_COLORS-style strings into styles."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator

from .style import RGB, AnyColour, Colour, Fixed, Style

_BASIC = {
    "0": Colour.BLACK,
    "1": Colour.RED,
    "2": Colour.GREEN,
    "3": Colour.YELLOW,
    "4": Colour.BLUE,
    "5": Colour.PURPLE,
    "6": Colour.CYAN,
    "7": Colour.WHITE,
}

_ATTRIBUTES = {
    "1": Style.bold,
    "2": Style.dimmed,
    "3": Style.italic,
    "4": Style.underline,
    "5": Style.blink,
    "7": Style.reverse,
    "8": Style.hidden,
    "9": Style.strikethrough,
}


def _parse_byte(text: str | None) -> int | None:
    """Parse a decimal number from 0 to 255, or return None."""
    if text is None:
        return None
    digits = text[1:] if text.startswith("+") else text
    if not digits or not all("0" <= ch <= "9" for ch in digits):
        return None
    value = int(digits)
    return value if value <= 255 else None


def _next(parts: deque[str]) -> str | None:
    return parts.popleft() if parts else None


def _parse_high_colour(parts: deque[str]) -> AnyColour | None:
    """Read a 256-colour or true-colour specification following 38 or 48."""
    if not parts:
        return None
    kind = parts[0]
    if kind == "5":
        parts.popleft()
        number = _parse_byte(_next(parts))
        return Fixed(number) if number is not None else None
    if kind == "2":
        parts.popleft()
        hexes = _next(parts)
        if hexes is None:
            return None
        r = _parse_byte(hexes)
        g = _parse_byte(_next(parts))
        b = _parse_byte(_next(parts))
        if r is not None and g is not None and b is not None:
            return RGB(r, g, b)
    return None


@dataclass(frozen=True)
class Pair:
    """One key=value entry from a colour definition string."""

    key: str
    value: str

    def to_style(self) -> Style:
        """Interpret the value as semicolon-separated ANSI codes.

        Unknown or malformed codes are ignored.
        """
        style = Style()
        parts = deque(self.value.split(";"))
        while parts:
            code = parts.popleft().lstrip("0")
            if code in _ATTRIBUTES:
                style = _ATTRIBUTES[code](style)
            elif len(code) == 2 and code[0] == "3" and code[1] in _BASIC:
                style = style.fg(_BASIC[code[1]])
            elif len(code) == 2 and code[0] == "4" and code[1] in _BASIC:
                style = style.on(_BASIC[code[1]])
            elif code == "38":
                colour = _parse_high_colour(parts)
                if colour is not None:
                    style = style.fg(colour)
            elif code == "48":
                colour = _parse_high_colour(parts)
                if colour is not None:
                    style = style.on(colour)
        return style


@dataclass(frozen=True)
class LSColors:
    """A colon-separated list of key=value colour definitions."""

    text: str

    def each_pair(self) -> Iterator[Pair]:
        """Yield every well-formed pair, in order; malformed entries are skipped."""
        for entry in self.text.split(":"):
            bits = entry.split("=", 2)
            if len(bits) == 2 and bits[0] and bits[1]:
                yield Pair(bits[0], bits[1])