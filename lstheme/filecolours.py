"""Choosing a style for a file from its name."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace

from .style import Style


def apply_overlay(base: Style, overlay: Style) -> Style:
    """Amend ``base`` with whatever ``overlay`` sets.

    Colours set in the overlay replace those of the base, and attribute flags
    set in the overlay are switched on; nothing is ever switched off.
    """
    return replace(
        base,
        foreground=overlay.foreground if overlay.foreground is not None else base.foreground,
        background=overlay.background if overlay.background is not None else base.background,
        is_bold=base.is_bold or overlay.is_bold,
        is_dimmed=base.is_dimmed or overlay.is_dimmed,
        is_italic=base.is_italic or overlay.is_italic,
        is_underline=base.is_underline or overlay.is_underline,
        is_blink=base.is_blink or overlay.is_blink,
        is_reverse=base.is_reverse or overlay.is_reverse,
        is_hidden=base.is_hidden or overlay.is_hidden,
        is_strikethrough=base.is_strikethrough or overlay.is_strikethrough,
    )


def _char(ch: str) -> str:
    return f"\\U{ord(ch):08x}"


def _char_class(spec: str, negated: bool) -> str:
    items = []
    rest = spec
    while rest:
        if len(rest) >= 3 and rest[1] == "-":
            low, high = rest[0], rest[2]
            if low <= high:
                items.append(f"{_char(low)}-{_char(high)}")
            rest = rest[3:]
        else:
            items.append(_char(rest[0]))
            rest = rest[1:]
    if not items:
        return "." if negated else "(?!)"
    return "[" + ("^" if negated else "") + "".join(items) + "]"


def _glob_to_regex(pattern: str) -> re.Pattern[str]:
    """Compile a shell glob into a regular expression, or raise ValueError."""
    out: list[str] = []
    chars = pattern
    length = len(chars)
    i = 0
    while i < length:
        ch = chars[i]
        if ch == "?":
            out.append(".")
            i += 1
        elif ch == "*":
            start = i
            while i < length and chars[i] == "*":
                i += 1
            count = i - start
            if count > 2:
                raise ValueError(
                    f"invalid glob pattern {pattern!r}: "
                    "wildcards are either regular `*` or recursive `**`"
                )
            if count == 1:
                out.append(".*")
                continue
            if not (start == 0 or chars[start - 1] == "/"):
                raise ValueError(
                    f"invalid glob pattern {pattern!r}: "
                    "recursive wildcards must form a single path component"
                )
            if i < length and chars[i] == "/":
                i += 1
                out.append("(?:.*/)?")
            elif i == length:
                out.append(".*")
            else:
                raise ValueError(
                    f"invalid glob pattern {pattern!r}: "
                    "recursive wildcards must form a single path component"
                )
        elif ch == "[":
            if i + 4 <= length and chars[i + 1] == "!":
                close = chars.find("]", i + 3)
                if close != -1:
                    out.append(_char_class(chars[i + 2:close], negated=True))
                    i = close + 1
                    continue
            elif i + 3 <= length and chars[i + 1] != "!":
                close = chars.find("]", i + 2)
                if close != -1:
                    out.append(_char_class(chars[i + 1:close], negated=False))
                    i = close + 1
                    continue
            raise ValueError(f"invalid glob pattern {pattern!r}: invalid range pattern")
        else:
            out.append(_char(ch))
            i += 1
    return re.compile("".join(out), re.DOTALL)


class FileColours(ABC):
    """Something that may pick a style for a file name."""

    @abstractmethod
    def colour_file(self, name: str) -> Style | None:
        """The style for the named file, or None if there is no opinion."""


@dataclass(frozen=True)
class NoFileColours(FileColours):
    """Never colours any file."""

    def colour_file(self, name: str) -> Style | None:
        return None


@dataclass(frozen=True)
class FallbackColours(FileColours):
    """Ask the first colouriser, then the second if the first has no answer."""

    first: FileColours
    second: FileColours

    def colour_file(self, name: str) -> Style | None:
        style = self.first.colour_file(name)
        return style if style is not None else self.second.colour_file(name)


@dataclass
class ExtensionMappings(FileColours):
    """Glob patterns paired with styles; later entries take precedence."""

    mappings: list[tuple[str, Style]] = field(default_factory=list)
    _compiled: list[tuple[re.Pattern[str], Style]] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self.mappings = list(self.mappings)
        self._compiled = [(_glob_to_regex(p), s) for p, s in self.mappings]

    def add(self, pattern: str, style: Style) -> None:
        """Append a mapping; raise ValueError if the glob is malformed."""
        compiled = _glob_to_regex(pattern)
        self.mappings.append((pattern, style))
        self._compiled.append((compiled, style))

    def is_non_empty(self) -> bool:
        return bool(self.mappings)

    def colour_file(self, name: str) -> Style | None:
        for regex, style in reversed(self._compiled):
            if regex.fullmatch(name):
                return style
        return None