"""Building a complete theme from options and colour definition strings."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from .filecolours import (
    ExtensionMappings,
    FallbackColours,
    FileColours,
    NoFileColours,
    apply_overlay,
)
from .lsc import LSColors
from .style import Style
from .ui_styles import ColourScale, UiStyles

logger = logging.getLogger(__name__)


class UseColours(Enum):
    """When coloured, rather than plain, output should be produced."""

    ALWAYS = "always"
    """Colour even when output is not going to a terminal."""

    AUTOMATIC = "automatic"
    """Colour only when output is going to a terminal."""

    NEVER = "never"
    """Never colour, even on a terminal."""


class Prefix(Enum):
    """Decimal and binary magnitude prefixes for file sizes."""

    KILO = "k"
    MEGA = "M"
    GIGA = "G"
    TERA = "T"
    PETA = "P"
    EXA = "E"
    ZETTA = "Z"
    YOTTA = "Y"
    KIBI = "Ki"
    MEBI = "Mi"
    GIBI = "Gi"
    TEBI = "Ti"
    PEBI = "Pi"
    EXBI = "Ei"
    ZEBI = "Zi"
    YOBI = "Yi"


_MAGNITUDES = {
    None: "byte",
    Prefix.KILO: "kilo",
    Prefix.KIBI: "kilo",
    Prefix.MEGA: "mega",
    Prefix.MEBI: "mega",
    Prefix.GIGA: "giga",
    Prefix.GIBI: "giga",
}


def _magnitude(prefix: Prefix | None) -> str:
    return _MAGNITUDES.get(prefix, "huge")


@dataclass
class Definitions:
    """The raw LS_COLORS and EXA_COLORS strings, if they were given."""

    ls: str | None = None
    exa: str | None = None

    def parse_color_vars(self, colours: UiStyles) -> tuple[ExtensionMappings, bool]:
        """Apply both definition strings to ``colours``.

        Keys that name a part of the interface modify ``colours``; every other
        key is taken as a file-name glob. Returns the glob mappings, and
        whether the default file type colours should still be used, which is
        not the case when the EXA_COLORS string begins with ``reset``.
        """
        exts = ExtensionMappings()

        def add_glob(key: str, style: Style) -> None:
            try:
                exts.add(key, style)
            except ValueError as error:
                logger.warning("Couldn't parse glob pattern %r: %s", key, error)

        if self.ls is not None:
            for pair in LSColors(self.ls).each_pair():
                if not colours.set_ls(pair):
                    add_glob(pair.key, pair.to_style())

        use_default_filetypes = True

        if self.exa is not None:
            if self.exa == "reset" or self.exa.startswith("reset:"):
                use_default_filetypes = False

            for pair in LSColors(self.exa).each_pair():
                if not colours.set_ls(pair) and not colours.set_exa(pair):
                    add_glob(pair.key, pair.to_style())

        return exts, use_default_filetypes


@dataclass
class Theme:
    """Interface styles together with the file name colouriser."""

    ui: UiStyles
    exts: FileColours = field(default_factory=NoFileColours)

    def size(self, prefix: Prefix | None) -> Style:
        """The style for the number part of a size with this prefix."""
        return getattr(self.ui.size, f"number_{_magnitude(prefix)}")

    def unit(self, prefix: Prefix | None) -> Style:
        """The style for the unit part of a size with this prefix."""
        return getattr(self.ui.size, f"unit_{_magnitude(prefix)}")

    def broken_filename(self) -> Style:
        """The style for the target path of a broken symlink."""
        return apply_overlay(self.ui.broken_symlink, self.ui.broken_path_overlay)

    def broken_control_char(self) -> Style:
        """The style for a control character in a broken symlink's path."""
        return apply_overlay(self.ui.control_char, self.ui.broken_path_overlay)

    def colour_file(self, name: str) -> Style:
        """The style for a file name, falling back to the normal file style."""
        style = self.exts.colour_file(name)
        return style if style is not None else self.ui.filekinds.normal


@dataclass
class Options:
    """Everything that decides how output is coloured."""

    use_colours: UseColours = UseColours.AUTOMATIC
    colour_scale: ColourScale = ColourScale.FIXED
    definitions: Definitions = field(default_factory=Definitions)

    def to_theme(self, isatty: bool, defaults: FileColours | None = None) -> Theme:
        """Build the theme to use.

        ``defaults`` is the built-in file type colouriser, consulted after any
        user-defined globs unless EXA_COLORS asks for a reset.
        """
        if self.use_colours is UseColours.NEVER or (
            self.use_colours is UseColours.AUTOMATIC and not isatty
        ):
            return Theme(UiStyles.plain(), NoFileColours())

        ui = UiStyles.default_theme(self.colour_scale)
        exts, use_default_filetypes = self.definitions.parse_color_vars(ui)
        default_colours = defaults if use_default_filetypes else None

        colouriser: FileColours
        if exts.is_non_empty() and default_colours is not None:
            colouriser = FallbackColours(exts, default_colours)
        elif exts.is_non_empty():
            colouriser = exts
        elif default_colours is not None:
            colouriser = default_colours
        else:
            colouriser = NoFileColours()

        return Theme(ui, colouriser)