"""The set of styles used for every colourable part of a listing."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .lsc import Pair
from .style import Colour, Fixed, Style


class ColourScale(Enum):
    """How file sizes are coloured: one colour, or a gradient by magnitude."""

    FIXED = "fixed"
    GRADIENT = "gradient"


def _style() -> Style:
    return field(default_factory=Style)


@dataclass
class FileKinds:
    normal: Style = _style()
    directory: Style = _style()
    symlink: Style = _style()
    pipe: Style = _style()
    block_device: Style = _style()
    char_device: Style = _style()
    socket: Style = _style()
    special: Style = _style()
    executable: Style = _style()


@dataclass
class Permissions:
    user_read: Style = _style()
    user_write: Style = _style()
    user_execute_file: Style = _style()
    user_execute_other: Style = _style()

    group_read: Style = _style()
    group_write: Style = _style()
    group_execute: Style = _style()

    other_read: Style = _style()
    other_write: Style = _style()
    other_execute: Style = _style()

    special_user_file: Style = _style()
    special_other: Style = _style()

    attribute: Style = _style()


@dataclass
class Size:
    major: Style = _style()
    minor: Style = _style()

    number_byte: Style = _style()
    number_kilo: Style = _style()
    number_mega: Style = _style()
    number_giga: Style = _style()
    number_huge: Style = _style()

    unit_byte: Style = _style()
    unit_kilo: Style = _style()
    unit_mega: Style = _style()
    unit_giga: Style = _style()
    unit_huge: Style = _style()

    @classmethod
    def colourful(cls, scale: ColourScale) -> Size:
        """The coloured size styles for the given scale."""
        if scale is ColourScale.GRADIENT:
            numbers = [Fixed(n).normal() for n in (118, 190, 226, 220, 214)]
        elif scale is ColourScale.FIXED:
            numbers = [Colour.GREEN.bold()] * 5
        else:
            raise ValueError(f"unknown colour scale: {scale!r}")
        unit = Colour.GREEN.normal()
        byte, kilo, mega, giga, huge = numbers
        return cls(
            major=Colour.GREEN.bold(),
            minor=Colour.GREEN.normal(),
            number_byte=byte,
            number_kilo=kilo,
            number_mega=mega,
            number_giga=giga,
            number_huge=huge,
            unit_byte=unit,
            unit_kilo=unit,
            unit_mega=unit,
            unit_giga=unit,
            unit_huge=unit,
        )


@dataclass
class Users:
    user_you: Style = _style()
    user_someone_else: Style = _style()
    group_yours: Style = _style()
    group_not_yours: Style = _style()


@dataclass
class Links:
    normal: Style = _style()
    multi_link_file: Style = _style()


@dataclass
class Git:
    new: Style = _style()
    modified: Style = _style()
    deleted: Style = _style()
    renamed: Style = _style()
    typechange: Style = _style()
    ignored: Style = _style()
    conflicted: Style = _style()


# Keys understood in LS_COLORS, mapped to (section, attribute); a section of
# None means the attribute lives on UiStyles itself.
_LS_KEYS: dict[str, tuple[str | None, str]] = {
    "di": ("filekinds", "directory"),
    "ex": ("filekinds", "executable"),
    "fi": ("filekinds", "normal"),
    "pi": ("filekinds", "pipe"),
    "so": ("filekinds", "socket"),
    "bd": ("filekinds", "block_device"),
    "cd": ("filekinds", "char_device"),
    "ln": ("filekinds", "symlink"),
    "or": (None, "broken_symlink"),
}

_EXA_KEYS: dict[str, tuple[str | None, str]] = {
    "ur": ("perms", "user_read"),
    "uw": ("perms", "user_write"),
    "ux": ("perms", "user_execute_file"),
    "ue": ("perms", "user_execute_other"),
    "gr": ("perms", "group_read"),
    "gw": ("perms", "group_write"),
    "gx": ("perms", "group_execute"),
    "tr": ("perms", "other_read"),
    "tw": ("perms", "other_write"),
    "tx": ("perms", "other_execute"),
    "su": ("perms", "special_user_file"),
    "sf": ("perms", "special_other"),
    "xa": ("perms", "attribute"),
    "nb": ("size", "number_byte"),
    "nk": ("size", "number_kilo"),
    "nm": ("size", "number_mega"),
    "ng": ("size", "number_giga"),
    "nh": ("size", "number_huge"),
    "ub": ("size", "unit_byte"),
    "uk": ("size", "unit_kilo"),
    "um": ("size", "unit_mega"),
    "ug": ("size", "unit_giga"),
    "uh": ("size", "unit_huge"),
    "df": ("size", "major"),
    "ds": ("size", "minor"),
    "uu": ("users", "user_you"),
    "un": ("users", "user_someone_else"),
    "gu": ("users", "group_yours"),
    "gn": ("users", "group_not_yours"),
    "lc": ("links", "normal"),
    "lm": ("links", "multi_link_file"),
    "ga": ("git", "new"),
    "gm": ("git", "modified"),
    "gd": ("git", "deleted"),
    "gv": ("git", "renamed"),
    "gt": ("git", "typechange"),
    "xx": (None, "punctuation"),
    "da": (None, "date"),
    "in": (None, "inode"),
    "bl": (None, "blocks"),
    "hd": (None, "header"),
    "lp": (None, "symlink_path"),
    "cc": (None, "control_char"),
    "bO": (None, "broken_path_overlay"),
}


@dataclass
class UiStyles:
    """One style for each part of the interface that can be coloured."""

    colourful: bool = False

    filekinds: FileKinds = field(default_factory=FileKinds)
    perms: Permissions = field(default_factory=Permissions)
    size: Size = field(default_factory=Size)
    users: Users = field(default_factory=Users)
    links: Links = field(default_factory=Links)
    git: Git = field(default_factory=Git)

    punctuation: Style = _style()
    date: Style = _style()
    inode: Style = _style()
    blocks: Style = _style()
    header: Style = _style()
    octal: Style = _style()

    symlink_path: Style = _style()
    control_char: Style = _style()
    broken_symlink: Style = _style()
    broken_path_overlay: Style = _style()

    @classmethod
    def plain(cls) -> UiStyles:
        """Styles that add no colour or formatting at all."""
        return cls()

    @classmethod
    def default_theme(cls, scale: ColourScale) -> UiStyles:
        """The built-in colourful theme."""
        return cls(
            colourful=True,
            filekinds=FileKinds(
                normal=Style(),
                directory=Colour.BLUE.bold(),
                symlink=Colour.CYAN.normal(),
                pipe=Colour.YELLOW.normal(),
                block_device=Colour.YELLOW.bold(),
                char_device=Colour.YELLOW.bold(),
                socket=Colour.RED.bold(),
                special=Colour.YELLOW.normal(),
                executable=Colour.GREEN.bold(),
            ),
            perms=Permissions(
                user_read=Colour.YELLOW.bold(),
                user_write=Colour.RED.bold(),
                user_execute_file=Colour.GREEN.bold().underline(),
                user_execute_other=Colour.GREEN.bold(),
                group_read=Colour.YELLOW.normal(),
                group_write=Colour.RED.normal(),
                group_execute=Colour.GREEN.normal(),
                other_read=Colour.YELLOW.normal(),
                other_write=Colour.RED.normal(),
                other_execute=Colour.GREEN.normal(),
                special_user_file=Colour.PURPLE.normal(),
                special_other=Colour.PURPLE.normal(),
                attribute=Style(),
            ),
            size=Size.colourful(scale),
            users=Users(
                user_you=Colour.YELLOW.bold(),
                user_someone_else=Style(),
                group_yours=Colour.YELLOW.bold(),
                group_not_yours=Style(),
            ),
            links=Links(
                normal=Colour.RED.bold(),
                multi_link_file=Colour.RED.on(Colour.YELLOW),
            ),
            git=Git(
                new=Colour.GREEN.normal(),
                modified=Colour.BLUE.normal(),
                deleted=Colour.RED.normal(),
                renamed=Colour.YELLOW.normal(),
                typechange=Colour.PURPLE.normal(),
                ignored=Style().dimmed(),
                conflicted=Colour.RED.normal(),
            ),
            punctuation=Fixed(244).normal(),
            date=Colour.BLUE.normal(),
            inode=Colour.PURPLE.normal(),
            blocks=Colour.CYAN.normal(),
            octal=Colour.PURPLE.normal(),
            header=Style().underline(),
            symlink_path=Colour.CYAN.normal(),
            control_char=Colour.RED.normal(),
            broken_symlink=Colour.RED.normal(),
            broken_path_overlay=Style().underline(),
        )

    def _assign(self, target: tuple[str | None, str], style: Style) -> None:
        section, attribute = target
        owner = self if section is None else getattr(self, section)
        setattr(owner, attribute, style)

    def set_ls(self, pair: Pair) -> bool:
        """Apply a pair using an LS_COLORS key; return False if the key is unknown."""
        target = _LS_KEYS.get(pair.key)
        if target is None:
            return False
        self._assign(target, pair.to_style())
        return True

    def set_exa(self, pair: Pair) -> bool:
        """Apply a pair using an EXA_COLORS-only key; return False if unknown.

        LS_COLORS keys are not handled here, so set_ls should be tried first.
        """
        if pair.key == "sn":
            self.set_number_style(pair.to_style())
            return True
        if pair.key == "sb":
            self.set_unit_style(pair.to_style())
            return True
        target = _EXA_KEYS.get(pair.key)
        if target is None:
            return False
        self._assign(target, pair.to_style())
        return True

    def set_number_style(self, style: Style) -> None:
        """Use one style for the numbers of every size magnitude."""
        self.size.number_byte = style
        self.size.number_kilo = style
        self.size.number_mega = style
        self.size.number_giga = style
        self.size.number_huge = style

    def set_unit_style(self, style: Style) -> None:
        """Use one style for the units of every size magnitude."""
        self.size.unit_byte = style
        self.size.unit_kilo = style
        self.size.unit_mega = style
        self.size.unit_giga = style
        self.size.unit_huge = style