"""The set of styles used for each colourable part of the interface."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from lstheme.lsc import Pair
from lstheme.style import Colour, Fixed, Style


class ColourScale(Enum):
    """How file sizes are coloured: one colour, or a gradient by magnitude."""

    Fixed = "fixed"
    Gradient = "gradient"


@dataclass
class FileKinds:
    """Styles for the different kinds of file."""

    normal: Style = field(default_factory=Style)
    directory: Style = field(default_factory=Style)
    symlink: Style = field(default_factory=Style)
    pipe: Style = field(default_factory=Style)
    block_device: Style = field(default_factory=Style)
    char_device: Style = field(default_factory=Style)
    socket: Style = field(default_factory=Style)
    special: Style = field(default_factory=Style)
    executable: Style = field(default_factory=Style)


@dataclass
class Permissions:
    """Styles for the permission bits."""

    user_read: Style = field(default_factory=Style)
    user_write: Style = field(default_factory=Style)
    user_execute_file: Style = field(default_factory=Style)
    user_execute_other: Style = field(default_factory=Style)

    group_read: Style = field(default_factory=Style)
    group_write: Style = field(default_factory=Style)
    group_execute: Style = field(default_factory=Style)

    other_read: Style = field(default_factory=Style)
    other_write: Style = field(default_factory=Style)
    other_execute: Style = field(default_factory=Style)

    special_user_file: Style = field(default_factory=Style)
    special_other: Style = field(default_factory=Style)

    attribute: Style = field(default_factory=Style)


@dataclass
class Size:
    """Styles for file sizes and device numbers."""

    major: Style = field(default_factory=Style)
    minor: Style = field(default_factory=Style)

    number_byte: Style = field(default_factory=Style)
    number_kilo: Style = field(default_factory=Style)
    number_mega: Style = field(default_factory=Style)
    number_giga: Style = field(default_factory=Style)
    number_huge: Style = field(default_factory=Style)

    unit_byte: Style = field(default_factory=Style)
    unit_kilo: Style = field(default_factory=Style)
    unit_mega: Style = field(default_factory=Style)
    unit_giga: Style = field(default_factory=Style)
    unit_huge: Style = field(default_factory=Style)

    @classmethod
    def colourful(cls, scale: ColourScale) -> Size:
        """The default colourful size styles for the given scale."""
        if scale is ColourScale.Gradient:
            numbers = (
                Fixed(118).normal(),
                Fixed(190).normal(),
                Fixed(226).normal(),
                Fixed(220).normal(),
                Fixed(214).normal(),
            )
        elif scale is ColourScale.Fixed:
            numbers = (Colour.Green.bold(),) * 5
        else:
            raise ValueError(f"unknown colour scale: {scale!r}")

        unit = Colour.Green.normal()
        byte, kilo, mega, giga, huge = numbers
        return cls(
            major=Colour.Green.bold(),
            minor=Colour.Green.normal(),
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
    """Styles for user and group names."""

    user_you: Style = field(default_factory=Style)
    user_someone_else: Style = field(default_factory=Style)
    group_yours: Style = field(default_factory=Style)
    group_not_yours: Style = field(default_factory=Style)


@dataclass
class Links:
    """Styles for hard-link counts."""

    normal: Style = field(default_factory=Style)
    multi_link_file: Style = field(default_factory=Style)


@dataclass
class Git:
    """Styles for Git status flags."""

    new: Style = field(default_factory=Style)
    modified: Style = field(default_factory=Style)
    deleted: Style = field(default_factory=Style)
    renamed: Style = field(default_factory=Style)
    typechange: Style = field(default_factory=Style)
    ignored: Style = field(default_factory=Style)
    conflicted: Style = field(default_factory=Style)


_LS_KEYS: dict[str, tuple[str, ...]] = {
    "di": ("filekinds", "directory"),
    "ex": ("filekinds", "executable"),
    "fi": ("filekinds", "normal"),
    "pi": ("filekinds", "pipe"),
    "so": ("filekinds", "socket"),
    "bd": ("filekinds", "block_device"),
    "cd": ("filekinds", "char_device"),
    "ln": ("filekinds", "symlink"),
    "or": ("broken_symlink",),
}

_EXA_KEYS: dict[str, tuple[str, ...]] = {
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
    "xx": ("punctuation",),
    "da": ("date",),
    "in": ("inode",),
    "bl": ("blocks",),
    "hd": ("header",),
    "lp": ("symlink_path",),
    "cc": ("control_char",),
    "bO": ("broken_path_overlay",),
}


@dataclass
class UiStyles:
    """One style for every part of the interface that can be coloured."""

    colourful: bool = False

    filekinds: FileKinds = field(default_factory=FileKinds)
    perms: Permissions = field(default_factory=Permissions)
    size: Size = field(default_factory=Size)
    users: Users = field(default_factory=Users)
    links: Links = field(default_factory=Links)
    git: Git = field(default_factory=Git)

    punctuation: Style = field(default_factory=Style)
    date: Style = field(default_factory=Style)
    inode: Style = field(default_factory=Style)
    blocks: Style = field(default_factory=Style)
    header: Style = field(default_factory=Style)
    octal: Style = field(default_factory=Style)

    symlink_path: Style = field(default_factory=Style)
    control_char: Style = field(default_factory=Style)
    broken_symlink: Style = field(default_factory=Style)
    broken_path_overlay: Style = field(default_factory=Style)

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
                directory=Colour.Blue.bold(),
                symlink=Colour.Cyan.normal(),
                pipe=Colour.Yellow.normal(),
                block_device=Colour.Yellow.bold(),
                char_device=Colour.Yellow.bold(),
                socket=Colour.Red.bold(),
                special=Colour.Yellow.normal(),
                executable=Colour.Green.bold(),
            ),
            perms=Permissions(
                user_read=Colour.Yellow.bold(),
                user_write=Colour.Red.bold(),
                user_execute_file=Colour.Green.bold().underline(),
                user_execute_other=Colour.Green.bold(),
                group_read=Colour.Yellow.normal(),
                group_write=Colour.Red.normal(),
                group_execute=Colour.Green.normal(),
                other_read=Colour.Yellow.normal(),
                other_write=Colour.Red.normal(),
                other_execute=Colour.Green.normal(),
                special_user_file=Colour.Purple.normal(),
                special_other=Colour.Purple.normal(),
                attribute=Style(),
            ),
            size=Size.colourful(scale),
            users=Users(
                user_you=Colour.Yellow.bold(),
                user_someone_else=Style(),
                group_yours=Colour.Yellow.bold(),
                group_not_yours=Style(),
            ),
            links=Links(
                normal=Colour.Red.bold(),
                multi_link_file=Colour.Red.on(Colour.Yellow),
            ),
            git=Git(
                new=Colour.Green.normal(),
                modified=Colour.Blue.normal(),
                deleted=Colour.Red.normal(),
                renamed=Colour.Yellow.normal(),
                typechange=Colour.Purple.normal(),
                ignored=Style().dimmed(),
                conflicted=Colour.Red.normal(),
            ),
            punctuation=Fixed(244).normal(),
            date=Colour.Blue.normal(),
            inode=Colour.Purple.normal(),
            blocks=Colour.Cyan.normal(),
            octal=Colour.Purple.normal(),
            header=Style().underline(),
            symlink_path=Colour.Cyan.normal(),
            control_char=Colour.Red.normal(),
            broken_symlink=Colour.Red.normal(),
            broken_path_overlay=Style().underline(),
        )

    def _assign(self, path: tuple[str, ...], style: Style) -> None:
        *parents, name = path
        target: object = self
        for parent in parents:
            target = getattr(target, parent)
        setattr(target, name, style)

    def set_ls(self, pair: Pair) -> bool:
        """Apply a pair using an LS_COLORS key; return False if the key is unknown."""
        path = _LS_KEYS.get(pair.key)
        if path is None:
            return False
        self._assign(path, pair.to_style())
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
        path = _EXA_KEYS.get(pair.key)
        if path is None:
            return False
        self._assign(path, pair.to_style())
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