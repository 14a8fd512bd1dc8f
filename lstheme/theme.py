"""Building a complete colour theme from user options and environment strings."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum

from lstheme.lsc import each_pair
from lstheme.patterns import ExtensionMappings, GlobPattern, PatternError
from lstheme.style import Style
from lstheme.ui_styles import ColourScale, UiStyles

logger = logging.getLogger(__name__)


class UseColours(Enum):
    """Under what circumstances coloured output is displayed."""

    Always = "always"
    Automatic = "automatic"
    Never = "never"


class Prefix(Enum):
    """Decimal and binary magnitude prefixes used when showing file sizes."""

    Kilo = "k"
    Mega = "M"
    Giga = "G"
    Tera = "T"
    Peta = "P"
    Exa = "E"
    Zetta = "Z"
    Yotta = "Y"
    Kibi = "Ki"
    Mebi = "Mi"
    Gibi = "Gi"
    Tebi = "Ti"
    Pebi = "Pi"
    Exbi = "Ei"
    Zebi = "Zi"
    Yobi = "Yi"


_MAGNITUDES = {
    None: "byte",
    Prefix.Kilo: "kilo",
    Prefix.Kibi: "kilo",
    Prefix.Mega: "mega",
    Prefix.Mebi: "mega",
    Prefix.Giga: "giga",
    Prefix.Gibi: "giga",
}


def _magnitude(prefix: Prefix | None) -> str:
    return _MAGNITUDES.get(prefix, "huge")


def apply_overlay(base: Style, overlay: Style) -> Style:
    """Amend ``base`` with every colour and attribute that ``overlay`` sets."""
    changes: dict[str, object] = {}
    if overlay.foreground is not None:
        changes["foreground"] = overlay.foreground
    if overlay.background is not None:
        changes["background"] = overlay.background
    for attribute in (
        "is_bold",
        "is_dimmed",
        "is_italic",
        "is_underline",
        "is_blink",
        "is_reverse",
        "is_hidden",
        "is_strikethrough",
    ):
        if getattr(overlay, attribute):
            changes[attribute] = True
    return replace(base, **changes)


def _add_glob(exts: ExtensionMappings, key: str, style: Style) -> None:
    try:
        pattern = GlobPattern(key)
    except PatternError as error:
        logger.warning("Couldn't parse glob pattern %r: %s", key, error)
        return
    exts.add(pattern, style)


@dataclass
class Definitions:
    """The raw LS_COLORS and EXA_COLORS strings, if they were set."""

    ls: str | None = None
    exa: str | None = None

    def parse_color_vars(self, colours: UiStyles) -> tuple[ExtensionMappings, bool]:
        """Apply UI codes to ``colours`` and collect the file-name globs.

        Returns the glob mappings, and whether the default file type
        colours should still be used (EXA_COLORS starting with ``reset``
        turns them off).
        """
        exts = ExtensionMappings()

        if self.ls is not None:
            for pair in each_pair(self.ls):
                if not colours.set_ls(pair):
                    _add_glob(exts, pair.key, pair.to_style())

        use_default_filetypes = True

        if self.exa is not None:
            if self.exa == "reset" or self.exa.startswith("reset:"):
                use_default_filetypes = False

            for pair in each_pair(self.exa):
                if not colours.set_ls(pair) and not colours.set_exa(pair):
                    _add_glob(exts, pair.key, pair.to_style())

        return exts, use_default_filetypes


@dataclass
class Theme:
    """The interface styles plus the user's file-name colour mappings."""

    ui: UiStyles
    exts: ExtensionMappings | None = None
    use_default_filetypes: bool = False

    def colour_file(self, name: str) -> Style:
        """The style for a file name, falling back to the normal file style."""
        if self.exts is not None:
            style = self.exts.colour_file(name)
            if style is not None:
                return style
        return self.ui.filekinds.normal

    def broken_filename(self) -> Style:
        """The style for the target of a broken symlink."""
        return apply_overlay(self.ui.broken_symlink, self.ui.broken_path_overlay)

    def broken_control_char(self) -> Style:
        """The style for a control character in a broken symlink's target."""
        return apply_overlay(self.ui.control_char, self.ui.broken_path_overlay)

    def size_style(self, prefix: Prefix | None) -> Style:
        """The style for the number part of a size with the given prefix."""
        return getattr(self.ui.size, f"number_{_magnitude(prefix)}")

    def unit_style(self, prefix: Prefix | None) -> Style:
        """The style for the unit part of a size with the given prefix."""
        return getattr(self.ui.size, f"unit_{_magnitude(prefix)}")


@dataclass
class Options:
    """The user's choices about how output is coloured."""

    use_colours: UseColours
    colour_scale: ColourScale
    definitions: Definitions = field(default_factory=Definitions)

    def to_theme(self, isatty: bool) -> Theme:
        """Build the theme, plain if colours are off for this output."""
        if self.use_colours is UseColours.Never or (
            self.use_colours is UseColours.Automatic and not isatty
        ):
            return Theme(ui=UiStyles.plain(), exts=None, use_default_filetypes=False)

        ui = UiStyles.default_theme(self.colour_scale)
        exts, use_default_filetypes = self.definitions.parse_color_vars(ui)
        return Theme(
            ui=ui,
            exts=exts if exts.is_non_empty() else None,
            use_default_filetypes=use_default_filetypes,
        )