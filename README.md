# lstheme

Turn the `LS_COLORS` and `EXA_COLORS` environment variables into a theme of
terminal styles for a file listing: one style per part of the interface
(file kinds, permission bits, sizes, users, links, Git status, dates and so
on), plus glob patterns that colour file names.

## Installation

```
pip install lstheme
```

The package has no runtime dependencies.

## Styles

`lstheme.style` holds the building blocks. `Colour` is an enum of the eight
basic terminal colours (`Colour.Black`, `Colour.Red`, `Colour.Green`,
`Colour.Yellow`, `Colour.Blue`, `Colour.Purple`, `Colour.Cyan`,
`Colour.White`); `Fixed(n)` is a 256-colour palette entry and
`RGB(r, g, b)` a true colour. Components outside 0–255 raise `ValueError`.

`Style` is a frozen dataclass with a foreground, a background and eight
attribute flags. Its methods `bold`, `dimmed`, `italic`, `underline`,
`blink`, `reverse`, `hidden`, `strikethrough`, `fg` and `on` each return a
new style. Colours have shortcuts `normal`, `bold`, `underline` and `on`:

```python
from lstheme.style import RGB, Colour, Style

Colour.Red.on(Colour.Yellow)
Style().bold().underline()
Style().fg(RGB(255, 100, 0))
```

## Parsing colour definitions

`lstheme.lsc.each_pair` splits a colour string on `:` and yields a `Pair`
for every well-formed `key=value` entry; entries with an empty key or value,
or more than one `=`, are skipped. `Pair.to_style` turns the value, a list
of ANSI SGR codes separated by `;`, into a `Style`. Leading zeros are
ignored, `38;5;N`/`48;5;N` and `38;2;R;G;B`/`48;2;R;G;B` give high colours,
and unknown codes are ignored.

```python
from lstheme.lsc import each_pair
from lstheme.style import Colour, Fixed

pairs = list(each_pair("di=1;34:*.mp3=38;5;135"))
assert pairs[0].key == "di"
assert pairs[0].to_style() == Colour.Blue.bold()
assert pairs[1].to_style() == Fixed(135).normal()
```

## Interface styles

`lstheme.ui_styles.UiStyles` holds a style for every colourable part of the
interface, grouped into `FileKinds`, `Permissions`, `Size`, `Users`,
`Links` and `Git`. `UiStyles.plain()` has every style empty;
`UiStyles.default_theme(scale)` is the built-in colourful theme, where
`scale` is `ColourScale.Fixed` (all size numbers bold green) or
`ColourScale.Gradient` (a different colour per magnitude).

`UiStyles.set_ls(pair)` applies an `LS_COLORS` key (`di`, `ex`, `fi`, `pi`,
`so`, `bd`, `cd`, `ln`, `or`) and `UiStyles.set_exa(pair)` one of the
`EXA_COLORS`-only keys: permissions (`ur`, `uw`, `ux`, `ue`, `gr`, `gw`,
`gx`, `tr`, `tw`, `tx`, `su`, `sf`, `xa`), sizes (`sn`, `sb`, `nb`, `nk`,
`nm`, `ng`, `nh`, `ub`, `uk`, `um`, `ug`, `uh`, `df`, `ds`), users (`uu`,
`un`, `gu`, `gn`), links (`lc`, `lm`), Git (`ga`, `gm`, `gd`, `gv`, `gt`)
and `xx`, `da`, `in`, `bl`, `hd`, `lp`, `cc`, `bO`. Both return `False` for
a key they do not know.

## File-name patterns

`lstheme.patterns.GlobPattern` is a case-sensitive shell glob (`?`, `*`,
`**` as a whole path component, `[...]` and `[!...]`) matched against whole
names; a malformed pattern raises `PatternError`, a `ValueError`.
`ExtensionMappings` keeps `(pattern, style)` pairs; `colour_file(name)`
returns the style of the last added pattern that matches, or `None`.

## Building a theme

```python
import os

from lstheme.theme import Definitions, Options, UseColours
from lstheme.ui_styles import ColourScale

options = Options(
    use_colours=UseColours.Automatic,
    colour_scale=ColourScale.Gradient,
    definitions=Definitions(
        ls=os.environ.get("LS_COLORS"),
        exa=os.environ.get("EXA_COLORS"),
    ),
)
theme = options.to_theme(isatty=True)

theme.ui.filekinds.directory    # style for directories
theme.colour_file("notes.txt")  # style for a file name
```

With `UseColours.Never`, or `UseColours.Automatic` when output is not a
terminal, the theme is plain: every style is empty and no file name is
coloured.

Otherwise the default theme is amended by `Definitions.parse_color_vars`.
`LS_COLORS` keys that `set_ls` knows set file-kind styles; every other key
is taken as a glob pattern for file names. `EXA_COLORS` understands the
`set_ls` and `set_exa` keys, and its other keys are also globs. Later
entries win over earlier ones, and `EXA_COLORS` is applied after
`LS_COLORS`. Keys that are not valid globs are logged as a warning through
the `lstheme.theme` logger and skipped.

`Theme.exts` holds the glob mappings, or `None` when there are none.
`Theme.colour_file(name)` returns the matching style, falling back to
`theme.ui.filekinds.normal`.

## Sizes and overlays

`Theme.size_style(prefix)` and `Theme.unit_style(prefix)` pick the style for
a file size number or unit by its `Prefix` (`Prefix.Kilo`, `Prefix.Mebi`
and so on, or `None` for plain bytes); prefixes above giga share the "huge"
style. `apply_overlay(base, overlay)` lays the colours and attributes that
one style sets over another; `Theme.broken_filename()` and
`Theme.broken_control_char()` use it to mark broken symlink targets.

## What it does not do

The package builds styles; it does not list directories, inspect files or
write escape codes to a terminal. There is no built-in table of colours by
file type: when `EXA_COLORS` starts with `reset`, `Theme.use_default_filetypes`
is `False`, and it is left to the caller to honour that flag with its own
file type colouring.

## Running the tests

```
pip install "lstheme[test]"
pytest
```