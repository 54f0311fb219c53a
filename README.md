# lstheme

`lstheme` turns the `LS_COLORS` and `EXA_COLORS` strings into a theme for a
coloured file listing. Each part of the listing that can be coloured gets one
`Style`. These parts are file kinds, permission bits, sizes, users, links, git
status, dates and so on. File name globs pick a style for each file name.

The package uses only the standard library.

## Installation

```
pip install lstheme
```

## Styles

`lstheme.style` models terminal styles:

- `Colour` is one of the eight basic colours, such as `Colour.RED`.
- `Fixed(n)` is an index into the 256-colour palette.
- `RGB(r, g, b)` is a true colour.

Every channel must be an integer from 0 to 255. Other values raise `ValueError`, and values that are not integers raise `TypeError`.

`Style` is a frozen dataclass. It holds a `foreground`, a `background` and the
flags `is_bold`, `is_dimmed`, `is_italic`, `is_underline`, `is_blink`,
`is_reverse`, `is_hidden` and `is_strikethrough`. Every modifier returns a new
style:

- `bold()`, `dimmed()`, `italic()`, `underline()`, `blink()`, `reverse()`,
  `hidden()` and `strikethrough()` turn on one flag.
- `fg(colour)` sets the foreground colour.
- `on(colour)` sets the background colour.

The colour classes have `normal()`, `bold()`, `underline()` and
`on(background)` as shortcuts. Each one starts a style with that colour as the
foreground.

```python
from lstheme.style import Colour, Fixed, Style

Colour.RED.on(Colour.YELLOW).bold()
Style().fg(Fixed(149)).underline()
```

## Reading a colour string

`lstheme.lsc.LSColors` splits a colon-separated string into `Pair(key, value)`
entries. Entries without exactly one `=`, or with an empty key or value, are
skipped.

`Pair.to_style()` decodes the semicolon-separated SGR codes of the value. It
reads:

- the attributes 1–5 and 7–9
- the foregrounds 30–37
- the backgrounds 40–47
- `38;5;n` and `48;5;n` for palette colours
- `38;2;r;g;b` and `48;2;r;g;b` for true colours

Leading zeros are ignored. Unknown or out-of-range codes are skipped.

```python
from lstheme.lsc import LSColors

for pair in LSColors("di=01;34:*.txt=38;5;149").each_pair():
    print(pair.key, pair.to_style())
```

## Interface styles

`lstheme.ui_styles.UiStyles` holds one style for every part of the interface.
It groups them into these sections:

- `filekinds`
- `perms`
- `size`
- `users`
- `links`
- `git`

Some styles sit on `UiStyles` itself rather than in a section:

- `punctuation`
- `date`
- `inode`
- `blocks`
- `header`
- `octal`
- `symlink_path`
- `control_char`
- `broken_symlink`
- `broken_path_overlay`

There are two ready-made sets of styles:

- `UiStyles.plain()` applies no formatting at all.
- `UiStyles.default_theme(scale)` gives the built-in colours.

`scale` is a `ColourScale`. With `FIXED`, every size is the same green. With `GRADIENT`, sizes are coloured from the 256-colour palette according to their magnitude.

Three methods apply a `Pair` or a style:

- `set_ls(pair)` applies the keys that `ls` knows: `di`, `ex`, `fi`, `pi`,
  `so`, `bd`, `cd`, `ln` and `or`.
- `set_exa(pair)` applies the extra keys that only `EXA_COLORS` has. These cover
  permissions (`ur`, `uw`, `ux`, …), sizes, users, links, git and
  punctuation (`xx`). They also cover dates (`da`), inodes (`in`), blocks
  (`bl`), headers (`hd`), link paths (`lp`), control characters (`cc`) and
  the broken-path overlay (`bO`). `sn` and `sb` set every size number or unit
  style at once. The same can be done directly with `set_number_style` and
  `set_unit_style`.
- Both `set_ls` and `set_exa` return `False` for a key they do not know.

## File name colours

`lstheme.filecolours` picks a style from a file name:

- `ExtensionMappings` keeps a list of glob patterns with their styles. Each
  glob must match the whole name, and the mapping added last wins. `add`
  raises `ValueError` for a malformed glob.
- `NoFileColours` never gives a style.
- `FallbackColours(first, second)` asks `first` and then, if `first` has no
  answer, asks `second`.
- `apply_overlay(base, overlay)` copies onto `base` the colours and flags that
  are set in `overlay`.

## Building a theme

`lstheme.theme.Options` combines `use_colours` (`UseColours.ALWAYS`,
`AUTOMATIC` or `NEVER`), a `colour_scale` and `Definitions(ls=..., exa=...)`:

```python
import os
import sys

from lstheme.theme import Definitions, Options, Prefix, UseColours
from lstheme.ui_styles import ColourScale

options = Options(
    use_colours=UseColours.AUTOMATIC,
    colour_scale=ColourScale.FIXED,
    definitions=Definitions(
        ls=os.environ.get("LS_COLORS"),
        exa=os.environ.get("EXA_COLORS"),
    ),
)
theme = options.to_theme(sys.stdout.isatty(), None)
theme.colour_file("notes.txt")
theme.size(Prefix.KIBI)
```

`to_theme(isatty, defaults)` decides between a plain and a coloured theme:

- It returns a plain theme when colours are `NEVER`, or when they are
  `AUTOMATIC` and `isatty` is false.
- Otherwise it starts from the default theme and runs
  `Definitions.parse_color_vars`:
  - `LS_COLORS` keys go through `set_ls`.
  - `EXA_COLORS` keys go through `set_ls` and then `set_exa`.
  - Any key that neither method knows becomes a file name glob.
  - A malformed glob is logged as a warning and skipped.
- `defaults` is an optional `FileColours` that is consulted after the user's
  globs. It is not used when `EXA_COLORS` is exactly `reset` or starts with
  `reset:`.

`Theme` has these methods:

- `size(prefix)` and `unit(prefix)` pick the size style for a `Prefix`, or
  `None` for plain bytes.
- `broken_filename()` and `broken_control_char()` return the styles with the
  broken-path overlay applied.
- `colour_file(name)` falls back to the normal file style.

## What the package does not do

`lstheme` only builds styles. It does not:

- list directories
- read the environment by itself
- render escape codes to the terminal

It also has no built-in table of file type colours. The fallback colouriser must be passed in as `defaults`.

## Running the tests

```
pip install -e ".[test]"
pytest
```