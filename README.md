# matugen

A library for building Material You style colour themes for a desktop:
colour space conversions, colour strings in several notations, colour
filters for templates, template rendering with shell hooks, a terminal
colour table and JSON dump, TOML configuration, and wallpaper setting.

## Installation

The package needs Python 3.11 or newer and depends on `jinja2` and
`platformdirs`. The tests use `pytest` (the `test` extra).

## Modules

| Module | Purpose |
| --- | --- |
| `matugen.mathutil` | `lerp`, `rotation_direction`, `difference_degrees`, `sanitize_degrees_int`, `sanitize_degrees_double`, `matrix_multiply` |
| `matugen.colorutil` | `Argb` colours (`from_hex`, `to_hex`) and conversions between sRGB, linear RGB, XYZ, L\*a\*b\* and L\* |
| `matugen.colorspace` | Immutable `Rgb` and `Hsl` colours: parsing, conversion, `lighten`, `adjust_hue`, `grayscale_simple`, `invert` |
| `matugen.format` | Writing colours as `#rrggbb`, `rrggbb`, `rgb(...)`, `rgba(...)`, `hsl(...)`, `hsla(...)` |
| `matugen.parse` | `parse_color`: which notation a colour string is written in |
| `matugen.distance` | `get_color_distance_lab` (L\*a\*b\* distance of two hex colours) and a weighted RGB distance |
| `matugen.scheme` | `SchemeTypes`, `SchemesEnum` (light/dark) and `Schemes`, the sorted named colours of both modes |
| `matugen.filters` | Template filters `set_alpha`, `set_hue`, `set_lightness`, `auto_lightness`, `grayscale`, `invert`, `camel_case`; errors raise `FilterError` |
| `matugen.render` | `create_engine`, `add_engine_filters`, `render_template`, `get_render_data`, `generate_colors` |
| `matugen.sourcecolor` | `get_source_color_from_color`, `ImageSource`/`ColorSource`, custom colours, `color_to_string` (nearest named colour) |
| `matugen.hook` | `format_hook`: render a hook command as a template and run it in the shell |
| `matugen.wallpaper` | `Wallpaper` settings and `set_wallpaper`, `set_unix`, `set_macos` |
| `matugen.logsetup` | `get_log_level` and `setup_logging` for the package's logger |
| `matugen.templates` | `Template`, path resolution, `export_template` and `generate_templates` |
| `matugen.display` | `format_table`/`show_color` (boxed table with swatches) and `dump_json` |
| `matugen.config` | `ConfigFile.from_toml` and `ConfigFile.read` |
| `matugen.material_scheme` | Fixed-tone `Scheme` and `SchemeAndroid` built from a caller's core palette |

## Examples

Colours and distances:

```python
from matugen.colorutil import Argb, lstar_from_argb
from matugen.distance import get_color_distance_lab
from matugen.sourcecolor import get_source_color_from_color

red = Argb.from_hex("#ff0000")
red.to_hex()                                         # "#ff0000"
lstar_from_argb(red)                                 # perceptual lightness, 0..100
get_color_distance_lab("#ff0000", "#fe0000")
get_source_color_from_color("rgb", "rgb(255, 0, 0)") # Argb(255, 255, 0, 0)
```

Filters take a colour string and keep its notation:

```python
from matugen.filters import camel_case, invert, set_alpha, set_lightness

invert("#ff0000")                          # "#00ffff"
set_lightness("hsl(200, 50%, 40%)", 10.0)  # "hsl(200, 50%, 50%)"
set_alpha("rgba(255, 0, 0, 1.0)", 0.5)     # "rgba(255, 0, 0, 0.5)"
camel_case("on_primary_container")         # "onPrimaryContainer"
```

Asking for something a notation cannot hold, such as an alpha value on a
plain hex colour, raises `matugen.filters.FilterError`.

Rendering with a set of scheme colours you supply:

```python
from matugen.colorutil import Argb
from matugen.render import add_engine_filters, create_engine, get_render_data
from matugen.scheme import Schemes, SchemesEnum

schemes = Schemes(
    light=[("primary", Argb.from_hex("#8c4a60"))],
    dark=[("primary", Argb.from_hex("#ffb0c8"))],
)
data = get_render_data(schemes, Argb.from_hex("#ff0000"), SchemesEnum.DARK)
engine = create_engine()
add_engine_filters(engine)
engine.from_string("{{ colors.primary.default.hex | to_upper }}").render(data)  # "#FFB0C8"
```

Templates use `{{ ... }}` for expressions and `<* ... *>` for blocks by
default. Each colour is available as
`colors.<name>.<light|dark|default>.<hex|hex_stripped|rgb|rgba|hsl|hsla|red|green|blue|alpha|hue|saturation|lightness>`,
with `source_color` always present, alongside `image` (the image path or
`None`), `custom` (the custom keywords) and `mode` (`"Light"` or `"Dark"`).
Hooks also see `closest_color`: when a template sets `colors_to_compare` and
`compare_to`, it is the name of the listed colour nearest to the rendered
`compare_to` value.

## Configuration

`matugen.config.ConfigFile.read` loads a TOML file from the path it is given,
or else `config.toml` in the user's configuration directory for `matugen`;
when neither exists an empty configuration is used. Both `[config]` and
`[templates]` tables must be present; errors raise `ConfigError`.

```toml
[config]
custom_keywords = { font = "Sans" }

[config.custom_colors]
green = "#00ff00"
warning = { color = "#ffaa00", blend = false }

[config.wallpaper]
command = "swww"
arguments = ["img"]

[templates.gtk]
input_path = "~/.config/matugen/templates/gtk.css"
output_path = "~/.config/gtk-3.0/colors.css"
post_hook = "echo generated {{colors.primary.default.hex}}"
```

Template paths expand `~`; relative paths are taken from the configuration
file's directory, or from the working directory when there is no file. A
template may set its own `expr_prefix`, `expr_postfix`, `block_prefix` and
`block_postfix`, a `pre_hook` and a `post_hook`. `generate_templates` renders
each template, skips any whose input file is missing, creates missing output
folders, and with a path prefix writes below that prefix instead.

`set_wallpaper` does nothing for a colour source. For an image it runs the
configured command on Linux and NetBSD (image path last, after an optional
`pre_hook`), asks Finder through `osascript` on macOS, and raises `OSError`
on Windows.

## What this package does not do

- It has no command-line program; everything is used from Python.
- It does not extract a source colour from an image, and it does not
  generate Material dynamic schemes or tonal palettes from a source colour.
  `Schemes`, the core palette for `material_scheme`, and the palettes passed
  to `dump_json` (objects with a `tone(int)` method) must be supplied by the
  caller.
- `SchemeTypes` only names the scheme variants; nothing here builds them.