import json
import re

import pytest

from matugen.colorspace import Rgb
from matugen.colorutil import Argb
from matugen.display import (
    JsonFormat,
    dump_json,
    format_single_color,
    format_table,
    show_color,
)
from matugen.format import format_hsl, format_rgba, hsl_from_rgb, rgb_from_argb
from matugen.scheme import Schemes

ANSI = re.compile(r"\x1b\[[0-9;]*m")
SOURCE = Argb(255, 0xAA, 0xBB, 0xCC)
RED = Rgb(255.0, 0.0, 0.0, 255.0)


def _schemes():
    return Schemes(
        light=(("primary", Argb(255, 255, 255, 255)), ("surface", Argb(255, 1, 2, 3))),
        dark=(("primary", Argb(255, 0, 0, 0)), ("surface", Argb(255, 4, 5, 6))),
    )


class _Palette:
    def tone(self, tone):
        return Argb(255, tone, tone, tone)


PALETTES = {
    name: _Palette()
    for name in ("primary", "secondary", "tertiary", "neutral", "neutral_variant", "error")
}


def test_hex_and_stripped():
    hex_value = format_single_color(RED, JsonFormat.HEX)
    assert hex_value == "#ff0000"
    assert format_single_color(RED, JsonFormat.STRIP) == hex_value[1:]


def test_other_formats_use_format_functions():
    assert format_single_color(RED, JsonFormat.RGBA) == format_rgba(RED, True)
    assert format_single_color(RED, JsonFormat.HSL) == format_hsl(hsl_from_rgb(RED))


def test_format_accepts_string_names():
    assert format_single_color(RED, "rgb") == format_single_color(RED, JsonFormat.RGB)


def test_unknown_format_raises():
    with pytest.raises(ValueError):
        format_single_color(RED, "cmyk")


def test_table_lines_have_equal_width():
    table = format_table(_schemes(), SOURCE)
    lines = table.split("\n")
    widths = {len(ANSI.sub("", line)) for line in lines}
    assert len(widths) == 1
    assert lines[0].startswith("╭") and lines[0].endswith("╮")
    assert lines[-1].startswith("╰") and lines[-1].endswith("╯")
    assert lines[2].startswith("├")


def test_table_contents():
    table = format_table(_schemes(), SOURCE)
    assert "NAME" in table
    assert "primary" in table
    assert "surface" in table
    assert "source_color" in table
    assert "#AABBCC" in table
    # title, top, separator, bottom plus one row per color and the source
    assert len(table.split("\n")) == 4 + 3


def test_table_swatch_foreground_depends_on_brightness():
    table = format_table(_schemes(), SOURCE)
    primary_line = next(line for line in table.split("\n") if "primary" in line)
    swatches = re.findall(r"\x1b\[(\d+);48;2;(\d+);(\d+);(\d+)m", primary_line)
    light_fg, dark_fg = swatches[0][0], swatches[1][0]
    assert light_fg == "30"
    assert light_fg != dark_fg


def test_show_color_prints_table(capsys):
    show_color(_schemes(), SOURCE)
    assert capsys.readouterr().out == format_table(_schemes(), SOURCE) + "\n"


def test_dump_json(capsys):
    text = dump_json(_schemes(), SOURCE, JsonFormat.HEX, PALETTES)
    assert capsys.readouterr().out == text + "\n"
    document = json.loads(text)
    assert set(document["palettes"]) == set(PALETTES)
    tones = document["palettes"]["primary"]
    assert set(tones) == {str(t) for t in range(0, 101, 5)}
    assert tones["50"] == format_single_color(rgb_from_argb(Argb(255, 50, 50, 50)), "hex")
    light = document["colors"]["light"]
    dark = document["colors"]["dark"]
    assert light["source_color"] == format_single_color(rgb_from_argb(SOURCE), "hex")
    assert "source_color" not in dark
    assert dark["primary"] == format_single_color(rgb_from_argb(Argb(255, 0, 0, 0)), "hex")


def test_dump_json_missing_palette():
    with pytest.raises(KeyError):
        dump_json(_schemes(), SOURCE, JsonFormat.HEX, {"primary": _Palette()})