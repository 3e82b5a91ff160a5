import logging
import sys
from unittest import mock

import pytest

from matugen.sourcecolor import ColorFormat, ColorSource, ImageSource
from matugen.wallpaper import Wallpaper, set_macos, set_unix, set_wallpaper

WRITER = "import sys, pathlib; pathlib.Path(sys.argv[1]).write_text('set')"


def _writer():
    return Wallpaper(command=sys.executable, arguments=("-c", WRITER))


def test_from_config_full():
    wallpaper = Wallpaper.from_config(
        {"command": "swww", "arguments": ["img", "--fast"], "pre_hook": "true"}
    )
    assert wallpaper == Wallpaper(command="swww", pre_hook="true", arguments=("img", "--fast"))


def test_from_config_minimal():
    wallpaper = Wallpaper.from_config({"command": "feh"})
    assert wallpaper.arguments is None
    assert wallpaper.pre_hook is None


@pytest.mark.parametrize(
    "raw",
    [{}, {"command": 3}, {"command": "feh", "arguments": "x"}, {"command": "feh", "pre_hook": 1}],
)
def test_from_config_invalid(raw):
    with pytest.raises(ValueError):
        Wallpaper.from_config(raw)


def test_set_unix_passes_path_last(tmp_path):
    target = tmp_path / "wall.png"
    process = set_unix(str(target), _writer())
    assert process.wait(timeout=60) == 0
    assert target.read_text() == "set"


def test_set_unix_runs_pre_hook(tmp_path):
    marker = tmp_path / "pre.txt"
    target = tmp_path / "wall.png"
    wallpaper = Wallpaper(
        command=sys.executable, arguments=("-c", WRITER), pre_hook=f'echo pre> "{marker}"'
    )
    process = set_unix(str(target), wallpaper)
    process.wait(timeout=60)
    assert marker.read_text().strip() == "pre"


def test_set_unix_missing_program(caplog):
    caplog.set_level(logging.DEBUG)
    result = set_unix("img.png", Wallpaper(command="no-such-program-for-wallpaper-xyz"))
    assert result is None
    assert any("was not found in PATH" in r.getMessage() for r in caplog.records)


def test_set_macos_builds_script():
    with mock.patch("subprocess.run") as run:
        result = set_macos('/tmp/a "b".png')
    assert result in (None, run.return_value)
    assert run.call_count == 1
    argv = run.call_args.args[0]
    assert argv[:2] == ["osascript", "-e"]
    assert argv[2] == (
        'tell app "finder" to set desktop picture to POSIX file "/tmp/a \\"b\\".png"'
    )


def test_set_wallpaper_ignores_color_source():
    source = ColorSource(ColorFormat.HEX, "#ffffff")
    with mock.patch("subprocess.Popen") as popen, mock.patch("subprocess.run") as run:
        result = set_wallpaper(source, _writer())
    assert result is None
    assert not popen.called
    assert not run.called


def test_set_wallpaper_on_linux(tmp_path):
    target = tmp_path / "wall.png"
    with mock.patch("sys.platform", "linux"):
        process = set_wallpaper(ImageSource(str(target)), _writer())
    process.wait(timeout=60)
    assert target.read_text() == "set"


def test_set_wallpaper_on_macos():
    with mock.patch("sys.platform", "darwin"), mock.patch("subprocess.run") as run:
        result = set_wallpaper(ImageSource("/img.png"), _writer())
    assert result in (None, run.return_value)
    assert run.call_count == 1
    assert run.call_args.args[0][0] == "osascript"


def test_set_wallpaper_windows_unsupported():
    with mock.patch("sys.platform", "win32"):
        with pytest.raises(OSError):
            set_wallpaper(ImageSource("C:/img.png"), _writer())