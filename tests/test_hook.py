import logging

from matugen.hook import format_hook, format_hook_text
from matugen.render import create_engine
from matugen.sourcecolor import ColorDefinition


def test_format_hook_text_sets_closest_color():
    engine = create_engine()
    data = {"name": "x"}
    text = format_hook_text(data, "red", engine.from_string("{{ name }}-{{ closest_color }}"))
    assert text == "x-red"
    assert data["closest_color"] == "red"


def test_format_hook_text_without_closest_color():
    engine = create_engine()
    data = {}
    text = format_hook_text(data, None, engine.from_string("plain"))
    assert text == "plain"
    assert data["closest_color"] is None


def test_format_hook_renders_command():
    engine = create_engine()
    assert format_hook(engine, {"code": 0}, "exit {{ code }}") == "exit 0"


def test_format_hook_uses_closest_color():
    engine = create_engine()
    data = {"c": "#ff0000"}
    colors = [ColorDefinition("red", "#ff0000"), ColorDefinition("blue", "#0000ff")]
    command = format_hook(engine, data, "echo {{ closest_color }}", colors, "{{ c }}")
    assert command == "echo red"
    assert data["closest_color"] == "red"


def test_format_hook_ignores_comparison_without_target():
    engine = create_engine()
    data = {}
    colors = [ColorDefinition("red", "#ff0000")]
    format_hook(engine, data, "exit 0", colors, None)
    assert data["closest_color"] is None


def test_format_hook_runs_in_shell(tmp_path):
    engine = create_engine()
    target = tmp_path / "out.txt"
    format_hook(engine, {"word": "hello", "target": str(target)}, 'echo {{ word }}> "{{ target }}"')
    assert target.read_text().strip() == "hello"


def test_format_hook_logs_failure(caplog):
    caplog.set_level(logging.DEBUG)
    engine = create_engine()
    format_hook(engine, {}, "exit 3")
    assert any(
        r.levelno == logging.ERROR and "Failed executing command" in r.getMessage()
        for r in caplog.records
    )


def test_format_hook_success_logs_no_error(caplog):
    caplog.set_level(logging.DEBUG)
    engine = create_engine()
    format_hook(engine, {}, "exit 0")
    assert [r for r in caplog.records if r.levelno >= logging.ERROR] == []