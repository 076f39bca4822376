from prompt_toolkit.mouse_events import MouseButton, MouseEventType

from core import Task
from core.desktop.devtools.interface.tui_display import display_width, pad_display
from core.desktop.devtools.interface.tui_render import (
    click_handler,
    render_counter,
    render_error_panel,
    render_form_errors,
    render_pager,
    render_task_list,
)


def _t(key, **kwargs):
    return key


def _text(fragments):
    return "".join(fragment[1] for fragment in fragments)


def _event(kind=MouseEventType.MOUSE_UP, button=MouseButton.LEFT):
    return type("Evt", (), {"event_type": kind, "button": button})()


def test_click_handler_only_fires_on_left_up():
    hits = []
    handler = click_handler(lambda: hits.append(1))
    assert handler(_event(MouseEventType.MOUSE_DOWN)) is NotImplemented
    assert handler(_event()) is None
    assert hits == [1]


def test_counter_turns_red_over_limit():
    assert render_counter(5, 100)[0] == ("class:text.dim", "5/100")
    assert render_counter(101, 100)[0][0] == "class:field.error"


def test_form_errors_joined():
    text = _text(render_form_errors({"title": "Title is required", "description": "too long"}))
    assert "Title is required" in text
    assert "too long" in text
    assert _text(render_form_errors({})) == ""


def test_task_list_empty_state():
    text = _text(render_task_list([], 0, 80, _t))
    assert "EMPTY_TITLE" in text
    assert "EMPTY_HINT" in text


def test_task_list_marks_selection_and_completion():
    tasks = [Task(id="1", title="milk"), Task(id="2", title="bread", completed=True)]
    fragments = render_task_list(tasks, 1, 80, _t)
    text = _text(fragments)
    assert "○ " in text
    assert "✓ " in text
    assert text.count("▸") == 1
    selected = [f for f in fragments if f[0].startswith("class:selected")]
    assert any("bread" in f[1] for f in selected)


def test_pager_disables_buttons():
    fragments = render_pager("Page 1 of 1", False, False, _t, on_previous=lambda: None, on_next=lambda: None)
    styles = [f[0] for f in fragments]
    assert styles.count("class:button.disabled") == 2
    assert all(len(f) == 2 for f in fragments)
    fragments = render_pager("Page 1 of 2", False, True, _t, on_next=lambda: None)
    assert len(fragments[-1]) == 3


def test_error_panel_has_retry_button():
    calls = []
    fragments = render_error_panel("HTTP 500: boom", _t, on_retry=lambda: calls.append(1))
    assert "HTTP 500: boom" in _text(fragments)
    fragments[-1][2](_event())
    assert calls == [1]
    assert "ERROR_FALLBACK" in _text(render_error_panel("", _t))


def test_pad_display_handles_wide_chars():
    padded = pad_display("задача 任务", 8)
    assert display_width(padded) == 8
    assert padded.endswith("…")
