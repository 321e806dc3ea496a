import io

import pytest

from boardkit.errors import UnknownPresenterError
from boardkit.presenters import (
    BoardPresenter,
    BrowserPresenter,
    ConsolePresenter,
    available_presenters,
    broadcast,
    get_presenter,
)
from boardkit.state import BoardState


@pytest.fixture
def x_at_origin():
    return BoardState.initialize(3).update((0, 0), "X")


def test_console_render(x_at_origin):
    text = ConsolePresenter().render(x_at_origin)
    assert text == "X . .\n. . .\n. . ."


def test_console_custom_glyphs(x_at_origin):
    x_at_origin.update((2, 1), "O")
    text = ConsolePresenter(empty="_", separator="|").render(x_at_origin)
    assert text.splitlines() == ["X|_|_", "_|_|_", "_|O|_"]


def test_browser_render_marks_cell(x_at_origin):
    markup = BrowserPresenter().render(x_at_origin)
    assert markup.startswith('<table class="board" data-size="3">')
    assert markup.count("<tr>") == 3
    assert markup.count("<td ") == 9
    assert markup.count(">X</td>") == 1
    assert '<td class="cell-x" data-row="0" data-col="0">X</td>' in markup
    assert markup.count('class="cell-empty"') == 8
    assert "&nbsp;" in markup


def test_browser_escapes_css_class(x_at_origin):
    markup = BrowserPresenter(css_class='b" onload="x').render(x_at_origin)
    assert 'onload="x"' not in markup
    assert "&quot;" in markup


def test_display_writes_to_stream_and_returns_text(x_at_origin):
    buf = io.StringIO()
    out = ConsolePresenter(stream=buf).display(x_at_origin)
    assert buf.getvalue() == out + "\n"


def test_display_without_stream_only_returns(x_at_origin):
    assert BrowserPresenter().display(x_at_origin).endswith("</table>")


@pytest.mark.parametrize("presenter", [ConsolePresenter(), BrowserPresenter()])
def test_display_does_not_mutate_state(x_at_origin, presenter):
    before = x_at_origin.copy()
    presenter.display(x_at_origin)
    presenter.display(x_at_origin)
    assert x_at_origin == before


def test_two_presenters_are_independent(x_at_origin):
    console_buf, browser_buf = io.StringIO(), io.StringIO()
    console = ConsolePresenter(stream=console_buf)
    browser = BrowserPresenter(stream=browser_buf)
    snapshot = x_at_origin.serialize()

    outs = broadcast(x_at_origin, [console, browser])

    assert outs[0] == console.render(x_at_origin)
    assert outs[1] == browser.render(x_at_origin)
    assert "<" not in console_buf.getvalue()
    assert "<table" in browser_buf.getvalue()
    assert x_at_origin.serialize() == snapshot


def test_scenario_single_x_at_origin():
    state = BoardState.initialize()
    state.update((0, 0), "X")
    assert state.get((0, 0)).symbol == "X"
    assert sum(1 for m in state.cells() if m.is_empty) == 8

    console_text, browser_text = broadcast(state, [ConsolePresenter(), BrowserPresenter()])
    lines = console_text.splitlines()
    assert lines[0].split()[0] == "X"
    assert console_text.count("X") == 1
    assert browser_text.count(">X</td>") == 1
    assert 'data-row="0" data-col="0">X</td>' in browser_text


def test_registry():
    assert available_presenters() == ["browser", "console", "html"]
    assert isinstance(get_presenter("console"), ConsolePresenter)
    assert isinstance(get_presenter(" HTML "), BrowserPresenter)
    with pytest.raises(UnknownPresenterError):
        get_presenter("curses")


def test_base_is_abstract():
    with pytest.raises(TypeError):
        BoardPresenter()  # type: ignore[abstract]


def test_custom_presenter_plugs_in(x_at_origin):
    class DigitsPresenter(BoardPresenter):
        name = "digits"

        def render(self, state):
            return state.serialize()

    assert broadcast(x_at_origin, [DigitsPresenter()]) == ["100000000"]
