import pytest

tk = pytest.importorskip("tkinter")

from backend.engine import ERROR_MARKER, CalculatorEngine  # noqa: E402
from backend.messages import Button, UnknownButtonError  # noqa: E402
from frontend.gui import WINDOW_HEIGHT, WINDOW_WIDTH, CalculatorGUI  # noqa: E402


@pytest.fixture
def app():
    try:
        gui = CalculatorGUI()
    except tk.TclError as e:
        pytest.skip(f"no display available: {e}")
    yield gui
    gui.destroy()


def click(app, *buttons):
    for b in buttons:
        app.buttons[b].invoke()
    return app.display_var.get()


def test_window_setup(app):
    assert app.title() == "Calculator"
    app.update_idletasks()
    assert app.geometry().startswith(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")
    assert app.display_var.get() == "0"
    assert len(app.buttons) == 19


def test_clicks_update_display(app):
    assert click(app, Button.DIGIT_5, Button.ADD, Button.DIGIT_3) == "3"
    assert click(app, Button.EQUALS) == "8"


def test_division_by_zero_then_clear(app):
    assert click(app, Button.DIGIT_5, Button.DIVIDE, Button.DIGIT_0, Button.EQUALS) == ERROR_MARKER
    assert click(app, Button.CLEAR) == "0"


def test_keyboard_bindings_registered(app):
    assert app.bind("<Return>")
    assert app.bind("<Escape>")
    assert app.bind("7")


def test_key_handler_dispatches(app):
    app.on_button(Button.DIGIT_9)
    app.on_button(Button.BACKSPACE)
    assert app.display_var.get() == "0"


class RejectingEngine(CalculatorEngine):
    def update(self, button):
        raise UnknownButtonError("rejected")


def test_rejected_button_leaves_display(monkeypatch, app):
    click(app, Button.DIGIT_4)
    monkeypatch.setattr(app, "engine", RejectingEngine())
    app.on_button(Button.DIGIT_2)
    assert app.display_var.get() == "4"
