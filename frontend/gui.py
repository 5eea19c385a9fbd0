#!/usr/bin/env python3
"""
Calculator GUI

Dark-themed basic calculator window (Tkinter):
- Display panel with the current value, right aligned.
- 4x5 keypad: C, ±, %, ÷ / 7 8 9 × / 4 5 6 - / 1 2 3 + / 0 (wide) . =
- Keyboard input for digits, operators, Enter (=), Esc (C) and Backspace.

Every click or key is turned into a backend.messages.Button, handed to the
CalculatorEngine, and the display is re-rendered from the engine state.
"""

import logging
import tkinter as tk
from typing import Optional

from backend.engine import CalculatorEngine
from backend.messages import KEY_BINDINGS, KEYPAD, Button, CalculatorError

log = logging.getLogger("calculator")


# -------------------------
# Visual theme / constants
# -------------------------
WINDOW_WIDTH = 500
WINDOW_HEIGHT = 600

BG = "#202225"          # main app background (dark theme)
DISPLAY_BG = "#1a1a1a"  # display panel
DISPLAY_BORDER = "#4d4d4d"
BTN_BG = "#2b2d30"      # digit tiles
FN_BG = "#3a3d41"       # C, ±, %
OP_BG = "#3f6fb5"       # operators and =
FG = "#E6EEF3"

PADDING = 20
SPACING = 10
DISPLAY_HEIGHT = 100
BUTTON_HEIGHT = 70

DISPLAY_FONT = ("Segoe UI", 48)
BUTTON_FONT = ("Segoe UI", 24)


def _tile_color(button: Button) -> str:
    if button.operator is not None or button is Button.EQUALS:
        return OP_BG
    if button in (Button.CLEAR, Button.SIGN, Button.PERCENT):
        return FN_BG
    return BTN_BG


# -------------------------
# Main application class
# -------------------------
class CalculatorGUI(tk.Tk):
    def __init__(self, engine: Optional[CalculatorEngine] = None):
        super().__init__()

        # Window setup
        self.title("Calculator")
        self.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")
        self.configure(bg=BG)

        self.engine = engine if engine is not None else CalculatorEngine()
        self.buttons = {}  # Button -> tk.Button

        container = tk.Frame(self, bg=BG)
        container.pack(fill="both", expand=True, padx=PADDING, pady=PADDING)
        self._build_display(container)
        self._build_keypad(container)
        self._bind_keys()
        self._render()
        log.info("Application started")

    # -------------------------
    # Display
    # -------------------------
    def _build_display(self, parent):
        """Bordered dark panel with large right-aligned text."""
        panel = tk.Frame(parent, bg=DISPLAY_BG, height=DISPLAY_HEIGHT,
                         highlightbackground=DISPLAY_BORDER, highlightthickness=2)
        panel.pack(fill="x", pady=(0, SPACING))
        # keep the fixed height regardless of font size
        panel.pack_propagate(False)

        self.display_var = tk.StringVar()
        tk.Label(panel, textvariable=self.display_var, bg=DISPLAY_BG, fg=FG,
                 anchor="e", font=DISPLAY_FONT).pack(fill="both", expand=True, padx=PADDING)

    # -------------------------
    # Keypad
    # -------------------------
    def _build_keypad(self, parent):
        """
        Grid of equal tiles. The last row has only three keys, so its first key
        ("0") spans two columns.
        """
        grid = tk.Frame(parent, bg=BG)
        grid.pack(fill="both", expand=True)
        columns = max(len(row) for row in KEYPAD)
        for r, row in enumerate(KEYPAD):
            span = columns - len(row) + 1
            c = 0
            for i, (label, button) in enumerate(row):
                width = span if i == 0 else 1
                color = _tile_color(button)
                btn = tk.Button(grid, text=label, bg=color, fg=FG, activebackground=color,
                                activeforeground=FG, relief="flat", font=BUTTON_FONT,
                                command=self._map_button(button))
                btn.grid(row=r, column=c, columnspan=width, sticky="nsew",
                         padx=SPACING // 2, pady=SPACING // 2)
                self.buttons[button] = btn
                c += width
            grid.grid_rowconfigure(r, weight=1, minsize=BUTTON_HEIGHT)
        for c in range(columns):
            grid.grid_columnconfigure(c, weight=1, uniform="keys")

    def _map_button(self, button: Button):
        """Return the click handler for a keypad tile."""
        return lambda b=button: self.on_button(b)

    def _bind_keys(self):
        for sequence, button in KEY_BINDINGS.items():
            self.bind(sequence, lambda e, b=button: self.on_button(b))

    # -------------------------
    # Update / render
    # -------------------------
    def on_button(self, button: Button):
        """Forward a press to the engine and redraw the display."""
        try:
            self.engine.update(button)
        except CalculatorError as e:
            log.error("Button %s rejected: %s", button, e)
            return
        self._render()

    def _render(self):
        self.display_var.set(self.engine.display)


# -------------------------
# Run the application
# -------------------------
def main():
    app = CalculatorGUI()
    app.mainloop()


if __name__ == "__main__":
    main()
