import logging
import math
from typing import Optional

from backend.messages import Button, Operator

log = logging.getLogger("calculator")

ERROR_MARKER = "Error"
FRACTION_DIGITS = 10


def format_number(value: float) -> str:
    """
    Render a result for the display.
    Integral values have no decimal point, fractions keep up to FRACTION_DIGITS
    digits with trailing zeros stripped, inf/nan become ERROR_MARKER.
    """
    if not math.isfinite(value):
        return ERROR_MARKER
    if value == int(value):
        return str(int(value))
    text = f"{value:.{FRACTION_DIGITS}f}".rstrip("0").rstrip(".")
    # values below the display precision collapse to zero
    if text == "-0":
        text = "0"
    return text


def parse_display(text: str) -> float:
    """Read a display literal back as a number; anything unparsable is 0."""
    try:
        return float(text)
    except ValueError:
        return 0.0


class CalculatorState:
    def __init__(self):
        self.display: str = "0"
        self.previous_value: Optional[float] = None
        self.pending_operator: Optional[Operator] = None
        self.awaiting_operand = False
        self.has_decimal_point = False

    @property
    def is_error(self) -> bool:
        return self.display == ERROR_MARKER

    @property
    def value(self) -> float:
        return parse_display(self.display)

    def __repr__(self):
        return (f"CalculatorState(display={self.display!r}, previous_value={self.previous_value!r}, "
                f"pending_operator={self.pending_operator}, awaiting_operand={self.awaiting_operand}, "
                f"has_decimal_point={self.has_decimal_point})")


class CalculatorEngine:
    """
    Input handler: applies one button press at a time to a CalculatorState.
    The GUI calls update() and re-renders state.display afterwards.
    """

    def __init__(self, state: Optional[CalculatorState] = None):
        self.state = state if state is not None else CalculatorState()

    @property
    def display(self) -> str:
        return self.state.display

    def update(self, button: Button) -> str:
        """Dispatch a button press and return the new display text."""
        if button.is_digit:
            self.input_digit(button.value)
        elif button.operator is not None:
            self.set_operator(button.operator)
        else:
            handler = {
                Button.DECIMAL: self.input_decimal,
                Button.EQUALS: self.equals,
                Button.CLEAR: self.clear,
                Button.SIGN: self.toggle_sign,
                Button.PERCENT: self.percent,
                Button.BACKSPACE: self.backspace,
            }[button]
            handler()
        log.debug("%s -> %r", button.name, self.state)
        return self.state.display

    def press(self, value: str) -> str:
        """Dispatch a button by its keypad value ("7", "add", "equals", ...)."""
        return self.update(Button.from_value(value))

    # -------------------------
    # Transitions
    # -------------------------
    def clear(self):
        self.state = CalculatorState()
        log.info("Clear")

    def input_digit(self, digit: str):
        s = self.state
        if s.is_error:
            self.clear()
            s = self.state
        if s.awaiting_operand:
            s.display = digit
            s.awaiting_operand = False
            s.has_decimal_point = False
        elif s.display == "0":
            s.display = digit
        else:
            s.display += digit

    def input_decimal(self):
        s = self.state
        if s.is_error:
            self.clear()
            s = self.state
        if s.awaiting_operand:
            s.display = "0."
            s.awaiting_operand = False
            s.has_decimal_point = True
        elif not s.has_decimal_point:
            s.display += "."
            s.has_decimal_point = True
        else:
            log.debug("Ignored decimal point, already in %s", s.display)

    def set_operator(self, op: Operator):
        s = self.state
        if s.is_error:
            return
        if s.pending_operator is not None and s.previous_value is not None:
            result = self._compute(s.previous_value, s.pending_operator, s.value)
            if result is None:
                return
            s.previous_value = result
            s.display = format_number(result)
        else:
            s.previous_value = s.value
        s.pending_operator = op
        s.awaiting_operand = True
        s.has_decimal_point = False
        log.info("Operator: %s (previous_value=%s)", op.symbol, s.previous_value)

    def equals(self):
        s = self.state
        if s.is_error or s.pending_operator is None or s.previous_value is None:
            return
        result = self._compute(s.previous_value, s.pending_operator, s.value)
        if result is None:
            return
        s.display = format_number(result)
        s.previous_value = None
        s.pending_operator = None
        s.awaiting_operand = True
        s.has_decimal_point = "." in s.display
        log.info("= result=%s", s.display)

    def toggle_sign(self):
        s = self.state
        if s.is_error:
            return
        value = s.value
        if value == 0:
            return
        s.display = format_number(-value)
        s.has_decimal_point = "." in s.display

    def percent(self):
        s = self.state
        if s.is_error:
            return
        s.display = format_number(s.value / 100)
        s.has_decimal_point = "." in s.display

    def backspace(self):
        s = self.state
        if s.is_error or s.awaiting_operand:
            return
        text = s.display[:-1]
        # a bare sign or "-0" is not an entered numeral
        if text in ("", "-", "-0"):
            text = "0"
        s.display = text
        s.has_decimal_point = "." in text

    # -------------------------
    # Arithmetic
    # -------------------------
    def _compute(self, left: float, op: Operator, right: float) -> Optional[float]:
        """
        Apply op and return the result, or None after switching the display
        to ERROR_MARKER when the result is not finite.
        """
        result = op.apply(left, right)
        log.debug("Compute: %s %s %s = %s", left, op.symbol, right, result)
        if not math.isfinite(result):
            log.warning("Arithmetic error: %s %s %s = %s", left, op.symbol, right, result)
            self.state.display = ERROR_MARKER
            self.state.has_decimal_point = False
            return None
        return result


# Quick local demo
if __name__ == "__main__":
    c = CalculatorEngine()
    for v in ("4", "add", "3", "multiply", "2", "equals"):
        print(v, "->", c.press(v))
    for v in ("5", "divide", "0", "equals"):
        print(v, "->", c.press(v))
