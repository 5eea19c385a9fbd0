"""
Button identities and operators for the calculator.

Every click on the keypad (or bound key) becomes exactly one Button member,
which the engine turns into a state transition.
"""
import enum
import operator
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np


class CalculatorError(Exception):
    pass


class UnknownButtonError(CalculatorError):
    pass


class Operator(enum.Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"

    @property
    def symbol(self) -> str:
        return self.value

    def apply(self, left: float, right: float) -> float:
        """
        Apply the operator with IEEE-754 double semantics.
        Division by zero yields +/-inf (or nan for 0/0) instead of raising.
        """
        fn = _OPERATOR_FUNCS[self]
        with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
            result = fn(np.float64(left), np.float64(right))
        return float(result)


_OPERATOR_FUNCS: Dict[Operator, Callable] = {
    Operator.ADD: operator.add,
    Operator.SUBTRACT: operator.sub,
    Operator.MULTIPLY: operator.mul,
    Operator.DIVIDE: operator.truediv,
}


class Button(enum.Enum):
    DIGIT_0 = "0"
    DIGIT_1 = "1"
    DIGIT_2 = "2"
    DIGIT_3 = "3"
    DIGIT_4 = "4"
    DIGIT_5 = "5"
    DIGIT_6 = "6"
    DIGIT_7 = "7"
    DIGIT_8 = "8"
    DIGIT_9 = "9"
    DECIMAL = "decimal"
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    EQUALS = "equals"
    CLEAR = "clear"
    SIGN = "sign"
    PERCENT = "percent"
    # keyboard only, not on the keypad
    BACKSPACE = "backspace"

    @classmethod
    def from_value(cls, value: str) -> "Button":
        try:
            return cls(value)
        except ValueError:
            raise UnknownButtonError(f"Unknown button: {value!r}") from None

    @property
    def is_digit(self) -> bool:
        return self.value.isdigit()

    @property
    def operator(self) -> Optional["Operator"]:
        """The binary Operator for operator buttons, else None."""
        return _BUTTON_OPERATORS.get(self)


_BUTTON_OPERATORS: Dict[Button, Operator] = {
    Button.ADD: Operator.ADD,
    Button.SUBTRACT: Operator.SUBTRACT,
    Button.MULTIPLY: Operator.MULTIPLY,
    Button.DIVIDE: Operator.DIVIDE,
}


# -------------------------
# Keypad layout and keyboard bindings
# -------------------------
# Rows of (label, button). The "0" key spans two columns in the GUI.
KEYPAD: List[List[Tuple[str, Button]]] = [
    [("C", Button.CLEAR), ("±", Button.SIGN), ("%", Button.PERCENT), ("÷", Button.DIVIDE)],
    [("7", Button.DIGIT_7), ("8", Button.DIGIT_8), ("9", Button.DIGIT_9), ("×", Button.MULTIPLY)],
    [("4", Button.DIGIT_4), ("5", Button.DIGIT_5), ("6", Button.DIGIT_6), ("-", Button.SUBTRACT)],
    [("1", Button.DIGIT_1), ("2", Button.DIGIT_2), ("3", Button.DIGIT_3), ("+", Button.ADD)],
    [("0", Button.DIGIT_0), (".", Button.DECIMAL), ("=", Button.EQUALS)],
]

KEY_BINDINGS: Dict[str, Button] = {str(d): Button(str(d)) for d in range(10)}
KEY_BINDINGS.update({
    "<period>": Button.DECIMAL,
    "<comma>": Button.DECIMAL,
    "<KP_Decimal>": Button.DECIMAL,
    "<plus>": Button.ADD,
    "<KP_Add>": Button.ADD,
    "<minus>": Button.SUBTRACT,
    "<KP_Subtract>": Button.SUBTRACT,
    "<asterisk>": Button.MULTIPLY,
    "<KP_Multiply>": Button.MULTIPLY,
    "<slash>": Button.DIVIDE,
    "<KP_Divide>": Button.DIVIDE,
    "<percent>": Button.PERCENT,
    "<equal>": Button.EQUALS,
    "<Return>": Button.EQUALS,
    "<KP_Enter>": Button.EQUALS,
    "<Escape>": Button.CLEAR,
    "<BackSpace>": Button.BACKSPACE,
})
