# Session.py
"""""
Session controller: the glue between user actions and the calculator core.

Responsibilities
----------------
- Own the InputState, the history log and the display precision
- Route digit / operator / decimal / equals / backspace / clear actions
- Evaluate on equals and append "<expression> = <result>" to the history
- Report every evaluation failure as "<expression> = syntax error"
- Provide the display text (history + expression + literal) for the UI
"""""

from . import error as E
from . import config_manager as config_manager
from . import MathEngine as MathEngine
from . import InputEngine as InputEngine
from . import Formatter as Formatter

# Debug toggle for optional prints in this module
debug = False

SYNTAX_ERROR_TEXT = "syntax error"

# Special key characters understood by press_key
KEY_ENTER = "\r"
KEY_ESCAPE = "\x1b"
KEY_BACKSPACE = "\b"
KEY_DELETE = "\x7f"


class CalculatorSession:
    """One calculator: input state, history and precision, mutated one action at a time."""

    def __init__(self, precision=config_manager.DEFAULT_SETTINGS["result_precision"]):
        self.state = InputEngine.InputState()
        self.history = []
        self.precision = config_manager.validate_precision(precision)

    # --- State queries ---
    @property
    def has_result(self):
        return self.state.has_result

    @property
    def last_result(self):
        return self.state.result

    @property
    def current_input(self):
        return self.state.current_input

    @property
    def expression(self):
        return MathEngine.render_tokens(self.state.expression)

    def history_text(self):
        return "".join(line + "\n" for line in self.history)

    def current_display_text(self):
        return self.history_text() + InputEngine.render_input(self.state)

    # --- Configuration ---
    def set_precision(self, precision):
        """Change the display precision; stored values are not touched."""
        self.precision = config_manager.validate_precision(precision)

    # --- Actions ---
    def press_digit(self, digit):
        return InputEngine.append_digit(self.state, digit)

    def press_decimal_point(self):
        return InputEngine.append_decimal_point(self.state)

    def press_operator(self, op):
        return InputEngine.append_operator(self.state, op, self.precision)

    def press_backspace(self):
        return InputEngine.backspace(self.state)

    def clear(self):
        """Clear the input, keep the history."""
        InputEngine.clear(self.state)

    def full_reset(self):
        """Clear the input and the history."""
        InputEngine.clear(self.state)
        self.history = []

    def press_equals(self):
        """Evaluate the expression and log it.

        Returns the appended history line, or None if nothing was evaluated.
        """
        state = self.state

        # '=' on a displayed result with nothing new typed: start over
        if state.has_result and not state.current_input and not state.expression:
            state.has_result = False
            self.history = []
            return None

        InputEngine.flush_literal(state)
        if not state.expression:
            return None

        equation = MathEngine.render_tokens(state.expression)

        try:
            ergebnis = MathEngine.calculate(state.expression)

        except E.MathError as e:
            if debug == True:
                print(f"Error {e.code}: {e.message} ({e.equation})")
            line = f"{equation} = {SYNTAX_ERROR_TEXT}"
            InputEngine.clear(state)
            self.history.append(line)
            return line

        line = f"{equation} = {Formatter.format_result(ergebnis, self.precision)}"

        state.result = ergebnis
        state.has_result = True
        state.current_input = ""
        state.expression = []

        self.history.append(line)
        return line

    def press_key(self, key):
        """Apply the action bound to one key character; return False for unbound keys."""
        if MathEngine.isDigit(key):
            self.press_digit(key)
        elif MathEngine.isOp(key) != -1 or key in MathEngine.Parentheses:
            self.press_operator(key)
        elif key in ("=", KEY_ENTER, "\n"):
            self.press_equals()
        elif key == ".":
            self.press_decimal_point()
        elif key in ("c", "C", KEY_ESCAPE):
            self.clear()
        elif key == KEY_BACKSPACE:
            self.press_backspace()
        elif key == KEY_DELETE:
            self.full_reset()
        else:
            return False
        return True
