# InputEngine.py
"""""
Incremental expression builder.

The InputState holds the literal currently being typed, the committed
expression tokens and the "a result is displayed" flag. Every operation
mutates the state in place and returns True when the action was accepted,
False when it was rejected (the state is then left untouched).
"""""

from . import MathEngine as MathEngine
from . import Formatter as Formatter

# Limits for the literal being typed
MAX_LITERAL_LENGTH = 20
MAX_FRACTION_DIGITS = 16


class InputState:
    """Mutable input state owned by one calculator session."""

    def __init__(self):
        self.current_input = ""   # Literal being typed, not yet in the expression
        self.expression = []      # Committed MathEngine tokens
        self.has_result = False   # A result is displayed and nothing new was typed
        self.result = 0.0         # Raw value of the last successful calculation

    def __repr__(self):
        return (f"InputState(current_input={self.current_input!r}, "
                f"expression={MathEngine.render_tokens(self.expression)!r}, "
                f"has_result={self.has_result})")


def start_fresh(state):
    """Drop the displayed result before typing a new number."""
    if state.has_result:
        state.expression = []
        state.has_result = False


def fraction_digits(literal):
    if "." not in literal:
        return 0
    return len(literal) - literal.index(".") - 1


def append_digit(state, digit):
    """Append one digit to the literal, within the length limits."""
    digit = str(digit)
    if not MathEngine.isDigit(digit):
        return False

    start_fresh(state)

    if len(state.current_input) >= MAX_LITERAL_LENGTH:
        return False
    if fraction_digits(state.current_input) >= MAX_FRACTION_DIGITS:
        return False

    state.current_input += digit
    return True


def append_decimal_point(state):
    """Add '.' once per literal; an empty literal becomes '0.'."""
    start_fresh(state)

    if "." in state.current_input:
        return False
    if not state.current_input:
        state.current_input = "0"
    state.current_input += "."
    return True


def would_create_consecutive_ops(expression, current_input, op):
    """Return True if appending `op` would put two binary operators side by side.

    A '-' right after '+', '*' or '/' is a unary minus and is allowed, a second
    '-' is not. Parentheses are never blocked.
    """
    if current_input:
        return False

    # No leading unary plus
    if not expression:
        return op == "+"

    last_token = expression[-1]
    if isinstance(last_token, MathEngine.Operator):
        if op in MathEngine.Parentheses:
            return False
        if op == "-" and last_token.text != "-":
            return False
        return True

    return False


def flush_literal(state):
    """Move a pending literal into the expression as a Number token."""
    if state.current_input:
        state.expression.append(MathEngine.Number(state.current_input))
        state.current_input = ""


def seed_from_result(state, precision):
    """Start a new expression with the previous result as its first operand."""
    seed = Formatter.format_seed(state.result, precision)
    state.expression = [MathEngine.Number(seed)]
    state.current_input = ""
    state.has_result = False


def append_operator(state, op, precision):
    """Append an operator or parenthesis, flushing the pending literal first."""
    if MathEngine.isOp(op) == -1 and op not in MathEngine.Parentheses:
        return False

    if state.has_result:
        # '(' after a result starts a brand new calculation
        if op == "(":
            state.expression = [MathEngine.Paren("(")]
            state.current_input = ""
            state.has_result = False
            return True
        seed_from_result(state, precision)

    if would_create_consecutive_ops(state.expression, state.current_input, op):
        return False

    flush_literal(state)
    state.expression.append(MathEngine.make_token(op))
    return True


def backspace(state):
    """Remove the last literal character, or else the last expression token."""
    if state.current_input:
        state.current_input = state.current_input[:-1]
        return True
    if state.expression:
        state.expression.pop()
        return True
    return False


def clear(state):
    state.current_input = ""
    state.expression = []
    state.has_result = False


def render_input(state):
    """Expression so far followed by the literal being typed."""
    parts = [MathEngine.render_tokens(state.expression)] if state.expression else []
    if state.current_input:
        parts.append(state.current_input)
    return " ".join(parts)
