# MathEngine.py
"""""
Core calculation engine for the desk calculator.

Pipeline
--------
1) Tokenizer: converts a raw expression string into Number / Operator / Paren tokens.
2) Evaluator: two-stack (values, operators) precedence scan, left to right.
3) calculate(): public entry point; accepts a string or an already built token list
   and returns a float, or raises one of the error.SyntaxError subclasses.

Division by zero yields 0 instead of an error.
"""""

import math

from . import error as E

# Debug toggle for optional prints in this module
debug = False

# Supported operators (kept as simple lists for quick membership checks)
Operations = ["+", "-", "*", "/"]
Parentheses = ["(", ")"]
Digits = "0123456789"

PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2}

# Both evaluator stacks hold at most this many entries
STACK_CAPACITY = 100


# -----------------------------
# Utilities / small helpers
# -----------------------------

def isDigit(zeichen):
    """Return True for a single ASCII digit character."""
    return len(zeichen) == 1 and zeichen in Digits


def isOp(zeichen):
    """Return index of a known binary operator or -1 if unknown."""
    try:
        return Operations.index(zeichen)
    except ValueError:
        return -1


def parse_literal(text):
    """Read a numeric literal the way the keypad builds it.

    The integer part accumulates as value * 10 + digit, every fractional digit
    is weighted by a further factor of 0.1. A '.' after the first one is ignored.
    A leading '-' is accepted so that a previous result can be reused as a token.
    """
    negative = text.startswith("-")
    if negative:
        text = text[1:]
    if not text:
        raise E.UnexpectedTokenError("Empty number.", code="3011")

    zahl = 0.0
    hat_schon_komma = False
    decimal_multiplier = 1.0
    for zeichen in text:
        if zeichen == ".":
            hat_schon_komma = True
        elif isDigit(zeichen):
            if hat_schon_komma:
                decimal_multiplier *= 0.1
                zahl += int(zeichen) * decimal_multiplier
            else:
                zahl = zahl * 10 + int(zeichen)
        else:
            raise E.UnexpectedTokenError(f"Unexpected token: {zeichen}", code="3011")

    return -zahl if negative else zahl


# -----------------------------
# Token types
# -----------------------------

class Token:
    """Base class: a token is identified by its kind and its text."""
    def __init__(self, text):
        self.text = str(text)

    def render(self):
        return self.text

    def __eq__(self, other):
        return type(self) is type(other) and self.text == other.text

    def __hash__(self):
        return hash((type(self).__name__, self.text))

    def __repr__(self):
        return f"{type(self).__name__}({self.text!r})"


class Number(Token):
    """Numeric literal; keeps the typed text for display and its float value."""
    def __init__(self, text):
        super().__init__(text)
        self.value = parse_literal(self.text)


class Operator(Token):
    """Binary operator + - * / (unary usage is decided by the evaluator)."""
    def __init__(self, text):
        if isOp(text) == -1:
            raise E.UnexpectedTokenError(f"Invalid Operator: {text}", code="3011")
        super().__init__(text)


class Paren(Token):
    def __init__(self, text):
        if text not in Parentheses:
            raise E.UnexpectedTokenError(f"Invalid parenthesis: {text}", code="3011")
        super().__init__(text)


def make_token(symbol):
    """Build the token for a single operator or parenthesis character."""
    if symbol in Parentheses:
        return Paren(symbol)
    return Operator(symbol)


def render_tokens(tokens):
    """Display form of an expression: tokens joined by single spaces."""
    return " ".join(token.render() for token in tokens)


# -----------------------------
# Tokenizer
# -----------------------------

def translator(problem):
    """Convert a raw input string into a flat token list.

    Notes:
    - A maximal run of digits and '.' forms one Number.
    - Whitespace is ignored; anything outside the grammar raises UnexpectedTokenError.
    """
    full_problem = []
    b = 0

    while b < len(problem):
        current_char = problem[b]

        # --- Numbers: digits and decimal separator ---
        if isDigit(current_char) or current_char == ".":
            start = b
            while (b + 1 < len(problem)) and (isDigit(problem[b + 1]) or problem[b + 1] == "."):
                b += 1
            full_problem.append(Number(problem[start:b + 1]))

        # --- Operators ---
        elif isOp(current_char) != -1:
            full_problem.append(Operator(current_char))

        # --- Parentheses ---
        elif current_char in Parentheses:
            full_problem.append(Paren(current_char))

        # --- Whitespace (ignored) ---
        elif current_char.isspace():
            pass

        else:
            raise E.UnexpectedTokenError(f"Unexpected token: {current_char}", code="3011")

        b = b + 1

    return full_problem


# -----------------------------
# Evaluator
# -----------------------------

class Stack:
    """Fixed-capacity LIFO; pushing past the capacity is a StackOverflowError."""
    def __init__(self, capacity=STACK_CAPACITY):
        self.capacity = capacity
        self.items = []

    def push(self, item):
        if len(self.items) >= self.capacity:
            raise E.StackOverflowError("Expression too deeply nested.", code="3031")
        self.items.append(item)

    def pop(self):
        return self.items.pop()

    def peek(self):
        return self.items[-1] if self.items else None

    def __len__(self):
        return len(self.items)


def apply_operator(values, operator):
    """Pop b then a from the value stack and push a <operator> b."""
    if len(values) < 2:
        raise E.InsufficientOperandsError(f"Missing Number for '{operator}'.", code="3027")
    b = values.pop()
    a = values.pop()

    if operator == '+':
        ergebnis = a + b
    elif operator == '-':
        ergebnis = a - b
    elif operator == '*':
        ergebnis = a * b
    elif operator == '/':
        ergebnis = a / b if b != 0 else 0.0
    else:
        raise E.UnexpectedTokenError(f"Invalid Operator: {operator}", code="3011")

    values.push(ergebnis)


def is_unary_position(previous):
    """'+' / '-' are unary at the start, after '(' and after another operator."""
    return (previous is None
            or isinstance(previous, Operator)
            or (isinstance(previous, Paren) and previous.text == "("))


def evaluate(tokens):
    """Evaluate a token list with a value stack and an operator stack.

    Unary '+' is skipped, unary '-' pushes 0 and becomes a subtraction.
    Returns the top of the value stack, or 0.0 for an empty expression.
    """
    values = Stack()
    operators = Stack()
    previous = None

    for token in tokens:
        if isinstance(token, Number):
            values.push(token.value)

        elif isinstance(token, Paren) and token.text == "(":
            operators.push("(")

        elif isinstance(token, Paren):
            while len(operators) and operators.peek() != "(":
                apply_operator(values, operators.pop())
            if operators.peek() != "(":
                raise E.MismatchedParenthesisError("Missing opening parenthesis '('", code="3010")
            operators.pop()

        elif isinstance(token, Operator):
            operator = token.text
            if operator in ("+", "-") and is_unary_position(previous):
                if operator == "-":
                    values.push(0.0)
                    operators.push(operator)
            else:
                while len(operators) and PRECEDENCE.get(operators.peek(), 0) >= PRECEDENCE[operator]:
                    apply_operator(values, operators.pop())
                operators.push(operator)

        else:
            raise E.UnexpectedTokenError(f"Unexpected token: {token!r}", code="3011")

        previous = token

    # Resolve whatever is still pending
    while len(operators):
        operator = operators.pop()
        if operator == "(":
            raise E.MismatchedParenthesisError("Missing closing parenthesis ')'", code="3009")
        apply_operator(values, operator)

    return values.peek() if len(values) else 0.0


# -----------------------------
# Public entry point
# -----------------------------

def calculate(problem):
    """Main API: tokenize (for strings) → evaluate → reject non-finite results."""
    equation = problem if isinstance(problem, str) else render_tokens(problem)
    try:
        tokens = translator(problem) if isinstance(problem, str) else list(problem)

        if debug == True:
            print(tokens)

        ergebnis = evaluate(tokens)

        if math.isnan(ergebnis) or math.isinf(ergebnis):
            raise E.CalculationError("Number too large (Arithmetic overflow).", code="3026")

        if debug == True:
            print(f"{equation} -> {ergebnis!r}")

        return ergebnis

    # Known numeric overflow
    except OverflowError:
        raise E.CalculationError(
            message="Number too large (Arithmetic overflow).",
            code="3026",
            equation=equation
        )
    # Re-raise our domain errors after attaching the source equation
    except E.MathError as e:
        e.equation = equation
        raise e
