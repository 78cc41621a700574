# Formatter.py
"""""
Result formatting for history lines and for reusing a result as a new operand.

Rules
-----
- Whole numbers are rendered without fractional digits.
- |value| >= 1: exactly `precision` fractional digits.
- 0 < |value| < 1: enough fractional digits to show `precision` significant
  figures, never more than MAX_SMALL_DIGITS.
"""""

import math

# Upper bound for the fractional digits of small magnitudes
MAX_SMALL_DIGITS = 12


def is_whole(value):
    """True if the float equals its truncation toward zero."""
    return value == math.trunc(value)


def significant_digits(value, precision):
    """Fractional digits needed to show `precision` significant figures of 0 < |value| < 1."""
    first_sig_digit_pos = -math.floor(math.log10(abs(value)))
    return min(first_sig_digit_pos + (precision - 1), MAX_SMALL_DIGITS)


def format_result(value, precision):
    """Render a finite evaluation result for the history."""
    if is_whole(value):
        return str(int(value))

    display_precision = precision
    if abs(value) < 1.0:
        display_precision = significant_digits(value, precision)

    return f"{value:.{display_precision}f}"


def format_seed(value, precision):
    """Render a previous result as the first operand of a new expression.

    Unlike format_result there is no significant-digit rule here: the value
    is either a whole number or cut to `precision` fractional digits.
    """
    if is_whole(value):
        return str(int(value))
    return f"{value:.{precision}f}"
