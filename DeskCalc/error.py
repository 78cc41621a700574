# error.py
"""Error types shared by the calculator modules.

Every failure carries a four digit code that indexes ERROR_MESSAGES.
The Session collapses all evaluation failures into one "syntax error"
history line; the codes are kept for debugging output.
"""


class MathError(Exception):
    def __init__(self, message, code="9999", equation=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.equation = equation

class SyntaxError(MathError):
    pass

class MismatchedParenthesisError(SyntaxError):
    pass

class InsufficientOperandsError(SyntaxError):
    pass

class StackOverflowError(SyntaxError):
    pass

class UnexpectedTokenError(SyntaxError):
    pass

class CalculationError(MathError):
    pass

class ConfigurationError(MathError):
    pass



#Error Messages are structured in:
# 1. Digit: Main Error (3 Calculator, 4 UI, 5 Configuration, 9 Unexpected)
# 2. Digit: Specification
# 3. and 4. Digit: Error Number



ERROR_MESSAGES = {
    "3009" : "Missing ')'. ",
    "3010" : "Missing '('. ",
    "3011" : "Unexpected Token: ", # + Token
    "3026" : "Number too big.",
    "3027" : "Missing Number.",
    "3031" : "Expression too deeply nested.",


    "4001" : "Clipboard not available.",


    "5001" : "Invalid result precision: ", # + value


    "9999" : "Unexpected Error: " #+error
}
