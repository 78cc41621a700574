import pytest

from DeskCalc import MathEngine
from DeskCalc import error as E
from DeskCalc.MathEngine import Number, Operator, Paren


def test_multiplication_binds_tighter_than_addition():
    assert MathEngine.calculate("3 + 4 * 2") == 11

def test_parentheses_override_precedence():
    assert MathEngine.calculate("(3 + 4) * 2") == 14

def test_leading_unary_minus():
    assert MathEngine.calculate("-5 + 3") == -2

def test_unary_plus_is_ignored():
    assert MathEngine.calculate("+5 * 2") == 10

def test_unary_minus_after_operator():
    assert MathEngine.calculate("2 * -3") == -6
    assert MathEngine.calculate("2 - -3") == 5
    assert MathEngine.calculate("2 * ( -3 + 1 )") == -4

def test_left_associative_subtraction_and_division():
    assert MathEngine.calculate("10 - 4 - 3") == 3
    assert MathEngine.calculate("8 / 2 / 2") == 2

def test_division_by_zero_yields_zero():
    assert MathEngine.calculate("5 / 0") == 0
    assert MathEngine.calculate("1 + 5 / 0") == 1

def test_empty_expression_is_zero():
    assert MathEngine.calculate("") == 0
    assert MathEngine.calculate("   ") == 0

def test_decimal_literals():
    assert MathEngine.calculate("1.5 * 2") == 3
    assert MathEngine.calculate("0.25 + 0.25") == pytest.approx(0.5)

def test_extra_decimal_points_are_ignored():
    assert MathEngine.parse_literal("1.2.5") == pytest.approx(1.25)

def test_negative_literal_text():
    assert MathEngine.parse_literal("-3.5") == pytest.approx(-3.5)

def test_insufficient_operands_inside_parentheses():
    with pytest.raises(E.InsufficientOperandsError) as excinfo:
        MathEngine.calculate("4 * ( 2 + )")
    assert excinfo.value.equation == "4 * ( 2 + )"
    assert excinfo.value.code == "3027"

def test_leading_multiplication_is_an_error():
    with pytest.raises(E.SyntaxError):
        MathEngine.calculate("* 3")

def test_missing_closing_parenthesis():
    with pytest.raises(E.MismatchedParenthesisError):
        MathEngine.calculate("(3 + 4")

def test_missing_opening_parenthesis():
    with pytest.raises(E.MismatchedParenthesisError):
        MathEngine.calculate("3 + 4 )")

def test_stack_overflow_on_deep_nesting():
    problem = "(" * 101 + "1" + ")" * 101
    with pytest.raises(E.StackOverflowError):
        MathEngine.calculate(problem)

def test_value_stack_overflow():
    with pytest.raises(E.StackOverflowError):
        MathEngine.calculate("1 " * 101)
    assert MathEngine.calculate("1 " * 100) == 1

def test_nesting_within_capacity():
    problem = "(" * 50 + "1 + 1" + ")" * 50
    assert MathEngine.calculate(problem) == 2

def test_unexpected_character():
    with pytest.raises(E.UnexpectedTokenError):
        MathEngine.calculate("2 x 3")

def test_overflow_is_a_calculation_error():
    problem = " * ".join(["99999999999999999999"] * 20)
    with pytest.raises(E.CalculationError):
        MathEngine.calculate(problem)

def test_all_evaluation_failures_share_one_base():
    for problem in ["4 * ( 2 + )", "(1", "1)", "(" * 101, "2 $ 2"]:
        with pytest.raises(E.MathError):
            MathEngine.calculate(problem)

def test_adjacent_numbers_keep_the_last_value():
    assert MathEngine.calculate("3 ( 4 )") == 4

def test_translator_builds_tagged_tokens():
    assert MathEngine.translator("12+(3)") == [
        Number("12"), Operator("+"), Paren("("), Number("3"), Paren(")")
    ]

def test_calculate_accepts_token_list():
    tokens = [Number("-3"), Operator("*"), Number("2")]
    assert MathEngine.calculate(tokens) == -6

def test_render_tokens():
    tokens = [Paren("("), Number("1.5"), Operator("+"), Number("2"), Paren(")")]
    assert MathEngine.render_tokens(tokens) == "( 1.5 + 2 )"

def test_invalid_operator_token():
    with pytest.raises(E.UnexpectedTokenError):
        Operator("%")
