import pytest

from DeskCalc import Formatter
from DeskCalc.config_manager import PRECISION_CHOICES


@pytest.mark.parametrize("precision", PRECISION_CHOICES)
def test_whole_numbers_have_no_fraction(precision):
    assert Formatter.format_result(7.0, precision) == "7"
    assert Formatter.format_result(-12.0, precision) == "-12"

def test_large_whole_number():
    assert Formatter.format_result(1e20, 6) == "100000000000000000000"

def test_fixed_precision_above_one():
    assert Formatter.format_result(3.14159, 2) == "3.14"
    assert Formatter.format_result(-3.14159, 3) == "-3.142"
    assert Formatter.format_result(2.5, 6) == "2.500000"

def test_small_values_keep_significant_digits():
    text = Formatter.format_result(0.0001234, 6)
    assert text == "0.000123400"
    assert len(text.split(".")[1]) == 9

def test_small_values_below_one():
    assert Formatter.format_result(0.5, 6) == "0.500000"
    assert Formatter.format_result(-0.25, 2) == "-0.25"
    assert Formatter.format_result(1 / 3, 6) == "0.333333"

def test_small_values_are_capped_at_twelve_digits():
    text = Formatter.format_result(1e-11, 6)
    assert len(text.split(".")[1]) == 12

def test_seed_uses_plain_precision():
    assert Formatter.format_seed(2.5, 2) == "2.50"
    assert Formatter.format_seed(0.0001234, 6) == "0.000123"
    assert Formatter.format_seed(-4.0, 3) == "-4"

def test_is_whole():
    assert Formatter.is_whole(3.0)
    assert Formatter.is_whole(-0.0)
    assert not Formatter.is_whole(2.5)
