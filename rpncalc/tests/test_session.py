"""Session tests: tokenizing, number parsing, and token-stream evaluation."""

import math

import pytest

from rpncalc import Calculator, DivisionByZero, InsufficientOperands, UnknownOperation
from rpncalc.session import evaluate, evaluate_line, parse_number, tokenize


def test_tokenize_splits_whitespace():
    assert tokenize("  1\t2 \n+ ") == ["1", "2", "+"]
    assert tokenize("") == []


def test_parse_number():
    assert parse_number("3.5") == 3.5
    assert parse_number("-3") == -3.0
    assert parse_number("1e3") == 1000.0
    assert math.isinf(parse_number("inf"))


def test_operators_are_not_numbers():
    assert parse_number("-") is None
    assert parse_number("+") is None
    assert parse_number("sqrt") is None


def test_evaluate_line_scenarios():
    assert evaluate_line("1 1 +") == 2.0
    assert evaluate_line("10 -12 +") == -2.0
    assert evaluate_line("123456789 987654321 -") == -864197532.0
    assert evaluate_line("3.1459 2.7182 *") == 3.1459 * 2.7182


def test_evaluate_chained_expression():
    # (3 + 4) * (10 - 4) / 2
    assert evaluate_line("3 4 + 10 4 - * 2 /") == 21.0


def test_evaluate_leaves_result_on_stack():
    calc = Calculator()
    assert evaluate(calc, ["2", "3", "*"]) == 6.0
    assert calc.stack == (6.0,)
    assert evaluate(calc, ["4", "+"]) == 10.0


def test_evaluate_empty_returns_none():
    assert evaluate_line("") is None


def test_evaluate_keeps_tokens_before_failure():
    calc = Calculator()
    with pytest.raises(InsufficientOperands):
        evaluate(calc, ["1", "2", "+", "*"])
    assert calc.stack == (3.0,)


def test_evaluate_unknown_token():
    with pytest.raises(UnknownOperation):
        evaluate_line("1 2 swap")


def test_evaluate_divide_by_zero():
    with pytest.raises(DivisionByZero):
        evaluate_line("1 0 /")
