"""Tests for the tree-walking evaluator."""

import pytest
from tests.utils import evaluate, parse_text
from ast_interpreter import Evaluator, interpret_program
from ast_nodes import *
from errors import DivisionByZeroError, UnboundVariableError, UndefinedOperatorError
from main import SAMPLE_PROGRAM


def _binop(a, b, op):
    return BinaryOpNode(left=NumberNode(value=a), operator=op, right=NumberNode(value=b))


@pytest.mark.parametrize(
    "a, b, op, expected",
    [
        (2, 3, BinaryOperator.PLUS, 5),
        (2, 3, BinaryOperator.MINUS, -1),
        (2, 3, BinaryOperator.MUL, 6),
        (7, 2, BinaryOperator.INTEGER_DIV, 3),
        (7, 2, BinaryOperator.FLOAT_DIV, 3.5),
        (-7, 2, BinaryOperator.INTEGER_DIV, -3),
        (7, -2, BinaryOperator.INTEGER_DIV, -3),
        (6, 3, BinaryOperator.FLOAT_DIV, 2.0),
    ],
)
def test_binary_operators(a, b, op, expected):
    result = Evaluator().calculate(_binop(a, b, op))
    assert result == expected
    assert type(result) is type(expected)


def test_mixed_operands_promote_to_real():
    assert Evaluator().calculate(parse_text("1 + 2.5")) == 3.5
    result = Evaluator().calculate(parse_text("7.5 div 2"))
    assert result == 3.0
    assert isinstance(result, float)


def test_float_division_by_zero():
    with pytest.raises(DivisionByZeroError):
        Evaluator().calculate(parse_text("1 / 0"))


def test_integer_division_by_zero_is_arithmetic_error():
    with pytest.raises(ArithmeticError):
        Evaluator().calculate(parse_text("1 div (2 - 2)"))


def test_double_negation():
    evaluator = evaluate("begin b := 5; c := - - b; d := -b; e := +b end.")
    env = evaluator.environment
    assert env.lookup("c") == 5
    assert env.lookup("d") == -5
    assert env.lookup("e") == 5


def test_case_insensitive_assignment_updates_one_slot():
    evaluator = evaluate("begin number := 1; NUMBER := 2; x := Number end.")
    env = evaluator.environment
    assert env.lookup("x") == 2
    assert env.lookup("nUmBeR") == 2
    assert len(env) == 2
    # The first spelling is kept for display.
    assert env.as_dict() == {"number": 2, "x": 2}


def test_nested_compounds_run_depth_first():
    env = interpret_program(parse_text("begin begin x := 1 end; y := x + 1 end."))
    assert env == {"x": 1, "y": 2}


def test_unbound_variable():
    with pytest.raises(UnboundVariableError) as exc:
        evaluate("begin b := a end.")
    assert exc.value.name == "a"


def test_no_op_has_no_effect():
    evaluator = Evaluator()
    evaluator.calculate(NumberNode(value=9))
    evaluator.calculate(NoOpNode())
    assert evaluator.accumulator == 9
    assert len(evaluator.environment) == 0

    env = interpret_program(parse_text("begin a := 1;; b := 2 end."))
    assert env == {"a": 1, "b": 2}


def test_declarations_do_not_affect_evaluation():
    src = """
    program decl;
    var a, b : integer;
        y : real;
    begin
      a := 10 div 4
    end.
    """
    assert interpret_program(parse_text(src)) == {"a": 2}


def test_accumulator_holds_last_expression():
    evaluator = Evaluator()
    assert evaluator.calculate(parse_text("(1 + 2) * 3")) == 9
    assert evaluator.accumulator == 9


def test_sample_program():
    env = interpret_program(parse_text(SAMPLE_PROGRAM))
    assert env == {"nUmber": 3, "a": 2, "b": 25, "_c": 27, "x": 11}


def test_reparsing_gives_same_environment():
    assert interpret_program(parse_text(SAMPLE_PROGRAM)) == interpret_program(
        parse_text(SAMPLE_PROGRAM)
    )


def test_undefined_binary_operator():
    node = BinaryOpNode(left=NumberNode(value=1), operator="%", right=NumberNode(value=2))
    with pytest.raises(UndefinedOperatorError):
        Evaluator().calculate(node)


def test_undefined_unary_operator():
    node = UnaryOpNode(operator="!", operand=NumberNode(value=1))
    with pytest.raises(UndefinedOperatorError):
        Evaluator().calculate(node)


def test_real_integer_division_never_yields_negative_zero():
    env = interpret_program(parse_text("begin x := -1.0 div 2; y := 0.5 div -3 end."))
    assert str(env["x"]) == "0.0"
    assert str(env["y"]) == "0.0"
