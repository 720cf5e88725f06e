import pytest
from hypothesis import given, strategies as st

from minilisp.errors import (
    LispArityError,
    LispDivisionByZero,
    LispEvalError,
    LispTypeError,
    LispUnboundSymbol,
    LispUnknownOperator,
)
from minilisp.evaluation.pure import evaluate_pure, evaluate_text
from minilisp.types.symbol import Symbol


@pytest.fixture(params=["pure", "session"])
def run(request, interp):
    """Evaluate source text with either evaluator; both share these rules."""
    if request.param == "pure":
        return evaluate_text
    return interp.evaluate


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 10 (* 2 5))", 20),
        ("(- 100 (* 2 (+ 10 20 5)))", 30),
        ("(car '(10 20 30))", 10),
        ("(car (cdr (quote (10 20 30))))", 20),
        ("(+ (car '(10 5)) (car (cdr '(3 20))))", 30),
        ("(+ 1 2 3)", 6),
        ("(- 10 3 2)", 5),
        ("(- 7)", 7),
        ("(* 2 3 4)", 24),
        ("(/ 12 3)", 4),
        ("(/ 7 2)", 3),
        ("(/ -7 2)", -3),
        ("(/ 7 -2)", -3),
        ("(/ -7 -2)", 3),
        ("(+)", 0),
        ("(*)", 1),
        ("(+ -1 5 -3)", 1),
        ("42", 42),
        ("-8", -8),
        ("(cdr '(1 2 3))", [2, 3]),
        ("(cdr '(1))", []),
        ("(car '((1 2) 3))", [1, 2]),
        ("'(a b)", [Symbol("a"), Symbol("b")]),
        ("(quote x)", Symbol("x")),
        ("'()", []),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57),
    ]
)
def test_lisp_arithmetic_and_lists(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,error",
    [
        ("(/ 5 0)", LispDivisionByZero),
        ("(/ 5)", LispArityError),
        ("(/ 1 2 3)", LispArityError),
        ("(-)", LispArityError),
        ("(+ 1 '(2))", LispTypeError),
        ("(* 'a 2)", LispTypeError),
        ("(car 5)", LispTypeError),
        ("(car '())", LispTypeError),
        ("(cdr '())", LispTypeError),
        ("(car '(1) '(2))", LispArityError),
        ("(cdr)", LispArityError),
        ("(quote)", LispArityError),
        ("(quote a b)", LispArityError),
        ("()", LispEvalError),
        ("(1 2)", LispTypeError),
        ("((car '(+)) 1 2)", LispTypeError),
        ("(frobnicate 1)", LispUnknownOperator),
        ("x", LispUnboundSymbol),
    ]
)
def test_eval_errors(run, source, error):
    with pytest.raises(error):
        run(source)


def test_first_error_left_to_right_wins(run):
    # The unbound variable comes before the division by zero
    with pytest.raises(LispUnboundSymbol):
        run("(+ y (/ 1 0))")
    with pytest.raises(LispDivisionByZero):
        run("(+ (/ 1 0) y)")


def test_unknown_operator_after_operands(run):
    # Operands are evaluated before the operator is resolved
    with pytest.raises(LispDivisionByZero):
        run("(frobnicate (/ 1 0))")


def test_pure_evaluator_has_no_special_forms_beyond_quote():
    with pytest.raises(LispUnknownOperator):
        evaluate_text("(< 1 2)")
    with pytest.raises(LispUnknownOperator):
        evaluate_text("(if 1 2 3)")
    with pytest.raises(LispUnboundSymbol):
        evaluate_text("(defun f (x) x)")


def test_pure_evaluator_rejects_invalid_expressions():
    with pytest.raises(LispTypeError, match="Invalid SExpr"):
        evaluate_pure("text")
    with pytest.raises(LispTypeError, match="Invalid SExpr"):
        evaluate_pure(True)


@given(st.lists(st.integers(min_value=-10**6, max_value=10**6), max_size=8))
def test_sum_and_product_agree_with_python(values):
    args = " ".join(str(v) for v in values)
    product = 1
    for v in values:
        product *= v
    assert evaluate_text(f"(+ {args})") == sum(values)
    assert evaluate_text(f"(* {args})") == product


@given(st.integers(), st.integers().filter(lambda n: n != 0))
def test_division_truncates_toward_zero(a, b):
    result = evaluate_text(f"(/ {a} {b})")
    assert abs(result) == abs(a) // abs(b)
    assert result == 0 or (result < 0) == ((a < 0) != (b < 0))
