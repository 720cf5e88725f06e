from __future__ import annotations
from typing import Callable

from minilisp import LispValue
from minilisp.errors import LispArityError, LispDivisionByZero, LispTypeError
from minilisp.types.sexpr import is_integer, is_list, to_lisp
from minilisp.types.symbol import Symbol

Builtin = Callable[[list[LispValue]], LispValue]


def get_integer(op: str, value: LispValue) -> int:
    if not is_integer(value):
        raise LispTypeError(f"{op} expected a number, got {to_lisp(value)}")
    return value


def get_list(op: str, value: LispValue) -> list:
    if not is_list(value):
        raise LispTypeError(f"{op} argument must be a list, got {to_lisp(value)}")
    return value


def truncate_div(a: int, b: int) -> int:
    # Python's // floors; the language truncates toward zero
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


# -------------------------------
# Arithmetic
# -------------------------------
def add(expr: list[LispValue]) -> int:
    result = 0
    for x in expr:
        result += get_integer("+", x)
    return result

def sub(expr: list[LispValue]) -> int:
    if not expr:
        raise LispArityError("- requires at least 1 argument")
    result = get_integer("-", expr[0])
    for x in expr[1:]:
        result -= get_integer("-", x)
    return result

def mul(expr: list[LispValue]) -> int:
    result = 1
    for x in expr:
        result *= get_integer("*", x)
    return result

def div(expr: list[LispValue]) -> int:
    if len(expr) != 2:
        raise LispArityError("/ requires exactly 2 arguments")
    dividend = get_integer("/", expr[0])
    divisor = get_integer("/", expr[1])
    if divisor == 0:
        raise LispDivisionByZero("Division by zero")
    return truncate_div(dividend, divisor)

# -------------------------------
# Comparison
# -------------------------------
def _comparison(op: str, test: Callable[[int, int], bool]) -> Builtin:
    def compare(expr: list[LispValue]) -> int:
        if len(expr) != 2:
            raise LispArityError(f"{op} requires exactly 2 arguments")
        a = get_integer(op, expr[0])
        b = get_integer(op, expr[1])
        return 1 if test(a, b) else 0
    compare.__name__ = f"compare_{op}"
    return compare

lt = _comparison("<", lambda a, b: a < b)
gt = _comparison(">", lambda a, b: a > b)
eq = _comparison("=", lambda a, b: a == b)
lte = _comparison("<=", lambda a, b: a <= b)
gte = _comparison(">=", lambda a, b: a >= b)

# -------------------------------
# List operations
# -------------------------------
def car(expr: list[LispValue]) -> LispValue:
    if len(expr) != 1:
        raise LispArityError("car requires exactly 1 argument")
    items = get_list("car", expr[0])
    if not items:
        raise LispTypeError("car on empty list")
    return items[0]

def cdr(expr: list[LispValue]) -> list[LispValue]:
    if len(expr) != 1:
        raise LispArityError("cdr requires exactly 1 argument")
    items = get_list("cdr", expr[0])
    if not items:
        raise LispTypeError("cdr on empty list")
    return items[1:]

# -------------------------------
# Registration
# -------------------------------
# Fixed primitives, consulted by name; user code cannot redefine them.
BUILTINS: dict[Symbol, Builtin] = {
    Symbol('+'): add,
    Symbol('-'): sub,
    Symbol('*'): mul,
    Symbol('/'): div,
    Symbol('car'): car,
    Symbol('cdr'): cdr,
}

# Checked before user-defined functions by the stateful evaluator.
COMPARISONS: dict[Symbol, Builtin] = {
    Symbol('<'): lt,
    Symbol('>'): gt,
    Symbol('='): eq,
    Symbol('<='): lte,
    Symbol('>='): gte,
}
