"""S-expression helpers.

An S-expression is exactly one of:

    - an Integer atom (a Python ``int``; ``bool`` is not accepted),
    - a Symbol atom (``minilisp.types.symbol.Symbol``),
    - a List (a Python ``list`` of S-expressions, possibly empty).

The three representations are disjoint Python types, so a value can never be
both an atom and a list. Consumers dispatch with ``match`` and treat anything
else as an invalid expression.
"""

from __future__ import annotations

from io import StringIO

from minilisp import SExpression
from minilisp.types.symbol import Symbol


def is_integer(expr: SExpression) -> bool:
    return isinstance(expr, int) and not isinstance(expr, bool)


def is_symbol(expr: SExpression) -> bool:
    return isinstance(expr, Symbol)


def is_atom(expr: SExpression) -> bool:
    return is_integer(expr) or is_symbol(expr)


def is_list(expr: SExpression) -> bool:
    return isinstance(expr, list)


def is_sexpr(expr: SExpression) -> bool:
    """Recursively check that `expr` is built only from valid variants."""
    if is_atom(expr):
        return True
    if is_list(expr):
        return all(is_sexpr(e) for e in expr)
    return False


def _write(expr: SExpression, buffer: StringIO) -> None:
    if is_list(expr):
        buffer.write("(")
        for i, item in enumerate(expr):
            if i:
                buffer.write(" ")
            _write(item, buffer)
        buffer.write(")")
    else:
        buffer.write(str(expr))


def to_lisp(expr: SExpression) -> str:
    """Render an S-expression back to Lisp source text."""
    with StringIO() as buffer:
        _write(expr, buffer)
        return buffer.getvalue()
