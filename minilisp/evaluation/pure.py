"""Pure evaluator: no variables, no functions, no state.

Only `quote` and the arithmetic/list builtins are available, which makes the
result depend on the expression alone.
"""

from __future__ import annotations

from minilisp import SExpression, LispValue
from minilisp.config import DEFAULT_MAX_DEPTH
from minilisp.errors import LispEvalError, LispRecursionError, LispTypeError, LispUnboundSymbol
from minilisp.evaluation.apply import apply_builtin
from minilisp.evaluation.special_forms import PURE_SPECIAL_FORMS
from minilisp.reader.parser import read
from minilisp.types.symbol import Symbol


def evaluate_pure(expr: SExpression, depth_left: int = DEFAULT_MAX_DEPTH) -> LispValue:
    if depth_left <= 0:
        raise LispRecursionError("Maximum recursion depth exceeded")

    match expr:
        case bool():
            raise LispTypeError(f"Invalid SExpr {expr!r}")
        case int():
            return expr
        case Symbol():
            # Nothing can ever be bound here
            raise LispUnboundSymbol(f"Unbound variable {expr}")
        case list():
            if not expr:
                raise LispEvalError("Cannot evaluate empty list")
            head, *tail_args = expr
            if not isinstance(head, Symbol):
                raise LispTypeError("Operator must be a symbol")

            special = PURE_SPECIAL_FORMS.get(head)
            if special is not None:
                return special(tail_args, None, None, None, depth_left)

            args = [evaluate_pure(arg, depth_left - 1) for arg in tail_args]
            return apply_builtin(head, args)

    raise LispTypeError(f"Invalid SExpr {expr!r}")


def evaluate_text(source: str) -> LispValue:
    """Parse one expression from `source` and evaluate it purely."""
    return evaluate_pure(read(source))
