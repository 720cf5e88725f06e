"""Stateful evaluator for the MiniLisp interpreter.

Evaluates an expression against an Environment of variable bindings and a
FunctionStore shared across a session. Adds variables, `if` and `defun` on top
of the pure evaluator's rules.
"""

from __future__ import annotations

import logging

from minilisp import SExpression, LispValue
from minilisp.config import DEFAULT_MAX_DEPTH
from minilisp.errors import LispEvalError, LispRecursionError, LispTypeError
from minilisp.evaluation.apply import apply
from minilisp.evaluation.special_forms import SPECIAL_FORMS
from minilisp.types.environment import Environment
from minilisp.types.function_store import FunctionStore
from minilisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def evaluate(
    expr: SExpression,
    env: Environment,
    functions: FunctionStore,
    depth_left: int = DEFAULT_MAX_DEPTH,
) -> LispValue:
    """
    Evaluate `expr`. `depth_left` is how many more nested evaluations are
    allowed before LispRecursionError is raised.
    """
    if depth_left <= 0:
        logger.debug("Recursion limit reached evaluating %r", expr)
        raise LispRecursionError("Maximum recursion depth exceeded")

    match expr:
        case bool():
            raise LispTypeError(f"Invalid SExpr {expr!r}")
        case int():
            # Numbers evaluate to themselves
            return expr
        case Symbol():
            return env.lookup(expr)
        case list():
            if not expr:
                raise LispEvalError("Cannot evaluate empty list")
            head, *tail_args = expr
            if not isinstance(head, Symbol):
                raise LispTypeError("Operator must be a symbol")

            # --- Special forms handling ---
            special = SPECIAL_FORMS.get(head)
            if special is not None:
                return special(tail_args, env, functions, evaluate, depth_left)

            # Operands are evaluated left to right before dispatch
            args = [evaluate(arg, env, functions, depth_left - 1) for arg in tail_args]
            return apply(head, args, env, functions, evaluate, depth_left)

    raise LispTypeError(f"Invalid SExpr {expr!r}")
