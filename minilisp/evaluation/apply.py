"""Application engine for MiniLisp.

Centralizes how an operator symbol is applied to already-evaluated operands,
so the pure and stateful evaluators share one set of dispatch rules:

1. comparison builtins (stateful only; user functions cannot shadow them)
2. user-defined functions from the session's FunctionStore (stateful only)
3. arithmetic and list builtins
4. anything else is an unknown operator
"""

from minilisp import LispValue, EvaluatorFn
from minilisp.builtins import BUILTINS, COMPARISONS
from minilisp.errors import LispUnknownOperator
from minilisp.types.environment import Environment
from minilisp.types.function_store import FunctionStore
from minilisp.types.lambda_fn import Lambda
from minilisp.types.symbol import Symbol


def apply_builtin(head: Symbol, args: list[LispValue]) -> LispValue:
    """Apply one of the fixed arithmetic/list primitives."""
    builtin = BUILTINS.get(head)
    if builtin is None:
        raise LispUnknownOperator(f"Unknown operator {head}")
    return builtin(args)


def apply_lambda(
    fn: Lambda,
    args: list[LispValue],
    caller_env: Environment,
    functions: FunctionStore,
    evaluate_fn: EvaluatorFn,
    depth_left: int,
) -> LispValue:
    """Apply a user-defined function.

    The body runs in the caller's environment extended with the parameter
    bindings; arity mismatches raise LispArityError via Lambda.extend_env.
    """
    new_env = fn.extend_env(args, caller_env)
    return evaluate_fn(fn.body, new_env, functions, depth_left - 1)


def apply(
    head: Symbol,
    args: list[LispValue],
    env: Environment,
    functions: FunctionStore,
    evaluate_fn: EvaluatorFn,
    depth_left: int,
) -> LispValue:
    comparison = COMPARISONS.get(head)
    if comparison is not None:
        return comparison(args)
    fn = functions.lookup(head)
    if fn is not None:
        return apply_lambda(fn, args, env, functions, evaluate_fn, depth_left)
    return apply_builtin(head, args)
