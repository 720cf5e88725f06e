from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import LispArityError, LispTypeError
from minilisp.types.environment import Environment
from minilisp.types.function_store import FunctionStore
from minilisp.types.sexpr import is_integer, to_lisp


def if_form(
    tail: list[SExpression],
    env: Environment,
    functions: FunctionStore,
    evaluate_fn: EvaluatorFn,
    depth_left: int,
) -> LispValue:
    if len(tail) != 3:
        raise LispArityError("if requires a condition, a then-expression and an else-expression")

    cond = evaluate_fn(tail[0], env, functions, depth_left - 1)
    if not is_integer(cond):
        raise LispTypeError(f"if condition must be a number, got {to_lisp(cond)}")

    # 0 is false, every other integer is true; only the chosen branch runs
    branch = tail[1] if cond != 0 else tail[2]
    return evaluate_fn(branch, env, functions, depth_left - 1)
