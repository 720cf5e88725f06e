from minilisp import SExpression, LispValue, EvaluatorFn
from minilisp.errors import LispArityError


def quote_form(
    tail: list[SExpression], env, functions, evaluate_fn: EvaluatorFn, depth_left: int
) -> LispValue:
    if len(tail) != 1:
        raise LispArityError("quote requires exactly one argument")
    return tail[0]
