import logging

from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import LispArityError, LispTypeError
from minilisp.types.environment import Environment
from minilisp.types.function_store import FunctionStore
from minilisp.types.lambda_fn import Lambda
from minilisp.types.sexpr import is_list, is_symbol, to_lisp

logger = logging.getLogger(__name__)


def defun_form(
    tail: list[SExpression],
    env: Environment,
    functions: FunctionStore,
    evaluate_fn: EvaluatorFn,
    depth_left: int,
) -> LispValue:
    """
    (defun name (params...) body)
    Stores the function in the session's function store and returns its name.
    """
    if len(tail) != 3:
        raise LispArityError("defun requires a name, a parameter list and a body")

    name, params, body = tail
    if not is_symbol(name):
        raise LispTypeError(f"Function name must be a symbol, got {to_lisp(name)}")
    if not is_list(params):
        raise LispTypeError(f"Parameter list of {name} must be a list, got {to_lisp(params)}")
    for param in params:
        if not is_symbol(param):
            raise LispTypeError(f"Parameter of {name} must be a symbol, got {to_lisp(param)}")

    functions.define(name, Lambda(name, list(params), body))
    logger.debug("Defined %s/%d", name, len(params))
    return name
