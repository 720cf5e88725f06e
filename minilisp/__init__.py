# Core type aliases for MiniLisp's data model.
# Code and data share one representation built from plain Python values:
#
#   - Integer atom -> int
#   - Symbol atom  -> minilisp.types.symbol.Symbol
#   - List         -> list of S-expressions
#
# Naming guidance:
# - SExpression: use in reader/parser code to denote syntactic forms.
# - LispValue:   use in evaluator/runtime code to denote evaluated values.
# Both resolve to `Any`; they are interchangeable since values are forms.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type: the evaluator handed to special forms
EvaluatorFn = Callable[..., LispValue]

from minilisp.interpreter import Interpreter, evaluate, reset  # noqa: E402

__all__ = [
    "LispValue",
    "SExpression",
    "EvaluatorFn",
    "Interpreter",
    "evaluate",
    "reset",
]
