"""User-defined function representation for MiniLisp."""

from __future__ import annotations

from io import StringIO

from minilisp import SExpression, LispValue
from minilisp.errors import LispArityError
from minilisp.types.environment import Environment
from minilisp.types.sexpr import to_lisp
from minilisp.types.symbol import Symbol


class Lambda:
    """A named function: formal parameters and a single body expression.

    There is no captured environment. A call runs in the caller's environment
    extended with the parameter bindings (dynamic scope).
    """

    __slots__ = ("name", "formals", "body")

    def __init__(self, name: Symbol, formals: list[Symbol], body: SExpression):
        self.name: Symbol = name
        self.formals: list[Symbol] = formals
        self.body: SExpression = body

    @property
    def arity(self) -> int:
        return len(self.formals)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(defun ")
            buffer.write(str(self.name))
            buffer.write(" (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(") ")
            buffer.write(to_lisp(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Return the Lisp-style representation of the function."""
        return str(self)

    def extend_env(self, args: list[LispValue], caller_env: Environment) -> Environment:
        """
        Bind the given argument values to this function's formal parameters on
        top of every binding visible in `caller_env`, in call order.

        Raises LispArityError if the number of arguments does not match.
        """
        if len(args) != len(self.formals):
            raise LispArityError(
                f"{self.name} expects {len(self.formals)} argument(s), got {len(args)}"
            )
        env = caller_env
        for formal, value in zip(self.formals, args):
            env = env.bind(formal, value)
        return env
