from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Literal

from minilisp import SExpression, LispValue
from minilisp.config import Config, load_config
from minilisp.errors import LispRecursionError, LispTypeError
from minilisp.evaluation.evaluator import evaluate as evaluate_expr
from minilisp.reader.parser import read_interned, read_all
from minilisp.types.environment import Environment
from minilisp.types.function_store import FunctionStore
from minilisp.types.sexpr import is_integer, is_sexpr, to_lisp
from minilisp.types.symbol import Symbol, SymbolTable

logger = logging.getLogger(__name__)


class Interpreter:
    """
    A MiniLisp session: owns the symbol table, the function store and the
    session environment, and evaluates text against them call after call.

    Each call either succeeds and returns a value or raises a LispError.
    State changes made by earlier successful calls are never rolled back.
    """

    def __init__(
        self,
        prelude: str | None | Literal['auto'] = 'auto',
        *,
        config: Config | None = None,
    ):
        self.config: Config = config if config is not None else load_config()
        self.symbols: SymbolTable = SymbolTable()
        self.functions: FunctionStore = FunctionStore()
        self.env: Environment = Environment()

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            self.load_files(self.config.prelude_paths)
        elif prelude:
            self.evaluate_all(prelude)

    def _run(self, expr: SExpression) -> LispValue:
        try:
            return evaluate_expr(expr, self.env, self.functions, self.config.max_depth)
        except RecursionError:
            raise LispRecursionError("Maximum recursion depth exceeded") from None

    def evaluate(self, code: str) -> LispValue:
        """Parse one top-level expression from `code` and evaluate it.

        Integers come back as int; anything else (the Symbol returned by
        defun, a quoted list) is returned unchanged.
        """
        expr = read_interned(code, self.symbols)
        result = self._run(expr)
        logger.debug("%s => %s", code.strip(), to_lisp(result))
        return result

    def evaluate_all(self, code: str) -> list[LispValue]:
        """Evaluate every top-level expression in `code`, in order."""
        return [self._run(expr) for expr in read_all(code, self.symbols)]

    def evaluate_number(self, code: str) -> int:
        result = self.evaluate(code)
        if not is_integer(result):
            raise LispTypeError(f"Final result must be a number, got {to_lisp(result)}")
        return result

    def load_files(self, paths: Iterable[Path]) -> None:
        for path in map(Path, paths):
            if not path.is_file():
                # Be permissive: a missing prelude is skipped
                logger.warning("Prelude %s not found, skipping", path)
                continue
            logger.debug("Loading prelude %s", path)
            self.evaluate_all(path.read_text(encoding="utf-8"))

    def bind(self, name: str | Symbol, value: LispValue) -> None:
        """Add a variable binding to the session environment.

        Raises LispTypeError if `value` is not an S-expression.
        """
        if not is_sexpr(value):
            raise LispTypeError(f"Cannot bind {name}: {value!r} is not an S-expression")
        if isinstance(name, str):
            name = self.symbols.intern(name)
        self.env = self.env.bind(name, value)

    def reset(self, clear_symbols: bool = True) -> None:
        """Forget every function definition, session binding and (optionally) symbol."""
        self.functions.clear()
        self.env = Environment()
        if clear_symbols:
            self.symbols.clear()
        logger.debug("Session reset (symbols cleared: %s)", clear_symbols)

    @property
    def function_count(self) -> int:
        return len(self.functions)

    @property
    def symbol_count(self) -> int:
        return len(self.symbols)

    @property
    def function_names(self) -> list[str]:
        return [str(name) for name in self.functions.names()]


# Module-level default session, created on first use.
_default: Interpreter | None = None


def default_interpreter() -> Interpreter:
    global _default
    if _default is None:
        _default = Interpreter()
    return _default


def evaluate(code: str) -> LispValue:
    return default_interpreter().evaluate(code)


def reset() -> None:
    default_interpreter().reset()
