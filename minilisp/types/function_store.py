from __future__ import annotations

import logging
from typing import Optional

from minilisp.errors import LispTypeError
from minilisp.types.lambda_fn import Lambda
from minilisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


class FunctionStore:
    """
    Function store mapping function names (Symbols) to Lambdas, shared by
    every environment of one session.

    Entries are kept in definition order. Redefining a name removes the old
    entry and appends the new one, so there is at most one live definition
    per name and the most recent definition is the one found.
    """

    __slots__ = ("functions",)

    def __init__(self):
        self.functions: dict[Symbol, Lambda] = {}

    def define(self, name: Symbol, fn: Lambda) -> None:
        if not isinstance(name, Symbol):
            raise LispTypeError(f"Cannot define {name!r}: function name must be a symbol")
        if self.functions.pop(name, None) is not None:
            logger.debug("Redefining function %s", name)
        self.functions[name] = fn

    def lookup(self, name: Symbol) -> Optional[Lambda]:
        return self.functions.get(name)

    def names(self) -> list[Symbol]:
        return list(self.functions)

    def clear(self) -> None:
        self.functions.clear()

    def __contains__(self, name: Symbol) -> bool:
        return name in self.functions

    def __len__(self) -> int:
        return len(self.functions)

    def __repr__(self) -> str:
        return f"<FunctionStore {' '.join(str(n) for n in self.functions)}>"
