"""Runtime environment for MiniLisp.

An Environment is an ordered set of variable bindings. It is persistent: each
binding is a frame pointing at the frame it shadows through `outer`, and
`bind` returns a new Environment instead of mutating the receiver. A function
call therefore shares its caller's whole binding set in O(1) and pushes its
parameters on top, which gives dynamic scoping with the usual most-recent-wins
shadowing.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from minilisp import LispValue
from minilisp.errors import LispTypeError, LispUnboundSymbol
from minilisp.types.sexpr import to_lisp
from minilisp.types.symbol import Symbol


class Environment:
    """Immutable, parent-linked chain of (Symbol, value) bindings."""

    __slots__ = ("name", "value", "outer", "_size")

    def __init__(
        self,
        name: Optional[Symbol] = None,
        value: LispValue = None,
        outer: Optional[Environment] = None,
    ):
        # The root frame (name is None) holds no binding
        self.name: Symbol | None = name
        self.value: LispValue = value
        self.outer: Environment | None = outer
        self._size: int = 0 if outer is None else outer._size + 1

    def bind(self, name: Symbol, value: LispValue) -> Environment:
        """Return a new Environment with `name` bound to `value` on top of this one.

        Raises LispTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise LispTypeError(f"Cannot bind {name!r}: not a symbol")
        return Environment(name, value, self)

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the most recent frame binding `name`."""
        env: Optional[Environment] = self
        while env is not None and env.outer is not None:
            if env.name == name:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, most recent binding first.

        Raises LispUnboundSymbol if not found.
        """
        env = self.find(name)
        if env is None:
            raise LispUnboundSymbol(f"Unbound variable {name}")
        return env.value

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None

    def __len__(self) -> int:
        return self._size

    def bindings(self) -> Iterator[tuple[Symbol, LispValue]]:
        """Iterate bindings most recent first, including shadowed ones."""
        env: Optional[Environment] = self
        while env is not None and env.outer is not None:
            yield env.name, env.value
            env = env.outer

    def __str__(self) -> str:
        """Human-readable view of the visible bindings."""
        with StringIO() as buffer:
            buffer.write("{")
            seen: set[Symbol] = set()
            first = True
            for name, value in self.bindings():
                if name in seen:
                    continue
                seen.add(name)
                if not first:
                    buffer.write(", ")
                buffer.write(f"{name}: {to_lisp(value)}")
                first = False
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            buffer.write(" -> ".join(f"{name}={to_lisp(value)}" for name, value in self.bindings()))
            buffer.write(">")
            return buffer.getvalue()
