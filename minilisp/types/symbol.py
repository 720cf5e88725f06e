from __future__ import annotations
import sys


class Symbol:
    __slots__ = ("id",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.id = sys.intern(name)

    def __eq__(self, other: Symbol) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id


class SymbolTable:
    """Append-only store mapping symbol text to one canonical Symbol handle.

    Interning the same text twice returns the very same object, so handles
    stay valid for as long as the table does. `clear` drops every entry;
    handles issued before a clear still compare equal by name but are no
    longer the canonical objects for their text.
    """

    __slots__ = ("_symbols",)

    def __init__(self):
        self._symbols: dict[str, Symbol] = {}

    def intern(self, text: str) -> Symbol:
        sym = self._symbols.get(text)
        if sym is None:
            sym = Symbol(text)
            self._symbols[sym.id] = sym
        return sym

    def clear(self) -> None:
        self._symbols.clear()

    def __contains__(self, text: str) -> bool:
        return text in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __repr__(self):
        return f"<SymbolTable {len(self._symbols)} symbols>"
