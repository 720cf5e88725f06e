"""
  Lisp Reader, Lexer and Parser

- Recursive descent over a token stream
- Emits plain Python values:

    - integers -> int
    - symbols -> Symbol (interned through a SymbolTable when one is given)
    - lists -> Python list
    - 'x -> [Symbol("quote"), x]

Grammar:

    expr        := quote-sugar | list | atom
    quote-sugar := "'" expr
    list        := "(" expr* ")"
    atom        := maximal run of characters other than whitespace, "(", ")", "'"
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Iterator, Optional

from minilisp import SExpression
from minilisp.errors import LispParseError
from minilisp.types.symbol import Symbol, SymbolTable

logger = logging.getLogger(__name__)

# Space, newline and tab separate tokens; carriage return is accepted too so
# that CRLF input from hosts reads the same as LF input.
DIGITS = frozenset("0123456789")

TOKEN_RE = re.compile(
    r"[ \n\t\r]*("
    r"(?P<quote>')"  # quote sugar
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<atom>[^ \n\t\r()']+)"  # numbers and symbols
    r")"
)

Token = tuple[str, str, int]


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value, offset) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            # Only trailing whitespace is left
            break
        for nm in TOKEN_RE.groupindex:
            if m.group(nm):
                yield nm, m.group(nm), m.start(1)
                break
        pos = m.end()


def is_numeral(text: str) -> bool:
    """A digit, or '-' followed by at least one digit, then only digits."""
    digits = text[1:] if text.startswith("-") else text
    return bool(digits) and all(c in DIGITS for c in digits)


def parse_integer(text: str, position: int | None = None) -> int:
    negative = text.startswith("-")
    digits = text[1:] if negative else text
    result = 0
    for c in digits:
        if c not in DIGITS:
            raise LispParseError(f"Invalid number {text!r}", position)
        result = result * 10 + (ord(c) - ord("0"))
    return -result if negative else result


class TokenStream:
    """Recursive-descent parser over the tokens of one source text.

    `make_symbol` decides how symbol atoms are represented: the default wraps
    the source slice directly, `SymbolTable.intern` canonicalizes it.
    """

    def __init__(
        self,
        source: str,
        make_symbol: Callable[[str], Symbol] = Symbol,
    ):
        self.source = source
        self.tokens = lex(source)
        self.buffer: list[Token] = []
        self.make_symbol = make_symbol

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Token:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens)

    def at_end(self) -> bool:
        return self.peek() is None

    def parse_expr(self) -> SExpression:
        tok = self.peek()
        if tok is None:
            raise LispParseError("Unexpected end of input", len(self.source))
        tok_type, tok_val, pos = tok

        if tok_type == "quote":
            self.advance()
            return [self.make_symbol("quote"), self.parse_expr()]

        if tok_type == "lparen":
            self.advance()
            items: list[SExpression] = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise LispParseError("Unterminated list", pos)
                if nxt[0] == "rparen":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        if tok_type == "rparen":
            # A ')' where an atom should start is a zero-length atom
            raise LispParseError("Empty atom", pos)

        self.advance()
        return self.parse_atom(tok_val, pos)

    def parse_atom(self, text: str, pos: int) -> SExpression:
        if not text:
            raise LispParseError("Empty atom", pos)
        if is_numeral(text):
            return parse_integer(text, pos)
        return self.make_symbol(text)

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.parse_expr()

    def parse_one(self) -> SExpression:
        expr = self.parse_expr()
        trailing = self.peek()
        if trailing is not None:
            raise LispParseError("Unexpected trailing input", trailing[2])
        return expr


def _symbol_factory(symbols: SymbolTable | None) -> Callable[[str], Symbol]:
    return Symbol if symbols is None else symbols.intern


def _parse(stream: TokenStream, parse: Callable[[], SExpression]):
    try:
        return parse()
    except RecursionError:
        raise LispParseError("Expression nested too deeply", len(stream.source)) from None


def read(source: str) -> SExpression:
    """Parse exactly one expression; symbols are built from the source slices."""
    stream = TokenStream(source)
    expr = _parse(stream, stream.parse_one)
    logger.debug("Read %r", expr)
    return expr


def read_interned(source: str, symbols: SymbolTable) -> SExpression:
    """Parse exactly one expression, interning every symbol in `symbols`."""
    stream = TokenStream(source, symbols.intern)
    expr = _parse(stream, stream.parse_one)
    logger.debug("Read (interned) %r", expr)
    return expr


def read_all(source: str, symbols: SymbolTable | None = None) -> list[SExpression]:
    """Parse every top-level expression in `source`."""
    stream = TokenStream(source, _symbol_factory(symbols))
    return _parse(stream, lambda: list(stream.parse_all()))
