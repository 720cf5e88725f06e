import pytest
from hypothesis import given, strategies as st

from minilisp.errors import LispParseError
from minilisp.reader.parser import lex, read, read_all, read_interned, is_numeral, parse_integer
from minilisp.types.symbol import Symbol, SymbolTable


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("atom", "a", 0)]),
        ("'a", [("quote", "'", 0), ("atom", "a", 1)]),
        ("(a b)", [("lparen", "(", 0), ("atom", "a", 1), ("atom", "b", 3), ("rparen", ")", 4)]),
        ("  \t\n42", [("atom", "42", 4)]),
        ("(+ 1\r\n 2)", [("lparen", "(", 0), ("atom", "+", 1), ("atom", "1", 3), ("atom", "2", 7), ("rparen", ")", 8)]),
        ("a(b", [("atom", "a", 0), ("lparen", "(", 1), ("atom", "b", 2)]),
        ("x'y", [("atom", "x", 0), ("quote", "'", 1), ("atom", "y", 2)]),
        ("   ", []),
        ("", []),
    ]
)
def test_lexer_basic(source, expected):
    assert list(lex(source)) == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", 123),
        ("-45", -45),
        ("0", 0),
        ("-0", 0),
        ("007", 7),
        ("-", Symbol("-")),
        ("-a", Symbol("-a")),
        ("5a", Symbol("5a")),
        ("1-2", Symbol("1-2")),
        ("+5", Symbol("+5")),
        ("--5", Symbol("--5")),
        ("foo", Symbol("foo")),
        ("<=", Symbol("<=")),
        ("'a", [Symbol("quote"), Symbol("a")]),
        ("''a", [Symbol("quote"), [Symbol("quote"), Symbol("a")]]),
        ("'(1 2)", [Symbol("quote"), [1, 2]]),
        ("(a b c)", [Symbol("a"), Symbol("b"), Symbol("c")]),
        ("()", []),
        ("( )", []),
        ("(+ 10 (* 2 5))", [Symbol("+"), 10, [Symbol("*"), 2, 5]]),
        ("  (car\n\t'(10 20))  ", [Symbol("car"), [Symbol("quote"), [10, 20]]]),
    ]
)
def test_parser(reader, source, expected):
    assert reader(source) == expected


def test_nested_lists(reader):
    expected = [[Symbol("a"), Symbol("b")], [Symbol("c"), [Symbol("d")]]]
    assert reader("((a b) (c (d)))") == expected


def test_integers_are_not_bools(reader):
    result = reader("1")
    assert type(result) is int


@pytest.mark.parametrize(
    "source,message",
    [
        ("", "Unexpected end of input"),
        ("   ", "Unexpected end of input"),
        ("'", "Unexpected end of input"),
        ("(1 '", "Unexpected end of input"),
        ("(", "Unterminated list"),
        ("(+ 1 (* 2 3)", "Unterminated list"),
        (")", "Empty atom"),
        ("(+ 1 2))", "Unexpected trailing input"),
        ("1 2", "Unexpected trailing input"),
    ]
)
def test_parse_errors(reader, source, message):
    with pytest.raises(LispParseError, match=message):
        reader(source)


def test_parse_error_reports_offset():
    with pytest.raises(LispParseError) as exc:
        read("(+ 1 2")
    assert exc.value.position == 0
    assert "offset 0" in str(exc.value)


def test_invalid_number_is_asserted():
    with pytest.raises(LispParseError, match="Invalid number"):
        parse_integer("12x4")


@pytest.mark.parametrize(
    "text,expected",
    [("1", True), ("-1", True), ("-", False), ("", False), ("1a", False), ("a1", False), ("١٢", False)],
)
def test_is_numeral(text, expected):
    assert is_numeral(text) is expected


@given(st.integers())
def test_integer_literals_round_trip(n):
    assert read(str(n)) == n


def test_interned_reader_shares_symbol_objects():
    table = SymbolTable()
    first = read_interned("(f x)", table)
    second = read_interned("(f y)", table)
    assert first[0] is second[0]
    assert len(table) == 3


def test_interned_reader_interns_quote():
    table = SymbolTable()
    read_interned("'a", table)
    assert "quote" in table


def test_source_reader_leaves_table_untouched():
    table = SymbolTable()
    read("(f x)")
    assert len(table) == 0


def test_read_all():
    assert read_all("(a) 1 'b") == [[Symbol("a")], 1, [Symbol("quote"), Symbol("b")]]
    assert read_all("   ") == []


def test_read_all_propagates_errors():
    with pytest.raises(LispParseError, match="Unterminated list"):
        read_all("(a) (b")


def test_deep_nesting_is_a_parse_error():
    source = "(" * 100_000
    with pytest.raises(LispParseError):
        read(source)
