from minilisp.reader.parser import lex, TokenStream, read, read_interned, read_all

__all__ = ["lex", "TokenStream", "read", "read_interned", "read_all"]
