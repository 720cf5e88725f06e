class LispError(Exception):
    """ Base class for all MiniLisp errors"""
    pass


class LispParseError(LispError):
    """ Raised when the source text is not a well-formed expression"""

    def __init__(self, message: str, position: int | None = None):
        super().__init__(message)
        self.position = position

    def __str__(self):
        message = super().__str__()
        if self.position is None:
            return message
        return f"{message} (at offset {self.position})"


class LispEvalError(LispError):
    """ Base class for errors raised while evaluating a parsed expression"""
    pass


class LispUnboundSymbol(LispEvalError):
    """ Raised when a symbol is used as a variable before it is bound"""
    pass


class LispArityError(LispEvalError):
    """ Raised when the number of arguments passed to an operator is incorrect"""


class LispTypeError(LispEvalError):
    """ Raised when the types of arguments passed to an operator are incorrect"""


class LispDivisionByZero(LispEvalError):
    """ Raised when `/` is given a zero divisor"""


class LispUnknownOperator(LispEvalError):
    """ Raised when the head of an application names no builtin or function"""


class LispRecursionError(LispEvalError):
    """ Raised when evaluation nests deeper than the configured limit"""
