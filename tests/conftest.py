import pytest

from minilisp.config import Config
from minilisp.interpreter import Interpreter
from minilisp.reader.parser import read, read_interned
from minilisp.types.symbol import SymbolTable

# Parser tests run twice:
# 1) with the source-referencing reader ["source"]
# 2) with the interning reader backed by a fresh SymbolTable ["interned"]
# Both must accept the same grammar and raise the same errors.


@pytest.fixture(params=["source", "interned"])
def reader(request):
    if request.param == "source":
        return read
    table = SymbolTable()
    return lambda text: read_interned(text, table)


@pytest.fixture
def interp():
    """Fresh session with default limits and no prelude."""
    return Interpreter(prelude=None, config=Config())
