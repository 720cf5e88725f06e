from minilisp.types.symbol import Symbol, SymbolTable
from minilisp.types.lambda_fn import Lambda
from minilisp.types.environment import Environment
from minilisp.types.function_store import FunctionStore

__all__ = ["Symbol", "SymbolTable", "Lambda", "Environment", "FunctionStore"]
