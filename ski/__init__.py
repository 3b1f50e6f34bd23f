from ski.engine import DidNotTerminate, normalize, reduce_to_arity
from ski.errors import ParseError
from ski.parser import parse
from ski.syntax import FULL, MINIMAL, render

__all__ = [
    'DidNotTerminate',
    'FULL',
    'MINIMAL',
    'ParseError',
    'normalize',
    'parse',
    'reduce_to_arity',
    'render',
]
