# Bella language package
# This package provides a parser and a tree-walking interpreter for Bella.
from .interpreter import run_program, compile_module, Interpreter
from .parser import parse_program, ParseError
from .errors import BellaError

__all__ = [
    'run_program',
    'compile_module',
    'parse_program',
    'Interpreter',
    'BellaError',
    'ParseError',
]
