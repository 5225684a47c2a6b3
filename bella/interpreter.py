"""Interpreter for the Bella language.

This module implements the Bella evaluator: a tree-walking interpreter
that executes a `Program` AST. Statements are executed for effect by
`Interpreter.execute`; expressions are reduced to values by
`Interpreter.evaluate`. Both work against an explicit chain of
`Environment` frames. The root frame is seeded with the numeric standard
library before the program body runs, and every call to a user-defined
function gets a fresh frame parented to the frame the function was
declared in.

Errors are raised as `BellaError` subclasses and are never caught here.
"""

from __future__ import annotations

import math
from typing import Any, List, Optional, TextIO

from .ast import (
    Program, Block, VariableDeclaration, Assignment, PrintStatement, While,
    FunctionDeclaration, BinaryExp, UnaryExp, ConditionalExpression, Call,
    ArrayLiteral, Subscript, Identifier, Numeral, Bool, Node,
)
from .builtin_function import NativeFunction
from .environment import Environment
from .errors import (
    ArityMismatchError, BellaTypeError, IndexOutOfRangeError, NotCallableError,
    UnknownOperatorError,
)
from .parser import parse_program
from .std.numeric import populate_numeric_environment
from .std.numeric.ieee_math import IEEEMath
from .values import ArrayVal, Closure, is_boolean, is_number, to_string, type_name

ARITHMETIC_OPS = ('+', '-', '*', '/', '%', '**')
COMPARISON_OPS = ('<', '<=', '==', '!=', '>=', '>')
LOGICAL_OPS = ('&&', '||')

_ieee = IEEEMath()


class Interpreter:
    """Core interpreter that executes a Bella AST."""
    def __init__(self, debug_level: int = 0, debug_file: str = 'debug.txt',
                 out: Optional[TextIO] = None):
        self.global_env = Environment()
        self.out = out
        self.debug_level = debug_level
        self.debug_file = debug_file
        self.debug_fp: Optional[TextIO] = None
        self.load_standard_library()

    def debug(self, msg: str):
        # Program output owns stdout, so the trace only ever goes to the file
        if self.debug_level > 0 and self.debug_fp:
            self.debug_fp.write(msg + '\n')
            self.debug_fp.flush()

    def load_standard_library(self):
        numeric_env = populate_numeric_environment()
        for name in numeric_env.names:
            self.global_env.declare(name, numeric_env.values[name])

    # Public API
    def run(self, program: Program, env: Optional[Environment] = None) -> None:
        if env is None:
            env = self.global_env
        if self.debug_level > 0:
            self.debug_fp = open(self.debug_file, 'w', encoding='utf-8')
        try:
            self.debug(f"run program ({len(program.body.statements)} statements)")
            self.execute(program.body, env)
            self.debug("program finished")
        finally:
            if self.debug_fp:
                self.debug_fp.close()
                self.debug_fp = None

    def execute(self, node: Node, env: Environment) -> None:
        if isinstance(node, Block):
            # Blocks share the enclosing frame; only calls open a new one
            for stmt in node.statements:
                self.execute(stmt, env)
            return
        if isinstance(node, VariableDeclaration):
            value = self.evaluate(node.initializer, env)
            env.declare(node.id.name, value)
            if self.debug_level >= 2:
                self.debug(f"declare {node.id.name}: {type_name(value)} = {to_string(value)}")
            return
        if isinstance(node, Assignment):
            value = self.evaluate(node.source, env)
            env.assign(node.target.name, value)
            if self.debug_level >= 2:
                self.debug(f"assign {node.target.name} = {to_string(value)}")
            return
        if isinstance(node, PrintStatement):
            value = self.evaluate(node.expression, env)
            print(to_string(value), file=self.out)
            return
        if isinstance(node, While):
            while True:
                cond = self.evaluate(node.test, env)
                if not is_boolean(cond):
                    raise BellaTypeError(f'while condition must be Boolean, got {type_name(cond)}')
                if self.debug_level >= 3:
                    self.debug(f"while condition -> {to_string(cond)}")
                if not cond:
                    break
                self.execute(node.body, env)
            return
        if isinstance(node, FunctionDeclaration):
            closure = Closure(
                node.name.name,
                tuple(param.name for param in node.params),
                node.body,
                env,
            )
            env.declare(node.name.name, closure)
            if self.debug_level >= 2:
                self.debug(f"define function {node.name.name}({', '.join(closure.params)})")
            return
        raise NotImplementedError(f"execute: unexpected node type {type(node).__name__}")

    def evaluate(self, node: Node, env: Environment) -> Any:
        if isinstance(node, Numeral):
            return float(node.value)
        if isinstance(node, Bool):
            return bool(node.value)
        if isinstance(node, Identifier):
            return env.lookup(node.name)
        if isinstance(node, BinaryExp):
            if node.op in LOGICAL_OPS:
                return self.evaluate_logical(node, env)
            left = self.evaluate(node.left, env)
            right = self.evaluate(node.right, env)
            return self.apply_binary_op(node.op, left, right)
        if isinstance(node, UnaryExp):
            operand = self.evaluate(node.operand, env)
            if node.op == '-':
                if not is_number(operand):
                    raise BellaTypeError(f'unary - expects Number, got {type_name(operand)}')
                return -float(operand)
            if node.op == '!':
                if not is_boolean(operand):
                    raise BellaTypeError(f'unary ! expects Boolean, got {type_name(operand)}')
                return not operand
            raise UnknownOperatorError(f'unknown unary operator {node.op}')
        if isinstance(node, ConditionalExpression):
            test = self.evaluate(node.test, env)
            if not is_boolean(test):
                raise BellaTypeError(f'conditional test must be Boolean, got {type_name(test)}')
            if self.debug_level >= 3:
                self.debug(f"conditional test -> {to_string(test)}")
            # Only the selected branch is ever evaluated
            if test:
                return self.evaluate(node.consequent, env)
            return self.evaluate(node.alternate, env)
        if isinstance(node, ArrayLiteral):
            return ArrayVal([self.evaluate(element, env) for element in node.elements])
        if isinstance(node, Subscript):
            target = self.evaluate(node.array, env)
            if not isinstance(target, ArrayVal):
                raise BellaTypeError(f'cannot subscript type {type_name(target)}')
            index = self.evaluate(node.index, env)
            if not is_number(index) or not math.isfinite(index) or not float(index).is_integer():
                raise BellaTypeError(f'array index must be an integral Number, got {to_string(index)}')
            position = int(index)
            if position < 0 or position >= len(target.items):
                raise IndexOutOfRangeError(
                    f'array index {position} out of range for length {len(target.items)}')
            return target.items[position]
        if isinstance(node, Call):
            func = env.lookup(node.callee.name)
            if not isinstance(func, (NativeFunction, Closure)):
                raise NotCallableError(f'{node.callee.name} is not a function')
            args = [self.evaluate(arg, env) for arg in node.args]
            return self.call_function(func, args)
        raise NotImplementedError(f"evaluate: unexpected node type {type(node).__name__}")

    def evaluate_logical(self, node: BinaryExp, env: Environment) -> bool:
        left = self.evaluate(node.left, env)
        if not is_boolean(left):
            raise BellaTypeError(f'{node.op} expects Boolean operands, got {type_name(left)}')
        # Short-circuit: the left operand alone can decide the result
        if node.op == '&&' and not left:
            return False
        if node.op == '||' and left:
            return True
        right = self.evaluate(node.right, env)
        if not is_boolean(right):
            raise BellaTypeError(f'{node.op} expects Boolean operands, got {type_name(right)}')
        return right

    def call_function(self, func: Any, args: List[Any]) -> Any:
        if self.debug_level >= 3:
            self.debug(f"call {func.name}({', '.join(to_string(a) for a in args)})")
        if isinstance(func, NativeFunction):
            if len(args) != func.arity:
                raise ArityMismatchError(
                    f"{func.name} expects {func.arity} arguments, got {len(args)}")
            for arg in args:
                if not is_number(arg):
                    raise BellaTypeError(f"{func.name} expects Number arguments, got {type_name(arg)}")
            return func.fn(*(float(a) for a in args))
        if isinstance(func, Closure):
            if len(args) != func.arity:
                raise ArityMismatchError(
                    f"{func.name} expects {func.arity} arguments, got {len(args)}")
            call_env = func.env.child(zip(func.params, args), name=func.name)
            return self.evaluate(func.body, call_env)
        raise NotCallableError(f'{to_string(func)} is not a function')

    def apply_binary_op(self, op: str, a: Any, b: Any) -> Any:
        if op in ARITHMETIC_OPS:
            if not (is_number(a) and is_number(b)):
                raise BellaTypeError(f'unsupported {op} for {type_name(a)} and {type_name(b)}')
            a, b = float(a), float(b)
            if op == '+':
                return a + b
            if op == '-':
                return a - b
            if op == '*':
                return a * b
            if op == '/':
                return _ieee.divide(a, b)
            if op == '%':
                return _ieee.remainder(a, b)
            return _ieee.power(a, b)
        if op in COMPARISON_OPS:
            if not (is_number(a) and is_number(b)):
                raise BellaTypeError(f'comparison {op} not supported for {type_name(a)} and {type_name(b)}')
            if op == '<':
                return a < b
            if op == '<=':
                return a <= b
            if op == '==':
                return a == b
            if op == '!=':
                return a != b
            if op == '>=':
                return a >= b
            return a > b
        raise UnknownOperatorError(f'unknown operator {op}')


def run_program(source: str, debug_level: int = 0, out: Optional[TextIO] = None) -> Interpreter:
    """Convenience function to parse and run a Bella program from source string."""
    ast_program = parse_program(source)
    interpreter = Interpreter(debug_level=debug_level, out=out)
    interpreter.run(ast_program)
    return interpreter


def compile_module(file_path: str, debug_level: int = 0) -> Interpreter:
    """Parse and execute a Bella file, returning the interpreter instance."""
    with open(file_path, 'r', encoding='utf-8') as f:
        source = f.read()
    return run_program(source, debug_level=debug_level)
