"""Abstract Syntax Tree (AST) definitions for the Bella language.

The AST classes defined in this module represent the structure of a Bella
program as handed to the interpreter, whether it came from the bundled
parser, from a JSON AST file, or was built directly in Python. Nodes are
frozen: nothing mutates a tree once it has been constructed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Node:
    """Base class for all AST nodes."""
    pass


@dataclass(frozen=True)
class Identifier(Node):
    name: str


@dataclass(frozen=True)
class Numeral(Node):
    value: float


@dataclass(frozen=True)
class Bool(Node):
    value: bool


@dataclass(frozen=True)
class BinaryExp(Node):
    op: str
    left: Node
    right: Node


@dataclass(frozen=True)
class UnaryExp(Node):
    op: str
    operand: Node


@dataclass(frozen=True)
class ConditionalExpression(Node):
    test: Node
    consequent: Node
    alternate: Node


@dataclass(frozen=True)
class Call(Node):
    callee: Identifier
    args: Tuple[Node, ...]


@dataclass(frozen=True)
class ArrayLiteral(Node):
    elements: Tuple[Node, ...]


@dataclass(frozen=True)
class Subscript(Node):
    array: Node
    index: Node


@dataclass(frozen=True)
class Block(Node):
    statements: Tuple[Node, ...]


@dataclass(frozen=True)
class VariableDeclaration(Node):
    id: Identifier
    initializer: Node


@dataclass(frozen=True)
class Assignment(Node):
    target: Identifier
    source: Node


@dataclass(frozen=True)
class PrintStatement(Node):
    expression: Node


@dataclass(frozen=True)
class While(Node):
    test: Node
    body: Block


@dataclass(frozen=True)
class FunctionDeclaration(Node):
    name: Identifier
    params: Tuple[Identifier, ...]
    body: Node  # a single expression


@dataclass(frozen=True)
class Program(Node):
    body: Block
