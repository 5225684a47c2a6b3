"""Parser for the Bella language.

This module implements a two-stage parsing pipeline:

1. **Preprocessing**: comments are stripped and newline characters that
   logically terminate statements are replaced with semicolons, so the
   grammar only has to deal with one statement separator. Newlines
   inside parentheses or brackets never end a statement.

2. **Parsing**: the preprocessed source is fed into a Lark LALR parser
   configured with the Bella grammar. The resulting parse tree is turned
   into the frozen AST of `bella.ast` by `ASTTransformer`.

The `parse_program` function is the public entry point and returns a
`Program` AST node representing the entire source file.
"""

from __future__ import annotations

from typing import List

from lark import Lark, Transformer, Token
from lark.exceptions import UnexpectedInput

from .ast import (
    Program, Block, VariableDeclaration, Assignment, PrintStatement, While,
    FunctionDeclaration, BinaryExp, UnaryExp, ConditionalExpression, Call,
    ArrayLiteral, Subscript, Identifier, Numeral, Bool, Node,
)


class ParseError(Exception):
    """Raised when Bella source text is not syntactically valid."""
    def __init__(self, message: str, line: int = 0, column: int = 0):
        super().__init__(f"line {line}, column {column}: {message}" if line else message)
        self.line = line
        self.column = column


# A line ending in one of these continues on the next line
CONTINUATION_CHARS = '+-*/%<>=!&|?:,'


def preprocess(source: str) -> str:
    """Strip comments and insert semicolons at statement boundaries.

    Newlines outside parentheses and brackets terminate statements, unless
    the line ends with a binary operator, `?`, `:` or `,`. Line
    comments start with `#` or `//`; block comments are `/* ... */`. The
    newline itself is kept after the inserted semicolon so that Lark still
    reports accurate line numbers.
    """
    result: List[str] = []
    depth = 0  # nesting depth for () and []
    i = 0
    length = len(source)
    in_line_comment = False
    in_block_comment = False
    while i < length:
        c = source[i]
        if in_block_comment:
            if c == '*' and i + 1 < length and source[i + 1] == '/':
                in_block_comment = False
                i += 2
                continue
            if c == '\n':
                result.append(c)
            i += 1
            continue
        if in_line_comment:
            if c != '\n':
                i += 1
                continue
            in_line_comment = False
        if c == '#':
            in_line_comment = True
            i += 1
            continue
        if c == '/' and i + 1 < length and source[i + 1] == '/':
            in_line_comment = True
            i += 2
            continue
        if c == '/' and i + 1 < length and source[i + 1] == '*':
            in_block_comment = True
            i += 2
            continue
        if c in '([':
            depth += 1
        elif c in ')]':
            if depth > 0:
                depth -= 1
        if c == '\n':
            if depth == 0:
                # No separator after an opening brace, an existing one, or an
                # operator still waiting for its right-hand side
                j = len(result) - 1
                while j >= 0 and result[j].isspace():
                    j -= 1
                prev = result[j] if j >= 0 else ''
                if prev not in ('', ';', '{') and prev not in CONTINUATION_CHARS:
                    result.append(';')
            result.append(c)
            i += 1
            continue
        result.append(c)
        i += 1
    return ''.join(result)


BELLA_GRAMMAR = r"""
    start: (statement | ";")*

    // Statements
    ?statement: var_decl
              | assignment
              | print_stmt
              | while_stmt
              | func_decl

    var_decl: ident ":=" expression
    assignment: ident "=" expression
    print_stmt: "print" expression
    while_stmt: "while" expression block
    func_decl: ident "(" [params] ")" "=" expression
    params: ident ("," ident)*

    block: "{" (statement | ";")* "}"

    // Expressions, loosest binding first
    ?expression: disjunction
               | disjunction "?" expression ":" expression -> conditional

    ?disjunction: conjunction
                | disjunction "||" conjunction -> or_

    ?conjunction: comparison
                | conjunction "&&" comparison -> and_

    ?comparison: sum
               | sum "<" sum  -> lt
               | sum "<=" sum -> le
               | sum "==" sum -> eq
               | sum "!=" sum -> ne
               | sum ">=" sum -> ge
               | sum ">" sum  -> gt

    ?sum: product
        | sum "+" product -> add
        | sum "-" product -> sub

    ?product: power
            | product "*" power -> mul
            | product "/" power -> div
            | product "%" power -> mod

    ?power: unary
          | unary "**" power -> pow

    ?unary: postfix
          | "-" unary -> neg
          | "!" unary -> not_

    ?postfix: primary
            | postfix "[" expression "]" -> subscript

    ?primary: NUMBER -> numeral
            | "true" -> true
            | "false" -> false
            | ident "(" [args] ")" -> call
            | ident
            | "[" [args] "]" -> array
            | "(" expression ")"

    args: expression ("," expression)*

    ident: NAME

    NAME: /[^\W\d]\w*/
    NUMBER: /\d+(\.\d+)?([eE][+-]?\d+)?/

    %import common.WS
    %ignore WS
"""


BELLA_PARSER = Lark(
    BELLA_GRAMMAR,
    parser='lalr',
    propagate_positions=True,
    maybe_placeholders=True,
)


def _binary(op: str):
    def build(self, items):
        left, right = items
        return BinaryExp(op, left, right)
    return build


def _unary(op: str):
    def build(self, items):
        return UnaryExp(op, items[0])
    return build


class ASTTransformer(Transformer):
    """Transforms the raw parse tree into an AST."""

    def start(self, items):
        return Program(Block(tuple(item for item in items if isinstance(item, Node))))

    def block(self, items):
        return Block(tuple(item for item in items if isinstance(item, Node)))

    def var_decl(self, items):
        return VariableDeclaration(items[0], items[1])

    def assignment(self, items):
        return Assignment(items[0], items[1])

    def print_stmt(self, items):
        return PrintStatement(items[0])

    def while_stmt(self, items):
        return While(items[0], items[1])

    def func_decl(self, items):
        name, params, body = items
        return FunctionDeclaration(name, tuple(params or ()), body)

    def params(self, items):
        return list(items)

    def args(self, items):
        return list(items)

    # Expressions
    def conditional(self, items):
        test, consequent, alternate = items
        return ConditionalExpression(test, consequent, alternate)

    or_ = _binary('||')
    and_ = _binary('&&')
    lt = _binary('<')
    le = _binary('<=')
    eq = _binary('==')
    ne = _binary('!=')
    ge = _binary('>=')
    gt = _binary('>')
    add = _binary('+')
    sub = _binary('-')
    mul = _binary('*')
    div = _binary('/')
    mod = _binary('%')
    pow = _binary('**')
    neg = _unary('-')
    not_ = _unary('!')

    def subscript(self, items):
        return Subscript(items[0], items[1])

    def call(self, items):
        callee, args = items
        return Call(callee, tuple(args or ()))

    def array(self, items):
        return ArrayLiteral(tuple(items[0] or ()))

    def numeral(self, items):
        return Numeral(float(items[0]))

    def true(self, items):
        return Bool(True)

    def false(self, items):
        return Bool(False)

    def ident(self, items):
        token: Token = items[0]
        return Identifier(str(token))


def parse_program(source: str) -> Program:
    """Parse Bella source code into an AST Program.

    Syntax errors are raised as `ParseError` carrying the line and column
    of the offending input.
    """
    pre = preprocess(source)
    try:
        tree = BELLA_PARSER.parse(pre)
    except UnexpectedInput as e:
        raise ParseError(f"unexpected input {e.get_context(pre).strip()!r}",
                         getattr(e, 'line', 0), getattr(e, 'column', 0)) from e
    return ASTTransformer().transform(tree)
