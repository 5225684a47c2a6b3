import pytest

from bella.ast import (
    Program, Block, VariableDeclaration, Assignment, PrintStatement, While,
    FunctionDeclaration, BinaryExp, UnaryExp, ConditionalExpression, Call,
    ArrayLiteral, Subscript, Identifier, Numeral, Bool,
)
from bella.parser import ParseError, parse_program, preprocess


def statements(source):
    return parse_program(source).body.statements


def test_preprocess_inserts_separators_and_strips_comments():
    source = "x := 1 # one\ny := [1,\n2]\n/* block\ncomment */ print(x)"
    pre = preprocess(source)
    assert '#' not in pre and '/*' not in pre
    assert pre.count(';') == 2


def test_declaration_assignment_print():
    assert statements("x := 100; x = -20; print(9 * x)") == (
        VariableDeclaration(Identifier('x'), Numeral(100.0)),
        Assignment(Identifier('x'), UnaryExp('-', Numeral(20.0))),
        PrintStatement(BinaryExp('*', Numeral(9.0), Identifier('x'))),
    )


def test_newlines_separate_statements():
    source = """
    x := 1
    y := 2
    """
    assert len(statements(source)) == 2


def test_while_with_block():
    (decl, loop, show) = statements("y := 0; while (y < 10) { y = y + 1 }; print(y)")
    assert isinstance(loop, While)
    assert loop.test == BinaryExp('<', Identifier('y'), Numeral(10.0))
    assert loop.body == Block((
        Assignment(Identifier('y'), BinaryExp('+', Identifier('y'), Numeral(1.0))),
    ))


def test_multiline_while():
    source = "i := 0\nwhile i < 3 {\n  print(i)\n  i = i + 1\n}\nprint(i)\n"
    (_, loop, _) = statements(source)
    assert len(loop.body.statements) == 2


def test_function_declaration():
    (decl,) = statements("square(n) = n * n")
    assert decl == FunctionDeclaration(
        Identifier('square'), (Identifier('n'),),
        BinaryExp('*', Identifier('n'), Identifier('n')),
    )
    (decl,) = statements("answer() = 42")
    assert decl.params == ()


def test_conditional_is_test_first():
    (stmt,) = statements("print(3 < 2 ? 1 : 0)")
    assert stmt.expression == ConditionalExpression(
        BinaryExp('<', Numeral(3.0), Numeral(2.0)), Numeral(1.0), Numeral(0.0))


def test_precedence():
    (stmt,) = statements("print(1 + 2 * 3 ** 2 ** 1 < 4 && !true || false)")
    expr = stmt.expression
    assert expr.op == '||'
    assert expr.left.op == '&&'
    comparison = expr.left.left
    assert comparison.op == '<'
    assert comparison.left == BinaryExp('+', Numeral(1.0), BinaryExp(
        '*', Numeral(2.0),
        BinaryExp('**', Numeral(3.0), BinaryExp('**', Numeral(2.0), Numeral(1.0)))))
    assert expr.left.right == UnaryExp('!', Bool(True))


def test_left_associative_subtraction():
    (stmt,) = statements("print(10 - 4 - 3)")
    assert stmt.expression == BinaryExp(
        '-', BinaryExp('-', Numeral(10.0), Numeral(4.0)), Numeral(3.0))


def test_arrays_calls_and_subscripts():
    (stmt,) = statements("print(a[1][0] + hypot(3, 4) + [][0])")
    left, empty = stmt.expression.left, stmt.expression.right
    assert left.left == Subscript(Subscript(Identifier('a'), Numeral(1.0)), Numeral(0.0))
    assert left.right == Call(Identifier('hypot'), (Numeral(3.0), Numeral(4.0)))
    assert empty == Subscript(ArrayLiteral(()), Numeral(0.0))


def test_unicode_identifier_and_keywords_as_prefix():
    (a, b) = statements("printer := π; truth := true")
    assert a == VariableDeclaration(Identifier('printer'), Identifier('π'))
    assert b == VariableDeclaration(Identifier('truth'), Bool(True))


def test_number_formats():
    (stmt,) = statements("print([1, 2.5, 1e3])")
    assert stmt.expression.elements == (Numeral(1.0), Numeral(2.5), Numeral(1000.0))


def test_empty_program():
    assert parse_program("") == Program(Block(()))


def test_syntax_error_reports_position():
    with pytest.raises(ParseError) as excinfo:
        parse_program("x := \n y := 2")
    assert excinfo.value.line >= 1


def test_trailing_operator_continues_the_line():
    assert statements("x := 1 +\n  2") == (
        VariableDeclaration(Identifier('x'), BinaryExp('+', Numeral(1.0), Numeral(2.0))),
    )
    assert ';' not in preprocess("ok := a &&\n  b")


def test_conditional_spread_over_lines():
    (decl, show) = statements("y := true ?\n  1 :\n  2\nprint(y)")
    assert decl == VariableDeclaration(
        Identifier('y'), ConditionalExpression(Bool(True), Numeral(1.0), Numeral(2.0)))
    assert show == PrintStatement(Identifier('y'))
