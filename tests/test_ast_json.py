import io
import json

import pytest

from bella.ast import Identifier, Numeral, PrintStatement
from bella.ast_json import ast_from_obj, ast_to_obj
from bella.interpreter import Interpreter
from bella.parser import parse_program

SOURCE = """
fact(n) = n <= 1 ? 1 : n * fact(n - 1)
xs := [fact(3), true, -ln(1)]
flag := !false && xs[1] || false
while flag { flag = false }
print(xs)
"""


def test_parsed_program_survives_json():
    program = parse_program(SOURCE)
    text = json.dumps(ast_to_obj(program))
    assert ast_from_obj(json.loads(text)) == program


def test_program_from_json_runs():
    obj = {
        "type": "Program",
        "body": {"type": "Block", "statements": [
            {"type": "PrintStatement", "expression": {
                "type": "Call",
                "callee": {"type": "Identifier", "name": "sqrt"},
                "args": [{"type": "Numeral", "value": 2}],
            }},
        ]},
    }
    out = io.StringIO()
    Interpreter(out=out).run(ast_from_obj(obj))
    assert out.getvalue() == '1.4142135623730951\n'


def test_node_objects_are_tagged():
    obj = ast_to_obj(PrintStatement(Identifier('π')))
    assert obj == {"type": "PrintStatement", "expression": {"type": "Identifier", "name": "π"}}
    assert ast_from_obj({"type": "Numeral", "value": 3}) == Numeral(3.0)


def test_unknown_input_rejected():
    with pytest.raises(ValueError):
        ast_from_obj({"type": "ForStmt"})
    with pytest.raises(TypeError):
        ast_from_obj([1, 2])
    with pytest.raises(TypeError):
        ast_to_obj(object())
