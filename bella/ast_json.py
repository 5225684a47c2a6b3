"""JSON serialization/deserialization for the Bella AST.

This module converts between Bella AST dataclasses and plain Python
dict/list structures suitable for JSON encoding, so that a front-end
written in any language can hand a program to the interpreter as an
`.ast.json` file.
"""

from __future__ import annotations

from typing import Any, Dict

from .ast import (
    Program,
    Block,
    VariableDeclaration,
    Assignment,
    PrintStatement,
    While,
    FunctionDeclaration,
    BinaryExp,
    UnaryExp,
    ConditionalExpression,
    Call,
    ArrayLiteral,
    Subscript,
    Identifier,
    Numeral,
    Bool,
)


def ast_to_obj(node: Any) -> Dict[str, Any]:
    if isinstance(node, Program):
        return {"type": "Program", "body": ast_to_obj(node.body)}
    if isinstance(node, Block):
        return {"type": "Block", "statements": [ast_to_obj(s) for s in node.statements]}
    if isinstance(node, VariableDeclaration):
        return {
            "type": "VariableDeclaration",
            "id": ast_to_obj(node.id),
            "initializer": ast_to_obj(node.initializer),
        }
    if isinstance(node, Assignment):
        return {"type": "Assignment", "target": ast_to_obj(node.target), "source": ast_to_obj(node.source)}
    if isinstance(node, PrintStatement):
        return {"type": "PrintStatement", "expression": ast_to_obj(node.expression)}
    if isinstance(node, While):
        return {"type": "While", "test": ast_to_obj(node.test), "body": ast_to_obj(node.body)}
    if isinstance(node, FunctionDeclaration):
        return {
            "type": "FunctionDeclaration",
            "name": ast_to_obj(node.name),
            "params": [ast_to_obj(p) for p in node.params],
            "body": ast_to_obj(node.body),
        }
    if isinstance(node, BinaryExp):
        return {"type": "BinaryExp", "op": node.op, "left": ast_to_obj(node.left), "right": ast_to_obj(node.right)}
    if isinstance(node, UnaryExp):
        return {"type": "UnaryExp", "op": node.op, "operand": ast_to_obj(node.operand)}
    if isinstance(node, ConditionalExpression):
        return {
            "type": "ConditionalExpression",
            "test": ast_to_obj(node.test),
            "consequent": ast_to_obj(node.consequent),
            "alternate": ast_to_obj(node.alternate),
        }
    if isinstance(node, Call):
        return {"type": "Call", "callee": ast_to_obj(node.callee), "args": [ast_to_obj(a) for a in node.args]}
    if isinstance(node, ArrayLiteral):
        return {"type": "ArrayLiteral", "elements": [ast_to_obj(e) for e in node.elements]}
    if isinstance(node, Subscript):
        return {"type": "Subscript", "array": ast_to_obj(node.array), "index": ast_to_obj(node.index)}
    if isinstance(node, Identifier):
        return {"type": "Identifier", "name": node.name}
    if isinstance(node, Numeral):
        return {"type": "Numeral", "value": node.value}
    if isinstance(node, Bool):
        return {"type": "Bool", "value": node.value}

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def ast_from_obj(obj: Any) -> Any:
    if not isinstance(obj, dict):
        raise TypeError("Invalid AST object")
    t = obj.get("type")
    if t == "Program":
        return Program(body=ast_from_obj(obj["body"]))
    if t == "Block":
        return Block(statements=tuple(ast_from_obj(s) for s in obj["statements"]))
    if t == "VariableDeclaration":
        return VariableDeclaration(id=ast_from_obj(obj["id"]), initializer=ast_from_obj(obj["initializer"]))
    if t == "Assignment":
        return Assignment(target=ast_from_obj(obj["target"]), source=ast_from_obj(obj["source"]))
    if t == "PrintStatement":
        return PrintStatement(expression=ast_from_obj(obj["expression"]))
    if t == "While":
        return While(test=ast_from_obj(obj["test"]), body=ast_from_obj(obj["body"]))
    if t == "FunctionDeclaration":
        return FunctionDeclaration(
            name=ast_from_obj(obj["name"]),
            params=tuple(ast_from_obj(p) for p in obj["params"]),
            body=ast_from_obj(obj["body"]),
        )
    if t == "BinaryExp":
        return BinaryExp(op=obj["op"], left=ast_from_obj(obj["left"]), right=ast_from_obj(obj["right"]))
    if t == "UnaryExp":
        return UnaryExp(op=obj["op"], operand=ast_from_obj(obj["operand"]))
    if t == "ConditionalExpression":
        return ConditionalExpression(
            test=ast_from_obj(obj["test"]),
            consequent=ast_from_obj(obj["consequent"]),
            alternate=ast_from_obj(obj["alternate"]),
        )
    if t == "Call":
        return Call(callee=ast_from_obj(obj["callee"]), args=tuple(ast_from_obj(a) for a in obj["args"]))
    if t == "ArrayLiteral":
        return ArrayLiteral(elements=tuple(ast_from_obj(e) for e in obj["elements"]))
    if t == "Subscript":
        return Subscript(array=ast_from_obj(obj["array"]), index=ast_from_obj(obj["index"]))
    if t == "Identifier":
        return Identifier(name=obj["name"])
    if t == "Numeral":
        return Numeral(value=float(obj["value"]))
    if t == "Bool":
        return Bool(value=bool(obj["value"]))

    raise ValueError(f"Unknown AST node type: {t}")
