"""JSON serialization/deserialization for Blockscript statements.

This module converts between the statement dataclasses and plain Python
dict/list structures suitable for JSON encoding, so that a parsed program
can be written out with `--emit-statements` and executed later with
`--statements`.
"""

from __future__ import annotations

from typing import Any, Dict

from .ast import DeclarationStmt, DisplayStmt, ExprStmt, Program, Statement


def statement_to_obj(node: Statement) -> Dict[str, Any]:
    base = {"line": node.line, "source": node.source}
    if isinstance(node, DisplayStmt):
        return {"type": "DisplayStmt", **base, "template": node.template}
    if isinstance(node, DeclarationStmt):
        return {"type": "DeclarationStmt", **base, "words": list(node.words)}
    if isinstance(node, ExprStmt):
        return {"type": "ExprStmt", **base, "expression": node.expression}
    raise TypeError(f"Unsupported statement type for serialization: {type(node).__name__}")


def statement_from_obj(o: Dict[str, Any]) -> Statement:
    t = o.get("type")
    if t == "DisplayStmt":
        return DisplayStmt(line=o["line"], source=o["source"], template=o["template"])
    if t == "DeclarationStmt":
        return DeclarationStmt(line=o["line"], source=o["source"], words=list(o["words"]))
    if t == "ExprStmt":
        return ExprStmt(line=o["line"], source=o["source"], expression=o["expression"])
    raise ValueError(f"Unknown statement type in JSON: {t}")


def ast_to_obj(program: Program) -> Dict[str, Any]:
    return {"type": "Program", "body": [statement_to_obj(s) for s in program.body]}


def ast_from_obj(o: Dict[str, Any]) -> Program:
    if o.get("type") != "Program":
        raise ValueError(f"Expected a Program object, got {o.get('type')}")
    return Program(body=[statement_from_obj(s) for s in o.get("body", [])])
