"""JSON serialization/deserialization for snippet ASTs.

This module converts between the AST dataclasses and plain Python
dict/list structures suitable for JSON encoding, so a parsed block can be
written to disk and evaluated later without reparsing.
"""

from __future__ import annotations

from typing import Any

from .ast import (
    Block,
    Local,
    ExprStmt,
    TailExpr,
    IdentPat,
    WildPat,
    TuplePat,
    TypedPat,
    Literal,
    Ident,
    Reference,
    Deref,
    Assign,
    BinaryOp,
    UnaryOp,
    Paren,
    TupleExpr,
    Call,
    Field,
    Underscore,
)


def ast_to_obj(node: Any) -> Any:
    if node is None:
        return None

    # Statements
    if isinstance(node, Block):
        return {"type": "Block", "statements": [ast_to_obj(s) for s in node.statements]}
    if isinstance(node, Local):
        return {"type": "Local", "pattern": ast_to_obj(node.pattern), "init": ast_to_obj(node.init)}
    if isinstance(node, ExprStmt):
        return {"type": "ExprStmt", "expr": ast_to_obj(node.expr)}
    if isinstance(node, TailExpr):
        return {"type": "TailExpr", "expr": ast_to_obj(node.expr)}

    # Patterns
    if isinstance(node, IdentPat):
        return {"type": "IdentPat", "name": node.name, "mutable": node.mutable}
    if isinstance(node, WildPat):
        return {"type": "WildPat"}
    if isinstance(node, TuplePat):
        return {"type": "TuplePat", "elements": [ast_to_obj(p) for p in node.elements]}
    if isinstance(node, TypedPat):
        return {"type": "TypedPat", "pattern": ast_to_obj(node.pattern), "type_name": node.type_name}

    # Expressions
    if isinstance(node, Literal):
        return {"type": "Literal", "text": node.text, "kind": node.kind}
    if isinstance(node, Ident):
        return {"type": "Ident", "name": node.name}
    if isinstance(node, Underscore):
        return {"type": "Underscore"}
    if isinstance(node, Reference):
        return {"type": "Reference", "operand": ast_to_obj(node.operand), "mutable": node.mutable}
    if isinstance(node, Deref):
        return {"type": "Deref", "operand": ast_to_obj(node.operand)}
    if isinstance(node, Assign):
        return {"type": "Assign", "target": ast_to_obj(node.target), "value": ast_to_obj(node.value)}
    if isinstance(node, BinaryOp):
        return {"type": "BinaryOp", "op": node.op, "left": ast_to_obj(node.left), "right": ast_to_obj(node.right)}
    if isinstance(node, UnaryOp):
        return {"type": "UnaryOp", "op": node.op, "operand": ast_to_obj(node.operand)}
    if isinstance(node, Paren):
        return {"type": "Paren", "inner": ast_to_obj(node.inner)}
    if isinstance(node, TupleExpr):
        return {"type": "TupleExpr", "elements": [ast_to_obj(e) for e in node.elements]}
    if isinstance(node, Call):
        return {"type": "Call", "func": ast_to_obj(node.func), "args": [ast_to_obj(a) for a in node.args]}
    if isinstance(node, Field):
        return {"type": "Field", "target": ast_to_obj(node.target), "name": node.name}

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def ast_from_obj(obj: Any) -> Any:
    if obj is None:
        return None
    if not isinstance(obj, dict):
        raise TypeError("Invalid AST object")
    t = obj.get("type")
    if t == "Block":
        return Block(statements=[ast_from_obj(s) for s in obj["statements"]])
    if t == "Local":
        return Local(pattern=ast_from_obj(obj["pattern"]), init=ast_from_obj(obj.get("init")))
    if t == "ExprStmt":
        return ExprStmt(expr=ast_from_obj(obj["expr"]))
    if t == "TailExpr":
        return TailExpr(expr=ast_from_obj(obj["expr"]))
    if t == "IdentPat":
        return IdentPat(name=obj["name"], mutable=bool(obj.get("mutable", False)))
    if t == "WildPat":
        return WildPat()
    if t == "TuplePat":
        return TuplePat(elements=[ast_from_obj(p) for p in obj["elements"]])
    if t == "TypedPat":
        return TypedPat(pattern=ast_from_obj(obj["pattern"]), type_name=obj["type_name"])
    if t == "Literal":
        return Literal(text=obj["text"], kind=obj.get("kind", "int"))
    if t == "Ident":
        return Ident(name=obj["name"])
    if t == "Underscore":
        return Underscore()
    if t == "Reference":
        return Reference(operand=ast_from_obj(obj["operand"]), mutable=bool(obj.get("mutable", False)))
    if t == "Deref":
        return Deref(operand=ast_from_obj(obj["operand"]))
    if t == "Assign":
        return Assign(target=ast_from_obj(obj["target"]), value=ast_from_obj(obj["value"]))
    if t == "BinaryOp":
        return BinaryOp(op=obj["op"], left=ast_from_obj(obj["left"]), right=ast_from_obj(obj["right"]))
    if t == "UnaryOp":
        return UnaryOp(op=obj["op"], operand=ast_from_obj(obj["operand"]))
    if t == "Paren":
        return Paren(inner=ast_from_obj(obj["inner"]))
    if t == "TupleExpr":
        return TupleExpr(elements=[ast_from_obj(e) for e in obj["elements"]])
    if t == "Call":
        return Call(func=ast_from_obj(obj["func"]), args=[ast_from_obj(a) for a in obj["args"]])
    if t == "Field":
        return Field(target=ast_from_obj(obj["target"]), name=obj["name"])

    raise ValueError(f"Unknown AST node type: {t}")
