"""Syntax tree for reference-model snippets.

The parser produces these nodes from a brace-delimited block of Rust-like
statements. The tree covers a little more than the interpreter evaluates
(arithmetic, calls, tuples, typed patterns, nested blocks) so that such
code is rejected by the evaluator with a precise error instead of failing
to parse.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Node:
    """Base class for all AST nodes."""
    pass


# Statements

@dataclass
class Block(Node):
    statements: List[Node] = field(default_factory=list)


@dataclass
class Local(Node):
    pattern: Node
    init: Optional[Node] = None  # `let x;` has no initializer


@dataclass
class ExprStmt(Node):
    expr: Node


@dataclass
class TailExpr(Node):
    """Trailing expression of a block, written without a semicolon."""
    expr: Node


# Patterns

@dataclass
class IdentPat(Node):
    name: str
    mutable: bool = False


@dataclass
class WildPat(Node):
    pass


@dataclass
class TuplePat(Node):
    elements: List[Node]


@dataclass
class TypedPat(Node):
    pattern: Node
    type_name: str


# Expressions

@dataclass
class Literal(Node):
    text: str
    kind: str = 'int'  # 'int', 'float', 'str' or 'bool'


@dataclass
class Ident(Node):
    name: str


@dataclass
class Underscore(Node):
    """`_` written where an expression is expected."""
    pass


@dataclass
class Reference(Node):
    operand: Node
    mutable: bool = False


@dataclass
class Deref(Node):
    operand: Node


@dataclass
class Assign(Node):
    target: Node
    value: Node


@dataclass
class BinaryOp(Node):
    op: str
    left: Node
    right: Node


@dataclass
class UnaryOp(Node):
    op: str  # '-' or '!'
    operand: Node


@dataclass
class Paren(Node):
    inner: Node


@dataclass
class TupleExpr(Node):
    elements: List[Node]


@dataclass
class Call(Node):
    func: Node
    args: List[Node]


@dataclass
class Field(Node):
    target: Node
    name: str
