"""Parser for reference-model snippets.

A snippet is a single brace-delimited block of Rust-like statements:

    {
        let a = 1;
        let mut b;
        b = &a;
        let c = *b;
    }

The source is fed into a Lark LALR parser and the resulting parse tree is
turned into the dataclass AST from `refmodel.ast` by `ASTTransformer`.
The grammar accepts somewhat more than the interpreter evaluates; whether
a construct is supported is decided at evaluation time, not here.

`parse_block` is the entry point for a full `{ ... }` block and
`parse_snippet` accepts bare statements, wrapping them in braces first.
"""

from __future__ import annotations

from typing import List

from lark import Lark, Transformer
from lark.exceptions import UnexpectedCharacters, UnexpectedInput, UnexpectedToken

from .ast import (
    Block, Local, ExprStmt, TailExpr,
    IdentPat, WildPat, TuplePat, TypedPat,
    Literal, Ident, Reference, Deref, Assign,
    BinaryOp, UnaryOp, Paren, TupleExpr, Call, Field, Underscore,
)
from .errors import ParseError


SNIPPET_GRAMMAR = r"""
    ?start: block

    block: "{" statement* tail_expr? "}"

    ?statement: local_stmt
              | expr_stmt
              | empty_stmt
              | block

    local_stmt: "let" let_pattern ["=" expression] ";"
    expr_stmt: expression ";"
    empty_stmt: ";"
    tail_expr: expression

    // Patterns
    ?let_pattern: pattern
                | pattern ":" type_ref -> typed_pat
    ?pattern: ident_pat
            | wild_pat
            | tuple_pat
    ident_pat: MUT? IDENT
    wild_pat: "_"
    tuple_pat: "(" [pattern ("," pattern)* [","]] ")"

    type_ref: IDENT -> named_type
            | "&" MUT? type_ref -> ref_type
            | "(" ")" -> unit_type

    // Expressions with precedence
    ?expression: assign
    ?assign: compare
           | compare "=" assign -> assign_expr
    ?compare: sum
            | sum COMPARE_OP sum -> compare_expr
    ?sum: product
        | sum "+" product -> add
        | sum "-" product -> sub
    ?product: unary
            | product "*" unary -> mul
            | product "/" unary -> div
            | product "%" unary -> rem
    ?unary: postfix
          | "*" unary -> deref
          | "&" MUT? unary -> reference
          | "-" unary -> neg
          | "!" unary -> not_expr
    ?postfix: primary
            | postfix "(" [arguments] ")" -> call
            | postfix "." IDENT -> field
    arguments: expression ("," expression)* [","]
    ?primary: literal
            | IDENT -> ident
            | "_" -> wild_expr
            | "(" expression ")" -> paren
            | "(" ")" -> tuple_expr
            | "(" expression "," [expression ("," expression)* [","]] ")" -> tuple_expr
    literal: INT_LIT | FLOAT_LIT | STRING_LIT | TRUE | FALSE

    // Tokens
    MUT: "mut"
    TRUE: "true"
    FALSE: "false"
    COMPARE_OP: "==" | "!=" | "<=" | ">=" | "<" | ">"
    INT_LIT: /(?:0x[0-9a-fA-F_]+|0o[0-7_]+|0b[01_]+|[0-9][0-9_]*)(?:[iu](?:8|16|32|64|128|size))?/
    FLOAT_LIT.2: /[0-9][0-9_]*\.[0-9][0-9_]*(?:[eE][+-]?[0-9_]+)?(?:f32|f64)?/
    STRING_LIT: /"(?:\\.|[^"\\])*"/

    %import common.CNAME -> IDENT
    %import common.WS
    %ignore WS

    // Comments
    LINE_COMMENT: /\/\/[^\n]*/
    %ignore LINE_COMMENT
    BLOCK_COMMENT: /\/\*[\s\S]*?\*\//
    %ignore BLOCK_COMMENT
"""


SNIPPET_PARSER = Lark(
    SNIPPET_GRAMMAR,
    parser='lalr',
    maybe_placeholders=False,
)


LITERAL_KINDS = {
    'INT_LIT': 'int',
    'FLOAT_LIT': 'float',
    'STRING_LIT': 'str',
    'TRUE': 'bool',
    'FALSE': 'bool',
}


class ASTTransformer(Transformer):
    """Transforms the raw parse tree into an AST."""

    def block(self, items):
        # empty statements come back as None and are dropped
        return Block(statements=[item for item in items if item is not None])

    def local_stmt(self, items):
        pattern = items[0]
        init = items[1] if len(items) > 1 else None
        return Local(pattern=pattern, init=init)

    def expr_stmt(self, items):
        return ExprStmt(items[0])

    def tail_expr(self, items):
        return TailExpr(items[0])

    def empty_stmt(self, items):
        return None

    # Patterns
    def ident_pat(self, items):
        # items: [MUT?, IDENT]
        return IdentPat(name=str(items[-1]), mutable=len(items) == 2)

    def wild_pat(self, items):
        return WildPat()

    def tuple_pat(self, items):
        return TuplePat(list(items))

    def typed_pat(self, items):
        return TypedPat(pattern=items[0], type_name=items[1])

    def named_type(self, items):
        return str(items[0])

    def ref_type(self, items):
        prefix = '&mut ' if len(items) == 2 else '&'
        return prefix + items[-1]

    def unit_type(self, items):
        return '()'

    # Expressions
    def assign_expr(self, items):
        return Assign(target=items[0], value=items[1])

    def compare_expr(self, items):
        return BinaryOp(op=str(items[1]), left=items[0], right=items[2])

    def add(self, items):
        return BinaryOp('+', items[0], items[1])

    def sub(self, items):
        return BinaryOp('-', items[0], items[1])

    def mul(self, items):
        return BinaryOp('*', items[0], items[1])

    def div(self, items):
        return BinaryOp('/', items[0], items[1])

    def rem(self, items):
        return BinaryOp('%', items[0], items[1])

    def deref(self, items):
        return Deref(items[0])

    def reference(self, items):
        # items: [MUT?, operand]
        return Reference(operand=items[-1], mutable=len(items) == 2)

    def neg(self, items):
        return UnaryOp('-', items[0])

    def not_expr(self, items):
        return UnaryOp('!', items[0])

    def call(self, items):
        args: List = items[1] if len(items) > 1 else []
        return Call(func=items[0], args=args)

    def arguments(self, items):
        return list(items)

    def field(self, items):
        return Field(target=items[0], name=str(items[1]))

    def ident(self, items):
        return Ident(str(items[0]))

    def wild_expr(self, items):
        return Underscore()

    def paren(self, items):
        return Paren(items[0])

    def tuple_expr(self, items):
        return TupleExpr(list(items))

    def literal(self, items):
        token = items[0]
        return Literal(text=str(token), kind=LITERAL_KINDS[token.type])


def _describe(err: UnexpectedInput) -> str:
    if isinstance(err, UnexpectedToken):
        if err.token.type == '$END':
            return 'unexpected end of input'
        return f"unexpected token {str(err.token)!r}"
    if isinstance(err, UnexpectedCharacters):
        return f"unexpected character {err.char!r}"
    return 'unexpected end of input'


def parse_block(source: str) -> Block:
    """Parse a `{ ... }` block into a Block AST.

    Syntax errors are raised as `ParseError` carrying the line and column
    reported by Lark.
    """
    try:
        tree = SNIPPET_PARSER.parse(source)
    except UnexpectedInput as e:
        raise ParseError(_describe(e), getattr(e, 'line', None), getattr(e, 'column', None)) from e
    return ASTTransformer().transform(tree)


def parse_snippet(source: str) -> Block:
    """Parse bare statements as if they were written inside a block."""
    # newline keeps a trailing line comment from swallowing the brace
    return parse_block('{' + source + '\n}')
