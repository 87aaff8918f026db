"""Tree-walking interpreters for reference-model snippets.

`Interpreter` is the interface every evaluation strategy implements: it
only has to know how to evaluate a parsed block against an environment.
Parsing, creating the environment and handing it back are shared.

`ReferenceModel` is the baseline strategy. It treats every binding as a
mutable place in one flat environment and every reference as a live
pointer-by-name, so a write through one alias is seen by every other alias
on its next read. Anything outside the small supported subset is rejected
with `UnsupportedConstruct`.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional, Type

from .ast import Assign, Block, Deref, ExprStmt, Ident, IdentPat, Literal, Local, Node, Reference
from .environment import Environment
from .errors import TypeMismatch, UnsupportedConstruct
from .parser import parse_block, parse_snippet
from .values import UNDEFINED, UNIT, Lit, Ref, Value, to_string

logger = logging.getLogger(__name__)


class Interpreter(ABC):
    """An evaluation strategy for parsed blocks."""

    @abstractmethod
    def eval_block(self, block: Block, env: Environment) -> None:
        """Evaluate every statement of `block` into `env`, in order."""

    def run(self, block: Block, env: Optional[Environment] = None) -> Environment:
        if env is None:
            env = Environment()
        self.eval_block(block, env)
        return env

    def interpret(self, source: str) -> Environment:
        """Parse a `{ ... }` block and evaluate it in a fresh environment.

        Either the whole block succeeds and the final environment is
        returned, or the first error is raised and no environment escapes.
        """
        block = parse_block(source)
        return self.run(block, Environment())


class ReferenceModel(Interpreter):
    """Dynamic evaluation with live references and a single flat store."""

    def eval_place(self, expr: Node, env: Environment) -> str:
        """Resolve a location expression to the name of the place it denotes."""
        if isinstance(expr, Ident):
            return expr.name
        if isinstance(expr, Deref):
            place = self.eval_place(expr.operand, env)
            value = env.lookup(place)
            if not isinstance(value, Ref):
                raise TypeMismatch(value)
            logger.debug("place *%s resolves to %s", place, value.place)
            return value.place
        raise UnsupportedConstruct(expr, 'location expression')

    def eval_expr(self, expr: Node, env: Environment) -> Value:
        if isinstance(expr, Literal):
            if expr.kind != 'int':
                raise UnsupportedConstruct(expr, f"{expr.kind} literal")
            return Lit(expr.text, expr.kind)
        if isinstance(expr, Ident):
            return env.lookup(expr.name)
        if isinstance(expr, Reference):
            # only a bare name can be borrowed; the referent is not read
            if not isinstance(expr.operand, Ident):
                raise UnsupportedConstruct(expr.operand, 'reference operand')
            return Ref(expr.operand.name)
        if isinstance(expr, Deref):
            place = self.eval_place(expr, env)
            return env.lookup(place)
        if isinstance(expr, Assign):
            place = self.eval_place(expr.target, env)
            value = self.eval_expr(expr.value, env)
            env.insert(place, value)
            logger.debug("assign %s = %s", place, to_string(value))
            return UNIT
        raise UnsupportedConstruct(expr, 'expression')

    def eval_stmt(self, stmt: Node, env: Environment) -> None:
        if isinstance(stmt, Local):
            if not isinstance(stmt.pattern, IdentPat):
                raise UnsupportedConstruct(stmt.pattern, 'pattern')
            if stmt.init is not None:
                value = self.eval_expr(stmt.init, env)
            else:
                value = UNDEFINED
            env.insert(stmt.pattern.name, value)
            logger.debug("let %s = %s", stmt.pattern.name, to_string(value))
            return
        if isinstance(stmt, ExprStmt):
            self.eval_expr(stmt.expr, env)
            return
        raise UnsupportedConstruct(stmt, 'statement')

    def eval_block(self, block: Block, env: Environment) -> None:
        logger.info("evaluating block of %d statements", len(block.statements))
        for stmt in block.statements:
            self.eval_stmt(stmt, env)
        logger.info("block finished with %d bindings", len(env))


MODELS: Dict[str, Type[Interpreter]] = {
    'reference': ReferenceModel,
}


def get_model(name: str) -> Interpreter:
    """Instantiate the evaluation strategy registered under `name`."""
    try:
        cls = MODELS[name]
    except KeyError:
        choices = ', '.join(sorted(MODELS))
        raise KeyError(f"unknown model {name!r} (choices: {choices})") from None
    return cls()


def interpret(source: str, model: Optional[Interpreter] = None) -> Environment:
    """Convenience function to evaluate a `{ ... }` block from source."""
    if model is None:
        model = ReferenceModel()
    return model.interpret(source)


def run_program(source: str, model: Optional[Interpreter] = None) -> Environment:
    """Evaluate bare statements (no surrounding braces) in a fresh environment."""
    if model is None:
        model = ReferenceModel()
    return model.run(parse_snippet(source))
