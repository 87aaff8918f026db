# Reference-model interpreter package
# A tree-walking interpreter for small Rust-like snippets with live references.
from .environment import Environment
from .errors import (
    RefModelError, NotFound, UndefinedRead, TypeMismatch, UnsupportedConstruct, ParseError,
)
from .interpreter import Interpreter, ReferenceModel, interpret, run_program, get_model
from .parser import parse_block, parse_snippet
from .values import Unit, Lit, Ref, Undefined, UNIT, UNDEFINED, to_string

__all__ = [
    'Environment',
    'RefModelError',
    'NotFound',
    'UndefinedRead',
    'TypeMismatch',
    'UnsupportedConstruct',
    'ParseError',
    'Interpreter',
    'ReferenceModel',
    'interpret',
    'run_program',
    'get_model',
    'parse_block',
    'parse_snippet',
    'Unit',
    'Lit',
    'Ref',
    'Undefined',
    'UNIT',
    'UNDEFINED',
    'to_string',
]
