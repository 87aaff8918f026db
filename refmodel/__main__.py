"""CLI entry point for the reference-model interpreter.

Usage:
    python -m refmodel [-v|-vv] [--model NAME] <snippet_file>
    python -m refmodel [-v...] -c '<statements>'
    python -m refmodel --emit-ast <snippet_file>
    python -m refmodel [-v...] --ast <ast_json_file>

Options:
  -v            Increase log verbosity (-v for INFO, -vv for DEBUG)
  --debug-file  Write log output to the given file instead of stderr
  -c CODE       Evaluate CODE instead of reading a file
  --model NAME  Evaluation strategy to use (default: reference)
  --emit-ast    Parse the given snippet file and emit an AST JSON file
  --ast         Execute a previously emitted AST JSON file

A snippet file holds bare statements; they are evaluated as one block.
On success the final environment is printed, one `name ↦ value` line per
binding, sorted by name.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from .ast import Block
from .ast_json import ast_to_obj, ast_from_obj
from .errors import ParseError, RefModelError
from .interpreter import MODELS, get_model
from .parser import parse_snippet


def configure_logging(verbosity: int, debug_file: str | None = None) -> None:
    if verbosity <= 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        filename=debug_file,
        format='%(levelname)s %(name)s: %(message)s',
    )


def read_source(path: Path) -> str:
    if not path.exists():
        print(f"Error: file {path} not found", file=sys.stderr)
        sys.exit(1)
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Reference-model snippet interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase log verbosity (can be repeated)')
    parser.add_argument('--debug-file', metavar='PATH', help='write log output to PATH')
    parser.add_argument('--model', default='reference', choices=sorted(MODELS), help='evaluation strategy')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('-c', dest='code', metavar='CODE', help='statements to evaluate')
    group.add_argument('--emit-ast', metavar='SNIPPET_FILE', help='emit AST JSON for the given snippet file')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    parser.add_argument('program', nargs='?', help='snippet file to execute')
    args = parser.parse_args(argv)

    configure_logging(args.v, args.debug_file)

    # Emit AST mode
    if args.emit_ast:
        program_file = Path(args.emit_ast)
        source = read_source(program_file)
        try:
            block = parse_snippet(source)
        except ParseError as e:
            print(f"Syntax error: {e.message}", file=sys.stderr)
            sys.exit(1)
        out_path = program_file.with_name(program_file.name + '.ast.json')
        with open(out_path, 'w', encoding='utf-8') as out:
            json.dump(ast_to_obj(block), out, ensure_ascii=False, indent=2)
        print(str(out_path))
        return

    model = get_model(args.model)

    # Execute from AST JSON
    if args.ast:
        ast_path = Path(args.ast)
        try:
            block = ast_from_obj(json.loads(read_source(ast_path)))
            if not isinstance(block, Block):
                raise ValueError(f"expected a Block, got {type(block).__name__}")
        except (ValueError, KeyError, TypeError) as e:
            print(f"Error: invalid AST file {ast_path}: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        if args.code is not None:
            source = args.code
        elif args.program:
            source = read_source(Path(args.program))
        else:
            parser.error('missing snippet file; or use -c/--emit-ast/--ast')
        try:
            block = parse_snippet(source)
        except ParseError as e:
            print(f"Syntax error: {e.message}", file=sys.stderr)
            sys.exit(1)

    try:
        env = model.run(block)
    except RefModelError as e:
        print(f"Runtime error: {e}", file=sys.stderr)
        sys.exit(1)
    sys.stdout.write(str(env))


if __name__ == '__main__':
    main()
