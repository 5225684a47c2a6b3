"""CLI entry point for the Bella interpreter.

Usage:
    python -m bella [-v|-vv|-vvv] <program_file>
    python -m bella [-v...] --emit-ast <program_file>
    python -m bella [-v...] --ast <ast_json_file>

Options:
  -v            Increase debug verbosity (can be repeated)
  --emit-ast    Parse the given .bella file and emit an AST JSON file
  --ast         Execute a previously emitted AST JSON file

Debug information is written to `debug.txt` in the current directory when
verbosity is greater than zero. Any runtime error stops the program, is
reported on stderr, and makes the process exit with status 1.
"""

import argparse
import json
import sys
from pathlib import Path
from .interpreter import Interpreter
from .parser import parse_program, ParseError
from .ast import Program
from .ast_json import ast_to_obj, ast_from_obj
from .errors import BellaError

# Each Bella call costs a handful of Python frames; leave room for deep
# user recursion before RecursionError ends the program
RECURSION_LIMIT = 10000


def read_source(program_file: Path) -> str:
    if not program_file.exists():
        print(f"Error: file {program_file} not found", file=sys.stderr)
        sys.exit(1)
    with open(program_file, 'r', encoding='utf-8') as f:
        return f.read()


def parse_or_exit(source: str) -> Program:
    try:
        return parse_program(source)
    except ParseError as e:
        print(f"Syntax error: {e}", file=sys.stderr)
        sys.exit(1)


def execute_or_exit(ast_program: Program, debug_level: int) -> None:
    interpreter = Interpreter(debug_level=debug_level)
    try:
        interpreter.run(ast_program)
    except BellaError as e:
        print(f"Runtime error: {e}", file=sys.stderr)
        sys.exit(1)
    except RecursionError:
        print("Runtime error: maximum recursion depth exceeded", file=sys.stderr)
        sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Bella language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-ast', metavar='BELLA_FILE', help='emit AST JSON for the given .bella file')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    parser.add_argument('program', nargs='?', help='Bella program file (.bella) to execute')
    args = parser.parse_args(argv)
    sys.setrecursionlimit(max(sys.getrecursionlimit(), RECURSION_LIMIT))

    # Emit AST mode
    if args.emit_ast:
        program_file = Path(args.emit_ast)
        ast_program = parse_or_exit(read_source(program_file))
        obj = ast_to_obj(ast_program)
        out_path = program_file.with_name(program_file.name + '.ast.json')
        with open(out_path, 'w', encoding='utf-8') as out:
            json.dump(obj, out, ensure_ascii=False, indent=2)
        print(str(out_path))
        return

    # Execute from AST JSON
    if args.ast:
        ast_path = Path(args.ast)
        data = json.loads(read_source(ast_path))
        execute_or_exit(ast_from_obj(data), args.v)
        return

    # Default: execute source file
    if not args.program:
        parser.error('missing program file; or use --emit-ast/--ast')
    ast_program = parse_or_exit(read_source(Path(args.program)))
    execute_or_exit(ast_program, args.v)


if __name__ == '__main__':
    main()
