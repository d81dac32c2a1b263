"""CLI entry point for the Blockscript interpreter.

Usage:
    python -m blockscript [-v|-vv|-vvv] <program_file>
    python -m blockscript [-v...] --emit-statements <program_file>
    python -m blockscript [-v...] --statements <statements_json_file>

Options:
  -v                  Increase debug verbosity (can be repeated)
  --emit-statements   Parse the given program and write its statements as JSON
  --statements        Execute a previously emitted statements JSON file

Use `-` as the program file to read the source from stdin. Debug
information is written to `debug.txt` in the current directory when
verbosity is greater than zero. The rendered output goes to stdout and
each error to stderr; the exit status is 1 if any error was reported.
"""

import argparse
import json
import sys
from pathlib import Path

from .ast_json import ast_from_obj, ast_to_obj
from .interpreter import Interpreter
from .parser import parse_program
from .report import ConsoleSink


def read_source(name: str) -> str:
    if name == '-':
        return sys.stdin.read()
    path = Path(name)
    if not path.exists():
        print(f"Error: file {path} not found", file=sys.stderr)
        sys.exit(1)
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Blockscript interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-statements', metavar='PROGRAM_FILE', help='emit statements JSON for the given program')
    group.add_argument('--statements', metavar='JSON_FILE', help='execute statements from a JSON file')
    parser.add_argument('program', nargs='?', help="program file to execute ('-' for stdin)")
    args = parser.parse_args(argv)

    # Emit statements mode
    if args.emit_statements:
        program_file = Path(args.emit_statements)
        program = parse_program(read_source(args.emit_statements))
        obj = ast_to_obj(program)
        out_path = program_file.with_name(program_file.name + '.statements.json')
        with open(out_path, 'w', encoding='utf-8') as out:
            json.dump(obj, out, ensure_ascii=False, indent=2)
        print(str(out_path))
        return

    # Execute from statements JSON
    if args.statements:
        program = ast_from_obj(json.loads(read_source(args.statements)))
    else:
        if not args.program:
            parser.error('missing program file; or use --emit-statements/--statements')
        program = parse_program(read_source(args.program))

    with Interpreter(debug_level=args.v) as interpreter:
        result = interpreter.run(program, ConsoleSink())
    if not result.ok:
        sys.exit(1)


if __name__ == '__main__':
    main()
