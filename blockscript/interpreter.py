"""Interpreter for the Blockscript language.

The interpreter walks the statements of a parsed program in source order
and accumulates the text they produce. Declarations write to the variable
store, display statements render their template, and bare expressions
append the value of a chained arithmetic evaluation.

A failing statement never stops the run. Evaluators raise ScriptError;
the interpreter records the error against the current statement, puts an
absent value in place of the failed result (rendered as NULL) and moves
on. Once every statement has run, the output and the collected errors are
returned together and, when a report sink is given, handed to it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Union

from .arithmetic import evaluate_chained, evaluate_pairwise_typed
from .ast import DeclarationStmt, DisplayStmt, ExprStmt, Program, Statement
from .environment import VariableStore
from .errors import ErrorKind, ErrorRecord, ScriptError
from .parser import has_arithmetic_operator, parse_program, split_chain, split_template
from .report import ERROR_TITLE, OUTPUT_TITLE, ReportSink
from .types import ABSENT, IntVal, Value, coerce_literal, parse_int, to_string, type_name

LINE_BREAK = '\n'


@dataclass
class StatementResult:
    """Outcome of one statement: the text it emitted (if any) and its errors."""
    statement: Statement
    text: Optional[str] = None
    errors: List[ErrorRecord] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


@dataclass
class RunResult:
    output: str
    errors: List[ErrorRecord]
    statements: List[StatementResult]

    @property
    def ok(self) -> bool:
        return not self.errors


class Interpreter:
    """Executes Blockscript programs against a variable store.

    Each call to `run` starts from an empty store unless the interpreter was
    created with `keep_state=True`, in which case declarations accumulate
    across runs until `reset` is called.
    """
    def __init__(self, debug_level: int = 0, debug_file: str = 'debug.txt', keep_state: bool = False):
        self.store = VariableStore()
        self.keep_state = keep_state
        self.debug_level = debug_level
        self.debug_fp = open(debug_file, 'w', encoding='utf-8') if debug_level > 0 else None
        self.pending: List[ErrorRecord] = []

    def __enter__(self) -> 'Interpreter':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self):
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()
            else:
                print(msg)

    def reset(self):
        self.store.reset()
        self.pending = []
        if self.debug_level >= 2:
            self.debug("store reset")

    # Public API
    def run(self, program: Union[str, Program], sink: Optional[ReportSink] = None) -> RunResult:
        if isinstance(program, str):
            program = parse_program(program)
        if not self.keep_state:
            self.reset()
        results = [self.execute(stmt) for stmt in program.body]
        self.pending = []
        output = ''.join(r.text + LINE_BREAK for r in results if r.text is not None)
        errors = [err for r in results for err in r.errors]
        if sink is not None:
            for err in errors:
                sink.report(str(err), ERROR_TITLE)
            sink.report(output, OUTPUT_TITLE)
        return RunResult(output=output, errors=errors, statements=results)

    def execute(self, stmt: Statement) -> StatementResult:
        self.pending = []
        if self.debug_level >= 1:
            self.debug(f"line {stmt.line}: {type(stmt).__name__}: {stmt.source}")
        text = None
        if isinstance(stmt, DisplayStmt):
            text = self.render_display(stmt.template)
        elif isinstance(stmt, DeclarationStmt):
            self.declare(stmt)
        elif isinstance(stmt, ExprStmt):
            text = to_string(self.attempt(evaluate_chained, stmt.expression))
        else:
            raise TypeError(f"unexpected statement {stmt!r}")
        for err in self.pending:
            err.line = stmt.line
        return StatementResult(statement=stmt, text=text, errors=list(self.pending))

    def report_error(self, err: ErrorRecord):
        self.pending.append(err)
        if self.debug_level >= 1:
            self.debug(f"error {err.kind}: {err.message}")

    def attempt(self, fn: Callable[..., Value], *args: Any) -> Value:
        """Call an evaluator, turning a ScriptError into a recorded error and ABSENT."""
        try:
            return fn(*args)
        except ScriptError as e:
            self.report_error(e.err)
            return ABSENT

    # Declarations
    def declare(self, stmt: DeclarationStmt):
        words = stmt.words
        if len(words) < 3:
            self.report_error(ErrorRecord(
                ErrorKind.MALFORMED_DECLARATION, f'invalid variable declaration: {stmt.source}'))
            return
        type_word = words[0]
        i = 1
        while i < len(words):
            name = words[i]
            if i + 1 >= len(words):
                self.report_error(ErrorRecord(
                    ErrorKind.MALFORMED_DECLARATION, f'missing value for {name} in: {stmt.source}'))
                return
            literal = words[i + 1]
            # `lit + lit` doubles the literal through the chained evaluator.
            # The trigger is raw text equality of the two literal words.
            # The cursor then skips three words on top of the usual pair
            # stride, so the word right after the group is passed over.
            if i + 3 < len(words) and words[i + 2] == '+' and words[i + 3] == literal:
                value = self.attempt(evaluate_chained, literal + '+' + literal)
                i += 5
            else:
                value = self.attempt(coerce_literal, literal, type_word)
                i += 2
            self.store.declare(name, type_word, value)
            if self.debug_level >= 2:
                self.debug(f"declare {name}: {type_word} = {to_string(value)} ({type_name(value)})")

    # Display
    def render_display(self, template: str) -> str:
        return ''.join(self.render_segment(segment.strip()) for segment in split_template(template))

    def render_segment(self, segment: str) -> str:
        if self.debug_level >= 3:
            self.debug(f"segment {segment!r}")
        if segment.startswith('$'):
            return LINE_BREAK
        if segment.startswith('[') or segment.endswith(']'):
            return ''
        if segment in self.store:
            return to_string(self.store.get(segment))
        if has_arithmetic_operator(segment):
            return to_string(self.attempt(self.evaluate_segment, segment))
        return segment.replace('"', '')

    def evaluate_segment(self, segment: str) -> Value:
        """Evaluate the arithmetic in a display segment with typed pairwise arithmetic.

        A single `left op right` is the normal case. Longer chains are
        folded strictly left to right, one pair at a time.
        """
        operands, operators = split_chain(segment)
        failures = len(self.pending)
        values = [self.attempt(self.resolve_operand, operand) for operand in operands]
        if len(self.pending) > failures:
            return ABSENT
        result = values[0]
        for op, rhs in zip(operators, values[1:]):
            if self.debug_level >= 3:
                self.debug(f"  {result!r} {op} {rhs!r}")
            result = evaluate_pairwise_typed(op, result, rhs)
        return result

    def resolve_operand(self, token: str) -> Value:
        name = token.strip()
        for ch in '()"\'':
            name = name.replace(ch, '')
        name = name.strip()
        number = parse_int(name)
        if number is not None:
            return IntVal(number)
        if name in self.store:
            return self.store.get(name)
        raise ScriptError(ErrorRecord(ErrorKind.VARIABLE_NOT_FOUND, f'variable not found: {name}'))


def run_program(source: str, sink: Optional[ReportSink] = None, debug_level: int = 0) -> RunResult:
    """Convenience function to parse and run a Blockscript program from source string."""
    with Interpreter(debug_level=debug_level) as interpreter:
        return interpreter.run(source, sink)


def run_file(file_path: str, sink: Optional[ReportSink] = None, debug_level: int = 0) -> RunResult:
    """Read a Blockscript file and run it."""
    with open(file_path, 'r', encoding='utf-8') as f:
        source = f.read()
    return run_program(source, sink, debug_level)
