# Blockscript language package
# This package provides a line-oriented interpreter for the Blockscript language.
from .interpreter import run_program, run_file, Interpreter, RunResult, StatementResult
from .arithmetic import evaluate_chained, evaluate_pairwise_typed
from .errors import ErrorKind, ErrorRecord, ScriptError
from .parser import parse_program

__all__ = [
    'run_program',
    'run_file',
    'Interpreter',
    'RunResult',
    'StatementResult',
    'evaluate_chained',
    'evaluate_pairwise_typed',
    'ErrorKind',
    'ErrorRecord',
    'ScriptError',
    'parse_program',
]
